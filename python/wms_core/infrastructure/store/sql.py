import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from wms_core.core.common.models import PredictionRecord, SeasonalPattern
from wms_core.core.common.params.enums import PredictionMethod, PredictionAccuracy
from wms_core.infrastructure.config import WMSConfig
from wms_core.infrastructure.db.models import InventoryPredictionRecord, SeasonalPatternRecord
from wms_core.infrastructure.store.base import AnalyticsStore
from wms_core.infrastructure.uow.unit_of_work import UnitOfWork

log = logging.getLogger(__name__)

# PredictionRecord 字段 → ORM 列
_PREDICTION_COLUMNS = {
    "product_id": "ProductId",
    "generated_at": "GeneratedAt",
    "method": "PredictionMethod",
    "predicted_demand": "PredictedDemand",
    "confidence_level": "ConfidenceLevel",
    "accuracy": "Accuracy",
    "predicted_stockout_date": "PredictedStockoutDate",
    "recommended_reorder_date": "RecommendedReorderDate",
    "recommended_quantity": "RecommendedQuantity",
    "notes": "Notes",
    "created_by": "CreatedBy",
}

_PATTERN_COLUMNS = {
    "product_id": "ProductId",
    "month": "Month",
    "adjustment_factor": "AdjustmentFactor",
    "notes": "Notes",
}


def _as_enum(enum_cls, value):
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        log.warning(f"⚠️ 未知的 {enum_cls.__name__} 取值: {value!r}")
        return value


class SqlAnalyticsStore(AnalyticsStore):
    """
    基于 SQLAlchemy ORM 的存储实现。

    - 读取时用 model_construct 还原记录，不再重新校验：历史脏数据（如置信度越界）
      由引擎侧容错处理，不让只读报表直接失败
    - 写入走 UnitOfWork（成功 commit / 异常 rollback）
    """

    def __init__(self, config: WMSConfig, session: Optional[Session] = None):
        self.config = config
        self._session = session

    # ---------- 读接口 ----------
    def list_predictions(self, product_id: int) -> list[PredictionRecord]:
        with UnitOfWork(self.config, self._session) as uow:
            rows = (
                uow.session.query(InventoryPredictionRecord)
                .filter(InventoryPredictionRecord.ProductId == product_id)
                .order_by(InventoryPredictionRecord.GeneratedAt, InventoryPredictionRecord.id)
                .all()
            )
            return [self._to_prediction(r) for r in rows]

    def list_seasonal_patterns(self, product_id: int) -> list[SeasonalPattern]:
        with UnitOfWork(self.config, self._session) as uow:
            rows = (
                uow.session.query(SeasonalPatternRecord)
                .filter(SeasonalPatternRecord.ProductId == product_id)
                .order_by(SeasonalPatternRecord.id)
                .all()
            )
            return [self._to_pattern(r) for r in rows]

    # ---------- 预测记录 ----------
    def get_prediction(self, prediction_id: int) -> Optional[PredictionRecord]:
        with UnitOfWork(self.config, self._session) as uow:
            row = uow.session.get(InventoryPredictionRecord, prediction_id)
            return self._to_prediction(row) if row else None

    def create_prediction(self, record: PredictionRecord) -> PredictionRecord:
        values = self._prediction_values(record)
        values["GeneratedAt"] = values.get("GeneratedAt") or datetime.now()
        with UnitOfWork(self.config, self._session) as uow:
            row = InventoryPredictionRecord(**values)
            uow.session.add(row)
            uow.session.flush()
            result = self._to_prediction(row)
        log.debug(f"💾 新建预测记录 id={result.id} product={result.product_id}")
        return result

    def update_prediction(self, prediction_id: int, **changes) -> Optional[PredictionRecord]:
        with UnitOfWork(self.config, self._session) as uow:
            row = uow.session.get(InventoryPredictionRecord, prediction_id)
            if row is None:
                return None
            changes.pop("id", None)
            merged = PredictionRecord.model_validate({**self._to_prediction(row).model_dump(), **changes})
            for key, value in self._prediction_values(merged).items():
                setattr(row, key, value)
            uow.session.flush()
            return self._to_prediction(row)

    def delete_prediction(self, prediction_id: int) -> bool:
        with UnitOfWork(self.config, self._session) as uow:
            row = uow.session.get(InventoryPredictionRecord, prediction_id)
            if row is None:
                return False
            uow.session.delete(row)
            return True

    # ---------- 季节因子 ----------
    def upsert_seasonal_pattern(self, pattern: SeasonalPattern) -> SeasonalPattern:
        values = {col: getattr(pattern, field) for field, col in _PATTERN_COLUMNS.items()}
        with UnitOfWork(self.config, self._session) as uow:
            row = (
                uow.session.query(SeasonalPatternRecord)
                .filter_by(ProductId=pattern.product_id, Month=pattern.month)
                .first()
            )
            if row is None:
                row = SeasonalPatternRecord(**values)
                uow.session.add(row)
            else:
                for key, value in values.items():
                    setattr(row, key, value)
            uow.session.flush()
            return self._to_pattern(row)

    def delete_seasonal_pattern(self, pattern_id: int) -> bool:
        with UnitOfWork(self.config, self._session) as uow:
            row = uow.session.get(SeasonalPatternRecord, pattern_id)
            if row is None:
                return False
            uow.session.delete(row)
            return True

    # ---------- 转换 ----------
    @staticmethod
    def _prediction_values(record: PredictionRecord) -> dict:
        values = {col: getattr(record, field) for field, col in _PREDICTION_COLUMNS.items()}
        for col in ("PredictionMethod", "Accuracy"):
            if hasattr(values[col], "value"):  # 是 Enum
                values[col] = values[col].value
        return values

    @staticmethod
    def _to_prediction(row: InventoryPredictionRecord) -> PredictionRecord:
        data = {field: getattr(row, col) for field, col in _PREDICTION_COLUMNS.items()}
        data["method"] = _as_enum(PredictionMethod, data["method"])
        data["accuracy"] = _as_enum(PredictionAccuracy, data["accuracy"])
        return PredictionRecord.model_construct(id=row.id, **data)

    @staticmethod
    def _to_pattern(row: SeasonalPatternRecord) -> SeasonalPattern:
        data = {field: getattr(row, col) for field, col in _PATTERN_COLUMNS.items()}
        return SeasonalPattern.model_construct(id=row.id, **data)
