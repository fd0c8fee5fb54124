import threading
from datetime import datetime
from typing import Optional

from wms_core.core.common.models import PredictionRecord, SeasonalPattern
from wms_core.infrastructure.store.base import AnalyticsStore


class InMemoryAnalyticsStore(AnalyticsStore):
    """
    进程内存储：id 计数器与数据都归实例所有，不存在全局状态。
    适用于测试夹具和嵌入式场景；list_* 返回副本。
    """

    def __init__(self):
        self._predictions: dict[int, PredictionRecord] = {}
        self._patterns: dict[int, SeasonalPattern] = {}
        self._prediction_id = 1
        self._pattern_id = 1
        self._lock = threading.Lock()

    # ---------- 读接口 ----------
    def list_predictions(self, product_id: int) -> list[PredictionRecord]:
        with self._lock:
            rows = [r for r in self._predictions.values() if r.product_id == product_id]
        return sorted(rows, key=lambda r: r.generated_at)

    def list_seasonal_patterns(self, product_id: int) -> list[SeasonalPattern]:
        with self._lock:
            return [p for p in self._patterns.values() if p.product_id == product_id]

    # ---------- 预测记录 ----------
    def get_prediction(self, prediction_id: int) -> Optional[PredictionRecord]:
        with self._lock:
            return self._predictions.get(prediction_id)

    def create_prediction(self, record: PredictionRecord) -> PredictionRecord:
        with self._lock:
            new_record = record.model_copy(update={
                "id": self._prediction_id,
                "generated_at": record.generated_at or datetime.now(),
            })
            self._predictions[self._prediction_id] = new_record
            self._prediction_id += 1
        return new_record

    def update_prediction(self, prediction_id: int, **changes) -> Optional[PredictionRecord]:
        with self._lock:
            existing = self._predictions.get(prediction_id)
            if existing is None:
                return None
            changes.pop("id", None)
            updated = PredictionRecord.model_validate({**existing.model_dump(), **changes})
            self._predictions[prediction_id] = updated
        return updated

    def delete_prediction(self, prediction_id: int) -> bool:
        with self._lock:
            return self._predictions.pop(prediction_id, None) is not None

    # ---------- 季节因子 ----------
    def upsert_seasonal_pattern(self, pattern: SeasonalPattern) -> SeasonalPattern:
        with self._lock:
            existing = next(
                (p for p in self._patterns.values()
                 if p.product_id == pattern.product_id and p.month == pattern.month),
                None,
            )
            pattern_id = existing.id if existing else self._pattern_id
            stored = pattern.model_copy(update={"id": pattern_id})
            self._patterns[pattern_id] = stored
            if existing is None:
                self._pattern_id += 1
        return stored

    def delete_seasonal_pattern(self, pattern_id: int) -> bool:
        with self._lock:
            return self._patterns.pop(pattern_id, None) is not None
