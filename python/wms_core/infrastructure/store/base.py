import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union

from pydantic import ValidationError

from wms_core.core.common.models import PredictionRecord, SeasonalPattern

log = logging.getLogger(__name__)


class AnalyticsStore(ABC):
    """
    预测记录 + 季节因子的存储接口。

    引擎只依赖两个读接口（list_predictions / list_seasonal_patterns）；
    写接口供外部预测器、数据导入和测试夹具使用。
    """

    # ---------- 读接口（引擎使用） ----------
    @abstractmethod
    def list_predictions(self, product_id: int) -> list[PredictionRecord]:
        ...

    @abstractmethod
    def list_seasonal_patterns(self, product_id: int) -> list[SeasonalPattern]:
        ...

    # ---------- 预测记录 ----------
    @abstractmethod
    def get_prediction(self, prediction_id: int) -> Optional[PredictionRecord]:
        ...

    @abstractmethod
    def create_prediction(self, record: PredictionRecord) -> PredictionRecord:
        ...

    @abstractmethod
    def update_prediction(self, prediction_id: int, **changes) -> Optional[PredictionRecord]:
        ...

    @abstractmethod
    def delete_prediction(self, prediction_id: int) -> bool:
        ...

    # ---------- 季节因子 ----------
    @abstractmethod
    def upsert_seasonal_pattern(self, pattern: SeasonalPattern) -> SeasonalPattern:
        """同一 (product_id, month) 已存在则原地更新，否则新建"""
        ...

    @abstractmethod
    def delete_seasonal_pattern(self, pattern_id: int) -> bool:
        ...

    def import_seasonal_patterns(self, patterns: Iterable[Union[SeasonalPattern, dict]]) -> int:
        """
        批量导入季节因子（逐条 upsert）。

        参数:
            patterns: SeasonalPattern 或 dict 列表
        返回:
            int: 成功导入的条数；校验失败的条目跳过
        """
        count = 0
        for raw in patterns:
            try:
                pattern = raw if isinstance(raw, SeasonalPattern) else SeasonalPattern.model_validate(raw)
            except ValidationError as e:
                log.warning(f"⚠️ 跳过无效的季节因子 {raw}: {e.error_count()} 个校验错误")
                continue
            self.upsert_seasonal_pattern(pattern)
            count += 1
        log.info(f"📥 导入季节因子 {count} 条")
        return count
