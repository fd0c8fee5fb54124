import logging

from wms_core.core.common.models import SeasonalTrend
from wms_core.core.common.params.ForecastParams import ForecastParamsSchema
from wms_core.core.common.params.ParasCenter import ParasCenter
from wms_core.core.forecast.common.forecast_utils import month_name
from wms_core.infrastructure.store.base import AnalyticsStore

log = logging.getLogger(__name__)


class SeasonalTrendReporter:
    def __init__(self, store: AnalyticsStore, params: ForecastParamsSchema = None):
        self.store = store
        self.params = params or ParasCenter().forecast_params

    def trends(self, product_id: int) -> list[SeasonalTrend]:
        """
        按月份升序输出季节趋势。

        注意: average_demand 直接取 adjustment_factor 原值（并非真实需求量），
        这是已知的命名问题，为兼容下游保持原样。
        """
        patterns = sorted(self.store.list_seasonal_patterns(product_id), key=lambda p: p.month)
        log.debug(f"📈 产品 {product_id} 季节因子 {len(patterns)} 条")
        return [
            SeasonalTrend(
                month_name=month_name(p.month),
                average_demand=p.adjustment_factor,
                peak_factor=p.adjustment_factor / self.params.neutral_factor,
            )
            for p in patterns
        ]
