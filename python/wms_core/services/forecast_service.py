import logging
from typing import Optional

from wms_core.core.common.exceptions import NoHistoricalDataError
from wms_core.core.common.models import ForecastPoint, SeasonalTrend, ReplenishmentParameters
from wms_core.core.common.params.ParasCenter import ParasCenter
from wms_core.core.forecast.demand import ForecastEngine
from wms_core.core.forecast.replenishment import ReplenishmentOptimizer
from wms_core.core.forecast.seasonal import SeasonalTrendReporter
from wms_core.infrastructure.store.base import AnalyticsStore

log = logging.getLogger(__name__)


class ProductForecastService:
    def __init__(
        self,
        engine: ForecastEngine,
        reporter: SeasonalTrendReporter,
        optimizer: ReplenishmentOptimizer
    ):
        self.engine = engine
        self.reporter = reporter
        self.optimizer = optimizer

    @classmethod
    def from_store(cls, store: AnalyticsStore, params: Optional[ParasCenter] = None) -> "ProductForecastService":
        params = params or ParasCenter()
        return cls(
            engine=ForecastEngine(store, params.forecast_params),
            reporter=SeasonalTrendReporter(store, params.forecast_params),
            optimizer=ReplenishmentOptimizer(store, params.replenishment_params),
        )

    def forecast(self, product_id: int, months_ahead: int = None) -> list[ForecastPoint]:
        return self.engine.forecast(product_id, months_ahead)

    def trends(self, product_id: int) -> list[SeasonalTrend]:
        return self.reporter.trends(product_id)

    def optimize(self, product_id: int) -> ReplenishmentParameters:
        return self.optimizer.optimize(product_id)

    def summary(self, product_id: int, months_ahead: int = None) -> dict:
        """
        汇总三项结果（驼峰字段名），供上层直接序列化。
        无历史数据时 optimization 为 None（上层映射为“数据不足”）。
        """
        try:
            optimization = self.optimize(product_id).to_dict()
        except NoHistoricalDataError as e:
            log.info(f"ℹ️ {e}")
            optimization = None

        return {
            "productId": product_id,
            "forecast": [p.to_dict() for p in self.forecast(product_id, months_ahead)],
            "seasonalTrends": [t.to_dict() for t in self.trends(product_id)],
            "optimization": optimization,
        }
