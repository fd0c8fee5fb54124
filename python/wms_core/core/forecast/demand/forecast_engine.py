import logging
import numbers

from wms_core.core.common.exceptions import InvalidArgumentError
from wms_core.core.common.models import ForecastPoint, ConfidenceInterval, SeasonalPattern
from wms_core.core.common.params.ForecastParams import ForecastParamsSchema
from wms_core.core.common.params.ParasCenter import ParasCenter
from wms_core.core.forecast.common.forecast_utils import (
    add_months,
    clamp_confidence,
    confidence_band,
    latest_record,
    to_month_label,
)
from wms_core.infrastructure.store.base import AnalyticsStore

log = logging.getLogger(__name__)


class ForecastEngine:
    """
    以最新一条预测记录为基线，叠加月度季节因子，向后推算 N 个月的需求及置信区间。
    """

    def __init__(self, store: AnalyticsStore, params: ForecastParamsSchema = None):
        self.store = store
        self.params = params or ParasCenter().forecast_params

    def forecast(self, product_id: int, months_ahead: int = None) -> list[ForecastPoint]:
        if months_ahead is None:
            months_ahead = self.params.default_months_ahead
        self._check_months_ahead(months_ahead)

        baseline = latest_record(self.store.list_predictions(product_id))
        if baseline is None:
            log.debug(f"ℹ️ 产品 {product_id} 无预测记录，返回空预测")
            return []

        confidence_level = clamp_confidence(baseline.confidence_level)
        if confidence_level != baseline.confidence_level:
            log.warning(
                f"⚠️ 产品 {product_id} 基线置信度越界 ({baseline.confidence_level})，已截断为 {confidence_level}"
            )

        factors = self._seasonal_factors(product_id)
        base_demand = baseline.predicted_demand

        points = []
        for i in range(1, int(months_ahead) + 1):
            forecast_date = add_months(baseline.generated_at, i)
            factor = factors.get(forecast_date.month)
            adjusted = base_demand if factor is None else base_demand * factor / self.params.neutral_factor
            lower, upper = confidence_band(adjusted, confidence_level)
            points.append(ForecastPoint(
                month_label=to_month_label(forecast_date),
                predicted_demand=adjusted,
                confidence_interval=ConfidenceInterval(lower=lower, upper=upper),
            ))

        log.debug(f"🔮 产品 {product_id} 预测 {months_ahead} 个月，基线需求 {base_demand}")
        return points

    def _seasonal_factors(self, product_id: int) -> dict[int, float]:
        """month → adjustment_factor；同月重复时取第一条"""
        factors: dict[int, float] = {}
        patterns: list[SeasonalPattern] = self.store.list_seasonal_patterns(product_id)
        for pattern in patterns:
            if pattern.month in factors:
                log.warning(f"⚠️ 产品 {product_id} 第 {pattern.month} 月存在重复季节因子，忽略 id={pattern.id}")
                continue
            factors[pattern.month] = pattern.adjustment_factor
        return factors

    @staticmethod
    def _check_months_ahead(months_ahead):
        if isinstance(months_ahead, bool) or not isinstance(months_ahead, numbers.Integral):
            raise InvalidArgumentError(f"months_ahead must be an integer, got {months_ahead!r}")
        if months_ahead < 1:
            raise InvalidArgumentError(f"months_ahead must be >= 1, got {months_ahead}")
