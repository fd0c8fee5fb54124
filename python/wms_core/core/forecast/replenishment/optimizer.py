import logging

import numpy as np

from wms_core.core.common.exceptions import NoHistoricalDataError
from wms_core.core.common.models import ReplenishmentParameters
from wms_core.core.common.params.ParasCenter import ParasCenter
from wms_core.core.common.params.ReplenishmentParams import ReplenishmentParamsSchema
from wms_core.core.forecast.common.forecast_utils import demand_stats
from wms_core.infrastructure.store.base import AnalyticsStore

log = logging.getLogger(__name__)


class ReplenishmentOptimizer:
    """
    基于全部历史预测记录的方差，计算安全库存 / 再订货点 / 最优库存水平。

    预测记录视为月度需求：
        safety_stock      = Z × σ × sqrt(lead_time_days / 30)
        lead_time_demand  = μ × (lead_time_days / 30)
        reorder_point     = lead_time_demand + safety_stock
        optimal_stock     = reorder_point + μ × 2

    sqrt(lead_time_days / 30) 把月度标准差折算到交期窗口，属于简化处理；
    是否应改为标准公式需业务方确认，此处保持原样。
    """

    def __init__(self, store: AnalyticsStore, params: ReplenishmentParamsSchema = None):
        self.store = store
        self.params = params or ParasCenter().replenishment_params

    def optimize(self, product_id: int) -> ReplenishmentParameters:
        records = self.store.list_predictions(product_id)
        if not records:
            raise NoHistoricalDataError(product_id)

        avg_demand, std_dev = demand_stats([r.predicted_demand for r in records])

        p = self.params
        safety_stock = p.service_factor * std_dev * np.sqrt(p.lead_time_ratio)
        lead_time_demand = avg_demand * p.lead_time_ratio
        reorder_point = lead_time_demand + safety_stock
        optimal_stock_level = reorder_point + avg_demand * p.order_cover_periods

        log.debug(
            f"📦 产品 {product_id}: 记录 {len(records)} 条, μ={avg_demand:.2f}, σ={std_dev:.2f}, "
            f"SS={safety_stock:.2f}, ROP={reorder_point:.2f}"
        )
        return ReplenishmentParameters(
            optimal_stock_level=float(optimal_stock_level),
            reorder_point=float(reorder_point),
            safety_stock=float(safety_stock),
            lead_time_demand=float(lead_time_demand),
            service_level=p.service_level,
        )
