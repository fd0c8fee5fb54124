"""
Tests for ReplenishmentOptimizer.optimize().
"""
import math
from datetime import datetime

import pytest

from wms_core.core.common.exceptions import NoHistoricalDataError, WMSCoreError
from wms_core.core.common.params.ReplenishmentParams import ReplenishmentParamsSchema
from wms_core.core.forecast.replenishment import ReplenishmentOptimizer

from conftest import PRODUCT_ID, make_record


def seed(store, demands):
    for i, demand in enumerate(demands):
        store.create_prediction(make_record(demand, datetime(2024, 1 + i, 1)))


class TestNoHistory:

    def test_raises_without_records(self, store):
        with pytest.raises(NoHistoricalDataError) as exc_info:
            ReplenishmentOptimizer(store).optimize(PRODUCT_ID)
        assert exc_info.value.product_id == PRODUCT_ID

    def test_error_hierarchy(self):
        assert issubclass(NoHistoricalDataError, WMSCoreError)
        assert issubclass(NoHistoricalDataError, LookupError)


class TestOptimize:

    def test_reference_history(self, store):
        seed(store, [80, 100, 120])
        result = ReplenishmentOptimizer(store).optimize(PRODUCT_ID)

        std_dev = math.sqrt(800 / 3)
        assert std_dev == pytest.approx(16.33, abs=0.01)
        assert result.lead_time_demand == pytest.approx(100 * 14 / 30)
        assert result.lead_time_demand == pytest.approx(46.67, abs=0.01)
        assert result.safety_stock == pytest.approx(1.645 * std_dev * math.sqrt(14 / 30))
        assert result.safety_stock == pytest.approx(18.35, abs=0.01)
        assert result.reorder_point == pytest.approx(65.02, abs=0.01)
        assert result.optimal_stock_level == pytest.approx(265.02, abs=0.01)
        assert result.service_level == 0.95

    def test_single_record_has_no_safety_stock(self, store):
        seed(store, [90])
        result = ReplenishmentOptimizer(store).optimize(PRODUCT_ID)

        assert result.safety_stock == 0
        assert result.reorder_point == result.lead_time_demand
        assert result.optimal_stock_level == pytest.approx(result.lead_time_demand + 180)

    def test_constant_history_has_no_safety_stock(self, memory_store):
        seed(memory_store, [50, 50, 50, 50])
        result = ReplenishmentOptimizer(memory_store).optimize(PRODUCT_ID)
        assert result.safety_stock == 0
        assert result.reorder_point == result.lead_time_demand

    def test_uses_whole_history_not_latest(self, memory_store):
        seed(memory_store, [10, 190])
        result = ReplenishmentOptimizer(memory_store).optimize(PRODUCT_ID)
        # mean 100, population std 90
        assert result.lead_time_demand == pytest.approx(100 * 14 / 30)
        assert result.safety_stock == pytest.approx(1.645 * 90 * math.sqrt(14 / 30))

    def test_optimize_is_idempotent(self, store):
        seed(store, [80, 100, 120])
        optimizer = ReplenishmentOptimizer(store)
        assert optimizer.optimize(PRODUCT_ID) == optimizer.optimize(PRODUCT_ID)

    def test_to_dict_uses_external_names(self, memory_store):
        seed(memory_store, [100])
        result = ReplenishmentOptimizer(memory_store).optimize(PRODUCT_ID).to_dict()
        assert set(result) == {
            "optimalStockLevel", "reorderPoint", "safetyStock", "leadTimeDemand", "serviceLevel",
        }

    def test_custom_policy(self, memory_store):
        seed(memory_store, [80, 100, 120])
        params = ReplenishmentParamsSchema(lead_time_days=30, service_level=0.99,
                                           service_factor=2.326, order_cover_periods=1)
        result = ReplenishmentOptimizer(memory_store, params).optimize(PRODUCT_ID)

        assert result.lead_time_demand == pytest.approx(100)
        assert result.safety_stock == pytest.approx(2.326 * math.sqrt(800 / 3))
        assert result.optimal_stock_level == pytest.approx(result.reorder_point + 100)
        assert result.service_level == 0.99
