"""
Pytest fixtures for forecast / replenishment tests.
"""
from datetime import datetime

import pytest

from wms_core.core.common.models import PredictionRecord, SeasonalPattern
from wms_core.core.common.params.ParasCenter import ParasCenter
from wms_core.infrastructure.config import WMSConfig
from wms_core.infrastructure.db.init_db import init_db
from wms_core.infrastructure.store.memory import InMemoryAnalyticsStore
from wms_core.infrastructure.store.sql import SqlAnalyticsStore
from wms_core.services.forecast_service import ProductForecastService

PRODUCT_ID = 42


def make_record(
    predicted_demand: float = 100,
    generated_at: datetime = datetime(2024, 1, 15),
    confidence_level: float = 80,
    product_id: int = PRODUCT_ID,
    **extra
) -> PredictionRecord:
    """Build a validated PredictionRecord with sensible defaults."""
    return PredictionRecord(
        product_id=product_id,
        generated_at=generated_at,
        predicted_demand=predicted_demand,
        confidence_level=confidence_level,
        **extra
    )


def make_dirty_record(confidence_level: float, predicted_demand: float = 100,
                      generated_at: datetime = datetime(2024, 1, 15)) -> PredictionRecord:
    """
    Build a record that bypasses validation, the way stale rows come back
    from storage (e.g. confidence_level outside 0..100).
    """
    return PredictionRecord.model_construct(
        product_id=PRODUCT_ID,
        generated_at=generated_at,
        predicted_demand=predicted_demand,
        confidence_level=confidence_level,
    )


def make_pattern(month: int, adjustment_factor: float, product_id: int = PRODUCT_ID) -> SeasonalPattern:
    return SeasonalPattern(product_id=product_id, month=month, adjustment_factor=adjustment_factor)


def add_raw_pattern(store: InMemoryAnalyticsStore, pattern: SeasonalPattern) -> SeasonalPattern:
    """
    Write a pattern straight into an in-memory store, skipping the
    (product_id, month) upsert. Simulates duplicate rows left by old data.
    """
    with store._lock:
        pattern_id = store._pattern_id
        stored = pattern.model_copy(update={"id": pattern_id})
        store._patterns[pattern_id] = stored
        store._pattern_id += 1
    return stored


@pytest.fixture
def memory_store():
    """Provide an empty in-memory store."""
    return InMemoryAnalyticsStore()


@pytest.fixture
def sql_config():
    """Provide an in-memory SQLite config with all tables created."""
    config = WMSConfig(in_memory=True)
    init_db(config)
    return config


@pytest.fixture
def sql_store(sql_config):
    return SqlAnalyticsStore(sql_config)


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Run the same test against both store implementations."""
    if request.param == "memory":
        return InMemoryAnalyticsStore()
    config = WMSConfig(in_memory=True)
    init_db(config)
    return SqlAnalyticsStore(config)


@pytest.fixture
def service(memory_store):
    return ProductForecastService.from_store(memory_store, ParasCenter())
