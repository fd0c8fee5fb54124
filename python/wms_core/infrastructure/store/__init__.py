from .base import AnalyticsStore
from .memory import InMemoryAnalyticsStore
from .sql import SqlAnalyticsStore

__all__ = [
    "AnalyticsStore",
    "InMemoryAnalyticsStore",
    "SqlAnalyticsStore"
]
