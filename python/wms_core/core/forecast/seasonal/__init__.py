from .trend_reporter import SeasonalTrendReporter

__all__ = [
    "SeasonalTrendReporter"
]
