from .forecast_engine import ForecastEngine

__all__ = [
    "ForecastEngine"
]
