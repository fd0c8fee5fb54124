from .enums import PredictionMethod, PredictionAccuracy, MONTH_NAMES
from .ForecastParams import ForecastParamsSchema
from .ReplenishmentParams import ReplenishmentParamsSchema
from .ParasCenter import ParasCenter

__all__ = [
    "PredictionMethod",
    "PredictionAccuracy",
    "MONTH_NAMES",
    "ForecastParamsSchema",
    "ReplenishmentParamsSchema",
    "ParasCenter"
]
