from enum import Enum


class PredictionMethod(str, Enum):
    MOVING_AVERAGE = "moving_average"
    LINEAR_REGRESSION = "linear_regression"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"
    WEIGHTED_AVERAGE = "weighted_average"
    MANUAL = "manual"

    @staticmethod
    def list_methods():
        return [m.value for m in PredictionMethod]


class PredictionAccuracy(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
