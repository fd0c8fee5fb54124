from .base import Base

# === 需求预测 / 季节因子 ===
from .prediction import InventoryPredictionRecord, SeasonalPatternRecord

__all__ = [
    "Base",
    "InventoryPredictionRecord",
    "SeasonalPatternRecord",
]
