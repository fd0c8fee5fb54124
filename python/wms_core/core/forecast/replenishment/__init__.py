from .optimizer import ReplenishmentOptimizer

__all__ = [
    "ReplenishmentOptimizer"
]
