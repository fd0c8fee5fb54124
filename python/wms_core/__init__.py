"""Demand forecast, seasonal trend and replenishment engine for warehouse SKUs."""

__version__ = "0.1.0"
