from wms_core.core.common.params.ForecastParams import ForecastParamsSchema
from wms_core.core.common.params.ReplenishmentParams import ReplenishmentParamsSchema
import yaml
from typing import Optional


class ParasCenter:
    def __init__(self, config_dict: Optional[dict] = None):
        config = config_dict or {}

        self.forecast_params = ForecastParamsSchema(**(config.get("ForecastParams") or {}))
        self.replenishment_params = ReplenishmentParamsSchema(**(config.get("ReplenishmentParams") or {}))

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ParasCenter":
        with open(yaml_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
        return cls(config_dict=config)

    def to_dict(self) -> dict:
        return {
            "ForecastParams": self.forecast_params.model_dump(),
            "ReplenishmentParams": self.replenishment_params.model_dump(),
        }
