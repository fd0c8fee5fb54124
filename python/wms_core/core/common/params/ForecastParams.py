from pydantic import BaseModel, Field


class ForecastParamsSchema(BaseModel):
    default_months_ahead: int = Field(default=6, ge=1, description="默认预测月数")
    neutral_factor: float = Field(default=100, gt=0, description="季节因子的中性值（100 = 不调整）")

    model_config = {
        "extra": "forbid"  # 禁止 YAML 中意外字段
    }
