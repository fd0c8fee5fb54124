from pydantic import BaseModel, Field


class ReplenishmentParamsSchema(BaseModel):
    lead_time_days: int = Field(default=14, ge=0, description="补货交期（天）")
    service_level: float = Field(default=0.95, gt=0, lt=1, description="目标服务水平，原样回传")
    service_factor: float = Field(default=1.645, ge=0, description="服务水平对应的 Z 值")

    # 需求记录按月聚合，交期按 30 天/月折算
    days_per_period: int = Field(default=30, gt=0, description="每个需求周期的天数")
    order_cover_periods: float = Field(default=2, ge=0, description="订货量覆盖的需求周期数")

    model_config = {
        "extra": "forbid"
    }

    @property
    def lead_time_ratio(self) -> float:
        return self.lead_time_days / self.days_per_period
