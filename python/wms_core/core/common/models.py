"""
预测 / 季节因子 / 补货参数的数据模型。

- PredictionRecord、SeasonalPattern：持久化记录，构造时校验取值范围
- ForecastPoint、SeasonalTrend、ReplenishmentParameters：每次调用重新计算，不缓存

派生结果通过 to_dict() 输出驼峰字段名（monthLabel、safetyStock ...），供上层接口直接序列化。
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from wms_core.core.common.params.enums import PredictionMethod, PredictionAccuracy


class PredictionRecord(BaseModel):
    id: Optional[int] = None
    product_id: int
    generated_at: datetime = Field(default_factory=datetime.now)
    method: PredictionMethod = PredictionMethod.MOVING_AVERAGE
    predicted_demand: float = Field(ge=0, description="预测需求量（件/月）")
    confidence_level: float = Field(default=70, ge=0, le=100, description="置信度百分比")
    accuracy: PredictionAccuracy = PredictionAccuracy.MEDIUM
    predicted_stockout_date: Optional[datetime] = None
    recommended_reorder_date: Optional[datetime] = None
    recommended_quantity: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None
    created_by: Optional[int] = None

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("generated_at", "predicted_stockout_date", "recommended_reorder_date")
    @classmethod
    def normalize_datetimes(cls, value):
        # 统一为本地无时区时间，与 datetime.now() 默认值一致
        if value is not None and value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


class SeasonalPattern(BaseModel):
    id: Optional[int] = None
    product_id: int
    month: int = Field(ge=1, le=12)
    adjustment_factor: float = Field(default=100, ge=0, description="百分比：100 = 正常，120 = 高 20%")
    notes: Optional[str] = None

    model_config = ConfigDict(validate_assignment=True)


class _DerivedModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class ConfidenceInterval(_DerivedModel):
    lower: int
    upper: int


class ForecastPoint(_DerivedModel):
    month_label: str
    predicted_demand: float
    confidence_interval: ConfidenceInterval


class SeasonalTrend(_DerivedModel):
    month_name: str
    # NOTE: 历史遗留命名——取值为原始 adjustment_factor，并非真实需求量。
    # 下游已依赖该数值，改名/改值前需与业务方确认。
    average_demand: float
    peak_factor: float


class ReplenishmentParameters(_DerivedModel):
    optimal_stock_level: float
    reorder_point: float
    safety_stock: float
    lead_time_demand: float
    service_level: float
