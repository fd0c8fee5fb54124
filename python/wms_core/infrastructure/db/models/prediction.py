from sqlalchemy import Column, String, Integer, Float, DateTime, Text, UniqueConstraint, func
from wms_core.infrastructure.db.models.base import Base


class InventoryPredictionRecord(Base):
    __tablename__ = "INVENTORY_PREDICTION"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ProductId = Column(Integer, nullable=False, index=True)
    GeneratedAt = Column(DateTime, nullable=False, server_default=func.now())
    PredictionMethod = Column(String, nullable=False, default="moving_average")
    PredictedDemand = Column(Float, nullable=False)
    ConfidenceLevel = Column(Float, nullable=False, default=70)
    Accuracy = Column(String, default="medium")
    PredictedStockoutDate = Column(DateTime)
    RecommendedReorderDate = Column(DateTime)
    RecommendedQuantity = Column(Float)
    Notes = Column(Text)
    CreatedBy = Column(Integer)
    UpdatedAt = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())


class SeasonalPatternRecord(Base):
    __tablename__ = "SEASONAL_PATTERN"
    __table_args__ = (
        UniqueConstraint("ProductId", "Month", name="uq_seasonal_product_month"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    ProductId = Column(Integer, nullable=False, index=True)
    Month = Column(Integer, nullable=False)  # 1-12
    AdjustmentFactor = Column(Float, nullable=False, default=100)  # 百分比：100 = 正常
    Notes = Column(Text)
    UpdatedAt = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
