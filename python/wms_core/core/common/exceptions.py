class WMSCoreError(Exception):
    """wms_core 所有业务异常的基类"""


class NoHistoricalDataError(WMSCoreError, LookupError):
    """产品没有任何预测记录，无法计算补货参数"""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"No historical data available for optimization (product {product_id})")


class InvalidArgumentError(WMSCoreError, ValueError):
    """调用参数不合法（如 months_ahead < 1）"""
