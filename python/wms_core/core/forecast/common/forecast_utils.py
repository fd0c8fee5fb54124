import math
from datetime import datetime

import numpy as np
import pandas as pd

from wms_core.core.common.params.enums import MONTH_NAMES


def clamp_confidence(confidence_level) -> float:
    """
    置信度百分比截断到 [0, 100]。
    历史数据中可能存在越界值，这里只做截断，不报错。
    """
    if confidence_level is None or pd.isna(confidence_level):
        return 0.0
    return float(min(max(confidence_level, 0.0), 100.0))


def add_months(date, months: int) -> pd.Timestamp:
    """
    按日历加月（跨年自动进位，月末自动截断）

    示例:
        2024-11-15 + 3 → 2025-02-15
        2024-01-31 + 1 → 2024-02-29
    """
    return pd.Timestamp(date) + pd.DateOffset(months=months)


def to_month_label(date) -> str:
    """datetime → 'YYYY-MM'"""
    return pd.Timestamp(date).strftime("%Y-%m")


def month_name(month: int) -> str:
    if isinstance(month, (int, np.integer)) and 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return f"Month {month}"


def confidence_band(demand: float, confidence_level) -> tuple[int, int]:
    """
    根据置信度计算上下界：margin = (1 - confidence) / 2
    下界向下取整，上界向上取整。

    在百分比空间计算，整数输入可得到精确的整数边界（100 @ 80% → 90 / 110）。
    """
    margin_pct = (100.0 - clamp_confidence(confidence_level)) / 2
    lower = math.floor(demand * (100.0 - margin_pct) / 100.0)
    upper = math.ceil(demand * (100.0 + margin_pct) / 100.0)
    return lower, upper


def demand_stats(demands) -> tuple[float, float]:
    """返回 (均值, 总体标准差 ddof=0)"""
    arr = np.asarray(demands, dtype=float)
    if arr.size == 0:
        return 0.0, 0.0
    return float(np.mean(arr)), float(np.std(arr, ddof=0))


def latest_record(records):
    """generated_at 最大的记录；时间相同时取先出现的一条"""
    latest = None
    for record in records:
        if latest is None or _as_timestamp(record.generated_at) > _as_timestamp(latest.generated_at):
            latest = record
    return latest


def _as_timestamp(value) -> pd.Timestamp:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return pd.Timestamp(value)
