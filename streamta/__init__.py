"""
streamta: streaming technical indicators with O(1) updates.

Build-time selection (read once, on first import):
    STREAMTA_VALUE_TYPE          f32 | f64            (default f64)
    STREAMTA_PERIOD_TYPE         u8 | u16 | u32 | u64 (default u64)
    STREAMTA_UNSAFE_PERFORMANCE  true | false         (default false)
"""

from .core import (
    StreamTAError,
    InvalidParameter,
    ParameterParseError,
    UnknownMethodError,
    ValueType,
    PeriodType,
    to_value,
    to_period,
)
from .structures import SlidingWindow, UnsafeSlidingWindow, Window
from .indicators import (
    Method,
    BandsOutput,
    SMA,
    EMA,
    RSI,
    BollingerBands,
    DonchianChannel,
    MethodSpec,
    create_method,
    list_methods,
)

__version__ = "0.1.0"

__all__ = [
    "StreamTAError",
    "InvalidParameter",
    "ParameterParseError",
    "UnknownMethodError",
    "ValueType",
    "PeriodType",
    "to_value",
    "to_period",
    "SlidingWindow",
    "UnsafeSlidingWindow",
    "Window",
    "Method",
    "BandsOutput",
    "SMA",
    "EMA",
    "RSI",
    "BollingerBands",
    "DonchianChannel",
    "MethodSpec",
    "create_method",
    "list_methods",
]
