"""
Core numeric abstractions and error taxonomy.
"""

from .errors import (
    StreamTAError,
    InvalidParameter,
    ParameterParseError,
    UnknownMethodError,
)

from .types import (
    Value,
    Period,
    ValueType,
    PeriodType,
    ZERO,
    ONE,
    TWO,
    HUNDRED,
    NAN,
    POS_INF,
    NEG_INF,
    to_value,
    to_period,
    is_nan,
    is_finite,
    max_period,
    resolve_value_type,
    resolve_period_type,
)

__all__ = [
    # Errors
    "StreamTAError",
    "InvalidParameter",
    "ParameterParseError",
    "UnknownMethodError",
    # Value / Period
    "Value",
    "Period",
    "ValueType",
    "PeriodType",
    "ZERO",
    "ONE",
    "TWO",
    "HUNDRED",
    "NAN",
    "POS_INF",
    "NEG_INF",
    "to_value",
    "to_period",
    "is_nan",
    "is_finite",
    "max_period",
    "resolve_value_type",
    "resolve_period_type",
]
