"""
Value and Period abstraction.

Value is the numeric scalar every window and indicator computes with;
Period is the window length. Both are numpy scalar types picked once at
import time from BuildConfig:

    STREAMTA_VALUE_TYPE   f32 | f64              (default f64)
    STREAMTA_PERIOD_TYPE  u8 | u16 | u32 | u64   (default u64)

Code above this module never assumes a width. Constants are exported
already converted to ValueType so arithmetic stays in one precision
(no float32 -> float64 widening between calls).

NaN is the "undefined" sentinel and flows through arithmetic unchanged.
"""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any, Union

import numpy as np

from ..config import get_config
from .errors import InvalidParameter

_VALUE_TYPES: dict[str, type[np.floating]] = {
    "f32": np.float32,
    "f64": np.float64,
}

_PERIOD_TYPES: dict[str, type[np.unsignedinteger]] = {
    "u8": np.uint8,
    "u16": np.uint16,
    "u32": np.uint32,
    "u64": np.uint64,
}


def resolve_value_type(name: str) -> type[np.floating]:
    """Map a precision name ("f32", "f64") to its numpy scalar type."""
    try:
        return _VALUE_TYPES[name.strip().lower()]
    except KeyError:
        raise InvalidParameter(
            "value_type", name, f"must be one of {sorted(_VALUE_TYPES)}"
        ) from None


def resolve_period_type(name: str) -> type[np.unsignedinteger]:
    """Map a width name ("u8" .. "u64") to its numpy scalar type."""
    try:
        return _PERIOD_TYPES[name.strip().lower()]
    except KeyError:
        raise InvalidParameter(
            "period_type", name, f"must be one of {sorted(_PERIOD_TYPES)}"
        ) from None


_build = get_config().build

ValueType = resolve_value_type(_build.value_type)
PeriodType = resolve_period_type(_build.period_type)

# Annotation aliases; the concrete classes are ValueType / PeriodType
Value = Union[np.float32, np.float64]
Period = Union[np.uint8, np.uint16, np.uint32, np.uint64]

ZERO = ValueType(0)
ONE = ValueType(1)
TWO = ValueType(2)
HUNDRED = ValueType(100)
NAN = ValueType(np.nan)
POS_INF = ValueType(np.inf)
NEG_INF = ValueType(-np.inf)

_MAX_PERIOD = int(np.iinfo(PeriodType).max)


def to_value(x: Any) -> Value:
    """Convert a real number to the configured Value type."""
    return ValueType(x)


def is_nan(x: Any) -> bool:
    """NaN test that works for every Value width."""
    return x != x


def is_finite(x: Any) -> bool:
    return math.isfinite(x)


def max_period() -> int:
    """Largest window length the configured Period width can represent."""
    return _MAX_PERIOD


def to_period(n: Any, name: str = "period") -> Period:
    """
    Validate and convert a window length.

    Args:
        n: Requested window length (any integral number).
        name: Parameter name used in the error message.

    Returns:
        n as PeriodType.

    Raises:
        InvalidParameter: If n is not an integer, is < 1, or does not fit
            the configured period width.
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, Integral):
        raise InvalidParameter(
            name, n, "must be an integer",
            fix=f"{name}=20",
        )
    if n < 1:
        raise InvalidParameter(
            name, n, "must be >= 1",
            fix=f"{name}=20",
        )
    if n > _MAX_PERIOD:
        raise InvalidParameter(
            name, n,
            f"must be <= {_MAX_PERIOD} for period type '{_build.period_type}'",
            fix="set STREAMTA_PERIOD_TYPE to a wider type (e.g. u64)",
        )
    return PeriodType(n)
