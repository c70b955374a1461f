"""
Centralized constants for build-time selection.

Value precision, period width and the window implementation are chosen
once, when streamta is first imported. They are not switchable at runtime.
"""

from typing import List


# ==================== Value Precision ====================

# f32 -> numpy.float32, f64 -> numpy.float64
VALUE_TYPES: List[str] = ["f32", "f64"]
DEFAULT_VALUE_TYPE = "f64"


# ==================== Period Width ====================

# Narrower widths cap the largest window in exchange for smaller state
PERIOD_TYPES: List[str] = ["u8", "u16", "u32", "u64"]
DEFAULT_PERIOD_TYPE = "u64"


# ==================== Window Implementation ====================

DEFAULT_UNSAFE_PERFORMANCE = False

_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off", "")


def validate_value_type(name: str) -> str:
    """
    Validate and normalize a value precision name.

    Args:
        name: Precision name (e.g., "f64", "F32")

    Returns:
        Normalized lowercase name

    Raises:
        ValueError: If name is not one of VALUE_TYPES
    """
    normalized = name.strip().lower()
    if normalized not in VALUE_TYPES:
        raise ValueError(
            f"Invalid value type: '{name}'. Must be one of {VALUE_TYPES}"
        )
    return normalized


def validate_period_type(name: str) -> str:
    """
    Validate and normalize a period width name.

    Raises:
        ValueError: If name is not one of PERIOD_TYPES
    """
    normalized = name.strip().lower()
    if normalized not in PERIOD_TYPES:
        raise ValueError(
            f"Invalid period type: '{name}'. Must be one of {PERIOD_TYPES}"
        )
    return normalized


def parse_bool(text: str) -> bool:
    """Parse an environment flag ("true", "1", "yes", "on" and their negatives)."""
    normalized = text.strip().lower()
    if normalized in _TRUE_STRINGS:
        return True
    if normalized in _FALSE_STRINGS:
        return False
    raise ValueError(
        f"Invalid boolean flag: '{text}'. "
        f"Use one of {list(_TRUE_STRINGS)} or {list(_FALSE_STRINGS[:-1])}"
    )
