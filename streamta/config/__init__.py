"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    reset_config,
    BuildConfig,
    LogConfig,
)

from .constants import (
    VALUE_TYPES,
    PERIOD_TYPES,
    DEFAULT_VALUE_TYPE,
    DEFAULT_PERIOD_TYPE,
    validate_value_type,
    validate_period_type,
    parse_bool,
)

__all__ = [
    # Config classes
    "Config",
    "get_config",
    "reset_config",
    "BuildConfig",
    "LogConfig",
    # Build selection
    "VALUE_TYPES",
    "PERIOD_TYPES",
    "DEFAULT_VALUE_TYPE",
    "DEFAULT_PERIOD_TYPE",
    "validate_value_type",
    "validate_period_type",
    "parse_bool",
]
