"""
Incremental indicator computation for streaming data.

O(1) per-sample updates. Every indicator is primed from its first input,
so the first output is already valid.

Usage:
    from streamta.indicators.incremental import SMA, EMA

    sma = SMA(period=20, initial_value=first_close)
    ema = EMA(period=20, initial_value=first_close)

    # Then update incrementally in the live loop
    current_sma = sma.next(new_close)
    current_ema = ema.next(new_close)
"""

from __future__ import annotations

# Base class
from .base import Method

# Core indicators
from .core import (
    BandsOutput,
    SMA,
    EMA,
    RSI,
    BollingerBands,
)

# Lookback-based indicators
from .lookback import DonchianChannel

# Factory and utilities
from .factory import (
    create_method,
    supports_method,
    list_methods,
    valid_params,
    METHODS,
)

__all__ = [
    # Base
    "Method",
    # Core
    "BandsOutput",
    "SMA",
    "EMA",
    "RSI",
    "BollingerBands",
    # Lookback-based
    "DonchianChannel",
    # Factory and utilities
    "create_method",
    "supports_method",
    "list_methods",
    "valid_params",
    "METHODS",
]
