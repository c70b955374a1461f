"""
Indicator Module: streaming indicator state machines.

Components:
- incremental: Method contract and the concrete indicators
- incremental.factory: type-string construction and registry queries
- spec: MethodSpec dynamic configuration (set from text, validate, init, over)

Usage:
    from streamta.indicators import SMA, MethodSpec

    sma = SMA(period=3, initial_value=10.0)
    sma.next(20.0)

    spec = MethodSpec("rsi", {"period": 14})
    rsi = spec.init(first_close)
"""

from .incremental import (
    Method,
    BandsOutput,
    SMA,
    EMA,
    RSI,
    BollingerBands,
    DonchianChannel,
    create_method,
    supports_method,
    list_methods,
    valid_params,
    METHODS,
)
from .spec import MethodSpec

__all__ = [
    "Method",
    "BandsOutput",
    "SMA",
    "EMA",
    "RSI",
    "BollingerBands",
    "DonchianChannel",
    "create_method",
    "supports_method",
    "list_methods",
    "valid_params",
    "METHODS",
    "MethodSpec",
]
