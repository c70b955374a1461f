"""
Factory and registry for incremental indicators.

Provides create_method() to instantiate any indicator from a type string,
a parameter dict and a first input, plus registry query functions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ...core.errors import InvalidParameter, UnknownMethodError
from ...structures import SlidingWindow
from ...utils.helpers import parse_float, parse_int
from .base import Method
from .core import SMA, EMA, RSI, BollingerBands
from .lookback import DonchianChannel


METHODS: dict[str, type[Method]] = {
    "sma": SMA,
    "ema": EMA,
    "rsi": RSI,
    "bbands": BollingerBands,
    "donchian": DonchianChannel,
}


_VALID_PARAMS: dict[str, frozenset[str]] = {
    "sma": frozenset({"period"}),
    "ema": frozenset({"period", "alpha"}),
    "rsi": frozenset({"period"}),
    "bbands": frozenset({"period", "num_std_dev"}),
    "donchian": frozenset({"period"}),
}

# Parser for each parameter when it arrives as text
PARAM_PARSERS: dict[str, Callable[[str, Any], Any]] = {
    "period": parse_int,
    "alpha": parse_float,
    "num_std_dev": parse_float,
}


def _ema(p: dict[str, Any], initial_value: float, _window_type: Any) -> EMA:
    if "alpha" in p:
        return EMA(p.get("period"), initial_value, alpha=p["alpha"])
    return EMA(p.get("period", 20), initial_value)


# Each entry maps indicator type to callable(params, initial_value, window_type)
_FACTORY: dict[str, Callable[[dict[str, Any], float, Any], Method]] = {
    "sma": lambda p, v, w: SMA(p.get("period", 20), v, window_type=w),
    "ema": _ema,
    "rsi": lambda p, v, w: RSI(p.get("period", 14), v, window_type=w),
    "bbands": lambda p, v, w: BollingerBands(
        p.get("period", 20), v, num_std_dev=p.get("num_std_dev", 2.0), window_type=w
    ),
    "donchian": lambda p, v, w: DonchianChannel(p.get("period", 20), v, window_type=w),
}


def normalize_method_type(method_type: str) -> str:
    """
    Lowercase and check an indicator type.

    Raises:
        UnknownMethodError: If the type is not registered.
    """
    normalized = method_type.strip().lower()
    if normalized not in _FACTORY:
        raise UnknownMethodError(method_type, list_methods())
    return normalized


def validate_param_names(method_type: str, params: dict[str, Any]) -> None:
    """Raise InvalidParameter if params contains unknown keys for this indicator."""
    valid = _VALID_PARAMS[method_type]
    unknown = set(params.keys()) - valid
    if unknown:
        name = sorted(unknown)[0]
        raise InvalidParameter(
            name,
            params[name],
            f"is not a parameter of '{method_type}'",
            fix=f"valid parameters: {sorted(valid)}",
        )


def valid_params(method_type: str) -> frozenset[str]:
    """Parameter names accepted by an indicator type."""
    return _VALID_PARAMS[normalize_method_type(method_type)]


def create_method(
    method_type: str,
    params: dict[str, Any],
    initial_value: float,
    window_type: type[SlidingWindow] | None = None,
) -> Method:
    """
    Create and prime an indicator from type, params and its first input.

    Raises:
        UnknownMethodError: If the indicator type is not registered.
        InvalidParameter: If params contains unknown keys or invalid values.
    """
    method_type = normalize_method_type(method_type)
    validate_param_names(method_type, params)
    return _FACTORY[method_type](params, initial_value, window_type)


def supports_method(method_type: str) -> bool:
    """Check if an indicator type is registered."""
    return method_type.strip().lower() in _FACTORY


def list_methods() -> list[str]:
    """Get sorted list of registered indicator types."""
    return sorted(_FACTORY)
