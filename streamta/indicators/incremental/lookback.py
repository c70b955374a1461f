"""
Lookback-based indicators built on windows with running extrema.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...core.types import TWO, Value, ValueType, to_value
from ...structures import SlidingWindow
from .base import Method, log_primed, require_period, window_class
from .core import BandsOutput


@dataclass
class DonchianChannel(Method):
    """
    Donchian Channel over a single input series.

    Formula:
        upper = max(value over period)
        lower = min(value over period)
        middle = (upper + lower) / 2

    The window tracks its extrema incrementally: O(1) per update unless
    the evicted value was the current extreme and the new value does not
    replace it, in which case that side is rescanned in O(period).
    """

    NAME = "donchian"
    OUTPUTS = ("upper", "middle", "lower")

    period: int
    initial_value: float
    window_type: type[SlidingWindow] | None = field(default=None, repr=False)
    _window: SlidingWindow = field(init=False, repr=False)
    _value: BandsOutput = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.period = require_period(self.NAME, self.period)
        first = to_value(self.initial_value)
        self._window = window_class(self.window_type)(
            self.period, first, track_extrema=True
        )
        self._value = self._compute()
        log_primed(self)

    def next(self, value: float) -> BandsOutput:
        """Update with new value."""
        self._window.push_and_evict(ValueType(value))
        self._value = self._compute()
        return self._value

    def _compute(self) -> BandsOutput:
        upper = self._window.max()
        lower = self._window.min()
        return BandsOutput(upper, (upper + lower) / TWO, lower)

    @property
    def value(self) -> BandsOutput:
        return self._value

    @property
    def upper(self) -> Value:
        return self._value.upper

    @property
    def lower(self) -> Value:
        return self._value.lower
