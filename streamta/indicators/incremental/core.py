"""
Core incremental indicators.

Includes SMA, EMA, RSI and Bollinger Bands.

All of them are primed from their first input: window-based indicators
start with `period` copies of it, EMA starts with it as its previous
output. The first output is therefore a real value, never NaN.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

from ...core.errors import InvalidParameter
from ...core.types import HUNDRED, ONE, TWO, ZERO, Value, ValueType, to_value
from ...structures import RunningSum, SlidingWindow
from ...utils.logger import get_logger
from .base import Method, log_primed, require_period, require_real, window_class


class BandsOutput(NamedTuple):
    """Output of band indicators (Bollinger, Donchian)."""
    upper: Value
    middle: Value
    lower: Value


@dataclass
class SMA(Method):
    """
    Simple Moving Average with O(1) updates.

    Formula:
        sma = window.sum / period
        window.sum = (window.sum - evicted) + close

    Example:
        SMA(period=3, initial_value=10)  -> window [10, 10, 10], value 10
        next(20)                         -> window [10, 10, 20], 13.333...
        next(30)                         -> window [10, 20, 30], 20.0
    """

    NAME = "sma"

    period: int
    initial_value: float
    window_type: type[SlidingWindow] | None = field(default=None, repr=False)
    _window: SlidingWindow = field(init=False, repr=False)
    _value: Value = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.period = require_period(self.NAME, self.period)
        first = to_value(self.initial_value)
        self._window = window_class(self.window_type)(self.period, first)
        # Mean of `period` copies is the copy itself; seed * n / n can round
        self._value = first
        log_primed(self)

    def next(self, value: float) -> Value:
        """Update with new value."""
        window = self._window
        window.push_and_evict(ValueType(value))
        self._value = window.mean()
        return self._value

    @property
    def value(self) -> Value:
        return self._value

    @property
    def window(self) -> SlidingWindow:
        """Underlying window (read-only use)."""
        return self._window


@dataclass
class EMA(Method):
    """
    Exponential Moving Average with O(1) updates.

    Formula:
        alpha = 2 / (period + 1)       (unless alpha is given directly)
        ema = alpha * value + (1 - alpha) * ema_prev

    Exactly one of `period` and `alpha` must be given; alpha must lie in
    (0, 1]. The previous output starts at the first input. With alpha == 1
    the output is the input itself, even after a NaN or infinite input.
    """

    NAME = "ema"

    period: int | None
    initial_value: float
    alpha: float | None = None
    _alpha: Value = field(init=False, repr=False)
    _decay: Value = field(init=False, repr=False)
    _value: Value = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.period is None and self.alpha is None:
            get_logger().rejected(self.NAME, "period", None, "or alpha is required")
            raise InvalidParameter(
                "period", None, "or alpha is required",
                fix="EMA(period=20, initial_value=x) or EMA(None, x, alpha=0.1)",
            )
        if self.period is not None and self.alpha is not None:
            get_logger().rejected(self.NAME, "alpha", self.alpha, "conflicts with period")
            raise InvalidParameter(
                "alpha", self.alpha, "cannot be combined with period",
                fix="pass either period or alpha",
            )

        if self.alpha is None:
            self.period = require_period(self.NAME, self.period)
            self._alpha = TWO / (to_value(self.period) + ONE)
        else:
            self.alpha = require_real(self.NAME, self.alpha, "alpha", 0.0, 1.0)
            self._alpha = to_value(self.alpha)

        self._decay = ONE - self._alpha
        self._value = to_value(self.initial_value)
        log_primed(self)

    @classmethod
    def from_alpha(cls, alpha: float, initial_value: float) -> "EMA":
        """Build an EMA from its smoothing factor instead of a period."""
        return cls(None, initial_value, alpha=alpha)

    def next(self, value: float) -> Value:
        """Update with new value."""
        value = ValueType(value)
        if self._decay == ZERO:
            # alpha == 1 keeps nothing of the previous output (0 * inf is NaN)
            self._value = value
        else:
            self._value = self._alpha * value + self._decay * self._value
        return self._value

    @property
    def value(self) -> Value:
        return self._value

    @property
    def smoothing(self) -> Value:
        """Effective alpha."""
        return self._alpha


@dataclass
class RSI(Method):
    """
    Relative Strength Index with O(1) updates.

    Gains and losses are averaged with the SMA rule over `period` changes:
        gain = max(value - prev, 0)
        loss = max(prev - value, 0)
        rsi  = 100 - 100 / (1 + avg_gain / avg_loss)
        rsi  = 100 when avg_loss == 0

    Both windows are primed with zeros (no change seen yet), so the
    first output is 100.
    """

    NAME = "rsi"

    period: int
    initial_value: float
    window_type: type[SlidingWindow] | None = field(default=None, repr=False)
    _gains: SlidingWindow = field(init=False, repr=False)
    _losses: SlidingWindow = field(init=False, repr=False)
    _prev_input: Value = field(init=False, repr=False)
    _value: Value = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.period = require_period(self.NAME, self.period)
        window_type = window_class(self.window_type)
        self._gains = window_type(self.period, ZERO)
        self._losses = window_type(self.period, ZERO)
        self._prev_input = to_value(self.initial_value)
        self._value = self._compute()
        log_primed(self)

    def next(self, value: float) -> Value:
        """Update with new value."""
        value = ValueType(value)
        change = value - self._prev_input
        self._prev_input = value

        if change > ZERO:
            gain, loss = change, ZERO
        elif change < ZERO:
            gain, loss = ZERO, -change
        elif change == ZERO:
            gain = loss = ZERO
        else:
            # NaN change flows into both averages
            gain = loss = change

        self._gains.push_and_evict(gain)
        self._losses.push_and_evict(loss)
        self._value = self._compute()
        return self._value

    def _compute(self) -> Value:
        avg_gain = self._gains.mean()
        avg_loss = self._losses.mean()
        if avg_loss == ZERO:
            return HUNDRED
        return HUNDRED - HUNDRED / (ONE + avg_gain / avg_loss)

    @property
    def value(self) -> Value:
        return self._value


@dataclass
class BollingerBands(Method):
    """
    Bollinger Bands with O(1) updates using running sums.

    Uses population standard deviation over the window:
        mean = running_sum / n
        variance = running_sq_sum / n - mean^2
        std = sqrt(variance)

    Output:
        upper = mean + num_std_dev * std
        middle = mean
        lower = mean - num_std_dev * std

    Rounding can push a flat window's variance slightly below zero; it is
    clamped to 0. NaN variance is not clamped.
    """

    NAME = "bbands"
    OUTPUTS = ("upper", "middle", "lower")

    period: int
    initial_value: float
    num_std_dev: float = 2.0
    window_type: type[SlidingWindow] | None = field(default=None, repr=False)
    _window: SlidingWindow = field(init=False, repr=False)
    _squares: RunningSum = field(init=False, repr=False)
    _k: Value = field(init=False, repr=False)
    _period_value: Value = field(init=False, repr=False)
    _value: BandsOutput = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.period = require_period(self.NAME, self.period)
        self.num_std_dev = require_real(
            self.NAME, self.num_std_dev, "num_std_dev", 0.0, float("inf"),
            high_inclusive=False,
        )
        first = to_value(self.initial_value)
        self._window = window_class(self.window_type)(self.period, first)
        self._squares = RunningSum(first * first, self.period)
        self._k = to_value(self.num_std_dev)
        self._period_value = to_value(self.period)
        self._value = self._compute()
        log_primed(self)

    def next(self, value: float) -> BandsOutput:
        """Update with new value."""
        value = ValueType(value)
        evicted = self._window.push_and_evict(value)
        self._squares.replace(evicted * evicted, value * value)
        self._value = self._compute()
        return self._value

    def _compute(self) -> BandsOutput:
        middle = self._window.mean()
        variance = self._squares.total() / self._period_value - middle * middle
        if variance < ZERO:
            variance = ZERO
        width = self._k * np.sqrt(variance)
        return BandsOutput(middle + width, middle, middle - width)

    @property
    def value(self) -> BandsOutput:
        return self._value

    @property
    def upper(self) -> Value:
        return self._value.upper

    @property
    def middle(self) -> Value:
        return self._value.middle

    @property
    def lower(self) -> Value:
        return self._value.lower
