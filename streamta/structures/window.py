"""
Sliding window primitives for O(1) hot-loop operations.

Provides the fixed-capacity window every window-based indicator is built on:
- RunningSum: incrementally maintained sum that recovers exactly once a
  non-finite value leaves it
- SlidingWindow: circular buffer of the last `period` values with a running
  sum and optional running min/max

Priming: a window is created full. Every slot holds the seed value, so
mean() is meaningful from the first call and the window never has a
partially filled state.

Performance Contract:
- SlidingWindow.push_and_evict(): O(1); O(period) only when extrema are
  tracked and the current extreme is evicted without being replaced
- SlidingWindow.sum() / mean(): O(1)
- SlidingWindow.min() / max(): O(1)
"""

from __future__ import annotations

from typing import Iterator

from ..core.types import (
    NAN,
    NEG_INF,
    POS_INF,
    ZERO,
    Period,
    Value,
    ValueType,
    to_period,
    to_value,
)


class RunningSum:
    """
    Sum of a multiset of Values, updated by replacing one element at a time.

    Finite values accumulate into `_finite` as `(sum - removed) + added`.
    NaN and infinities are counted instead of added, so removing them is
    exact: a NaN poisons total() for exactly as long as it is held, which
    plain float accumulation cannot do (NaN - NaN is still NaN).

    total() matches exact arithmetic on the held values:
    - any NaN held             -> NaN
    - both +inf and -inf held  -> NaN
    - only +inf (or -inf) held -> +inf (or -inf)
    - otherwise                -> finite running sum
    """

    __slots__ = ("_finite", "_nan", "_pos_inf", "_neg_inf")

    def __init__(self, seed: Value, count: Period) -> None:
        """
        Initialize with `count` copies of `seed`.

        Args:
            seed: Value replicated `count` times.
            count: Number of copies (window period).
        """
        n = int(count)
        self._finite = ZERO
        self._nan = 0
        self._pos_inf = 0
        self._neg_inf = 0
        if seed != seed:
            self._nan = n
        elif seed == POS_INF:
            self._pos_inf = n
        elif seed == NEG_INF:
            self._neg_inf = n
        else:
            self._finite = seed * to_value(count)

    def replace(self, removed: Value, added: Value) -> None:
        """Remove one held value and add a new one."""
        if removed != removed:
            self._nan -= 1
        elif removed == POS_INF:
            self._pos_inf -= 1
        elif removed == NEG_INF:
            self._neg_inf -= 1
        else:
            self._finite = self._finite - removed

        if added != added:
            self._nan += 1
        elif added == POS_INF:
            self._pos_inf += 1
        elif added == NEG_INF:
            self._neg_inf += 1
        else:
            self._finite = self._finite + added

    @property
    def nan_count(self) -> int:
        """Number of NaN values currently held."""
        return self._nan

    def total(self) -> Value:
        if self._nan or (self._pos_inf and self._neg_inf):
            return NAN
        if self._pos_inf:
            return POS_INF
        if self._neg_inf:
            return NEG_INF
        return self._finite


class SlidingWindow:
    """
    Fixed-capacity circular window over the most recent `period` values.

    The window is always full: construction fills every slot with the seed,
    and each push evicts exactly one value. Elements are indexed oldest
    first (0 = oldest, -1 = newest).

    Example:
        >>> window = SlidingWindow(period=3, seed=10.0)
        >>> float(window.sum())
        30.0
        >>> float(window.push_and_evict(20.0))  # evicts a seed copy
        10.0
        >>> float(window.mean())
        13.333333333333334
        >>> [float(v) for v in window]
        [10.0, 10.0, 20.0]

    Attributes:
        period: Window length as the configured Period type.
    """

    __slots__ = (
        "period",
        "_buffer",
        "_capacity",
        "_head",
        "_sum",
        "_period_value",
        "_track_extrema",
        "_min",
        "_max",
    )

    def __init__(self, period: int, seed: float, track_extrema: bool = False) -> None:
        """
        Initialize a primed window.

        Args:
            period: Window length (must be >= 1).
            seed: Value replicated across every slot.
            track_extrema: Maintain running min()/max().

        Raises:
            InvalidParameter: If period is not a valid Period.
        """
        self.period = to_period(period)
        seed = to_value(seed)
        capacity = int(self.period)

        self._buffer: list[Value] = [seed] * capacity
        self._capacity = capacity
        self._head = 0  # Oldest element; next write position
        self._sum = RunningSum(seed, self.period)
        self._period_value = to_value(self.period)
        self._track_extrema = track_extrema
        self._min = seed
        self._max = seed

    def push_and_evict(self, value: float) -> Value:
        """
        Insert `value` as newest and evict the oldest value.

        Args:
            value: New sample.

        Returns:
            The evicted (previously oldest) value.
        """
        value = ValueType(value)
        head = self._head
        if not 0 <= head < self._capacity:
            raise RuntimeError(
                f"SlidingWindow head {head} outside capacity {self._capacity}"
            )

        evicted = self._buffer[head]
        self._buffer[head] = value
        self._head = (head + 1) % self._capacity
        self._sum.replace(evicted, value)

        if self._track_extrema:
            self._update_extrema(evicted, value)
        return evicted

    def _update_extrema(self, evicted: Value, value: Value) -> None:
        # NaN never becomes the tracked extreme; min()/max() report NaN
        # through the running sum's NaN count instead
        current = self._min
        if value <= current or current != current:
            self._min = value
        elif evicted == current:
            self._min = self._scan_min()

        current = self._max
        if value >= current or current != current:
            self._max = value
        elif evicted == current:
            self._max = self._scan_max()

    def _scan_min(self) -> Value:
        result = NAN
        for item in self._buffer:
            if item < result or result != result:
                result = item
        return result

    def _scan_max(self) -> Value:
        result = NAN
        for item in self._buffer:
            if item > result or result != result:
                result = item
        return result

    def sum(self) -> Value:
        """Exact running sum of the held values."""
        return self._sum.total()

    def mean(self) -> Value:
        """sum / period. Always defined because the window is always full."""
        return self._sum.total() / self._period_value

    def min(self) -> Value:
        """
        Smallest held value (NaN while a NaN is held).

        Raises:
            RuntimeError: If the window was built without track_extrema.
        """
        if not self._track_extrema:
            raise RuntimeError(
                "min() needs a window built with track_extrema=True\n"
                "\n"
                "Fix: SlidingWindow(period, seed, track_extrema=True)"
            )
        return NAN if self._sum.nan_count else self._min

    def max(self) -> Value:
        """
        Largest held value (NaN while a NaN is held).

        Raises:
            RuntimeError: If the window was built without track_extrema.
        """
        if not self._track_extrema:
            raise RuntimeError(
                "max() needs a window built with track_extrema=True\n"
                "\n"
                "Fix: SlidingWindow(period, seed, track_extrema=True)"
            )
        return NAN if self._sum.nan_count else self._max

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def tracks_extrema(self) -> bool:
        return self._track_extrema

    def __len__(self) -> int:
        """Number of held values; always equals capacity."""
        return self._capacity

    def __getitem__(self, index: int) -> Value:
        """
        Get value by position. Supports negative indexing.

        window[0] = oldest value
        window[-1] = newest value
        """
        if index < 0:
            index += self._capacity
        if index < 0 or index >= self._capacity:
            raise IndexError(
                f"index {index} out of range for window of {self._capacity}"
            )
        return self._buffer[(self._head + index) % self._capacity]

    def __iter__(self) -> Iterator[Value]:
        """Iterate from oldest to newest."""
        head = self._head
        yield from self._buffer[head:]
        yield from self._buffer[:head]

    def oldest(self) -> Value:
        """Value that the next push will evict."""
        return self._buffer[self._head]

    def newest(self) -> Value:
        """Most recently pushed value (the seed right after priming)."""
        return self._buffer[self._head - 1]

    def to_list(self) -> list[Value]:
        """Convert to list (oldest first)."""
        return list(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(period={int(self.period)}, "
            f"sum={self.sum()!r}, values={self.to_list()!r})"
        )
