"""
Unsafe-performance sliding window.

UnsafeSlidingWindow is a drop-in replacement for SlidingWindow that drops
every validity check from construction and from the push/evict path:

- period is not validated (no to_period, no >= 1 check, no width check)
- seed and pushed values are not converted to ValueType
- the head index is not range-checked
- min()/max() do not check that extrema tracking was requested
- running-sum bookkeeping is inlined instead of delegated to RunningSum

Contract:
    Given the same construction parameters and the same input sequence,
    every output (evicted values, sum, mean, min, max) is bit-identical to
    SlidingWindow. Any divergence is a defect.

Caller obligations (NOT checked):
    - period is an integer >= 1 that fits the configured Period width
    - seed and every pushed value are already ValueType scalars
      (indicators convert their inputs before pushing)
    - min()/max() are only called on windows built with track_extrema=True

Violating any of these is undefined behavior: results may be silently
wrong, or an arbitrary exception may surface from deep inside the window.
It is never the default. Select it explicitly with window_type=..., or
build-wide with STREAMTA_UNSAFE_PERFORMANCE=true.
"""

from __future__ import annotations

from ..core.types import NAN, NEG_INF, POS_INF, ZERO, Value, ValueType
from .window import SlidingWindow


class UnsafeSlidingWindow(SlidingWindow):
    """
    SlidingWindow without validity checks.

    Read accessors (iteration, indexing, oldest/newest) are inherited;
    only construction and the hot path are replaced.
    """

    __slots__ = ("_finite", "_nan", "_pos_inf", "_neg_inf")

    def __init__(self, period: int, seed: float, track_extrema: bool = False) -> None:
        capacity = int(period)
        self.period = period
        self._buffer = [seed] * capacity
        self._capacity = capacity
        self._head = 0
        self._sum = None
        self._period_value = ValueType(period)
        self._track_extrema = track_extrema
        self._min = seed
        self._max = seed

        self._finite = ZERO
        self._nan = 0
        self._pos_inf = 0
        self._neg_inf = 0
        if seed != seed:
            self._nan = capacity
        elif seed == POS_INF:
            self._pos_inf = capacity
        elif seed == NEG_INF:
            self._neg_inf = capacity
        else:
            self._finite = seed * self._period_value

    def push_and_evict(self, value: Value) -> Value:
        head = self._head
        buffer = self._buffer
        evicted = buffer[head]
        buffer[head] = value
        head += 1
        self._head = 0 if head == self._capacity else head

        if evicted != evicted:
            self._nan -= 1
        elif evicted == POS_INF:
            self._pos_inf -= 1
        elif evicted == NEG_INF:
            self._neg_inf -= 1
        else:
            self._finite = self._finite - evicted

        if value != value:
            self._nan += 1
        elif value == POS_INF:
            self._pos_inf += 1
        elif value == NEG_INF:
            self._neg_inf += 1
        else:
            self._finite = self._finite + value

        if self._track_extrema:
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
        return evicted

    def sum(self) -> Value:
        if self._nan or (self._pos_inf and self._neg_inf):
            return NAN
        if self._pos_inf:
            return POS_INF
        if self._neg_inf:
            return NEG_INF
        return self._finite

    def mean(self) -> Value:
        return self.sum() / self._period_value

    def min(self) -> Value:
        return NAN if self._nan else self._min

    def max(self) -> Value:
        return NAN if self._nan else self._max
