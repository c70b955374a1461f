"""
Base class and shared validation for incremental indicators.

Every indicator implements the Method contract: it is constructed from
validated parameters plus a first input (which primes its state so the
first output is already meaningful), then advanced one input at a time
with next(). There is no warmup state and no teardown.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterable

from ...core.errors import InvalidParameter
from ...core.types import Period, to_period
from ...structures import SlidingWindow, Window
from ...utils.logger import get_logger


class Method(ABC):
    """Base class for incremental indicators (the streaming state machine)."""

    NAME: ClassVar[str] = ""
    OUTPUTS: ClassVar[tuple[str, ...]] = ("value",)

    @abstractmethod
    def next(self, value: float) -> Any:
        """Consume one input and return the new output. O(1) amortized."""
        ...

    @property
    @abstractmethod
    def value(self) -> Any:
        """Current output (the primed output until next() is first called)."""
        ...

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def size(self) -> int:
        """Number of values in each output."""
        return len(self.OUTPUTS)

    @property
    def output_names(self) -> tuple[str, ...]:
        return self.OUTPUTS

    def over(self, inputs: Iterable[float]) -> list[Any]:
        """Feed every input through next() and collect the outputs."""
        step = self.next
        return [step(x) for x in inputs]


def window_class(window_type: type[SlidingWindow] | None) -> type[SlidingWindow]:
    """Explicit window implementation, or the build-time default."""
    return Window if window_type is None else window_type


def require_period(
    method: str, value: Any, name: str = "period", log: bool = True
) -> Period:
    """
    Validate a window length for `method`.

    Raises:
        InvalidParameter: If value is not a valid Period.
    """
    try:
        return to_period(value, name)
    except InvalidParameter as e:
        if log:
            get_logger().rejected(method, name, value, e.reason)
        raise


def require_real(
    method: str,
    value: Any,
    name: str,
    low: float,
    high: float,
    low_inclusive: bool = False,
    high_inclusive: bool = True,
    log: bool = True,
) -> float:
    """
    Validate a real coefficient against an interval.

    Args:
        method: Indicator name for the log record.
        value: Candidate value.
        name: Parameter name.
        low / high: Interval bounds (math.inf for unbounded).
        low_inclusive / high_inclusive: Whether each bound is allowed.
        log: Emit a rejection record before raising.

    Returns:
        value as float.

    Raises:
        InvalidParameter: If value is not a finite number inside the interval.
    """
    left = "[" if low_inclusive else "("
    right = "]" if high_inclusive else ")"
    interval = f"{left}{low}, {high}{right}"

    # Non-numbers stay NaN and fail the finiteness check below
    number = math.nan
    if not isinstance(value, (bool, str, bytes)):
        try:
            number = float(value)
        except (TypeError, ValueError):
            pass

    above_low = number >= low if low_inclusive else number > low
    below_high = number <= high if high_inclusive else number < high
    if not (math.isfinite(number) and above_low and below_high):
        reason = f"must be a finite number in {interval}"
        if log:
            get_logger().rejected(method, name, value, reason)
        raise InvalidParameter(name, value, reason)
    return number


def log_primed(method: Method) -> None:
    """Debug record for a freshly constructed indicator."""
    logger = get_logger()
    if logger.is_debug():
        logger.debug(f"[PRIMED] {method!r} -> {method.value!r}")
