"""
MethodSpec: dynamic indicator configuration.

A MethodSpec names an indicator type and holds its parameters without
building any state. It is the dynamically dispatched counterpart of
constructing SMA / EMA / ... directly:

- parameters can be set from text (config files, CLI flags, UI fields)
- validate() checks them without allocating a window
- init(first_value) builds the primed indicator
- over(values) streams a whole sequence through a fresh instance

Examples:
    spec = MethodSpec("sma", {"period": 3})
    sma = spec.init(10.0)

    spec = MethodSpec("bbands")
    spec.set("period", "20")
    spec.set("num_std_dev", "2.5")
    outputs = spec.over(closes)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable

from ..core.errors import InvalidParameter
from ..structures import SlidingWindow
from .incremental.base import Method, require_period, require_real
from .incremental.factory import (
    METHODS,
    PARAM_PARSERS,
    create_method,
    normalize_method_type,
    valid_params,
    validate_param_names,
)


@dataclass
class MethodSpec:
    """
    Specification for a single indicator.

    Attributes:
        method_type: Registered indicator type (e.g., "sma", "bbands")
        params: Parameters for the indicator (e.g., {"period": 20});
                missing parameters take the factory defaults
    """
    method_type: str
    params: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Normalize type and reject unknown parameter names."""
        self.method_type = normalize_method_type(self.method_type)
        self.params = dict(self.params)
        validate_param_names(self.method_type, self.params)

    @property
    def name(self) -> str:
        """Indicator type name."""
        return self.method_type

    def validate(self) -> bool:
        """True if init() would accept the current parameters."""
        try:
            self._check_params()
        except InvalidParameter:
            return False
        return True

    def _check_params(self) -> None:
        params = self.params
        validate_param_names(self.method_type, params)

        for key, raw in params.items():
            if key == "period":
                if raw is None and self.method_type == "ema" and params.get("alpha") is not None:
                    continue
                require_period(self.method_type, raw, log=False)
            elif key == "alpha":
                require_real(self.method_type, raw, "alpha", 0.0, 1.0, log=False)
            elif key == "num_std_dev":
                require_real(
                    self.method_type, raw, "num_std_dev", 0.0, math.inf,
                    high_inclusive=False, log=False,
                )

        if (
            self.method_type == "ema"
            and params.get("period") is not None
            and params.get("alpha") is not None
        ):
            raise InvalidParameter("alpha", params["alpha"], "cannot be combined with period")

    def set(self, name: str, value: str) -> None:
        """
        Set one parameter from its textual form.

        For EMA, setting period clears alpha and vice versa.

        Raises:
            InvalidParameter: If name is not a parameter of this indicator.
            ParameterParseError: If value cannot be parsed into the
                parameter's type.
        """
        valid = valid_params(self.method_type)
        if name not in valid:
            raise InvalidParameter(
                name,
                value,
                f"is not a parameter of '{self.method_type}'",
                fix=f"valid parameters: {sorted(valid)}",
            )
        self.params[name] = PARAM_PARSERS[name](name, value)

        if self.method_type == "ema":
            other = "alpha" if name == "period" else "period"
            self.params.pop(other, None)

    def size(self) -> int:
        """
        Number of values in each output.

        Indicators here produce raw values only (no buy/sell signal
        outputs), so this is a single count.
        """
        return len(METHODS[self.method_type].OUTPUTS)

    def output_names(self) -> tuple[str, ...]:
        return METHODS[self.method_type].OUTPUTS

    def init(
        self,
        initial_value: float,
        window_type: type[SlidingWindow] | None = None,
    ) -> Method:
        """
        Build the primed indicator.

        Raises:
            InvalidParameter: If the parameters are invalid.
        """
        return create_method(self.method_type, self.params, initial_value, window_type)

    def over(
        self,
        inputs: Iterable[float],
        window_type: type[SlidingWindow] | None = None,
    ) -> list[Any]:
        """
        Stream a sequence through a fresh instance.

        The instance is primed with the first input, then every input
        (the first one included) is passed to next(). Empty input gives
        an empty list.
        """
        iterator = iter(inputs)
        try:
            first = next(iterator)
        except StopIteration:
            return []

        method = self.init(first, window_type)
        outputs = [method.next(first)]
        outputs.extend(method.over(iterator))
        return outputs
