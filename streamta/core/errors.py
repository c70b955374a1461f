"""
Error taxonomy for streamta.

All parameter problems are rejected when an indicator is constructed.
Nothing here is raised from next(): NaN flowing through a window is
defined arithmetic, not an error.
"""

from __future__ import annotations

from typing import Any


class StreamTAError(Exception):
    """Base class for all streamta errors."""


class InvalidParameter(StreamTAError, ValueError):
    """
    A construction parameter is out of its valid domain.

    Attributes:
        parameter: Name of the offending parameter (e.g. "period").
        value: The rejected value.
        reason: Short description of the violated constraint.
        fix: Optional example of a valid call.
    """

    def __init__(
        self,
        parameter: str,
        value: Any,
        reason: str,
        fix: str | None = None,
    ) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        self.fix = fix

        message = f"{parameter} {reason}, got {value!r}"
        if fix:
            message += f"\n\nFix: {fix}"
        super().__init__(message)


class ParameterParseError(InvalidParameter):
    """A textual parameter value could not be parsed into its type."""

    def __init__(self, parameter: str, text: str, expected: str) -> None:
        super().__init__(
            parameter,
            text,
            f"must be parseable as {expected}",
        )
        self.expected = expected


class UnknownMethodError(StreamTAError, KeyError):
    """Indicator type is not registered with the factory."""

    def __init__(self, method_type: str, known: list[str]) -> None:
        self.method_type = method_type
        self.known = known
        super().__init__(
            f"Unknown indicator type: '{method_type}'. Supported: {known}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would quote the whole message
        return self.args[0]
