"""
Parameter parsing helpers.

Used when indicator parameters arrive as text (MethodSpec.set). Unlike
lenient API-response coercion, a value that cannot be parsed is an error:
silently substituting a default would build a different indicator than
the one asked for.
"""

from typing import Any

from ..core.errors import ParameterParseError


def parse_int(name: str, text: Any) -> int:
    """
    Parse an integer parameter.

    Accepts "14", " 14 " and integral floats written as "14.0".

    Raises:
        ParameterParseError: If text is empty or not an integer

    Examples:
        >>> parse_int("period", "14")
        14
        >>> parse_int("period", "14.0")
        14
    """
    if text is None or str(text).strip() == "":
        raise ParameterParseError(name, text, "an integer")
    raw = str(text).strip()
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        as_float = float(raw)
    except ValueError:
        raise ParameterParseError(name, text, "an integer") from None
    if not as_float.is_integer():
        raise ParameterParseError(name, text, "an integer")
    return int(as_float)


def parse_float(name: str, text: Any) -> float:
    """
    Parse a real-valued parameter.

    Raises:
        ParameterParseError: If text is empty or not a number

    Examples:
        >>> parse_float("alpha", "0.5")
        0.5
    """
    if text is None or str(text).strip() == "":
        raise ParameterParseError(name, text, "a number")
    try:
        return float(str(text).strip())
    except ValueError:
        raise ParameterParseError(name, text, "a number") from None
