"""
Tests for the Value / Period abstraction and the error taxonomy.

Validates that:
1. to_period rejects zero, negatives, non-integers and out-of-width values
2. Precision and width names resolve to numpy scalar types
3. Constants and conversions stay in the configured Value type
"""

import numpy as np
import pytest

from streamta.core import (
    HUNDRED,
    NAN,
    ONE,
    ZERO,
    InvalidParameter,
    ParameterParseError,
    PeriodType,
    StreamTAError,
    UnknownMethodError,
    ValueType,
    is_nan,
    max_period,
    resolve_period_type,
    resolve_value_type,
    to_period,
    to_value,
)


class TestPeriod:
    """Test window length validation."""

    def test_zero_period_raises(self):
        """period == 0 is a construction error, never accepted."""
        with pytest.raises(InvalidParameter, match="must be >= 1"):
            to_period(0)

    def test_negative_period_raises(self):
        with pytest.raises(InvalidParameter):
            to_period(-3)

    def test_non_integer_period_raises(self):
        with pytest.raises(InvalidParameter, match="must be an integer"):
            to_period(2.5)

    def test_bool_is_not_a_period(self):
        """True would silently become a period of 1."""
        with pytest.raises(InvalidParameter):
            to_period(True)

    def test_period_above_width_raises(self):
        with pytest.raises(InvalidParameter, match="must be <="):
            to_period(max_period() + 1)

    def test_valid_period_converts(self):
        p = to_period(14)
        assert isinstance(p, PeriodType)
        assert int(p) == 14

    def test_numpy_integer_accepted(self):
        assert int(to_period(np.int64(5))) == 5

    def test_max_period_matches_width(self):
        assert max_period() == int(np.iinfo(PeriodType).max)

    def test_error_carries_parameter_details(self):
        with pytest.raises(InvalidParameter) as exc_info:
            to_period(0, name="slow")

        err = exc_info.value
        assert err.parameter == "slow"
        assert err.value == 0
        assert "Fix:" in str(err)


class TestTypeResolution:
    """Test build-time type names."""

    @pytest.mark.parametrize("name,expected", [
        ("f32", np.float32),
        ("F64", np.float64),
    ])
    def test_value_types(self, name, expected):
        assert resolve_value_type(name) is expected

    @pytest.mark.parametrize("name,expected", [
        ("u8", np.uint8),
        ("u16", np.uint16),
        ("u32", np.uint32),
        (" U64 ", np.uint64),
    ])
    def test_period_types(self, name, expected):
        assert resolve_period_type(name) is expected

    def test_unknown_value_type_raises(self):
        with pytest.raises(InvalidParameter):
            resolve_value_type("f16")

    def test_unknown_period_type_raises(self):
        with pytest.raises(InvalidParameter):
            resolve_period_type("i32")


class TestValue:
    """Test Value conversions and constants."""

    def test_constants_use_value_type(self):
        for constant in (ZERO, ONE, HUNDRED, NAN):
            assert type(constant) is ValueType

    def test_to_value_converts(self):
        assert type(to_value(3)) is ValueType
        assert to_value(3) == 3.0

    def test_is_nan(self):
        assert is_nan(NAN)
        assert is_nan(float("nan"))
        assert not is_nan(ONE)
        assert not is_nan(float("inf"))


class TestErrorTaxonomy:
    """Test the exception hierarchy."""

    def test_invalid_parameter_is_value_error(self):
        assert issubclass(InvalidParameter, ValueError)
        assert issubclass(InvalidParameter, StreamTAError)

    def test_parse_error_is_invalid_parameter(self):
        err = ParameterParseError("period", "abc", "an integer")
        assert isinstance(err, InvalidParameter)
        assert err.expected == "an integer"
        assert "abc" in str(err)

    def test_unknown_method_is_key_error(self):
        err = UnknownMethodError("macd", ["ema", "sma"])
        assert isinstance(err, KeyError)
        assert str(err).startswith("Unknown indicator type: 'macd'")
