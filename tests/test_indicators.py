"""
Tests for the core incremental indicators (SMA, EMA, RSI, Bollinger Bands).

Validates that:
1. Each indicator is primed by its first input (no warmup NaNs)
2. Incremental outputs match pandas rolling/ewm references once the
   priming values have left the window
3. Parameters are validated at construction
4. NaN inputs propagate instead of raising
"""

import math

import numpy as np
import pandas as pd
import pytest

from streamta.core import InvalidParameter, ValueType, to_value
from streamta.indicators import (
    EMA,
    RSI,
    SMA,
    BandsOutput,
    BollingerBands,
    Method,
)


def _stream(method, closes):
    """Primed output followed by one output per remaining close."""
    return [method.value] + method.over(closes[1:])


class TestMethodContract:
    """Test the shared Method surface."""

    def test_method_is_abstract(self):
        with pytest.raises(TypeError):
            Method()

    @pytest.mark.parametrize("method,name,size", [
        (SMA(3, 1.0), "sma", 1),
        (EMA(3, 1.0), "ema", 1),
        (RSI(3, 1.0), "rsi", 1),
        (BollingerBands(3, 1.0), "bbands", 3),
    ])
    def test_name_and_size(self, method, name, size):
        assert method.name == name
        assert method.size == size
        assert len(method.output_names) == size

    def test_value_tracks_last_output(self):
        sma = SMA(3, 10.0)
        out = sma.next(40.0)
        assert sma.value == out

    def test_over_matches_repeated_next(self, random_walk):
        a = EMA(10, random_walk[0])
        b = EMA(10, random_walk[0])
        assert a.over(random_walk) == [b.next(x) for x in random_walk]


class TestSMA:
    """Test Simple Moving Average."""

    def test_scenario(self):
        sma = SMA(period=3, initial_value=10.0)
        assert sma.value == 10.0

        assert sma.next(20.0) == pytest.approx(13.333333333333334)
        assert sma.next(30.0) == 20.0

    def test_primed_value_is_exact(self):
        """(0.1 * 3) / 3 would round; the primed value is the input itself."""
        assert SMA(3, 0.1).value == to_value(0.1)

    def test_period_one_is_identity(self, random_walk):
        sma = SMA(1, random_walk[0])
        for x in random_walk:
            assert sma.next(x) == to_value(x)

    def test_matches_pandas_rolling_mean(self, random_walk):
        period = 14
        outputs = _stream(SMA(period, random_walk[0]), random_walk)
        expected = pd.Series(random_walk).rolling(period).mean()

        for i in range(period - 1, len(random_walk)):
            assert outputs[i] == pytest.approx(expected.iloc[i], rel=1e-9)

    def test_outputs_use_value_type(self):
        sma = SMA(5, 1)
        assert type(sma.value) is ValueType
        assert type(sma.next(2)) is ValueType

    def test_nan_propagates_then_recovers(self):
        sma = SMA(2, 1.0)
        assert math.isnan(sma.next(float("nan")))
        assert math.isnan(sma.next(3.0))
        assert sma.next(5.0) == 4.0

    @pytest.mark.parametrize("period", [0, -1, 2.5, "3", None])
    def test_invalid_period_raises(self, period):
        with pytest.raises(InvalidParameter):
            SMA(period, 1.0)


class TestEMA:
    """Test Exponential Moving Average."""

    def test_scenario(self):
        """period 3 -> alpha 0.5."""
        ema = EMA(period=3, initial_value=10.0)
        assert ema.smoothing == 0.5
        assert ema.value == 10.0
        assert ema.next(20.0) == 15.0
        assert ema.next(10.0) == 12.5

    def test_period_one_is_identity(self, random_walk):
        ema = EMA(1, random_walk[0])
        for x in random_walk:
            assert ema.next(x) == to_value(x)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_period_one_recovers_after_non_finite(self, bad):
        """With alpha == 1 the previous output does not carry over."""
        ema = EMA(1, 10.0)
        ema.next(bad)
        assert ema.next(5.0) == 5.0

        assert EMA(1, bad).next(5.0) == 5.0
        assert EMA.from_alpha(1.0, bad).next(7.0) == 7.0

    def test_matches_pandas_ewm(self, random_walk):
        period = 10
        outputs = _stream(EMA(period, random_walk[0]), random_walk)
        expected = pd.Series(random_walk).ewm(span=period, adjust=False).mean()

        for i, out in enumerate(outputs):
            assert out == pytest.approx(expected.iloc[i], rel=1e-9)

    def test_from_alpha(self):
        ema = EMA.from_alpha(0.25, 8.0)
        assert ema.smoothing == 0.25
        assert ema.next(16.0) == 10.0

    def test_alpha_one_is_identity(self):
        ema = EMA(None, 1.0, alpha=1.0)
        assert ema.next(7.0) == 7.0

    @pytest.mark.parametrize("alpha", [0.0, -0.1, 1.5, float("nan"), float("inf")])
    def test_alpha_out_of_range_raises(self, alpha):
        with pytest.raises(InvalidParameter, match="alpha"):
            EMA(None, 1.0, alpha=alpha)

    def test_needs_period_or_alpha(self):
        with pytest.raises(InvalidParameter):
            EMA(None, 1.0)

    def test_period_and_alpha_conflict(self):
        with pytest.raises(InvalidParameter, match="cannot be combined"):
            EMA(3, 1.0, alpha=0.5)

    def test_zero_period_raises(self):
        with pytest.raises(InvalidParameter):
            EMA(0, 1.0)

    def test_nan_sticks(self):
        ema = EMA(3, 1.0)
        ema.next(float("nan"))
        assert math.isnan(ema.next(1.0))


class TestRSI:
    """Test Relative Strength Index."""

    def test_first_output_is_100(self):
        assert RSI(14, 42.0).value == 100.0

    def test_scenario(self):
        rsi = RSI(period=2, initial_value=10.0)
        assert rsi.next(11.0) == 100.0
        assert rsi.next(10.0) == 50.0

    def test_falling_only_is_zero(self):
        rsi = RSI(3, 100.0)
        for x in (99.0, 98.0, 97.0, 96.0):
            assert rsi.next(x) == 0.0

    def test_flat_is_100(self):
        rsi = RSI(5, 3.0)
        for _ in range(10):
            assert rsi.next(3.0) == 100.0

    def test_bounded(self, random_walk):
        rsi = RSI(14, random_walk[0])
        for x in random_walk:
            assert -1e-9 <= rsi.next(x) <= 100.0 + 1e-9

    def test_matches_rolling_reference(self, random_walk):
        period = 14
        outputs = _stream(RSI(period, random_walk[0]), random_walk)

        change = pd.Series(random_walk).diff()
        avg_gain = change.clip(lower=0).rolling(period).mean()
        avg_loss = (-change).clip(lower=0).rolling(period).mean()
        expected = 100 - 100 / (1 + avg_gain / avg_loss)

        for i in range(period, len(random_walk)):
            assert outputs[i] == pytest.approx(expected.iloc[i], rel=1e-7)

    def test_nan_input_gives_nan(self):
        rsi = RSI(3, 1.0)
        assert math.isnan(rsi.next(float("nan")))

    def test_zero_period_raises(self):
        with pytest.raises(InvalidParameter):
            RSI(0, 1.0)


class TestBollingerBands:
    """Test Bollinger Bands."""

    def test_primed_bands_collapse(self):
        bb = BollingerBands(3, 10.0)
        assert bb.value == BandsOutput(10.0, 10.0, 10.0)

    def test_output_fields(self):
        bb = BollingerBands(2, 10.0, num_std_dev=1.0)
        out = bb.next(20.0)

        assert isinstance(out, BandsOutput)
        assert out.middle == 15.0
        assert out.upper == 20.0
        assert out.lower == 10.0
        assert (bb.upper, bb.middle, bb.lower) == tuple(out)
        assert bb.output_names == ("upper", "middle", "lower")

    def test_std_matches_window(self, random_walk):
        period = 20
        bb = BollingerBands(period, random_walk[0], num_std_dev=2.0)
        history = [random_walk[0]] * period
        for x in random_walk:
            out = bb.next(x)
            history.append(x)
            held = np.array(history[-period:])
            std = held.std(ddof=0)
            assert out.middle == pytest.approx(held.mean(), rel=1e-9)
            assert out.upper - out.middle == pytest.approx(2.0 * std, rel=1e-6, abs=1e-6)
            assert out.middle - out.lower == pytest.approx(2.0 * std, rel=1e-6, abs=1e-6)

    def test_matches_pandas_rolling(self, random_walk):
        period = 20
        outputs = _stream(BollingerBands(period, random_walk[0]), random_walk)
        rolling = pd.Series(random_walk).rolling(period)
        mean = rolling.mean()
        std = rolling.std(ddof=0)

        for i in range(period - 1, len(random_walk)):
            assert outputs[i].middle == pytest.approx(mean.iloc[i], rel=1e-9)
            assert outputs[i].upper == pytest.approx(mean.iloc[i] + 2 * std.iloc[i], rel=1e-7)

    def test_flat_series_has_zero_width(self):
        bb = BollingerBands(4, 0.1)
        for _ in range(10):
            out = bb.next(0.1)
            assert out.upper >= out.middle >= out.lower
            assert out.upper - out.lower == pytest.approx(0.0, abs=1e-7)

    @pytest.mark.parametrize("k", [0.0, -1.0, float("inf"), float("nan"), "2", True])
    def test_invalid_num_std_dev_raises(self, k):
        with pytest.raises(InvalidParameter, match="num_std_dev"):
            BollingerBands(20, 1.0, num_std_dev=k)

    def test_nan_propagates(self):
        bb = BollingerBands(2, 1.0)
        out = bb.next(float("nan"))
        assert all(math.isnan(v) for v in out)
