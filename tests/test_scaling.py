"""Tests for parameter scaling curves."""

import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from akpconv.utils import scaling


class TestLinearCurves:
    """Test cases for linear mappings."""

    @pytest.mark.parametrize("level,expected", [(0, -60.0), (50, -27.0), (75, -10.5), (100, 6.0)])
    def test_level_to_db(self, level, expected):
        assert scaling.level_to_db(level) == pytest.approx(expected)

    def test_resonance(self):
        assert scaling.resonance_to_db(0) == 0.0
        assert scaling.resonance_to_db(100) == pytest.approx(40.0)

    def test_lfo_delay_and_fade(self):
        assert scaling.lfo_delay_seconds(100) == pytest.approx(10.0)
        assert scaling.lfo_fade_seconds(100) == pytest.approx(5.0)
        assert scaling.lfo_fade_seconds(50) == pytest.approx(scaling.lfo_delay_seconds(50) / 2)

    @pytest.mark.parametrize("amount,expected", [(0, -1.0), (50, 0.0), (100, 1.0)])
    def test_bipolar(self, amount, expected):
        assert scaling.bipolar(amount) == pytest.approx(expected)


class TestLogCurves:
    """Test cases for exponential mappings."""

    def test_cutoff_endpoints(self):
        assert scaling.cutoff_to_hz(0) == pytest.approx(20.0)
        assert scaling.cutoff_to_hz(100) == pytest.approx(20000.0)

    def test_lfo_rate_endpoints(self):
        assert scaling.lfo_rate_to_hz(0) == pytest.approx(0.1)
        assert scaling.lfo_rate_to_hz(100) == pytest.approx(30.0)

    @pytest.mark.parametrize(
        "func",
        [scaling.level_to_db, scaling.cutoff_to_hz, scaling.resonance_to_db, scaling.lfo_rate_to_hz],
    )
    def test_monotonic(self, func):
        values = [func(raw) for raw in range(101)]

        assert all(a < b for a, b in zip(values, values[1:]))


class TestEnvelopeTime:
    """Test cases for envelope time conversion."""

    def test_curve(self):
        assert scaling.envelope_time(100, 4.0) == pytest.approx(math.exp(4.0) / 1000)
        assert scaling.envelope_time(50, 5.0) == pytest.approx(math.exp(2.5) / 1000)

    def test_zero_without_override(self):
        assert scaling.envelope_time(0, scaling.FILTER_ATTACK_CURVE) == pytest.approx(0.001)

    def test_zero_override(self):
        assert scaling.envelope_time(0, scaling.AMP_ATTACK_CURVE, zero_value=0.0) == 0.0
        assert scaling.envelope_time(0, scaling.AMP_RELEASE_CURVE, zero_value=0.1) == pytest.approx(0.1)

    def test_override_only_at_zero(self):
        assert scaling.envelope_time(1, 4.0, zero_value=0.0) > 0.001

    @pytest.mark.parametrize(
        "curve",
        [
            scaling.AMP_ATTACK_CURVE,
            scaling.AMP_RELEASE_CURVE,
            scaling.FILTER_DECAY_CURVE,
            scaling.FILTER_RELEASE_CURVE,
        ],
    )
    def test_monotonic_and_floor(self, curve):
        values = [scaling.envelope_time(raw, curve) for raw in range(101)]

        assert all(a < b for a, b in zip(values, values[1:]))
        assert min(values) >= 0.001


class TestSinglePrecision:
    """Test cases for single-precision rounding of every curve."""

    def test_to_f32(self):
        assert scaling.to_f32(0.1) != 0.1
        assert scaling.to_f32(0.1) == pytest.approx(0.1, rel=1e-7)
        assert scaling.to_f32(0.5) == 0.5

    def test_cutoff_rounding(self):
        """Test 1000^0.96 is rounded to single precision before scaling."""
        value = scaling.cutoff_to_hz(96)

        assert f"{value:.1f}" == "15171.5"
        assert scaling.to_f32(value) == value

    @pytest.mark.parametrize(
        "func",
        [
            scaling.level_to_db,
            scaling.cutoff_to_hz,
            scaling.resonance_to_db,
            scaling.lfo_rate_to_hz,
            scaling.lfo_delay_seconds,
            scaling.lfo_fade_seconds,
            scaling.bipolar,
            scaling.sustain_fraction,
        ],
    )
    def test_results_are_single_precision(self, func):
        for raw in range(256):
            value = func(raw)
            assert scaling.to_f32(value) == value

    def test_envelope_and_modulation_single_precision(self):
        for raw in range(101):
            time = scaling.envelope_time(raw, scaling.AMP_RELEASE_CURVE, zero_value=0.1)
            amount = scaling.modulation_amount(raw, 9600.0)
            assert scaling.to_f32(time) == time
            assert scaling.to_f32(amount) == amount
