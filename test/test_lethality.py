"""
Unit tests for the lethality formula

Tests the thermal-death-time equation, the standard references
and the vectorised lethality curve.

Author: F-Value Calculator Project
Date: 2026-10-19
"""

import math

import numpy as np
import pytest

from fvalue_calc.core.lethality import (
    F0_REFERENCE,
    F85_REFERENCE,
    STANDARD_REFERENCES,
    LethalityReference,
    lethality,
    lethality_curve,
    seconds_to_minutes,
)


class TestReferences:
    """Test the standard reference conditions."""

    def test_f85_reference(self):
        assert F85_REFERENCE.T_ref == 85.0
        assert F85_REFERENCE.z == 7.8

    def test_f0_reference(self):
        assert F0_REFERENCE.T_ref == 121.1
        assert F0_REFERENCE.z == 10.0

    def test_standard_order(self):
        """F85 is listed before F0."""
        assert [r.name for r in STANDARD_REFERENCES] == ["F85", "F0"]


class TestLethality:
    """Test the scalar lethality equation."""

    @pytest.mark.parametrize("t_s", [1.0, 60.0, 600.0, 3600.0])
    @pytest.mark.parametrize("T", [-20.0, 70.0, 85.0, 115.0, 121.1, 130.0])
    def test_formula(self, t_s, T):
        """F = (t/60) * 10^((T - T_ref)/z) for both references."""
        t_min = seconds_to_minutes(t_s)
        assert lethality(t_min, T, F85_REFERENCE) == pytest.approx(
            t_s / 60 * 10 ** ((T - 85) / 7.8), rel=1e-9
        )
        assert lethality(t_min, T, F0_REFERENCE) == pytest.approx(
            t_s / 60 * 10 ** ((T - 121.1) / 10), rel=1e-9
        )

    def test_at_reference_temperature(self):
        """At T = T_ref the F-value equals the holding time in minutes."""
        assert lethality(5.0, 85.0, F85_REFERENCE) == pytest.approx(5.0)
        assert lethality(5.0, 121.1, F0_REFERENCE) == pytest.approx(5.0)

    def test_one_z_above_reference(self):
        """Raising T by z multiplies F by ten."""
        ref = LethalityReference(name="X", label="X", T_ref=100.0, z=5.0)
        assert lethality(2.0, 105.0, ref) == pytest.approx(20.0)

    @pytest.mark.parametrize("T", [-273.15, 0.0, 121.1, 5000.0])
    def test_zero_time(self, T):
        assert lethality(0.0, T, F85_REFERENCE) == 0.0
        assert lethality(0.0, T, F0_REFERENCE) == 0.0

    def test_monotonic_in_temperature(self):
        temperatures = np.linspace(-10.0, 150.0, 50)
        for ref in STANDARD_REFERENCES:
            values = [lethality(10.0, T, ref) for T in temperatures]
            assert all(b > a for a, b in zip(values, values[1:]))

    def test_never_negative(self):
        assert lethality(1.0, -500.0, F0_REFERENCE) >= 0.0

    def test_overflow_is_infinite(self):
        """Huge temperatures saturate to inf without raising."""
        assert math.isinf(lethality(1.0, 1e6, F85_REFERENCE))


class TestLethalityCurve:
    """Test the vectorised curve evaluation."""

    def test_matches_scalar(self):
        T = np.array([80.0, 100.0, 121.1])
        curve = lethality_curve(600.0, T, F0_REFERENCE)
        expected = [lethality(10.0, t, F0_REFERENCE) for t in T]
        np.testing.assert_allclose(curve, expected, rtol=1e-12)

    def test_shape_preserved(self):
        T = np.linspace(60.0, 140.0, 161)
        assert lethality_curve(60.0, T, F85_REFERENCE).shape == (161,)

    def test_zero_time_curve(self):
        curve = lethality_curve(0.0, [100.0, 1e6], F85_REFERENCE)
        assert np.all(curve == 0.0)
