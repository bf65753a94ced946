"""Tests for crown fire initiation and the C6 sub-model."""

import math

import numpy as np
import pytest

from fbpengine.exceptions import DomainWarning
from fbpengine.fbp.calculator import rate_of_spread_extended
from fbpengine.fbp.crown_fire import (
    critical_surface_intensity,
    crown_fraction_burned,
    crown_fraction_burned_c6,
    crown_rate_of_spread_c6,
    fire_type,
    intermediate_surface_rate_of_spread_c6,
    rate_of_spread_c6,
    surface_fire_rate_of_spread,
    surface_rate_of_spread_c6,
)
from fbpengine.types import FireType


class TestCriticalSurfaceIntensity:
    """Test Van Wagner (1977) critical intensity calculation."""

    def test_zero_cbh_returns_zero(self):
        assert critical_surface_intensity(100.0, 0.0)[0] == 0.0

    def test_known_value(self):
        expected = 0.001 * 3.0**1.5 * (460.0 + 25.9 * 100.0) ** 1.5
        assert critical_surface_intensity(100.0, 3.0)[0] == pytest.approx(expected)
        assert expected == pytest.approx(875.25, abs=0.1)

    def test_low_cbh_lower_threshold(self):
        csi = critical_surface_intensity([100.0, 100.0], [2.0, 10.0])
        assert csi[0] < csi[1]

    def test_fmc_effect(self):
        """Higher FMC should increase CSI (wetter canopy harder to ignite)."""
        csi = critical_surface_intensity([80.0, 120.0], [5.0, 5.0])
        assert csi[1] > csi[0]


class TestSurfaceFireRateOfSpread:
    def test_known_value(self):
        assert surface_fire_rate_of_spread(900.0, 2.0)[0] == pytest.approx(1.5)

    def test_zero_sfc_is_infinite_with_warning(self):
        with pytest.warns(DomainWarning):
            rso = surface_fire_rate_of_spread([900.0, 900.0], [0.0, 2.0])
        assert math.isinf(rso[0])
        assert rso[1] == pytest.approx(1.5)

    def test_zero_csi_and_sfc(self):
        with pytest.warns(DomainWarning):
            rso = surface_fire_rate_of_spread(0.0, 0.0)
        assert math.isinf(rso[0])


class TestCrownFractionBurned:
    """Test CFB calculation."""

    def test_below_threshold_no_crown(self):
        assert crown_fraction_burned(1.0, 2.0)[0] == 0.0

    def test_at_threshold_no_crown(self):
        assert crown_fraction_burned(2.0, 2.0)[0] == 0.0

    def test_known_value(self):
        assert crown_fraction_burned(12.0, 2.0)[0] == pytest.approx(1.0 - math.exp(-2.3))

    def test_infinite_rso_no_crown(self):
        assert crown_fraction_burned(50.0, math.inf)[0] == 0.0

    def test_cfb_bounded_zero_to_one(self):
        rss, rso = np.meshgrid(np.linspace(0.0, 200.0, 41), np.linspace(0.0, 50.0, 26))
        cfb = crown_fraction_burned(rss.ravel(), rso.ravel())
        assert np.all((cfb >= 0.0) & (cfb <= 1.0))

    def test_nan_propagates(self):
        assert math.isnan(crown_fraction_burned(float("nan"), 1.0)[0])


class TestFireType:
    """Test fire type classification from CFB."""

    def test_surface(self):
        assert fire_type(0.05) == [FireType.SURFACE]

    def test_intermittent_crown(self):
        assert fire_type([0.1, 0.5]) == [FireType.INTERMITTENT_CROWN] * 2

    def test_continuous_crown(self):
        assert fire_type([0.9, 1.0]) == [FireType.CONTINUOUS_CROWN] * 2

    def test_nan_is_unclassified(self):
        assert fire_type([float("nan"), 0.05]) == [None, FireType.SURFACE]

    def test_missing_isi_is_not_crown_fire(self):
        result = rate_of_spread_extended("C2", float("nan"), 50.0, 100.0, 5.0, 0.0, 0.0, 0.0, 3.0)
        assert fire_type(result.cfb) == [None]


class TestC6SubModel:
    """Test the C6 conifer plantation surface/crown equations."""

    def test_intermediate_surface_spread(self):
        assert intermediate_surface_rate_of_spread_c6(10.0)[0] == pytest.approx(
            30.0 * (1.0 - math.exp(-0.8)) ** 3
        )

    def test_crown_spread_known_value(self):
        fme = 1000.0 * (1.5 - 0.275) ** 4 / 3050.0
        expected = 60.0 * (1.0 - math.exp(-0.497)) * fme / 0.778
        assert crown_rate_of_spread_c6(10.0, 100.0)[0] == pytest.approx(expected)
        assert expected == pytest.approx(22.30, abs=0.01)

    def test_crown_spread_decreases_with_fmc(self):
        rsc = crown_rate_of_spread_c6([10.0, 10.0], [90.0, 120.0])
        assert rsc[0] > rsc[1]

    def test_surface_spread_applies_c6_buildup(self):
        be = math.exp(50.0 * math.log(0.8) * (1.0 / 40.0 - 1.0 / 62.0))
        assert surface_rate_of_spread_c6(5.0, 40.0)[0] == pytest.approx(5.0 * be)

    def test_surface_spread_at_bui0_unchanged(self):
        assert surface_rate_of_spread_c6(5.0, 62.0)[0] == pytest.approx(5.0)

    def test_cfb_ignores_crown_spread(self):
        a = crown_fraction_burned_c6(10.0, 8.0, 3.0)[0]
        b = crown_fraction_burned_c6(40.0, 8.0, 3.0)[0]
        assert a == b == pytest.approx(1.0 - math.exp(-0.23 * 5.0))

    def test_no_crown_spread_is_pure_surface(self):
        assert rate_of_spread_c6(0.0, 5.0, 0.5)[0] == 5.0

    def test_slower_crown_is_pure_surface(self):
        assert rate_of_spread_c6(4.0, 5.0, 0.9)[0] == 5.0

    def test_full_crown_fraction_is_crown_spread(self):
        assert rate_of_spread_c6(40.0, 10.0, 1.0)[0] == pytest.approx(40.0)

    def test_partial_crown_fraction_blends(self):
        assert rate_of_spread_c6(40.0, 10.0, 0.5)[0] == pytest.approx(25.0)
