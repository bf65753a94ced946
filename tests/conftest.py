"""Shared test fixtures for fbpengine tests."""

import pytest

from fbpengine.fbp.constants import FuelType


@pytest.fixture
def c2_reference_inputs():
    """Reference C2 scenario.

    ISI=10, BUI=50, FMC=100, SFC=5, CBH=3 with no mixedwood or grass inputs.
    """
    return {
        "fuel_type": "C2",
        "isi": 10.0,
        "bui": 50.0,
        "fmc": 100.0,
        "sfc": 5.0,
        "pc": 0.0,
        "pdf": 0.0,
        "cc": 0.0,
        "cbh": 3.0,
    }


@pytest.fixture
def moderate_inputs():
    """Moderate fire weather inputs shared by every fuel type."""
    return {
        "isi": 10.0,
        "bui": 60.0,
        "fmc": 100.0,
        "sfc": 1.5,
        "pc": 50.0,
        "pdf": 35.0,
        "cc": 85.0,
        "cbh": 4.0,
    }


@pytest.fixture
def all_fuel_types():
    """List of all 17 FBP fuel types."""
    return list(FuelType)
