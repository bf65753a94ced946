"""Canadian Fire Behavior Prediction (FBP) System rate of spread engine."""

from fbpengine.fbp.calculator import rate_of_spread, rate_of_spread_extended
from fbpengine.fbp.constants import FuelType, FUEL_TYPES, get_fuel_spec, lookup
from fbpengine.fbp.consumption import (
    crown_fuel_consumption,
    fire_intensity,
    total_fuel_consumption,
)
from fbpengine.fbp.time_lag import length_to_breadth_at_time, rate_of_spread_at_time

__all__ = [
    "rate_of_spread",
    "rate_of_spread_extended",
    "rate_of_spread_at_time",
    "length_to_breadth_at_time",
    "crown_fuel_consumption",
    "total_fuel_consumption",
    "fire_intensity",
    "FuelType",
    "FUEL_TYPES",
    "get_fuel_spec",
    "lookup",
]
