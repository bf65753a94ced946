"""Canadian Forest Fire Behaviour Prediction rate of spread engine.

The calculators in ``fbpengine.fbp`` take parallel numpy vectors. The
pydantic records in ``fbpengine.schemas`` are an optional front end that
validates one observation at a time and batches records into those vectors.
"""

from fbpengine.exceptions import DomainWarning, UnknownFuelType
from fbpengine.fbp import (
    FuelType,
    length_to_breadth_at_time,
    rate_of_spread,
    rate_of_spread_at_time,
    rate_of_spread_extended,
    total_fuel_consumption,
)
from fbpengine.schemas import (
    ConsumptionInputRecord,
    SpreadInputRecord,
    consumption_inputs_from_records,
    spread_inputs_from_records,
)
from fbpengine.types import FireType, SpreadResult

__all__ = [
    "rate_of_spread",
    "rate_of_spread_extended",
    "rate_of_spread_at_time",
    "length_to_breadth_at_time",
    "total_fuel_consumption",
    "FuelType",
    "FireType",
    "SpreadResult",
    "SpreadInputRecord",
    "ConsumptionInputRecord",
    "spread_inputs_from_records",
    "consumption_inputs_from_records",
    "UnknownFuelType",
    "DomainWarning",
]
