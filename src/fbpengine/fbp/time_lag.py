"""Fire growth since ignition.

A point-ignited fire accelerates toward its equilibrium spread rate and shape.
ST-X-3 Eq. 72 gives the acceleration parameter; Eq. 70 and GLC-X-10 Eq. 81
apply it to rate of spread and length-to-breadth ratio.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from fbpengine.fbp.constants import FuelType, FuelTypeLike, as_vector, fuel_type_codes

# Fuel types whose acceleration does not depend on crowning.
_CONSTANT_ALPHA = tuple(
    ft.value
    for ft in (FuelType.C1, FuelType.O1A, FuelType.O1B, FuelType.S1, FuelType.S2, FuelType.S3, FuelType.D1)
)


def acceleration_parameter(fuel_type: FuelTypeLike, cfb: npt.ArrayLike) -> np.ndarray:
    """Calculate the acceleration parameter alpha (ST-X-3 Eq. 72).

    alpha = 0.115 for C1, O1A, O1B, S1, S2, S3 and D1, otherwise
    alpha = 0.115 - 18.8 * CFB^2.5 * exp(-8 * CFB)

    Args:
        fuel_type: FBP fuel type code(s)
        cfb: Crown fraction burned (0-1)

    Returns:
        Acceleration parameter (1/hour)

    Raises:
        UnknownFuelType: If any fuel type code is unknown
    """
    codes = fuel_type_codes(fuel_type)
    cfb = as_vector(cfb, codes.size)
    with np.errstate(invalid="ignore"):
        crowning = 0.115 - 18.8 * cfb**2.5 * np.exp(-8.0 * cfb)
    return np.where(np.isin(codes, _CONSTANT_ALPHA), 0.115, crowning)


def rate_of_spread_at_time(
    fuel_type: FuelTypeLike, ros_eq: npt.ArrayLike, hr: npt.ArrayLike, cfb: npt.ArrayLike
) -> np.ndarray:
    """Calculate rate of spread at elapsed time since ignition.

    ST-X-3 Eq. 70: ROSt = ROSeq * (1 - exp(-alpha * HR))

    Args:
        fuel_type: FBP fuel type code(s)
        ros_eq: Equilibrium rate of spread (m/min)
        hr: Time since ignition (hours)
        cfb: Crown fraction burned (0-1)

    Returns:
        Rate of spread at time HR (m/min)
    """
    alpha = acceleration_parameter(fuel_type, cfb)
    ros_eq = as_vector(ros_eq, alpha.size)
    hr = as_vector(hr, alpha.size)
    return ros_eq * (1.0 - np.exp(-alpha * hr))


def length_to_breadth_at_time(
    fuel_type: FuelTypeLike, lb: npt.ArrayLike, hr: npt.ArrayLike, cfb: npt.ArrayLike
) -> np.ndarray:
    """Calculate length-to-breadth ratio at elapsed time since ignition.

    GLC-X-10 Eq. 81: LBt = (LB - 1) * (1 - exp(-alpha * HR)) + 1

    Args:
        fuel_type: FBP fuel type code(s)
        lb: Equilibrium length-to-breadth ratio
        hr: Time since ignition (hours)
        cfb: Crown fraction burned (0-1)

    Returns:
        Length-to-breadth ratio at time HR
    """
    alpha = acceleration_parameter(fuel_type, cfb)
    lb = as_vector(lb, alpha.size)
    hr = as_vector(hr, alpha.size)
    return (lb - 1.0) * (1.0 - np.exp(-alpha * hr)) + 1.0
