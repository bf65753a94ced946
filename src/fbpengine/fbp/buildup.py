"""Buildup effect on rate of spread.

ST-X-3 Eq. 54: BE = exp(50 * ln(q) * (1/BUI - 1/BUI0))

BE saturates toward exp(-50 * ln(q) / BUI0) at high BUI and equals 1 at
BUI = BUI0. Grass (q = 1) has no buildup sensitivity.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from fbpengine.fbp.constants import (
    FuelTypeLike,
    FuelTypeSpec,
    as_vector,
    fuel_type_codes,
    fuel_type_groups,
)


def buildup_multiplier(spec: FuelTypeSpec, bui: npt.ArrayLike) -> np.ndarray:
    """Calculate the BUI effect for a single fuel type.

    Args:
        spec: Fuel type specification
        bui: Buildup Index. Values <= 0 mean "not applicable" and give 1.0.

    Returns:
        BUI effect multiplier (dimensionless). NaN where BUI is NaN.
    """
    bui = as_vector(bui)
    if spec.q == 1.0:
        # ln(q) is 0, and 0 * (1/BUI) is NaN once a tiny BUI overflows 1/BUI.
        return np.where(np.isnan(bui), np.nan, 1.0)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        be = np.where(
            bui > 0.0,
            np.exp(50.0 * np.log(spec.q) * (1.0 / bui - 1.0 / spec.bui0)),
            1.0,
        )
    return np.where(np.isnan(bui), np.nan, be)


def buildup_effect(fuel_type: FuelTypeLike, bui: npt.ArrayLike) -> np.ndarray:
    """Calculate the BUI effect on rate of spread, element-wise by fuel type.

    Args:
        fuel_type: FBP fuel type code(s)
        bui: Buildup Index, same length as fuel_type

    Returns:
        BUI effect multipliers

    Raises:
        UnknownFuelType: If any fuel type code is unknown
    """
    codes = fuel_type_codes(fuel_type)
    bui = as_vector(bui, codes.size)
    be = np.empty(codes.shape, dtype=np.float64)
    for spec, mask in fuel_type_groups(codes):
        be[mask] = buildup_multiplier(spec, bui[mask])
    return be
