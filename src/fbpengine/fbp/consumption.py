"""Fuel consumption and fire intensity.

References:
    Forestry Canada Fire Danger Group (1992). Information Report ST-X-3,
    Eqs. 67 and 69.

    Wotton, B.M., Alexander, M.E., Taylor, S.W. (2009). Information Report
    GLC-X-10, Eqs. 66a-66c.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from fbpengine.fbp.constants import FuelType, FuelTypeLike, as_vector, fuel_type_codes

# Low heat of combustion (18000 kJ/kg) divided by 60 s/min.
_HEAT_FACTOR = 300.0


def crown_fuel_consumption(
    fuel_type: FuelTypeLike,
    cfl: npt.ArrayLike,
    cfb: npt.ArrayLike,
    pc: npt.ArrayLike,
    pdf: npt.ArrayLike,
) -> np.ndarray:
    """Calculate crown fuel consumption.

    CFC = CFL * CFB, scaled by PC/100 for M1/M2 and PDF/100 for M3/M4.

    Args:
        fuel_type: FBP fuel type code(s)
        cfl: Crown fuel load (kg/m2)
        cfb: Crown fraction burned (0-1)
        pc: Percent conifer (0-100)
        pdf: Percent dead balsam fir (0-100)

    Returns:
        Crown fuel consumption (kg/m2)
    """
    codes = fuel_type_codes(fuel_type)
    n = codes.size
    cfl, cfb, pc, pdf = (as_vector(v, n) for v in (cfl, cfb, pc, pdf))
    cfc = cfl * cfb
    cfc = np.where(np.isin(codes, (FuelType.M1.value, FuelType.M2.value)), pc / 100.0 * cfc, cfc)
    cfc = np.where(np.isin(codes, (FuelType.M3.value, FuelType.M4.value)), pdf / 100.0 * cfc, cfc)
    return cfc


def total_fuel_consumption(
    fuel_type: FuelTypeLike,
    cfl: npt.ArrayLike,
    cfb: npt.ArrayLike,
    sfc: npt.ArrayLike,
    pc: npt.ArrayLike,
    pdf: npt.ArrayLike,
    option: str = "TFC",
) -> np.ndarray:
    """Calculate total (surface + crown) fuel consumption.

    ST-X-3 Eq. 67: TFC = SFC + CFC

    Args:
        fuel_type: FBP fuel type code(s)
        cfl: Crown fuel load (kg/m2)
        cfb: Crown fraction burned (0-1)
        sfc: Surface fuel consumption (kg/m2)
        pc: Percent conifer (0-100)
        pdf: Percent dead balsam fir (0-100)
        option: "TFC" for total consumption or "CFC" for crown only

    Returns:
        TFC or CFC (kg/m2)

    Raises:
        ValueError: If option is not "TFC" or "CFC"
    """
    if option not in ("TFC", "CFC"):
        raise ValueError(f"option must be 'TFC' or 'CFC', got {option!r}")
    cfc = crown_fuel_consumption(fuel_type, cfl, cfb, pc, pdf)
    if option == "CFC":
        return cfc
    return as_vector(sfc, cfc.size) + cfc


def fire_intensity(fc: npt.ArrayLike, ros: npt.ArrayLike) -> np.ndarray:
    """Calculate Byram fire intensity (ST-X-3 Eq. 69).

    FI = 300 * FC * ROS

    Args:
        fc: Fuel consumption (kg/m2), TFC for head fire intensity
        ros: Rate of spread (m/min)

    Returns:
        Fire intensity (kW/m)
    """
    return _HEAT_FACTOR * as_vector(fc) * as_vector(ros)
