"""Initial rate of spread (RSI) by fuel type.

Each fuel type's ``spread_model`` selects one equation family:

    power_law  RSI = a * (1 - exp(-b * ISI))^c0          ST-X-3 Eq. 26
    mixedwood  conifer/deciduous blend by PC or PDF      ST-X-3 Eq. 27,
                                                         GLC-X-10 Eqs. 29-33
    grass      power law scaled by the curing factor     ST-X-3 Eq. 36,
                                                         GLC-X-10 Eq. 35b
    c6         C6 intermediate surface spread            ST-X-3 Eq. 62
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from fbpengine.fbp.constants import (
    ROS_FLOOR,
    FuelTypeLike,
    FuelTypeSpec,
    SpreadModel,
    as_vector,
    fuel_type_codes,
    fuel_type_groups,
)
from fbpengine.fbp.crown_fire import intermediate_surface_rate_of_spread_c6


def grass_curing_factor(cc: npt.ArrayLike) -> np.ndarray:
    """Calculate the grass curing factor for O1A/O1B fuel types.

    GLC-X-10 Eq. 35b:
        if CC < 58.8: CF = 0.005 * (exp(0.061 * CC) - 1)
        else:         CF = 0.176 + 0.02 * (CC - 58.8)

    Args:
        cc: Percent curing (0-100). 0=green, 100=fully cured.

    Returns:
        Curing factor
    """
    cc = as_vector(cc)
    return np.where(cc < 58.8, 0.005 * (np.exp(0.061 * cc) - 1.0), 0.176 + 0.02 * (cc - 58.8))


def _power_law(spec: FuelTypeSpec, isi: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore"):
        return spec.a * (1.0 - np.exp(-spec.b * isi)) ** spec.c0


def _standalone(spec: FuelTypeSpec, isi: np.ndarray) -> np.ndarray:
    # A mixedwood component spreads as its own fuel type, floor included.
    rate = _power_law(spec, isi)
    return np.where(rate < ROS_FLOOR, ROS_FLOOR, rate)


def _mixedwood(
    spec: FuelTypeSpec, isi: np.ndarray, pc: np.ndarray, pdf: np.ndarray, cc: np.ndarray
) -> np.ndarray:
    blend = spec.blend
    weight = (pc if blend.weight == "pc" else pdf) / 100.0
    if blend.primary_is_standalone:
        primary = _standalone(blend.primary, isi)
    else:
        primary = _power_law(blend.primary, isi)
    deciduous = _standalone(blend.deciduous, isi)
    return weight * primary + blend.deciduous_factor * (1.0 - weight) * deciduous


def _grass(
    spec: FuelTypeSpec, isi: np.ndarray, pc: np.ndarray, pdf: np.ndarray, cc: np.ndarray
) -> np.ndarray:
    return _power_law(spec, isi) * grass_curing_factor(cc)


_RSI_MODELS = {
    SpreadModel.POWER_LAW: lambda spec, isi, pc, pdf, cc: _power_law(spec, isi),
    SpreadModel.MIXEDWOOD: _mixedwood,
    SpreadModel.GRASS: _grass,
    SpreadModel.C6: lambda spec, isi, pc, pdf, cc: intermediate_surface_rate_of_spread_c6(isi),
}


def fuel_initial_rate_of_spread(
    spec: FuelTypeSpec,
    isi: np.ndarray,
    pc: np.ndarray,
    pdf: np.ndarray,
    cc: np.ndarray,
) -> np.ndarray:
    """Calculate RSI for elements that all share one fuel type.

    Args:
        spec: Fuel type specification
        isi: Initial Spread Index. Negative values give NaN.
        pc: Percent conifer (0-100, for M1/M2)
        pdf: Percent dead balsam fir (0-100, for M3/M4)
        cc: Percent grass curing (0-100, for O1A/O1B)

    Returns:
        Initial rate of spread (m/min)
    """
    isi = np.where(isi < 0.0, np.nan, isi)
    return _RSI_MODELS[spec.spread_model](spec, isi, pc, pdf, cc)


def initial_rate_of_spread(
    fuel_type: FuelTypeLike,
    isi: npt.ArrayLike,
    pc: npt.ArrayLike = 50.0,
    pdf: npt.ArrayLike = 35.0,
    cc: npt.ArrayLike = 80.0,
) -> np.ndarray:
    """Calculate initial rate of spread, element-wise by fuel type.

    Args:
        fuel_type: FBP fuel type code(s)
        isi: Initial Spread Index
        pc: Percent conifer (0-100, for M1/M2)
        pdf: Percent dead balsam fir (0-100, for M3/M4)
        cc: Percent grass curing (0-100, for O1A/O1B)

    Returns:
        Initial rate of spread (m/min), one value per element

    Raises:
        UnknownFuelType: If any fuel type code is unknown
    """
    codes = fuel_type_codes(fuel_type)
    n = codes.size
    isi, pc, pdf, cc = (as_vector(v, n) for v in (isi, pc, pdf, cc))
    rsi = np.empty(n, dtype=np.float64)
    for spec, mask in fuel_type_groups(codes):
        rsi[mask] = fuel_initial_rate_of_spread(spec, isi[mask], pc[mask], pdf[mask], cc[mask])
    return rsi
