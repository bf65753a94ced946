"""Canadian Fire Behavior Prediction (FBP) rate of spread calculator.

Implements equations from:
    Forestry Canada Fire Danger Group (1992).
    Development and Structure of the Canadian Forest Fire Behavior
    Prediction System. Information Report ST-X-3.

    Wotton, B.M., Alexander, M.E., Taylor, S.W. (2009). Updates and revisions
    to the 1992 Canadian forest fire behavior prediction system.
    Information Report GLC-X-10.

All entry points take parallel vectors (one entry per observation) and
return float64 arrays. Elements are grouped by fuel type and each group is
computed by exactly one spread path: the C6 surface/crown sub-model or the
generic buildup-scaled path.
"""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from fbpengine.fbp.buildup import buildup_multiplier
from fbpengine.fbp.constants import (
    ROS_FLOOR,
    FuelTypeLike,
    FuelTypeSpec,
    as_vector,
    fuel_type_codes,
    fuel_type_groups,
)
from fbpengine.fbp.crown_fire import (
    critical_surface_intensity,
    crown_fraction_burned,
    crown_fraction_burned_c6,
    crown_rate_of_spread_c6,
    intermediate_surface_rate_of_spread_c6,
    rate_of_spread_c6,
    surface_fire_rate_of_spread,
    surface_rate_of_spread_c6,
)
from fbpengine.fbp.spread import fuel_initial_rate_of_spread
from fbpengine.types import SpreadResult

logger = logging.getLogger(__name__)


def _generic_spread(
    spec: FuelTypeSpec,
    isi: np.ndarray,
    bui: np.ndarray,
    fmc: np.ndarray,
    pc: np.ndarray,
    pdf: np.ndarray,
    cc: np.ndarray,
    rso: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Return (ROS, CFB) for a non-C6 fuel type."""
    rsi = fuel_initial_rate_of_spread(spec, isi, pc, pdf, cc)
    rss = buildup_multiplier(spec, bui) * rsi
    cfb = crown_fraction_burned(rss, rso)
    return rss, cfb


def _c6_spread(
    spec: FuelTypeSpec,
    isi: np.ndarray,
    bui: np.ndarray,
    fmc: np.ndarray,
    pc: np.ndarray,
    pdf: np.ndarray,
    cc: np.ndarray,
    rso: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Return (ROS, CFB) for C6, where ROS depends on CFB."""
    rsi = intermediate_surface_rate_of_spread_c6(isi)
    rsc = crown_rate_of_spread_c6(isi, fmc)
    rss = surface_rate_of_spread_c6(rsi, bui)
    cfb = crown_fraction_burned_c6(rsc, rss, rso)
    ros = rate_of_spread_c6(rsc, rss, cfb)
    return ros, cfb


def _spread_result(
    fuel_type: FuelTypeLike,
    isi: npt.ArrayLike,
    bui: npt.ArrayLike,
    fmc: npt.ArrayLike,
    sfc: npt.ArrayLike,
    pc: npt.ArrayLike,
    pdf: npt.ArrayLike,
    cc: npt.ArrayLike,
    cbh: npt.ArrayLike,
) -> SpreadResult:
    codes = fuel_type_codes(fuel_type)
    n = codes.size
    isi, bui, fmc, sfc, pc, pdf, cc, cbh = (
        as_vector(v, n) for v in (isi, bui, fmc, sfc, pc, pdf, cc, cbh)
    )

    csi = critical_surface_intensity(fmc, cbh)
    # Warning frames: this helper, the public entry point, then the user's call.
    rso = surface_fire_rate_of_spread(csi, sfc, stacklevel=4)

    ros = np.empty(n, dtype=np.float64)
    cfb = np.empty(n, dtype=np.float64)
    fuel_types = []
    for spec, mask in fuel_type_groups(codes):
        fuel_types.append(spec.code.value)
        spread = _c6_spread if spec.is_c6 else _generic_spread
        ros[mask], cfb[mask] = spread(
            spec, isi[mask], bui[mask], fmc[mask], pc[mask], pdf[mask], cc[mask], rso[mask]
        )
    logger.debug("Rate of spread for %d element(s), fuel types %s", n, ", ".join(fuel_types))

    ros = np.where(ros < ROS_FLOOR, ROS_FLOOR, ros)
    return SpreadResult(ros=ros, cfb=cfb, csi=csi, rso=rso)


def rate_of_spread_extended(
    fuel_type: FuelTypeLike,
    isi: npt.ArrayLike,
    bui: npt.ArrayLike,
    fmc: npt.ArrayLike,
    sfc: npt.ArrayLike,
    pc: npt.ArrayLike,
    pdf: npt.ArrayLike,
    cc: npt.ArrayLike,
    cbh: npt.ArrayLike,
) -> SpreadResult:
    """Calculate equilibrium rate of spread with its crown fire intermediates.

    Args:
        fuel_type: FBP fuel type code(s) (e.g., "C2" or ["C2", "M3"])
        isi: Initial Spread Index
        bui: Buildup Index (<= 0 means no buildup effect)
        fmc: Foliar moisture content (%)
        sfc: Surface fuel consumption (kg/m2)
        pc: Percent conifer (0-100, for M1/M2)
        pdf: Percent dead balsam fir (0-100, for M3/M4)
        cc: Percent grass curing (0-100, for O1A/O1B)
        cbh: Crown base height (m)

    Returns:
        SpreadResult with ROS (m/min), CFB, CSI (kW/m) and RSO (m/min)

    Raises:
        UnknownFuelType: If any fuel type code is unknown. Raised before any
            arithmetic, so no element of the call is computed.
    """
    return _spread_result(fuel_type, isi, bui, fmc, sfc, pc, pdf, cc, cbh)


def rate_of_spread(
    fuel_type: FuelTypeLike,
    isi: npt.ArrayLike,
    bui: npt.ArrayLike,
    fmc: npt.ArrayLike,
    sfc: npt.ArrayLike,
    pc: npt.ArrayLike,
    pdf: npt.ArrayLike,
    cc: npt.ArrayLike,
    cbh: npt.ArrayLike,
) -> np.ndarray:
    """Calculate equilibrium head fire rate of spread (m/min).

    See rate_of_spread_extended() for arguments.
    """
    return _spread_result(fuel_type, isi, bui, fmc, sfc, pc, pdf, cc, cbh).ros
