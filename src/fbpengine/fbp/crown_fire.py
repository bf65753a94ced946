"""Crown fire initiation and crown/surface spread decomposition.

Implements the FBP crown fire equations: Van Wagner's (1977) critical surface
intensity for crown fire initiation, the matching critical surface rate of
spread, crown fraction burned, and the separate surface and crown spread
sub-model used for the C6 conifer plantation fuel type.

References:
    Van Wagner, C.E. (1977). Conditions for the start and spread of crown fire.
    Canadian Journal of Forest Research, 7(1), 23-34.

    Forestry Canada Fire Danger Group (1992). Information Report ST-X-3,
    Eqs. 56-64.
"""

from __future__ import annotations

import warnings

import numpy as np
import numpy.typing as npt

from fbpengine.exceptions import DomainWarning
from fbpengine.fbp.buildup import buildup_multiplier
from fbpengine.fbp.constants import FUEL_TYPES, FuelType, as_vector
from fbpengine.types import FireType


# Average foliar moisture effect used to normalise C6 crown spread (Eq. 61).
_FME_AVG = 0.778


def critical_surface_intensity(fmc: npt.ArrayLike, cbh: npt.ArrayLike) -> np.ndarray:
    """Calculate critical surface fire intensity for crown fire initiation.

    Van Wagner (1977), ST-X-3 Eq. 56:
        CSI = 0.001 * CBH^1.5 * (460 + 25.9 * FMC)^1.5

    Args:
        fmc: Foliar moisture content (%)
        cbh: Crown base height (m)

    Returns:
        Critical surface intensity (kW/m). 0 where CBH is 0 (no canopy).
    """
    fmc = as_vector(fmc)
    cbh = as_vector(cbh)
    with np.errstate(invalid="ignore"):
        return 0.001 * cbh**1.5 * (460.0 + 25.9 * fmc) ** 1.5


def surface_fire_rate_of_spread(
    csi: npt.ArrayLike, sfc: npt.ArrayLike, stacklevel: int = 2
) -> np.ndarray:
    """Calculate the critical surface fire rate of spread.

    ST-X-3 Eq. 57: RSO = CSI / (300 * SFC)

    Args:
        csi: Critical surface intensity (kW/m)
        sfc: Surface fuel consumption (kg/m2)
        stacklevel: Passed to warnings.warn so the DomainWarning points at
            the caller of the public entry point

    Returns:
        RSO (m/min). Where SFC <= 0 the surface fire can never reach the
        crowning threshold and RSO is +inf; a DomainWarning is issued.
    """
    csi = as_vector(csi)
    sfc = as_vector(sfc)
    degenerate = sfc <= 0.0
    if np.any(degenerate):
        warnings.warn(
            f"{int(np.count_nonzero(degenerate))} element(s) with SFC <= 0; "
            "critical surface rate of spread set to inf",
            DomainWarning,
            stacklevel=stacklevel,
        )
    with np.errstate(divide="ignore", invalid="ignore"):
        rso = csi / (300.0 * sfc)
    return np.where(degenerate, np.inf, rso)


def crown_fraction_burned(rss: npt.ArrayLike, rso: npt.ArrayLike) -> np.ndarray:
    """Calculate crown fraction burned (CFB).

    ST-X-3 Eq. 58: CFB = 1 - exp(-0.23 * (RSS - RSO)) when RSS > RSO, else 0.

    Args:
        rss: Buildup-adjusted surface rate of spread (m/min)
        rso: Critical surface rate of spread (m/min)

    Returns:
        Crown fraction burned (0.0 to 1.0), NaN where an input is NaN
    """
    rss = as_vector(rss)
    rso = as_vector(rso)
    with np.errstate(invalid="ignore", over="ignore"):
        cfb = np.where(rss > rso, 1.0 - np.exp(-0.23 * (rss - rso)), 0.0)
    cfb = np.clip(cfb, 0.0, 1.0)
    return np.where(np.isnan(rss) | np.isnan(rso), np.nan, cfb)


def fire_type(cfb: npt.ArrayLike) -> list[FireType | None]:
    """Classify fire type from crown fraction burned.

    Args:
        cfb: Crown fraction burned (0-1)

    Returns:
        FireType for each element, None where CFB is NaN (missing inputs)
    """
    result: list[FireType | None] = []
    for value in as_vector(cfb):
        if np.isnan(value):
            result.append(None)
        elif value < 0.1:
            result.append(FireType.SURFACE)
        elif value < 0.9:
            result.append(FireType.INTERMITTENT_CROWN)
        else:
            result.append(FireType.CONTINUOUS_CROWN)
    return result


# C6 conifer plantation sub-model.
# Crown and surface fires in C6 spread at materially different rates, so the
# final ROS blends a separate crown rate with the surface rate by CFB.


def intermediate_surface_rate_of_spread_c6(isi: npt.ArrayLike) -> np.ndarray:
    """Calculate C6 intermediate surface rate of spread (ST-X-3 Eq. 62).

    RSI = 30 * (1 - exp(-0.08 * ISI))^3
    """
    isi = as_vector(isi)
    isi = np.where(isi < 0.0, np.nan, isi)
    return 30.0 * (1.0 - np.exp(-0.08 * isi)) ** 3.0


def crown_rate_of_spread_c6(isi: npt.ArrayLike, fmc: npt.ArrayLike) -> np.ndarray:
    """Calculate C6 crown rate of spread.

    ST-X-3 Eqs. 60-61:
        FME = 1000 * (1.5 - 0.00275 * FMC)^4 / (460 + 25.9 * FMC)
        RSC = 60 * (1 - exp(-0.0497 * ISI)) * FME / 0.778

    Args:
        isi: Initial Spread Index
        fmc: Foliar moisture content (%)

    Returns:
        Crown rate of spread (m/min)
    """
    isi = as_vector(isi)
    fmc = as_vector(fmc)
    isi = np.where(isi < 0.0, np.nan, isi)
    with np.errstate(divide="ignore", invalid="ignore"):
        fme = 1000.0 * (1.5 - 0.00275 * fmc) ** 4.0 / (460.0 + 25.9 * fmc)
    return 60.0 * (1.0 - np.exp(-0.0497 * isi)) * fme / _FME_AVG


def surface_rate_of_spread_c6(rsi: npt.ArrayLike, bui: npt.ArrayLike) -> np.ndarray:
    """Apply the C6 buildup effect to the intermediate surface spread (Eq. 63)."""
    return as_vector(rsi) * buildup_multiplier(FUEL_TYPES[FuelType.C6], bui)


def crown_fraction_burned_c6(
    rsc: npt.ArrayLike, rss: npt.ArrayLike, rso: npt.ArrayLike
) -> np.ndarray:
    """Calculate C6 crown fraction burned.

    Same Eq. 58 form as other fuel types, evaluated on the C6 surface spread.
    RSC does not enter the fraction.
    """
    return crown_fraction_burned(rss, rso)


def rate_of_spread_c6(rsc: npt.ArrayLike, rss: npt.ArrayLike, cfb: npt.ArrayLike) -> np.ndarray:
    """Combine C6 surface and crown spread (ST-X-3 Eq. 64).

    ROS = RSS + CFB * (RSC - RSS) when RSC > RSS, otherwise RSS.

    Args:
        rsc: Crown rate of spread (m/min)
        rss: Surface rate of spread (m/min)
        cfb: Crown fraction burned

    Returns:
        C6 rate of spread (m/min)
    """
    rsc = as_vector(rsc)
    rss = as_vector(rss)
    cfb = as_vector(cfb)
    ros = np.where(rsc > rss, rss + cfb * (rsc - rss), rss)
    return np.where(np.isnan(rsc), np.nan, ros)
