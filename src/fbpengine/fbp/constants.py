"""Single source of truth for all FBP fuel type parameters.

All fuel type data is defined here as frozen dataclasses. Every other module
that needs fuel parameters imports from this file. Each fuel type carries a
``spread_model`` tag, which is the one place the engine branches on fuel type.

Parameters from:
    Forestry Canada Fire Danger Group (1992).
    Development and Structure of the Canadian Forest Fire Behavior
    Prediction System. Information Report ST-X-3.

    Wotton, B.M., Alexander, M.E., Taylor, S.W. (2009). Updates and revisions
    to the 1992 Canadian forest fire behavior prediction system.
    Information Report GLC-X-10.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence, Union

import numpy as np
import numpy.typing as npt

from fbpengine.exceptions import UnknownFuelType


class FuelType(str, Enum):
    """Canadian FBP fuel type codes."""

    C1 = "C1"
    C2 = "C2"
    C3 = "C3"
    C4 = "C4"
    C5 = "C5"
    C6 = "C6"
    C7 = "C7"
    D1 = "D1"
    M1 = "M1"
    M2 = "M2"
    M3 = "M3"
    M4 = "M4"
    S1 = "S1"
    S2 = "S2"
    S3 = "S3"
    O1A = "O1A"
    O1B = "O1B"


class SpreadModel(str, Enum):
    """Equation family used to compute the initial rate of spread."""

    POWER_LAW = "power_law"
    MIXEDWOOD = "mixedwood"
    GRASS = "grass"
    C6 = "c6"


@dataclass(frozen=True)
class MixedwoodBlend:
    """How a mixedwood blends its conifer and deciduous spread rates.

    Attributes:
        primary: Coefficient record of the conifer component (C2 for M1/M2,
            the mixedwood's own record for M3/M4)
        deciduous: Coefficient record of the deciduous component (D1)
        weight: Input that weights the primary component, "pc" or "pdf"
        deciduous_factor: Damping on the deciduous component (0.2 when green)
        primary_is_standalone: True when the primary component is evaluated as
            a standalone fuel type (floored like a final ROS)
    """

    primary: FuelTypeSpec
    deciduous: FuelTypeSpec
    weight: str
    deciduous_factor: float
    primary_is_standalone: bool


@dataclass(frozen=True)
class FuelTypeSpec:
    """Complete specification for a single FBP fuel type.

    Attributes:
        code: FBP fuel type code (e.g., "C2")
        name: Full descriptive name
        group: Fuel group ("conifer", "deciduous", "mixedwood", "grass", "slash")
        spread_model: Equation family for the initial rate of spread
        a: ROS equation parameter a (m/min)
        b: ROS equation parameter b
        c0: ROS equation parameter c0
        q: BUI effect parameter q (dimensionless)
        bui0: BUI effect parameter BUI_0
        cbh: Default crown base height (m), 0 for non-crown fuel types
        cfl: Default crown fuel load (kg/m2), 0 for non-crown fuel types
        blend: Component records for mixedwood fuel types, else None
    """

    code: FuelType
    name: str
    group: str
    spread_model: SpreadModel
    a: float
    b: float
    c0: float
    q: float
    bui0: float
    cbh: float
    cfl: float
    blend: MixedwoodBlend | None = None

    @property
    def is_c6(self) -> bool:
        return self.spread_model is SpreadModel.C6


def _spec(
    code: FuelType,
    name: str,
    group: str,
    a: float,
    b: float,
    c0: float,
    q: float,
    bui0: float,
    cbh: float,
    cfl: float,
    model: SpreadModel = SpreadModel.POWER_LAW,
) -> FuelTypeSpec:
    return FuelTypeSpec(
        code=code, name=name, group=group, spread_model=model,
        a=a, b=b, c0=c0, q=q, bui0=bui0, cbh=cbh, cfl=cfl,
    )


_C2 = _spec(FuelType.C2, "Boreal Spruce", "conifer", 110, 0.0282, 1.5, 0.70, 64, 3.0, 0.80)
_D1 = _spec(FuelType.D1, "Leafless Aspen", "deciduous", 30, 0.0232, 1.6, 0.90, 32, 0.0, 0.0)
_M3 = _spec(
    FuelType.M3, "Dead Balsam Fir Mixedwood - Leafless", "mixedwood",
    120, 0.0572, 1.4, 0.80, 50, 6.0, 0.80,
)
_M4 = _spec(
    FuelType.M4, "Dead Balsam Fir Mixedwood - Green", "mixedwood",
    100, 0.0404, 1.48, 0.80, 50, 6.0, 0.80,
)


def _mixedwood(spec: FuelTypeSpec, blend: MixedwoodBlend) -> FuelTypeSpec:
    return FuelTypeSpec(
        code=spec.code, name=spec.name, group=spec.group,
        spread_model=SpreadModel.MIXEDWOOD,
        a=spec.a, b=spec.b, c0=spec.c0, q=spec.q, bui0=spec.bui0,
        cbh=spec.cbh, cfl=spec.cfl, blend=blend,
    )


# All 17 Canadian FBP fuel types.
# Parameters from ST-X-3 Tables 4-6 and GLC-X-10.
FUEL_TYPES: dict[FuelType, FuelTypeSpec] = {
    FuelType.C1: _spec(
        FuelType.C1, "Spruce-Lichen Woodland", "conifer",
        90, 0.0649, 4.5, 0.90, 72, 2.0, 0.75,
    ),
    FuelType.C2: _C2,
    FuelType.C3: _spec(
        FuelType.C3, "Mature Jack or Lodgepole Pine", "conifer",
        110, 0.0444, 3.0, 0.75, 62, 8.0, 1.15,
    ),
    FuelType.C4: _spec(
        FuelType.C4, "Immature Jack or Lodgepole Pine", "conifer",
        110, 0.0293, 1.5, 0.80, 66, 4.0, 1.20,
    ),
    FuelType.C5: _spec(
        FuelType.C5, "Red and White Pine", "conifer",
        30, 0.0697, 4.0, 0.80, 56, 18.0, 1.20,
    ),
    FuelType.C6: _spec(
        FuelType.C6, "Conifer Plantation", "conifer",
        30, 0.0800, 3.0, 0.80, 62, 7.0, 1.80, model=SpreadModel.C6,
    ),
    FuelType.C7: _spec(
        FuelType.C7, "Ponderosa Pine/Douglas-fir", "conifer",
        45, 0.0305, 2.0, 0.85, 106, 10.0, 0.50,
    ),
    FuelType.D1: _D1,
    FuelType.M1: _mixedwood(
        _spec(FuelType.M1, "Boreal Mixedwood - Leafless", "mixedwood", 0, 0.0, 0.0, 0.80, 50, 6.0, 0.80),
        MixedwoodBlend(primary=_C2, deciduous=_D1, weight="pc",
                       deciduous_factor=1.0, primary_is_standalone=True),
    ),
    FuelType.M2: _mixedwood(
        _spec(FuelType.M2, "Boreal Mixedwood - Green", "mixedwood", 0, 0.0, 0.0, 0.80, 50, 6.0, 0.80),
        MixedwoodBlend(primary=_C2, deciduous=_D1, weight="pc",
                       deciduous_factor=0.2, primary_is_standalone=True),
    ),
    FuelType.M3: _mixedwood(
        _M3,
        MixedwoodBlend(primary=_M3, deciduous=_D1, weight="pdf",
                       deciduous_factor=1.0, primary_is_standalone=False),
    ),
    FuelType.M4: _mixedwood(
        _M4,
        MixedwoodBlend(primary=_M4, deciduous=_D1, weight="pdf",
                       deciduous_factor=0.2, primary_is_standalone=False),
    ),
    FuelType.S1: _spec(
        FuelType.S1, "Jack or Lodgepole Pine Slash", "slash",
        75, 0.0297, 1.3, 0.75, 38, 0.0, 0.0,
    ),
    FuelType.S2: _spec(
        FuelType.S2, "White Spruce/Balsam Slash", "slash",
        40, 0.0438, 1.7, 0.75, 63, 0.0, 0.0,
    ),
    FuelType.S3: _spec(
        FuelType.S3, "Coastal Cedar/Hemlock/Douglas-fir Slash", "slash",
        55, 0.0829, 3.2, 0.75, 31, 0.0, 0.0,
    ),
    FuelType.O1A: _spec(
        FuelType.O1A, "Matted Grass", "grass",
        190, 0.0310, 1.4, 1.0, 1, 0.0, 0.0, model=SpreadModel.GRASS,
    ),
    FuelType.O1B: _spec(
        FuelType.O1B, "Standing Grass", "grass",
        250, 0.0350, 1.7, 1.0, 1, 0.0, 0.0, model=SpreadModel.GRASS,
    ),
}

_BY_CODE: dict[str, FuelType] = {ft.value: ft for ft in FuelType}

# A single fuel type code or any sequence or array of them.
FuelTypeLike = Union[FuelType, str, Sequence[Union[FuelType, str]], np.ndarray]


def get_fuel_spec(fuel_type: FuelType | str) -> FuelTypeSpec:
    """Look up fuel type specification.

    Args:
        fuel_type: FuelType enum or string code (e.g., "C2")

    Returns:
        FuelTypeSpec for the given fuel type

    Raises:
        UnknownFuelType: If fuel type is not one of the 17 FBP codes
    """
    if isinstance(fuel_type, FuelType):
        return FUEL_TYPES[fuel_type]
    try:
        return FUEL_TYPES[_BY_CODE[fuel_type]]
    except (KeyError, TypeError):
        raise UnknownFuelType([str(fuel_type)]) from None


def lookup(fuel_type: FuelType | str) -> tuple[float, float, float]:
    """Return the (a, b, c0) rate of spread coefficients for a fuel type."""
    spec = get_fuel_spec(fuel_type)
    return spec.a, spec.b, spec.c0


def fuel_type_codes(fuel_type: FuelTypeLike) -> np.ndarray:
    """Validate fuel type input and return it as a 1-D array of codes.

    Accepts a single code, a FuelType member, or any sequence/array of them.
    Every element is checked before anything else happens, so a bad code
    fails the whole call.

    Raises:
        UnknownFuelType: If any element is not one of the 17 FBP codes
    """
    raw = np.atleast_1d(np.asarray(fuel_type, dtype=object)).ravel()
    codes = []
    unknown = []
    for item in raw:
        code = item.value if isinstance(item, FuelType) else item
        if not isinstance(code, str) or code not in _BY_CODE:
            if str(code) not in unknown:
                unknown.append(str(code))
        codes.append(code)
    if unknown:
        raise UnknownFuelType(unknown)
    return np.array(codes, dtype="<U3")


# Floor applied to every rate of spread the engine returns (m/min).
ROS_FLOOR = 1e-6


def fuel_type_groups(codes: np.ndarray) -> Iterator[tuple[FuelTypeSpec, np.ndarray]]:
    """Yield (spec, mask) for each distinct fuel type present in ``codes``."""
    for code in np.unique(codes):
        yield FUEL_TYPES[_BY_CODE[code]], codes == code


def as_vector(values: npt.ArrayLike, size: int | None = None) -> np.ndarray:
    """Coerce a scalar or sequence to a 1-D float64 array.

    With ``size``, a length-1 input is repeated to that length; any other
    length mismatch raises ValueError.
    """
    vector = np.atleast_1d(np.asarray(values, dtype=np.float64)).ravel()
    if size is None:
        return vector
    return np.broadcast_to(vector, (size,))
