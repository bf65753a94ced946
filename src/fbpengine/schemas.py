"""Pydantic input records for the FBP engine.

The engine itself works on parallel numpy vectors. These models validate one
observation at a time (ranges, fuel type code, defaults) and turn a batch of
records into the keyword arrays the calculator functions accept:

    records = [SpreadInputRecord(fuel_type="C2", isi=10, bui=50, sfc=5)]
    result = rate_of_spread_extended(**spread_inputs_from_records(records))
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from fbpengine.fbp.constants import FuelType, get_fuel_spec


class SpreadInputRecord(BaseModel):
    """One observation of rate of spread inputs."""

    model_config = ConfigDict(frozen=True)

    fuel_type: FuelType = Field(..., description="FBP fuel type code")
    isi: float = Field(..., ge=0, description="Initial Spread Index")
    bui: float = Field(
        ..., ge=-1, description="Buildup Index (<= 0 disables the buildup effect)"
    )
    fmc: float = Field(default=100.0, gt=0, le=300, description="Foliar moisture content (%)")
    sfc: float = Field(..., ge=0, description="Surface fuel consumption (kg/m2)")
    pc: float = Field(default=50.0, ge=0, le=100, description="Percent conifer (%)")
    pdf: float = Field(default=35.0, ge=0, le=100, description="Percent dead balsam fir (%)")
    cc: float = Field(default=80.0, ge=0, le=100, description="Grass curing (%)")
    cbh: float | None = Field(
        default=None, ge=0, description="Crown base height (m); fuel type default if omitted"
    )

    @field_validator("fuel_type", mode="before")
    @classmethod
    def _known_fuel_type(cls, value: object) -> FuelType:
        return get_fuel_spec(value).code

    def resolved_cbh(self) -> float:
        return get_fuel_spec(self.fuel_type).cbh if self.cbh is None else self.cbh


class ConsumptionInputRecord(BaseModel):
    """One observation of fuel consumption inputs."""

    model_config = ConfigDict(frozen=True)

    fuel_type: FuelType = Field(..., description="FBP fuel type code")
    cfb: float = Field(..., ge=0, le=1, description="Crown fraction burned")
    sfc: float = Field(..., ge=0, description="Surface fuel consumption (kg/m2)")
    cfl: float | None = Field(
        default=None, ge=0, description="Crown fuel load (kg/m2); fuel type default if omitted"
    )
    pc: float = Field(default=50.0, ge=0, le=100, description="Percent conifer (%)")
    pdf: float = Field(default=35.0, ge=0, le=100, description="Percent dead balsam fir (%)")

    @field_validator("fuel_type", mode="before")
    @classmethod
    def _known_fuel_type(cls, value: object) -> FuelType:
        return get_fuel_spec(value).code

    def resolved_cfl(self) -> float:
        return get_fuel_spec(self.fuel_type).cfl if self.cfl is None else self.cfl


def spread_inputs_from_records(records: Sequence[SpreadInputRecord]) -> dict[str, np.ndarray]:
    """Build rate_of_spread_extended() keyword arrays from validated records."""
    return {
        "fuel_type": np.array([r.fuel_type.value for r in records], dtype="<U3"),
        "isi": np.array([r.isi for r in records], dtype=np.float64),
        "bui": np.array([r.bui for r in records], dtype=np.float64),
        "fmc": np.array([r.fmc for r in records], dtype=np.float64),
        "sfc": np.array([r.sfc for r in records], dtype=np.float64),
        "pc": np.array([r.pc for r in records], dtype=np.float64),
        "pdf": np.array([r.pdf for r in records], dtype=np.float64),
        "cc": np.array([r.cc for r in records], dtype=np.float64),
        "cbh": np.array([r.resolved_cbh() for r in records], dtype=np.float64),
    }


def consumption_inputs_from_records(
    records: Sequence[ConsumptionInputRecord],
) -> dict[str, np.ndarray]:
    """Build total_fuel_consumption() keyword arrays from validated records."""
    return {
        "fuel_type": np.array([r.fuel_type.value for r in records], dtype="<U3"),
        "cfl": np.array([r.resolved_cfl() for r in records], dtype=np.float64),
        "cfb": np.array([r.cfb for r in records], dtype=np.float64),
        "sfc": np.array([r.sfc for r in records], dtype=np.float64),
        "pc": np.array([r.pc for r in records], dtype=np.float64),
        "pdf": np.array([r.pdf for r in records], dtype=np.float64),
    }
