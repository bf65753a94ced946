"""Shared dataclasses and type definitions for fbpengine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


class FireType(str, Enum):
    """FBP fire description class from crown fraction burned."""

    SURFACE = "surface"  # CFB < 0.1
    INTERMITTENT_CROWN = "intermittent_crown"  # 0.1 <= CFB < 0.9
    CONTINUOUS_CROWN = "continuous_crown"  # CFB >= 0.9


@dataclass(frozen=True)
class SpreadResult:
    """Output bundle of the rate of spread orchestrator.

    All fields are float64 arrays, one entry per input element.
    """

    ros: np.ndarray  # equilibrium rate of spread (m/min), floored at 1e-6
    cfb: np.ndarray  # crown fraction burned (0-1)
    csi: np.ndarray  # critical surface intensity (kW/m)
    rso: np.ndarray  # critical surface rate of spread (m/min)
