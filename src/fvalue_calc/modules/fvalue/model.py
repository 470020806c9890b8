"""
F-Value Model - Lethality of a constant-temperature heating step

Computes F85 (85 °C, z = 7.8) and F0 (121.1 °C, z = 10) from a heating
time and temperature.

Author: F-Value Calculator Project
Date: 2026-10-19
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict

from fvalue_calc.core.lethality import (
    F0_REFERENCE,
    F85_REFERENCE,
    lethality,
    seconds_to_minutes,
)

logger = logging.getLogger(__name__)


@dataclass
class FValueResult:
    """
    Result of an F-value calculation.

    Attributes:
        f85: F-value at 85 °C, z = 7.8 [min]
        f0: F-value at 121.1 °C, z = 10 [min]
        time_seconds: Heating time used [s]
        temperature_celsius: Heating temperature used [°C]
        time_minutes: Heating time used [min]
        flags: Diagnostic flags dictionary
    """
    f85: float
    f0: float
    time_seconds: float
    temperature_celsius: float
    time_minutes: float
    flags: Dict[str, bool] = field(default_factory=dict)


class FValueModel:
    """
    Lethality model of a heating step held at one temperature.

    Values are returned unrounded; formatting belongs to the view.
    """

    def solve(self, time_seconds: float, temperature_celsius: float) -> FValueResult:
        """
        Compute both F-values.

        Args:
            time_seconds: Heating time [s] (>= 0)
            temperature_celsius: Heating temperature [°C]

        Returns:
            FValueResult with both F-values and diagnostic flags

        Raises:
            ValueError: If time is negative or either input is not finite
        """
        if not math.isfinite(time_seconds) or time_seconds < 0:
            raise ValueError(
                f"Heating time must be a finite value >= 0 s, got {time_seconds}"
            )
        if not math.isfinite(temperature_celsius):
            raise ValueError(
                f"Heating temperature must be finite, got {temperature_celsius}"
            )

        time_minutes = seconds_to_minutes(time_seconds)

        f85 = lethality(time_minutes, temperature_celsius, F85_REFERENCE)
        f0 = lethality(time_minutes, temperature_celsius, F0_REFERENCE)

        flags = {
            "zero_time": time_seconds == 0,
            "non_finite": not (math.isfinite(f85) and math.isfinite(f0)),
            "below_reference": temperature_celsius < F0_REFERENCE.T_ref,
        }

        if flags["non_finite"]:
            logger.warning(
                "F-value overflow at T=%s °C, t=%s s (F85=%s, F0=%s)",
                temperature_celsius, time_seconds, f85, f0,
            )

        return FValueResult(
            f85=f85,
            f0=f0,
            time_seconds=time_seconds,
            temperature_celsius=temperature_celsius,
            time_minutes=time_minutes,
            flags=flags,
        )
