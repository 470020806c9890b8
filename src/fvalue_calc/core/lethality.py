"""
Lethality - Thermal-death-time formula for F-value calculations

Implements the general lethality equation F = t * 10^((T - T_ref) / z)
for a set of standard reference conditions.

Author: F-Value Calculator Project
Date: 2026-10-19
"""

from dataclasses import dataclass
import numpy as np


SECONDS_PER_MINUTE = 60.0


@dataclass(frozen=True)
class LethalityReference:
    """
    Reference condition of an F-value.

    Attributes:
        name: Short identifier (e.g. "F85")
        label: Display label used by the views
        T_ref: Reference temperature [°C]
        z: z-value [°C], temperature rise for a tenfold change in lethality
    """
    name: str
    label: str
    T_ref: float
    z: float


F85_REFERENCE = LethalityReference(name="F85", label="F85値", T_ref=85.0, z=7.8)
F0_REFERENCE = LethalityReference(name="F0", label="F0値", T_ref=121.1, z=10.0)

STANDARD_REFERENCES = (F85_REFERENCE, F0_REFERENCE)


def seconds_to_minutes(time_seconds: float) -> float:
    """Convert a heating time from seconds to minutes."""
    return time_seconds / SECONDS_PER_MINUTE


def lethality(time_minutes: float, T: float, reference: LethalityReference) -> float:
    """
    Compute the F-value of a constant-temperature hold.

    Args:
        time_minutes: Holding time [min]
        T: Holding temperature [°C]
        reference: Reference condition (T_ref, z)

    Returns:
        Equivalent minutes at the reference temperature [min]
    """
    if time_minutes == 0:
        return 0.0
    # float pow raises OverflowError, np.power saturates to inf
    with np.errstate(over="ignore"):
        factor = float(np.power(10.0, (T - reference.T_ref) / reference.z))
    return time_minutes * factor


def lethality_curve(
    time_seconds: float,
    temperatures: np.ndarray,
    reference: LethalityReference,
) -> np.ndarray:
    """
    Evaluate the F-value over an array of temperatures for a fixed time.

    Args:
        time_seconds: Holding time [s]
        temperatures: Holding temperatures [°C]
        reference: Reference condition (T_ref, z)

    Returns:
        Array of F-values [min], same shape as temperatures
    """
    T = np.asarray(temperatures, dtype=float)
    time_minutes = seconds_to_minutes(time_seconds)
    if time_minutes == 0:
        return np.zeros_like(T)
    with np.errstate(over="ignore"):
        return time_minutes * np.power(10.0, (T - reference.T_ref) / reference.z)
