"""
fvalue_calc - F-value calculator for thermal process evaluation

Converts a heating time and temperature into the lethality values
F85 (85 °C, z = 7.8) and F0 (121.1 °C, z = 10).

Author: F-Value Calculator Project
Date: 2026-10-19
"""

__version__ = "0.1.0"

from fvalue_calc.core.lethality import F0_REFERENCE, F85_REFERENCE, LethalityReference
from fvalue_calc.core.input_parser import can_calculate, parse_inputs
from fvalue_calc.modules.fvalue import FValueController, FValueModel, FValueResult

__all__ = [
    "F0_REFERENCE",
    "F85_REFERENCE",
    "LethalityReference",
    "can_calculate",
    "parse_inputs",
    "FValueController",
    "FValueModel",
    "FValueResult",
]
