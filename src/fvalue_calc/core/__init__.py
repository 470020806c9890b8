"""Core lethality and input-validation components of the F-value calculator"""

from fvalue_calc.core.lethality import (
    LethalityReference,
    F85_REFERENCE,
    F0_REFERENCE,
    STANDARD_REFERENCES,
    lethality,
    lethality_curve,
    seconds_to_minutes,
)
from fvalue_calc.core.input_parser import (
    ParsedInput,
    parse_number,
    parse_inputs,
    can_calculate,
)

__all__ = [
    "LethalityReference",
    "F85_REFERENCE",
    "F0_REFERENCE",
    "STANDARD_REFERENCES",
    "lethality",
    "lethality_curve",
    "seconds_to_minutes",
    "ParsedInput",
    "parse_number",
    "parse_inputs",
    "can_calculate",
]
