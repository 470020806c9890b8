"""
Input Parser - Validation of raw form text

Turns the two text fields of the calculator form into numbers.
Invalid input is reported as None, never as an exception.

Author: F-Value Calculator Project
Date: 2026-10-19
"""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedInput:
    """
    Parsed form values.

    Attributes:
        time_seconds: Heating time [s], None if invalid or negative
        temperature_celsius: Heating temperature [°C], None if invalid
    """
    time_seconds: Optional[float]
    temperature_celsius: Optional[float]

    @property
    def is_valid(self) -> bool:
        """True when both values are usable by the calculator."""
        return self.time_seconds is not None and self.temperature_celsius is not None


def parse_number(text: str) -> Optional[float]:
    """
    Parse a text field as a finite float.

    Args:
        text: Raw field content

    Returns:
        Parsed value, or None for empty, non-numeric or non-finite text
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_inputs(time_text: str, temperature_text: str) -> ParsedInput:
    """
    Parse both form fields.

    Negative times are invalid; temperature may take any sign.
    """
    time_seconds = parse_number(time_text)
    if time_seconds is not None and time_seconds < 0:
        time_seconds = None

    return ParsedInput(
        time_seconds=time_seconds,
        temperature_celsius=parse_number(temperature_text),
    )


def can_calculate(time_text: str, temperature_text: str) -> bool:
    """Whether the calculate action may run for the given raw text."""
    return parse_inputs(time_text, temperature_text).is_valid
