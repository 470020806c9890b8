"""
Configuration - Application-wide constants

Window settings, display precision and lethality-curve sampling.
The log level can be overridden with the FVALUE_LOG_LEVEL environment
variable (DEBUG, INFO, WARNING, ...).

Author: F-Value Calculator Project
Date: 2026-10-19
"""

import logging
import os

APP_TITLE: str = "F値 計算ツール"
APP_SUBTITLE: str = "加熱時間と温度からF値を計算します。"
WINDOW_GEOMETRY: str = "520x300"
CALCULATOR_GEOMETRY: str = "1000x620"

# Decimal places of displayed F-values
DISPLAY_DECIMALS: int = 3

# Temperature range of the lethality curve plot [°C]
CURVE_T_MIN: float = 60.0
CURVE_T_MAX: float = 140.0
CURVE_POINTS: int = 161


def get_log_level() -> int:
    """Log level from FVALUE_LOG_LEVEL, INFO when unset or unknown."""
    name = os.environ.get("FVALUE_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


LOG_LEVEL: int = get_log_level()
