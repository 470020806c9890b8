"""Modules package - Calculator forms of the application"""

from fvalue_calc.modules.fvalue import (
    FValueModel,
    FValueController,
    FValueView,
    FValueResult,
)

__all__ = [
    "FValueModel",
    "FValueController",
    "FValueView",
    "FValueResult",
]
