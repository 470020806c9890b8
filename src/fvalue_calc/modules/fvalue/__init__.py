"""
F-Value Module - Lethality calculator form

Architecture: MVC (Model-View-Controller)

Components:
- model.py: F85 / F0 lethality of a heating step
- controller.py: Form state and edit / calculate / clear actions
- view.py: Console output and Tkinter GUI with Matplotlib

Author: F-Value Calculator Project
Date: 2026-10-19
"""

from fvalue_calc.modules.fvalue.model import FValueModel, FValueResult
from fvalue_calc.modules.fvalue.controller import (
    CalculatorState,
    FValueController,
    Phase,
)
from fvalue_calc.modules.fvalue.view import FValueView

__all__ = [
    "FValueModel",
    "FValueResult",
    "CalculatorState",
    "FValueController",
    "Phase",
    "FValueView",
]
