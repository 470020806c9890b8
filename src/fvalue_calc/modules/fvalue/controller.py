"""
F-Value Controller - Interaction state of the calculator form

Holds the raw field text and the current result, and applies the
edit / calculate / clear actions as pure transitions on a state record.
No UI dependencies.

Author: F-Value Calculator Project
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from fvalue_calc.core.input_parser import parse_inputs
from fvalue_calc.modules.fvalue.model import FValueModel, FValueResult

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Interaction phase of the form."""
    IDLE = "idle"
    EDITING = "editing"
    RESULT = "result"


@dataclass(frozen=True)
class CalculatorState:
    """
    Session state of the calculator form.

    Attributes:
        time_text: Raw heating time field [s]
        temperature_text: Raw heating temperature field [°C]
        result: Last calculation, None unless phase is RESULT
        phase: Current interaction phase
    """
    time_text: str = ""
    temperature_text: str = ""
    result: Optional[FValueResult] = None
    phase: Phase = Phase.IDLE

    @property
    def can_calculate(self) -> bool:
        """Recomputed from the raw text on every access."""
        return parse_inputs(self.time_text, self.temperature_text).is_valid


def edit_time(state: CalculatorState, text: str) -> CalculatorState:
    """Replace the time field and drop any result."""
    return replace(state, time_text=text, result=None, phase=Phase.EDITING)


def edit_temperature(state: CalculatorState, text: str) -> CalculatorState:
    """Replace the temperature field and drop any result."""
    return replace(state, temperature_text=text, result=None, phase=Phase.EDITING)


def calculate(state: CalculatorState, model: FValueModel) -> CalculatorState:
    """
    Run the calculation when the inputs allow it.

    Returns the state unchanged when the inputs cannot be calculated.
    """
    parsed = parse_inputs(state.time_text, state.temperature_text)
    if not parsed.is_valid:
        return state

    result = model.solve(parsed.time_seconds, parsed.temperature_celsius)
    return replace(state, result=result, phase=Phase.RESULT)


def clear(state: CalculatorState) -> CalculatorState:
    """Empty both fields and drop any result."""
    return CalculatorState()


class FValueController:
    """
    Controller for the F-value form.

    Owns the session state and the model; views call the action
    methods and read back `state`.
    """

    def __init__(self):
        """Initialize controller with an empty form."""
        self.model = FValueModel()
        self.state = CalculatorState()

    @property
    def result(self) -> Optional[FValueResult]:
        return self.state.result

    @property
    def can_calculate(self) -> bool:
        return self.state.can_calculate

    def set_time_text(self, text: str) -> CalculatorState:
        """Handle an edit of the heating time field."""
        return self._apply(edit_time(self.state, text), "edit time")

    def set_temperature_text(self, text: str) -> CalculatorState:
        """Handle an edit of the heating temperature field."""
        return self._apply(edit_temperature(self.state, text), "edit temperature")

    def calculate(self) -> Optional[FValueResult]:
        """
        Handle the calculate action.

        Returns:
            The new result, or None when the inputs cannot be calculated
        """
        if not self.state.can_calculate:
            logger.info(
                "Calculate ignored: time=%r, temperature=%r",
                self.state.time_text, self.state.temperature_text,
            )
            return None

        self._apply(calculate(self.state, self.model), "calculate")
        return self.state.result

    def clear(self) -> CalculatorState:
        """Handle the clear action."""
        return self._apply(clear(self.state), "clear")

    def _apply(self, new_state: CalculatorState, action: str) -> CalculatorState:
        logger.debug("%s: %s -> %s", action, self.state.phase.value, new_state.phase.value)
        self.state = new_state
        return new_state
