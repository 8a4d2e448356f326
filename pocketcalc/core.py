"""Evaluation core of the calculator.

A tiny state machine: the displayed value, one stacked operand and two
operator slots. Presentation shells turn clicks and key presses into
:class:`Event` values and feed them through :func:`apply_event`; nothing in
here knows about windows, terminals or formatting.

Operations are evaluated strictly left to right, one level deep::

    3 + 4 + 5 =   ->   (3 + 4) + 5   ->   12
"""

from __future__ import annotations

import copy
import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from loguru import logger


class Operator(str, Enum):
    """Binary operators, valued by their keypad label."""

    NONE = ""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


def ieee_divide(left, right):
    """Divide like IEEE-754 does: a zero divisor gives +/-inf or nan."""
    if right == 0:
        logger.debug("Division by zero: {} / {}", left, right)
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


BINARY_OPERATORS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: ieee_divide,
}


# -------------- State --------------

@dataclass
class CalculatorState:
    """Everything the calculator remembers between key presses.

    ``entered_operator`` is the operator the user just picked; it moves to
    ``pending_operator`` once the first digit of the next operand arrives,
    which is also when the current display is stacked in
    ``pending_operand``.
    """

    display_value: float = 0.0
    pending_operand: float = 0.0
    pending_operator: Operator = Operator.NONE
    entered_operator: Operator = Operator.NONE

    def input_digit(self, digit: int) -> None:
        digit = _check_digit(digit)
        if self.entered_operator is Operator.NONE:
            self.display_value = self.display_value * 10 + digit
        else:
            self.pending_operand = self.display_value
            self.display_value = float(digit)
            self.pending_operator = self.entered_operator
            self.entered_operator = Operator.NONE
        logger.debug("digit {} -> {}", digit, self)

    def input_operator(self, op: Operator) -> None:
        op = _check_operator(op)
        if self.pending_operator is not Operator.NONE:
            self.evaluate()
        self.entered_operator = op
        logger.debug("operator {} -> {}", op.value, self)

    def input_clear(self) -> None:
        # Only the visible number goes; any operator in flight survives.
        self.display_value = 0.0
        logger.debug("clear -> {}", self)

    def input_equals(self) -> None:
        self.evaluate()
        self.entered_operator = Operator.NONE
        logger.debug("equals -> {}", self)

    def evaluate(self) -> None:
        """Apply the pending operator to the stacked and displayed operands."""
        func = BINARY_OPERATORS.get(self.pending_operator)
        if func is not None:
            self.display_value = func(self.pending_operand, self.display_value)
        self.pending_operator = Operator.NONE

    def current_display_value(self) -> float:
        return self.display_value


def _check_digit(digit) -> int:
    if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
        raise ValueError(f"Digit must be an integer 0-9, got {digit!r}")
    return digit


def _check_operator(op) -> Operator:
    try:
        op = Operator(op)
    except ValueError:
        raise ValueError(f"Unknown operator: {op!r}") from None
    if op is Operator.NONE:
        raise ValueError("An arithmetic operator is required")
    return op


# -------------- Events --------------

class EventKind(str, Enum):
    DIGIT = "digit"
    OPERATOR = "operator"
    CLEAR = "clear"
    EQUALS = "equals"


@dataclass(frozen=True)
class Event:
    """One symbolic input delivered by a shell."""

    kind: EventKind
    digit: Optional[int] = None
    op: Optional[Operator] = None

    @classmethod
    def digit_pressed(cls, digit: int) -> Event:
        return cls(EventKind.DIGIT, digit=_check_digit(digit))

    @classmethod
    def operator_pressed(cls, op) -> Event:
        return cls(EventKind.OPERATOR, op=_check_operator(op))

    @classmethod
    def clear(cls) -> Event:
        return cls(EventKind.CLEAR)

    @classmethod
    def equals(cls) -> Event:
        return cls(EventKind.EQUALS)

    def __str__(self) -> str:
        if self.kind is EventKind.DIGIT:
            return str(self.digit)
        if self.kind is EventKind.OPERATOR:
            return self.op.value
        return "c" if self.kind is EventKind.CLEAR else "="


def apply_event(state: CalculatorState, event: Event) -> CalculatorState:
    """Return a new state with ``event`` applied; ``state`` is left as is."""
    new_state = copy.copy(state)
    if event.kind is EventKind.DIGIT:
        new_state.input_digit(event.digit)
    elif event.kind is EventKind.OPERATOR:
        new_state.input_operator(event.op)
    elif event.kind is EventKind.CLEAR:
        new_state.input_clear()
    elif event.kind is EventKind.EQUALS:
        new_state.input_equals()
    else:
        raise ValueError(f"Unsupported event: {event!r}")
    return new_state


def run_events(events: Iterable[Event], state: Optional[CalculatorState] = None) -> CalculatorState:
    """Fold ``events`` over ``state`` (a fresh calculator by default)."""
    state = state if state is not None else CalculatorState()
    for event in events:
        state = apply_event(state, event)
    return state
