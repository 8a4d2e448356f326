"""pocketcalc: a four-function pocket calculator.

A keypad calculator that evaluates operations left to right as they are
keyed in, with a tkinter window and a terminal front end.

Usage:
    python -m pocketcalc gui                  # Desktop window
    python -m pocketcalc run "3+4+5="         # Evaluate a key sequence
    python -m pocketcalc run "6/0=" --trace   # Show every step
    python -m pocketcalc repl                 # Interactive terminal keypad
"""

from loguru import logger

from pocketcalc.core import CalculatorState, Event, EventKind, Operator, apply_event, run_events
from pocketcalc.display import format_display

__version__ = "1.0"

# Silent when used as a library; setup_logging() turns it back on
logger.disable("pocketcalc")

__all__ = [
    "CalculatorState",
    "Event",
    "EventKind",
    "Operator",
    "apply_event",
    "format_display",
    "run_events",
]
