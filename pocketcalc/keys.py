"""Keypad layout and the mapping from key labels to calculator events.

Every keypad label is also its keyboard accelerator: typing ``7`` does what
clicking the ``7`` button does.
"""

from __future__ import annotations

from typing import Optional

from pocketcalc.core import Event, Operator

KEYPAD = (
    ("7", "8", "9", "/"),
    ("4", "5", "6", "*"),
    ("1", "2", "3", "-"),
    ("0", "c", "=", "+"),
)

CLEAR_KEY = "c"
EQUALS_KEY = "="

# Tk event.state bit for the Control key
CONTROL_MASK = 0x4

# Keyboard names (tkinter keysyms) and spellings that stand for a keypad label
KEY_ALIASES = {
    "Return": EQUALS_KEY,
    "KP_Enter": EQUALS_KEY,
    "Escape": CLEAR_KEY,
    "C": CLEAR_KEY,
}


def _normalize(label: str) -> str:
    return KEY_ALIASES.get(label, label)


def event_for_key(label: str) -> Optional[Event]:
    """Translate a key label into an event, or ``None`` if the key does nothing."""
    label = _normalize(label)
    if len(label) == 1 and label.isdigit() and label.isascii():
        return Event.digit_pressed(int(label))
    if label == CLEAR_KEY:
        return Event.clear()
    if label == EQUALS_KEY:
        return Event.equals()
    if label in {op.value for op in Operator if op is not Operator.NONE}:
        return Event.operator_pressed(label)
    return None


def label_for_key_event(char: str, keysym: str, modifiers: int = 0) -> Optional[str]:
    """Pick the label a window key press stands for, or ``None``.

    The typed character wins (it covers ``+`` and ``*``), then the keysym
    (``Return``, ``Escape``). Presses with Control held are not calculator
    keys.
    """
    if modifiers & CONTROL_MASK:
        return None
    for label in (char, keysym):
        if label and event_for_key(label) is not None:
            return label
    return None


def key_role(label: str) -> str:
    """Styling role of a keypad button: digit, operator, clear or equals."""
    event = event_for_key(label)
    if event is None:
        raise ValueError(f"Not a keypad key: {label!r}")
    return event.kind.value


def parse_keys(text: str) -> list[Event]:
    """Turn a typed key sequence such as ``"3+4="`` into events.

    Whitespace is skipped. Any other character that is not a key raises
    ``ValueError``.
    """
    events = []
    for position, char in enumerate(text):
        if char.isspace():
            continue
        event = event_for_key(char)
        if event is None:
            raise ValueError(f"Unknown key {char!r} at position {position}")
        events.append(event)
    return events
