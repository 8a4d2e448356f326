import pytest

from pocketcalc.core import Event, EventKind, Operator
from pocketcalc.keys import CONTROL_MASK, KEYPAD, event_for_key, key_role, label_for_key_event, parse_keys


def test_keypad_is_four_by_four():
    assert len(KEYPAD) == 4
    assert all(len(row) == 4 for row in KEYPAD)
    labels = [label for row in KEYPAD for label in row]
    assert sorted(labels) == sorted("0123456789+-*/c=")


def test_every_keypad_label_is_an_accelerator():
    for row in KEYPAD:
        for label in row:
            assert event_for_key(label) is not None


@pytest.mark.parametrize(
    "label, expected",
    [
        ("7", Event.digit_pressed(7)),
        ("+", Event.operator_pressed(Operator.ADD)),
        ("/", Event.operator_pressed(Operator.DIVIDE)),
        ("c", Event.clear()),
        ("=", Event.equals()),
        ("Return", Event.equals()),
        ("KP_Enter", Event.equals()),
        ("Escape", Event.clear()),
        ("C", Event.clear()),
    ],
)
def test_event_for_key(label, expected):
    assert event_for_key(label) == expected


@pytest.mark.parametrize("label", ["x", "", ".", "%", "Shift_L", "\r", "٣"])
def test_ignored_keys(label):
    assert event_for_key(label) is None


@pytest.mark.parametrize(
    "label, role",
    [("5", "digit"), ("*", "operator"), ("c", "clear"), ("=", "equals")],
)
def test_key_role(label, role):
    assert key_role(label) == role


def test_key_role_rejects_unknown_key():
    with pytest.raises(ValueError):
        key_role("?")


def test_parse_keys():
    events = parse_keys("12+3=")
    assert [e.kind for e in events] == [
        EventKind.DIGIT,
        EventKind.DIGIT,
        EventKind.OPERATOR,
        EventKind.DIGIT,
        EventKind.EQUALS,
    ]


def test_parse_keys_skips_whitespace():
    assert parse_keys(" 3 + 4 = ") == parse_keys("3+4=")


def test_parse_keys_reports_unknown_key():
    with pytest.raises(ValueError, match=r"'x' at position 1"):
        parse_keys("1x")


@pytest.mark.parametrize(
    "char, keysym, expected",
    [
        ("7", "7", "7"),
        ("+", "plus", "+"),
        ("*", "asterisk", "*"),
        ("\r", "Return", "Return"),
        ("\x1b", "Escape", "Escape"),
        ("", "KP_Enter", "KP_Enter"),
        ("c", "c", "c"),
        ("", "Shift_L", None),
        ("x", "x", None),
    ],
)
def test_label_for_key_event(char, keysym, expected):
    assert label_for_key_event(char, keysym) == expected


def test_label_for_key_event_ignores_control_chords():
    # Ctrl+C arrives as char '\x03' with keysym 'c'
    assert label_for_key_event("\x03", "c", CONTROL_MASK) is None
    assert label_for_key_event("7", "7", CONTROL_MASK | 0x1) is None


def test_label_for_key_event_allows_shift():
    assert label_for_key_event("+", "plus", 0x1) == "+"
