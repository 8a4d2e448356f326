import subprocess
import sys
from pathlib import Path

from loguru import logger

from pocketcalc.core import run_events
from pocketcalc.keys import parse_keys
from pocketcalc.log import setup_logging

LIBRARY_USE = (
    "from pocketcalc import run_events\n"
    "from pocketcalc.keys import parse_keys\n"
    "run_events(parse_keys('3+4='))\n"
)


def _run_python(code):
    return subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        timeout=60,
        cwd=Path(__file__).resolve().parent.parent,
    )


def test_library_use_writes_nothing_to_stderr():
    result = _run_python(LIBRARY_USE)
    assert result.returncode == 0, result.stderr
    assert result.stderr == ""


def test_setup_logging_turns_output_on():
    result = _run_python(
        "from pocketcalc.log import setup_logging\n"
        "setup_logging('DEBUG')\n" + LIBRARY_USE
    )
    assert result.returncode == 0, result.stderr
    assert "DEBUG" in result.stderr
    assert "digit 3" in result.stderr


def test_setup_logging_respects_level(capsys):
    setup_logging("WARNING")
    run_events(parse_keys("6/0="))
    assert capsys.readouterr().err == ""

    setup_logging("DEBUG")
    run_events(parse_keys("6/0="))
    assert "Division by zero" in capsys.readouterr().err


def test_setup_logging_file_sink(tmp_path):
    log_file = tmp_path / "calc.log"
    setup_logging("DEBUG", log_file=str(log_file))
    run_events(parse_keys("1+1="))
    logger.remove()
    assert "equals" in log_file.read_text(encoding="utf-8")
