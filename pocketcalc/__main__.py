"""CLI for pocketcalc.

Usage:
    python -m pocketcalc gui                       # Open the desktop window
    python -m pocketcalc run "3+4+5="              # Print the final display
    python -m pocketcalc run "5c+3=" --trace       # Show state after every key
    python -m pocketcalc run "-3="                 # Sequences may start with an operator
    python -m pocketcalc repl                      # Interactive keypad
    python -m pocketcalc keys                      # Show the keypad layout
    python -m pocketcalc config --theme dark       # Update preferences
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pocketcalc.config import Config
from pocketcalc.core import CalculatorState, Operator, apply_event, run_events
from pocketcalc.display import format_display
from pocketcalc.keys import KEYPAD, parse_keys
from pocketcalc.log import setup_logging

app = typer.Typer(
    name="pocketcalc",
    help="Four-function pocket calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

QUIT_WORDS = ("q", "quit", "exit")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(1)


def _op_name(op: Operator) -> str:
    return "" if op is Operator.NONE else op.name.lower()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="Preferences file (default ~/.pocketcalc_config.json)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level, e.g. DEBUG or INFO"),
) -> None:
    """Four-function pocket calculator."""
    try:
        setup_logging(log_level)
    except ValueError as exc:
        _fail(f"Invalid log level: {exc}")
    ctx.obj = {"config_path": config}


@app.command("gui")
def cmd_gui(ctx: typer.Context) -> None:
    """Open the calculator window."""
    from pocketcalc.gui import main as run_gui

    run_gui(Config(ctx.obj["config_path"]))


def _trace_table() -> Table:
    table = Table(title="Trace", show_header=True, header_style="bold")
    table.add_column("Key", justify="center")
    table.add_column("Display", justify="right", style="green")
    table.add_column("Pending operand", justify="right")
    table.add_column("Pending op")
    table.add_column("Entered op")
    return table


# Sequences such as "-3=" start with a dash; keep click from reading them as options
@app.command("run", context_settings={"ignore_unknown_options": True})
def cmd_run(
    keys: str = typer.Argument(help="Key sequence, e.g. '3+4+5=' or '-3='"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Print the state after every key"),
) -> None:
    """Feed a key sequence to a fresh calculator and print the display."""
    try:
        events = parse_keys(keys)
    except ValueError as exc:
        _fail(str(exc))

    table = _trace_table() if trace else None
    state = CalculatorState()
    for event in events:
        state = apply_event(state, event)
        if table is not None:
            table.add_row(
                escape(str(event)),
                format_display(state.display_value),
                format_display(state.pending_operand),
                _op_name(state.pending_operator),
                _op_name(state.entered_operator),
            )

    if table is not None:
        out.print(table)
    typer.echo(format_display(state.current_display_value()))


@app.command("repl")
def cmd_repl() -> None:
    """Type key sequences line by line; 'q' quits."""
    state = CalculatorState()
    typer.echo(format_display(state.current_display_value()))
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip().lower() in QUIT_WORDS:
            break
        try:
            events = parse_keys(line)
        except ValueError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            continue
        state = run_events(events, state)
        typer.echo(format_display(state.current_display_value()))


@app.command("keys")
def cmd_keys() -> None:
    """Show the keypad layout."""
    table = Table(title="Keypad", show_header=False, show_lines=True)
    for _ in KEYPAD[0]:
        table.add_column(justify="center", min_width=3)
    for row in KEYPAD:
        table.add_row(*row)
    out.print(table)
    out.print("Return/Enter also means '=', Escape means 'c'.")


@app.command("config")
def cmd_config(
    ctx: typer.Context,
    theme: Optional[str] = typer.Option(None, "--theme", help="light or dark"),
    font_family: Optional[str] = typer.Option(None, "--font-family", help="Display and button font"),
    font_size: Optional[int] = typer.Option(None, "--font-size", help="Font size in points"),
) -> None:
    """Show or update the preferences file."""
    prefs = Config(ctx.obj["config_path"])
    updates = {"theme": theme, "font_family": font_family, "font_size": font_size}
    updates = {k: v for k, v in updates.items() if v is not None}
    if updates:
        try:
            for key, value in updates.items():
                prefs.set(key, value)
            prefs.save()
        except (ValueError, OSError) as exc:
            _fail(str(exc))

    table = Table(title=str(prefs.path), show_header=True, header_style="bold")
    table.add_column("Preference", style="green")
    table.add_column("Value")
    for key, value in prefs.data.items():
        table.add_row(key, str(value))
    out.print(table)


if __name__ == "__main__":
    app()
