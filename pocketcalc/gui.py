"""Tkinter window: a display field over a 4x4 keypad."""

import tkinter as tk
from functools import partial
from tkinter import ttk

from loguru import logger

from pocketcalc.config import Config
from pocketcalc.core import CalculatorState, apply_event
from pocketcalc.display import format_display
from pocketcalc.keys import KEYPAD, event_for_key, key_role, label_for_key_event

# Colours per button role, plus the window and display backgrounds
PALETTES = {
    "light": {
        "window": "#f6f6f6",
        "screen": "gainsboro",
        "text": "black",
        "digit": "beige",
        "operator": "lightgray",
        "clear": "mistyrose",
        "equals": "ghostwhite",
    },
    "dark": {
        "window": "#2b2b2b",
        "screen": "#3a3a3a",
        "text": "white",
        "digit": "#4a4a40",
        "operator": "#5a5a5a",
        "clear": "#6b3a3a",
        "equals": "#44475a",
    },
}


class CalculatorApp(tk.Tk):
    def __init__(self, config=None):
        super().__init__()
        self.title("Calc")
        self.resizable(False, False)

        self.prefs = config or Config()
        self.calc = CalculatorState()
        self.palette = PALETTES[self.prefs.get("theme")]
        self.font = (self.prefs.get("font_family"), self.prefs.get("font_size"))
        self.buttons = {}

        self._create_styles()
        self._create_widgets()
        self._bind_keys()
        self._refresh_display()
        logger.info("Calculator window opened")

    def _create_styles(self):
        self.style = ttk.Style(self)
        self.style.theme_use("clam")
        self.configure(bg=self.palette["window"])
        self.style.configure("TFrame", background=self.palette["window"])
        self.style.configure(
            "Screen.TEntry",
            fieldbackground=self.palette["screen"],
            foreground=self.palette["text"],
        )
        for role in ("digit", "operator", "clear", "equals"):
            self.style.configure(
                f"{role.title()}.TButton",
                background=self.palette[role],
                foreground=self.palette["text"],
                font=self.font,
            )

    def _create_widgets(self):
        layout = ttk.Frame(self, padding=20)
        layout.pack(fill="both", expand=True)

        self.display_var = tk.StringVar()
        screen = ttk.Entry(
            layout,
            textvariable=self.display_var,
            justify="right",
            style="Screen.TEntry",
            font=self.font,
            state="readonly",
        )
        screen.pack(side="top", fill="x", pady=(0, 20))

        pad = ttk.Frame(layout)
        pad.pack(side="top", fill="both", expand=True)
        for r, row in enumerate(KEYPAD):
            for c, label in enumerate(row):
                btn = ttk.Button(
                    pad,
                    text=label,
                    width=3,
                    style=f"{key_role(label).title()}.TButton",
                    command=partial(self._press, label),
                )
                btn.grid(row=r, column=c, sticky="nsew", padx=3, pady=3)
                self.buttons[label] = btn
            pad.rowconfigure(r, weight=1)
        for c in range(len(KEYPAD[0])):
            pad.columnconfigure(c, weight=1)

    def _bind_keys(self):
        self.bind("<Key>", self._on_key)

    def _on_key(self, event):
        label = label_for_key_event(event.char, event.keysym, event.state)
        if label is None:
            return None
        self._press(label)
        return "break"

    def _press(self, label):
        event = event_for_key(label)
        if event is None:
            return
        self.calc = apply_event(self.calc, event)
        self._refresh_display()

    def _refresh_display(self):
        self.display_var.set(format_display(self.calc.current_display_value()))

    def on_close(self):
        logger.info("Calculator window closed")
        self.destroy()


def main(config=None):
    app = CalculatorApp(config)
    app.protocol("WM_DELETE_WINDOW", app.on_close)
    app.mainloop()
