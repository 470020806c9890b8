"""
Main Application Window - F-Value Calculator

Provides the main window with a button to open the calculator form.

Author: F-Value Calculator Project
Date: 2026-10-19
"""

import logging
import tkinter as tk
from tkinter import ttk

from fvalue_calc.config import APP_SUBTITLE, APP_TITLE, LOG_LEVEL, WINDOW_GEOMETRY
from fvalue_calc.logging_config import setup_logging

logger = logging.getLogger(__name__)


class MainWindow:
    """
    Main application window for the F-value calculator.

    The calculator form opens automatically and can be reopened from here.
    """

    def __init__(self):
        """Initialize the main application window."""
        self.root = tk.Tk()
        self.root.title(APP_TITLE)
        self.root.geometry(WINDOW_GEOMETRY)

        self._setup_ui()

    def _setup_ui(self):
        """Set up the user interface components."""
        header = ttk.Label(
            self.root,
            text=APP_TITLE,
            font=("Arial", 16, "bold"),
        )
        header.pack(pady=20)

        desc = ttk.Label(
            self.root,
            text=APP_SUBTITLE,
            font=("Arial", 10),
        )
        desc.pack(pady=5)

        ttk.Separator(self.root, orient="horizontal").pack(fill="x", pady=15)

        btn_calculator = ttk.Button(
            self.root,
            text="🌡️ F値 計算 (F85 / F0)",
            command=self._open_calculator,
            width=30,
            padding=10,
        )
        btn_calculator.pack(pady=10)

        footer = ttk.Label(
            self.root,
            text="F85: 85℃, Z = 7.8  /  F0: 121.1℃, Z = 10",
            font=("Arial", 8),
            foreground="gray",
        )
        footer.pack(side="bottom", pady=10)

    def _open_calculator(self):
        """Open the F-value calculator window."""
        # Import here to allow headless testing
        from fvalue_calc.modules.fvalue.view import FValueTkView

        logger.debug("Opening calculator window")
        FValueTkView.open_window(self.root)

    def run(self):
        """Start the application main loop."""
        self._open_calculator()
        self.root.mainloop()


def main():
    """Entry point for the UI application."""
    setup_logging(LOG_LEVEL)
    app = MainWindow()
    app.run()


if __name__ == "__main__":
    main()
