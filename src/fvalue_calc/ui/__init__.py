"""
UI Package - Graphical User Interface for the F-Value Calculator

This package provides the Tkinter main window.

Author: F-Value Calculator Project
Date: 2026-10-19
"""

from fvalue_calc.ui.app import MainWindow

__all__ = ["MainWindow"]
