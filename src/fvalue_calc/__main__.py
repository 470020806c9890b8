"""
Entry point for the F-Value Calculator

Allows running the application with: python -m fvalue_calc

Author: F-Value Calculator Project
Date: 2026-10-19
"""

from fvalue_calc.ui.app import main

if __name__ == "__main__":
    main()
