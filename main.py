"""
Main entry point for the F-Value Calculator

Launch the application with: python main.py

Author: F-Value Calculator Project
Date: 2026-10-19
"""

from fvalue_calc.ui.app import main

if __name__ == "__main__":
    main()
