"""
F-Value View - Display and reporting functionality

Handles all output formatting for F-value results.
Includes both console output and a Tkinter form with a Matplotlib
lethality curve.

Author: F-Value Calculator Project
Date: 2026-10-19
"""

from dataclasses import dataclass
from typing import List

from fvalue_calc.config import DISPLAY_DECIMALS
from fvalue_calc.core.lethality import F0_REFERENCE, F85_REFERENCE, LethalityReference
from fvalue_calc.modules.fvalue.model import FValueResult


@dataclass(frozen=True)
class ResultRow:
    """
    One displayed line of the result area.

    Attributes:
        title: Name and reference temperature, e.g. "F85値 (基準温度 85℃)"
        z_text: z-value caption, e.g. "Z = 7.8"
        value_text: Value with DISPLAY_DECIMALS decimals
        accessible_text: Text announced by assistive technology
    """
    title: str
    z_text: str
    value_text: str
    accessible_text: str


def format_fvalue(value: float) -> str:
    """Format an F-value with the display precision."""
    return f"{value:.{DISPLAY_DECIMALS}f}"


def _row(reference: LethalityReference, value: float) -> ResultRow:
    value_text = format_fvalue(value)
    return ResultRow(
        title=f"{reference.label} (基準温度 {reference.T_ref:g}℃)",
        z_text=f"Z = {reference.z:g}",
        value_text=value_text,
        accessible_text=f"{reference.label} {value_text}",
    )


def result_rows(result: FValueResult) -> List[ResultRow]:
    """Display rows for a result, F85 first."""
    return [
        _row(F85_REFERENCE, result.f85),
        _row(F0_REFERENCE, result.f0),
    ]


class FValueView:
    """
    View component for F-value results.

    Responsible for formatting and displaying results.
    No computation should occur here - only presentation.
    """

    @staticmethod
    def display_result(result: FValueResult, verbose: bool = True) -> None:
        """
        Display F-value calculation results.

        Args:
            result: Calculation results to display
            verbose: If True, show inputs and diagnostic flags
        """
        print("=" * 60)
        print("F-VALUE RESULTS")
        print("=" * 60)

        if verbose:
            print(f"\nHeating time: {result.time_seconds:g} s ({result.time_minutes:.3f} min)")
            print(f"Heating temperature: {result.temperature_celsius:g} °C")

        print()
        for row in result_rows(result):
            print(f"  {row.title} [{row.z_text}]: {row.value_text}")

        if verbose:
            print("\nDiagnostic Flags:")
            for flag_name, flag_value in result.flags.items():
                status = "⚠️  ACTIVE" if flag_value else "✓ OK"
                print(f"  {flag_name}: {status}")

        print("=" * 60)

    @staticmethod
    def display_summary(result: FValueResult) -> None:
        """
        Display compact summary of results.

        Args:
            result: Calculation results to summarize
        """
        print(", ".join(row.accessible_text for row in result_rows(result)), end="")

        active_flags = [k for k, v in result.flags.items() if v]
        if active_flags:
            print(f" [FLAGS: {', '.join(active_flags)}]")
        else:
            print()


class FValueTkView:
    """
    Tkinter-based GUI view for the F-value calculator.

    Provides the two input fields, clear and calculate buttons, the
    result area and a lethality curve of F85/F0 versus temperature.
    """

    @staticmethod
    def open_window(parent):
        """
        Open the F-value calculator window.

        Args:
            parent: Parent Tkinter window
        """
        # Import Tkinter and Matplotlib here to avoid issues in headless environments
        import tkinter as tk
        from tkinter import ttk, messagebox
        import matplotlib
        matplotlib.use('TkAgg')
        from matplotlib.figure import Figure
        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
        import numpy as np

        from fvalue_calc.config import (
            APP_SUBTITLE,
            APP_TITLE,
            CALCULATOR_GEOMETRY,
            CURVE_POINTS,
            CURVE_T_MAX,
            CURVE_T_MIN,
        )
        from fvalue_calc.core.lethality import lethality_curve
        from fvalue_calc.modules.fvalue import FValueController

        window = tk.Toplevel(parent)
        window.title(APP_TITLE)
        window.geometry(CALCULATOR_GEOMETRY)

        controller = FValueController()

        var_time = tk.StringVar(value="")
        var_temperature = tk.StringVar(value="")
        # Set while the clear action empties the fields
        suppress_trace = {"active": False}

        # ========== LEFT PANEL: Inputs ==========
        left_frame = ttk.Frame(window, padding=10)
        left_frame.grid(row=0, column=0, sticky="nsew", padx=5, pady=5)

        ttk.Label(
            left_frame,
            text=APP_TITLE,
            font=("Arial", 14, "bold"),
        ).grid(row=0, column=0, columnspan=3, pady=(10, 2))
        ttk.Label(
            left_frame,
            text=APP_SUBTITLE,
            foreground="gray",
        ).grid(row=1, column=0, columnspan=3, pady=(0, 15))

        ttk.Label(left_frame, text="加熱時間").grid(row=2, column=0, sticky="w", pady=4)
        entry_time = ttk.Entry(left_frame, textvariable=var_time, width=18)
        entry_time.grid(row=2, column=1, pady=4)
        ttk.Label(left_frame, text="秒  (例: 600)", foreground="gray").grid(row=2, column=2, sticky="w")

        ttk.Label(left_frame, text="加熱温度").grid(row=3, column=0, sticky="w", pady=4)
        entry_temperature = ttk.Entry(left_frame, textvariable=var_temperature, width=18)
        entry_temperature.grid(row=3, column=1, pady=4)
        ttk.Label(left_frame, text="℃  (例: 115)", foreground="gray").grid(row=3, column=2, sticky="w")

        buttons_frame = ttk.Frame(left_frame)
        buttons_frame.grid(row=4, column=0, columnspan=3, pady=15, sticky="ew")

        # ========== Result area (shown only with a result) ==========
        results_frame = ttk.LabelFrame(left_frame, text="計算結果", padding=10)
        results_frame.grid(row=5, column=0, columnspan=3, sticky="ew", pady=5)

        row_widgets = []
        for i in range(2):
            title = ttk.Label(results_frame, font=("Arial", 10, "bold"))
            title.grid(row=2 * i, column=0, sticky="w")
            z_label = ttk.Label(results_frame, foreground="gray")
            z_label.grid(row=2 * i + 1, column=0, sticky="w", pady=(0, 8))
            value = ttk.Label(results_frame, font=("Arial", 14, "bold"), foreground="#4f46e5")
            value.grid(row=2 * i, column=1, rowspan=2, sticky="e", padx=10)
            row_widgets.append((title, z_label, value))
        results_frame.columnconfigure(1, weight=1)

        # ========== RIGHT PANEL: Lethality curve ==========
        plot_frame = ttk.LabelFrame(window, text="致死率曲線 (F値 - 温度)", padding=10)
        plot_frame.grid(row=0, column=1, sticky="nsew", padx=5, pady=5)

        fig = Figure(figsize=(6, 4.5), dpi=100)
        ax = fig.add_subplot(111)
        canvas = FigureCanvasTkAgg(fig, master=plot_frame)
        canvas.get_tk_widget().pack(fill="both", expand=True)

        def plot_curve(result):
            """Plot F85 and F0 versus temperature for the entered time."""
            ax.clear()
            if result is not None and result.time_seconds > 0:
                T = np.linspace(CURVE_T_MIN, CURVE_T_MAX, CURVE_POINTS)
                f85_curve = lethality_curve(result.time_seconds, T, F85_REFERENCE)
                f0_curve = lethality_curve(result.time_seconds, T, F0_REFERENCE)

                ax.plot(T, f85_curve, 'b-', linewidth=2, label='F85 (85℃, Z=7.8)')
                ax.plot(T, f0_curve, 'r-', linewidth=2, label='F0 (121.1℃, Z=10)')
                if np.isfinite(result.f85) and np.isfinite(result.f0):
                    ax.plot(result.temperature_celsius, result.f85, 'bo', markersize=9)
                    ax.plot(result.temperature_celsius, result.f0, 'rs', markersize=9)
                ax.axhline(result.time_minutes, color='gray', linestyle=':', linewidth=1,
                           label=f't = {result.time_minutes:g} min')

                ax.set_yscale('log')
                ax.set_xlabel('加熱温度 [℃]', fontsize=10)
                ax.set_ylabel('F値 [min]', fontsize=10)
                ax.grid(True, alpha=0.3, which='both', linestyle=':')
                ax.legend(loc='best', fontsize=8, framealpha=0.9)
            fig.tight_layout()
            canvas.draw()

        def refresh():
            """Sync widgets with the controller state."""
            btn_calculate.state(["!disabled"] if controller.can_calculate else ["disabled"])

            result = controller.result
            if result is None:
                results_frame.grid_remove()
            else:
                for (title, z_label, value), row in zip(row_widgets, result_rows(result)):
                    title.config(text=row.title)
                    z_label.config(text=row.z_text)
                    value.config(text=row.value_text)
                results_frame.grid()
            plot_curve(result)

        def on_time_changed(*_):
            if not suppress_trace["active"]:
                controller.set_time_text(var_time.get())
                refresh()

        def on_temperature_changed(*_):
            if not suppress_trace["active"]:
                controller.set_temperature_text(var_temperature.get())
                refresh()

        def calculate(*_):
            try:
                controller.calculate()
            except ValueError as e:
                messagebox.showerror("エラー", f"計算できません:\n{str(e)}")
            refresh()

        def clear_inputs():
            suppress_trace["active"] = True
            try:
                var_time.set("")
                var_temperature.set("")
            finally:
                suppress_trace["active"] = False
            controller.clear()
            refresh()

        var_time.trace_add("write", on_time_changed)
        var_temperature.trace_add("write", on_temperature_changed)
        entry_time.bind("<Return>", calculate)
        entry_temperature.bind("<Return>", calculate)

        ttk.Button(
            buttons_frame,
            text="クリア",
            command=clear_inputs,
        ).grid(row=0, column=0, padx=5, sticky="ew")
        btn_calculate = ttk.Button(
            buttons_frame,
            text="計算する",
            command=calculate,
        )
        btn_calculate.grid(row=0, column=1, padx=5, sticky="ew")
        buttons_frame.columnconfigure(0, weight=1)
        buttons_frame.columnconfigure(1, weight=1)

        # Configure grid weights
        window.columnconfigure(0, weight=1)
        window.columnconfigure(1, weight=2)
        window.rowconfigure(0, weight=1)
        left_frame.columnconfigure(1, weight=1)

        refresh()
        entry_time.focus_set()
