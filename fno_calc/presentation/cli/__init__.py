"""Command-line interface."""
from fno_calc.presentation.cli.calculator_runner import CalculatorRunner, main

__all__ = [
    "CalculatorRunner",
    "main",
]
