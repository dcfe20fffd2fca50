"""
Application Use Cases.

This module contains the use cases that orchestrate domain logic.
"""
from fno_calc.application.use_cases.evaluate_trade import EvaluateTradeUseCase

__all__ = [
    "EvaluateTradeUseCase",
]
