"""
Application Layer - Use Cases and Ports

This module contains the application logic that orchestrates domain
services and talks to the input boundary through ports (interfaces).

Structure:
- ports/outbound/: Interfaces implemented by infrastructure adapters
- use_cases/: Application services implementing business use cases
- dto/: Data Transfer Objects returned to presentation adapters
"""
from fno_calc.application.use_cases.evaluate_trade import EvaluateTradeUseCase

__all__ = [
    "EvaluateTradeUseCase",
]
