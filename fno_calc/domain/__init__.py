"""
Domain Layer - Pure Business Logic

This module contains the charge, margin and P&L rules with no I/O.

Structure:
- entities/: Trade input and instrument/side enums
- value_objects/: Immutable value objects (Money, Percentage)
- services/: Domain services (FeeCalculator, MarginCalculator, TradeEvaluator)
- exceptions.py: Domain-specific exceptions
"""
