"""Domain services."""
from fno_calc.domain.services.fee_calculator import (
    FEE_SCHEDULE,
    ChargeBreakdown,
    FeeCalculator,
    LegRates,
)
from fno_calc.domain.services.margin_calculator import MarginCalculator, MarginResult
from fno_calc.domain.services.trade_evaluator import TradeEvaluator, TradeResult

__all__ = [
    "FEE_SCHEDULE",
    "ChargeBreakdown",
    "FeeCalculator",
    "LegRates",
    "MarginCalculator",
    "MarginResult",
    "TradeEvaluator",
    "TradeResult",
]
