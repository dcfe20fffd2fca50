"""Infrastructure adapters implementing application ports."""
from fno_calc.infrastructure.adapters.validation.trade_input_adapter import TradeInputAdapter

__all__ = [
    "TradeInputAdapter",
]
