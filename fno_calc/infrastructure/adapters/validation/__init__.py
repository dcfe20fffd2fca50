"""Input validation adapters."""
from fno_calc.infrastructure.adapters.validation.trade_form_schema import TradeForm
from fno_calc.infrastructure.adapters.validation.trade_input_adapter import TradeInputAdapter

__all__ = [
    "TradeForm",
    "TradeInputAdapter",
]
