"""Domain entities."""
from fno_calc.domain.entities.trade import (
    ContractSpec,
    InstrumentType,
    OrderSide,
    TradeInput,
    TradeType,
)

__all__ = [
    "ContractSpec",
    "InstrumentType",
    "OrderSide",
    "TradeInput",
    "TradeType",
]
