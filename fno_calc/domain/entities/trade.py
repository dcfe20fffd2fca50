"""
Trade Domain Entities

Instrument and trade-type enums plus the immutable trade input record.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fno_calc.domain.value_objects.money import Money
from fno_calc.domain.value_objects.percentage import Percentage


class InstrumentType(Enum):
    """Derivative instrument type."""
    OPTIONS = "options"
    FUTURES = "futures"


class TradeType(Enum):
    """Trade direction."""
    LONG = "long"    # buy then sell
    SHORT = "short"  # sell then buy

    def opening_side(self) -> OrderSide:
        """Side of the order that opens the position."""
        return OrderSide.BUY if self == TradeType.LONG else OrderSide.SELL


class OrderSide(Enum):
    """Order side (buy or sell)."""
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class ContractSpec:
    """
    Descriptive contract details shown alongside a result.

    Never used by any calculation.

    Attributes:
        symbol: Underlying symbol (e.g., "NIFTY")
        expiry: Expiry date label (e.g., "26-Sep-2025")
        strike_price: Option strike, None for futures
    """
    symbol: str
    expiry: str
    strike_price: Optional[int] = None

    def label(self, instrument_type: InstrumentType) -> str:
        """Human readable contract name."""
        if instrument_type == InstrumentType.OPTIONS and self.strike_price is not None:
            return f"{self.symbol} {self.expiry} {self.strike_price}"
        return f"{self.symbol} {self.expiry} FUT"


@dataclass(frozen=True)
class TradeInput:
    """
    Immutable, fully populated input for a single trade evaluation.

    Attributes:
        instrument_type: Options or futures
        trade_type: Long (buy then sell) or short (sell then buy)
        entry_price: Price per unit when the position is opened
        exit_price: Price per unit when the position is closed
        quantity: Number of lots
        lot_size: Units per lot
        profit_tax_rate: Tax rate applied to a positive net profit
        initial_margin_rate: Initial margin on entry turnover
        exposure_margin_rate: Exposure margin on entry turnover
        contract: Optional contract details for display
    """
    instrument_type: InstrumentType
    trade_type: TradeType
    entry_price: Money
    exit_price: Money
    quantity: int
    lot_size: int
    profit_tax_rate: Percentage
    initial_margin_rate: Percentage
    exposure_margin_rate: Percentage
    contract: Optional[ContractSpec] = None

    @property
    def total_units(self) -> int:
        """Total units traded (lots x lot size)."""
        return self.quantity * self.lot_size

    @property
    def is_long(self) -> bool:
        return self.trade_type == TradeType.LONG

    def has_valid_prices_and_quantities(self) -> bool:
        """Check that prices and quantities are strictly positive."""
        return (
            self.entry_price.is_positive()
            and self.exit_price.is_positive()
            and self.quantity > 0
            and self.total_units > 0
        )

    def leg_price(self, side: OrderSide) -> Money:
        """
        Price of the given leg.

        Long trades buy at entry and sell at exit; short trades sell at
        entry and buy back at exit.
        """
        if side == self.trade_type.opening_side():
            return self.entry_price
        return self.exit_price
