"""
MarginCalculator Domain Service

Computes the margin blocked when an F&O position is opened.
"""
from __future__ import annotations
from dataclasses import dataclass

from fno_calc.domain.entities.trade import InstrumentType, TradeType
from fno_calc.domain.value_objects.money import Money, Currency
from fno_calc.domain.value_objects.percentage import Percentage


@dataclass(frozen=True)
class MarginResult:
    """
    Required margin for a position.

    Attributes:
        initial: Initial (SPAN-style) margin
        exposure: Exposure margin
    """
    initial: Money
    exposure: Money

    @property
    def total(self) -> Money:
        """Initial plus exposure margin."""
        return self.initial + self.exposure

    @classmethod
    def zero(cls, currency: Currency = Currency.INR) -> MarginResult:
        return cls(initial=Money.zero(currency), exposure=Money.zero(currency))


class MarginCalculator:
    """
    Domain service for margin requirements.

    Margin is always computed on entry turnover, since it is posted
    when the position is opened.
    """

    def compute_margin(
        self,
        instrument: InstrumentType,
        trade_type: TradeType,
        entry_price: Money,
        quantity: int,
        lot_size: int,
        initial_rate: Percentage,
        exposure_rate: Percentage,
    ) -> MarginResult:
        """
        Compute initial, exposure and total margin.

        Long options need only the premium outlay. Short options and
        futures block a percentage of entry turnover.
        """
        turnover = entry_price * (quantity * lot_size)

        if instrument == InstrumentType.OPTIONS and trade_type == TradeType.LONG:
            return MarginResult(
                initial=turnover,
                exposure=Money.zero(turnover.currency),
            )

        if (
            instrument == InstrumentType.OPTIONS and trade_type == TradeType.SHORT
        ) or instrument == InstrumentType.FUTURES:
            return MarginResult(
                initial=Money(initial_rate.apply_to(turnover.amount), turnover.currency),
                exposure=Money(exposure_rate.apply_to(turnover.amount), turnover.currency),
            )

        return MarginResult.zero(turnover.currency)
