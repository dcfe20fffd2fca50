"""
FeeCalculator Domain Service

Computes the brokerage, regulatory and tax charges levied on a single
F&O order leg.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Tuple

from fno_calc.domain.entities.trade import InstrumentType, OrderSide
from fno_calc.domain.value_objects.money import Money
from fno_calc.domain.value_objects.percentage import Percentage


@dataclass(frozen=True)
class LegRates:
    """
    Turnover-based rates that depend on instrument and side.

    Attributes:
        stamp_duty: Stamp duty rate (buy side only)
        stt: Securities transaction tax rate (sell side only)
        exchange_charge: Exchange transaction charge rate
    """
    stamp_duty: Percentage
    stt: Percentage
    exchange_charge: Percentage


FEE_SCHEDULE: Dict[Tuple[InstrumentType, OrderSide], LegRates] = {
    (InstrumentType.OPTIONS, OrderSide.BUY): LegRates(
        stamp_duty=Percentage(Decimal("0.00003")),
        stt=Percentage.zero(),
        exchange_charge=Percentage(Decimal("0.0003503")),
    ),
    (InstrumentType.OPTIONS, OrderSide.SELL): LegRates(
        stamp_duty=Percentage.zero(),
        stt=Percentage(Decimal("0.001")),
        exchange_charge=Percentage(Decimal("0.0003503")),
    ),
    (InstrumentType.FUTURES, OrderSide.BUY): LegRates(
        stamp_duty=Percentage(Decimal("0.00002")),
        stt=Percentage.zero(),
        exchange_charge=Percentage(Decimal("0.000173")),
    ),
    (InstrumentType.FUTURES, OrderSide.SELL): LegRates(
        stamp_duty=Percentage.zero(),
        stt=Percentage(Decimal("0.0002")),
        exchange_charge=Percentage(Decimal("0.000173")),
    ),
}


@dataclass(frozen=True)
class ChargeBreakdown:
    """
    Charges for one order leg.

    Attributes:
        side: Buy or sell
        turnover: Price x quantity x lot size
        brokerage: Flat per-order brokerage
        exchange_charge: Exchange transaction charge
        sebi_charge: SEBI turnover fee
        gst: GST on brokerage, exchange and SEBI charges
        stt: Securities transaction tax
        stamp_duty: Stamp duty
    """
    side: OrderSide
    turnover: Money
    brokerage: Money
    exchange_charge: Money
    sebi_charge: Money
    gst: Money
    stt: Money
    stamp_duty: Money

    @property
    def total_cost(self) -> Money:
        """Sum of every charge on this leg."""
        return (
            self.brokerage
            + self.stt
            + self.exchange_charge
            + self.sebi_charge
            + self.gst
            + self.stamp_duty
        )


@dataclass(frozen=True)
class FeeCalculator:
    """
    Domain service for calculating F&O transaction charges.

    Attributes:
        brokerage_per_order: Flat brokerage charged on every order
        gst_rate: GST applied to brokerage, exchange and SEBI charges
        sebi_turnover_fee: SEBI fee on turnover
        schedule: Instrument/side dependent rates
    """
    brokerage_per_order: Money
    gst_rate: Percentage
    sebi_turnover_fee: Percentage
    schedule: Dict[Tuple[InstrumentType, OrderSide], LegRates] = field(
        default_factory=lambda: dict(FEE_SCHEDULE)
    )

    # --- Factory Methods ---

    @classmethod
    def nse_default(cls) -> FeeCalculator:
        """Create calculator with NSE F&O defaults (Rs 20 per order, 18% GST)."""
        return cls(
            brokerage_per_order=Money.inr(Decimal("20")),
            gst_rate=Percentage(Decimal("0.18")),
            sebi_turnover_fee=Percentage(Decimal("0.000001")),
        )

    # --- Rate Lookup ---

    def rates_for(self, instrument: InstrumentType, side: OrderSide) -> LegRates:
        """Return the turnover rates for an instrument and side."""
        return self.schedule[(instrument, side)]

    # --- Charge Calculation ---

    def compute_charges(
        self,
        side: OrderSide,
        price: Money,
        quantity: int,
        lot_size: int,
        instrument: InstrumentType,
    ) -> ChargeBreakdown:
        """
        Compute the full charge breakdown for one order leg.

        GST is levied on brokerage, exchange and SEBI charges only;
        STT and stamp duty are not taxed.
        """
        turnover = price * (quantity * lot_size)
        rates = self.rates_for(instrument, side)

        brokerage = self.brokerage_per_order
        sebi_charge = self._apply(self.sebi_turnover_fee, turnover)
        exchange_charge = self._apply(rates.exchange_charge, turnover)
        stamp_duty = self._apply(rates.stamp_duty, turnover)
        stt = self._apply(rates.stt, turnover)
        gst = self._apply(self.gst_rate, brokerage + exchange_charge + sebi_charge)

        return ChargeBreakdown(
            side=side,
            turnover=turnover,
            brokerage=brokerage,
            exchange_charge=exchange_charge,
            sebi_charge=sebi_charge,
            gst=gst,
            stt=stt,
            stamp_duty=stamp_duty,
        )

    @staticmethod
    def _apply(rate: Percentage, amount: Money) -> Money:
        return Money(rate.apply_to(amount.amount), amount.currency)
