"""
TradeEvaluator Domain Service

Combines leg charges, margin and profit tax into the net result of a
single round-trip F&O trade.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from fno_calc.domain.entities.trade import OrderSide, TradeInput
from fno_calc.domain.exceptions import ValidationError
from fno_calc.domain.services.fee_calculator import ChargeBreakdown, FeeCalculator
from fno_calc.domain.services.margin_calculator import MarginCalculator, MarginResult
from fno_calc.domain.value_objects.money import Money


@dataclass(frozen=True)
class TradeResult:
    """
    Outcome of a trade evaluation.

    Attributes:
        trade: The evaluated input
        buy_costs: Charges on the buy leg
        sell_costs: Charges on the sell leg
        gross_profit_loss: P&L before any charges
        total_charges: Buy plus sell leg charges
        net_profit_before_tax: Gross P&L minus charges
        tax_on_profit: Tax on a positive net profit, zero otherwise
        final_net_profit: Net profit after tax
        required_margin: Margin blocked to open the position
    """
    trade: TradeInput
    buy_costs: ChargeBreakdown
    sell_costs: ChargeBreakdown
    gross_profit_loss: Money
    total_charges: Money
    net_profit_before_tax: Money
    tax_on_profit: Money
    final_net_profit: Money
    required_margin: MarginResult

    @property
    def is_profitable(self) -> bool:
        return self.final_net_profit.is_positive()

    @property
    def is_taxed(self) -> bool:
        return self.tax_on_profit.is_positive()


class TradeEvaluator:
    """
    Domain service evaluating the net profit of one trade.

    Stateless: the same input always yields an equal result.
    """

    def __init__(
        self,
        fee_calculator: Optional[FeeCalculator] = None,
        margin_calculator: Optional[MarginCalculator] = None,
    ):
        """
        Args:
            fee_calculator: Leg charge calculator (NSE defaults if None)
            margin_calculator: Margin calculator (default if None)
        """
        self.fee_calculator = fee_calculator or FeeCalculator.nse_default()
        self.margin_calculator = margin_calculator or MarginCalculator()

    def evaluate(self, trade: TradeInput) -> TradeResult:
        """
        Evaluate a trade.

        Raises:
            ValidationError: If a price, the quantity or the total units
                is not strictly positive
        """
        if not trade.has_valid_prices_and_quantities():
            raise ValidationError()

        buy_costs = self._leg_charges(trade, OrderSide.BUY)
        sell_costs = self._leg_charges(trade, OrderSide.SELL)

        if trade.is_long:
            gross_profit_loss = (trade.exit_price - trade.entry_price) * trade.total_units
        else:
            gross_profit_loss = (trade.entry_price - trade.exit_price) * trade.total_units

        total_charges = buy_costs.total_cost + sell_costs.total_cost
        net_profit_before_tax = gross_profit_loss - total_charges

        required_margin = self.margin_calculator.compute_margin(
            instrument=trade.instrument_type,
            trade_type=trade.trade_type,
            entry_price=trade.entry_price,
            quantity=trade.quantity,
            lot_size=trade.lot_size,
            initial_rate=trade.initial_margin_rate,
            exposure_rate=trade.exposure_margin_rate,
        )

        # Losses are neither taxed nor carried forward
        if net_profit_before_tax.is_positive():
            tax_on_profit = Money(
                trade.profit_tax_rate.apply_to(net_profit_before_tax.amount),
                net_profit_before_tax.currency,
            )
        else:
            tax_on_profit = Money.zero(net_profit_before_tax.currency)

        return TradeResult(
            trade=trade,
            buy_costs=buy_costs,
            sell_costs=sell_costs,
            gross_profit_loss=gross_profit_loss,
            total_charges=total_charges,
            net_profit_before_tax=net_profit_before_tax,
            tax_on_profit=tax_on_profit,
            final_net_profit=net_profit_before_tax - tax_on_profit,
            required_margin=required_margin,
        )

    def _leg_charges(self, trade: TradeInput, side: OrderSide) -> ChargeBreakdown:
        return self.fee_calculator.compute_charges(
            side=side,
            price=trade.leg_price(side),
            quantity=trade.quantity,
            lot_size=trade.lot_size,
            instrument=trade.instrument_type,
        )
