"""
Tests for TradeEvaluator domain service.
"""
import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from fno_calc.domain.entities.trade import InstrumentType, OrderSide, TradeType
from fno_calc.domain.exceptions import DomainError, ValidationError
from fno_calc.domain.services.fee_calculator import FeeCalculator
from fno_calc.domain.services.margin_calculator import MarginCalculator
from fno_calc.domain.services.trade_evaluator import TradeEvaluator
from fno_calc.domain.value_objects.money import Money


class TestLongOptionTrade:
    """Option bought at 150 and sold at 160 (1 lot of 50)."""

    def test_leg_turnovers(self, evaluator, long_option_trade):
        result = evaluator.evaluate(long_option_trade)
        assert result.buy_costs.turnover == Money.inr("7500")
        assert result.sell_costs.turnover == Money.inr("8000")

    def test_buy_pays_stamp_duty_sell_pays_stt(self, evaluator, long_option_trade):
        result = evaluator.evaluate(long_option_trade)
        assert result.buy_costs.stamp_duty == Money.inr("0.225")
        assert result.buy_costs.stt.is_zero()
        assert result.sell_costs.stt == Money.inr("8")
        assert result.sell_costs.stamp_duty.is_zero()

    def test_net_profit_figures(self, evaluator, long_option_trade, scenario_a_expected):
        result = evaluator.evaluate(long_option_trade)
        assert result.gross_profit_loss == Money.inr("500")
        assert result.total_charges.amount == scenario_a_expected["total_charges"]
        assert result.net_profit_before_tax.amount == scenario_a_expected["net_profit_before_tax"]
        assert result.tax_on_profit.amount == scenario_a_expected["tax_on_profit"]
        assert result.final_net_profit.amount == scenario_a_expected["final_net_profit"]

    def test_margin_is_premium(self, evaluator, long_option_trade):
        result = evaluator.evaluate(long_option_trade)
        assert result.required_margin.initial == Money.inr("7500")
        assert result.required_margin.exposure.is_zero()

    def test_result_keeps_trade(self, evaluator, long_option_trade):
        result = evaluator.evaluate(long_option_trade)
        assert result.trade is long_option_trade
        assert result.is_profitable
        assert result.is_taxed


class TestShortOptionTrade:
    """Option sold at 100 and bought back at 80 (2 lots of 50)."""

    def test_legs_are_swapped(self, evaluator, short_option_trade):
        result = evaluator.evaluate(short_option_trade)
        # bought back at exit, sold at entry
        assert result.buy_costs.turnover == Money.inr("8000")
        assert result.sell_costs.turnover == Money.inr("10000")

    def test_gross_profit(self, evaluator, short_option_trade):
        result = evaluator.evaluate(short_option_trade)
        assert result.gross_profit_loss == Money.inr("2000")

    def test_charges_and_net(self, evaluator, short_option_trade):
        result = evaluator.evaluate(short_option_trade)
        assert result.buy_costs.total_cost == Money.inr("27.156272")
        assert result.sell_costs.total_cost == Money.inr("37.74534")
        assert result.total_charges == Money.inr("64.901612")
        assert result.net_profit_before_tax == Money.inr("1935.098388")
        assert result.tax_on_profit == Money.inr("580.5295164")
        assert result.final_net_profit == Money.inr("1354.5688716")

    def test_margin_on_entry_turnover(self, evaluator, short_option_trade):
        result = evaluator.evaluate(short_option_trade)
        assert result.required_margin.initial == Money.inr("1000")
        assert result.required_margin.exposure == Money.inr("500")
        assert result.required_margin.total == Money.inr("1500")


class TestFuturesTrade:
    """Futures round trips."""

    def test_long_futures(self, evaluator, long_futures_trade):
        result = evaluator.evaluate(long_futures_trade)
        assert result.gross_profit_loss == Money.inr("2500")
        assert result.total_charges == Money.inr("426.5973")
        assert result.net_profit_before_tax == Money.inr("2073.4027")
        assert result.required_margin.total == Money.inr("90000")

    def test_short_futures_margin_uses_entry_price(self, evaluator, make_trade):
        """Margin is posted at entry, never at the closing price."""
        trade = make_trade(
            instrument_type=InstrumentType.FUTURES,
            trade_type=TradeType.SHORT,
            entry="24100",
            exit="24000",
            lot_size=25,
        )
        result = evaluator.evaluate(trade)
        assert result.gross_profit_loss == Money.inr("2500")
        assert result.total_charges == Money.inr("426.5973")
        assert result.required_margin.total == Money.inr("90375")


class TestLossesAndTax:
    """Tax only applies to a positive net profit."""

    def test_losing_trade_is_not_taxed(self, evaluator, make_trade):
        result = evaluator.evaluate(make_trade(entry="150", exit="140"))
        assert result.gross_profit_loss == Money.inr("-500")
        assert result.net_profit_before_tax.is_negative()
        assert result.tax_on_profit.is_zero()
        assert result.final_net_profit == result.net_profit_before_tax
        assert not result.is_profitable
        assert not result.is_taxed

    def test_charges_turn_small_gain_into_loss(self, evaluator, make_trade):
        """A 0.5 point gain on one lot does not cover two brokerages."""
        result = evaluator.evaluate(make_trade(entry="150", exit="150.5"))
        assert result.gross_profit_loss == Money.inr("25")
        assert result.net_profit_before_tax.is_negative()
        assert result.tax_on_profit.is_zero()

    def test_zero_tax_rate(self, evaluator, make_trade):
        result = evaluator.evaluate(make_trade(tax_rate="0"))
        assert result.tax_on_profit.is_zero()
        assert result.final_net_profit == result.net_profit_before_tax

    def test_full_tax_rate(self, evaluator, make_trade):
        result = evaluator.evaluate(make_trade(tax_rate="100"))
        assert result.final_net_profit.is_zero()


class TestValidationGate:
    """Invalid inputs are rejected before any calculation."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"entry": "0"},
            {"exit": "0"},
            {"entry": "-1"},
            {"quantity": 0},
            {"lot_size": 0},
        ],
    )
    def test_rejects_non_positive_values(self, make_trade, overrides):
        fee_calculator = MagicMock(spec=FeeCalculator)
        margin_calculator = MagicMock(spec=MarginCalculator)
        evaluator = TradeEvaluator(fee_calculator=fee_calculator, margin_calculator=margin_calculator)

        with pytest.raises(ValidationError) as exc_info:
            evaluator.evaluate(make_trade(**overrides))

        assert exc_info.value.message == "Please enter valid prices and quantities."
        fee_calculator.compute_charges.assert_not_called()
        margin_calculator.compute_margin.assert_not_called()

    def test_validation_error_is_domain_error(self):
        assert issubclass(ValidationError, DomainError)


class TestCollaborators:
    """TradeEvaluator wiring."""

    def test_defaults(self):
        evaluator = TradeEvaluator()
        assert evaluator.fee_calculator == FeeCalculator.nse_default()
        assert isinstance(evaluator.margin_calculator, MarginCalculator)

    def test_calls_fee_calculator_per_leg(self, make_trade, fee_calculator):
        spy = MagicMock(wraps=fee_calculator)
        evaluator = TradeEvaluator(fee_calculator=spy)
        evaluator.evaluate(make_trade(trade_type=TradeType.SHORT, entry="100", exit="80"))

        calls = {c.kwargs["side"]: c.kwargs["price"] for c in spy.compute_charges.call_args_list}
        assert calls == {OrderSide.BUY: Money.inr("80"), OrderSide.SELL: Money.inr("100")}

    def test_idempotent(self, evaluator, long_option_trade):
        assert evaluator.evaluate(long_option_trade) == evaluator.evaluate(long_option_trade)

    def test_custom_brokerage(self, make_trade):
        calc = FeeCalculator(
            brokerage_per_order=Money.inr("0"),
            gst_rate=FeeCalculator.nse_default().gst_rate,
            sebi_turnover_fee=FeeCalculator.nse_default().sebi_turnover_fee,
        )
        result = TradeEvaluator(fee_calculator=calc).evaluate(make_trade())
        # 61.850277 minus two brokerages and their 18% GST
        assert result.total_charges.amount == Decimal("61.850277") - Decimal("40") - Decimal("7.2")
