"""
Tests for trade entities.
"""
import pytest
from dataclasses import FrozenInstanceError

from fno_calc.domain.entities.trade import ContractSpec, InstrumentType, OrderSide, TradeType
from fno_calc.domain.value_objects.money import Money


class TestEnums:
    """Tests for trade enums."""

    def test_opening_side(self):
        """Long opens with a buy, short opens with a sell."""
        assert TradeType.LONG.opening_side() == OrderSide.BUY
        assert TradeType.SHORT.opening_side() == OrderSide.SELL

    def test_enum_values_match_form_values(self):
        assert InstrumentType("options") == InstrumentType.OPTIONS
        assert TradeType("short") == TradeType.SHORT


class TestTradeInput:
    """Tests for TradeInput."""

    def test_total_units(self, make_trade):
        trade = make_trade(quantity=3, lot_size=75)
        assert trade.total_units == 225

    def test_is_immutable(self, make_trade):
        trade = make_trade()
        with pytest.raises(FrozenInstanceError):
            trade.quantity = 2

    def test_long_leg_prices(self, make_trade):
        """Long buys at entry and sells at exit."""
        trade = make_trade(entry="150", exit="160")
        assert trade.leg_price(OrderSide.BUY) == Money.inr("150")
        assert trade.leg_price(OrderSide.SELL) == Money.inr("160")

    def test_short_leg_prices(self, make_trade):
        """Short sells at entry and buys back at exit."""
        trade = make_trade(trade_type=TradeType.SHORT, entry="100", exit="80")
        assert trade.leg_price(OrderSide.SELL) == Money.inr("100")
        assert trade.leg_price(OrderSide.BUY) == Money.inr("80")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"entry": "0"},
            {"exit": "0"},
            {"entry": "-5"},
            {"quantity": 0},
            {"lot_size": 0},
            {"lot_size": -50},
        ],
    )
    def test_invalid_prices_and_quantities(self, make_trade, overrides):
        assert not make_trade(**overrides).has_valid_prices_and_quantities()

    def test_valid_prices_and_quantities(self, make_trade):
        assert make_trade().has_valid_prices_and_quantities()


class TestContractSpec:
    """Tests for ContractSpec."""

    def test_option_label(self):
        spec = ContractSpec(symbol="NIFTY", expiry="26-Sep-2025", strike_price=24900)
        assert spec.label(InstrumentType.OPTIONS) == "NIFTY 26-Sep-2025 24900"

    def test_futures_label(self):
        spec = ContractSpec(symbol="BANKNIFTY", expiry="30-Sep-2025")
        assert spec.label(InstrumentType.FUTURES) == "BANKNIFTY 30-Sep-2025 FUT"
