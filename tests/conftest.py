"""
Shared pytest fixtures
"""
from decimal import Decimal

import pytest

from fno_calc.domain.entities.trade import ContractSpec, InstrumentType, TradeInput, TradeType
from fno_calc.domain.services.fee_calculator import FeeCalculator
from fno_calc.domain.services.margin_calculator import MarginCalculator
from fno_calc.domain.services.trade_evaluator import TradeEvaluator
from fno_calc.domain.value_objects.money import Money
from fno_calc.domain.value_objects.percentage import Percentage


@pytest.fixture
def fee_calculator():
    """NSE default fee calculator (Rs 20/order, 18% GST)"""
    return FeeCalculator.nse_default()


@pytest.fixture
def margin_calculator():
    return MarginCalculator()


@pytest.fixture
def evaluator(fee_calculator, margin_calculator):
    return TradeEvaluator(fee_calculator=fee_calculator, margin_calculator=margin_calculator)


@pytest.fixture
def make_trade():
    """Factory for TradeInput with the calculator form defaults"""
    def _make(
        instrument_type=InstrumentType.OPTIONS,
        trade_type=TradeType.LONG,
        entry="150",
        exit="160",
        quantity=1,
        lot_size=50,
        tax_rate="30",
        initial_margin_rate="10",
        exposure_margin_rate="5",
        contract=None,
    ):
        return TradeInput(
            instrument_type=instrument_type,
            trade_type=trade_type,
            entry_price=Money.inr(entry),
            exit_price=Money.inr(exit),
            quantity=quantity,
            lot_size=lot_size,
            profit_tax_rate=Percentage.from_points(tax_rate),
            initial_margin_rate=Percentage.from_points(initial_margin_rate),
            exposure_margin_rate=Percentage.from_points(exposure_margin_rate),
            contract=contract,
        )
    return _make


@pytest.fixture
def long_option_trade(make_trade):
    """NIFTY 24900 option bought at 150, sold at 160, 1 lot of 50"""
    return make_trade(contract=ContractSpec(symbol="NIFTY", expiry="26-Sep-2025", strike_price=24900))


@pytest.fixture
def short_option_trade(make_trade):
    """Option sold at 100, bought back at 80, 2 lots of 50"""
    return make_trade(trade_type=TradeType.SHORT, entry="100", exit="80", quantity=2)


@pytest.fixture
def long_futures_trade(make_trade):
    """Futures bought at 24000, sold at 24100, 1 lot of 25"""
    return make_trade(
        instrument_type=InstrumentType.FUTURES,
        entry="24000",
        exit="24100",
        lot_size=25,
    )


@pytest.fixture
def scenario_a_expected():
    """Hand-computed figures for the long option trade"""
    return {
        "total_charges": Decimal("61.850277"),
        "net_profit_before_tax": Decimal("438.149723"),
        "tax_on_profit": Decimal("131.4449169"),
        "final_net_profit": Decimal("306.7048061"),
    }
