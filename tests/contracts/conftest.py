"""
Contracts - shared fixtures

Contract tests pin the guarantees every evaluation must keep.
If one of them fails, the calculator output cannot be trusted.
"""
import pytest

from fno_calc.domain.entities.trade import InstrumentType, TradeType


@pytest.fixture
def trade_grid(make_trade):
    """One trade per instrument/direction, winners and losers"""
    trades = []
    for instrument in InstrumentType:
        for trade_type in TradeType:
            for entry, exit in (("150", "160"), ("160", "150"), ("24000", "24100.5")):
                trades.append(
                    make_trade(
                        instrument_type=instrument,
                        trade_type=trade_type,
                        entry=entry,
                        exit=exit,
                        quantity=2,
                        lot_size=75,
                    )
                )
    return trades
