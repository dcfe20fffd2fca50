"""
Utility functions
"""
from decimal import Decimal
from typing import Union

import pandas as pd

from fno_calc.domain.services.fee_calculator import ChargeBreakdown
from fno_calc.domain.value_objects.money import Money


CHARGE_ROWS = [
    ("Turnover", "turnover"),
    ("Brokerage", "brokerage"),
    ("Exchange Charge", "exchange_charge"),
    ("SEBI Charge", "sebi_charge"),
    ("GST", "gst"),
    ("STT", "stt"),
    ("Stamp Duty", "stamp_duty"),
    ("Total Cost", "total_cost"),
]


def format_inr(value: Union[Money, Decimal, int]) -> str:
    """Format an amount as rupees with two decimals (e.g. ₹438.15)"""
    money = value if isinstance(value, Money) else Money.inr(value)
    return str(money)


def charges_to_frame(buy_costs: ChargeBreakdown, sell_costs: ChargeBreakdown) -> pd.DataFrame:
    """
    Lay out both legs' charges side by side

    Args:
        buy_costs: Buy leg charges
        sell_costs: Sell leg charges

    Returns:
        DataFrame indexed by charge name with Buy/Sell columns of formatted amounts
    """
    return pd.DataFrame(
        {
            "Buy": [format_inr(getattr(buy_costs, attr)) for _, attr in CHARGE_ROWS],
            "Sell": [format_inr(getattr(sell_costs, attr)) for _, attr in CHARGE_ROWS],
        },
        index=[label for label, _ in CHARGE_ROWS],
    )
