"""
Logging and console output
"""
import logging
import sys

from fno_calc.domain.services.trade_evaluator import TradeResult
from fno_calc.utils.helpers import charges_to_frame, format_inr


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure root logging for CLI runs"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )


class Logger:
    """Console output for evaluation results"""

    SEPARATOR_LENGTH = 60

    @staticmethod
    def _separator() -> str:
        """Separator line"""
        return "=" * Logger.SEPARATOR_LENGTH

    @staticmethod
    def print_header(title: str):
        """Print a section header"""
        print(f"\n{Logger._separator()}")
        print(title)
        print(Logger._separator())

    @staticmethod
    def _row(label: str, value: str):
        print(f"{label:<30}{value:>30}")

    @staticmethod
    def print_trade_result(result: TradeResult):
        """
        Print the results panel

        The tax line is only shown when there is a profit to tax.

        Args:
            result: Evaluated trade
        """
        trade = result.trade
        title = "📊 Results"
        if trade.contract is not None:
            title = f"📊 Results - {trade.contract.label(trade.instrument_type)}"
        Logger.print_header(title)

        margin = result.required_margin
        Logger._row("Required Margin", format_inr(margin.total))
        Logger._row("  Initial Margin", format_inr(margin.initial))
        Logger._row("  Exposure Margin", format_inr(margin.exposure))
        print("-" * Logger.SEPARATOR_LENGTH)

        Logger._row("Gross P&L", format_inr(result.gross_profit_loss))
        Logger._row("Total Charges", f"- {format_inr(result.total_charges)}")
        print("-" * Logger.SEPARATOR_LENGTH)

        Logger._row("Net P&L before Tax", format_inr(result.net_profit_before_tax))
        if result.net_profit_before_tax.is_positive():
            Logger._row(f"Tax on Profit ({trade.profit_tax_rate})", f"- {format_inr(result.tax_on_profit)}")
            print("-" * Logger.SEPARATOR_LENGTH)

        Logger._row("Final Net P&L", format_inr(result.final_net_profit))
        print(Logger._separator())

    @staticmethod
    def print_charge_breakdown(result: TradeResult):
        """Print buy-side and sell-side charges as a table"""
        Logger.print_header("🧾 Detailed Charges")
        frame = charges_to_frame(result.buy_costs, result.sell_costs)
        print(frame.to_string())
        print(f"\n{Logger._separator()}\n")

    @staticmethod
    def print_error(message: str):
        """Print an error message to stderr"""
        print(f"❌ {message}", file=sys.stderr)
