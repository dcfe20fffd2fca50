"""
CalculatorRunner - Command-line front-end for trade evaluation.

Collects form fields, parses them at the boundary, runs the use case
and renders the results panel.
"""
import argparse
import logging
from typing import Any, Dict, List, Optional

from fno_calc.application.dto.evaluation import EvaluationResponse
from fno_calc.config.settings import LoggingConfig, validate_all_configs
from fno_calc.container import Container
from fno_calc.exceptions import ConfigurationError, ParseError
from fno_calc.utils.logger import Logger, setup_logging

logger = logging.getLogger(__name__)

# CLI destination -> form field
FORM_FIELDS = {
    "instrument": "instrument_type",
    "trade_type": "trade_type",
    "symbol": "symbol",
    "expiry": "expiry",
    "strike": "strike_price",
    "entry": "entry_price",
    "exit": "exit_price",
    "quantity": "quantity",
    "lot_size": "lot_size",
    "tax_rate": "profit_tax_rate",
    "initial_margin_rate": "initial_margin_rate",
    "exposure_margin_rate": "exposure_margin_rate",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Net profit, charges and margin for a single F&O trade."
    )
    parser.add_argument("--instrument", default=None, help="options or futures (default: options)")
    parser.add_argument("--trade-type", default=None, help="long (buy then sell) or short (sell then buy)")
    parser.add_argument("--symbol", default=None, help="Underlying symbol (default: NIFTY)")
    parser.add_argument("--expiry", default=None, help="Expiry label (default: 26-Sep-2025)")
    parser.add_argument("--strike", default=None, help="Strike price, options only (default: 24900)")
    parser.add_argument("--entry", required=True, help="Entry price (premium) per unit")
    parser.add_argument("--exit", required=True, help="Exit price (premium) per unit")
    parser.add_argument("--quantity", default=None, help="Number of lots (default: 1)")
    parser.add_argument("--lot-size", default=None, help="Units per lot (default: 50)")
    parser.add_argument("--tax-rate", default=None, help="Profit tax rate in %% (default: 30)")
    parser.add_argument("--initial-margin-rate", default=None, help="Initial margin in %% of turnover (default: 10)")
    parser.add_argument("--exposure-margin-rate", default=None, help="Exposure margin in %% of turnover (default: 5)")
    parser.add_argument("--log-level", default=LoggingConfig.LEVEL, help="Logging level (default: WARNING)")
    return parser


class CalculatorRunner:
    """
    Runs one evaluation from raw form fields.

    Used by the CLI entry point; the container supplies every
    collaborator so tests can inject their own.
    """

    def __init__(self, container: Container):
        """
        Args:
            container: DI container with wired dependencies
        """
        self.container = container
        self._parser = container.get_input_parser()
        self._evaluate_trade = container.get_evaluate_trade_use_case()

    def evaluate(self, raw: Dict[str, Any]) -> EvaluationResponse:
        """
        Parse raw fields and evaluate the trade.

        Raises:
            ParseError: If a field cannot be coerced
        """
        trade = self._parser.parse(raw)
        return self._evaluate_trade.execute(trade)

    def run(self, raw: Dict[str, Any]) -> int:
        """
        Evaluate and render.

        Returns:
            Process exit code (0 on success, 1 on invalid input)
        """
        try:
            response = self.evaluate(raw)
        except ParseError as e:
            Logger.print_error(e.message)
            return 1

        if not response.success:
            Logger.print_error(response.error_message)
            return 1

        Logger.print_trade_result(response.result)
        Logger.print_charge_breakdown(response.result)
        return 0


def form_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Map parsed CLI options onto form fields, skipping unset ones."""
    raw = {}
    for dest, field in FORM_FIELDS.items():
        value = getattr(args, dest)
        if value is not None:
            raw[field] = value
    return raw


def main(argv: Optional[List[str]] = None, container: Optional[Container] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        validate_all_configs()
    except ConfigurationError as e:
        Logger.print_error(e.message)
        return 1

    runner = CalculatorRunner(container or Container())
    exit_code = runner.run(form_from_args(args))
    logger.debug(f"Finished with exit code {exit_code}")
    return exit_code
