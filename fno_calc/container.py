"""
Dependency Injection Container.

This module provides a central container for wiring the calculators,
the evaluator, the input parser and the use case.

Usage:
    # Production (charges from environment/config)
    container = Container()
    evaluate_trade = container.get_evaluate_trade_use_case()

    # Testing
    container = Container.create_for_testing()
    # or with custom collaborators
    container = Container(fee_calculator=FeeCalculator.nse_default())
"""
import logging
from typing import Optional

from fno_calc.application.ports.outbound.input_parser_port import InputParserPort
from fno_calc.application.use_cases.evaluate_trade import EvaluateTradeUseCase
from fno_calc.domain.services.fee_calculator import FeeCalculator
from fno_calc.domain.services.margin_calculator import MarginCalculator
from fno_calc.domain.services.trade_evaluator import TradeEvaluator
from fno_calc.domain.value_objects.money import Money
from fno_calc.domain.value_objects.percentage import Percentage

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency Injection Container.

    Caches one instance of each collaborator; all of them are stateless,
    so sharing across evaluations is safe.
    """

    def __init__(
        self,
        fee_calculator: Optional[FeeCalculator] = None,
        margin_calculator: Optional[MarginCalculator] = None,
        input_parser: Optional[InputParserPort] = None,
    ):
        """
        Initialize container with optional overrides.

        Args:
            fee_calculator: Fee calculator (built from ChargesConfig if None)
            margin_calculator: Margin calculator (default if None)
            input_parser: Input parser port implementation (default if None)
        """
        self._fee_calculator = fee_calculator
        self._margin_calculator = margin_calculator
        self._input_parser = input_parser

        # Cached services
        self._trade_evaluator: Optional[TradeEvaluator] = None
        self._evaluate_trade_use_case: Optional[EvaluateTradeUseCase] = None

    @classmethod
    def create_for_testing(cls) -> "Container":
        """
        Create container with fixed NSE charges, ignoring environment overrides.

        Returns:
            Container with deterministic collaborators
        """
        return cls(fee_calculator=FeeCalculator.nse_default())

    # --- Collaborator Getters ---

    def get_fee_calculator(self) -> FeeCalculator:
        """Get fee calculator."""
        if self._fee_calculator is None:
            from fno_calc.config.settings import ChargesConfig
            self._fee_calculator = FeeCalculator(
                brokerage_per_order=Money.inr(ChargesConfig.BROKERAGE_PER_ORDER),
                gst_rate=Percentage(ChargesConfig.GST_RATE),
                sebi_turnover_fee=Percentage(ChargesConfig.SEBI_TURNOVER_FEE),
            )
            logger.debug(
                f"FeeCalculator from config: brokerage={self._fee_calculator.brokerage_per_order.amount} "
                f"gst={self._fee_calculator.gst_rate.value}"
            )
        return self._fee_calculator

    def get_margin_calculator(self) -> MarginCalculator:
        """Get margin calculator."""
        if self._margin_calculator is None:
            self._margin_calculator = MarginCalculator()
        return self._margin_calculator

    def get_input_parser(self) -> InputParserPort:
        """Get input parser port implementation."""
        if self._input_parser is None:
            from fno_calc.infrastructure.adapters.validation.trade_input_adapter import TradeInputAdapter
            self._input_parser = TradeInputAdapter()
        return self._input_parser

    # --- Service Getters ---

    def get_trade_evaluator(self) -> TradeEvaluator:
        """Get trade evaluator domain service."""
        if self._trade_evaluator is None:
            self._trade_evaluator = TradeEvaluator(
                fee_calculator=self.get_fee_calculator(),
                margin_calculator=self.get_margin_calculator(),
            )
        return self._trade_evaluator

    def get_evaluate_trade_use_case(self) -> EvaluateTradeUseCase:
        """Get evaluate trade use case."""
        if self._evaluate_trade_use_case is None:
            self._evaluate_trade_use_case = EvaluateTradeUseCase(
                evaluator=self.get_trade_evaluator(),
            )
        return self._evaluate_trade_use_case
