"""
EvaluateTradeUseCase - Net profit evaluation for a single F&O trade.

This use case runs the domain TradeEvaluator and turns its outcome
into an EvaluationResponse, so presentation adapters never deal with
domain exceptions directly.
"""
import logging

from fno_calc.application.dto.evaluation import EvaluationResponse
from fno_calc.domain.entities.trade import TradeInput
from fno_calc.domain.exceptions import ValidationError
from fno_calc.domain.services.trade_evaluator import TradeEvaluator

logger = logging.getLogger(__name__)


class EvaluateTradeUseCase:
    """
    Use case for evaluating a trade.

    Stateless apart from the injected evaluator; safe to share.
    """

    def __init__(self, evaluator: TradeEvaluator):
        """
        Initialize with the domain evaluator.

        Args:
            evaluator: Domain service computing charges, margin and P&L
        """
        self.evaluator = evaluator

    def execute(self, trade: TradeInput) -> EvaluationResponse:
        """
        Evaluate a trade.

        Args:
            trade: Fully populated trade input

        Returns:
            EvaluationResponse with the result or the validation failure
        """
        try:
            result = self.evaluator.evaluate(trade)
        except ValidationError as e:
            logger.warning(f"Trade rejected: {e.message}")
            return EvaluationResponse.failure_response(error_message=e.message)

        logger.info(
            f"Evaluated {trade.instrument_type.value} {trade.trade_type.value} trade: "
            f"gross={result.gross_profit_loss.amount} "
            f"charges={result.total_charges.amount} "
            f"final={result.final_net_profit.amount}"
        )
        return EvaluationResponse.success_response(result)
