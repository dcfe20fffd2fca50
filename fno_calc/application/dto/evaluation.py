"""
Evaluation DTOs returned to presentation adapters.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from fno_calc.domain.services.fee_calculator import ChargeBreakdown
from fno_calc.domain.services.trade_evaluator import TradeResult


@dataclass(frozen=True)
class EvaluationResponse:
    """
    Response from a trade evaluation.

    Attributes:
        success: Whether the evaluation produced a result
        result: The evaluated trade (None on failure)
        error_message: Validation message if failed
        error_code: Machine readable failure code
        evaluated_at: Evaluation timestamp
    """
    success: bool
    result: Optional[TradeResult] = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None
    evaluated_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def success_response(cls, result: TradeResult) -> EvaluationResponse:
        """Create successful evaluation response."""
        return cls(success=True, result=result)

    @classmethod
    def failure_response(
        cls,
        error_message: str,
        error_code: str = "INVALID_TRADE_INPUT",
    ) -> EvaluationResponse:
        """Create failed evaluation response."""
        return cls(
            success=False,
            error_message=error_message,
            error_code=error_code,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict of strings and Decimals."""
        if not self.success or self.result is None:
            return {
                "success": False,
                "error_message": self.error_message,
                "error_code": self.error_code,
            }

        result = self.result
        return {
            "success": True,
            "buy_costs": _charges_to_dict(result.buy_costs),
            "sell_costs": _charges_to_dict(result.sell_costs),
            "gross_profit_loss": result.gross_profit_loss.amount,
            "total_charges": result.total_charges.amount,
            "net_profit_before_tax": result.net_profit_before_tax.amount,
            "tax_on_profit": result.tax_on_profit.amount,
            "final_net_profit": result.final_net_profit.amount,
            "required_margin": {
                "total": result.required_margin.total.amount,
                "initial": result.required_margin.initial.amount,
                "exposure": result.required_margin.exposure.amount,
            },
        }


def _charges_to_dict(charges: ChargeBreakdown) -> Dict[str, Any]:
    return {
        "turnover": charges.turnover.amount,
        "brokerage": charges.brokerage.amount,
        "exchange_charge": charges.exchange_charge.amount,
        "sebi_charge": charges.sebi_charge.amount,
        "gst": charges.gst.amount,
        "stt": charges.stt.amount,
        "stamp_duty": charges.stamp_duty.amount,
        "total_cost": charges.total_cost.amount,
    }
