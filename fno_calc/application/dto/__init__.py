"""Data Transfer Objects for application layer."""
from fno_calc.application.dto.evaluation import EvaluationResponse

__all__ = [
    "EvaluationResponse",
]
