"""
InputParserPort - Interface for turning raw form input into a TradeInput.

Adapters implementing this interface own type coercion and range checks
for user supplied fields, so the domain only ever sees typed values.
"""
from abc import ABC, abstractmethod
from typing import Any, Mapping

from fno_calc.domain.entities.trade import TradeInput


class InputParserPort(ABC):
    """
    Port interface for input coercion.
    """

    @abstractmethod
    def parse(self, raw: Mapping[str, Any]) -> TradeInput:
        """
        Coerce raw field values into a TradeInput.

        Args:
            raw: Field name to raw value (strings or numbers)

        Returns:
            Fully populated TradeInput

        Raises:
            ParseError: If a field is malformed or out of range
        """
        pass
