"""
TradeInputAdapter - input coercion adapter

Turns raw form values into a TradeInput, or raises ParseError naming the
first field that could not be coerced.
"""
from typing import Any, Mapping

import pydantic

from fno_calc.application.ports.outbound.input_parser_port import InputParserPort
from fno_calc.domain.entities.trade import ContractSpec, InstrumentType, TradeInput, TradeType
from fno_calc.domain.value_objects.money import Money
from fno_calc.domain.value_objects.percentage import Percentage
from fno_calc.exceptions import ParseError
from fno_calc.infrastructure.adapters.validation.trade_form_schema import TradeForm


class TradeInputAdapter(InputParserPort):
    """
    Input coercion adapter.

    Features:
    - Parses numeric text into Decimal/int
    - Case-insensitive instrument and trade type
    - Rates checked against [0, 100] percentage points
    - Blank fields fall back to TradeDefaultsConfig

    Positivity of prices and quantities is left to the domain evaluator.
    """

    def parse(self, raw: Mapping[str, Any]) -> TradeInput:
        """
        Coerce raw field values into a TradeInput.

        Args:
            raw: Field name to raw value

        Returns:
            TradeInput

        Raises:
            ParseError: If a field is malformed or out of range
        """
        if not isinstance(raw, Mapping):
            raise ParseError("input", f"expected a mapping of fields, got {type(raw).__name__}")

        try:
            form = TradeForm.model_validate(dict(raw))
        except pydantic.ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "input"
            raise ParseError(field, first["msg"])

        return self.to_trade_input(form)

    @staticmethod
    def to_trade_input(form: TradeForm) -> TradeInput:
        """Convert a validated form into the domain input record."""
        instrument_type = InstrumentType(form.instrument_type)
        strike_price = form.strike_price if instrument_type == InstrumentType.OPTIONS else None

        return TradeInput(
            instrument_type=instrument_type,
            trade_type=TradeType(form.trade_type),
            entry_price=Money.inr(form.entry_price),
            exit_price=Money.inr(form.exit_price),
            quantity=form.quantity,
            lot_size=form.lot_size,
            profit_tax_rate=Percentage.from_points(form.profit_tax_rate),
            initial_margin_rate=Percentage.from_points(form.initial_margin_rate),
            exposure_margin_rate=Percentage.from_points(form.exposure_margin_rate),
            contract=ContractSpec(
                symbol=form.symbol,
                expiry=form.expiry,
                strike_price=strike_price,
            ),
        )
