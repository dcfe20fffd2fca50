"""
Trade form schema
Pydantic model used to coerce raw form fields.
"""
from decimal import Decimal
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fno_calc.config.settings import TradeDefaultsConfig


class TradeForm(BaseModel):
    """Raw trade form (strings or numbers, blanks fall back to defaults)"""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore", frozen=True, validate_default=True)

    instrument_type: Literal["options", "futures"] = Field(
        default_factory=lambda: TradeDefaultsConfig.INSTRUMENT_TYPE.lower(),
        description="Instrument type (options or futures)",
    )
    trade_type: Literal["long", "short"] = Field(
        default_factory=lambda: TradeDefaultsConfig.TRADE_TYPE.lower(),
        description="long = buy then sell, short = sell then buy",
    )
    symbol: str = Field(default_factory=lambda: TradeDefaultsConfig.SYMBOL, min_length=1)
    expiry: str = Field(default_factory=lambda: TradeDefaultsConfig.EXPIRY, min_length=1)
    strike_price: Optional[int] = Field(
        default_factory=lambda: TradeDefaultsConfig.STRIKE_PRICE, ge=0
    )
    entry_price: Decimal = Field(..., allow_inf_nan=False, description="Entry price (premium)")
    exit_price: Decimal = Field(..., allow_inf_nan=False, description="Exit price (premium)")
    quantity: int = Field(default_factory=lambda: TradeDefaultsConfig.QUANTITY, description="Number of lots")
    lot_size: int = Field(default_factory=lambda: TradeDefaultsConfig.LOT_SIZE, description="Units per lot")
    profit_tax_rate: Decimal = Field(
        default_factory=lambda: TradeDefaultsConfig.PROFIT_TAX_RATE,
        ge=0, le=100, allow_inf_nan=False,
    )
    initial_margin_rate: Decimal = Field(
        default_factory=lambda: TradeDefaultsConfig.INITIAL_MARGIN_RATE,
        ge=0, le=100, allow_inf_nan=False,
    )
    exposure_margin_rate: Decimal = Field(
        default_factory=lambda: TradeDefaultsConfig.EXPOSURE_MARGIN_RATE,
        ge=0, le=100, allow_inf_nan=False,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_blank_fields(cls, data: Any) -> Any:
        """Treat blank form fields as missing."""
        if isinstance(data, dict):
            return {
                key: value
                for key, value in data.items()
                if value is not None and not (isinstance(value, str) and not value.strip())
            }
        return data

    @field_validator("instrument_type", "trade_type", mode="before")
    @classmethod
    def normalize_choice(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value
