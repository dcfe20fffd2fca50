"""
Money Value Object

Represents monetary amounts with currency, ensuring type safety and
exact decimal arithmetic for charge and P&L calculations.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Union


class Currency(Enum):
    """Supported currencies."""
    INR = "INR"

    @property
    def precision(self) -> int:
        """Return decimal precision for this currency."""
        precisions = {
            Currency.INR: 2,
        }
        return precisions.get(self, 2)

    @property
    def symbol(self) -> str:
        """Return the display symbol for this currency."""
        symbols = {
            Currency.INR: "₹",
        }
        return symbols.get(self, self.value)


@dataclass(frozen=True)
class Money:
    """
    Immutable value object representing a monetary amount.

    Negative amounts are allowed so the same type carries losses.

    Attributes:
        amount: The numeric value (always stored as Decimal)
        currency: The currency type
    """
    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        """Normalize the amount to Decimal."""
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

    # --- Factory Methods ---

    @classmethod
    def inr(cls, amount: Union[int, float, Decimal, str]) -> Money:
        """Create INR Money."""
        return cls(Decimal(str(amount)), Currency.INR)

    @classmethod
    def zero(cls, currency: Currency = Currency.INR) -> Money:
        """Create zero Money of given currency."""
        return cls(Decimal("0"), currency)

    # --- Arithmetic Operations ---

    def __add__(self, other: Money) -> Money:
        """Add two Money objects of same currency."""
        self._ensure_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        """Subtract Money objects of same currency."""
        self._ensure_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, scalar: Union[int, Decimal]) -> Money:
        """Multiply Money by a scalar."""
        scalar_decimal = Decimal(str(scalar))
        return Money(self.amount * scalar_decimal, self.currency)

    def __rmul__(self, scalar: Union[int, Decimal]) -> Money:
        """Right multiply Money by a scalar."""
        return self.__mul__(scalar)

    def __neg__(self) -> Money:
        return Money(-self.amount, self.currency)

    # --- Comparison Operations ---

    def __lt__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount >= other.amount

    # --- Utility Methods ---

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == Decimal("0")

    def is_positive(self) -> bool:
        """Check if amount is positive (greater than zero)."""
        return self.amount > Decimal("0")

    def is_negative(self) -> bool:
        """Check if amount is negative (a loss)."""
        return self.amount < Decimal("0")

    def round(self, places: int) -> Money:
        """Round to specified decimal places."""
        quantize_str = "1." + "0" * places if places > 0 else "1"
        rounded = self.amount.quantize(
            Decimal(quantize_str), rounding=ROUND_HALF_UP
        )
        return Money(rounded, self.currency)

    def round_for_currency(self) -> Money:
        """Round to currency's standard precision."""
        return self.round(self.currency.precision)

    # --- Private Methods ---

    def _ensure_same_currency(self, other: Money) -> None:
        """Raise error if currencies don't match."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot operate on different currencies: "
                f"{self.currency.value} vs {other.currency.value}"
            )

    # --- String Representation ---

    def __str__(self) -> str:
        """Format Money with its currency symbol at currency precision."""
        rounded = self.round_for_currency().amount
        return f"{self.currency.symbol}{rounded:.{self.currency.precision}f}"

    def __repr__(self) -> str:
        return f"Money({self.amount}, {self.currency})"
