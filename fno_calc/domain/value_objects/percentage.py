"""
Percentage Value Object

Represents fee, tax and margin rates, ensuring exact decimal arithmetic.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class Percentage:
    """
    Immutable value object representing a percentage.

    Stored as decimal value (0.05 = 5%).

    Attributes:
        value: The percentage as decimal (e.g., 0.05 for 5%)
    """
    value: Decimal

    def __post_init__(self) -> None:
        """Convert to Decimal if needed."""
        if not isinstance(self.value, Decimal):
            object.__setattr__(self, "value", Decimal(str(self.value)))

    # --- Factory Methods ---

    @classmethod
    def from_points(cls, points: Union[int, float, Decimal, str]) -> Percentage:
        """Create Percentage from percentage points (5 = 5%)."""
        return cls(Decimal(str(points)) / Decimal("100"))

    @classmethod
    def zero(cls) -> Percentage:
        """Create zero percentage."""
        return cls(Decimal("0"))

    # --- Arithmetic Operations ---

    def apply_to(self, amount: Decimal) -> Decimal:
        """Apply percentage to an amount."""
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        return amount * self.value

    def __add__(self, other: Percentage) -> Percentage:
        return Percentage(self.value + other.value)

    # --- Comparison Operations ---

    def __lt__(self, other: Percentage) -> bool:
        return self.value < other.value

    def __le__(self, other: Percentage) -> bool:
        return self.value <= other.value

    def __gt__(self, other: Percentage) -> bool:
        return self.value > other.value

    def __ge__(self, other: Percentage) -> bool:
        return self.value >= other.value

    # --- Utility Methods ---

    def is_zero(self) -> bool:
        """Check if percentage is zero."""
        return self.value == Decimal("0")

    def is_positive(self) -> bool:
        """Check if percentage is positive."""
        return self.value > Decimal("0")

    def as_points(self) -> Decimal:
        """Convert to percentage points (0.05 -> 5)."""
        return self.value * Decimal("100")

    # --- String Representation ---

    def __str__(self) -> str:
        """Format as percentage string."""
        return f"{self.as_points().normalize():f}%"

    def __repr__(self) -> str:
        return f"Percentage({self.value})"
