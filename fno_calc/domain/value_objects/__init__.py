"""Domain value objects."""
from fno_calc.domain.value_objects.money import Money, Currency
from fno_calc.domain.value_objects.percentage import Percentage

__all__ = [
    "Money",
    "Currency",
    "Percentage",
]
