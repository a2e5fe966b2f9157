"""Money and Quantity, the two value objects every cart line is built from.

Both are frozen and compared by value. Construction validates, so a
negative price or an empty cart line cannot be represented.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from storefront.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """A non-negative Decimal amount in one currency.

    Prices arrive from the catalog as strings or numbers; ``Money.of``
    is the entry point that turns either into an exact Decimal.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite() or self.amount < 0:
            raise ValidationError(f"Invalid money amount: {self.amount}")

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(value, currency)

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def total(amounts: Iterable[Money], currency: str = "USD") -> Money:
        """Sum of ``amounts``; zero for none."""
        result = Money.zero(currency)
        for amount in amounts:
            result = result + amount
        return result

    def __add__(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, units: int) -> Money:
        """Price of ``units`` items at this unit price."""
        if isinstance(units, bool) or not isinstance(units, int):
            raise TypeError(f"Can only multiply Money by int, got {type(units).__name__}")
        return Money(self.amount * units, self.currency)

    def times(self, rate: Decimal) -> Money:
        """Apply a rate such as tax or the reservation fee, rounded to cents."""
        return Money(
            (self.amount * rate).quantize(_CENTS, rounding=ROUND_HALF_UP),
            self.currency,
        )

    def __str__(self) -> str:
        return f"${self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """Units of one product in the cart, always at least 1.

    Taking a line out of the cart is a removal, never a quantity of zero.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be positive")

    def incremented(self) -> Quantity:
        return Quantity(self.value + 1)

    def decremented(self) -> Quantity:
        # floor at 1
        return Quantity(max(self.value - 1, 1))

    def __str__(self) -> str:
        return str(self.value)
