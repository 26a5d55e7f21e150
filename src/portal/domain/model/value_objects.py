"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from portal.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "HUF"


def round_half_up(value: Decimal) -> Decimal:
    """Round to the nearest whole currency unit, halves away from zero."""
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Prices in the catalog are whole forint amounts, but Decimal is kept
    so imported prices with fractions never pass through a float.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def divided_by(self, divisor: int) -> Money:
        """Split into *divisor* equal parts, rounded to a whole unit."""
        if divisor <= 0:
            raise ValidationError("Divisor must be positive")
        return Money(round_half_up(self.amount / divisor), self.currency)

    def scaled(self, factor: Decimal) -> Money:
        """Multiply by a rate (e.g. VAT), rounded to a whole unit."""
        return Money(round_half_up(self.amount * factor), self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{format_amount(self.amount)} Ft"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


def format_amount(amount: Decimal) -> str:
    """Group thousands with spaces: 127000 -> '127 000'.

    Whole amounts print without decimals.
    """
    if amount == amount.to_integral_value():
        text = f"{amount:,.0f}"
    else:
        text = f"{amount:,.2f}"
    return text.replace(",", " ")


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Order line items are never persisted with zero or negative counts.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
