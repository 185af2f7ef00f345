"""Money and identifier helpers used throughout the POS domain.

Money is an immutable value compared by amount and currency; an instance
that exists is always non-negative and finite.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pos.domain.exceptions import InvalidAmount, ValidationError

DEFAULT_CURRENCY = "MXN"


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Subtraction has no special
    case: a negative result is rejected by the constructor like any other
    negative amount.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidAmount(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidAmount(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidAmount(f"Money amount cannot be negative, got {self.amount}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, factor: int | float | Decimal) -> Money:
        return Money(self.amount * self._as_factor(factor), self.currency)

    __rmul__ = __mul__

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    @staticmethod
    def _as_factor(factor: int | float | Decimal) -> Decimal:
        if isinstance(factor, bool) or not isinstance(factor, (int, float, Decimal)):
            raise InvalidAmount(
                f"Can only multiply Money by a number, got {type(factor).__name__}"
            )
        value = factor if isinstance(factor, Decimal) else Decimal(str(factor))
        if not value.is_finite() or value < 0:
            raise InvalidAmount(
                f"Multiplication factor must be a non-negative finite number, got {factor}"
            )
        return value

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise InvalidAmount(f"Invalid money amount: {amount!r}") from exc


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


def new_order_id() -> str:
    return f"order_{uuid.uuid4().hex[:12]}"


def new_item_id() -> str:
    return f"item_{uuid.uuid4().hex[:12]}"
