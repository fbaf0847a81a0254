"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal, InvalidOperation
from enum import Enum

from flowershop.domain.exceptions import ValidationError

PHONE_PATTERN = re.compile(r"^\+7\(\d{3}\)-\d{3}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "RUB"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

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
        return Money(Decimal("0.00"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
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


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"


@dataclass(frozen=True)
class DeliveryDetails:
    """Where, when and how an order is delivered and paid for.

    Collects every problem with the form before raising, so the caller
    can show all of them at once.
    """

    recipient_name: str
    phone: str
    address: str
    delivery_date: str
    delivery_time: str
    payment: PaymentMethod = PaymentMethod.CARD

    def __post_init__(self) -> None:
        problems: list[str] = []

        if not self.recipient_name or not self.recipient_name.strip():
            problems.append("recipient name is required")
        if not self.address or not self.address.strip():
            problems.append("address is required")
        if not self.phone or not self.phone.strip():
            problems.append("phone is required")
        elif not PHONE_PATTERN.match(self.phone):
            problems.append("phone must look like +7(XXX)-XXX-XX-XX")
        if not self.delivery_date:
            problems.append("delivery date is required")
        elif not _is_iso_date(self.delivery_date):
            problems.append("delivery date must be YYYY-MM-DD")
        if not self.delivery_time:
            problems.append("delivery time is required")
        elif not _is_hh_mm(self.delivery_time):
            problems.append("delivery time must be HH:MM")
        if not isinstance(self.payment, PaymentMethod):
            problems.append("payment must be cash or card")

        if problems:
            raise ValidationError("Invalid delivery details: " + "; ".join(problems))


def _is_iso_date(raw: str) -> bool:
    try:
        date.fromisoformat(raw)
    except ValueError:
        return False
    return True


def _is_hh_mm(raw: str) -> bool:
    if len(raw) != 5:
        return False
    try:
        time.fromisoformat(raw)
    except ValueError:
        return False
    return True
