"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the application and CLI layers can catch them uniformly.  Every
exception carries a stable ``kind`` string that the presentation layer
uses as the machine-readable half of an error value.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "DomainError"

    @property
    def detail(self) -> str:
        return str(self)


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    kind = "ValidationError"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = "NotFound"


class ProductNotFound(EntityNotFoundError):
    """No product with the given id in the catalog."""

    kind = "ProductNotFound"

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product #{product_id} not found")
        self.product_id = product_id


class OrderNotFound(EntityNotFoundError):
    """No order with the given id in the ledger."""

    kind = "OrderNotFound"

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order #{order_id} not found")
        self.order_id = order_id


class InsufficientStock(DomainException):
    """Requested quantity exceeds what the catalog holds."""

    kind = "InsufficientStock"

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(requested {requested}, {available} available)"
        )
        self.requested = requested
        self.available = available


class CartInvalid(DomainException):
    """The cart cannot be turned into an order.

    ``product_ids`` lists the offending lines; it is empty when the
    cart itself is empty.
    """

    kind = "CartInvalid"

    def __init__(self, product_ids: list[int]) -> None:
        if product_ids:
            ids = ", ".join(f"#{pid}" for pid in product_ids)
            message = f"Cart contains unavailable quantities for products {ids}"
        else:
            message = "Cart is empty"
        super().__init__(message)
        self.product_ids = list(product_ids)


class OrderPlacementFailed(DomainException):
    """An order could not be placed; nothing was changed."""

    kind = "OrderPlacementFailed"


class InvalidTransition(DomainException):
    """The requested status change is not an edge of the status graph."""

    kind = "InvalidTransition"

    def __init__(self, current, requested) -> None:
        super().__init__(
            f"Cannot move order from {current.value} to {requested.value}"
        )
        self.current = current
        self.requested = requested


class NotPermitted(DomainException):
    """The current user may not perform this action."""

    kind = "NotPermitted"


class NotAuthenticated(DomainException):
    """The action needs a logged-in user."""

    kind = "NotAuthenticated"

    def __init__(self, message: str = "Please log in first") -> None:
        super().__init__(message)


class AuthenticationFailed(DomainException):
    """Login or password did not match a registered user."""

    kind = "AuthenticationFailed"
