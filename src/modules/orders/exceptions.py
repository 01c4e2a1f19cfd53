"""Order domain exceptions.

Raised by the Service Layer when business rules are violated and
propagated unchanged to the caller, which decides how to present them.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist or has been soft-deleted."""


class CartNotFound(Exception):
    """The cart referenced by a new order does not exist."""


class MissingCartReference(ValueError):
    """An order creation request did not reference a cart."""


class InvalidOrderStatus(Exception):
    """The operation is not allowed in the order's current status."""
