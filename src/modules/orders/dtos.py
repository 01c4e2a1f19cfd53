"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between callers and the Service layer and
double as the mapper between ``Order`` rows and their public
representation.  DTOs are immutable (``frozen=True``).

- ``OrderInputDTO``: input for order creation and update.
- ``CartDTO``: output for the cart an order belongs to.
- ``OrderDTO``: output for a single order.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from modules.carts.models import Cart
    from modules.orders.models import Order


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class OrderInputDTO(BaseModel):
    """Immutable DTO for order creation and update requests.

    ``order_id``, ``status`` and ``order_date`` are accepted so that a full
    order representation can be sent back, but they are server-owned: the
    service clears or ignores them.  ``cart_id`` is only read on creation.
    """

    model_config = ConfigDict(frozen=True)

    order_id: Optional[int] = None
    order_date: Optional[datetime] = None
    description: str = ""
    fee: float = Field(default=0.0, allow_inf_nan=False)
    status: Optional[str] = None
    cart_id: Optional[int] = None

    def without_server_fields(self) -> OrderInputDTO:
        """Copy with the server-assigned ``order_id`` and ``status`` cleared."""
        return self.model_copy(update={"order_id": None, "status": None})


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class CartDTO(BaseModel):
    """Immutable DTO for the cart referenced by an order."""

    model_config = ConfigDict(frozen=True)

    cart_id: int
    user_id: Optional[int] = None

    @classmethod
    def from_entity(cls, cart: Cart) -> CartDTO:
        return cls(cart_id=cart.id, user_id=cart.user_id)


class OrderDTO(BaseModel):
    """Immutable DTO for order responses.

    Hashable, so lists of orders can be deduplicated.
    """

    model_config = ConfigDict(frozen=True)

    order_id: int
    order_date: datetime
    description: str
    fee: float
    status: str
    cart: CartDTO

    @classmethod
    def from_entity(cls, order: Order) -> OrderDTO:
        """Build an output DTO from an Order model instance.

        Assumes ``cart`` is loaded (``select_related``) or cheap to fetch.
        """
        return cls(
            order_id=order.id,
            order_date=order.order_date,
            description=order.description,
            fee=order.fee,
            status=str(order.status),
            cart=CartDTO.from_entity(order.cart),
        )
