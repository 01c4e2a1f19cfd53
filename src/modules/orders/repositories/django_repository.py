"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.

Concurrency control on read-modify-write commands uses
``select_for_update()``; callers must already be inside
``transaction.atomic()``.  Backends without row locks (SQLite) ignore it.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an order whatever its ``is_active`` flag.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Order.objects.select_related("cart").filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def list_active(self) -> List[Order]:
        return list(Order.objects.active().select_related("cart"))

    def get_active_by_id(self, id: int) -> Optional[Order]:
        try:
            return Order.objects.active().select_related("cart").filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def get_active_for_update(self, id: int) -> Optional[Order]:
        """Retrieve an active order with a row-level lock (SELECT FOR UPDATE).

        Only the order row is locked (``of=("self",)`` keeps the cart row
        free).  Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return (
                Order.objects.active()
                .select_for_update(of=("self",))
                .select_related("cart")
                .filter(id=id)
                .first()
            )
        except (TypeError, ValueError):
            return None

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order."""
        is_new = entity._state.adding
        entity.save()
        logger.info(
            "order.saved",
            order_id=entity.id,
            status=str(entity.status),
            is_active=entity.is_active,
            is_new=is_new,
        )
        return entity
