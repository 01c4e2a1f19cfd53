"""Django ORM implementation of the Cart repository."""

from __future__ import annotations

from typing import Optional

import structlog
from django.db import transaction

from modules.carts.models import Cart
from modules.carts.repositories.interfaces import ICartRepository

logger = structlog.get_logger(__name__)


class CartDjangoRepository(ICartRepository):
    """Concrete Cart repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Cart]:
        """Retrieve a cart by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Cart.objects.filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def exists_by_id(self, cart_id: int) -> bool:
        """Existence check used when an order is created.

        Soft-deleted carts still count, matching a plain primary-key lookup.
        """
        try:
            return Cart.objects.filter(id=cart_id).exists()
        except (TypeError, ValueError):
            return False

    @transaction.atomic
    def save(self, entity: Cart) -> Cart:
        """Persist (create or update) a cart."""
        is_new = entity._state.adding
        entity.save()
        logger.info("cart.saved", cart_id=entity.id, is_new=is_new)
        return entity
