"""Cart model.

Carts are owned by the Cart service; the order service only keeps the
rows it needs to validate and reference a cart from an order.  The user
that owns a cart lives in the User service, so only its id is stored.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import SoftDeleteModel


class Cart(SoftDeleteModel):
    """Shopping cart referenced by orders (by id only)."""

    user_id = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        db_table = "carts"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Cart #{self.pk} (user {self.user_id})"
