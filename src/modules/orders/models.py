"""Order model.

Business rules reflected here:
- Status progresses CREATED -> ORDERED -> IN_PAYMENT, never backwards
  (enforced at service layer from ``NEXT_STATUS``).
- Cart FK uses PROTECT and is never reassigned after creation.
- ``order_date`` is set once at creation and survives every update.
- Soft delete via ``is_active`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

from modules.core.models import SoftDeleteModel
from modules.orders.constants import (
    NEXT_STATUS,
    TERMINAL_STATES,
    UNDELETABLE_STATES,
    OrderStatus,
)


class Order(SoftDeleteModel):
    """Order placed for exactly one cart."""

    order_date: models.DateTimeField = models.DateTimeField(default=timezone.now)
    description: models.TextField = models.TextField(blank=True, default="")
    fee: models.FloatField = models.FloatField(default=0.0)
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.CREATED,
    )
    cart: models.ForeignKey = models.ForeignKey(
        "carts.Cart",
        on_delete=models.PROTECT,
        related_name="orders",
    )

    class Meta:
        db_table = "orders"
        ordering = ["-order_date", "-id"]
        indexes = [
            models.Index(
                fields=["is_active", "status"],
                name="orders_active_status_idx",
            ),
        ]

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        """Return ``True`` once the order can no longer advance."""
        return self.status in TERMINAL_STATES

    @property
    def can_be_deleted(self) -> bool:
        return self.status not in UNDELETABLE_STATES

    def next_status(self) -> str | None:
        """Status that follows the current one, or ``None`` if there is none."""
        return NEXT_STATUS.get(self.status)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"Order #{self.pk} ({self.status})"
