"""Order domain constants.

Defines status choices and the status progression of the order
lifecycle state machine.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    CREATED = "CREATED", "Created"
    ORDERED = "ORDERED", "Ordered"
    IN_PAYMENT = "IN_PAYMENT", "In payment"


# Forward-only progression; a status missing from this table cannot advance.
NEXT_STATUS: dict[str, str] = {
    OrderStatus.CREATED: OrderStatus.ORDERED,
    OrderStatus.ORDERED: OrderStatus.IN_PAYMENT,
}

TERMINAL_STATES: set[str] = {OrderStatus.IN_PAYMENT}

# Paid orders are kept active.
UNDELETABLE_STATES: set[str] = {OrderStatus.IN_PAYMENT}

METRICS_SERVICE_LABEL = "order"
