"""Unit tests for the Order model."""

from __future__ import annotations

import pytest
from django.db import models
from django.db.models import ProtectedError

from modules.orders.constants import OrderStatus
from modules.orders.models import Order

pytestmark = pytest.mark.unit


class TestOrderDefaults:
    def test_defaults(self, cart):
        order = Order.objects.create(cart=cart)

        assert order.status == OrderStatus.CREATED
        assert order.is_active is True
        assert order.fee == 0.0
        assert order.description == ""
        assert order.order_date is not None

    def test_id_is_integer(self, cart):
        order = Order.objects.create(cart=cart)

        assert isinstance(order.id, int)

    def test_str(self, cart):
        order = Order.objects.create(cart=cart)

        assert str(order) == f"Order #{order.id} (CREATED)"


class TestOrderStateHelpers:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (OrderStatus.CREATED, OrderStatus.ORDERED),
            (OrderStatus.ORDERED, OrderStatus.IN_PAYMENT),
            (OrderStatus.IN_PAYMENT, None),
            ("SHIPPED", None),
        ],
    )
    def test_next_status(self, status, expected):
        assert Order(status=status).next_status() == expected

    def test_is_terminal(self):
        assert Order(status=OrderStatus.IN_PAYMENT).is_terminal is True
        assert Order(status=OrderStatus.CREATED).is_terminal is False

    def test_can_be_deleted(self):
        assert Order(status=OrderStatus.CREATED).can_be_deleted is True
        assert Order(status=OrderStatus.ORDERED).can_be_deleted is True
        assert Order(status=OrderStatus.IN_PAYMENT).can_be_deleted is False


class TestOrderSoftDelete:
    def test_delete_keeps_row(self, cart):
        order = Order.objects.create(cart=cart)

        order.delete()

        order.refresh_from_db()
        assert order.is_active is False

    def test_queryset_delete_is_soft(self, cart):
        Order.objects.create(cart=cart)
        Order.objects.create(cart=cart)

        count, _ = Order.objects.all().delete()

        assert count == 2
        assert Order.objects.count() == 2
        assert Order.objects.active().count() == 0


class TestCartProtection:
    def test_cart_with_orders_cannot_be_hard_deleted(self, cart):
        Order.objects.create(cart=cart)

        with pytest.raises(ProtectedError):
            models.Model.delete(cart)
