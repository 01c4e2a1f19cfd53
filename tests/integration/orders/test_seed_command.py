"""Integration tests for the ``seed_orders`` management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.carts.models import Cart
from modules.orders.constants import OrderStatus
from modules.orders.models import Order

pytestmark = pytest.mark.integration


def _seed(**options) -> str:
    out = StringIO()
    call_command("seed_orders", stdout=out, **options)
    return out.getvalue()


class TestSeedOrders:
    def test_creates_carts_and_orders(self):
        output = _seed(carts=3, orders=10)

        assert Cart.objects.count() == 3
        assert Order.objects.count() == 10
        assert "Seed completed: carts=3, orders=10" in output

    def test_orders_reference_seeded_carts(self):
        _seed(carts=2, orders=6)

        cart_ids = set(Cart.objects.values_list("id", flat=True))
        assert set(Order.objects.values_list("cart_id", flat=True)) <= cart_ids

    def test_statuses_stay_in_lifecycle(self):
        _seed(carts=2, orders=15)

        statuses = set(Order.objects.values_list("status", flat=True))
        assert statuses <= set(OrderStatus.values)
        assert Order.objects.active().count() == 15

    def test_no_carts_skips_orders(self):
        output = _seed(carts=0, orders=5)

        assert Order.objects.count() == 0
        assert "Skipping orders" in output
