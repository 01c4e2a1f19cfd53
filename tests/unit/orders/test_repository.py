"""Unit tests for OrderDjangoRepository.

Covers:
- Active-only listing and look-ups.
- Row-locked retrieval inside a transaction.
- Save (create and update).
- Edge cases (malformed and non-existent IDs).
"""

from __future__ import annotations

import pytest
from django.db import transaction

from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.orders.repositories import IOrderRepository, OrderDjangoRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


@pytest.fixture()
def active_order(cart):
    return Order.objects.create(cart=cart, description="Active", fee=10.0)


@pytest.fixture()
def inactive_order(cart):
    return Order.objects.create(
        cart=cart, description="Inactive", fee=20.0, is_active=False
    )


# ===========================================================================
# Contract
# ===========================================================================


class TestContract:
    def test_implements_interface(self, repo):
        assert isinstance(repo, IOrderRepository)


# ===========================================================================
# Read
# ===========================================================================


class TestListActive:
    def test_excludes_inactive(self, repo, active_order, inactive_order):
        orders = repo.list_active()

        assert [o.id for o in orders] == [active_order.id]

    def test_empty(self, repo):
        assert repo.list_active() == []


class TestGetActiveById:
    def test_returns_active(self, repo, active_order):
        order = repo.get_active_by_id(active_order.id)

        assert order == active_order

    def test_inactive_returns_none(self, repo, inactive_order):
        assert repo.get_active_by_id(inactive_order.id) is None

    def test_missing_returns_none(self, repo):
        assert repo.get_active_by_id(999) is None

    def test_malformed_id_returns_none(self, repo):
        assert repo.get_active_by_id("not-a-number") is None

    def test_cart_is_loaded(self, repo, active_order, cart, django_assert_num_queries):
        with django_assert_num_queries(1):
            order = repo.get_active_by_id(active_order.id)
            assert order.cart.user_id == cart.user_id


class TestGetActiveForUpdate:
    def test_returns_active_inside_transaction(self, repo, active_order):
        with transaction.atomic():
            order = repo.get_active_for_update(active_order.id)

        assert order == active_order

    def test_inactive_returns_none(self, repo, inactive_order):
        with transaction.atomic():
            assert repo.get_active_for_update(inactive_order.id) is None

    def test_malformed_id_returns_none(self, repo):
        with transaction.atomic():
            assert repo.get_active_for_update("abc") is None


class TestGetById:
    def test_returns_inactive_orders_too(self, repo, inactive_order):
        assert repo.get_by_id(inactive_order.id) == inactive_order

    def test_missing_returns_none(self, repo):
        assert repo.get_by_id(999) is None


# ===========================================================================
# Save
# ===========================================================================


class TestSave:
    def test_creates_order(self, repo, cart):
        order = repo.save(Order(cart=cart, description="New", fee=5.0))

        assert order.id is not None
        assert Order.objects.filter(id=order.id).exists()

    def test_updates_existing(self, repo, active_order):
        active_order.status = OrderStatus.ORDERED

        repo.save(active_order)

        active_order.refresh_from_db()
        assert active_order.status == OrderStatus.ORDERED
