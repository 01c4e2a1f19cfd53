import pytest
from prometheus_client import CollectorRegistry

from modules.carts.models import Cart
from modules.carts.repositories.django_repository import CartDjangoRepository
from modules.orders.metrics import PrometheusOrderMetrics
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def cart():
    return Cart.objects.create(user_id=1)


@pytest.fixture()
def metrics_registry():
    """Isolated Prometheus registry so metric values start at zero."""
    return CollectorRegistry()


@pytest.fixture()
def service(metrics_registry):
    return OrderService(
        order_repository=OrderDjangoRepository(),
        cart_repository=CartDjangoRepository(),
        metrics=PrometheusOrderMetrics(metrics_registry),
    )
