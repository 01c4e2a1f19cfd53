"""Order service layer (Use Cases).

Orchestrates the order lifecycle: creation against an existing cart,
forward-only status progression, description/fee updates and soft
deletion.  All write operations are atomic; the service defines the
unit-of-work boundary.

Business rules enforced:
- An order must reference an existing cart.
- Status advances CREATED -> ORDERED -> IN_PAYMENT and stops there.
- Updates never touch status, cart or the original order date.
- Paid (IN_PAYMENT) orders cannot be deleted; deletion is always soft.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.conf import settings
from django.db import transaction
from django.utils import timezone

from modules.orders.constants import OrderStatus
from modules.orders.dtos import OrderDTO
from modules.orders.exceptions import (
    CartNotFound,
    InvalidOrderStatus,
    MissingCartReference,
    OrderNotFound,
)
from modules.orders.models import Order

if TYPE_CHECKING:
    from modules.carts.repositories.interfaces import ICartRepository
    from modules.orders.dtos import OrderInputDTO
    from modules.orders.metrics import IOrderMetrics
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives its collaborators via constructor injection (DIP).
    ``metrics`` is optional and only ever called best-effort.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        cart_repository: ICartRepository,
        metrics: Optional[IOrderMetrics] = None,
    ) -> None:
        self._order_repo = order_repository
        self._cart_repo = cart_repository
        self._metrics = metrics

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_active_orders(self) -> List[OrderDTO]:
        """Return every active order, deduplicated, in storage order."""
        logger.info("order.list_active")
        orders = self._order_repo.list_active()
        return list(dict.fromkeys(OrderDTO.from_entity(o) for o in orders))

    def get_active_order(self, order_id: int) -> OrderDTO:
        """Retrieve a single active order.

        Raises:
            OrderNotFound: no active order has this id.
        """
        order = self._order_repo.get_active_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order with id: {order_id} not found")
        return OrderDTO.from_entity(order)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: OrderInputDTO) -> OrderDTO:
        """Create a new order for an existing cart.

        Steps:
        1. Drop client-supplied ``order_id`` and ``status``.
        2. Require a cart reference.
        3. Require the cart to exist.
        4. Persist the order as CREATED and active, dated now.
        5. Report metrics once the transaction commits (best-effort).

        Raises:
            MissingCartReference: no cart id supplied.
            CartNotFound: the cart does not exist.
        """
        dto = dto.without_server_fields()
        log = logger.bind(cart_id=dto.cart_id)
        log.info("order.creation_started")

        if dto.cart_id is None:
            log.warning("order.cart_missing")
            raise MissingCartReference("Order must be associated with a cart")

        if not self._cart_repo.exists_by_id(dto.cart_id):
            log.warning("order.cart_not_found")
            raise CartNotFound(f"Cart not found with ID: {dto.cart_id}")

        order = Order(
            order_date=timezone.now(),
            description=dto.description,
            fee=dto.fee,
            status=OrderStatus.CREATED,
            is_active=True,
            cart_id=dto.cart_id,
        )
        order = self._order_repo.save(order)

        log.info("order.created", order_id=order.id, fee=order.fee)
        transaction.on_commit(lambda: self._report_created(order))
        return OrderDTO.from_entity(order)

    @transaction.atomic
    def advance_status(self, order_id: int) -> OrderDTO:
        """Move an order to the next status of its lifecycle.

        The order row is locked for the duration of the transaction so
        concurrent advances are serialised.

        Raises:
            OrderNotFound: no active order has this id.
            InvalidOrderStatus: the order is already paid, or its status
                is not part of the lifecycle.
        """
        order = self._get_for_update(order_id)
        log = logger.bind(order_id=order_id, current_status=str(order.status))

        if order.is_terminal:
            log.warning("order.already_paid")
            raise InvalidOrderStatus(
                f"Order with ID {order_id} is already PAID and cannot be advanced further"
            )

        new_status = order.next_status()
        if new_status is None:
            log.error("order.unknown_status")
            raise InvalidOrderStatus(f"Unknown order status: {order.status}")

        old_status = str(order.status)
        order.status = new_status
        order = self._order_repo.save(order)

        log.info("order.status_advanced", old_status=old_status, new_status=new_status)
        return OrderDTO.from_entity(order)

    @transaction.atomic
    def update_order(self, order_id: int, dto: OrderInputDTO) -> OrderDTO:
        """Apply a new description and fee to an active order.

        Status, cart and order date always come from the stored order;
        whatever the input carries for them is discarded.

        Raises:
            OrderNotFound: no active order has this id.
        """
        order = self._get_for_update(order_id)
        log = logger.bind(order_id=order_id)

        if dto.cart_id is not None and dto.cart_id != order.cart_id:
            log.info("order.cart_change_ignored", requested_cart_id=dto.cart_id)

        order.description = dto.description
        order.fee = dto.fee
        order = self._order_repo.save(order)

        log.info("order.updated")
        return OrderDTO.from_entity(order)

    @transaction.atomic
    def delete_order(self, order_id: int) -> None:
        """Soft-delete an order that has not been paid yet.

        Raises:
            OrderNotFound: no active order has this id.
            InvalidOrderStatus: the order is IN_PAYMENT.
        """
        order = self._get_for_update(order_id)
        log = logger.bind(order_id=order_id, status=str(order.status))

        if not order.can_be_deleted:
            log.warning("order.delete_not_allowed")
            raise InvalidOrderStatus(
                f"Cannot delete order with ID {order_id} because it's already PAID"
            )

        order.is_active = False
        self._order_repo.save(order)
        log.info("order.soft_deleted")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_for_update(self, order_id: int) -> Order:
        order = self._order_repo.get_active_for_update(order_id)
        if not order:
            logger.warning("order.not_found", order_id=order_id)
            raise OrderNotFound(f"Order not found with ID: {order_id}")
        return order

    def _report_created(self, order: Order) -> None:
        """Record creation metrics; failures are logged and never raised."""
        if self._metrics is None:
            return
        try:
            self._metrics.order_created(order.fee)
        except Exception:
            logger.warning("order.metrics_failed", order_id=order.id, exc_info=True)


def build_order_service() -> OrderService:
    """Wire ``OrderService`` with the Django repositories and configured metrics."""
    from modules.carts.repositories.django_repository import CartDjangoRepository
    from modules.orders.metrics import get_default_metrics
    from modules.orders.repositories.django_repository import OrderDjangoRepository

    metrics = get_default_metrics() if settings.ORDER_METRICS_ENABLED else None
    return OrderService(
        order_repository=OrderDjangoRepository(),
        cart_repository=CartDjangoRepository(),
        metrics=metrics,
    )
