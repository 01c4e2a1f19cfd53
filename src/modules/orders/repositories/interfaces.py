"""Order repository interface.

Extends ``IRepository[Order]`` with the active-only look-ups the order
lifecycle needs.  Soft-deleted orders are invisible to every method
except ``get_by_id``.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for orders."""

    @abstractmethod
    def list_active(self) -> List[Order]:
        """List every order whose ``is_active`` flag is set."""

    @abstractmethod
    def get_active_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an active order with its cart loaded."""

    @abstractmethod
    def get_active_for_update(self, id: int) -> Optional[Order]:
        """Retrieve an active order and lock its row until the transaction ends."""
