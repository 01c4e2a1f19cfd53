"""Cart repository interface.

The order core only needs to know whether a cart exists before it
associates a new order with it.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.carts.models import Cart


class ICartRepository(IRepository["Cart"]):
    """Repository contract for carts referenced by orders."""

    @abstractmethod
    def exists_by_id(self, cart_id: int) -> bool:
        """Return ``True`` if a cart with ``cart_id`` exists."""
