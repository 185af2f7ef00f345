"""Abstract Order Store.

The store persists orders and owns the single "current order" slot of a
session.  Application handlers never track the current order themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.order import Order


class OrderStore(ABC):

    @abstractmethod
    def get_current_order(self) -> Order | None:
        """Return the order currently being built, or None."""

    @abstractmethod
    def create_order(self, customer_id: str | None = None) -> Order:
        """Create a new draft order and make it the current one."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist a new or updated order."""

    @abstractmethod
    def clear_current_order(self) -> None:
        """Forget which order is current (the order itself is kept)."""

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Order]:
        """Return every stored order."""

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order; True if it existed."""
