"""The order currently being built at the table."""

from __future__ import annotations

from tableside.constant import EMPTY_ORDER_MESSAGE
from tableside.models import MenuItem, Order, OrderLine
from tableside.persistence import CustomItemStore, OrderStore


class EmptyOrderError(ValueError):
    """Raised when submitting without an active order or without items."""

    def __init__(self, message: str = EMPTY_ORDER_MESSAGE) -> None:
        super().__init__(message)


class OrderSession:
    """Governs at most one in-progress order for the ordering view.

    The working item list is shared with the view so custom items show up in
    the menu as soon as they are added.
    """

    def __init__(
        self,
        store: OrderStore,
        custom_store: CustomItemStore,
        items: list[MenuItem] | None = None,
    ) -> None:
        self.store = store
        self.custom_store = custom_store
        self.items: list[MenuItem] = items if items is not None else []
        self.order: Order | None = None

    @property
    def active(self) -> bool:
        return self.order is not None

    def start(self, reservation_id: str) -> bool:
        """Begin a new order, discarding any order still in progress."""
        normalized = reservation_id.strip()
        if not normalized:
            return False
        self.order = Order(id=normalized)
        return True

    def add_item(self, name: str, category: str) -> None:
        if self.order is None:
            return
        line = self.order.items.get(name)
        if line is None:
            self.order.items[name] = OrderLine(category=category, quantity=1)
        else:
            line.quantity += 1

    def adjust_quantity(self, name: str, delta: int) -> None:
        if self.order is None:
            return
        line = self.order.items.get(name)
        if line is None:
            return
        line.quantity += delta
        if line.quantity <= 0:
            del self.order.items[name]

    def remove_item(self, name: str) -> None:
        if self.order is None:
            return
        self.order.items.pop(name, None)

    def clear(self) -> None:
        """Drop all lines but keep the reservation id and creation time."""
        if self.order is None:
            return
        self.order.items.clear()

    def submit(self) -> Order:
        """Append the active order to the persisted store and end the session."""
        if self.order is None or not self.order.items:
            raise EmptyOrderError()

        # Re-read so orders completed or added by another view are not clobbered.
        orders = self.store.load_all()
        orders.append(self.order)
        self.store.save_all(orders)

        submitted = self.order
        self.order = None
        return submitted

    def add_custom_menu_item(self, category: str, name: str) -> MenuItem | None:
        category = category.strip()
        name = name.strip()
        if not category or not name:
            return None
        item = MenuItem(category=category, name=name)
        self.items.append(item)
        self.custom_store.append(item)
        return item
