"""Kitchen display state: pending orders, completion and batch aggregation."""

from __future__ import annotations

from typing import Iterable

from tableside.models import Order
from tableside.persistence import OrderStore


class KitchenBoard:
    """In-memory copy of the order store as seen by the kitchen display."""

    def __init__(self, store: OrderStore) -> None:
        self.store = store
        self.orders: list[Order] = []
        self._selected: set[int] = set()

    def refresh(self) -> None:
        """Reload every order from the store, dropping the current selection."""
        self.orders = self.store.load_all()
        self._selected.clear()

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.orders)

    def complete(self, index: int) -> bool:
        """Remove a finished order and persist the remaining sequence."""
        if not self._in_range(index):
            return False
        del self.orders[index]
        self.store.save_all(self.orders)
        self._selected = {idx if idx < index else idx - 1 for idx in self._selected if idx != index}
        return True

    def toggle_selected(self, index: int) -> bool:
        """Flip batch selection for one order; returns the new state."""
        if not self._in_range(index):
            return False
        if index in self._selected:
            self._selected.remove(index)
            return False
        self._selected.add(index)
        return True

    def is_selected(self, index: int) -> bool:
        return index in self._selected

    def selected_indices(self) -> list[int]:
        return sorted(self._selected)

    def aggregate(self, indices: Iterable[int]) -> dict[str, int]:
        """Sum item quantities across the given orders, in first-seen item order."""
        summary: dict[str, int] = {}
        for idx in indices:
            if not self._in_range(idx):
                continue
            for name, line in self.orders[idx].items.items():
                summary[name] = summary.get(name, 0) + line.quantity
        return summary

    def batch_summary(self) -> dict[str, int]:
        return self.aggregate(self.selected_indices())
