"""Domain models for tableside ordering."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from tableside.constant import UNCATEGORIZED


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class MenuItem:
    """A selectable menu item."""

    category: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"category": self.category, "name": self.name}

    @classmethod
    def from_dict(cls, raw: Any) -> MenuItem | None:
        """Build an item from stored JSON, or None when the shape is unusable."""
        if not isinstance(raw, dict):
            return None
        name = raw.get("name")
        if not isinstance(name, str) or not name.strip():
            return None
        category = raw.get("category")
        if not isinstance(category, str) or not category.strip():
            category = UNCATEGORIZED
        return cls(category=category, name=name)


@dataclass
class OrderLine:
    """One item entry within an order."""

    category: str
    quantity: int = 1


@dataclass
class Order:
    """An order for one reservation, keyed by item name."""

    id: str
    items: dict[str, OrderLine] = field(default_factory=dict)
    created_at: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "items": {
                name: {"category": line.category, "quantity": line.quantity} for name, line in self.items.items()
            },
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Order | None:
        """Normalize a stored order; malformed lines are dropped, malformed orders yield None."""
        if not isinstance(raw, dict):
            return None
        order_id = raw.get("id")
        if isinstance(order_id, (int, float)) and not isinstance(order_id, bool):
            order_id = str(order_id)
        if not isinstance(order_id, str) or not order_id.strip():
            return None

        items: dict[str, OrderLine] = {}
        raw_items = raw.get("items")
        if isinstance(raw_items, dict):
            for name, raw_line in raw_items.items():
                if not isinstance(raw_line, dict):
                    continue
                quantity = raw_line.get("quantity")
                if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                    continue
                category = raw_line.get("category")
                if not isinstance(category, str) or not category:
                    category = UNCATEGORIZED
                items[str(name)] = OrderLine(category=category, quantity=quantity)

        created_at = raw.get("createdAt")
        if not isinstance(created_at, str):
            created_at = ""
        return cls(id=order_id, items=items, created_at=created_at)
