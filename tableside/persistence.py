"""SQLite key/value persistence for submitted orders and custom menu items."""

from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from typing import Any, Iterable

from tableside.config import DB_PATH
from tableside.constant import CUSTOM_ITEMS_KEY, ORDERS_KEY
from tableside.models import MenuItem, Order, utc_now_iso


def _connect(db_path: str) -> sqlite3.Connection:
    db_file = Path(db_path)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(db_file)


def bootstrap_schema(db_path: str = DB_PATH) -> None:
    """Create the key/value table if it does not already exist."""
    with _connect(db_path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )


def read_value(key: str, db_path: str = DB_PATH) -> str | None:
    """Return the raw stored text for a key, or None when absent."""
    bootstrap_schema(db_path)
    with _connect(db_path) as conn:
        row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
    if row is None:
        return None
    return str(row[0])


def write_value(key: str, value: str, db_path: str = DB_PATH) -> None:
    """Overwrite the stored text for a key in a single statement."""
    bootstrap_schema(db_path)
    with _connect(db_path) as conn:
        with conn:
            conn.execute(
                """
                INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (key, value, utc_now_iso()),
            )


def _read_json_list(key: str, db_path: str) -> list[Any]:
    raw = read_value(key, db_path)
    if not raw:
        return []
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError:
        return []
    if not isinstance(decoded, list):
        return []
    return decoded


class OrderStore:
    """Whole-collection access to the persisted `orders` value.

    Every load reads the full sequence and every save overwrites it, so two
    views holding their own copies see each other's writes only after a fresh
    `load_all`. Concurrent writers resolve as last write wins.
    """

    def __init__(self, db_path: str = DB_PATH) -> None:
        self.db_path = db_path

    def load_all(self) -> list[Order]:
        orders = (Order.from_dict(raw) for raw in _read_json_list(ORDERS_KEY, self.db_path))
        return [order for order in orders if order is not None]

    def save_all(self, orders: Iterable[Order]) -> None:
        payload = json.dumps([order.to_dict() for order in orders])
        write_value(ORDERS_KEY, payload, self.db_path)


class CustomItemStore:
    """Menu items added at runtime, kept apart from the parsed menu file."""

    def __init__(self, db_path: str = DB_PATH) -> None:
        self.db_path = db_path

    def load_all(self) -> list[MenuItem]:
        items = (MenuItem.from_dict(raw) for raw in _read_json_list(CUSTOM_ITEMS_KEY, self.db_path))
        return [item for item in items if item is not None]

    def save_all(self, items: Iterable[MenuItem]) -> None:
        payload = json.dumps([item.to_dict() for item in items])
        write_value(CUSTOM_ITEMS_KEY, payload, self.db_path)

    def append(self, item: MenuItem) -> None:
        items = self.load_all()
        items.append(item)
        self.save_all(items)
