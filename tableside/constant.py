"""Static catalog values shared by the ordering and kitchen views."""

from __future__ import annotations

UNCATEGORIZED = "uncategorized"

# Any run of these characters separates the category from the item name.
MENU_SEPARATOR_PATTERN = r"[|,;\-]+"
MENU_COMMENT_PREFIX = "#"

ORDERS_KEY = "orders"
CUSTOM_ITEMS_KEY = "customItems"

FALLBACK_MENU: list[tuple[str, str]] = [
    ("dishes", "Falafel Dish"),
    ("dishes", "Nacho"),
    ("dishes", "Burger"),
    ("wraps", "Chicken Wrap"),
    ("wraps", "Falafel Wrap"),
    ("drinks", "Lemonade"),
    ("drinks", "Water"),
    ("drinks", "Soda"),
]

EMPTY_ORDER_MESSAGE = "Add at least one item before submitting."
NO_ORDERS_MESSAGE = "No orders available."
EMPTY_BATCH_MESSAGE = "No orders selected or no items to display."
EMPTY_SUMMARY_MESSAGE = "No items in this order."

SMOKE_PATHS: tuple[str, ...] = ("/", "/listofitems.txt")
