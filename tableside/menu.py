"""Menu resource parsing and loading."""

from __future__ import annotations

import re
import sqlite3
from pathlib import Path

import httpx

from tableside import config
from tableside.constant import FALLBACK_MENU, MENU_COMMENT_PREFIX, MENU_SEPARATOR_PATTERN, UNCATEGORIZED
from tableside.debug_log import log_debug
from tableside.models import MenuItem
from tableside.persistence import CustomItemStore

_SEPARATOR_RE = re.compile(MENU_SEPARATOR_PATTERN)
_LINE_BREAK_RE = re.compile(r"\r?\n")


def parse_line(line: str) -> MenuItem | None:
    """Parse one menu line such as ``drinks|Soda`` or ``Water``.

    Returns None for blank lines and ``#`` comments. A line without a
    separator, or whose name part is empty, lands in the uncategorized bucket.
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(MENU_COMMENT_PREFIX):
        return None

    parts = _SEPARATOR_RE.split(trimmed)
    category = parts[0].strip()
    if len(parts) > 1:
        name = " ".join(parts[1:]).strip()
        if not name:
            name = category
            category = UNCATEGORIZED
    else:
        category = UNCATEGORIZED
        name = trimmed

    # A line made only of separators leaves nothing to name the item by.
    if not name:
        name = trimmed
    if not category:
        category = UNCATEGORIZED
    return MenuItem(category=category, name=name)


def parse_menu_text(text: str) -> list[MenuItem]:
    items = (parse_line(line) for line in _LINE_BREAK_RE.split(text))
    return [item for item in items if item is not None]


def fallback_items() -> list[MenuItem]:
    return [MenuItem(category=category, name=name) for category, name in FALLBACK_MENU]


async def fetch_menu_text(source: str) -> str:
    """Fetch the menu text from an http(s) URL or read it from a local file."""
    if source.startswith(("http://", "https://")):
        async with httpx.AsyncClient(timeout=config.MENU_FETCH_TIMEOUT_S) as client:
            response = await client.get(source)
            response.raise_for_status()
            return response.text
    return Path(source).read_text(encoding="utf-8")


async def load_items(custom_store: CustomItemStore, source: str | None = None) -> list[MenuItem]:
    """Load the working item list: parsed menu, then custom items, else the fallback set."""
    source = source or config.MENU_SOURCE
    try:
        items = parse_menu_text(await fetch_menu_text(source))
    except Exception as exc:
        log_debug(f"menu_fetch_failed source={source!r} error={exc!r}")
        items = []

    try:
        items.extend(custom_store.load_all())
    except sqlite3.Error as exc:
        log_debug(f"custom_items_read_failed error={exc!r}")

    if not items:
        log_debug("menu_fallback reason=no_items")
        return fallback_items()
    return items


def group_by_category(items: list[MenuItem]) -> dict[str, list[str]]:
    """Group item names by category, keeping first-seen category order."""
    groups: dict[str, list[str]] = {}
    for item in items:
        groups.setdefault(item.category or UNCATEGORIZED, []).append(item.name)
    return groups


def category_title(category: str) -> str:
    """Capitalize each space-separated word for display."""
    return " ".join(word[:1].upper() + word[1:] for word in category.split(" "))
