"""Rich rendering helpers shared by the ordering and kitchen views."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from tableside.constant import EMPTY_BATCH_MESSAGE, EMPTY_SUMMARY_MESSAGE, NO_ORDERS_MESSAGE
from tableside.menu import category_title
from tableside.models import MenuItem, Order


def category_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    palette = ("bold #ffffff on #b23a48", "bold #ffffff on #2f6db5", "bold #0b1f0f on #5fbf72")
    return palette[sum(map(ord, category)) % len(palette)]


def _indices_by_category(items: list[MenuItem]) -> dict[str, list[int]]:
    by_category: dict[str, list[int]] = {}
    for idx, item in enumerate(items):
        by_category.setdefault(item.category, []).append(idx)
    return by_category


def menu_display_order(items: list[MenuItem]) -> list[int]:
    """Indices of ``items`` in the order they appear on screen."""
    return [idx for indices in _indices_by_category(items).values() for idx in indices]


def format_menu(items: list[MenuItem], cursor: int | None) -> Text:
    """Render items grouped under their category headings.

    The cursor indexes into ``items`` itself so duplicate entries stay
    individually selectable.
    """
    lines = Text()
    for cat_idx, (category, indices) in enumerate(_indices_by_category(items).items()):
        if cat_idx > 0:
            lines.append("\n\n")
        lines.append(category_title(category), style="bold")
        for idx in indices:
            lines.append("\n")
            lines.append("➤ " if idx == cursor else "  ")
            lines.append(items[idx].name)
    return lines


def order_table(order: Order | None, selected_name: str | None = None) -> Table | Text:
    """Render the in-progress order as an Item / Category / Qty table."""
    if order is None or not order.items:
        return Text(EMPTY_SUMMARY_MESSAGE, style="dim")

    table = Table(expand=True)
    table.add_column("Item")
    table.add_column("Category")
    table.add_column("Qty", justify="right")
    for name, line in order.items.items():
        pointer = "➤ " if name == selected_name else "  "
        table.add_row(
            Text(f"{pointer}{name}"),
            Text(line.category, style=category_style(line.category)),
            str(line.quantity),
        )
    return table


def format_order_card(order: Order, selected: bool, pointer: bool) -> Text:
    """Render one order for the kitchen display."""
    text = Text()
    text.append("➤ " if pointer else "  ")
    text.append("[x] " if selected else "[ ] ")
    text.append(f"Reservation #{order.id}", style="bold")
    for name, line in order.items.items():
        text.append(f"\n      {name} × {line.quantity}")
    return text


def format_order_list(orders: list[Order], cursor: int | None, selected: set[int]) -> Text:
    if not orders:
        return Text(NO_ORDERS_MESSAGE, style="dim")
    lines = Text()
    for idx, order in enumerate(orders):
        if idx > 0:
            lines.append("\n\n")
        lines.append_text(format_order_card(order, idx in selected, idx == cursor))
    return lines


def batch_table(summary: dict[str, int]) -> Table | Text:
    """Render aggregated quantities as an Item / Total Qty table."""
    if not summary:
        return Text(EMPTY_BATCH_MESSAGE, style="dim")
    table = Table(expand=True)
    table.add_column("Item")
    table.add_column("Total Qty", justify="right")
    for name, total in summary.items():
        table.add_row(Text(name), str(total))
    return table
