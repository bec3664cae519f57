"""Table-side ordering Textual app."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from tableside import config
from tableside.custom_item_modal import CustomItemModal
from tableside.debug_log import log_debug
from tableside.menu import load_items
from tableside.models import MenuItem
from tableside.persistence import CustomItemStore, OrderStore, bootstrap_schema
from tableside.rendering import format_menu, menu_display_order, order_table
from tableside.reservation_modal import ReservationModal
from tableside.session import EmptyOrderError, OrderSession


class OrderingApp(App):
    """Build an order for one reservation and hand it to the kitchen."""

    TITLE = "Tableside Order"
    SUB_TITLE = "Ordering"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #order-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #order-summary {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("up", "move_menu(-1)", "Previous item"),
        ("down", "move_menu(1)", "Next item"),
        ("enter", "add_selected", "Add item"),
        ("j", "move_line(1)", "Next line"),
        ("k", "move_line(-1)", "Previous line"),
        ("plus", "adjust_line(1)", "Increase"),
        ("minus", "adjust_line(-1)", "Decrease"),
        ("d", "remove_line", "Remove line"),
        ("n", "new_reservation", "New reservation"),
        ("a", "add_custom_item", "Add menu item"),
        Binding("ctrl+s", "submit_order", "Submit", priority=True),
        ("ctrl+x", "clear_order", "Clear order"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, db_path: str | None = None, menu_source: str | None = None) -> None:
        super().__init__()
        self.db_path = db_path or config.DB_PATH
        self.menu_source = menu_source or config.MENU_SOURCE
        self.session = OrderSession(OrderStore(self.db_path), CustomItemStore(self.db_path))
        self.menu_cursor = 0
        self.line_selected_index: int | None = None
        self.system_status = ""
        log_debug("ordering_app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Menu", classes="pane-title")
                yield Static("Loading menu...", id="menu-list")
            with Vertical(id="order-pane"):
                yield Static(id="order-title", classes="pane-title")
                yield Static(id="order-summary")
        yield Static(id="status-bar")

    async def on_mount(self) -> None:
        bootstrap_schema(self.db_path)
        self.session.items = await load_items(self.session.custom_store, self.menu_source)
        log_debug(f"menu_loaded items={len(self.session.items)} source={self.menu_source!r}")
        self._refresh_all()
        self.action_new_reservation()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def action_new_reservation(self) -> None:
        if self._modal_open():
            return
        self.push_screen(ReservationModal(), callback=self._start_reservation)

    def _start_reservation(self, reservation_id: str | None) -> None:
        if reservation_id is None or not self.session.start(reservation_id):
            return
        log_debug(f"reservation_started id={reservation_id!r}")
        self.line_selected_index = None
        self.system_status = ""
        self._refresh_all()

    def action_move_menu(self, delta: int) -> None:
        if self._modal_open():
            return
        if not self.session.items:
            return
        self.menu_cursor = (self.menu_cursor + delta) % len(self.session.items)
        self._refresh_menu()

    def action_add_selected(self) -> None:
        if self._modal_open():
            return
        item = self._cursor_item()
        if item is None:
            return
        if not self.session.active:
            self.system_status = "Press N to enter a reservation number first."
            self._refresh_status()
            return
        self.session.add_item(item.name, item.category)
        names = self._line_names()
        self.line_selected_index = names.index(item.name)
        self._refresh_order()

    def action_move_line(self, delta: int) -> None:
        if self._modal_open():
            return
        names = self._line_names()
        if not names:
            return
        if self.line_selected_index is None:
            self.line_selected_index = 0 if delta > 0 else len(names) - 1
        else:
            self.line_selected_index = (self.line_selected_index + delta) % len(names)
        self._refresh_order()

    def action_adjust_line(self, delta: int) -> None:
        if self._modal_open():
            return
        name = self._selected_line_name()
        if name is None:
            return
        self.session.adjust_quantity(name, delta)
        self._refresh_order()

    def action_remove_line(self) -> None:
        if self._modal_open():
            return
        name = self._selected_line_name()
        if name is None:
            return
        self.session.remove_item(name)
        self._refresh_order()

    def action_clear_order(self) -> None:
        if self._modal_open():
            return
        self.session.clear()
        self.line_selected_index = None
        self._refresh_order()

    def action_add_custom_item(self) -> None:
        if self._modal_open():
            return
        self.push_screen(CustomItemModal(), callback=self._add_custom_item)

    def _add_custom_item(self, values: tuple[str, str] | None) -> None:
        if values is None:
            return
        category, name = values
        item = self.session.add_custom_menu_item(category, name)
        if item is None:
            return
        log_debug(f"custom_item_added category={item.category!r} name={item.name!r}")
        self.system_status = f"Added {item.name} to {item.category}."
        self._refresh_all()

    def action_submit_order(self) -> None:
        log_debug(f"submit_enter active={self.session.active} screen={type(self.screen).__name__}")
        if self._modal_open():
            log_debug("submit_blocked reason=modal")
            return
        try:
            order = self.session.submit()
        except EmptyOrderError as exc:
            self.system_status = str(exc)
            self._refresh_status()
            log_debug("submit_blocked reason=no_items")
            return

        self.line_selected_index = None
        self.system_status = f"Order #{order.id} has been submitted."
        self._refresh_all()
        log_debug(f"submit_saved order_id={order.id!r} lines={len(order.items)}")
        self.action_new_reservation()

    def _cursor_item(self) -> MenuItem | None:
        if not self.session.items:
            return None
        display = menu_display_order(self.session.items)
        self.menu_cursor = min(self.menu_cursor, len(display) - 1)
        return self.session.items[display[self.menu_cursor]]

    def _line_names(self) -> list[str]:
        if self.session.order is None:
            return []
        return list(self.session.order.items)

    def _selected_line_name(self) -> str | None:
        names = self._line_names()
        if self.line_selected_index is None or not (0 <= self.line_selected_index < len(names)):
            return None
        return names[self.line_selected_index]

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_order()
        self._refresh_status()

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        if not self.session.items:
            menu_widget.update("(no menu items)")
            return
        display = menu_display_order(self.session.items)
        self.menu_cursor = min(self.menu_cursor, len(display) - 1)
        menu_widget.update(format_menu(self.session.items, display[self.menu_cursor]))

    def _refresh_order(self) -> None:
        try:
            title = self.query_one("#order-title", Static)
            summary = self.query_one("#order-summary", Static)
        except NoMatches:
            return
        order = self.session.order
        if order is None:
            title.update("No active reservation (press N)")
        else:
            title.update(Text(f"Reservation #{order.id}"))

        names = self._line_names()
        if not names:
            self.line_selected_index = None
        elif self.line_selected_index is not None and self.line_selected_index >= len(names):
            self.line_selected_index = len(names) - 1
        summary.update(order_table(order, self._selected_line_name()))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        bar.update(
            Text(
                "↑/↓ menu, Enter add. J/K line, +/- qty, D remove. N reservation, A add item.\n"
                f"Ctrl+S submit, Ctrl+X clear. {status}"
            )
        )


def main() -> None:
    """Run the ordering application."""
    OrderingApp().run()


if __name__ == "__main__":
    main()
