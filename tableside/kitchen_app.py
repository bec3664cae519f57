"""Kitchen display Textual app."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import Header, Static

from tableside import config
from tableside.debug_log import log_debug
from tableside.kitchen import KitchenBoard
from tableside.persistence import OrderStore, bootstrap_schema
from tableside.rendering import batch_table, format_order_list


class KitchenApp(App):
    """Show pending orders, mark them completed and batch them for prep."""

    TITLE = "Tableside Order"
    SUB_TITLE = "Kitchen Display"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #orders-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #batch-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #orders-list, #batch-summary {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous order"),
        ("down", "move_cursor(1)", "Next order"),
        ("k", "move_cursor(-1)", "Previous order"),
        ("j", "move_cursor(1)", "Next order"),
        ("space", "toggle_selected", "Select for batch"),
        ("c", "complete_order", "Mark completed"),
        ("b", "batch", "Batch summary"),
        ("r", "reload_orders", "Refresh"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, db_path: str | None = None) -> None:
        super().__init__()
        self.db_path = db_path or config.DB_PATH
        self.board = KitchenBoard(OrderStore(self.db_path))
        self.order_cursor: int | None = None
        self.system_status = ""
        log_debug("kitchen_app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="orders-pane"):
                yield Static("Pending Orders", classes="pane-title")
                yield Static(id="orders-list")
            with Vertical(id="batch-pane"):
                yield Static("Batch Summary", classes="pane-title")
                yield Static(id="batch-summary")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        bootstrap_schema(self.db_path)
        self.action_reload_orders()

    def action_reload_orders(self) -> None:
        self.board.refresh()
        self.order_cursor = 0 if self.board.orders else None
        self.system_status = f"Loaded {len(self.board.orders)} order(s)."
        log_debug(f"kitchen_refresh orders={len(self.board.orders)}")
        self._refresh_orders()
        self._refresh_status()

    def action_move_cursor(self, delta: int) -> None:
        total = len(self.board.orders)
        if not total:
            return
        if self.order_cursor is None:
            self.order_cursor = 0 if delta > 0 else total - 1
        else:
            self.order_cursor = (self.order_cursor + delta) % total
        self._refresh_orders()

    def action_toggle_selected(self) -> None:
        if self.order_cursor is None:
            return
        self.board.toggle_selected(self.order_cursor)
        self._refresh_orders()

    def action_complete_order(self) -> None:
        if self.order_cursor is None:
            return
        order_id = self.board.orders[self.order_cursor].id if self.order_cursor < len(self.board.orders) else None
        if not self.board.complete(self.order_cursor):
            log_debug(f"complete_ignored index={self.order_cursor}")
            return
        log_debug(f"complete_order index={self.order_cursor} id={order_id!r}")
        self.system_status = f"Order #{order_id} completed."
        if not self.board.orders:
            self.order_cursor = None
        else:
            self.order_cursor = min(self.order_cursor, len(self.board.orders) - 1)
        self._refresh_orders()
        self._refresh_status()

    def action_batch(self) -> None:
        summary = self.board.batch_summary()
        log_debug(f"batch_summary selected={self.board.selected_indices()} items={len(summary)}")
        try:
            self.query_one("#batch-summary", Static).update(batch_table(summary))
        except NoMatches:
            return

    def _refresh_orders(self) -> None:
        try:
            orders_widget = self.query_one("#orders-list", Static)
        except NoMatches:
            return
        selected = set(self.board.selected_indices())
        orders_widget.update(format_order_list(self.board.orders, self.order_cursor, selected))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        bar.update(Text(f"J/K move, Space select, C complete, B batch, R refresh. {self.system_status}"))


def main() -> None:
    """Run the kitchen display application."""
    KitchenApp().run()


if __name__ == "__main__":
    main()
