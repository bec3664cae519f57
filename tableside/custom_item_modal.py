"""Modal for adding a menu item at runtime."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class CustomItemModal(ModalScreen[tuple[str, str] | None]):
    """Two-step prompt: category first, then item name.

    Dismisses with ``(category, name)`` or None when cancelled.
    """

    CSS = """
    CustomItemModal {
        align: center middle;
        background: $background 60%;
    }

    #custom-item-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #custom-item-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #custom-item-body {
        color: white;
        margin-bottom: 1;
    }

    #custom-item-help {
        color: #dddddd;
    }
    """

    _FIELDS = ("category", "name")

    def __init__(self) -> None:
        super().__init__()
        self.values = {"category": "", "name": ""}
        self.field_index = 0

    @property
    def current_field(self) -> str:
        return self._FIELDS[self.field_index]

    def compose(self) -> ComposeResult:
        with Container(id="custom-item-dialog"):
            yield Static("Add Menu Item", id="custom-item-title")
            yield Static(id="custom-item-body")
            yield Static("Enter next/confirm. Backspace delete. Esc cancel.", id="custom-item-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._advance()
            event.stop()
            return

        if event.key == "backspace":
            field = self.current_field
            self.values[field] = self.values[field][:-1]
            self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.values[self.current_field] += event.character
            self._refresh_content()
            event.stop()

    def _advance(self) -> None:
        # Blank fields are not accepted; stay on the field.
        if not self.values[self.current_field].strip():
            return
        if self.field_index < len(self._FIELDS) - 1:
            self.field_index += 1
            self._refresh_content()
            return
        self.dismiss((self.values["category"].strip(), self.values["name"].strip()))

    def _refresh_content(self) -> None:
        lines = []
        for idx, field in enumerate(self._FIELDS):
            cursor = "|" if idx == self.field_index else ""
            pointer = "➤ " if idx == self.field_index else "  "
            lines.append(f"{pointer}{field.title()}: {self.values[field]}{cursor}")
        self.query_one("#custom-item-body", Static).update(Text("\n".join(lines)))
