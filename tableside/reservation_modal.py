"""Reservation number entry modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class ReservationModal(ModalScreen[str | None]):
    """Prompt for the reservation identifier that starts a new order."""

    CSS = """
    ReservationModal {
        align: center middle;
        background: $background 60%;
    }

    #reservation-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #reservation-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #reservation-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #reservation-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #reservation-help {
        color: #dddddd;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="reservation-dialog"):
            yield Static("Reservation Number", id="reservation-title")
            yield Static(id="reservation-value")
            yield Static(id="reservation-error")
            yield Static("Enter confirm. Backspace delete. Esc cancel.", id="reservation-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.value += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        normalized = self.value.strip()
        if not normalized:
            self.error = "Reservation number is required."
            self._refresh_content()
            return
        self.dismiss(normalized)

    def _refresh_content(self) -> None:
        self.query_one("#reservation-value", Static).update(Text(self.value))
        self.query_one("#reservation-error", Static).update(Text(self.error))
