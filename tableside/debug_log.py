"""Append-only debug log shared by both views."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from tableside import config


def log_debug(message: str, path: str | None = None) -> None:
    """Append one timestamped line to the debug log."""
    try:
        ts = datetime.now(timezone.utc).isoformat()
        log_path = Path(path or config.DEBUG_LOG_PATH)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except Exception:
        # Logging must never interfere with app flow.
        return
