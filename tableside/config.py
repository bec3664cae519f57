"""Runtime configuration defaults for persistence, menu loading and logging."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("TABLESIDE_DB_PATH", "data/tableside.db")

# Either a local file path or an http(s) URL serving the menu text.
MENU_SOURCE = os.environ.get("TABLESIDE_MENU_SOURCE", "listofitems.txt")
MENU_FETCH_TIMEOUT_S = float(os.environ.get("TABLESIDE_FETCH_TIMEOUT", "5"))

DEBUG_LOG_PATH = os.environ.get("TABLESIDE_DEBUG_LOG", "/tmp/tableside-debug.log")
