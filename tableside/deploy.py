"""Deployment helpers: menu content hash and container smoke check."""

from __future__ import annotations

import argparse
import hashlib
import sys
from pathlib import Path

import httpx

from tableside import config
from tableside.constant import SMOKE_PATHS


def menu_content_hash(path: str | Path) -> str:
    """SHA-256 hex digest of the menu file bytes."""
    return hashlib.sha256(Path(path).read_bytes()).hexdigest()


def should_restart(path: str | Path, previous_hash: str | None) -> bool:
    """Restart only when the menu content changed since the last rollout."""
    if not previous_hash:
        return True
    return menu_content_hash(path) != previous_hash.strip()


def smoke_check(base_url: str, client: httpx.Client | None = None) -> list[str]:
    """GET each served path and return a description of every failure."""
    failures: list[str] = []
    base = base_url.rstrip("/")
    owns_client = client is None
    client = client or httpx.Client(timeout=config.MENU_FETCH_TIMEOUT_S)
    try:
        for path in SMOKE_PATHS:
            url = f"{base}{path}"
            try:
                response = client.get(url)
            except httpx.HTTPError as exc:
                failures.append(f"GET {url} failed: {exc}")
                continue
            if response.is_error:
                failures.append(f"GET {url} returned {response.status_code}")
    finally:
        if owns_client:
            client.close()
    return failures


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tableside-deploy")
    sub = parser.add_subparsers(dest="command", required=True)

    hash_cmd = sub.add_parser("hash", help="print the menu content hash")
    hash_cmd.add_argument("menu", nargs="?", default=config.MENU_SOURCE)

    restart_cmd = sub.add_parser("check-restart", help="exit 0 when a rollout restart is needed")
    restart_cmd.add_argument("menu", nargs="?", default=config.MENU_SOURCE)
    restart_cmd.add_argument("--previous", default=None, help="hash recorded at the last rollout")

    smoke_cmd = sub.add_parser("smoke", help="check that / and the menu are served")
    smoke_cmd.add_argument("base_url")

    args = parser.parse_args(argv)

    if args.command == "hash":
        print(menu_content_hash(args.menu))
        return 0

    if args.command == "check-restart":
        current = menu_content_hash(args.menu)
        if should_restart(args.menu, args.previous):
            print(f"restart {current}")
            return 0
        print(f"unchanged {current}")
        return 1

    failures = smoke_check(args.base_url)
    for failure in failures:
        print(failure, file=sys.stderr)
    if failures:
        return 1
    print("smoke ok")
    return 0


if __name__ == "__main__":
    sys.exit(main())
