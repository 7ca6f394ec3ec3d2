from __future__ import annotations

import argparse
import sys
from pathlib import Path

from hashed_assets.errors import FetchError, HashedAssetsError
from hashed_assets.fetch import DEFAULT_FETCH_TARGET_DIR, DEFAULT_TIMEOUT_SECONDS, fetch_asset, load_fetch_items
from hashed_assets.log_setup import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python tools/assets/fetch_assets.py",
        description=(
            "Download third-party assets into the public resources directory before hashing. "
            "The sources file is a JSON list (or EDN vector) of {url, filepath} maps."
        ),
    )
    p.add_argument("--sources", required=True, help="Fetch list (.json or .edn)")
    p.add_argument(
        "--target-dir",
        default=str(DEFAULT_FETCH_TARGET_DIR),
        help="Directory that filepath entries are relative to (default: resources/public)",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        help="Per-request timeout in seconds",
    )
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(verbose=bool(args.verbose))

    sources_path = Path(args.sources)
    if not sources_path.exists():
        print(f"ERROR: sources file not found: {sources_path}", file=sys.stderr)
        return 2

    try:
        items = load_fetch_items(sources_path)
    except HashedAssetsError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    target_dir = Path(args.target_dir)
    for item in items:
        try:
            saved = fetch_asset(item, target_dir, timeout=args.timeout)
        except FetchError as exc:
            print(f"FETCH FAILED: url={exc.url} status={exc.status_code} body={exc.body[:200]!r}")
            return 1
        except HashedAssetsError as exc:
            print(f"FETCH FAILED: url={item.url} error_type={exc.__class__.__name__} error={exc}")
            return 1
        print(f"FETCH OK: {item.filepath} -> {saved}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
