from __future__ import annotations

import argparse
import sys
from pathlib import Path

from hashed_assets.config import options_from_env
from hashed_assets.errors import ConfigurationError, HashedAssetsError
from hashed_assets.log_setup import setup_logging
from hashed_assets.pipeline import run


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python tools/assets/hash_assets.py",
        description=(
            "Content-hash static assets for cache-busting. Copies every included file under "
            "<resources-dir>/<public-dir>/ to <target-dir>/ as <name>.<md5>.<ext> and merges "
            "the original-to-hashed mapping into <target-dir>/<manifest-file>."
        ),
    )

    p.add_argument(
        "--resources-dir",
        default=None,
        help="Source resources directory (default: $HASHED_ASSETS_RESOURCES_DIR or 'resources')",
    )
    p.add_argument(
        "--public-dir",
        default=None,
        help="Public subdirectory to scan (default: $HASHED_ASSETS_PUBLIC_DIR or 'public')",
    )
    p.add_argument(
        "--target-dir",
        default=None,
        help="Output directory for hashed files (default: $HASHED_ASSETS_TARGET_DIR or 'resources-hashed')",
    )
    p.add_argument(
        "--manifest-file",
        default=None,
        help=(
            "Manifest file name inside the target directory; '.json' selects JSON, "
            "anything else EDN (default: 'manifest.edn')"
        ),
    )
    p.add_argument(
        "--include",
        action="append",
        default=None,
        metavar="REGEX",
        help="Only hash paths matching this regex (re.search against the public-relative path). Repeatable.",
    )
    p.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="REGEX",
        help="Skip paths matching this regex. Repeatable; wins over --include.",
    )
    p.add_argument("--verbose", action="store_true", help="Log every hashed file")
    p.add_argument("--log-file", default=None, help="Optional log file (DEBUG level)")

    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(verbose=bool(args.verbose), log_file=Path(args.log_file) if args.log_file else None)

    try:
        options = options_from_env(
            resources_dir=args.resources_dir,
            public_dir=args.public_dir,
            resources_dir_target=args.target_dir,
            manifest_file=args.manifest_file,
            include_patterns=args.include,
            exclude_patterns=args.exclude,
        )
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    try:
        result = run(options)
    except HashedAssetsError as exc:
        print(f"ERROR: error_type={exc.__class__.__name__} error={exc}", file=sys.stderr)
        return 1

    print(f"HASHED: {result.hashed_count} files -> {result.manifest_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
