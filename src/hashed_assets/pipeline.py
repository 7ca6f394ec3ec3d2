from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from hashed_assets.config import HashOptions
from hashed_assets.hashing.hash_utils import copy_to_hashed_path
from hashed_assets.manifest import store

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AssetRecord:
    source_relative_path: str
    target_relative_path: str


@dataclass(frozen=True, slots=True)
class HashRunResult:
    records: tuple[AssetRecord, ...]
    manifest_path: Path
    manifest: dict[str, str]

    @property
    def hashed_count(self) -> int:
        return len(self.records)


def _relative_posix(path: Path, start: Path) -> str:
    return Path(os.path.relpath(path, start)).as_posix()


def iter_asset_files(scan_root: Path) -> list[Path]:
    """Regular files under ``scan_root`` in stable (sorted) order.

    Symlinked files are included; symlinked directories are not descended
    into, which rules out cycles.
    """

    if not scan_root.is_dir():
        return []

    files: list[Path] = []
    for root, _dirs, names in os.walk(scan_root, followlinks=False):
        for name in names:
            p = Path(root) / name
            if p.is_file():
                files.append(p)
    files.sort(key=lambda p: p.as_posix())
    return files


def hash_asset_file(file_path: Path, options: HashOptions) -> AssetRecord:
    source_rel = _relative_posix(file_path, options.scan_root)
    # Mirror the file's directory below resources_dir into resources_dir_target.
    target_dir = options.resources_dir_target / os.path.relpath(file_path.parent, options.resources_dir)
    hashed = copy_to_hashed_path(file_path, target_dir)
    return AssetRecord(
        source_relative_path=source_rel,
        target_relative_path=_relative_posix(hashed, options.target_public_dir),
    )


def run(options: HashOptions | None = None) -> HashRunResult:
    """Hash every included file under ``resources_dir/public_dir``.

    Hashed copies land under ``resources_dir_target`` mirroring the source
    layout, and the new entries are merged into the existing manifest.
    Any failure propagates before the manifest is written.
    """

    if options is None:
        options = HashOptions()

    # Read first: a malformed manifest aborts the run before anything is copied.
    existing = store.load(options.manifest_path)

    scan_root = options.scan_root
    records: list[AssetRecord] = []
    skipped = 0

    for file_path in iter_asset_files(scan_root):
        rel = _relative_posix(file_path, scan_root)
        if not options.path_filter.matches(rel):
            skipped += 1
            continue
        record = hash_asset_file(file_path, options)
        records.append(record)

    updates = {r.source_relative_path: r.target_relative_path for r in records}
    merged = store.merge(existing, updates)
    manifest_path = store.persist(merged, options.manifest_path)

    logger.info(
        "Hashed %d files from %s (skipped %d); manifest %s has %d entries",
        len(records),
        scan_root,
        skipped,
        manifest_path,
        len(merged),
    )
    return HashRunResult(records=tuple(records), manifest_path=manifest_path, manifest=merged)


hash_assets = run


__all__ = [
    "AssetRecord",
    "HashRunResult",
    "hash_asset_file",
    "hash_assets",
    "iter_asset_files",
    "run",
]
