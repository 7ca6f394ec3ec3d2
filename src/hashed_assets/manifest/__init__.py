"""Manifest persistence: load, merge and persist the asset mapping."""

from hashed_assets.manifest.store import MANIFEST_ASSETS_KEY, load, merge, persist

__all__ = [
    "MANIFEST_ASSETS_KEY",
    "load",
    "merge",
    "persist",
]
