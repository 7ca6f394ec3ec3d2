from __future__ import annotations

import logging
from pathlib import Path

from hashed_assets.config import DEFAULT_ASSET_PREFIX, DEFAULT_MANIFEST_FILE, DEFAULT_RESOURCES_HASHED_DIR
from hashed_assets.manifest import store

logger = logging.getLogger(__name__)

DEFAULT_RESOLVER_MANIFEST_PATH = Path(DEFAULT_RESOURCES_HASHED_DIR) / DEFAULT_MANIFEST_FILE


class ManifestCache:
    """Load-once holder for the asset manifest.

    Create one per process and hand it to the resolver. The first
    ``get_or_load()`` reads the file; later calls return the same mapping and
    never re-read it, even if the file changes on disk. A missing file is
    cached as an empty mapping. A malformed file raises and nothing is cached.
    """

    def __init__(self, manifest_path: str | Path = DEFAULT_RESOLVER_MANIFEST_PATH) -> None:
        self.manifest_path = Path(manifest_path)
        self._manifest: dict[str, str] | None = None

    @property
    def loaded(self) -> bool:
        return self._manifest is not None

    def get_or_load(self) -> dict[str, str]:
        if self._manifest is None:
            manifest = store.load(self.manifest_path)
            if not manifest:
                logger.debug("Asset manifest %s is absent or empty; URLs fall back to source paths", self.manifest_path)
            self._manifest = manifest
        return self._manifest


def _prefix_and_key(args: tuple[str, ...], default_prefix: str) -> tuple[str, str]:
    if len(args) == 1:
        return default_prefix, args[0]
    if len(args) == 2:
        return args[0], args[1]
    raise TypeError(f"asset() takes (asset_key) or (asset_prefix, asset_key), got {len(args)} arguments")


def asset(*args: str, cache: ManifestCache) -> str:
    """URL for an asset: ``/<prefix>/<hashed path>``, or the key itself when unmapped.

    Called as ``asset(asset_key)`` (prefix ``"assets"``) or
    ``asset(asset_prefix, asset_key)``.
    """

    asset_prefix, asset_key = _prefix_and_key(args, DEFAULT_ASSET_PREFIX)
    manifest = cache.get_or_load()
    return f"/{asset_prefix}/{manifest.get(asset_key, asset_key)}"


class AssetResolver:
    """Callable ``asset()`` bound to a cache, e.g. for a template global.

    Same argument order as ``asset``; a single argument uses the bound prefix.
    """

    def __init__(self, cache: ManifestCache, asset_prefix: str = DEFAULT_ASSET_PREFIX) -> None:
        self.cache = cache
        self.asset_prefix = asset_prefix

    def __call__(self, *args: str) -> str:
        asset_prefix, asset_key = _prefix_and_key(args, self.asset_prefix)
        return asset(asset_prefix, asset_key, cache=self.cache)


__all__ = [
    "DEFAULT_RESOLVER_MANIFEST_PATH",
    "AssetResolver",
    "ManifestCache",
    "asset",
]
