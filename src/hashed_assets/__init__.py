"""Content-addressed cache-busting for static web assets.

Hashes every eligible file under ``<resources_dir>/<public_dir>``, copies it to
a name embedding its MD5, and merges the original-to-hashed mapping into a
manifest that :mod:`hashed_assets.resolver` reads at render time.
"""

from hashed_assets.config import HashOptions
from hashed_assets.errors import (
    ConfigurationError,
    FetchError,
    FileReadError,
    FileWriteError,
    HashedAssetsError,
    ManifestParseError,
)
from hashed_assets.pipeline import HashRunResult, hash_assets, run

__all__: list[str] = [
    "ConfigurationError",
    "FetchError",
    "FileReadError",
    "FileWriteError",
    "HashOptions",
    "HashRunResult",
    "HashedAssetsError",
    "ManifestParseError",
    "hash_assets",
    "run",
]
