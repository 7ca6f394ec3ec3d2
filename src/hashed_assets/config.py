from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from hashed_assets.errors import ConfigurationError
from hashed_assets.filters import PathFilter

DEFAULT_RESOURCES_DIR = "resources"
DEFAULT_PUBLIC_DIR = "public"
DEFAULT_RESOURCES_HASHED_DIR = "resources-hashed"
DEFAULT_MANIFEST_FILE = "manifest.edn"
DEFAULT_ASSET_PREFIX = "assets"

PatternLike = str | re.Pattern[str]


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _env_list(name: str) -> tuple[str, ...]:
    raw = _env(name)
    if raw is None:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True, slots=True)
class HashOptions:
    """Options for one hashing run.

    Patterns are compiled here, so an invalid regex raises
    ``ConfigurationError`` before the pipeline touches the filesystem.
    """

    resources_dir: Path = Path(DEFAULT_RESOURCES_DIR)
    public_dir: str = DEFAULT_PUBLIC_DIR
    resources_dir_target: Path = Path(DEFAULT_RESOURCES_HASHED_DIR)
    manifest_file: str = DEFAULT_MANIFEST_FILE
    include_patterns: tuple[PatternLike, ...] = ()
    exclude_patterns: tuple[PatternLike, ...] = ()
    path_filter: PathFilter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "resources_dir", Path(self.resources_dir))
        object.__setattr__(self, "resources_dir_target", Path(self.resources_dir_target))
        object.__setattr__(self, "public_dir", str(self.public_dir))
        object.__setattr__(self, "manifest_file", str(self.manifest_file))

        if isinstance(self.include_patterns, (str, re.Pattern)):
            raise ConfigurationError("include_patterns must be a sequence of patterns, not a single pattern")
        if isinstance(self.exclude_patterns, (str, re.Pattern)):
            raise ConfigurationError("exclude_patterns must be a sequence of patterns, not a single pattern")
        object.__setattr__(self, "include_patterns", tuple(self.include_patterns or ()))
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns or ()))

        if not self.public_dir.strip():
            raise ConfigurationError("public_dir must be a non-empty string")
        if not self.manifest_file.strip():
            raise ConfigurationError("manifest_file must be a non-empty string")

        object.__setattr__(
            self,
            "path_filter",
            PathFilter.from_patterns(self.include_patterns, self.exclude_patterns),
        )

    @property
    def scan_root(self) -> Path:
        return self.resources_dir / self.public_dir

    @property
    def target_public_dir(self) -> Path:
        return self.resources_dir_target / self.public_dir

    @property
    def manifest_path(self) -> Path:
        return self.resources_dir_target / self.manifest_file


def options_from_env(
    *,
    resources_dir: str | Path | None = None,
    public_dir: str | None = None,
    resources_dir_target: str | Path | None = None,
    manifest_file: str | None = None,
    include_patterns: Iterable[PatternLike] | None = None,
    exclude_patterns: Iterable[PatternLike] | None = None,
) -> HashOptions:
    """Build ``HashOptions`` from HASHED_ASSETS_* variables.

    Explicit keyword arguments win over the environment when not None.
    """

    include = tuple(include_patterns) if include_patterns is not None else _env_list("HASHED_ASSETS_INCLUDE")
    exclude = tuple(exclude_patterns) if exclude_patterns is not None else _env_list("HASHED_ASSETS_EXCLUDE")

    return HashOptions(
        resources_dir=Path(
            resources_dir
            if resources_dir is not None
            else _env("HASHED_ASSETS_RESOURCES_DIR", DEFAULT_RESOURCES_DIR)
        ),
        public_dir=public_dir if public_dir is not None else _env("HASHED_ASSETS_PUBLIC_DIR", DEFAULT_PUBLIC_DIR),
        resources_dir_target=Path(
            resources_dir_target
            if resources_dir_target is not None
            else _env("HASHED_ASSETS_TARGET_DIR", DEFAULT_RESOURCES_HASHED_DIR)
        ),
        manifest_file=(
            manifest_file
            if manifest_file is not None
            else _env("HASHED_ASSETS_MANIFEST_FILE", DEFAULT_MANIFEST_FILE)
        ),
        include_patterns=include,
        exclude_patterns=exclude,
    )


__all__ = [
    "DEFAULT_ASSET_PREFIX",
    "DEFAULT_MANIFEST_FILE",
    "DEFAULT_PUBLIC_DIR",
    "DEFAULT_RESOURCES_DIR",
    "DEFAULT_RESOURCES_HASHED_DIR",
    "HashOptions",
    "options_from_env",
]
