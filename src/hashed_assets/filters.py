from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from hashed_assets.errors import ConfigurationError


def normalize_relative_path(relative_path: str) -> str:
    return relative_path.replace("\\", "/")


def compile_patterns(patterns: Iterable[str | re.Pattern[str]] | None) -> tuple[re.Pattern[str], ...]:
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns or ():
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
            continue
        if not isinstance(pattern, str):
            raise ConfigurationError(f"pattern must be a string, got {type(pattern).__name__}: {pattern!r}")
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ConfigurationError(f"invalid regex pattern {pattern!r}: {exc}") from exc
    return tuple(compiled)


def _matches_any(relative_path: str, patterns: tuple[re.Pattern[str], ...]) -> bool:
    return any(p.search(relative_path) for p in patterns)


@dataclass(frozen=True, slots=True)
class PathFilter:
    """Regex allow/deny filter over scan-root-relative paths.

    Matching uses ``re.search``, so a pattern hits anywhere in the path:
    ``"css"`` also matches ``"icssue/file.txt"``. Anchor with ``^`` or ``/``
    when a directory prefix is meant.
    """

    include: tuple[re.Pattern[str], ...] = ()
    exclude: tuple[re.Pattern[str], ...] = ()

    @classmethod
    def from_patterns(
        cls,
        include_patterns: Iterable[str | re.Pattern[str]] | None = None,
        exclude_patterns: Iterable[str | re.Pattern[str]] | None = None,
    ) -> "PathFilter":
        return cls(
            include=compile_patterns(include_patterns),
            exclude=compile_patterns(exclude_patterns),
        )

    def matches(self, relative_path: str) -> bool:
        path = normalize_relative_path(relative_path)
        if self.include and not _matches_any(path, self.include):
            return False
        return not _matches_any(path, self.exclude)


def should_include(
    relative_path: str,
    include_patterns: Iterable[str | re.Pattern[str]] | None = None,
    exclude_patterns: Iterable[str | re.Pattern[str]] | None = None,
) -> bool:
    return PathFilter.from_patterns(include_patterns, exclude_patterns).matches(relative_path)


__all__ = [
    "PathFilter",
    "compile_patterns",
    "normalize_relative_path",
    "should_include",
]
