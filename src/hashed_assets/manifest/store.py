from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import edn_format

from hashed_assets.errors import FileReadError, FileWriteError, ManifestParseError

logger = logging.getLogger(__name__)

MANIFEST_ASSETS_KEY = "assets"

ManifestFormat = Literal["edn", "json"]

# edn_format raises NotImplementedError for unknown reader tags such as #foo.
DECODE_ERRORS: tuple[type[Exception], ...] = (ValueError, SyntaxError, NotImplementedError)


def manifest_format_for(path: str | Path) -> ManifestFormat:
    return "json" if Path(path).suffix.lower() == ".json" else "edn"


def _key_name(key: Any) -> Any:
    if isinstance(key, edn_format.Keyword):
        return key.name
    return key


def decode_text(text: str, fmt: ManifestFormat) -> Any:
    if fmt == "json":
        return json.loads(text)
    return edn_format.loads(text)


def _encode(manifest: Mapping[str, str], fmt: ManifestFormat) -> str:
    # Sorted keys, LF newlines, trailing newline: re-runs are byte-identical.
    assets = {k: manifest[k] for k in sorted(manifest)}
    if fmt == "json":
        return json.dumps({MANIFEST_ASSETS_KEY: assets}, indent=2, ensure_ascii=False) + "\n"
    return edn_format.dumps({edn_format.Keyword(MANIFEST_ASSETS_KEY): assets}) + "\n"


def parse_manifest_text(text: str, fmt: ManifestFormat = "edn", *, source: str | Path = "<string>") -> dict[str, str]:
    """Parse manifest text into a plain ``{source_path: hashed_path}`` dict.

    Accepts ``{:assets {...}}`` (EDN) or ``{"assets": {...}}`` (JSON). Anything
    else raises ``ManifestParseError``.
    """

    if not text.strip():
        raise ManifestParseError(source, "file is empty")

    try:
        data = decode_text(text, fmt)
    except DECODE_ERRORS as exc:
        raise ManifestParseError(source, f"invalid {fmt.upper()}: {exc}") from exc

    if not isinstance(data, Mapping):
        raise ManifestParseError(source, "top level must be a map")

    assets: Any = None
    found = False
    for key, value in data.items():
        if _key_name(key) == MANIFEST_ASSETS_KEY:
            assets = value
            found = True
            break
    if not found:
        raise ManifestParseError(source, f"missing {MANIFEST_ASSETS_KEY!r} entry")
    if not isinstance(assets, Mapping):
        raise ManifestParseError(source, f"{MANIFEST_ASSETS_KEY!r} must be a map")

    manifest: dict[str, str] = {}
    for src, target in assets.items():
        if not isinstance(src, str) or not isinstance(target, str):
            raise ManifestParseError(source, f"entries must map strings to strings, got {src!r} -> {target!r}")
        manifest[src] = target
    return manifest


def render_manifest_text(manifest: Mapping[str, str], fmt: ManifestFormat = "edn") -> str:
    return _encode(manifest, fmt)


def load(manifest_path: str | Path) -> dict[str, str]:
    path = Path(manifest_path)
    if not path.exists():
        logger.debug("No manifest at %s; starting from an empty mapping", path)
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestParseError(path, f"not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise FileReadError(path, exc) from exc
    return parse_manifest_text(text, manifest_format_for(path), source=path)


def merge(existing: Mapping[str, str], updates: Mapping[str, str]) -> dict[str, str]:
    merged = dict(existing)
    merged.update(updates)
    return merged


def persist(manifest: Mapping[str, str], manifest_path: str | Path) -> Path:
    path = Path(manifest_path)
    text = _encode(manifest, manifest_format_for(path))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8", newline="\n")
    except OSError as exc:
        raise FileWriteError(path, exc) from exc
    logger.debug("Wrote %d manifest entries to %s", len(manifest), path)
    return path


__all__ = [
    "DECODE_ERRORS",
    "MANIFEST_ASSETS_KEY",
    "ManifestFormat",
    "decode_text",
    "load",
    "manifest_format_for",
    "merge",
    "parse_manifest_text",
    "persist",
    "render_manifest_text",
]
