from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import edn_format
import requests

from hashed_assets.config import DEFAULT_PUBLIC_DIR, DEFAULT_RESOURCES_DIR
from hashed_assets.errors import ConfigurationError, FetchError, FileReadError
from hashed_assets.hashing.hash_utils import write_bytes
from hashed_assets.manifest.store import DECODE_ERRORS, decode_text, manifest_format_for

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TARGET_DIR = Path(DEFAULT_RESOURCES_DIR) / DEFAULT_PUBLIC_DIR
DEFAULT_TIMEOUT_SECONDS = 60
USER_AGENT = "hashed-assets-fetch/1.0"


@dataclass(frozen=True, slots=True)
class FetchItem:
    url: str
    filepath: str

    @classmethod
    def from_mapping(cls, data: Mapping[Any, Any]) -> "FetchItem":
        values: dict[str, str] = {}
        for key, value in data.items():
            name = key.name if isinstance(key, edn_format.Keyword) else str(key)
            values[name] = value
        for k in ("url", "filepath"):
            v = values.get(k)
            if not isinstance(v, str) or not v.strip():
                raise ConfigurationError(f"fetch item {k} must be a non-empty string: {dict(values)!r}")
        return cls(url=values["url"].strip(), filepath=values["filepath"].strip())


def fetch_asset(
    item: FetchItem,
    target_dir: str | Path = DEFAULT_FETCH_TARGET_DIR,
    *,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Path:
    """Download ``item.url`` and save the body unchanged to ``target_dir/item.filepath``.

    Non-2xx responses raise ``FetchError`` with the URL, status and body.
    """

    target = Path(target_dir) / item.filepath
    getter = session.get if session is not None else requests.get

    logger.info("Fetching %s from %s", item.filepath, item.url)
    try:
        response = getter(item.url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as exc:
        raise FetchError(item.url, None, str(exc)) from exc

    status = int(response.status_code)
    if not 200 <= status < 300:
        raise FetchError(item.url, status, response.text)

    write_bytes(target, response.content)
    logger.info("Saved to %s", target)
    return target


def fetch_assets(
    items: Iterable[FetchItem],
    target_dir: str | Path | None = None,
    *,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[Path]:
    base = DEFAULT_FETCH_TARGET_DIR if target_dir is None else Path(target_dir)
    return [fetch_asset(item, base, session=session, timeout=timeout) for item in items]


def load_fetch_items(path: str | Path) -> list[FetchItem]:
    """Read a list of ``{url, filepath}`` maps from a JSON or EDN file."""

    p = Path(path)
    try:
        data = decode_text(p.read_text(encoding="utf-8"), manifest_format_for(p))
    except OSError as exc:
        raise FileReadError(p, exc) from exc
    except DECODE_ERRORS as exc:
        raise ConfigurationError(f"fetch list {p} is not valid: {exc}") from exc

    if isinstance(data, (str, bytes, Mapping)) or not isinstance(data, Iterable):
        raise ConfigurationError(f"fetch list {p} must be a list of maps")
    items: list[FetchItem] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"fetch list {p} entry [{i}] must be a map")
        items.append(FetchItem.from_mapping(entry))
    return items


__all__ = [
    "DEFAULT_FETCH_TARGET_DIR",
    "FetchItem",
    "fetch_asset",
    "fetch_assets",
    "load_fetch_items",
]
