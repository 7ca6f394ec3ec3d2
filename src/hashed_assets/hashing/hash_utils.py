from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from hashed_assets.errors import FileReadError, FileWriteError

logger = logging.getLogger(__name__)


def md5_bytes(data: bytes) -> str:
    # Cache-busting fingerprint only; not used for integrity or security.
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def split_ext(file_name: str) -> tuple[str, str]:
    """Split at the last dot: ``"app.min.js"`` -> ``("app.min", "js")``.

    Names without a dot, and dotfiles such as ``.htaccess``, have no extension.
    """

    base, sep, ext = file_name.rpartition(".")
    if not sep or not base:
        return file_name, ""
    return base, ext


def compute_hashed_name(file_bytes: bytes, original_file_name: str) -> str:
    base, ext = split_ext(original_file_name)
    content_hash = md5_bytes(file_bytes)
    if not ext:
        return f"{base}.{content_hash}"
    return f"{base}.{content_hash}.{ext}"


def read_bytes(path: str | Path) -> bytes:
    file_path = Path(path)
    try:
        return file_path.read_bytes()
    except OSError as exc:
        raise FileReadError(file_path, exc) from exc


def write_bytes(path: str | Path, data: bytes) -> Path:
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(data)
    except OSError as exc:
        raise FileWriteError(file_path, exc) from exc
    return file_path


def copy_to_hashed_path(source_file_path: str | Path, target_directory: str | Path) -> Path:
    """Copy a file byte-for-byte to ``target_directory/<base>.<md5>.<ext>``.

    An existing file with the same hashed name is overwritten; for unchanged
    content it already holds the same bytes.
    """

    source = Path(source_file_path)
    content = read_bytes(source)
    target = Path(target_directory) / compute_hashed_name(content, source.name)
    write_bytes(target, content)
    logger.debug("Hashed %s -> %s", source, target)
    return target


__all__ = [
    "compute_hashed_name",
    "copy_to_hashed_path",
    "md5_bytes",
    "read_bytes",
    "split_ext",
    "write_bytes",
]
