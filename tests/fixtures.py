from __future__ import annotations

from pathlib import Path

# PNG signature: contains bytes that are not valid UTF-8 (0x89) plus CR/LF pairs
# that a text round-trip would mangle.
PNG_LIKE_BYTES: bytes = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A, 0x00, 0xFF, 0xFE])

CSS_CONTENT = "body { color: red; }"
JS_CONTENT = "console.log('hello');"


def write_file(path: Path, content: str | bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


def make_public_tree(resources_dir: Path, files: dict[str, str | bytes], public_dir: str = "public") -> Path:
    """Create ``resources_dir/public_dir/<rel>`` for each entry and return the public dir."""

    public = resources_dir / public_dir
    public.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        write_file(public / rel, content)
    return public
