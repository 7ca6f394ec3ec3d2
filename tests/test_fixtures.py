from __future__ import annotations

import pytest

from tests.fixtures import PNG_LIKE_BYTES


def test_png_like_bytes_are_not_utf8() -> None:
    with pytest.raises(UnicodeDecodeError):
        PNG_LIKE_BYTES.decode("utf-8")
