"""Content hashing and hashed-copy helpers."""

__all__: list[str] = [
    "hash_utils",
]
