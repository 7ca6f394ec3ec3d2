from __future__ import annotations

from pathlib import Path


class HashedAssetsError(Exception):
    """Base class for every error raised by hashed_assets."""


class ConfigurationError(HashedAssetsError, ValueError):
    """Raised for invalid options, e.g. a pattern that is not a valid regex."""


class ManifestParseError(HashedAssetsError, ValueError):
    """Raised when an existing manifest file cannot be parsed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Manifest {self.path} is malformed: {reason}")


class FileReadError(HashedAssetsError, OSError):
    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        super().__init__(f"Unable to read {self.path}: {cause}")


class FileWriteError(HashedAssetsError, OSError):
    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        super().__init__(f"Unable to write {self.path}: {cause}")


class FetchError(HashedAssetsError, RuntimeError):
    """Raised when a remote asset cannot be fetched.

    Carries the URL, the HTTP status (None for transport failures) and the
    response body so the caller can report what the server said.
    """

    def __init__(self, url: str, status_code: int | None, body: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed to fetch {url} (http_status={status_code})")
