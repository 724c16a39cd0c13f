"""Error taxonomy for file digest computation."""

from __future__ import annotations

from os import PathLike


class FileHasherError(Exception):
    """Base class for every error raised by the hashing helpers."""


class InvalidArgumentError(FileHasherError, ValueError):
    """Raised when a caller passes a missing or out-of-range argument."""


class UnsupportedAlgorithmError(FileHasherError, ValueError):
    """Raised when the requested hash algorithm is not available."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Unsupported hash algorithm: {algorithm!r}")
        self.algorithm = algorithm


class DigestIOError(FileHasherError, OSError):
    """Raised when the file cannot be opened or a read fails partway through."""

    def __init__(self, path: str | PathLike[str], message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class ManifestError(FileHasherError):
    """Raised when a checksum manifest cannot be parsed."""


__all__ = [
    "DigestIOError",
    "FileHasherError",
    "InvalidArgumentError",
    "ManifestError",
    "UnsupportedAlgorithmError",
]
