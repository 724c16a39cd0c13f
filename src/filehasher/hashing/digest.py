"""Chunked file digest computation."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .algorithms import new_accumulator
from .errors import DigestIOError, InvalidArgumentError
from .hexcodec import to_hex

DEFAULT_BUFFER_SIZE = 4096

logger = logging.getLogger(__name__)


def _validate(path: str | os.PathLike[str] | None, buffer_size: int) -> Path:
    if path is None or (isinstance(path, str) and not path):
        raise InvalidArgumentError("path must be a non-empty file path")
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
        raise InvalidArgumentError(f"buffer_size must be an integer, got {buffer_size!r}")
    if buffer_size < 1:
        raise InvalidArgumentError(f"buffer_size must be >= 1, got {buffer_size}")
    return Path(path)


def compute_digest(
    path: str | os.PathLike[str],
    algorithm: str | None = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> bytes:
    """Return the digest of the file at ``path``.

    The file length is taken once, after opening. Each read asks for at most
    the bytes still outstanding, so the final chunk holds exactly the
    remainder and the accumulator only ever sees bytes that were read.

    ``algorithm`` defaults to MD5 when ``None`` or empty. Raises
    :class:`InvalidArgumentError`, :class:`UnsupportedAlgorithmError` or
    :class:`DigestIOError`.
    """

    target = _validate(path, buffer_size)
    accumulator = new_accumulator(algorithm)

    try:
        with target.open("rb") as handle:
            remaining = os.fstat(handle.fileno()).st_size
            logger.debug(
                "Hashing %s algorithm=%s length=%s buffer_size=%s", target, accumulator.name, remaining, buffer_size
            )
            while remaining > 0:
                chunk = handle.read(min(buffer_size, remaining))
                if not chunk:
                    raise DigestIOError(target, f"File truncated with {remaining} bytes unread")
                accumulator.update(chunk)
                remaining -= len(chunk)
    except DigestIOError:
        raise
    except OSError as exc:
        raise DigestIOError(target, f"Unable to read file ({exc.strerror or exc})") from exc

    return accumulator.digest()


def hex_digest(
    path: str | os.PathLike[str],
    algorithm: str | None = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> str:
    """Return :func:`compute_digest` rendered through :func:`to_hex`."""
    return to_hex(compute_digest(path, algorithm, buffer_size))


__all__ = ["DEFAULT_BUFFER_SIZE", "compute_digest", "hex_digest"]
