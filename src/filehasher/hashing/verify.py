"""Compare files against expected hex digests."""

from __future__ import annotations

import hmac
import logging
import os
import string

from .algorithms import digest_size, resolve_algorithm
from .digest import DEFAULT_BUFFER_SIZE, hex_digest
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits.lower())


def normalize_hex(expected: str | None, algorithm: str | None = None) -> str:
    """Lowercase and validate ``expected`` against the algorithm's digest size."""

    if expected is None:
        raise InvalidArgumentError("expected digest is required")
    value = expected.strip().lower()
    if not value or not set(value) <= _HEX_DIGITS:
        raise InvalidArgumentError(f"expected digest is not hexadecimal: {expected!r}")

    width = 2 * digest_size(algorithm)
    if len(value) != width:
        raise InvalidArgumentError(
            f"expected digest has {len(value)} hex digits, {resolve_algorithm(algorithm)} produces {width}"
        )
    return value


def verify_file(
    path: str | os.PathLike[str],
    expected: str,
    algorithm: str | None = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> bool:
    """Return True when the digest of ``path`` matches ``expected``."""

    wanted = normalize_hex(expected, algorithm)
    actual = hex_digest(path, algorithm, buffer_size)
    if hmac.compare_digest(actual, wanted):
        return True
    logger.warning("Digest mismatch for %s: expected %s got %s", path, wanted, actual)
    return False


__all__ = ["normalize_hex", "verify_file"]
