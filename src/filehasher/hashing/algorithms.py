"""Hash algorithm lookup on top of :mod:`hashlib`."""

from __future__ import annotations

import hashlib
from typing import Any

from .errors import UnsupportedAlgorithmError

DEFAULT_ALGORITHM = "md5"

_KNOWN = frozenset(name.lower() for name in hashlib.algorithms_available)


def _candidates(name: str) -> list[str]:
    """Spellings to try, hashlib's own style first (``SHA-512/256`` -> ``sha512_256``)."""

    lowered = name.strip().lower()
    spellings = [
        lowered.replace("-", "").replace("/", "_"),
        lowered.replace("-", "_").replace("/", "_"),
        lowered,
    ]
    return list(dict.fromkeys(spellings))


def _construct(name: str) -> Any | None:
    if name not in _KNOWN:
        return None
    try:
        accumulator = hashlib.new(name, usedforsecurity=False)
    except (ValueError, TypeError):
        return None
    # shake_* report a zero digest size: their output length is caller-chosen.
    if accumulator.digest_size == 0:
        return None
    return accumulator


def _lookup(name: str | None) -> tuple[str, Any]:
    if name is None or not name.strip():
        name = DEFAULT_ALGORITHM

    for candidate in _candidates(name):
        accumulator = _construct(candidate)
        if accumulator is not None:
            return candidate, accumulator
    raise UnsupportedAlgorithmError(name)


def resolve_algorithm(name: str | None) -> str:
    """Return the hashlib name for ``name`` (``MD5``, ``SHA-256``, ``sha3-256`` ...).

    ``None`` or an empty string selects :data:`DEFAULT_ALGORITHM`.
    """

    return _lookup(name)[0]


def new_accumulator(name: str | None) -> Any:
    """Create a fresh hash object for ``name``."""
    return _lookup(name)[1]


def digest_size(name: str | None) -> int:
    """Return the digest length in bytes for ``name``."""
    return new_accumulator(name).digest_size


def available_algorithms() -> list[str]:
    """Return the sorted fixed-length algorithms provided by this runtime."""

    names = set()
    for candidate in _KNOWN:
        try:
            names.add(resolve_algorithm(candidate))
        except UnsupportedAlgorithmError:
            continue
    return sorted(names)


__all__ = [
    "DEFAULT_ALGORITHM",
    "available_algorithms",
    "digest_size",
    "new_accumulator",
    "resolve_algorithm",
]
