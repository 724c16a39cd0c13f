"""Checksum manifest helpers in the ``md5sum`` text format."""

from __future__ import annotations

import string
from pathlib import Path

from filehasher.hashing.errors import ManifestError

_HEX_DIGITS = frozenset(string.hexdigits.lower())


def manifest_path_for(path: Path, suffix: str) -> Path:
    """Return the sidecar manifest path for ``path`` (``data.bin`` -> ``data.bin.md5``)."""
    return path.with_name(path.name + suffix)


def write_checksum_manifest(path: Path, hex_digest: str, *, suffix: str) -> Path:
    """Write ``<hex>  <filename>`` next to ``path`` and return the manifest path."""

    try:
        dest = manifest_path_for(path, suffix)
        dest.write_text(f"{hex_digest}  {path.name}\n", encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise ManifestError(f"Cannot write manifest for {path}: {exc}") from exc
    return dest


def read_checksum_manifest(manifest_path: Path) -> str:
    """Return the hex digest recorded on the first non-blank line of ``manifest_path``."""

    try:
        text = manifest_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {manifest_path}: {exc}") from exc

    for line in text.splitlines():
        if not line.strip():
            continue
        # coreutils prefixes escaped entries with a backslash
        digest = line.split()[0].lstrip("\\*").lower()
        if not digest or not set(digest) <= _HEX_DIGITS:
            raise ManifestError(f"Manifest {manifest_path} has a malformed entry: {line.strip()!r}")
        return digest
    raise ManifestError(f"Manifest {manifest_path} does not contain a digest.")


__all__ = ["manifest_path_for", "read_checksum_manifest", "write_checksum_manifest"]
