from __future__ import annotations

import hashlib
from pathlib import Path

from typer.testing import CliRunner

from filehasher import cli

# RFC 1321 appendix A.5 vectors plus the pangram.
MD5_EMPTY = "d41d8cd98f00b204e9800998ecf8427e"
MD5_VECTORS: dict[bytes, str] = {
    b"": MD5_EMPTY,
    b"a": "0cc175b9c0f1b6a831c399e269772661",
    b"abc": "900150983cd24fb0d6963f7d28e17f72",
    b"message digest": "f96b697d7cb7938d525a2f31aaf161d0",
    b"The quick brown fox jumps over the lazy dog": "9e107d9d372bb6826bd81d3542a419d6",
}


def write_bytes(directory: Path, name: str, payload: bytes) -> Path:
    """Write ``payload`` to ``directory/name`` and return the path."""

    path = directory / name
    path.write_bytes(payload)
    return path


def patterned_payload(length: int) -> bytes:
    """Deterministic bytes of ``length`` covering every byte value."""

    return bytes((index * 31 + index // 7) % 256 for index in range(length))


def reference_digest(payload: bytes, algorithm: str = "md5") -> bytes:
    """Digest of the whole payload in a single update."""

    return hashlib.new(algorithm, payload).digest()


def invoke(*args: str):
    """Run the CLI in-process."""

    return CliRunner().invoke(cli.app, list(args))
