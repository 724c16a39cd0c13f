"""File digest computation and hex rendering."""

from .algorithms import DEFAULT_ALGORITHM, available_algorithms, digest_size, resolve_algorithm
from .digest import DEFAULT_BUFFER_SIZE, compute_digest, hex_digest
from .errors import (
    DigestIOError,
    FileHasherError,
    InvalidArgumentError,
    ManifestError,
    UnsupportedAlgorithmError,
)
from .hexcodec import HEX_ALPHABET, to_hex
from .verify import normalize_hex, verify_file

__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_BUFFER_SIZE",
    "DigestIOError",
    "FileHasherError",
    "HEX_ALPHABET",
    "InvalidArgumentError",
    "ManifestError",
    "UnsupportedAlgorithmError",
    "available_algorithms",
    "compute_digest",
    "digest_size",
    "hex_digest",
    "normalize_hex",
    "resolve_algorithm",
    "to_hex",
    "verify_file",
]
