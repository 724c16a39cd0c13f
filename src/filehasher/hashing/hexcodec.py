"""Lowercase hexadecimal rendering of digest bytes."""

from __future__ import annotations

from .errors import InvalidArgumentError

HEX_ALPHABET = "0123456789abcdef"


def to_hex(data: bytes | bytearray | memoryview | None) -> str:
    """Render ``data`` as two lowercase hex digits per byte, high nibble first."""

    if data is None:
        raise InvalidArgumentError("cannot hex-encode None")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(f"expected a byte sequence, got {type(data).__name__}")

    digits: list[str] = []
    for value in bytes(data):
        digits.append(HEX_ALPHABET[value >> 4])
        digits.append(HEX_ALPHABET[value & 0x0F])
    return "".join(digits)


__all__ = ["HEX_ALPHABET", "to_hex"]
