from __future__ import annotations

import re
from typing import Iterable

from .errors import KeyEncodingError

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def utf8_encode(s: str) -> bytes:
    return s.encode("utf-8")


def concat_bytes(parts: Iterable[bytes]) -> bytes:
    return b"".join(parts)


def to_hex(b: bytes) -> str:
    return b.hex()


def from_hex(h: str) -> bytes:
    # bytes.fromhex() tolerates whitespace, so check the alphabet first
    if not isinstance(h, str):
        raise KeyEncodingError(f"from_hex: expected str, got {type(h).__name__}")
    if len(h) % 2 != 0:
        raise KeyEncodingError("from_hex: hex string must have even length")
    if not _HEX_RE.fullmatch(h):
        raise KeyEncodingError("from_hex: invalid hex character")
    return bytes.fromhex(h)
