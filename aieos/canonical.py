"""
RFC 8785 (JCS) canonical JSON.

Object members are sorted by key, arrays keep their order, numbers use the
ECMAScript shortest form and no whitespace is emitted. Two parties holding
the same logical value always get the same bytes.
"""

from __future__ import annotations

from typing import Any

import rfc8785

from .errors import CanonicalizationError
from .utils import utf8_encode


def canonical_bytes(value: Any) -> bytes:
    try:
        canonical = rfc8785.dumps(value)
    except (rfc8785.CanonicalizationError, AttributeError, TypeError, ValueError) as e:
        raise CanonicalizationError(f"Cannot canonicalize value: {e}") from e
    if isinstance(canonical, bytes):
        return canonical
    return utf8_encode(canonical)


def canonicalize(value: Any) -> str:
    """
    Canonical JSON text of a JSON-like value.

    Raises CanonicalizationError for non-string keys, NaN/Infinity,
    integers outside the I-JSON range and any non-JSON type.
    """
    return canonical_bytes(value).decode("utf-8")
