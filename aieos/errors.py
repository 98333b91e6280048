from __future__ import annotations


class AieosError(Exception):
    """Base class for every error raised by the aieos package."""


class InvalidKeyLength(AieosError, ValueError):
    """A decoded key is not exactly the expected number of bytes."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        super().__init__(f"{what} must be {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class KeyEncodingError(AieosError, ValueError):
    """Malformed hex string or DER key container."""


class KeyMismatchError(AieosError, ValueError):
    """The signing key does not belong to the profile's public key."""


class CanonicalizationError(AieosError, ValueError):
    """Value cannot be represented as canonical JSON."""
