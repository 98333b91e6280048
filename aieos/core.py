from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from .errors import KeyMismatchError
from .keys import derive_public_key, load_private_key, load_public_key
from .profile import build_sign_input, with_signature
from .utils import from_hex, to_hex, utf8_encode

log = logging.getLogger(__name__)

SIGNATURE_SIZE = 64


# ─────────────────────────────────────────────
# Crypto primitives
# ─────────────────────────────────────────────

def sign(message: bytes, private_key_seed: bytes) -> bytes:
    # Pure Ed25519: the message is hashed internally, no pre-digest
    return load_private_key(private_key_seed).sign(message)


def verify(message: bytes, signature: bytes, public_key: bytes) -> bool:
    try:
        load_public_key(public_key).verify(signature, message)
        return True
    except Exception:
        return False


# ─────────────────────────────────────────────
# Profiles
# ─────────────────────────────────────────────

def sign_profile(profile: Mapping[str, Any], private_key_hex: str) -> str:
    """
    Sign an AIEOS profile and return the 128-char hex signature.

    Raises KeyEncodingError for non-hex keys and InvalidKeyLength unless the
    key decodes to exactly 32 bytes. Errors are never swallowed here.
    """
    private_key = load_private_key(from_hex(private_key_hex))
    message = utf8_encode(build_sign_input(profile))
    signature = private_key.sign(message)
    log.debug("Signed profile for public key %s", _public_key_of(profile))
    return to_hex(signature)


def verify_profile(profile: Any) -> bool:
    """
    True only for a valid signature over the profile's signing input.

    Missing fields, malformed hex and any decoding or verification error
    all yield False; this function does not raise.
    """
    try:
        meta = profile.get("metadata") if isinstance(profile, Mapping) else None
        if not isinstance(meta, Mapping):
            log.debug("Profile verification failed: no metadata")
            return False

        public_key_hex = meta.get("public_key")
        signature_hex = meta.get("signature")
        if not public_key_hex or not signature_hex:
            log.debug("Profile verification failed: public_key or signature missing")
            return False

        public_key = from_hex(public_key_hex)
        signature = from_hex(signature_hex)
        if len(signature) != SIGNATURE_SIZE:
            log.debug("Profile verification failed: signature is %d bytes", len(signature))
            return False

        message = utf8_encode(build_sign_input(profile))
        load_public_key(public_key).verify(signature, message)
        return True
    except Exception as e:
        log.debug("Profile verification failed: %s", type(e).__name__)
        return False


def sign_and_attach(profile: Mapping[str, Any], private_key_hex: str) -> Dict[str, Any]:
    """
    Return a copy of profile with metadata.signature filled in.

    The key must belong to metadata.public_key; otherwise the result could
    never verify and KeyMismatchError is raised.
    """
    expected = _public_key_of(profile)
    actual = derive_public_key(private_key_hex)
    if not isinstance(expected, str) or expected.lower() != actual:
        raise KeyMismatchError("Private key does not match metadata.public_key")
    return with_signature(profile, sign_profile(profile, private_key_hex))


def _public_key_of(profile: Mapping[str, Any]) -> Any:
    meta = profile.get("metadata")
    return meta.get("public_key") if isinstance(meta, Mapping) else None
