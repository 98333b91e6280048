"""
Ed25519 keys as raw 32-byte hex strings.

Keys travel as raw material (64 lowercase hex chars) but the crypto backend
loads and exports standard DER containers. For Ed25519 these containers are
a fixed header followed by the raw bytes, so conversion is header splicing:

  SubjectPublicKeyInfo : 302a300506032b6570032100             + public key
  PKCS#8 PrivateKeyInfo: 302e020100300506032b657004220420     + 32-byte seed

Both headers encode OID 1.3.101.112 (id-Ed25519).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from .errors import InvalidKeyLength, KeyEncodingError
from .utils import concat_bytes, from_hex, to_hex

log = logging.getLogger(__name__)

KEY_SIZE = 32
SPKI_ED25519_HEADER = bytes.fromhex("302a300506032b6570032100")
PKCS8_ED25519_HEADER = bytes.fromhex("302e020100300506032b657004220420")


@dataclass(frozen=True)
class Keypair:
    public_key: str
    private_key: str = field(repr=False)

    def to_dict(self) -> Dict[str, str]:
        return {"public_key": self.public_key, "private_key": self.private_key}


# ─────────────────────────────────────────────
# Container header splicing
# ─────────────────────────────────────────────

def _require_size(what: str, raw: bytes) -> None:
    if len(raw) != KEY_SIZE:
        raise InvalidKeyLength(what, KEY_SIZE, len(raw))


def _strip_header(what: str, der: bytes, header: bytes) -> bytes:
    if len(der) != len(header) + KEY_SIZE or not der.startswith(header):
        raise KeyEncodingError(f"Not an Ed25519 {what} container")
    return der[len(header):]


def encode_public_key(raw: bytes) -> bytes:
    _require_size("public key", raw)
    return concat_bytes([SPKI_ED25519_HEADER, raw])


def decode_public_key(der: bytes) -> bytes:
    return _strip_header("SubjectPublicKeyInfo", der, SPKI_ED25519_HEADER)


def encode_private_key(seed: bytes) -> bytes:
    _require_size("private key", seed)
    return concat_bytes([PKCS8_ED25519_HEADER, seed])


def decode_private_key(der: bytes) -> bytes:
    return _strip_header("PKCS#8", der, PKCS8_ED25519_HEADER)


# ─────────────────────────────────────────────
# Backend key objects
# ─────────────────────────────────────────────

def load_private_key(seed: bytes) -> Ed25519PrivateKey:
    der = encode_private_key(seed)
    try:
        key = serialization.load_der_private_key(der, password=None)
    except ValueError as e:
        raise KeyEncodingError(f"Cannot load private key: {e}") from e
    if not isinstance(key, Ed25519PrivateKey):
        raise KeyEncodingError("Private key is not Ed25519")
    return key


def load_public_key(raw: bytes) -> Ed25519PublicKey:
    der = encode_public_key(raw)
    try:
        key = serialization.load_der_public_key(der)
    except ValueError as e:
        raise KeyEncodingError(f"Cannot load public key: {e}") from e
    if not isinstance(key, Ed25519PublicKey):
        raise KeyEncodingError("Public key is not Ed25519")
    return key


def _export_public(public: Ed25519PublicKey) -> bytes:
    return decode_public_key(
        public.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    )


# ─────────────────────────────────────────────
# Keypair
# ─────────────────────────────────────────────

def generate_keypair() -> Keypair:
    """
    Fresh Ed25519 keypair as lowercase hex.

    public_key is the raw 32-byte key, private_key the 32-byte seed
    (not the 64-byte expanded key).
    """
    private_key = Ed25519PrivateKey.generate()

    seed = decode_private_key(
        private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    public = _export_public(private_key.public_key())

    keypair = Keypair(public_key=to_hex(public), private_key=to_hex(seed))
    log.debug("Generated Ed25519 keypair, public key %s", keypair.public_key)
    return keypair


def derive_public_key(private_key_hex: str) -> str:
    seed = from_hex(private_key_hex)
    return to_hex(_export_public(load_private_key(seed).public_key()))
