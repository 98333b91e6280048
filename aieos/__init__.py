"""
AIEOS identity signing SDK (Python)

Ed25519 keypairs, RFC 8785 canonical signing input and profile
signatures. No network calls, no key storage. All operations are local.
"""

from .errors import (
    AieosError,
    InvalidKeyLength,
    KeyEncodingError,
    KeyMismatchError,
    CanonicalizationError,
)
from .canonical import canonicalize, canonical_bytes
from .profile import (
    PROTOCOL,
    SCHEMA_VERSION,
    SCHEMA_URL,
    reduce_for_signing,
    build_sign_input,
    normalize_names,
    new_profile,
    with_signature,
)
from .keys import (
    Keypair,
    SPKI_ED25519_HEADER,
    PKCS8_ED25519_HEADER,
    encode_public_key,
    decode_public_key,
    encode_private_key,
    decode_private_key,
    generate_keypair,
    derive_public_key,
)
from .core import (
    sign,
    verify,
    sign_profile,
    verify_profile,
    sign_and_attach,
)

__version__ = "1.2.0"

__all__ = [
    "AieosError",
    "InvalidKeyLength",
    "KeyEncodingError",
    "KeyMismatchError",
    "CanonicalizationError",
    "canonicalize",
    "canonical_bytes",
    "PROTOCOL",
    "SCHEMA_VERSION",
    "SCHEMA_URL",
    "reduce_for_signing",
    "build_sign_input",
    "normalize_names",
    "new_profile",
    "with_signature",
    "Keypair",
    "SPKI_ED25519_HEADER",
    "PKCS8_ED25519_HEADER",
    "encode_public_key",
    "decode_public_key",
    "encode_private_key",
    "decode_private_key",
    "generate_keypair",
    "derive_public_key",
    "sign",
    "verify",
    "sign_profile",
    "verify_profile",
    "sign_and_attach",
]
