from __future__ import annotations

import copy
from typing import Any, Dict, Mapping

from .canonical import canonicalize
from .errors import CanonicalizationError

PROTOCOL = "AIEOS"
SCHEMA_VERSION = "1.2"
SCHEMA_URL = f"https://aieos.org/schema/v{SCHEMA_VERSION}/aieos.schema.json"


# ─────────────────────────────────────────────
# Signing input
# ─────────────────────────────────────────────

def reduce_for_signing(profile: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Copy of the profile with metadata reduced to { public_key }.

    Every other metadata field (signature, alias, entity_id, ...) is
    server-assigned or mutable and is not covered by the signature.
    """
    meta = profile.get("metadata")
    public_key = meta.get("public_key") if isinstance(meta, Mapping) else None
    # null and absent both reduce to ""
    if public_key is None:
        public_key = ""

    try:
        reduced = copy.deepcopy(dict(profile))
        reduced["metadata"] = {"public_key": copy.deepcopy(public_key)}
    except (copy.Error, TypeError) as e:
        raise CanonicalizationError(f"Cannot copy profile: {e}") from e
    return reduced


def build_sign_input(profile: Mapping[str, Any]) -> str:
    return canonicalize(reduce_for_signing(profile))


# ─────────────────────────────────────────────
# Profile helpers
# ─────────────────────────────────────────────

def normalize_names(names: Any) -> Dict[str, Any]:
    """
    Accept both shapes of identity.names.

    Older profiles carry a flat list (["Aria"]); current ones carry a
    mapping ({"first": "Aria"}). Always returns the mapping form.
    """
    if names is None:
        return {}
    if isinstance(names, (list, tuple)):
        return {"first": names[0]} if names else {}
    if isinstance(names, Mapping):
        return dict(names)
    raise ValueError(f"Unsupported identity.names value: {names!r}")


def new_profile(
    public_key: str,
    name: str,
    agent_type: str | None = None,
    description: str | None = None,
    alias: str | None = None,
) -> Dict[str, Any]:
    name = name.strip() if isinstance(name, str) else ""
    if not name:
        raise ValueError("Agent name is required")

    metadata: Dict[str, Any] = {"public_key": public_key, "signature": ""}
    if alias:
        metadata["alias"] = alias

    identity: Dict[str, Any] = {"names": {"first": name}}
    if agent_type:
        identity["agent_type"] = agent_type
    if description:
        identity["description"] = description

    return {
        "standard": {
            "protocol": PROTOCOL,
            "version": SCHEMA_VERSION,
            "schema_url": SCHEMA_URL,
        },
        "metadata": metadata,
        "identity": identity,
    }


def with_signature(profile: Mapping[str, Any], signature_hex: str) -> Dict[str, Any]:
    signed = copy.deepcopy(dict(profile))
    meta = signed.get("metadata")
    meta = dict(meta) if isinstance(meta, Mapping) else {}
    meta["signature"] = signature_hex
    signed["metadata"] = meta
    return signed
