"""Common cryptographic utilities.
"""

from __future__ import annotations

import hashlib
import hmac
import json
from typing import Any

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

NONCE_LEN = 12
KEY_SALT = b"keylic"


class CryptoUtils:
    """Utility class for cryptographic operations."""

    @staticmethod
    def canonical_json(obj: dict[str, Any]) -> bytes:
        """Serialize a JSON object to its canonical byte form."""
        return json.dumps(
            obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False
        ).encode()

    @staticmethod
    def derive_artifact_key(secret: bytes, version_tag: str) -> bytes:
        """Derive the 32 byte AEAD key for one repository version."""
        return HKDF(
            algorithm=hashes.SHA256(),
            length=32,
            salt=KEY_SALT,
            info=f"artifact:{version_tag}".encode(),
        ).derive(secret)

    @staticmethod
    def synthetic_nonce(key: bytes, data: bytes) -> bytes:
        """Derive a nonce from the plaintext so that sealing is deterministic."""
        return hmac.new(key, data, hashlib.sha256).digest()[:NONCE_LEN]
