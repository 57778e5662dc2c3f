"""Key material used to encode and decode license artifacts.

Keys are stored as PEM files next to the shared artifact secret:
``vendor_private.key`` (PKCS8), ``vendor_public.key`` (SubjectPublicKeyInfo)
and ``artifact.secret``.
"""

from __future__ import annotations

import os
import secrets
from typing import TYPE_CHECKING

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

if TYPE_CHECKING:
    from pathlib import Path

PRIVATE_KEY_FILE = "vendor_private.key"
PUBLIC_KEY_FILE = "vendor_public.key"
SECRET_FILE = "artifact.secret"


class ConsumerKey:
    """Verification key material held by consumer applications."""

    __slots__ = ("public_key", "secret")

    def __init__(self, public_key: Ed25519PublicKey, secret: bytes | None = None):
        self.public_key = public_key
        self.secret = secret

    @classmethod
    def from_pem(cls, data: bytes, secret: bytes | None = None) -> ConsumerKey:
        public_key = serialization.load_pem_public_key(data)
        if not isinstance(public_key, Ed25519PublicKey):
            msg = "Vendor public key is not an Ed25519 key"
            raise ValueError(msg)
        return cls(public_key, secret)

    def public_pem(self) -> bytes:
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def __repr__(self) -> str:
        return f"ConsumerKey(secret={'set' if self.secret else 'unset'})"


class VendorKey:
    """Signing key material held by the vendor."""

    __slots__ = ("private_key", "secret")

    def __init__(self, private_key: Ed25519PrivateKey, secret: bytes | None = None):
        self.private_key = private_key
        self.secret = secret

    @classmethod
    def generate(cls, secret: bytes | None = None) -> VendorKey:
        """Create a fresh key pair. ``secret=None`` draws a random hex secret."""
        if secret is None:
            secret = secrets.token_hex(32).encode()
        return cls(Ed25519PrivateKey.generate(), secret)

    @classmethod
    def from_pem(cls, data: bytes, secret: bytes | None = None) -> VendorKey:
        private_key = serialization.load_pem_private_key(data, None)
        if not isinstance(private_key, Ed25519PrivateKey):
            msg = "Vendor private key is not an Ed25519 key"
            raise ValueError(msg)
        return cls(private_key, secret)

    def private_pem(self) -> bytes:
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def consumer_key(self) -> ConsumerKey:
        return ConsumerKey(self.private_key.public_key(), self.secret)

    def save(self, keys_dir: Path) -> list[Path]:
        """Write the key pair and secret to ``keys_dir``; return the paths.

        The private key and the secret are only readable by the owner.
        """
        keys_dir.mkdir(parents=True, exist_ok=True)
        files = {
            PRIVATE_KEY_FILE: (self.private_pem(), 0o600),
            PUBLIC_KEY_FILE: (self.consumer_key().public_pem(), 0o644),
        }
        if self.secret:
            files[SECRET_FILE] = (self.secret, 0o600)
        paths = []
        for name, (data, mode) in files.items():
            path = keys_dir / name
            path.write_bytes(data)
            os.chmod(path, mode)
            paths.append(path)
        return paths

    def __repr__(self) -> str:
        return f"VendorKey(secret={'set' if self.secret else 'unset'})"
