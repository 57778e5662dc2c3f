"""
Version 2 artifacts: the signed payload sealed with ChaCha20Poly1305.

Body layout is ``nonce || ciphertext`` where the ciphertext covers
``signature || payload`` and the envelope header is bound as associated
data. The nonce is synthesized from the plaintext, so encoding the same
license with the same key always yields the same artifact.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from keylic.common.crypto import NONCE_LEN, CryptoUtils
from keylic.common.exceptions import FailureKind, LicenseManagementError
from keylic.repository.base import BaseRepository

if TYPE_CHECKING:
    from keylic.common.keys import ConsumerKey, VendorKey

TAG_LEN = 16


class V2Repository(BaseRepository):
    """Signature plus encryption repository. Requires a shared secret."""

    version = "v2"
    requires_secret = True

    def _seal(
        self, header: bytes, signature: bytes, payload: bytes, key: VendorKey
    ) -> bytes:
        if not key.secret:
            msg = f"Repository {self.version} requires a vendor secret"
            raise ValueError(msg)
        aead_key = CryptoUtils.derive_artifact_key(key.secret, self.version)
        plaintext = signature + payload
        nonce = CryptoUtils.synthetic_nonce(aead_key, header + plaintext)
        return nonce + ChaCha20Poly1305(aead_key).encrypt(nonce, plaintext, header)

    def _open(
        self, header: bytes, body: bytes, key: ConsumerKey
    ) -> tuple[bytes, bytes]:
        if not key.secret:
            raise LicenseManagementError(
                FailureKind.AUTHENTICATION_FAILED,
                f"Repository {self.version} requires a consumer secret",
            )
        if len(body) < NONCE_LEN + TAG_LEN:
            raise LicenseManagementError(
                FailureKind.CORRUPT_ARTIFACT, "Truncated artifact body"
            )
        aead_key = CryptoUtils.derive_artifact_key(key.secret, self.version)
        nonce, ciphertext = body[:NONCE_LEN], body[NONCE_LEN:]
        try:
            plaintext = ChaCha20Poly1305(aead_key).decrypt(nonce, ciphertext, header)
        except InvalidTag as err:
            raise LicenseManagementError(
                FailureKind.AUTHENTICATION_FAILED,
                "Artifact failed authenticated decryption",
                err,
            ) from err
        return self._split_signature(plaintext)
