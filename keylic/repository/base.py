"""
Shared encode/decode pipeline of all repository versions.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature
from pydantic import ValidationError

from keylic.common.crypto import CryptoUtils
from keylic.common.exceptions import FailureKind, LicenseManagementError
from keylic.common.models import License
from keylic.repository.envelope import build_header, split_envelope

if TYPE_CHECKING:
    from keylic.common.keys import ConsumerKey, VendorKey

SIGNATURE_LEN = 64
MAX_ARTIFACT_LEN = 64 * 1024


class BaseRepository(ABC):
    """Encodes licenses into authenticated artifacts and back.

    Subclasses define how the signed payload is sealed into the body that
    follows the envelope header, and how it is opened again.
    """

    version: str
    requires_secret: bool = False

    def __init__(self, max_artifact_len: int = MAX_ARTIFACT_LEN) -> None:
        self.max_artifact_len = max_artifact_len
        self.logger = logging.getLogger(__name__)

    def encode(self, license: License, key: VendorKey) -> bytes:
        header = build_header(self.version)
        payload = CryptoUtils.canonical_json(license.model_dump(mode="json"))
        signature = key.private_key.sign(header + payload)
        body = self._seal(header, signature, payload, key)
        self.logger.debug(
            "Encoded %s artifact for %s (%d bytes)",
            self.version,
            license.subject,
            len(header) + len(body),
        )
        return header + body

    def decode(self, artifact: bytes, key: ConsumerKey) -> License:
        if len(artifact) > self.max_artifact_len:
            msg = f"Artifact exceeds {self.max_artifact_len} bytes"
            raise LicenseManagementError(FailureKind.CORRUPT_ARTIFACT, msg)
        tag, header, body = split_envelope(artifact)
        if tag != self.version:
            msg = f"Artifact version {tag!r} is not {self.version!r}"
            raise LicenseManagementError(FailureKind.CORRUPT_ARTIFACT, msg)
        signature, payload = self._open(header, body, key)
        try:
            key.public_key.verify(signature, header + payload)
        except InvalidSignature as err:
            raise LicenseManagementError(
                FailureKind.AUTHENTICATION_FAILED,
                "Artifact signature is invalid",
                err,
            ) from err
        try:
            return License.model_validate_json(payload)
        except ValidationError as err:
            raise LicenseManagementError(
                FailureKind.CORRUPT_ARTIFACT, "Malformed license payload", err
            ) from err

    @abstractmethod
    def _seal(
        self, header: bytes, signature: bytes, payload: bytes, key: VendorKey
    ) -> bytes:
        """Return the artifact body for a signed payload."""

    @abstractmethod
    def _open(
        self, header: bytes, body: bytes, key: ConsumerKey
    ) -> tuple[bytes, bytes]:
        """Return the signature and payload carried by an artifact body."""

    @staticmethod
    def _split_signature(data: bytes) -> tuple[bytes, bytes]:
        if len(data) <= SIGNATURE_LEN:
            raise LicenseManagementError(
                FailureKind.CORRUPT_ARTIFACT, "Truncated artifact body"
            )
        return data[:SIGNATURE_LEN], data[SIGNATURE_LEN:]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(version={self.version!r})"
