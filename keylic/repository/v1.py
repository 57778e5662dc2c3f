"""
Version 1 artifacts: Ed25519 signature followed by the plain payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from keylic.repository.base import BaseRepository

if TYPE_CHECKING:
    from keylic.common.keys import ConsumerKey, VendorKey


class V1Repository(BaseRepository):
    """Signature-only repository. The payload is readable but tamper-proof."""

    version = "v1"

    def _seal(
        self, header: bytes, signature: bytes, payload: bytes, key: VendorKey
    ) -> bytes:
        return signature + payload

    def _open(
        self, header: bytes, body: bytes, key: ConsumerKey
    ) -> tuple[bytes, bytes]:
        return self._split_signature(body)
