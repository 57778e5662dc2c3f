"""
Version-tagged artifact envelope.

Every artifact starts with ``MAGIC``, one length byte and the ASCII version
tag. The body that follows is specific to the version.
"""

from __future__ import annotations

from keylic.common.exceptions import FailureKind, LicenseManagementError

MAGIC = b"KLIC"
MAX_TAG_LEN = 255


def build_header(version: str) -> bytes:
    tag = version.encode("ascii")
    if not 0 < len(tag) <= MAX_TAG_LEN:
        msg = f"Invalid version tag {version!r}"
        raise ValueError(msg)
    return MAGIC + bytes([len(tag)]) + tag


def split_envelope(artifact: bytes) -> tuple[str, bytes, bytes]:
    """Split an artifact into its version tag, header and body.

    Raises:
        LicenseManagementError: with kind CorruptArtifact if the header is
            malformed.
    """
    if not artifact.startswith(MAGIC) or len(artifact) <= len(MAGIC):
        raise LicenseManagementError(
            FailureKind.CORRUPT_ARTIFACT, "Not a license artifact"
        )
    tag_len = artifact[len(MAGIC)]
    header_len = len(MAGIC) + 1 + tag_len
    if tag_len == 0 or len(artifact) < header_len:
        raise LicenseManagementError(
            FailureKind.CORRUPT_ARTIFACT, "Truncated artifact header"
        )
    try:
        tag = artifact[len(MAGIC) + 1 : header_len].decode("ascii")
    except UnicodeDecodeError as err:
        raise LicenseManagementError(
            FailureKind.CORRUPT_ARTIFACT, "Malformed version tag", err
        ) from err
    return tag, artifact[:header_len], artifact[header_len:]
