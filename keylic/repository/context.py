"""
Resolution of artifact format versions to repositories.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from keylic.common.exceptions import FailureKind, LicenseManagementError
from keylic.repository.envelope import split_envelope
from keylic.repository.v1 import V1Repository
from keylic.repository.v2 import V2Repository

if TYPE_CHECKING:
    from keylic.common.interfaces import Repository
    from keylic.common.keys import ConsumerKey
    from keylic.common.models import License

logger = logging.getLogger(__name__)


class RepositoryModel(str, Enum):
    """Built-in artifact format versions."""

    V1 = "v1"  # Ed25519 signature
    V2 = "v2"  # Ed25519 signature sealed with ChaCha20Poly1305


class RepositoryContext:
    """Registry of repositories keyed by version tag.

    Decoding dispatches on the tag stored in the artifact itself, so every
    registered version stays readable regardless of which version a
    manager writes.
    """

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], Repository]] = {
            RepositoryModel.V1.value: V1Repository,
            RepositoryModel.V2.value: V2Repository,
        }

    def register(self, version: str, factory: Callable[[], Repository]) -> None:
        if version in self._factories:
            msg = f"Repository version {version!r} is already registered"
            raise ValueError(msg)
        self._factories[version] = factory

    @property
    def versions(self) -> list[str]:
        return sorted(self._factories)

    def for_version(self, version: str | RepositoryModel) -> Repository:
        """Return the repository for a version tag.

        Raises:
            ValueError: if the version is not registered.
        """
        tag = version.value if isinstance(version, RepositoryModel) else version
        try:
            factory = self._factories[tag]
        except KeyError:
            msg = f"Unsupported repository version {tag!r}"
            raise ValueError(msg) from None
        return factory()

    def decode(self, artifact: bytes, key: ConsumerKey) -> License:
        """Decode and authenticate an artifact of any registered version."""
        tag, _, _ = split_envelope(artifact)
        if tag not in self._factories:
            msg = f"Unsupported artifact version {tag!r}"
            raise LicenseManagementError(FailureKind.CORRUPT_ARTIFACT, msg)
        logger.debug("Decoding %s artifact", tag)
        return self.for_version(tag).decode(artifact, key)
