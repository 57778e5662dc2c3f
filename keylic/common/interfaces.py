"""
Interfaces and protocols for the license managers and their collaborators.
"""

from __future__ import annotations

from typing import Protocol

from keylic.common.keys import ConsumerKey, VendorKey
from keylic.common.models import License


class Source(Protocol):
    """Read-only byte channel. Raises OSError on failure."""

    def read(self) -> bytes: ...


class Sink(Protocol):
    """Write-only byte channel. Raises OSError on failure."""

    def write(self, data: bytes) -> None: ...


class Store(Source, Sink, Protocol):
    """Readable and writable byte channel that can be cleared."""

    def exists(self) -> bool: ...

    def delete(self) -> None: ...


class Repository(Protocol):
    """Codec and authentication scheme for one artifact format version."""

    version: str

    def encode(self, license: License, key: VendorKey) -> bytes: ...

    def decode(self, artifact: bytes, key: ConsumerKey) -> License: ...


class LicenseKeyGenerator(Protocol):
    """Generates artifacts for one bound license."""

    @property
    def license(self) -> License: ...

    def write_to(self, sink: Sink) -> None: ...


class VendorManager(Protocol):
    """Issues license artifacts."""

    @property
    def subject(self) -> str: ...

    def generator(self, license: License) -> LicenseKeyGenerator: ...


class ConsumerManager(Protocol):
    """Installs, views, verifies and uninstalls one license artifact."""

    @property
    def subject(self) -> str: ...

    def install(self, source: Source) -> None: ...

    def view(self) -> License: ...

    def verify(self) -> None: ...

    def uninstall(self) -> None: ...
