"""
Consumer license manager: install, view, verify and uninstall one license.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import TYPE_CHECKING

from keylic.common.exceptions import FailureKind, LicenseManagementError
from keylic.common.license_validator import LicenseValidator
from keylic.common.logging_utils import get_logger
from keylic.common.store import MemoryStore
from keylic.repository.context import RepositoryContext

if TYPE_CHECKING:
    from keylic.common.interfaces import Sink, Source, Store
    from keylic.common.models import ConsumerParameters, License


class ConsumerState(str, Enum):
    """Whether a consumer manager currently holds an installed license."""

    UNINSTALLED = "Uninstalled"
    INSTALLED = "Installed"


class ConsumerLicenseManager:
    """Manages the license installed for one consumer application.

    The installed artifact is persisted in ``parameters.store``. Installing
    replaces it atomically: the new artifact is fully decoded and
    authenticated before anything is written, and a failure leaves the
    previous installation untouched. ``view()`` reads the cached license
    without a lock, while ``verify()`` authenticates the stored artifact
    again. ``install()``, ``uninstall()`` and ``verify()`` are serialized on
    the instance lock.
    """

    def __init__(
        self,
        parameters: ConsumerParameters,
        context: RepositoryContext | None = None,
    ) -> None:
        self.parameters = parameters
        self.context = context or RepositoryContext()
        self.store: Store = (
            parameters.store if parameters.store is not None else MemoryStore()
        )
        self.validator = LicenseValidator(parameters.subject)
        self.logger = get_logger(__name__, parameters.log_level)
        self._lock = threading.RLock()
        self._installed: License | None = None

    @property
    def subject(self) -> str:
        return self.parameters.subject

    @property
    def state(self) -> ConsumerState:
        if self._installed is not None or self.store.exists():
            return ConsumerState.INSTALLED
        return ConsumerState.UNINSTALLED

    def install(self, source: Source) -> None:
        """Decode, authenticate and install the artifact read from ``source``.

        Raises:
            LicenseManagementError: with kind AuthenticationFailed,
                CorruptArtifact or StoreIOError.
        """
        artifact = self._read(source)
        try:
            license = self.context.decode(artifact, self.parameters.key)
        except LicenseManagementError as err:
            self.logger.info("Rejected license key: %s", err)
            raise
        with self._lock:
            self._write(self.store, artifact)
            self._installed = license
        self.logger.info(
            "Installed license for %s issued to %s", license.subject, license.holder
        )

    def view(self) -> License:
        """Return the installed license without authenticating it again.

        Raises:
            LicenseManagementError: with kind NotInstalled.
        """
        license = self._installed
        if license is None:
            with self._lock:
                license = self._installed or self._load()
                self._installed = license
        return license

    def verify(self) -> None:
        """Authenticate the stored artifact and check its constraints.

        Raises:
            LicenseManagementError: with kind NotInstalled, StoreIOError,
                AuthenticationFailed, CorruptArtifact, InvalidPayload,
                NotYetValid, Expired or ConsumerLimitExceeded.
        """
        with self._lock:
            if not self.store.exists():
                raise self._not_installed()
            artifact = self._read(self.store)
            try:
                license = self.context.decode(artifact, self.parameters.key)
                self.validator.validate(license)
                self.validator.check_validity(license, self.parameters.clock())
                self.validator.check_consumers(
                    license,
                    self.parameters.consumer_type,
                    self.parameters.consumers(),
                )
            except LicenseManagementError as err:
                self.logger.info("License verification failed: %s", err)
                raise
        self.logger.debug("License for %s verified", license.subject)

    def uninstall(self) -> None:
        """Remove the installed license.

        Raises:
            LicenseManagementError: with kind NotInstalled or StoreIOError.
        """
        with self._lock:
            if self._installed is None and not self.store.exists():
                raise self._not_installed()
            if self.store.exists():
                try:
                    self.store.delete()
                except OSError as err:
                    raise LicenseManagementError(
                        FailureKind.STORE_IO_ERROR,
                        f"Cannot delete license key: {err}",
                        err,
                    ) from err
            self._installed = None
        self.logger.info("Uninstalled license for %s", self.subject)

    def _load(self) -> License:
        """Decode the artifact persisted by an earlier installation."""
        if not self.store.exists():
            raise self._not_installed()
        return self.context.decode(self._read(self.store), self.parameters.key)

    def _not_installed(self) -> LicenseManagementError:
        return LicenseManagementError(
            FailureKind.NOT_INSTALLED, f"No license installed for {self.subject}"
        )

    @staticmethod
    def _read(source: Source) -> bytes:
        try:
            return source.read()
        except OSError as err:
            raise LicenseManagementError(
                FailureKind.STORE_IO_ERROR, f"Cannot read license key: {err}", err
            ) from err

    @staticmethod
    def _write(sink: Sink, artifact: bytes) -> None:
        try:
            sink.write(artifact)
        except OSError as err:
            raise LicenseManagementError(
                FailureKind.STORE_IO_ERROR, f"Cannot write license key: {err}", err
            ) from err
