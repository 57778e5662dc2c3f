"""
Custom exceptions for the license system.
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Kinds of failure a license management operation can report."""

    INVALID_PAYLOAD = "InvalidPayload"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    CORRUPT_ARTIFACT = "CorruptArtifact"
    STORE_IO_ERROR = "StoreIOError"
    NOT_INSTALLED = "NotInstalled"
    EXPIRED = "Expired"
    NOT_YET_VALID = "NotYetValid"
    CONSUMER_LIMIT_EXCEEDED = "ConsumerLimitExceeded"


class LicenseManagementError(Exception):
    """Exception for every failure of a license management operation."""

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value}: {self.message!r})"


class UncheckedLicenseManagementError(RuntimeError):
    """Exception raised by unchecked managers.

    Wraps the original LicenseManagementError, which stays available as the
    cause together with its kind and message.
    """

    def __init__(self, cause: LicenseManagementError) -> None:
        super().__init__(str(cause))
        self.__cause__ = cause

    @property
    def cause(self) -> LicenseManagementError:
        return self.__cause__  # type: ignore[return-value]

    @property
    def kind(self) -> FailureKind:
        return self.cause.kind
