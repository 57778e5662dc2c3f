"""
License validation utilities.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from keylic.common.exceptions import FailureKind, LicenseManagementError
from keylic.common.models import as_utc

if TYPE_CHECKING:
    from datetime import datetime

    from keylic.common.models import License


class LicenseValidator:
    """Checks licenses against structural and business constraints."""

    def __init__(self, subject: str) -> None:
        self.subject = subject
        self.logger = logging.getLogger(__name__)

    def validate(self, lic: License) -> None:
        """Check the structure of a license.

        Raises:
            LicenseManagementError: with kind InvalidPayload.
        """
        if not lic.subject:
            self._invalid("License subject is empty")
        if lic.subject != self.subject:
            self._invalid(
                f"License subject {lic.subject!r} does not match {self.subject!r}"
            )
        if lic.consumer_amount < 1:
            self._invalid(f"Consumer amount {lic.consumer_amount} is less than one")
        if lic.consumer_type is not None and not lic.consumer_type:
            self._invalid("Consumer type is empty")
        if (
            lic.not_before is not None
            and lic.not_after is not None
            and lic.not_before > lic.not_after
        ):
            self._invalid(
                f"Validity window is inverted: {lic.not_before.isoformat()} "
                f"is after {lic.not_after.isoformat()}"
            )

    def check_validity(self, lic: License, now: datetime) -> None:
        """Check the validity window of a license against ``now``."""
        now = as_utc(now)
        self.logger.debug(
            "License %s times: not_before=%s, not_after=%s, now=%s",
            lic.subject,
            lic.not_before,
            lic.not_after,
            now,
        )
        if lic.not_before is not None and now < lic.not_before:
            msg = f"License is not valid before {lic.not_before.isoformat()}"
            raise LicenseManagementError(FailureKind.NOT_YET_VALID, msg)
        if lic.not_after is not None and now > lic.not_after:
            msg = f"License expired at {lic.not_after.isoformat()}"
            raise LicenseManagementError(FailureKind.EXPIRED, msg)

    def check_consumers(self, lic: License, consumer_type: str, consumers: int) -> None:
        """Check the consumer type and count limit of a license."""
        if lic.consumer_type is not None and lic.consumer_type != consumer_type:
            msg = (
                f"License is for consumer type {lic.consumer_type!r}, "
                f"not {consumer_type!r}"
            )
            raise LicenseManagementError(FailureKind.CONSUMER_LIMIT_EXCEEDED, msg)
        if consumers > lic.consumer_amount:
            msg = (
                f"{consumers} consumers exceed the licensed amount of "
                f"{lic.consumer_amount}"
            )
            raise LicenseManagementError(FailureKind.CONSUMER_LIMIT_EXCEEDED, msg)

    def _invalid(self, message: str) -> None:
        raise LicenseManagementError(FailureKind.INVALID_PAYLOAD, message)
