from __future__ import annotations

from datetime import datetime, timezone

import pytest

from keylic.common.keys import VendorKey
from keylic.common.models import ConsumerParameters, VendorParameters
from keylic.consumer.manager import ConsumerLicenseManager
from keylic.vendor.manager import VendorLicenseManager

SUBJECT = "Widget"


class FixedClock:
    """Simulated clock returning a settable instant."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def vendor_key() -> VendorKey:
    return VendorKey.generate(secret=b"test-secret")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 6, 1, tzinfo=timezone.utc))


@pytest.fixture
def vendor(vendor_key: VendorKey, clock: FixedClock) -> VendorLicenseManager:
    return VendorLicenseManager(
        VendorParameters(subject=SUBJECT, key=vendor_key, clock=clock)
    )


@pytest.fixture
def consumer(vendor_key: VendorKey, clock: FixedClock) -> ConsumerLicenseManager:
    return ConsumerLicenseManager(
        ConsumerParameters(
            subject=SUBJECT, key=vendor_key.consumer_key(), clock=clock
        )
    )
