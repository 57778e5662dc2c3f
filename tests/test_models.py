from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from keylic.common.keys import VendorKey
from keylic.common.models import (
    ConsumerParameters,
    License,
    VendorParameters,
    as_utc,
)


def test_license_defaults() -> None:
    lic = License(subject="Widget")
    assert lic.subject == "Widget"
    assert lic.issuer is None
    assert lic.holder is None
    assert lic.issued is None
    assert lic.consumer_type is None
    assert lic.consumer_amount == 1
    assert lic.extra == {}


def test_license_is_immutable() -> None:
    lic = License(subject="Widget")
    with pytest.raises(ValidationError):
        lic.subject = "Gadget"  # type: ignore[misc]


def test_license_naive_datetimes_are_utc() -> None:
    lic = License(subject="Widget", not_before=datetime(2024, 1, 1))
    assert lic.not_before == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert lic.not_before.utcoffset() == timedelta(0)


def test_license_aware_datetimes_are_converted() -> None:
    cet = timezone(timedelta(hours=1))
    lic = License(subject="Widget", not_after=datetime(2025, 1, 1, 1, tzinfo=cet))
    assert lic.not_after == datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert lic.not_after.tzinfo == timezone.utc


def test_license_requires_subject() -> None:
    with pytest.raises(ValidationError):
        License()  # type: ignore[call-arg]


def test_as_utc() -> None:
    assert as_utc(datetime(2024, 1, 1)).tzinfo == timezone.utc


def test_vendor_parameters_defaults() -> None:
    key = VendorKey.generate(b"secret")
    params = VendorParameters(subject="Widget", key=key)
    assert params.version == "v2"
    assert params.log_level is None
    assert params.clock().tzinfo is not None


def test_consumer_parameters_reject_wrong_key_type() -> None:
    key = VendorKey.generate(b"secret")
    with pytest.raises(ValidationError):
        ConsumerParameters(subject="Widget", key=key)  # type: ignore[arg-type]


def test_consumer_parameters_defaults() -> None:
    key = VendorKey.generate(b"secret").consumer_key()
    params = ConsumerParameters(subject="Widget", key=key)
    assert params.store is None
    assert params.consumer_type == "User"
    assert params.consumers() == 1
