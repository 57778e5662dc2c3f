from datetime import datetime, timezone

import pytest

from keylic.common.decorators import requires_valid_license
from keylic.common.exceptions import FailureKind, LicenseManagementError
from keylic.common.models import License
from keylic.common.store import MemoryStore


@pytest.fixture
def installed(vendor, consumer):
    store = MemoryStore()
    license = License(
        subject="Widget",
        not_before=datetime(2024, 1, 1),
        not_after=datetime(2025, 1, 1),
    )
    vendor.generator(license).write_to(store)
    consumer.install(store)
    return consumer


def test_runs_with_valid_license(installed) -> None:
    @requires_valid_license(installed)
    def work() -> str:
        return "done"

    assert work() == "done"


def test_raises_without_license(consumer) -> None:
    @requires_valid_license(consumer)
    def work() -> str:
        return "done"

    with pytest.raises(LicenseManagementError) as excinfo:
        work()
    assert excinfo.value.kind is FailureKind.NOT_INSTALLED


def test_returns_none_when_not_raising(installed, clock) -> None:
    calls = []

    @requires_valid_license(installed, raise_exception=False)
    def work() -> str:
        calls.append(1)
        return "done"

    clock.now = datetime(2030, 1, 1, tzinfo=timezone.utc)
    assert work() is None
    assert calls == []


def test_manager_from_callable(installed) -> None:
    @requires_valid_license(lambda: installed)
    def work(value: int) -> int:
        return value * 2

    assert work(21) == 42


def test_manager_from_attribute(installed) -> None:
    class Service:
        def __init__(self, manager) -> None:
            self.license_manager = manager

        @requires_valid_license("license_manager")
        def run(self) -> str:
            return "ran"

    assert Service(installed).run() == "ran"


def test_attribute_requires_self() -> None:
    @requires_valid_license("license_manager")
    def work() -> None:
        return None

    with pytest.raises(ValueError, match="without self"):
        work()
