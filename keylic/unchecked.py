"""
Unchecked license managers.

The wrappers expose the same operations as the managers they wrap, but
translate every LicenseManagementError into an
UncheckedLicenseManagementError whose cause is the original error.
Successful results are passed through unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Union, overload

from keylic.common.exceptions import (
    LicenseManagementError,
    UncheckedLicenseManagementError,
)

if TYPE_CHECKING:
    from keylic.common.interfaces import (
        ConsumerManager,
        LicenseKeyGenerator,
        Sink,
        Source,
        VendorManager,
    )
    from keylic.common.models import License


@contextmanager
def _unchecked() -> Iterator[None]:
    try:
        yield
    except LicenseManagementError as err:
        raise UncheckedLicenseManagementError(err) from err


class UncheckedLicenseKeyGenerator:
    """License key generator raising only unchecked errors."""

    def __init__(self, checked: LicenseKeyGenerator) -> None:
        self._checked = checked

    @property
    def checked(self) -> LicenseKeyGenerator:
        return self._checked

    @property
    def license(self) -> License:
        with _unchecked():
            return self._checked.license

    def write_to(self, sink: Sink) -> None:
        with _unchecked():
            self._checked.write_to(sink)


class UncheckedVendorManager:
    """Vendor manager raising only unchecked errors.

    Generators it returns are unchecked as well.
    """

    def __init__(self, checked: VendorManager) -> None:
        self._checked = checked

    @property
    def checked(self) -> VendorManager:
        return self._checked

    @property
    def subject(self) -> str:
        return self._checked.subject

    def generator(self, license: License) -> UncheckedLicenseKeyGenerator:
        with _unchecked():
            return UncheckedLicenseKeyGenerator(self._checked.generator(license))


class UncheckedConsumerManager:
    """Consumer manager raising only unchecked errors."""

    def __init__(self, checked: ConsumerManager) -> None:
        self._checked = checked

    @property
    def checked(self) -> ConsumerManager:
        return self._checked

    @property
    def subject(self) -> str:
        return self._checked.subject

    def install(self, source: Source) -> None:
        with _unchecked():
            self._checked.install(source)

    def view(self) -> License:
        with _unchecked():
            return self._checked.view()

    def verify(self) -> None:
        with _unchecked():
            self._checked.verify()

    def uninstall(self) -> None:
        with _unchecked():
            self._checked.uninstall()


Unchecked = Union[
    UncheckedVendorManager, UncheckedConsumerManager, UncheckedLicenseKeyGenerator
]


@overload
def unchecked(checked: VendorManager) -> UncheckedVendorManager: ...


@overload
def unchecked(checked: ConsumerManager) -> UncheckedConsumerManager: ...


@overload
def unchecked(checked: LicenseKeyGenerator) -> UncheckedLicenseKeyGenerator: ...


def unchecked(checked: Any) -> Unchecked:
    """Wrap a vendor manager, consumer manager or generator."""
    if hasattr(checked, "install"):
        return UncheckedConsumerManager(checked)
    if hasattr(checked, "generator"):
        return UncheckedVendorManager(checked)
    if hasattr(checked, "write_to"):
        return UncheckedLicenseKeyGenerator(checked)
    msg = f"Cannot wrap {type(checked).__name__} as an unchecked manager"
    raise TypeError(msg)
