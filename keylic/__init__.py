# keylic: license key issuing, installation and verification

from keylic.common.decorators import requires_valid_license
from keylic.common.exceptions import (
    FailureKind,
    LicenseManagementError,
    UncheckedLicenseManagementError,
)
from keylic.common.keys import ConsumerKey, VendorKey
from keylic.common.models import ConsumerParameters, License, VendorParameters
from keylic.common.store import FileStore, MemoryStore
from keylic.consumer import ConsumerLicenseManager, ConsumerState
from keylic.repository import RepositoryContext, RepositoryModel
from keylic.unchecked import unchecked
from keylic.vendor import LicenseKeyGenerator, VendorLicenseManager

__all__ = [
    "ConsumerKey",
    "ConsumerLicenseManager",
    "ConsumerParameters",
    "ConsumerState",
    "FailureKind",
    "FileStore",
    "License",
    "LicenseKeyGenerator",
    "LicenseManagementError",
    "MemoryStore",
    "RepositoryContext",
    "RepositoryModel",
    "UncheckedLicenseManagementError",
    "VendorKey",
    "VendorLicenseManager",
    "VendorParameters",
    "requires_valid_license",
    "unchecked",
]
