# Consumer side: installing and verifying license keys
from keylic.consumer.manager import ConsumerLicenseManager, ConsumerState

__all__ = ["ConsumerLicenseManager", "ConsumerState"]
