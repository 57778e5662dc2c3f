"""
Configuration settings for the license management system.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from keylic.common.keys import (
    PRIVATE_KEY_FILE,
    PUBLIC_KEY_FILE,
    SECRET_FILE,
    ConsumerKey,
    VendorKey,
)


class Config:
    """Central configuration class for all system settings."""

    def __init__(self) -> None:
        # Artifact settings
        self.REPOSITORY_VERSION: str = os.getenv("KEYLIC_REPOSITORY_VERSION", "v2")

        # License defaults applied by the vendor
        self.SUBJECT: str | None = os.getenv("KEYLIC_SUBJECT")
        self.DEFAULT_CONSUMER_TYPE: str = "User"

        # File paths
        self.BASE_DIR: Path = Path(__file__).parent.parent
        self.DATA_DIR: Path = self.BASE_DIR / "data"
        self.KEYS_DIR: Path = Path(
            os.getenv("KEYLIC_KEYS_DIR", str(self.BASE_DIR / "keys"))
        )
        self.VENDOR_PRIVATE_KEY_PATH: Path = self.KEYS_DIR / PRIVATE_KEY_FILE
        self.VENDOR_PUBLIC_KEY_PATH: Path = self.KEYS_DIR / PUBLIC_KEY_FILE
        self.SECRET_PATH: Path = self.KEYS_DIR / SECRET_FILE
        self.LICENSE_KEY_PATH: Path = Path(
            os.getenv("KEYLIC_LICENSE_KEY_PATH", str(self.DATA_DIR / "license.key"))
        )

        # Logging
        self.LOG_LEVEL: int = logging.INFO

    def get_secret(self) -> bytes | None:
        """Return the shared artifact secret from the environment or key dir."""
        secret = os.getenv("KEYLIC_SECRET")
        if secret:
            return secret.encode()
        try:
            return self.SECRET_PATH.read_bytes().strip() or None
        except FileNotFoundError:
            return None

    def get_vendor_key(self) -> VendorKey:
        """Load the vendor private key and secret from files."""
        try:
            data = self.VENDOR_PRIVATE_KEY_PATH.read_bytes()
        except FileNotFoundError as err:
            msg = (
                f"Vendor key not found at {self.VENDOR_PRIVATE_KEY_PATH}. "
                "Run 'keylic keygen' to generate it."
            )
            raise ValueError(msg) from err
        return VendorKey.from_pem(data, self.get_secret())

    def get_consumer_key(self) -> ConsumerKey:
        """Load the vendor public key and secret from files."""
        try:
            data = self.VENDOR_PUBLIC_KEY_PATH.read_bytes()
        except FileNotFoundError as err:
            msg = (
                f"Vendor public key not found at {self.VENDOR_PUBLIC_KEY_PATH}. "
                "Run 'keylic keygen' to generate it."
            )
            raise ValueError(msg) from err
        return ConsumerKey.from_pem(data, self.get_secret())
