"""
Pydantic models for licenses and manager parameters.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from keylic.common.keys import ConsumerKey, VendorKey


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class License(BaseModel):
    """The license payload. Instances are immutable."""

    model_config = ConfigDict(frozen=True)

    subject: str
    issuer: str | None = None
    holder: str | None = None
    issued: datetime | None = None
    not_before: datetime | None = None
    not_after: datetime | None = None
    consumer_type: str | None = None
    consumer_amount: int = 1
    info: str | None = None
    extra: dict[str, str] = Field(default_factory=dict)

    @field_validator("issued", "not_before", "not_after")
    @classmethod
    def _normalize_datetime(cls, value: datetime | None) -> datetime | None:
        return None if value is None else as_utc(value)


class VendorParameters(BaseModel):
    """Construction parameters of a vendor license manager."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    subject: str
    key: VendorKey
    version: str = "v2"
    clock: Callable[[], datetime] = utcnow
    log_level: int | None = None


class ConsumerParameters(BaseModel):
    """Construction parameters of a consumer license manager.

    ``store`` holds the installed artifact; it defaults to a fresh
    MemoryStore. ``consumers`` reports how many consumers of
    ``consumer_type`` currently use the product.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    subject: str
    key: ConsumerKey
    store: Any = None
    consumer_type: str = "User"
    consumers: Callable[[], int] = lambda: 1
    clock: Callable[[], datetime] = utcnow
    log_level: int | None = None
