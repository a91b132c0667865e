"""
Domain models — immutable value objects for partition targets and decoded CRLs.

Every object here is built fresh for a single lookup and thrown away once
the revoked/not-revoked answer is produced. Nothing is persisted or cached.

All models are frozen dataclasses (immutable) following functional principles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, unique


@unique
class CrlEncoding(Enum):
    """How a partition server delivered its CRL body."""

    DER = "DER"
    PEM = "PEM"


@dataclass(frozen=True, slots=True)
class PartitionTarget:
    """
    Where to look for a serial and what to compare it against.

    `partition_key` is the first two characters of `normalized_serial`
    (before leading zeros are stripped), so "0012ab" lives in partition
    "00" while its `canonical_serial` is "12ab".
    """

    url: str
    partition_key: str
    normalized_serial: str
    canonical_serial: str


@dataclass(frozen=True, slots=True)
class RevokedEntry:
    """A single revoked certificate from a decoded CRL partition."""

    serial_number: int
    revocation_date: datetime | None = None


@dataclass(frozen=True, slots=True)
class DecodedCrl:
    """
    The revoked entries of one CRL partition, plus informational metadata.

    `next_update` is carried for display only; freshness is never checked.
    Entry order is whatever the CRL contains and is not relied upon.
    """

    entries: tuple[RevokedEntry, ...] = field(default_factory=tuple)
    encoding: CrlEncoding = CrlEncoding.DER
    issuer: str | None = None
    last_update: datetime | None = None
    next_update: datetime | None = None

    @property
    def revoked_count(self) -> int:
        return len(self.entries)
