"""
Partition resolver — maps a serial number to the CRL partition that covers it.

Domain layer — PURE. No I/O; every call is a function of its arguments.

Serials arrive as hex strings in any case, with or without a "0x" prefix
and with any number of leading zeros. Two forms are derived:

  normalized  "0x00AB12" → "00ab12"   (prefix removed, lowercased)
  canonical   "00ab12"   → "ab12"     (leading zeros removed, for comparison)

The partition key is the first two characters of the NORMALIZED form,
so leading zeros still count when routing: "0012ab" is looked up in
partition "00" and compared as "12ab". Partitions are keyed by the raw
leading byte of the serial as written.
"""

from __future__ import annotations

import string

import structlog
from railway import ErrorCode
from railway.result import Result

from crl_partition.domain.models import PartitionTarget

log = structlog.get_logger()

PARTITION_KEY_LENGTH = 2
_HEX_DIGITS = frozenset(string.hexdigits.lower())


def normalize_serial(serial: str) -> str:
    """Lowercase the serial and drop one leading "0x" (surrounding whitespace is ignored)."""
    return serial.strip().lower().removeprefix("0x")


def canonical_serial(normalized: str) -> str:
    """
    Strip leading zeros from a normalized serial.

    An all-zero serial canonicalizes to "", a valid degenerate form that
    compares equal to the canonical form of a revoked entry with serial 0.
    """
    return normalized.lstrip("0")


def canonical_serial_from_int(serial_number: int) -> str:
    """Render a CRL entry's integer serial in canonical form (lowercase hex, no leading zeros)."""
    return canonical_serial(format(serial_number, "x"))


def partition_url(base_url: str, partition_key: str) -> str:
    """Build "{base_url without trailing slashes}/{partition_key}.crl"."""
    return f"{base_url.rstrip('/')}/{partition_key}.crl"


def _is_hex(value: str) -> bool:
    return all(ch in _HEX_DIGITS for ch in value)


def resolve_partition_url(serial: str, base_url: str) -> Result[PartitionTarget]:
    """
    Resolve the partition URL for a serial number.

    Returns Result[PartitionTarget] on success, or
    Result.failure(VALIDATION_ERROR, ...) when the normalized serial is
    shorter than two characters ("serial too short") or contains anything
    other than hex digits. Both checks happen before any network call.
    """
    return (
        Result.success(normalize_serial(serial))
        .ensure(
            lambda normalized: len(normalized) >= PARTITION_KEY_LENGTH,
            ErrorCode.VALIDATION_ERROR,
            "serial too short",
        )
        .ensure(
            _is_hex,
            ErrorCode.VALIDATION_ERROR,
            f"serial is not a hexadecimal number: {serial!r}",
        )
        .map(lambda normalized: _build_target(normalized, base_url))
        .peek(
            lambda target: log.debug(
                "partition.resolved",
                partition=target.partition_key,
                url=target.url,
            )
        )
    )


def _build_target(normalized: str, base_url: str) -> PartitionTarget:
    key = normalized[:PARTITION_KEY_LENGTH]
    return PartitionTarget(
        url=partition_url(base_url, key),
        partition_key=key,
        normalized_serial=normalized,
        canonical_serial=canonical_serial(normalized),
    )
