"""
Revocation checker — the ROP pipeline answering "is this serial revoked?".

Domain layer — PURE BUSINESS LOGIC. The only I/O (fetching the partition)
is injected via the CrlFetcher port.

  resolve_partition_url(serial, base_url)
    → fetcher.fetch(target.url)
      → scan entries for target.canonical_serial

Each stage returns Result[T]; the first failure short-circuits the lookup
and reaches the caller with its original error code. "Revoked" is only ever
True on an exact canonical match inside a successfully decoded partition.
"""

from __future__ import annotations

import structlog
from railway.result import Result

from crl_partition.domain.models import DecodedCrl, PartitionTarget, RevokedEntry
from crl_partition.domain.ports import CrlFetcher
from crl_partition.partition import canonical_serial_from_int, resolve_partition_url

log = structlog.get_logger()


def find_revoked_entry(crl: DecodedCrl, canonical: str) -> RevokedEntry | None:
    """
    Linear scan for the first entry whose canonical serial equals `canonical`.

    Order-independent; O(k) in the number of entries of the partition.
    """
    return next(
        (
            entry
            for entry in crl.entries
            if canonical_serial_from_int(entry.serial_number) == canonical
        ),
        None,
    )


def _scan(crl: DecodedCrl, target: PartitionTarget) -> bool:
    entry = find_revoked_entry(crl, target.canonical_serial)
    if entry is None:
        log.info(
            "revocation.checked",
            partition=target.partition_key,
            serial=target.canonical_serial,
            revoked=False,
        )
        return False
    log.info(
        "revocation.checked",
        partition=target.partition_key,
        serial=target.canonical_serial,
        revoked=True,
        revocation_date=entry.revocation_date,
    )
    return True


def _lookup(target: PartitionTarget, fetcher: CrlFetcher) -> Result[bool]:
    """Fetch the target's partition and report whether its serial is listed."""
    return (
        fetcher.fetch(target.url)
        .map_failure(lambda err: err.with_context(f"partition {target.partition_key}"))
        .map(lambda crl: _scan(crl, target))
    )


def is_revoked(serial: str, base_url: str, fetcher: CrlFetcher) -> Result[bool]:
    """
    Check whether `serial` appears on its CRL partition under `base_url`.

    Flow:
      1. Normalize the serial and resolve its partition URL
         (VALIDATION_ERROR on malformed input, before any request)
      2. Fetch and decode the partition through `fetcher`
      3. Compare canonical serials (lowercase hex, no leading zeros)

    Returns Result[bool] with True/False on success, or the failure of the
    first failing stage. Fetch failures are prefixed with the partition key.
    """
    return resolve_partition_url(serial, base_url).flat_map(
        lambda target: _lookup(target, fetcher)
    )
