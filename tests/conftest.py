"""
Shared test fixtures and helpers for the crl-partition test suite.

CRL partitions are generated on the fly with cryptography's
CertificateRevocationListBuilder, signed by a throwaway EC key, so every
test works against a real DER/PEM encoded X.509 CRL.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from datetime import UTC, datetime, timedelta
from typing import TypeAlias

import pytest
import structlog
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

ISSUER_CN = "Test Partition CA"

CrlBuilder: TypeAlias = Callable[..., bytes]


@pytest.fixture(scope="session")
def signing_key() -> ec.EllipticCurvePrivateKey:
    """One EC key for the whole session — key generation is the slow part."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture()
def build_crl(signing_key: ec.EllipticCurvePrivateKey) -> CrlBuilder:
    """
    Return a builder: build_crl([0xab12, ...], pem=False) → encoded CRL bytes.

    Serials are given as ints; each entry gets a distinct revocation date.
    """

    def _build(serials: Iterable[int] = (), pem: bool = False) -> bytes:
        now = datetime.now(UTC).replace(microsecond=0)
        builder = (
            x509.CertificateRevocationListBuilder()
            .issuer_name(x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, ISSUER_CN)]))
            .last_update(now)
            .next_update(now + timedelta(hours=1))
        )
        for offset, serial in enumerate(serials):
            revoked = (
                x509.RevokedCertificateBuilder()
                .serial_number(serial)
                .revocation_date(now - timedelta(minutes=offset + 1))
                .build()
            )
            builder = builder.add_revoked_certificate(revoked)
        crl = builder.sign(private_key=signing_key, algorithm=hashes.SHA256())
        encoding = serialization.Encoding.PEM if pem else serialization.Encoding.DER
        return crl.public_bytes(encoding)

    return _build


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo configure_structlog() so no test logs into another test's captured stream."""
    yield
    structlog.reset_defaults()
