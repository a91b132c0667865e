"""
CRL decoder adapter — PEM unwrapping + X.509 CRL extraction.

Adapter layer — turns a partition server's response body into a DecodedCrl using:
  - asn1crypto: PEM armor detection and unarmoring
  - cryptography (PyCA): DER CRL parsing (issuer, update times, revoked entries)

Pipeline:
  response body
    → asn1crypto: pem.detect() → pem.unarmor()   (PEM bodies only)
    → cryptography: x509.load_der_x509_crl()
    → DecodedCrl (domain model)

Partition servers are free to serve either encoding, so the body is first
classified (PEM or DER) and only then handed to the DER parser. The
classification itself is pem.detect(), a plain boolean check. Only when armor
is detected but broken does the fallback ride on an exception: pem.unarmor()
raises, Result.from_computation turns that into a failure, and get_or_else()
swaps in the raw body as DER, which then fails parsing with a PARSE_ERROR.
"""

from __future__ import annotations

import structlog
from asn1crypto import pem
from cryptography import x509
from railway import ErrorCode
from railway.result import Result

from crl_partition.domain.models import CrlEncoding, DecodedCrl, RevokedEntry

log = structlog.get_logger()


def unwrap_pem(body: bytes) -> tuple[CrlEncoding, bytes]:
    """
    Classify a response body and return the DER bytes to parse.

    PEM-armored bodies yield (PEM, payload); anything else, including armor
    whose base64 is broken, yields (DER, body) unchanged.
    """
    if not pem.detect(body):
        return CrlEncoding.DER, body

    return (
        Result.from_computation(
            lambda: pem.unarmor(body),
            ErrorCode.PARSE_ERROR,
            "invalid PEM armor",
        )
        .peek_failure(lambda err: log.debug("crl.pem_fallback", reason=err.message))
        .map(lambda unarmored: (CrlEncoding.PEM, unarmored[2]))
        .get_or_else((CrlEncoding.DER, body))
    )


def _to_revoked_entry(revoked_cert: x509.RevokedCertificate) -> RevokedEntry:
    return RevokedEntry(
        serial_number=revoked_cert.serial_number,
        revocation_date=revoked_cert.revocation_date_utc,
    )


def _load_crl(der_bytes: bytes, encoding: CrlEncoding) -> DecodedCrl:
    """Internal parse; may raise (caught by from_computation in decode_crl)."""
    crl_obj = x509.load_der_x509_crl(der_bytes)
    return DecodedCrl(
        entries=tuple(_to_revoked_entry(revoked_cert) for revoked_cert in crl_obj),
        encoding=encoding,
        issuer=crl_obj.issuer.rfc4514_string(),
        last_update=crl_obj.last_update_utc,
        next_update=crl_obj.next_update_utc,
    )


def decode_crl(body: bytes) -> Result[DecodedCrl]:
    """
    Decode a raw DER or PEM-armored CRL body.

    Returns Result[DecodedCrl] on success.
    Returns Result.failure(PARSE_ERROR, "malformed CRL: ...") when the bytes
    are not a valid X.509 CRL; the decoder's exception is kept on the failure.
    """
    encoding, der_bytes = unwrap_pem(body)
    return Result.from_computation(
        lambda: _load_crl(der_bytes, encoding),
        ErrorCode.PARSE_ERROR,
        "malformed CRL",
    )
