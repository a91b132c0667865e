"""
HTTP adapter — CRL partition download via httpx.

Adapter layer — implements the CrlFetcher port using a blocking httpx.Client.

One GET per lookup, no custom headers, the transport's default timeout and
no retries. The client is opened in a `with` block so the connection is
released on every exit path, including a failed decode further down.

Failure mapping:
  - URL httpx cannot parse (httpx.InvalidURL)          → VALIDATION_ERROR
  - request could not complete (DNS, refused, timeout) → SERVICE_UNAVAILABLE_ERROR
  - any other exception while issuing the request      → TECHNICAL_ERROR
  - any status other than 200                          → EXTERNAL_SERVICE_ERROR
  - body is not a DER/PEM CRL                          → PARSE_ERROR (from decode_crl)

A 404 is a failure, never "not revoked": a missing partition says nothing
about the serial.

Fetch failures are logged at info level; reporting them is up to the caller.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import structlog
from railway import ErrorCode, FailureDescription
from railway.result import Result

from crl_partition.adapters.crl_decoder import decode_crl
from crl_partition.domain.models import DecodedCrl

log = structlog.get_logger()


def _require_ok(response: httpx.Response) -> Result[bytes]:
    """Accept only HTTP 200; anything else becomes EXTERNAL_SERVICE_ERROR carrying the status."""
    if response.status_code != httpx.codes.OK:
        return Result.failure(
            ErrorCode.EXTERNAL_SERVICE_ERROR,
            f"failed to fetch CRL: {response.status_code} {response.reason_phrase}",
        )
    return Result.success(response.content)


def _classify_request_failure(err: FailureDescription) -> FailureDescription:
    """Keep request errors as SERVICE_UNAVAILABLE_ERROR; re-tag a bad URL or a local fault."""
    match err.exception:
        case httpx.InvalidURL():
            return FailureDescription(
                ErrorCode.VALIDATION_ERROR, f"invalid CRL URL: {err.exception}", err.exception
            )
        case httpx.RequestError():
            return err
        case _:
            return FailureDescription(
                ErrorCode.TECHNICAL_ERROR, f"unexpected error fetching CRL: {err.exception}", err.exception
            )


class HttpCrlFetcher:
    """
    Download and decode a CRL partition via HTTP GET.

    Implements the CrlFetcher port. Holds no per-request state, so one
    instance may serve any number of lookups, including concurrent ones.
    """

    def __init__(
        self,
        decoder: Callable[[bytes], Result[DecodedCrl]] = decode_crl,
    ) -> None:
        self._decoder = decoder

    def fetch(self, url: str) -> Result[DecodedCrl]:
        """
        GET the partition at `url` and decode the body.

        Returns Result[DecodedCrl] on success, or the failure of the first
        step that went wrong (transport, status, decode).
        """
        return (
            Result.from_computation(
                lambda: self._do_get(url),
                ErrorCode.SERVICE_UNAVAILABLE_ERROR,
                "CRL request failed",
            )
            .map_failure(_classify_request_failure)
            .flat_map(_require_ok)
            .flat_map(self._decoder)
            .peek(
                lambda crl: log.info(
                    "crl.fetched",
                    url=url,
                    encoding=crl.encoding.value,
                    revoked=crl.revoked_count,
                    issuer=crl.issuer,
                    last_update=crl.last_update,
                    next_update=crl.next_update,
                )
            )
            .peek_failure(
                lambda err: log.info("crl.fetch_failed", url=url, error=err.message)
            )
        )

    def _do_get(self, url: str) -> httpx.Response:
        """HTTP GET, body fully read before the client closes. Exceptions caught by from_computation."""
        with httpx.Client(follow_redirects=True) as client:
            response = client.get(url)
            log.debug(
                "crl.response",
                url=url,
                status=response.status_code,
                size_bytes=len(response.content),
            )
            return response
