"""
Ports — Protocol-based interfaces for infrastructure adapters.

The revocation checker only needs one thing from the outside world: a way
to turn a partition URL into a decoded CRL. Following hexagonal architecture:

  Domain ← Ports (protocols) ← Adapters (implementations)

Adapters satisfy the contract structurally by implementing the method,
so tests can pass any object with a matching `fetch`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from railway.result import Result

from crl_partition.domain.models import DecodedCrl


@runtime_checkable
class CrlFetcher(Protocol):
    """
    Port: retrieve and decode the CRL published at a partition URL.

    Failure codes the checker expects to see propagated:
      - SERVICE_UNAVAILABLE_ERROR → request could not complete
      - EXTERNAL_SERVICE_ERROR    → server answered with a non-200 status
      - PARSE_ERROR               → body is not a DER or PEM encoded CRL
    """

    def fetch(self, url: str) -> Result[DecodedCrl]: ...
