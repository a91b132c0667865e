"""
Application entry point — wires dependencies and runs one revocation lookup.

Composition root: creates the concrete HTTP fetcher and injects it into the
revocation checker. This is the ONLY place where concrete adapters are
instantiated; everything else depends on the CrlFetcher protocol.

Responsibilities:
  1. Validate the command line (exactly two positional arguments)
  2. Load and validate configuration from environment
  3. Configure structlog (always to stderr, so stdout carries only the answer)
  4. Run the lookup and map the Result to output + exit status

    crl-partition <baseCRLURL> <serial>

  exit 0 → "certificate is revoked" / "certificate is not revoked" on stdout
  exit 1 → "error: <message>" on stderr (usage, configuration or lookup failure)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

import structlog
from railway import ErrorCode, FailureDescription
from railway.result import Result

from crl_partition.adapters.http_client import HttpCrlFetcher
from crl_partition.config import AppSettings
from crl_partition.revocation import is_revoked

USAGE = "usage: crl-partition <baseCRLURL> <serial>"
REVOKED_MESSAGE = "certificate is revoked"
NOT_REVOKED_MESSAGE = "certificate is not revoked"


def configure_structlog(log_level: str = "WARNING", json_logs: bool = False) -> None:
    """
    Configure structlog for structured logging on stderr.

    json_logs=True: JSON lines (machine-readable).
    json_logs=False: human-readable console output.
    Unknown level names fall back to WARNING.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def check_revocation(serial: str, base_url: str) -> Result[bool]:
    """
    Inbound contract: is `serial` revoked according to the partitioned CRL at `base_url`?

    Wires the default HttpCrlFetcher into the revocation checker.
    """
    return is_revoked(serial, base_url, HttpCrlFetcher())


def load_settings() -> Result[AppSettings]:
    """Read AppSettings from the environment; invalid values become CONFIGURATION_ERROR."""
    return Result.from_computation(
        AppSettings, ErrorCode.CONFIGURATION_ERROR, "configuration error"
    )


def _configure_from(settings: AppSettings) -> None:
    configure_structlog(settings.log_level, settings.json_logs)


def _report_answer(revoked: bool) -> int:
    print(REVOKED_MESSAGE if revoked else NOT_REVOKED_MESSAGE)  # noqa: T201
    return 0


def _report_failure(error: FailureDescription) -> int:
    print(f"error: {error.message}", file=sys.stderr)  # noqa: T201
    return 1


def run(argv: Sequence[str]) -> int:
    """Execute the CLI against `argv` (without the program name) and return the exit status."""
    if len(argv) != 2:
        print(f"error: {USAGE}", file=sys.stderr)  # noqa: T201
        return 1

    base_url, serial = argv
    return (
        load_settings()
        .peek(_configure_from)
        .peek(
            lambda _: structlog.get_logger().debug(
                "app.lookup", base_url=base_url, serial=serial
            )
        )
        .flat_map(lambda _: check_revocation(serial, base_url))
        .either(
            on_success=_report_answer,
            on_failure=_report_failure,
        )
    )


def main() -> None:
    """Console-script entry point."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
