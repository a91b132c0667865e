"""
Unit tests for the partition resolver — serial normalization and URL derivation.

The resolver is pure: no fixtures, no network, only inputs and Results.

Test categories:
  - Normalization: case, "0x" prefix, whitespace
  - Canonical form: leading zeros, the all-zero serial
  - URL derivation: trailing slashes, partition key before zero stripping
  - Rejection: too short, non-hex
"""

from __future__ import annotations

import pytest
from railway import ErrorCode, ResultAssertions

from crl_partition.partition import (
    canonical_serial,
    canonical_serial_from_int,
    normalize_serial,
    partition_url,
    resolve_partition_url,
)

BASE_URL = "http://x/crls"


class TestNormalizeSerial:
    """
    GIVEN a serial in any accepted spelling
    WHEN normalize_serial is called
    THEN it returns the lowercase digits without "0x".
    """

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("AB12", "ab12"),
            ("ab12", "ab12"),
            ("0xab12", "ab12"),
            ("0XAB12", "ab12"),
            ("  0x00AB12 \n", "00ab12"),
        ],
    )
    def test_normalizes_case_and_prefix(self, raw: str, expected: str) -> None:
        assert normalize_serial(raw) == expected

    def test_strips_prefix_only_once(self) -> None:
        """
        GIVEN "0x0x12"
        WHEN normalized
        THEN only the first "0x" is removed.
        """
        assert normalize_serial("0x0x12") == "0x12"


class TestCanonicalSerial:
    """Canonical form drops leading zeros; zero itself becomes the empty string."""

    def test_strips_leading_zeros(self) -> None:
        assert canonical_serial("00ab12") == "ab12"

    def test_all_zero_serial_is_empty(self) -> None:
        assert canonical_serial("0000") == ""

    def test_int_rendering_matches_string_form(self) -> None:
        assert canonical_serial_from_int(0x00AB12) == "ab12"

    def test_int_zero_is_empty(self) -> None:
        assert canonical_serial_from_int(0) == ""

    def test_large_serial_round_trips(self) -> None:
        """
        GIVEN a 20-byte serial (the RFC 5280 maximum)
        WHEN rendered from its integer value
        THEN every hex digit is kept.
        """
        serial = "7f" + "e3" * 19
        assert canonical_serial_from_int(int(serial, 16)) == serial


class TestPartitionUrl:
    """URL = base without trailing slashes + "/" + key + ".crl"."""

    @pytest.mark.parametrize(
        "base",
        ["http://x/crls", "http://x/crls/", "http://x/crls///"],
    )
    def test_trims_trailing_slashes(self, base: str) -> None:
        assert partition_url(base, "ab") == "http://x/crls/ab.crl"


class TestResolvePartitionUrl:
    """
    GIVEN a serial and a base URL
    WHEN resolve_partition_url is called
    THEN it returns the partition target or a VALIDATION_ERROR.
    """

    @pytest.mark.parametrize("serial", ["AB12", "ab12", "0xab12", "0XAb12"])
    def test_spellings_resolve_to_same_partition(self, serial: str) -> None:
        """
        GIVEN the same serial spelled with different case and prefix
        WHEN resolved
        THEN all map to .../ab.crl with canonical serial "ab12".
        """
        target = ResultAssertions.assert_success(resolve_partition_url(serial, BASE_URL))
        assert target.url == "http://x/crls/ab.crl"
        assert target.partition_key == "ab"
        assert target.canonical_serial == "ab12"

    def test_partition_key_taken_before_zero_stripping(self) -> None:
        """
        GIVEN "0012ab"
        WHEN resolved
        THEN the partition is "00" while the comparison form is "12ab".
        """
        target = ResultAssertions.assert_success(resolve_partition_url("0012ab", BASE_URL))
        assert target.partition_key == "00"
        assert target.url == "http://x/crls/00.crl"
        assert target.normalized_serial == "0012ab"
        assert target.canonical_serial == "12ab"

    def test_all_zero_serial_is_valid(self) -> None:
        """
        GIVEN "0x00"
        WHEN resolved
        THEN it routes to partition "00" with an empty canonical serial.
        """
        target = ResultAssertions.assert_success(resolve_partition_url("0x00", BASE_URL))
        assert target.partition_key == "00"
        assert target.canonical_serial == ""

    @pytest.mark.parametrize("serial", ["a", "", "0x", "0xa", "  "])
    def test_short_serial_is_rejected(self, serial: str) -> None:
        result = resolve_partition_url(serial, BASE_URL)
        ResultAssertions.assert_failure(result, ErrorCode.VALIDATION_ERROR)
        ResultAssertions.assert_failure_message_contains(result, "serial too short")

    @pytest.mark.parametrize("serial", ["zz12", "ab-12", "0xg1", "ab 12"])
    def test_non_hex_serial_is_rejected(self, serial: str) -> None:
        result = resolve_partition_url(serial, BASE_URL)
        ResultAssertions.assert_failure(result, ErrorCode.VALIDATION_ERROR)
        ResultAssertions.assert_failure_message_contains(result, "hexadecimal")

    def test_length_is_checked_before_hex(self) -> None:
        """
        GIVEN "z" (short and non-hex)
        WHEN resolved
        THEN the too-short failure wins.
        """
        result = resolve_partition_url("z", BASE_URL)
        ResultAssertions.assert_failure_message_contains(result, "serial too short")
