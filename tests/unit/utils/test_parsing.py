"""
Unit tests for utils.parsing module.

Tests:
- partition_connection_strings() splits valid and rejected entries
- parse_connection_strings() logs and skips invalid entries
- Options passed through a ParserConfig
"""

import logging

import pytest

from lnconnect.core import ParserConfig
from lnconnect.models import HostType, ParseFailureCode
from lnconnect.utils.parsing import parse_connection_strings, partition_connection_strings
from tests.conftest import IPV6_COMPRESSED, ONION_V3, PUBKEY_02, PUBKEY_03


VALID = [
    f"{PUBKEY_02}@127.0.0.1:9735",
    f"{PUBKEY_03}@{ONION_V3}:9735",
    f"{PUBKEY_02}@node.example.com",
]


class TestPartition:
    """partition_connection_strings()."""

    def test_all_valid(self) -> None:
        parsed, rejected = partition_connection_strings(VALID)
        assert [p.host_type for p in parsed] == [HostType.IPV4, HostType.TORV3, HostType.DOMAIN]
        assert rejected == []

    def test_mixed_preserves_order(self) -> None:
        values = [VALID[0], "missing-separator", VALID[1], f"{PUBKEY_02}@{IPV6_COMPRESSED}"]
        parsed, rejected = partition_connection_strings(values)

        assert [p.host for p in parsed] == ["127.0.0.1", ONION_V3]
        assert [value for value, _ in rejected] == [values[1], values[3]]
        assert [e.code for _, e in rejected] == [
            ParseFailureCode.INVALID_ATS,
            ParseFailureCode.INVALID_IPV6,
        ]

    def test_accepts_generator(self) -> None:
        parsed, _ = partition_connection_strings(v for v in VALID)
        assert len(parsed) == 3

    def test_empty(self) -> None:
        assert partition_connection_strings([]) == ([], [])

    def test_with_config(self) -> None:
        config = ParserConfig(port_mandatory=True)
        parsed, rejected = partition_connection_strings(VALID, config=config)
        assert len(parsed) == 2
        assert rejected[0][0] == VALID[2]
        assert rejected[0][1].code == ParseFailureCode.INVALID_PORT

    def test_oversized_port_rejected_without_aborting(self) -> None:
        oversized = f"{PUBKEY_02}@127.0.0.1:" + "1" * 5000
        parsed, rejected = partition_connection_strings([VALID[0], oversized, VALID[1]])

        assert [str(p) for p in parsed] == [VALID[0], VALID[1]]
        assert [value for value, _ in rejected] == [oversized]
        assert rejected[0][1].code == ParseFailureCode.INVALID_PORT


class TestParseConnectionStrings:
    """parse_connection_strings()."""

    def test_skips_invalid(self) -> None:
        result = parse_connection_strings([VALID[0], f"{PUBKEY_02}@127.0.0.1:0"])
        assert [str(r) for r in result] == [VALID[0]]

    def test_logs_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="lnconnect.utils.parsing"):
            parse_connection_strings(["bad@127.0.0.1"])

        messages = [r.getMessage() for r in caplog.records if r.name == "lnconnect.utils.parsing"]
        assert len(messages) == 1
        assert "connection_string_rejected" in messages[0]
        assert "code=invalidPubkey" in messages[0]

    def test_logged_input_is_bounded(self, caplog: pytest.LogCaptureFixture) -> None:
        oversized = "x" * 5000
        with caplog.at_level(logging.WARNING, logger="lnconnect.utils.parsing"):
            parse_connection_strings([oversized])

        messages = [r.getMessage() for r in caplog.records if r.name == "lnconnect.utils.parsing"]
        assert len(messages) == 1
        assert "code=invalidAts" in messages[0]
        assert len(messages[0]) < 1100

    def test_no_log_when_all_valid(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="lnconnect.utils.parsing"):
            parse_connection_strings(VALID)
        assert not [r for r in caplog.records if r.name == "lnconnect.utils.parsing"]

    def test_with_config(self) -> None:
        config = ParserConfig(allowed_host_types=frozenset({HostType.TORV3}))
        result = parse_connection_strings(VALID, config=config)
        assert [r.host for r in result] == [ONION_V3]
