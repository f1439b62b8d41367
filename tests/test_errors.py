"""Failure paths: invalid input, missing field, conversion errors."""

from __future__ import annotations

import json

import pytest

from evm_block_filter.errors import (
    ConversionError,
    FilterError,
    InvalidInputError,
    MissingFieldError,
)
from tests.factories import make_filter_input, make_payload_json


def _assert_failed(result, error_type):
    assert result.accepted is False
    assert not result.determined
    assert isinstance(result.error, error_type)
    assert result.reason == error_type.reason
    assert result.exit_code != 0
    assert result.decision_text == "false"
    assert result.diagnostics[-1] == str(result.error)


# ── InvalidInputError ─────────────────────────────────────────────


@pytest.mark.parametrize("raw", [b"\xff\xfe{", b"\x80", b"", b"  \n"])
def test_undecodable_bytes(block_filter, raw):
    _assert_failed(block_filter.evaluate_json(raw), InvalidInputError)


@pytest.mark.parametrize("raw", ["[" * 100_000, "1" * 5000])
def test_pathological_json(block_filter, raw):
    """Deep nesting and huge int literals are rejected, not raised."""
    _assert_failed(block_filter.evaluate_json(raw), InvalidInputError)


@pytest.mark.parametrize("raw", ["", "   \n", "{not json", "[1, 2]", '"text"', "null"])
def test_unparseable_document(block_filter, raw):
    _assert_failed(block_filter.evaluate_json(raw), InvalidInputError)


@pytest.mark.parametrize("payload", [
    {"args": []},
    {"monitor_match": None, "args": []},
    {"monitor_match": {}, "args": []},
    {"monitor_match": [], "args": []},
    {"monitor_match": "0x64", "args": []},
    {"monitor_match": {"EVM": "0x64"}, "args": []},
    {"monitor_match": {"EVM": {"transaction": ["0x64"]}}, "args": []},
])
def test_malformed_monitor_match(block_filter, payload):
    _assert_failed(block_filter.evaluate_json(json.dumps(payload)), InvalidInputError)


@pytest.mark.parametrize("args", ["--verbose", [1, 2], {"verbose": True}])
def test_malformed_args(block_filter, args):
    raw = json.dumps({"monitor_match": {"EVM": {"transaction": {"blockNumber": "0x64"}}}, "args": args})

    _assert_failed(block_filter.evaluate_json(raw), InvalidInputError)


def test_missing_args_treated_as_empty(block_filter):
    raw = json.dumps({"monitor_match": {"EVM": {"transaction": {"blockNumber": "0x64"}}}})

    result = block_filter.evaluate_json(raw)

    assert result.determined
    assert result.accepted is True


# ── MissingFieldError ─────────────────────────────────────────────


@pytest.mark.parametrize("block_number", [None, ""])
def test_empty_block_number(block_filter, block_number):
    _assert_failed(block_filter.evaluate(make_filter_input(block_number)), MissingFieldError)


@pytest.mark.parametrize("monitor_match", [
    {"Stellar": {"ledger": {"sequence": 100}}},
    {"EVM": {"receipt": {"blockNumber": "0x64"}}},
    {"EVM": {"transaction": {"hash": "0xabc"}}},
])
def test_block_number_absent(block_filter, monitor_match):
    raw = json.dumps({"monitor_match": monitor_match, "args": []})

    _assert_failed(block_filter.evaluate_json(raw), MissingFieldError)


# ── ConversionError ───────────────────────────────────────────────


@pytest.mark.parametrize("block_number", [
    "zzzz", "0x", "   ", "0xg1", "-0x1", "+10", "1_0", "0x0x10", "1 0", "0x 64", 100, True, ["0x64"],
])
def test_not_hex(block_filter, block_number):
    _assert_failed(block_filter.evaluate(make_filter_input(block_number)), ConversionError)


def test_error_keeps_verbose_trace(block_filter):
    result = block_filter.evaluate(make_filter_input("zzzz", ["--verbose"]))

    _assert_failed(result, ConversionError)
    assert result.diagnostics[0] == "Verbose mode enabled"
    assert "Extracted block number (hex): zzzz" in result.diagnostics


def test_errors_share_base_and_exit_code():
    for error_type in (InvalidInputError, MissingFieldError, ConversionError):
        assert issubclass(error_type, FilterError)
        assert error_type.exit_code == 1

