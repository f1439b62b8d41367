"""Shared fixtures for evm_block_filter tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner
from pytest_metadata.plugin import metadata_key

from evm_block_filter.policy.filter import BlockParityFilter


# ── Report metadata ──────────────────────────────────────────────


def pytest_configure(config):
    """Add filter info to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Filter"] = "EVM block number parity"
    meta["Accepts"] = "even block numbers"


@pytest.fixture
def block_filter():
    """Stateless BlockParityFilter."""
    return BlockParityFilter()


@pytest.fixture
def runner():
    return CliRunner()
