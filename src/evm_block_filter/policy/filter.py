"""Block parity filter - propagates matches from even-numbered blocks only."""

from __future__ import annotations

import logging
import re
from typing import Any

from evm_block_filter.config import parse_args
from evm_block_filter.errors import (
    ConversionError,
    FilterError,
    InvalidInputError,
    MissingFieldError,
)
from evm_block_filter.models.events import FilterInput
from evm_block_filter.models.records import FilterResult

log = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def extract_block_number(monitor_match: Any) -> str:
    """Pull ``EVM.transaction.blockNumber`` out of a monitor match."""
    if not monitor_match or not isinstance(monitor_match, dict):
        raise InvalidInputError("No monitor_match provided")

    evm = monitor_match.get("EVM")
    if evm is None:
        raise MissingFieldError("Monitor match has no EVM data")
    if not isinstance(evm, dict):
        raise InvalidInputError("monitor_match.EVM is not an object")

    tx = evm.get("transaction")
    if tx is None:
        raise MissingFieldError("Monitor match has no EVM transaction")
    if not isinstance(tx, dict):
        raise InvalidInputError("monitor_match.EVM.transaction is not an object")

    value = tx.get("blockNumber")
    if value is None or value == "":
        raise MissingFieldError("Invalid JSON or missing blockNumber")
    return value


def normalize_hex(value: Any) -> str:
    """Strip surrounding whitespace and one optional 0x/0X prefix."""
    if not isinstance(value, str):
        raise ConversionError(
            f"blockNumber must be a hex string, got {type(value).__name__}"
        )
    text = value.strip()
    if text[:2] in ("0x", "0X"):
        text = text[2:]
    return text


def format_block_number(block_number: int) -> str:
    """Decimal text for trace lines, bounded for numbers past the digit limit."""
    try:
        return str(block_number)
    except ValueError:
        return f"{block_number.bit_length()}-bit value"


def parse_block_number(hex_text: str) -> int:
    """Convert normalized hex text to an integer."""
    # int(x, 16) also takes signs, underscores and a prefix; only bare digits are valid here
    if not _HEX_DIGITS.fullmatch(hex_text):
        raise ConversionError(f"Failed to convert hex to decimal: {hex_text!r}")
    return int(hex_text, 16)


class BlockParityFilter:
    """Evaluates monitor matches by the parity of their block number.

    Steps:
    1. Read ``--verbose`` from the payload args
    2. Extract ``monitor_match.EVM.transaction.blockNumber``
    3. Normalize and parse it as hexadecimal
    4. Accept iff the block number is even

    Evaluation is stateless; each call builds its own config from the
    payload, so one instance can serve any number of inputs.
    """

    def evaluate(self, event: FilterInput) -> FilterResult:
        """Evaluate a decoded match. Errors come back inside the result."""
        cfg = parse_args(event.args)
        trace: list[str] = []
        if cfg.verbose:
            trace.append("Verbose mode enabled")

        try:
            raw_value = extract_block_number(event.monitor_match)
            hex_text = normalize_hex(raw_value)
            if cfg.verbose:
                trace.append(f"Extracted block number (hex): {hex_text}")
            block_number = parse_block_number(hex_text)
        except FilterError as exc:
            log.debug("Rejecting match (%s): %s", exc.reason, exc)
            return FilterResult.failed(exc, trace)

        accepted = block_number % 2 == 0
        parity = "even" if accepted else "odd"
        if cfg.verbose:
            decimal = format_block_number(block_number)
            trace.append(f"Converted block number (decimal): {decimal}")
            trace.append(f"Block number {decimal} is {parity}")

        return FilterResult(
            accepted=accepted,
            reason=f"{parity}_block",
            block_number_hex=hex_text,
            block_number=block_number,
            diagnostics=trace,
        )

    def evaluate_json(self, raw: str | bytes) -> FilterResult:
        """Decode the stdin payload and evaluate it."""
        try:
            event = FilterInput.from_json(raw)
        except InvalidInputError as exc:
            return FilterResult.failed(exc)
        return self.evaluate(event)
