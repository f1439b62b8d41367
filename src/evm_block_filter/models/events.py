"""Monitor match input deserialized from the monitor's stdin payload."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from evm_block_filter.errors import InvalidInputError


@dataclass(frozen=True)
class FilterInput:
    """One invocation's payload: the matched event plus script arguments.

    ``monitor_match`` is kept as the raw decoded JSON value; its shape is
    checked when the block number is extracted, not here.
    """

    monitor_match: Any = None
    args: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any) -> FilterInput:
        if not isinstance(data, dict):
            raise InvalidInputError(
                f"Expected a JSON object, got {type(data).__name__}"
            )

        args = data.get("args")
        if args is None:
            args = []
        if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
            raise InvalidInputError("args must be a list of strings")

        return cls(monitor_match=data.get("monitor_match"), args=tuple(args))

    @classmethod
    def from_json(cls, raw: str | bytes) -> FilterInput:
        """Decode the stdin document. Raises InvalidInputError on bad input.

        Bytes are read as UTF-8 (a leading BOM is allowed).
        """
        try:
            text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"Invalid JSON input: {exc}") from exc

        if not text or not text.strip():
            raise InvalidInputError("No input JSON provided")
        # ValueError also covers int literals past the digit limit
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise InvalidInputError(f"Invalid JSON input: {exc}") from exc
        return cls.from_dict(data)
