"""MatchFilter protocol - decides whether a monitor match propagates."""

from __future__ import annotations

from typing import Protocol

from evm_block_filter.models.events import FilterInput
from evm_block_filter.models.records import FilterResult


class MatchFilter(Protocol):
    """Filters monitor matches before notifications are triggered."""

    def evaluate(self, event: FilterInput) -> FilterResult:
        """Evaluate a decoded match. Never raises for bad input."""
        ...

    def evaluate_json(self, raw: str | bytes) -> FilterResult:
        """Decode the stdin payload and evaluate it."""
        ...
