"""Protocol interfaces for evm_block_filter components."""

from evm_block_filter.interfaces.filter import MatchFilter

__all__ = ["MatchFilter"]
