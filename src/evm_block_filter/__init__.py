"""EVM block number filter for blockchain monitor matches."""

from evm_block_filter.policy.filter import BlockParityFilter

__all__ = ["BlockParityFilter"]
