"""Data models for the EVM block filter."""

from evm_block_filter.models.events import FilterInput
from evm_block_filter.models.records import FilterResult
from evm_block_filter.models.config import DiagnosticsStream, FilterConfig, OutputConfig

__all__ = [
    "FilterInput",
    "FilterResult",
    "DiagnosticsStream", "FilterConfig", "OutputConfig",
]
