"""Configuration models for the filter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticsStream(str, Enum):
    """Where diagnostic lines are written."""

    STDERR = "stderr"  # decision is the only stdout content
    STDOUT = "stdout"  # legacy: diagnostics precede the decision line


@dataclass(frozen=True)
class FilterConfig:
    """Per-invocation settings parsed from the payload's args."""

    verbose: bool = False


@dataclass
class OutputConfig:
    """Process-level output settings loaded from TOML."""

    diagnostics: DiagnosticsStream = DiagnosticsStream.STDERR
    log_format: str = "%(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
