"""Configuration loading: payload args + optional TOML output settings."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from evm_block_filter.models.config import DiagnosticsStream, FilterConfig, OutputConfig

VERBOSE_FLAG = "--verbose"


def parse_args(args: Sequence[str]) -> FilterConfig:
    """Build the per-invocation config from the payload's args.

    Only ``--verbose`` is recognized (exact match); anything else is ignored.
    """
    return FilterConfig(verbose=VERBOSE_FLAG in args)


def _section(raw: dict, name: str) -> dict:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {type(section).__name__}")
    return section


def load_config(config_path: str | Path | None = None) -> OutputConfig:
    """Load output settings from a TOML file, falling back to defaults.

    Raises ValueError for an unknown ``output.diagnostics`` value or a
    section that is not a table.
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        with open(p, "rb") as f:
            raw = tomllib.load(f)

    cfg = OutputConfig()

    # ── Output section ─────────────────────────────────────
    output = _section(raw, "output")
    if v := output.get("diagnostics"):
        try:
            cfg.diagnostics = DiagnosticsStream(v)
        except ValueError:
            raise ValueError(
                f"output.diagnostics must be 'stderr' or 'stdout', got {v!r}"
            ) from None

    # ── Logging section ────────────────────────────────────
    logging_raw = _section(raw, "logging")
    if v := logging_raw.get("format"):
        cfg.log_format = str(v)
    if v := logging_raw.get("datefmt"):
        cfg.datefmt = str(v)

    return cfg
