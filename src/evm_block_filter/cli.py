"""CLI entry point for the EVM block number filter.

Reads one monitor match as JSON on stdin and prints the decision
(``true``/``false``) as the last line of stdout. Exit status is 0 when a
decision was made and non-zero when the input could not be evaluated.
"""

from __future__ import annotations

import logging
import sys

import click

from evm_block_filter.config import load_config
from evm_block_filter.interfaces.filter import MatchFilter
from evm_block_filter.models.config import DiagnosticsStream, OutputConfig
from evm_block_filter.models.records import FilterResult
from evm_block_filter.policy.filter import BlockParityFilter

log = logging.getLogger(__name__)


def _setup_logging(cfg: OutputConfig) -> None:
    stream = sys.stdout if cfg.diagnostics is DiagnosticsStream.STDOUT else sys.stderr
    logging.basicConfig(
        level=logging.INFO,
        format=cfg.log_format,
        datefmt=cfg.datefmt,
        stream=stream,
        force=True,
    )


def _report(result: FilterResult) -> None:
    """Write diagnostics to the log and the decision to stdout."""
    if result.determined:
        for line in result.diagnostics:
            log.info(line)
    else:
        for line in result.diagnostics[:-1]:
            log.info(line)
        log.error(result.diagnostics[-1])

    click.echo(result.decision_text)


@click.command()
@click.option(
    "-c", "--config", "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config TOML file",
)
def main(config_path: str | None) -> None:
    """Filter a monitor match by block number parity.

    Prints 'true' for transactions in even-numbered blocks and 'false'
    otherwise. Pass "--verbose" in the payload's args for a step trace.
    """
    try:
        cfg = load_config(config_path)
        _setup_logging(cfg)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    raw = click.get_binary_stream("stdin").read()
    block_filter: MatchFilter = BlockParityFilter()
    result = block_filter.evaluate_json(raw)
    _report(result)

    sys.exit(result.exit_code)
