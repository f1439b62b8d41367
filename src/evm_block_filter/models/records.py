"""Evaluation result returned by the filter."""

from __future__ import annotations

from dataclasses import dataclass, field

from evm_block_filter.errors import FilterError


@dataclass
class FilterResult:
    """Outcome of evaluating one monitor match.

    ``accepted`` is the classification; ``error`` is set only when no
    classification could be made, in which case ``accepted`` is False.
    """

    accepted: bool
    reason: str  # "even_block", "odd_block", or the error's reason code
    block_number_hex: str | None = None
    block_number: int | None = None
    error: FilterError | None = None
    diagnostics: list[str] = field(default_factory=list)

    @classmethod
    def failed(cls, error: FilterError, diagnostics: list[str] | None = None) -> FilterResult:
        lines = list(diagnostics or [])
        lines.append(str(error))
        return cls(
            accepted=False,
            reason=error.reason,
            error=error,
            diagnostics=lines,
        )

    @property
    def determined(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        if self.error is None:
            return 0
        return self.error.exit_code

    @property
    def decision_text(self) -> str:
        return "true" if self.accepted else "false"
