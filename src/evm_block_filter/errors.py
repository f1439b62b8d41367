"""Evaluation errors raised while reading a monitor match."""

from __future__ import annotations


class FilterError(Exception):
    """Base class for inputs the filter could not decide on."""

    reason = "filter_error"
    exit_code = 1


class InvalidInputError(FilterError):
    """The JSON document or its monitor_match could not be parsed."""

    reason = "invalid_input"


class MissingFieldError(FilterError):
    """The monitor match parsed but carries no block number."""

    reason = "missing_field"


class ConversionError(FilterError):
    """The block number is not hexadecimal text."""

    reason = "conversion_error"
