"""
Domain errors raised by the chart pipeline.

Every error is reported to the caller; none of them leaves partial
state behind. The API layer maps them to HTTP status codes.
"""


class ChartDeckError(Exception):
    """Base class for every pipeline error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SchemaError(ChartDeckError):
    """Malformed dataset: duplicate columns or row/column key mismatch."""


class AxisNotSelectedError(ChartDeckError):
    """An axis is unset (or names no column) at generate time."""


class UnsupportedChartKindError(ChartDeckError):
    """Chart kind has no entry in the policy table."""


class InvalidTargetError(ChartDeckError):
    """Lifecycle operation on an unknown rendering target."""
