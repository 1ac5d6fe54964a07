"""Exception types raised by the greeting store and the candlestick renderer."""
from __future__ import annotations


class StockChartError(Exception):
    """Base class for every failure surfaced by this package."""


class ParseError(StockChartError, ValueError):
    """A bar date does not match the ``YYYY-MM-DD`` calendar pattern."""


class BarValidationError(StockChartError, ValueError):
    """A bar breaks ``low <= open, close <= high``."""


class EmptyBarsError(StockChartError, ValueError):
    """Rendering was requested without any bars."""


class StoreError(StockChartError, RuntimeError):
    """The record store could not be opened or a statement failed."""


class RenderError(StockChartError, RuntimeError):
    """The drawing surface could not be built, drawn on, or written out."""
