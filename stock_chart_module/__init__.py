"""Greeting record store and candlestick chart rendering helpers."""
from .config import PRICE_COLUMNS, RenderConfig
from .data import PriceBar, bars_to_frame, parse_date, sample_bars, validate_bars
from .errors import (
    BarValidationError,
    EmptyBarsError,
    ParseError,
    RenderError,
    StockChartError,
    StoreError,
)
from .greeter import Greeter
from .io_utils import load_bars_csv, write_metadata
from .metadata import build_metadata_row
from .processing import ChartRange, compute_chart_range, resolve_value_range
from .render import RenderResult, render_candlestick
from .store import RecordStore

__all__ = [
    "PRICE_COLUMNS",
    "RenderConfig",
    "PriceBar",
    "bars_to_frame",
    "parse_date",
    "sample_bars",
    "validate_bars",
    "BarValidationError",
    "EmptyBarsError",
    "ParseError",
    "RenderError",
    "StockChartError",
    "StoreError",
    "Greeter",
    "load_bars_csv",
    "write_metadata",
    "build_metadata_row",
    "ChartRange",
    "compute_chart_range",
    "resolve_value_range",
    "RenderResult",
    "render_candlestick",
    "RecordStore",
]
