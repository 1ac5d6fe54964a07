"""Axis range computation for candlestick charts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import pandas as pd

from .config import RenderConfig
from .data import PriceBar, parse_date
from .errors import EmptyBarsError

_ONE_DAY = pd.DateOffset(days=1)


@dataclass(frozen=True)
class ChartRange:
    """Horizontal axis bounds, padded by one day on each side."""

    start: pd.Timestamp
    end: pd.Timestamp


def compute_chart_range(bars: Sequence[PriceBar]) -> ChartRange:
    """Return ``[oldest - 1 day, newest + 1 day]`` regardless of input order."""

    if not bars:
        raise EmptyBarsError("Cannot compute a chart range without bars.")
    stamps = [parse_date(bar.date) for bar in bars]
    return ChartRange(start=min(stamps) - _ONE_DAY, end=max(stamps) + _ONE_DAY)


def resolve_value_range(df: pd.DataFrame, cfg: RenderConfig, pad: float = 0.05) -> Tuple[float, float]:
    """Use the configured price bounds, or derive padded bounds from the data."""

    if cfg.value_range is not None:
        low, high = (float(v) for v in cfg.value_range)
    else:
        low = float(df["Low"].min())
        high = float(df["High"].max())
        margin = (high - low) * pad if high > low else max(abs(high) * pad, 1.0)
        low, high = low - margin, high + margin

    if low >= high:
        raise ValueError(f"Invalid value range: min {low} must be below max {high}.")
    return low, high
