"""Bar records, date parsing and validation helpers for candlestick charts."""
from __future__ import annotations

import datetime as dt
import math
import re
from dataclasses import dataclass
from typing import List, Sequence

import pandas as pd
from dateutil import tz

from .config import DATE_FORMAT, PRICE_COLUMNS
from .errors import BarValidationError, EmptyBarsError, ParseError

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class PriceBar:
    """One trading day's open/high/low/close prices."""

    date: str
    open: float
    high: float
    low: float
    close: float

    @property
    def bullish(self) -> bool:
        return self.close >= self.open


def parse_date(text: str) -> pd.Timestamp:
    """Parse a ``YYYY-MM-DD`` string into a timestamp at local midnight."""

    if not isinstance(text, str) or not _DATE_RE.fullmatch(text):
        raise ParseError(f"Invalid bar date {text!r}; expected YYYY-MM-DD.")
    try:
        parsed = dt.datetime.strptime(text, DATE_FORMAT)
    except ValueError as exc:
        raise ParseError(f"Invalid bar date {text!r}: {exc}") from exc
    return pd.Timestamp(parsed).tz_localize(tz.tzlocal())


def sample_bars() -> List[PriceBar]:
    """Return the bundled 30-day MSFT sample, newest first."""

    rows = [
        ("2019-04-25", 130.06, 131.37, 128.83, 129.15),
        ("2019-04-24", 125.79, 125.85, 124.52, 125.01),
        ("2019-04-23", 124.10, 125.58, 123.83, 125.44),
        ("2019-04-22", 122.62, 124.00, 122.57, 123.76),
        ("2019-04-18", 122.19, 123.52, 121.30, 123.37),
        ("2019-04-17", 121.24, 121.85, 120.54, 121.77),
        ("2019-04-16", 121.64, 121.65, 120.10, 120.77),
        ("2019-04-15", 120.94, 121.58, 120.57, 121.05),
        ("2019-04-12", 120.64, 120.98, 120.37, 120.95),
        ("2019-04-11", 120.54, 120.85, 119.92, 120.33),
        ("2019-04-10", 119.76, 120.35, 119.54, 120.19),
        ("2019-04-09", 118.63, 119.54, 118.58, 119.28),
        ("2019-04-08", 119.81, 120.02, 118.64, 119.93),
        ("2019-04-05", 119.39, 120.23, 119.37, 119.89),
        ("2019-04-04", 120.10, 120.23, 118.38, 119.36),
        ("2019-04-03", 119.86, 120.43, 119.15, 119.97),
        ("2019-04-02", 119.06, 119.48, 118.52, 119.19),
        ("2019-04-01", 118.95, 119.10, 118.10, 119.02),
        ("2019-03-29", 118.07, 118.32, 116.96, 117.94),
        ("2019-03-28", 117.44, 117.58, 116.13, 116.93),
        ("2019-03-27", 117.87, 118.21, 115.52, 116.77),
        ("2019-03-26", 118.62, 118.70, 116.85, 117.91),
        ("2019-03-25", 116.56, 118.01, 116.32, 117.66),
        ("2019-03-22", 119.50, 119.59, 117.04, 117.05),
        ("2019-03-21", 117.13, 120.82, 117.09, 120.22),
        ("2019-03-20", 117.39, 118.75, 116.71, 117.52),
        ("2019-03-19", 118.09, 118.44, 116.99, 117.65),
        ("2019-03-18", 116.17, 117.61, 116.05, 117.57),
        ("2019-03-15", 115.34, 117.25, 114.59, 115.91),
        ("2019-03-14", 114.54, 115.20, 114.33, 114.59),
    ]
    return [PriceBar(*row) for row in rows]


def validate_bars(bars: Sequence[PriceBar]) -> None:
    """Check the bar sequence is non-empty and every bar is well formed."""

    if not bars:
        raise EmptyBarsError("At least one bar is required to render a chart.")

    for bar in bars:
        prices = (bar.open, bar.high, bar.low, bar.close)
        if not all(math.isfinite(float(value)) for value in prices):
            raise BarValidationError(f"Bar {bar.date} has non-finite prices: {prices}")
        if not (bar.low <= min(bar.open, bar.close) and max(bar.open, bar.close) <= bar.high):
            raise BarValidationError(
                f"Bar {bar.date} violates low <= open, close <= high: "
                f"open={bar.open} high={bar.high} low={bar.low} close={bar.close}"
            )


def bars_to_frame(bars: Sequence[PriceBar]) -> pd.DataFrame:
    """Validate bars and build an ascending, date-indexed OHLC dataframe."""

    validate_bars(bars)
    index = pd.DatetimeIndex([parse_date(bar.date) for bar in bars])
    df = pd.DataFrame(
        [[bar.open, bar.high, bar.low, bar.close] for bar in bars],
        index=index,
        columns=PRICE_COLUMNS,
        dtype=float,
    )
    df.index = df.index.tz_localize(None)
    df.index.name = "Date"
    if df.index.has_duplicates:
        dupes = sorted({ts.strftime(DATE_FORMAT) for ts in df.index[df.index.duplicated()]})
        raise BarValidationError(f"Duplicate bar dates: {dupes}")
    return df.sort_index()
