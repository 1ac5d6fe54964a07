"""I/O utilities for loading bars and persisting render metadata."""
from __future__ import annotations

import os
from typing import Dict, List

import pandas as pd

from .config import DATE_FORMAT, PRICE_COLUMNS
from .data import PriceBar
from .errors import ParseError


def load_bars_csv(path: str) -> List[PriceBar]:
    """Read ``Date,Open,High,Low,Close`` rows from a CSV file."""

    df = pd.read_csv(path, dtype={"Date": str})
    missing_cols = [col for col in ["Date"] + PRICE_COLUMNS if col not in df.columns]
    if missing_cols:
        raise ValueError(f"Bar CSV {path!r} missing required columns: {missing_cols}")
    if df["Date"].isna().any():
        raise ParseError(f"Bar CSV {path!r} has rows without a date (expected {DATE_FORMAT}).")

    return [
        PriceBar(
            date=row.Date.strip(),
            open=float(row.Open),
            high=float(row.High),
            low=float(row.Low),
            close=float(row.Close),
        )
        for row in df.itertuples(index=False)
    ]


def write_metadata(rows: List[Dict[str, object]], path: str) -> None:
    """Persist metadata rows to a CSV file."""

    if not rows:
        return
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    pd.DataFrame(rows).to_csv(path, index=False)
