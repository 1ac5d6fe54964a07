"""Metadata helpers for rendered stock charts."""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Dict

import numpy as np
import pandas as pd

from .config import PRICE_COLUMNS, RenderConfig

if TYPE_CHECKING:
    from .render import RenderResult


def build_metadata_row(
    df: pd.DataFrame,
    result: "RenderResult",
    cfg: RenderConfig,
) -> Dict[str, object]:
    """Construct the metadata dictionary for a rendered chart.

    Args:
        df: Ascending OHLC frame that was drawn
        result: ``RenderResult`` returned by the renderer
        cfg: Render configuration

    Returns:
        Metadata dictionary
    """

    ohlc_stats: Dict[str, Dict[str, float]] = {}
    for col in PRICE_COLUMNS:
        series = df[col]
        ohlc_stats[col] = {
            "min": float(series.min()),
            "max": float(series.max()),
            "mean": float(series.mean()),
            "std": float(series.std(ddof=0)),
        }

    bullish = np.asarray(df["Close"] >= df["Open"])
    return {
        "title": cfg.title,
        "img_path": result.path,
        "n_bars": result.n_marks,
        "n_bullish": int(bullish.sum()),
        "n_bearish": int((~bullish).sum()),
        "first_date": df.index[0].date().isoformat(),
        "last_date": df.index[-1].date().isoformat(),
        "range_start": result.chart_range.start.date().isoformat(),
        "range_end": result.chart_range.end.date().isoformat(),
        "y_min": result.value_range[0],
        "y_max": result.value_range[1],
        "width": cfg.width,
        "height": cfg.height,
        "bg": cfg.bg,
        "up_color": cfg.up_color,
        "down_color": cfg.down_color,
        "candle_width": cfg.candle_width,
        "wick_width": cfg.wick_width,
        "ohlc_stats_json": json.dumps(ohlc_stats, sort_keys=True),
    }
