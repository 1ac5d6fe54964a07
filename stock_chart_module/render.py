"""Rendering helpers for writing candlestick charts to image files."""
from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.dates as mdates
import matplotlib.pyplot as plt
import mplfinance as mpf
import pandas as pd

from .config import RenderConfig
from .data import PriceBar, bars_to_frame
from .errors import RenderError
from .processing import ChartRange, compute_chart_range, resolve_value_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    """Outcome of a successful render."""

    path: str
    n_marks: int
    chart_range: ChartRange
    value_range: Tuple[float, float]


def _make_style(cfg: RenderConfig):
    """Build the mplfinance style: two candle colours on a light grid."""

    edge_colors = {"up": cfg.up_color, "down": cfg.down_color}
    market_colors = mpf.make_marketcolors(
        up=cfg.up_color,
        down=cfg.down_color,
        edge=edge_colors,
        wick=edge_colors,
        ohlc=edge_colors,
    )
    rc = {
        "axes.grid": True,
        "savefig.facecolor": cfg.bg,
        "font.family": "sans-serif",
    }
    return mpf.make_mpf_style(
        marketcolors=market_colors,
        facecolor=cfg.bg,
        figcolor=cfg.bg,
        gridcolor=cfg.grid_color,
        gridstyle="-",
        y_on_right=False,
        rc=rc,
    )


def _axes_box(cfg: RenderConfig) -> Tuple[float, float, float, float]:
    """Plot area in figure fractions, leaving ``label_area`` pixels for tick labels."""

    left = cfg.label_area / cfg.width
    bottom = cfg.label_area / cfg.height
    right = (cfg.label_area / 2) / cfg.width
    top = (cfg.label_area * 2) / cfg.height
    return left, bottom, 1.0 - left - right, 1.0 - bottom - top


def _to_mdate(ts: pd.Timestamp) -> float:
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return mdates.date2num(ts.to_pydatetime())


def _draw_chart(
    df: pd.DataFrame,
    chart_range: ChartRange,
    value_range: Tuple[float, float],
    cfg: RenderConfig,
):
    """Draw one candle per row and return the matplotlib figure."""

    try:
        fig, axes = mpf.plot(
            df,
            type="candle",
            style=_make_style(cfg),
            figsize=(cfg.width / cfg.dpi, cfg.height / cfg.dpi),
            show_nontrading=True,
            update_width_config={
                "candle_width": cfg.candle_width,
                "candle_linewidth": cfg.wick_width,
            },
            ylabel="",
            returnfig=True,
            datetime_format="%Y-%m-%d",
            xrotation=0,
        )
    except (ValueError, TypeError, KeyError) as exc:
        raise RenderError(f"Failed to build the drawing surface: {exc}") from exc

    try:
        axes_iter: Sequence = axes if isinstance(axes, Sequence) else [axes]
        for ax in axes_iter:
            ax.set_position(_axes_box(cfg))
        main_ax = axes_iter[0]
        main_ax.set_xlim(_to_mdate(chart_range.start), _to_mdate(chart_range.end))
        main_ax.set_ylim(*value_range)
        fig.suptitle(cfg.title, fontsize=cfg.title_font_size)
    except (ValueError, TypeError) as exc:
        plt.close(fig)
        raise RenderError(f"Failed to lay out the chart: {exc}") from exc

    return fig


def _finalize(fig, cfg: RenderConfig) -> str:
    """Write the figure next to its destination, then move it into place."""

    out_path = os.path.abspath(cfg.output_path)
    out_dir = os.path.dirname(out_path)
    fmt = os.path.splitext(out_path)[1].lstrip(".").lower() or "svg"

    try:
        os.makedirs(out_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".stock-", suffix=f".{fmt}", dir=out_dir)
        os.close(fd)
    except OSError as exc:
        raise RenderError(f"Unable to prepare output location {out_dir!r}: {exc}") from exc

    savefig_kwargs = {"format": fmt, "dpi": cfg.dpi, "facecolor": cfg.bg}
    if fmt == "svg":
        # No timestamp in the SVG metadata.
        savefig_kwargs["metadata"] = {"Date": None}

    try:
        with matplotlib.rc_context({"svg.hashsalt": cfg.svg_hashsalt}):
            fig.savefig(tmp_path, **savefig_kwargs)
        if os.path.getsize(tmp_path) == 0:
            raise RenderError(f"Renderer produced an empty file for {out_path!r}.")
        os.replace(tmp_path, out_path)
    except (OSError, ValueError) as exc:
        raise RenderError(f"Unable to write chart to {out_path!r}: {exc}") from exc
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)

    return out_path


def render_candlestick(bars: Sequence[PriceBar], cfg: RenderConfig) -> RenderResult:
    """Render ``bars`` as a candlestick chart and write it to ``cfg.output_path``.

    Bars are validated and parsed before anything touches the filesystem, so a
    malformed date or an empty sequence never leaves an output file behind.
    """

    df = bars_to_frame(bars)
    chart_range = compute_chart_range(bars)
    value_range = resolve_value_range(df, cfg)
    logger.debug(
        "Rendering %d bars over %s..%s, prices %.2f..%.2f",
        len(df),
        chart_range.start.date(),
        chart_range.end.date(),
        *value_range,
    )

    fig = _draw_chart(df, chart_range, value_range, cfg)
    try:
        path = _finalize(fig, cfg)
    finally:
        plt.close(fig)

    return RenderResult(
        path=path,
        n_marks=len(df),
        chart_range=chart_range,
        value_range=value_range,
    )
