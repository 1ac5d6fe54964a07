"""Command line interface for the greeter and the candlestick chart renderer.

Example usage
-------------

* Seed ``dtimelog.db`` and print a greeting::

    python make_stock_chart.py greet --greeting Hello --thing David

* Render the bundled MSFT sample to ``stock.svg``::

    python make_stock_chart.py plot

* Render bars from a CSV with a price range derived from the data::

    python make_stock_chart.py plot --bars_csv bars.csv --auto_range --out charts/bars.svg --save_metadata_csv
"""
from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .config import DEFAULT_CHART_PATH, DEFAULT_STORE_PATH, RenderConfig
from .data import bars_to_frame, sample_bars
from .errors import StockChartError
from .greeter import Greeter
from .io_utils import load_bars_csv, write_metadata
from .metadata import build_metadata_row
from .render import render_candlestick
from .store import RecordStore


LOGGER_NAME = "make_stock_chart"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(description="Greet, or render a stock candlestick chart.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    greet = subparsers.add_parser("greet", help="Seed the record store and print a greeting.")
    greet.add_argument("--greeting", default="Hello", help="Greeting text.")
    greet.add_argument("--thing", default="David", help="Who or what to greet.")
    greet.add_argument("--db", default=DEFAULT_STORE_PATH, help="SQLite record store path.")

    plot = subparsers.add_parser("plot", help="Render a candlestick chart.")
    plot.add_argument(
        "--bars_csv",
        default=None,
        help="CSV with Date,Open,High,Low,Close columns. Defaults to the bundled MSFT sample.",
    )
    plot.add_argument("--out", default=DEFAULT_CHART_PATH, help="Output image path (.svg or .png).")
    plot.add_argument("--width", type=int, default=1024, help="Canvas width (pixels).")
    plot.add_argument("--height", type=int, default=768, help="Canvas height (pixels).")
    plot.add_argument("--dpi", type=int, default=100, help="Figure DPI.")
    plot.add_argument("--title", default="MSFT Stock Price", help="Chart caption.")
    plot.add_argument(
        "--label_area", type=int, default=40, help="Margin reserved for axis labels (pixels)."
    )
    plot.add_argument("--y_min", type=float, default=110.0, help="Lower price bound.")
    plot.add_argument("--y_max", type=float, default=135.0, help="Upper price bound.")
    plot.add_argument(
        "--auto_range",
        action="store_true",
        help="Derive the price bounds from the bars instead of --y_min/--y_max.",
    )
    plot.add_argument("--bg", default="white", help="Background colour.")
    plot.add_argument("--up_color", default="green", help="Colour for bullish candles.")
    plot.add_argument("--down_color", default="red", help="Colour for bearish candles.")
    plot.add_argument(
        "--candle_width", type=float, default=0.6, help="Candle body width in days."
    )
    plot.add_argument(
        "--wick_width", type=float, default=1.0, help="Line width for candle wicks."
    )
    plot.add_argument("--seed", type=int, default=0, help="Salt for deterministic SVG element ids.")
    plot.add_argument(
        "--save_metadata_csv",
        action="store_true",
        help="Write metadata.csv next to the chart.",
    )

    return parser.parse_args(argv)


def _run_greet(args: argparse.Namespace, logger: logging.Logger) -> None:
    logger.info("Initialising record store %s", args.db)
    Greeter(args.greeting).greet(args.thing, store=RecordStore(args.db))


def _run_plot(args: argparse.Namespace, logger: logging.Logger) -> None:
    if not args.auto_range and args.y_max <= args.y_min:
        raise SystemExit("--y_max must be greater than --y_min.")

    if args.bars_csv:
        bars = load_bars_csv(args.bars_csv)
        logger.info("Loaded %d bars from %s", len(bars), args.bars_csv)
    else:
        bars = sample_bars()
        logger.info("Using bundled sample of %d bars", len(bars))

    render_cfg = RenderConfig(
        output_path=args.out,
        width=args.width,
        height=args.height,
        dpi=args.dpi,
        title=args.title,
        label_area=args.label_area,
        value_range=None if args.auto_range else (args.y_min, args.y_max),
        bg=args.bg,
        up_color=args.up_color,
        down_color=args.down_color,
        candle_width=args.candle_width,
        wick_width=args.wick_width,
        svg_hashsalt=str(args.seed),
    )

    result = render_candlestick(bars, render_cfg)
    logger.info(
        "Saved chart %s (%d candles, %s to %s)",
        result.path,
        result.n_marks,
        result.chart_range.start.date(),
        result.chart_range.end.date(),
    )

    if args.save_metadata_csv:
        metadata_path = os.path.join(os.path.dirname(result.path), "metadata.csv")
        row = build_metadata_row(bars_to_frame(bars), result, render_cfg)
        write_metadata([row], metadata_path)
        logger.info("Metadata written to %s", metadata_path)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI utility."""

    args = parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    logger = logging.getLogger(LOGGER_NAME)

    try:
        if args.command == "greet":
            _run_greet(args, logger)
        else:
            _run_plot(args, logger)
    except (StockChartError, ValueError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        raise SystemExit(1) from exc
