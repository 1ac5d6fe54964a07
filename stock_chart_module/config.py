"""Configuration objects and shared constants for stock chart generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, List, Optional, Tuple

PRICE_COLUMNS: Final[List[str]] = ["Open", "High", "Low", "Close"]
DATE_FORMAT: Final[str] = "%Y-%m-%d"

DEFAULT_CHART_PATH: Final[str] = "stock.svg"
DEFAULT_STORE_PATH: Final[str] = "dtimelog.db"

STORE_SCRIPT: Final[str] = """
    CREATE TABLE users (name TEXT, age INTEGER);
    INSERT INTO users VALUES ('Alice', 42);
    INSERT INTO users VALUES ('Bob', 69);
"""


@dataclass(frozen=True)
class RenderConfig:
    """Container for rendering related configuration."""

    output_path: str = DEFAULT_CHART_PATH
    width: int = 1024
    height: int = 768
    dpi: int = 100
    title: str = "MSFT Stock Price"
    title_font_size: float = 28.0
    label_area: int = 40
    value_range: Optional[Tuple[float, float]] = (110.0, 135.0)
    bg: str = "white"
    grid_color: str = "#e6e6e6"
    up_color: str = "green"
    down_color: str = "red"
    candle_width: float = 0.6
    wick_width: float = 1.0
    svg_hashsalt: Optional[str] = "stock-chart"
