import json

import pytest

from stock_chart_module.config import RenderConfig
from stock_chart_module.data import bars_to_frame, sample_bars
from stock_chart_module.metadata import build_metadata_row
from stock_chart_module.render import render_candlestick


def test_build_metadata_row_summarises_render(tmp_path):
    bars = sample_bars()
    cfg = RenderConfig(output_path=str(tmp_path / "stock.svg"))
    result = render_candlestick(bars, cfg)

    row = build_metadata_row(bars_to_frame(bars), result, cfg)

    assert row["img_path"] == result.path
    assert row["n_bars"] == 30
    assert row["n_bullish"] + row["n_bearish"] == 30
    assert (row["first_date"], row["last_date"]) == ("2019-03-14", "2019-04-25")
    assert (row["range_start"], row["range_end"]) == ("2019-03-13", "2019-04-26")
    assert (row["y_min"], row["y_max"]) == (110.0, 135.0)

    stats = json.loads(row["ohlc_stats_json"])
    assert stats["Low"]["min"] == pytest.approx(114.33)
    assert stats["High"]["max"] == pytest.approx(131.37)
