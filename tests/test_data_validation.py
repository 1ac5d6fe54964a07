import pandas as pd
import pytest

from stock_chart_module.config import PRICE_COLUMNS
from stock_chart_module.data import (
    PriceBar,
    bars_to_frame,
    parse_date,
    sample_bars,
    validate_bars,
)
from stock_chart_module.errors import BarValidationError, EmptyBarsError, ParseError
from stock_chart_module.io_utils import load_bars_csv


def test_parse_date_anchors_at_local_midnight():
    ts = parse_date("2019-03-14")
    assert ts.tzinfo is not None
    assert (ts.year, ts.month, ts.day) == (2019, 3, 14)
    assert (ts.hour, ts.minute, ts.second) == (0, 0, 0)


@pytest.mark.parametrize(
    "text",
    [
        "2019-13-40",
        "2019-02-30",
        "14/03/2019",
        "2019-3-14",
        "",
        "tomorrow",
        " 2019-04-25\n",
        "2019-04-25 ",
    ],
)
def test_parse_date_rejects_malformed(text):
    with pytest.raises(ParseError):
        parse_date(text)


def test_sample_bars_has_thirty_well_formed_rows():
    bars = sample_bars()
    assert len(bars) == 30
    assert bars[0].date == "2019-04-25"
    assert bars[-1].date == "2019-03-14"
    validate_bars(bars)


def test_validate_bars_rejects_empty_sequence():
    with pytest.raises(EmptyBarsError):
        validate_bars([])


@pytest.mark.parametrize(
    "bar",
    [
        PriceBar("2019-04-01", 10.0, 9.0, 8.0, 8.5),  # open above high
        PriceBar("2019-04-01", 10.0, 11.0, 9.5, 9.0),  # close below low
        PriceBar("2019-04-01", 10.0, 11.0, 12.0, 10.5),  # low above high
        PriceBar("2019-04-01", float("nan"), 11.0, 9.0, 10.0),
    ],
)
def test_validate_bars_rejects_broken_ohlc(bar):
    with pytest.raises(BarValidationError):
        validate_bars([bar])


def test_bars_to_frame_sorts_ascending():
    frame = bars_to_frame(sample_bars())

    assert list(frame.columns) == PRICE_COLUMNS
    assert frame.index.is_monotonic_increasing
    assert frame.index.tz is None
    assert frame.index[0] == pd.Timestamp("2019-03-14")
    assert frame.index[-1] == pd.Timestamp("2019-04-25")
    assert frame.loc[pd.Timestamp("2019-04-25"), "Close"] == pytest.approx(129.15)


def test_bars_to_frame_rejects_duplicate_dates():
    bar = PriceBar("2019-04-01", 10.0, 11.0, 9.0, 10.5)
    with pytest.raises(BarValidationError):
        bars_to_frame([bar, bar])


def test_bullish_flag_follows_close_vs_open():
    assert PriceBar("2019-04-01", 10.0, 11.0, 9.0, 10.0).bullish
    assert not PriceBar("2019-04-01", 10.0, 11.0, 9.0, 9.5).bullish


def test_load_bars_csv_reads_rows(tmp_path):
    path = tmp_path / "bars.csv"
    path.write_text(
        "Date,Open,High,Low,Close\n"
        "2019-04-02,119.06,119.48,118.52,119.19\n"
        "2019-04-01,118.95,119.10,118.10,119.02\n"
    )
    bars = load_bars_csv(str(path))
    assert bars == [
        PriceBar("2019-04-02", 119.06, 119.48, 118.52, 119.19),
        PriceBar("2019-04-01", 118.95, 119.10, 118.10, 119.02),
    ]


def test_load_bars_csv_requires_columns(tmp_path):
    path = tmp_path / "bars.csv"
    path.write_text("Date,Open,Close\n2019-04-01,1,2\n")
    with pytest.raises(ValueError):
        load_bars_csv(str(path))
