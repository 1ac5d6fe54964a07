import pytest

from stock_chart_module.config import RenderConfig
from stock_chart_module.data import PriceBar, bars_to_frame, sample_bars
from stock_chart_module.errors import EmptyBarsError, ParseError
from stock_chart_module.processing import compute_chart_range, resolve_value_range


def test_chart_range_pads_sample_by_one_day():
    chart_range = compute_chart_range(sample_bars())
    assert chart_range.start.strftime("%Y-%m-%d") == "2019-03-13"
    assert chart_range.end.strftime("%Y-%m-%d") == "2019-04-26"
    assert (chart_range.start.hour, chart_range.end.hour) == (0, 0)


def test_chart_range_ignores_input_order():
    bars = sample_bars()
    shuffled = bars[10:] + bars[:10]
    assert compute_chart_range(shuffled) == compute_chart_range(list(reversed(bars)))


def test_chart_range_single_bar():
    chart_range = compute_chart_range([PriceBar("2020-02-29", 1.0, 2.0, 0.5, 1.5)])
    assert chart_range.start.strftime("%Y-%m-%d") == "2020-02-28"
    assert chart_range.end.strftime("%Y-%m-%d") == "2020-03-01"


def test_chart_range_requires_bars():
    with pytest.raises(EmptyBarsError):
        compute_chart_range([])


def test_chart_range_propagates_parse_error():
    with pytest.raises(ParseError):
        compute_chart_range([PriceBar("2019-13-40", 1.0, 2.0, 0.5, 1.5)])


def test_value_range_uses_configured_bounds():
    frame = bars_to_frame(sample_bars())
    assert resolve_value_range(frame, RenderConfig()) == (110.0, 135.0)


def test_value_range_derived_from_data_when_unset():
    frame = bars_to_frame(sample_bars())
    low, high = resolve_value_range(frame, RenderConfig(value_range=None))
    assert low < frame["Low"].min()
    assert high > frame["High"].max()


def test_value_range_rejects_inverted_bounds():
    frame = bars_to_frame(sample_bars())
    with pytest.raises(ValueError):
        resolve_value_range(frame, RenderConfig(value_range=(135.0, 110.0)))
