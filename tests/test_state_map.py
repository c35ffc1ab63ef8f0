import logging

import plotly.graph_objects as go
import pytest

from fars import InvalidStateError, fars_map_state
from fars.analysis.coordinates import clean_coordinates
from fars.plotting.state_map import plot_state_map
from fars.reports import generators

from conftest import make_accidents, write_accidents


def test_plots_valid_locations(data_dir):
    fig = fars_map_state(6, 2014, data_dir=data_dir)

    assert isinstance(fig, go.Figure)
    (trace,) = fig.data
    assert isinstance(trace, go.Scattergeo)
    assert len(trace.lat) == 2
    assert list(fig.layout.geo.lataxis.range) == pytest.approx([33.5, 37.2])
    assert list(fig.layout.geo.lonaxis.range) == pytest.approx([-119.9, -117.7])
    assert "California (6), 2014" in fig.layout.title.text


def test_sentinel_locations_are_not_plotted(data_dir):
    fig = fars_map_state(1, 2014, data_dir=data_dir)

    (trace,) = fig.data
    assert list(trace.lat) == [32.5]
    assert list(trace.lon) == [-86.9]


def test_state_and_year_are_coerced(data_dir):
    fig = fars_map_state("56", "2014", data_dir=data_dir)
    assert len(fig.data[0].lat) == 2


def test_state_coerced_like_year(data_dir):
    fig = fars_map_state("6.0", "2014.0", data_dir=data_dir)
    assert "California (6), 2014" in fig.layout.title.text
    assert len(fig.data[0].lat) == 2


def test_partially_known_locations_widen_each_axis(data_dir):
    fig = fars_map_state(1, 2014, data_dir=data_dir)

    # Latitude 33.1 (unknown longitude) and longitude -87.5 (unknown latitude)
    # extend the ranges even though only one point is drawn.
    assert list(fig.layout.geo.lataxis.range) == pytest.approx([32.0, 33.6])
    assert list(fig.layout.geo.lonaxis.range) == pytest.approx([-88.0, -86.4])


def test_invalid_state_raises_before_rendering(data_dir, monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("plot_state_map must not be called")

    monkeypatch.setattr(generators, "plot_state_map", _fail)

    with pytest.raises(InvalidStateError) as excinfo:
        fars_map_state(99, 2014, data_dir=data_dir)
    assert excinfo.value.state == 99
    assert str(excinfo.value) == "invalid STATE number: 99"


@pytest.mark.parametrize("state", ["AL", None, float("inf"), float("nan")])
def test_uncoercible_state_is_invalid(data_dir, state):
    with pytest.raises(InvalidStateError):
        fars_map_state(state, 2014, data_dir=data_dir)


def test_missing_year_raises(data_dir):
    with pytest.raises(FileNotFoundError):
        fars_map_state(1, 2015, data_dir=data_dir)


def test_no_rows_warns_and_skips_rendering(data_dir, monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(generators, "select_state", lambda data, state: data.iloc[0:0])
    monkeypatch.setattr(generators, "plot_state_map", lambda *a, **k: calls.append(a))

    with caplog.at_level(logging.WARNING, logger="fars"):
        result = fars_map_state(1, 2014, data_dir=data_dir)

    assert result is None
    assert calls == []
    assert "no accidents to plot" in caplog.messages


def test_no_known_locations_warns_and_skips_rendering(tmp_path, caplog):
    write_accidents(
        tmp_path,
        2016,
        make_accidents(2016, [1, 2], states=[4, 4], latitude=[99.9999, 32.0], longitude=[-111.0, 999.9999]),
    )

    with caplog.at_level(logging.WARNING, logger="fars"):
        result = fars_map_state(4, 2016, data_dir=tmp_path)

    assert result is None
    assert "no accident locations known, nothing to plot" in caplog.messages


def test_writes_html(data_dir, tmp_path):
    out = tmp_path / "maps" / "wyoming_2014.html"

    fars_map_state(56, 2014, data_dir=data_dir, output_path=out)

    assert out.exists()
    assert "<html>" in out.read_text(encoding="utf-8").lower()


def test_plot_state_map_requires_a_location():
    df = clean_coordinates(make_accidents(2014, [1], latitude=[99.9999], longitude=[-86.0]))
    with pytest.raises(ValueError):
        plot_state_map(df, 1, 2014)


def test_plot_state_map_computes_bounds():
    df = clean_coordinates(make_accidents(2014, [1, 2], latitude=[30.0, 31.0], longitude=[-88.0, -87.0]))
    fig = plot_state_map(df, 1, 2014)
    assert list(fig.layout.geo.lataxis.range) == pytest.approx([29.5, 31.5])
