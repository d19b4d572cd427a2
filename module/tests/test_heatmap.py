import pytest

from tempmap.core.figure import Page
from tempmap.core.scales import build_scales
from tempmap.data.loader import Dataset
from tempmap.plots.heatmap import HeatmapArtist, render


def _render(dataset, layout, page=None):
    page = page or Page()
    scales = build_scales(dataset, layout)
    svg = render(dataset, scales, layout, page)
    return page, scales, svg


def _cell_attrs(svg):
    return [cell.attrs for cell in svg.select_all(".cell")]


def test_single_observation_cell(single_dataset, layout):
    page, scales, svg = _render(single_dataset, layout)

    cells = page.select_all(".cell")
    assert len(cells) == 1
    cell = cells[0]
    assert cell.attr("data-month") == 0
    assert cell.attr("data-year") == 1753
    assert cell.attr("data-temp") == pytest.approx(1.692)
    assert cell.attr("x") == pytest.approx(layout.margin.left)
    assert cell.attr("y") == pytest.approx(layout.margin.top)
    assert cell.attr("width") == pytest.approx(scales.cell_width)
    assert cell.attr("height") == pytest.approx(scales.y.bandwidth)
    assert cell.select("title").text() == "January 1753\n1.69°C\n-6.968°C"

    html = cell.to_html()
    assert 'data-month="0"' in html
    assert 'data-year="1753"' in html
    assert 'data-temp="1.692"' in html


def test_cells_follow_scales(dataset, layout):
    page, scales, svg = _render(dataset, layout)
    cells = svg.select_all(".cell")
    assert len(cells) == len(dataset)
    for cell, obs in zip(cells, dataset.monthly_variance):
        assert cell.datum == obs
        assert cell.attr("data-month") == obs.month - 1
        assert cell.attr("x") == pytest.approx(scales.x(obs.year))
        assert cell.attr("fill") == scales.color(obs.variance)
        assert cell.style("stroke") == "none"
        assert cell.style("opacity") == 1


def test_canvas_size_and_container(dataset, layout):
    page, _, svg = _render(dataset, layout)
    assert svg.parent is page.app
    assert svg.attr("width") == layout.width
    assert svg.attr("height") == layout.height


def test_axes_present(dataset, layout):
    page, _, _ = _render(dataset, layout)
    x_axis = page.select("#x-axis")
    y_axis = page.select("#y-axis")
    assert x_axis.attr("transform") == "translate(0,380)"
    assert y_axis.attr("transform") == "translate(100,0)"

    year_labels = [t.text() for t in x_axis.select_all("text")]
    assert year_labels and all(label.isdigit() for label in year_labels)
    month_labels = [t.text() for t in y_axis.select_all("text")]
    assert month_labels[0] == "January"
    assert month_labels[-1] == "December"
    assert len(month_labels) == 12


def test_legend(dataset, layout):
    page, scales, svg = _render(dataset, layout)
    legend = page.select("#legend")
    assert legend is not None
    bar = legend.select(".tempmap-legend-bar")
    assert bar.attr("fill") == "url(#legend-gradient)"
    assert bar.attr("width") == layout.inner_width

    stops = svg.select_all("stop")
    values = scales.color.ticks()
    n = len(values)
    assert n == 9
    assert len(stops) == n
    for i, (stop, value) in enumerate(zip(stops, values)):
        assert stop.attr("stop-color") == scales.color(value)
        assert float(stop.attr("offset").rstrip("%")) == pytest.approx(i / (n - 1) * 100, abs=0.01)
    assert stops[0].attr("stop-color") == scales.color(-2.0)
    assert stops[-1].attr("stop-color") == "#ffa500"
    assert legend.select(".tempmap-axis") is not None


def test_empty_dataset_renders_axes_only(layout):
    page, _, svg = _render(Dataset.empty(), layout)
    assert page.select_all(".cell") == []
    assert page.select("#x-axis") is not None
    assert page.select("#y-axis") is not None
    assert page.select("#legend") is not None


def test_render_twice_is_consistent(dataset, layout):
    page = Page()
    _, _, first = _render(dataset, layout, page)
    _, _, second = _render(dataset, layout, page)
    assert len(page.select_all("svg")) == 2
    assert _cell_attrs(first) == _cell_attrs(second)


def test_legend_can_be_hidden(dataset, layout):
    page = Page()
    scales = build_scales(dataset, layout)
    HeatmapArtist(dataset, scales, layout, show_legend=False).render(page)
    assert page.select("#legend") is None


def test_render_twice_uses_distinct_gradient_ids(dataset, layout):
    page = Page()
    _render(dataset, layout, page)
    _render(dataset, layout, page)
    gradient_ids = [g.attr("id") for g in page.select_all("linearGradient")]
    assert gradient_ids == ["legend-gradient", "legend-gradient-2"]
    bars = page.select_all(".tempmap-legend-bar")
    assert [b.attr("fill") for b in bars] == ["url(#legend-gradient)", "url(#legend-gradient-2)"]


def test_extreme_variances_render(layout):
    dataset = Dataset.from_json({
        "baseTemperature": 8.66,
        "monthlyVariance": [
            {"year": 1900, "month": 1, "variance": -1e308},
            {"year": 1901, "month": 2, "variance": 1e308},
        ],
    })
    page, _, svg = _render(dataset, layout)
    cells = svg.select_all(".cell")
    assert [c.attr("fill") for c in cells] == ["#800080", "#ffa500"]
    assert page.select("#legend") is not None
