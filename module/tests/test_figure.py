import json

import pytest

from tempmap.core.figure import Page
from tempmap.core.layout import Layout
from tempmap.plt import figure, main


def test_page_has_app_and_hidden_tooltip():
    page = Page(title="T", description="D")
    assert page.select("#app") is page.app
    assert page.select("#tooltip") is page.tooltip
    assert page.tooltip.style("display") == "none"
    assert page.select("#title").text() == "T"
    assert page.select("#description").text() == "D"


def test_write_html(tmp_path, dataset, layout):
    page = figure(dataset, layout, title="Heat <map>")
    out = tmp_path / "nested" / "heatmap.html"
    page.write_html(str(out))

    html = out.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Heat &lt;map&gt;</title>" in html
    assert 'id="x-axis"' in html
    assert 'id="y-axis"' in html
    assert 'id="legend"' in html
    assert html.count('class="cell tempmap-cell"') == len(dataset)
    assert 'id="tooltip"' in html
    assert ".tempmap-cell:hover" in html
    assert "<script" not in html


def test_figure_description(dataset, layout):
    page = figure(dataset, layout)
    assert page.select("#description").text() == "1753 - 1760: base temperature 8.66°C"


def test_figure_default_layout(dataset):
    page = figure(dataset)
    svg = page.select("svg")
    assert svg.attr("width") == Layout().width


def test_main_writes_html_and_csv(tmp_path, sample_payload):
    source = tmp_path / "data.json"
    source.write_text(json.dumps(sample_payload), encoding="utf-8")
    out = tmp_path / "out" / "heatmap.html"
    csv = tmp_path / "out" / "data.csv"

    code = main(["--url", str(source), "--out", str(out), "--csv", str(csv), "--width", "900", "--height", "450"])

    assert code == 0
    html = out.read_text(encoding="utf-8")
    assert 'width="900"' in html
    assert html.count("<rect class=\"cell tempmap-cell\"") == 5
    lines = csv.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "year,month,variance,temperature"
    assert len(lines) == 6


def test_main_with_unreachable_source_renders_empty_chart(tmp_path):
    out = tmp_path / "heatmap.html"
    code = main(["--url", str(tmp_path / "missing.json"), "--out", str(out)])

    assert code == 0
    html = out.read_text(encoding="utf-8")
    assert 'id="x-axis"' in html
    assert "tempmap-cell\"" not in html
    assert "No data available" in html


def test_main_demo_mode(tmp_path):
    out = tmp_path / "demo.html"
    assert main(["--demo", "--out", str(out)]) == 0
    assert out.read_text(encoding="utf-8").count('class="cell tempmap-cell"') > 0


def test_main_rejects_unknown_log_level(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--demo", "--out", str(tmp_path / "o.html"), "--log-level", "verbose"])
    assert exc.value.code == 2
    assert not (tmp_path / "o.html").exists()


def test_main_log_level_is_case_insensitive(tmp_path):
    assert main(["--demo", "--out", str(tmp_path / "o.html"), "--log-level", "debug"]) == 0
