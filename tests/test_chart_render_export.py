import csv

import numpy as np
import pytest
from matplotlib.figure import Figure

from wq_visualizer.chart_render import render_chart
from wq_visualizer.data_model import ChartSelection, ChartSpec, SiteScore
from wq_visualizer.export import export_chart_png, export_site_scores_csv
from wq_visualizer.series_builder import build_chart_spec


@pytest.mark.parametrize("kind", ["line", "area", "bar"])
def test_render_label_kinds(sample_dataset, kind):
    spec = build_chart_spec(sample_dataset, ChartSelection('Date', ('pH',), 'Site', kind))
    fig = Figure()
    render_chart(fig, spec)

    ax = fig.axes[0]
    assert [t.get_text() for t in ax.get_xticklabels()] == list(spec.labels)
    assert ax.get_ylabel() == 'pH'
    legend = ax.get_legend()
    assert [t.get_text() for t in legend.get_texts()] == ['p H – A', 'p H – B']


def test_line_spans_gaps(sample_dataset):
    spec = build_chart_spec(sample_dataset, ChartSelection('Date', ('pH',), 'Site', 'line'))
    fig = Figure()
    render_chart(fig, spec)
    lines = fig.axes[0].get_lines()
    # site B has readings at positions 0 and 2 only
    assert list(lines[1].get_xdata()) == [0, 2]
    assert list(lines[1].get_ydata()) == [8.0, 8.4]


def test_bar_gaps_are_nan(sample_dataset):
    spec = build_chart_spec(sample_dataset, ChartSelection('Date', ('pH',), 'Site', 'bar'))
    fig = Figure()
    render_chart(fig, spec)
    heights = [p.get_height() for p in fig.axes[0].patches]
    assert len(heights) == 6
    assert sum(np.isnan(h) for h in heights) == 3


def test_area_fills_below_lines(sample_dataset):
    spec = build_chart_spec(sample_dataset, ChartSelection('Date', ('pH',), None, 'area'))
    fig = Figure()
    render_chart(fig, spec)
    assert len(fig.axes[0].collections) == 1


def test_scatter_uses_numeric_x(sample_dataset):
    spec = build_chart_spec(
        sample_dataset, ChartSelection('pH', ('Turbidity_NTU',), 'Site', 'scatter'),
    )
    fig = Figure()
    render_chart(fig, spec)
    ax = fig.axes[0]
    assert len(ax.collections) == 2
    assert ax.get_xlabel() == 'p H'
    assert ax.get_ylabel() == 'Turbidity NTU'


def test_empty_spec_shows_notice():
    fig = Figure()
    render_chart(fig, ChartSpec(kind='line', labels=(), series=(), x_column='Date'))
    ax = fig.axes[0]
    assert not ax.axison
    assert ax.texts[0].get_text() == 'No valid data points'


def test_mixed_units_fall_back_to_value_label(sample_dataset):
    spec = build_chart_spec(
        sample_dataset, ChartSelection('Date', ('pH', 'Turbidity_NTU'), None, 'line'),
    )
    fig = Figure()
    render_chart(fig, spec)
    assert fig.axes[0].get_ylabel() == 'Value'


def test_export_chart_png(tmp_path, sample_dataset):
    spec = build_chart_spec(sample_dataset, ChartSelection('Date', ('pH',), 'Site', 'line'))
    path = export_chart_png(spec, str(tmp_path / "chart"), dpi=50)
    assert path.endswith("chart.png")
    with open(path, 'rb') as fh:
        assert fh.read(8) == b'\x89PNG\r\n\x1a\n'


def test_export_site_scores_csv(tmp_path):
    scores = [
        SiteScore('A', 3, 91, 'Excellent', 'excellent'),
        SiteScore('B', 1, None, None),
    ]
    path = export_site_scores_csv(scores, str(tmp_path / "out" / "scores.csv"))
    with open(path, encoding='utf-8', newline='') as fh:
        rows = list(csv.reader(fh))
    assert rows == [
        ['Site', 'Readings', 'WQI', 'Tier'],
        ['A', '3', '91', 'Excellent'],
        ['B', '1', '—', '—'],
    ]
