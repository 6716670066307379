import pytest

from wq_visualizer.data_model import ParameterAverage
from wq_visualizer.schema import build_dataset
from wq_visualizer.summary_stats import (
    column_mean, find_site_column, format_average, summarize,
)


@pytest.mark.parametrize("headers, expected", [
    (['Date', 'Site', 'pH'], 'Site'),
    (['Date', 'Sample_Location', 'SiteCode'], 'Sample_Location'),
    (['Date', 'MONITORING SITE'], 'MONITORING SITE'),
    (['Date', 'pH'], None),
    ([], None),
])
def test_find_site_column(headers, expected):
    assert find_site_column(headers) == expected


def test_summarize(sample_dataset):
    stats = summarize(sample_dataset)
    assert stats.total_readings == 4
    assert stats.parameter_count == 2
    assert stats.site_count == 2
    assert [a.column for a in stats.averages] == ['pH', 'Turbidity_NTU']

    ph, turbidity = stats.averages
    assert ph.label == 'pH'
    assert ph.mean == pytest.approx(7.725, abs=0.006)
    # the missing reading is left out, not counted as zero
    assert turbidity.mean == pytest.approx(3.5)
    assert turbidity.unit == 'NTU'


def test_summarize_without_site_column(sample_rows):
    stats = summarize(build_dataset(sample_rows, ['Date', 'pH']))
    assert stats.site_count is None


def test_summarize_limits_averages():
    headers = ['a', 'b', 'c', 'd', 'e', 'f']
    row = {h: i for i, h in enumerate(headers)}
    stats = summarize(build_dataset([row], headers))
    assert [a.column for a in stats.averages] == ['a', 'b', 'c', 'd']
    assert stats.averages[0].label == 'a'
    assert stats.averages[0].unit == ''

    stats = summarize(build_dataset([row], headers), average_limit=2)
    assert len(stats.averages) == 2


def test_summarize_empty_dataset():
    stats = summarize(build_dataset([], ['Site', 'pH']))
    assert stats.total_readings == 0
    assert stats.parameter_count == 0
    assert stats.site_count == 0
    assert stats.averages == ()


def test_column_mean_ignores_non_numeric():
    dataset = build_dataset(
        [{'x': 1}, {'x': 'oops'}, {'x': None}, {'x': 4}], ['x'],
    )
    assert column_mean(dataset, 'x') == pytest.approx(2.5)
    assert column_mean(build_dataset([{'x': 'oops'}], ['x']), 'x') is None


def test_format_average():
    assert format_average(ParameterAverage('pH', 'pH', '', 7.1)) == '7.10'
    assert format_average(ParameterAverage('pH', 'pH', '', None)) == '—'


def test_average_ties_round_up():
    dataset = build_dataset([{'Nitrate_mg_L': 0.125}], ['Nitrate_mg_L'])
    assert summarize(dataset).averages[0].mean == 0.13
