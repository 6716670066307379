import pytest

from wq_visualizer.data_model import ChartSelection
from wq_visualizer.errors import (
    NoParametersSelected, ParseError, UnreadableFile, UnsupportedFile,
    WaterQualityError,
)
from wq_visualizer.session import AnalysisSession, check_csv_extension


@pytest.fixture
def session(sample_csv_text):
    s = AnalysisSession()
    s.load_text(sample_csv_text, source_name='readings.csv')
    return s


def test_load_text_builds_dataset(session):
    dataset = session.dataset
    assert dataset.source_name == 'readings.csv'
    assert dataset.row_count == 4
    assert dataset.numeric_columns == {'pH', 'Turbidity_NTU', 'Coliform_CFU_100mL'}
    assert dataset.categorical_columns == {'Date', 'Site', 'Notes'}
    assert session.chart is None


def test_default_selection(session):
    selection = session.default_selection()
    assert selection.x_column == 'Date'
    assert selection.group_column == 'Site'
    assert selection.value_columns == ('pH', 'Turbidity_NTU', 'Coliform_CFU_100mL')
    assert selection.kind == 'line'


def test_default_selection_without_hints():
    s = AnalysisSession()
    s.load_text("Station,Reading\nX,1\n")
    selection = s.default_selection()
    assert selection.x_column == 'Station'
    assert selection.group_column is None
    assert selection.value_columns == ('Reading',)


def test_render_stores_chart(session):
    spec = session.render(session.default_selection())
    assert session.chart is spec
    assert len(spec.series) == 6


def test_failed_render_keeps_previous_chart(session):
    spec = session.render(session.default_selection())
    with pytest.raises(NoParametersSelected):
        session.render(ChartSelection('Date', ()))
    assert session.chart is spec


def test_parse_failure_keeps_previous_dataset(session):
    before = session.dataset
    with pytest.raises(ParseError):
        session.load_text("")
    assert session.dataset is before


def test_new_load_clears_chart(session):
    session.render(session.default_selection())
    session.load_text("Site,pH\nA,7\n")
    assert session.chart is None
    assert session.dataset.headers == ('Site', 'pH')


def test_summary_and_scores(session):
    assert session.summary().site_count == 2
    scores = session.site_scores()
    assert [s.site for s in scores] == ['A', 'B']
    assert all(s.wqi is not None for s in scores)


def test_derived_views_need_a_dataset():
    s = AnalysisSession()
    assert s.dataset is None
    with pytest.raises(ValueError, match="Load a CSV file first"):
        s.summary()


def test_load_file(tmp_path, sample_csv_text):
    path = tmp_path / "readings.csv"
    path.write_text(sample_csv_text, encoding='utf-8')
    s = AnalysisSession()
    dataset = s.load_file(str(path))
    assert dataset.source_name == 'readings.csv'
    assert dataset.row_count == 4


def test_load_file_rejects_non_csv(tmp_path, session):
    before = session.dataset
    path = tmp_path / "readings.xlsx"
    path.write_text("Site,pH\nA,7\n", encoding='utf-8')
    with pytest.raises(UnsupportedFile) as excinfo:
        session.load_file(str(path))
    assert str(excinfo.value) == "Please upload a CSV file (.csv)."
    assert session.dataset is before


def test_load_file_unreadable(tmp_path, session):
    before = session.dataset
    with pytest.raises(UnreadableFile):
        session.load_file(str(tmp_path / "gone.csv"))
    assert session.dataset is before


@pytest.mark.parametrize("name", ["data.csv", "DATA.CSV", "a.b.Csv"])
def test_check_csv_extension_accepts(name):
    check_csv_extension(name)


@pytest.mark.parametrize("name", ["data.txt", "data.csv.bak", "csv", ""])
def test_check_csv_extension_rejects(name):
    with pytest.raises(WaterQualityError):
        check_csv_extension(name)


def test_custom_parameter_table_reaches_scores(sample_csv_text):
    s = AnalysisSession(parameters={})
    s.load_text(sample_csv_text)
    assert s.parameters == {}
    assert s.site_scores() is None


def test_site_score_from_csv_text():
    s = AnalysisSession()
    s.load_text(
        "Date,Site,pH,Coliform_CFU_100mL\n"
        "2024-01-01,A,7.0,0\n"
        "2024-01-02,A,8.9,0\n"
    )
    scores = s.site_scores()
    assert len(scores) == 1
    assert scores[0].site == 'A'
    assert scores[0].wqi == 89
    assert scores[0].tier == 'Good'
