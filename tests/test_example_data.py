from wq_visualizer.constants import PARAM_META
from wq_visualizer.session import AnalysisSession
from wq_visualizer.example_data import SAMPLE_FILENAME, generate_sample_csv


def test_sample_data_loads(tmp_path):
    path = generate_sample_csv(str(tmp_path / SAMPLE_FILENAME))
    session = AnalysisSession()
    dataset = session.load_file(path)

    assert dataset.row_count == 36
    assert dataset.headers[:2] == ('Date', 'Site')
    assert set(PARAM_META) <= dataset.numeric_columns

    scores = session.site_scores()
    assert [s.site for s in scores] == ['Upstream Weir', 'Town Bridge', 'Outfall']
    assert all(s.reading_count == 12 for s in scores)
    # the outfall is the most polluted site
    assert scores[2].wqi < scores[0].wqi


def test_sample_data_is_deterministic(tmp_path):
    first = generate_sample_csv(str(tmp_path / "a.csv"), seed=7)
    second = generate_sample_csv(str(tmp_path / "b.csv"), seed=7)
    with open(first, encoding='utf-8') as fa, open(second, encoding='utf-8') as fb:
        assert fa.read() == fb.read()


def test_sample_data_months(tmp_path):
    path = generate_sample_csv(str(tmp_path / "short.csv"), months=2)
    with open(path, encoding='utf-8') as fh:
        lines = fh.read().splitlines()
    assert len(lines) == 1 + 2 * 3
    assert lines[1].startswith('2024-01-15,Upstream Weir')
    assert lines[-1].startswith('2024-02-15,Outfall')
