import itertools

from wq_visualizer.schema import build_dataset, infer


HEADERS = ['Date', 'Site', 'pH', 'Mixed', 'Empty']
ROWS = [
    {'Date': '2024-01-01', 'Site': 'A', 'pH': 7.1, 'Mixed': 'n/a', 'Empty': None},
    {'Date': '2024-01-02', 'Site': 'B', 'pH': None, 'Mixed': '4.5', 'Empty': ''},
    {'Date': '2024-01-03', 'Site': 12, 'pH': 6.9, 'Mixed': 'bad', 'Empty': None},
]


def test_infer_classifies_columns():
    numeric, categorical = infer(ROWS, HEADERS)
    # 'Site' holds a number in one row, which is enough evidence
    assert numeric == {'pH', 'Mixed', 'Site'}
    assert categorical == {'Date', 'Empty'}


def test_infer_partitions_headers():
    numeric, categorical = infer(ROWS, HEADERS)
    assert not numeric & categorical
    assert numeric | categorical == set(HEADERS)


def test_infer_is_row_order_independent():
    expected = infer(ROWS, HEADERS)
    for permutation in itertools.permutations(ROWS):
        assert infer(list(permutation), HEADERS) == expected


def test_infer_with_no_rows_is_all_categorical():
    numeric, categorical = infer([], HEADERS)
    assert numeric == frozenset()
    assert categorical == set(HEADERS)


def test_infer_ignores_non_finite_strings():
    numeric, _ = infer([{'x': 'inf'}, {'x': 'NaN'}], ['x'])
    assert numeric == frozenset()


def test_build_dataset_fills_missing_keys():
    dataset = build_dataset([{'a': 1}], ['a', 'b'], source_name='x.csv')
    assert dataset.rows == ({'a': 1, 'b': None},)
    assert dataset.headers == ('a', 'b')
    assert dataset.numeric_headers() == ['a']
    assert dataset.categorical_headers() == ['b']
    assert dataset.row_count == 1
    assert dataset.source_name == 'x.csv'


def test_build_dataset_does_not_share_caller_rows():
    rows = [{'a': 1}]
    dataset = build_dataset(rows, ['a'])
    rows[0]['a'] = 99
    assert dataset.rows[0]['a'] == 1
