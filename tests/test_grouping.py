from wq_visualizer.constants import ALL_GROUP
from wq_visualizer.grouping import group_by


def test_no_key_gives_single_group_in_order(sample_rows):
    groups = group_by(sample_rows)
    assert list(groups) == [ALL_GROUP]
    assert groups[ALL_GROUP] == sample_rows


def test_groups_follow_first_seen_order(sample_rows):
    groups = group_by(sample_rows, 'Site')
    assert list(groups) == ['A', 'B']
    assert [r['pH'] for r in groups['A']] == [7.0, 7.5]
    assert [r['pH'] for r in groups['B']] == [8.0, 8.4]


def test_group_sizes_sum_to_row_count(sample_rows):
    for key in (None, 'Site', 'Date', 'pH'):
        groups = group_by(sample_rows, key)
        assert sum(len(members) for members in groups.values()) == len(sample_rows)


def test_numeric_and_string_keys_are_distinct():
    rows = [{'k': 1}, {'k': '1'}, {'k': 1}]
    groups = group_by(rows, 'k')
    assert list(groups) == [1, '1']
    assert len(groups[1]) == 2
    assert len(groups['1']) == 1


def test_missing_values_form_their_own_group():
    rows = [{'k': None}, {'k': 'A'}, {'k': None}]
    groups = group_by(rows, 'k')
    assert list(groups) == [None, 'A']
    assert len(groups[None]) == 2


def test_empty_rows():
    assert group_by([], 'Site') == {}
    assert group_by([]) == {ALL_GROUP: []}
