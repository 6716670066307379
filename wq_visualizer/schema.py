"""
Column-type inference and dataset assembly.

A column is numeric as soon as any row holds a non-blank value that
converts to a finite number; every other column is categorical.  With
no rows there is no evidence, so all columns come out categorical.
"""

from typing import FrozenSet, Iterable, Sequence, Tuple

from .data_model import Dataset, ParseIssue, Row
from .values import is_blank, to_number


def _is_numeric_column(rows: Sequence[Row], column: str) -> bool:
    for row in rows:
        value = row.get(column)
        if not is_blank(value) and to_number(value) is not None:
            return True
    return False


def infer(
    rows: Sequence[Row],
    headers: Sequence[str],
) -> Tuple[FrozenSet[str], FrozenSet[str]]:
    """Classify every header as numeric or categorical.

    Returns
    -------
    numeric_columns, categorical_columns : frozenset of str
        A partition of *headers*.
    """
    numeric = frozenset(h for h in headers if _is_numeric_column(rows, h))
    categorical = frozenset(h for h in headers if h not in numeric)
    return numeric, categorical


def build_dataset(
    rows: Sequence[Row],
    headers: Sequence[str],
    *,
    source_name: str = "",
    parse_errors: Iterable[ParseIssue] = (),
) -> Dataset:
    """Infer column types and freeze the result into a ``Dataset``.

    Rows missing a header key get ``None`` for it so that every row
    carries the full header set.
    """
    headers = tuple(headers)
    full_rows = tuple(
        {h: row.get(h) for h in headers} for row in rows
    )
    numeric, categorical = infer(full_rows, headers)
    return Dataset(
        rows=full_rows,
        headers=headers,
        numeric_columns=numeric,
        categorical_columns=categorical,
        source_name=source_name,
        parse_errors=tuple(parse_errors),
    )
