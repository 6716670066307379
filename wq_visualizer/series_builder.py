"""
Chart series construction.

Reshapes dataset rows into named series aligned on a shared label axis
so that any plotting backend can draw them without further lookups.

Label axis
    Distinct stringified x values over *all* rows.  Line and area
    charts sort them (dates and times read left to right); bar charts
    keep first-seen order.  See ``constants.LABEL_ORDER``.

Alignment
    Each series maps every label to the last value recorded for it in
    that series' rows.  Labels with no reading become ``None`` so the
    renderer draws a gap; values are never filled with zero.

Scatter
    Uses only the first value column.  Every row becomes one point with
    its raw x value; groups split points into series but nothing is
    aligned or de-duplicated.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from .constants import (
    CHART_AREA, CHART_KINDS, CHART_SCATTER, LABEL_ORDER, ORDER_INSERTION,
    ORDER_SORTED, SERIES_NAME_SEPARATOR,
)
from .data_model import ChartSelection, ChartSpec, Dataset, Row, ScatterPoint, Series
from .errors import NoParametersSelected
from .grouping import group_by
from .values import friendly_name, label_text, to_number

logger = logging.getLogger(__name__)


def label_axis(rows: Sequence[Row], x_column: str, order: str) -> Tuple[str, ...]:
    """Distinct stringified *x_column* values, ordered per *order*."""
    labels = tuple(dict.fromkeys(label_text(row.get(x_column)) for row in rows))
    if order == ORDER_SORTED:
        return tuple(sorted(labels))
    if order == ORDER_INSERTION:
        return labels
    raise ValueError(f"Unknown label order: {order!r}")


def series_name(column: str, group: Any = None, grouped: bool = False) -> str:
    if not grouped:
        return friendly_name(column)
    return f"{friendly_name(column)}{SERIES_NAME_SEPARATOR}{label_text(group)}"


def _aligned_values(
    rows: Sequence[Row],
    x_column: str,
    column: str,
    labels: Sequence[str],
) -> Tuple[Optional[float], ...]:
    lookup = {}
    for row in rows:
        lookup[label_text(row.get(x_column))] = to_number(row.get(column))
    return tuple(lookup.get(label) for label in labels)


def _scatter_series(
    rows: Sequence[Row],
    x_column: str,
    y_column: str,
    group_column: Optional[str],
) -> List[Series]:
    series = []
    for group, members in group_by(rows, group_column).items():
        name = label_text(group) if group_column else friendly_name(y_column)
        points = tuple(
            ScatterPoint(row.get(x_column), to_number(row.get(y_column)))
            for row in members
        )
        series.append(Series(
            name=name,
            column=y_column,
            group=group if group_column else None,
            points=points,
        ))
    return series


def build_series(
    rows: Sequence[Row],
    x_column: str,
    value_columns: Sequence[str],
    group_column: Optional[str] = None,
    kind: str = "line",
    *,
    label_order: Optional[str] = None,
) -> Tuple[Tuple[str, ...], List[Series]]:
    """Build the label axis and one series per column (× group).

    Parameters
    ----------
    rows : sequence of dict
    x_column : str
        Column providing the x-axis.
    value_columns : sequence of str
        Columns to plot, in legend order.
    group_column : str or None
        Categorical column splitting each parameter into one series per
        distinct value.
    kind : str
        One of ``constants.CHART_KINDS``.
    label_order : str or None
        Overrides the kind's default ``LABEL_ORDER`` entry.

    Returns
    -------
    labels : tuple of str
        Shared label axis (empty for scatter).
    series : list of Series

    Raises
    ------
    NoParametersSelected
        If *value_columns* is empty.
    ValueError
        If *kind* is not a known chart kind.
    """
    if not value_columns:
        raise NoParametersSelected()
    if kind not in CHART_KINDS:
        raise ValueError(f"Unknown chart kind: {kind!r}")

    if kind == CHART_SCATTER:
        return (), _scatter_series(rows, x_column, value_columns[0], group_column)

    labels = label_axis(rows, x_column, label_order or LABEL_ORDER[kind])
    groups = group_by(rows, group_column)
    grouped = group_column is not None

    series = []
    for column in value_columns:
        for group, members in groups.items():
            series.append(Series(
                name=series_name(column, group, grouped),
                column=column,
                group=group if grouped else None,
                values=_aligned_values(members, x_column, column, labels),
            ))
    return labels, series


def build_chart_spec(
    dataset: Dataset,
    selection: ChartSelection,
    *,
    label_order: Optional[str] = None,
) -> ChartSpec:
    """Build a ``ChartSpec`` for *selection* over *dataset*.

    Columns missing from the dataset are not an error: they read as
    missing values, so their series are all gaps.

    Raises
    ------
    NoParametersSelected
        If the selection has no value columns.
    """
    if not selection.value_columns:
        raise NoParametersSelected()
    wanted = [selection.x_column, *selection.value_columns]
    if selection.group_column:
        wanted.append(selection.group_column)
    unknown = [c for c in wanted if c not in dataset.headers]
    if unknown:
        logger.warning(
            "Columns not in %s: %s",
            dataset.source_name or 'dataset', ', '.join(unknown),
        )

    labels, series = build_series(
        dataset.rows,
        selection.x_column,
        selection.value_columns,
        selection.group_column or None,
        selection.kind,
        label_order=label_order,
    )
    is_scatter = selection.kind == CHART_SCATTER
    return ChartSpec(
        kind=selection.kind,
        labels=tuple(labels),
        series=tuple(series),
        x_column=selection.x_column,
        y_column=selection.value_columns[0] if is_scatter else None,
        fill=selection.kind == CHART_AREA,
    )
