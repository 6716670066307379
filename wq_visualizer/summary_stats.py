"""
Headline statistics for a loaded dataset.

Reading count, parameter count, number of monitoring sites, and the
average of the first few numeric columns.
"""

from typing import Mapping, Optional, Sequence

import numpy as np

from .constants import NO_VALUE_TEXT, PARAM_META, SITE_COLUMN_HINTS, SUMMARY_AVERAGE_LIMIT
from .data_model import Dataset, ParameterAverage, ParameterMeta, SummaryStats
from .values import friendly_name, round_half_away, to_number


def find_site_column(headers: Sequence[str]) -> Optional[str]:
    """Return the first header that names a site or location, if any.

    Case-insensitive substring match on ``"location"`` / ``"site"``.
    This is the single place the heuristic lives; WQI scoring and the
    summary both go through it.
    """
    for header in headers:
        lowered = header.lower()
        if any(hint in lowered for hint in SITE_COLUMN_HINTS):
            return header
    return None


def column_mean(dataset: Dataset, column: str) -> Optional[float]:
    """Mean of the valid numeric values in *column*, or ``None``."""
    values = [
        v for v in (to_number(row.get(column)) for row in dataset.rows)
        if v is not None
    ]
    if not values:
        return None
    return float(np.mean(values))


def summarize(
    dataset: Dataset,
    parameters: Mapping[str, ParameterMeta] = PARAM_META,
    *,
    average_limit: int = SUMMARY_AVERAGE_LIMIT,
) -> SummaryStats:
    """Compute ``SummaryStats`` for *dataset*.

    Parameters
    ----------
    dataset : Dataset
    parameters : mapping
        Parameter metadata table used for average labels and units.
    average_limit : int
        How many numeric columns (in header order) get an average.
    """
    site_column = find_site_column(dataset.headers)
    if site_column is None:
        site_count = None
    else:
        site_count = len(dict.fromkeys(row.get(site_column) for row in dataset.rows))

    averages = []
    for column in dataset.numeric_headers()[:average_limit]:
        meta = parameters.get(column)
        mean = column_mean(dataset, column)
        averages.append(ParameterAverage(
            column=column,
            label=meta.label if meta else friendly_name(column),
            unit=meta.unit if meta else '',
            mean=None if mean is None else round_half_away(mean, 2),
        ))

    return SummaryStats(
        total_readings=dataset.row_count,
        parameter_count=len(dataset.numeric_columns),
        site_count=site_count,
        averages=tuple(averages),
    )


def format_average(average: ParameterAverage) -> str:
    """Two-decimal text for an average card; a dash when there is no value."""
    if average.mean is None:
        return NO_VALUE_TEXT
    return f"{average.mean:.2f}"
