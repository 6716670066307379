"""
Simplified Water Quality Index (WQI) per monitoring site.

Each known parameter's site mean is turned into a 0–100 sub-index that
measures how close it sits to the middle of the parameter's safe range:

- 100 at the midpoint, 50 at either range boundary, falling linearly
  and floored at 0 beyond it.
- Contamination parameters (coliform, safe range [0, 0]) score 100 at
  exactly zero and lose one point per unit above it.
- Any other zero-width range scores a neutral 50, since no deviation
  can be measured against it.

The site WQI is the mean of its sub-indices, rounded half-up, and maps
to a quality tier by fixed lower bounds (90 / 70 / 50 / 25).

This is a heuristic for at-a-glance comparison between sites, not a
standardised scientific index.
"""

import logging
import math
from typing import Iterable, List, Mapping, Optional, Sequence

import numpy as np

from .constants import DEGENERATE_RANGE_SUB_INDEX, PARAM_META, WQI_LOWEST_TIER, WQI_TIERS
from .data_model import Dataset, ParameterMeta, Row, SiteScore
from .grouping import group_by
from .summary_stats import find_site_column
from .values import to_number

logger = logging.getLogger(__name__)


def sub_index(mean: float, meta: ParameterMeta) -> float:
    """Score a parameter mean against its safe range (0–100)."""
    lo, hi = meta.safe_range
    if meta.contamination:
        if mean == 0:
            return 100.0
        return min(100.0, max(0.0, 100.0 - mean))
    if lo == hi:
        return DEGENERATE_RANGE_SUB_INDEX
    mid = (lo + hi) / 2
    half_range = (hi - lo) / 2
    return max(0.0, 100.0 - abs(mean - mid) / half_range * 50.0)


def composite_wqi(sub_indices: Iterable[float]) -> Optional[int]:
    """Mean of *sub_indices* rounded half-up, or ``None`` if empty."""
    scores = list(sub_indices)
    if not scores:
        return None
    return int(math.floor(float(np.mean(scores)) + 0.5))


def _tier(wqi: float):
    for lower_bound, label, key in WQI_TIERS:
        if wqi >= lower_bound:
            return label, key
    return WQI_LOWEST_TIER


def classify_wqi(wqi: float) -> str:
    """Quality tier label for a composite score.

    >>> classify_wqi(90)
    'Excellent'
    >>> classify_wqi(89)
    'Good'
    >>> classify_wqi(24)
    'Very Poor'
    """
    return _tier(wqi)[0]


def tier_key(wqi: float) -> str:
    """Short style key for a composite score, e.g. ``"good"``."""
    return _tier(wqi)[1]


def _parameter_mean(rows: Sequence[Row], column: str) -> Optional[float]:
    values = [v for v in (to_number(row.get(column)) for row in rows) if v is not None]
    if not values:
        return None
    return float(np.mean(values))


def score_sites(
    rows: Sequence[Row],
    site_column: str,
    known_parameters: Sequence[str],
    parameters: Mapping[str, ParameterMeta] = PARAM_META,
) -> List[SiteScore]:
    """Compute a ``SiteScore`` for every distinct site, in first-seen order.

    Parameters
    ----------
    rows : sequence of dict
    site_column : str
        Column identifying the monitoring site.
    known_parameters : sequence of str
        Columns to score; each must be a key of *parameters*.
    parameters : mapping
        Parameter metadata table providing the safe ranges.
    """
    scores = []
    for site, site_rows in group_by(rows, site_column).items():
        sub_indices = {}
        for column in known_parameters:
            mean = _parameter_mean(site_rows, column)
            if mean is None:
                continue
            sub_indices[column] = sub_index(mean, parameters[column])

        wqi = composite_wqi(sub_indices.values())
        scores.append(SiteScore(
            site=site,
            reading_count=len(site_rows),
            wqi=wqi,
            tier=None if wqi is None else classify_wqi(wqi),
            tier_key=None if wqi is None else tier_key(wqi),
            sub_indices=sub_indices,
        ))
    return scores


def present_parameters(
    dataset: Dataset,
    parameters: Mapping[str, ParameterMeta] = PARAM_META,
) -> List[str]:
    """Known parameters present among the numeric columns, in table order."""
    return [name for name in parameters if name in dataset.numeric_columns]


def score_dataset(
    dataset: Dataset,
    parameters: Mapping[str, ParameterMeta] = PARAM_META,
) -> Optional[List[SiteScore]]:
    """Score every site of *dataset*, or return ``None`` when not applicable.

    ``None`` means the WQI feature should be hidden: the dataset has no
    site/location column or none of the known parameters.
    """
    site_column = find_site_column(dataset.headers)
    if site_column is None:
        logger.info("No site column found; WQI skipped")
        return None
    columns = present_parameters(dataset, parameters)
    if not columns:
        logger.info("No known parameters found; WQI skipped")
        return None
    scores = score_sites(dataset.rows, site_column, columns, parameters)
    logger.info("Scored %d sites on %d parameters", len(scores), len(columns))
    return scores
