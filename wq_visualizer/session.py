"""
Analysis session: the one piece of mutable state in the application.

An ``AnalysisSession`` owns the current ``Dataset`` and the last chart
that was built from it.  Loading a file replaces both in one step; a
failed load or render leaves them exactly as they were, so the window
keeps showing the previous data.
"""

import logging
import os
from typing import List, Mapping, Optional

from .constants import CHART_LINE, DATE_COLUMN_HINTS, PARAM_META, SITE_COLUMN_HINTS
from .csv_parser import load_csv_file, parse
from .data_model import ChartSelection, ChartSpec, Dataset, ParameterMeta, SiteScore, SummaryStats
from .errors import UnsupportedFile
from .schema import build_dataset
from .series_builder import build_chart_spec
from .summary_stats import summarize
from .wqi import score_dataset

logger = logging.getLogger(__name__)


def check_csv_extension(filename: str) -> None:
    """Upload validation: only ``.csv`` names are accepted.

    Raises
    ------
    UnsupportedFile
    """
    if not filename.lower().endswith('.csv'):
        raise UnsupportedFile()


def _last_matching(headers, hints) -> Optional[str]:
    found = None
    for header in headers:
        lowered = header.lower()
        if any(hint in lowered for hint in hints):
            found = header
    return found


def default_selection(dataset: Dataset) -> ChartSelection:
    """Initial chart choices for a freshly loaded dataset.

    - x-axis: the last date/time-like column, else the first column
    - colour by: the last categorical site/location column, else none
    - parameters: every numeric column
    - kind: line
    """
    headers = dataset.headers
    x_column = _last_matching(headers, DATE_COLUMN_HINTS)
    if x_column is None:
        x_column = headers[0] if headers else ''
    return ChartSelection(
        x_column=x_column,
        value_columns=tuple(dataset.numeric_headers()),
        group_column=_last_matching(dataset.categorical_headers(), SITE_COLUMN_HINTS),
        kind=CHART_LINE,
    )


class AnalysisSession:
    """Current dataset plus everything derived from it on request."""

    def __init__(self, parameters: Mapping[str, ParameterMeta] = PARAM_META):
        self._parameters = parameters
        self._dataset: Optional[Dataset] = None
        self._chart: Optional[ChartSpec] = None

    # ── State ────────────────────────────────────────────────────────

    @property
    def dataset(self) -> Optional[Dataset]:
        return self._dataset

    @property
    def chart(self) -> Optional[ChartSpec]:
        """The last successfully built chart, or ``None``."""
        return self._chart

    @property
    def parameters(self) -> Mapping[str, ParameterMeta]:
        return self._parameters

    def _require_dataset(self) -> Dataset:
        if self._dataset is None:
            raise ValueError("Load a CSV file first.")
        return self._dataset

    def _replace(self, dataset: Dataset) -> Dataset:
        self._dataset = dataset
        self._chart = None
        logger.info(
            "Loaded %s: %d rows, %d columns (%d numeric)",
            dataset.source_name or 'data', dataset.row_count,
            len(dataset.headers), len(dataset.numeric_columns),
        )
        return dataset

    # ── Loading ──────────────────────────────────────────────────────

    def load_text(self, text: str, source_name: str = "") -> Dataset:
        """Parse CSV *text* and make it the current dataset.

        Raises
        ------
        ParseError
            The previous dataset stays current.
        """
        rows, headers, issues = parse(text)
        return self._replace(build_dataset(
            rows, headers, source_name=source_name, parse_errors=issues,
        ))

    def load_file(self, path: str) -> Dataset:
        """Validate, read and parse the CSV at *path*.

        Raises
        ------
        UnsupportedFile, UnreadableFile, ParseError
            The previous dataset stays current.
        """
        check_csv_extension(path)
        rows, headers, issues = load_csv_file(path)
        return self._replace(build_dataset(
            rows, headers,
            source_name=os.path.basename(path),
            parse_errors=issues,
        ))

    # ── Derived views ────────────────────────────────────────────────

    def default_selection(self) -> ChartSelection:
        return default_selection(self._require_dataset())

    def render(self, selection: ChartSelection) -> ChartSpec:
        """Build the chart for *selection* and remember it.

        Raises
        ------
        NoParametersSelected
            ``chart`` is left unchanged.
        """
        spec = build_chart_spec(self._require_dataset(), selection)
        self._chart = spec
        return spec

    def summary(self) -> SummaryStats:
        return summarize(self._require_dataset(), self._parameters)

    def site_scores(self) -> Optional[List[SiteScore]]:
        """Per-site WQI, or ``None`` when the feature does not apply."""
        return score_dataset(self._require_dataset(), self._parameters)
