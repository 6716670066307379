"""
Data model for the Water Quality Visualizer.

Immutable dataclasses describing a loaded dataset and everything
derived from it.  A ``Dataset`` is built once per file load by
``schema.build_dataset`` and never mutated; chart series, site scores
and summary statistics are recomputed from it on demand.

Missing data is modelled as ``None`` (not ``NaN``) throughout.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

Row = Dict[str, Any]


@dataclass(frozen=True)
class ParameterMeta:
    """Display and scoring metadata for one known parameter.

    Parameters
    ----------
    label : str
        Human-readable name, e.g. ``"Dissolved Oxygen"``.
    unit : str
        Unit string, e.g. ``"mg/L"``.  Empty for unitless parameters.
    safe_range : tuple of float
        Inclusive ``(lo, hi)`` bounds considered acceptable.
    contamination : bool
        ``True`` for count-type contamination parameters (coliform),
        where any non-zero reading is a penalty.
    """
    label: str
    unit: str
    safe_range: Tuple[float, float]
    contamination: bool = False

    def __post_init__(self):
        lo, hi = self.safe_range
        if lo > hi:
            raise ValueError(
                f"Safe range for '{self.label}' is inverted: ({lo}, {hi})"
            )


@dataclass(frozen=True)
class ParseIssue:
    """One problem reported while reading a CSV.

    ``row`` is the 0-based data row index (header excluded), or
    ``None`` for problems not tied to a row.
    """
    code: str
    message: str
    row: Optional[int] = None


@dataclass(frozen=True)
class Dataset:
    """A parsed CSV plus its column classification.

    ``numeric_columns`` and ``categorical_columns`` always partition
    ``headers``.
    """
    rows: Tuple[Row, ...]
    headers: Tuple[str, ...]
    numeric_columns: FrozenSet[str]
    categorical_columns: FrozenSet[str]
    source_name: str = ""
    parse_errors: Tuple[ParseIssue, ...] = ()

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def numeric_headers(self) -> List[str]:
        """Numeric columns in header order."""
        return [h for h in self.headers if h in self.numeric_columns]

    def categorical_headers(self) -> List[str]:
        """Categorical columns in header order."""
        return [h for h in self.headers if h in self.categorical_columns]


@dataclass(frozen=True)
class ScatterPoint:
    x: Any
    y: Optional[float]


@dataclass(frozen=True)
class Series:
    """One named series of a chart.

    Line, area and bar series carry ``values`` aligned to the chart's
    label axis (``None`` marks a gap).  Scatter series carry ``points``
    instead.
    """
    name: str
    column: str
    group: Any = None
    values: Tuple[Optional[float], ...] = ()
    points: Tuple[ScatterPoint, ...] = ()


@dataclass(frozen=True)
class ChartSelection:
    """User choices that drive one chart render."""
    x_column: str
    value_columns: Tuple[str, ...]
    group_column: Optional[str] = None
    kind: str = "line"


@dataclass(frozen=True)
class ChartSpec:
    """Library-neutral description of a chart.

    Parameters
    ----------
    kind : str
        ``"line"``, ``"area"``, ``"bar"`` or ``"scatter"``.
    labels : tuple of str
        Shared label axis (empty for scatter).
    series : tuple of Series
    x_column : str
        Column plotted along the x-axis.
    y_column : str or None
        Y column for scatter charts.
    fill : bool
        ``True`` when the area under each line is filled.
    """
    kind: str
    labels: Tuple[str, ...]
    series: Tuple[Series, ...]
    x_column: str
    y_column: Optional[str] = None
    fill: bool = False

    @property
    def is_empty(self) -> bool:
        if self.kind == "scatter":
            return not any(s.points for s in self.series)
        return not self.labels or not self.series


@dataclass(frozen=True)
class SiteScore:
    """Water Quality Index for one monitoring site.

    ``wqi`` and ``tier`` are ``None`` when no known parameter could be
    scored for the site.
    """
    site: Any
    reading_count: int
    wqi: Optional[int]
    tier: Optional[str]
    tier_key: Optional[str] = None
    sub_indices: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class ParameterAverage:
    column: str
    label: str
    unit: str
    mean: Optional[float]


@dataclass(frozen=True)
class SummaryStats:
    """Headline metrics shown above the chart.

    ``site_count`` is ``None`` when the dataset has no site/location
    column.
    """
    total_readings: int
    parameter_count: int
    site_count: Optional[int]
    averages: Tuple[ParameterAverage, ...] = ()
