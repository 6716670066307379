"""
matplotlib renderer for ``ChartSpec`` values.

The series builder knows nothing about plotting; this module is the
only place that turns a spec into axes artists.  Supported kinds:

- ``line``: one line per series; gaps are spanned by joining the
  finite points on either side
- ``area``: as ``line`` with a translucent fill down to zero
- ``bar``: grouped bars, one slot per series within each label
- ``scatter``: one marker per row, one colour per group
"""

from typing import List, Mapping, Sequence

import numpy as np
from matplotlib.figure import Figure

from .constants import (
    AREA_ALPHA, BAR_ALPHA, CHART_BAR, CHART_SCATTER, GUI_COLORS,
    PALETTE, PARAM_META, PLOT_STYLE_EXPORT, SCATTER_ALPHA,
)
from .data_model import ChartSpec, ParameterMeta, Series
from .values import friendly_name, label_text, to_number

# Above this many labels only every n-th tick is labelled
_MAX_TICK_LABELS = 30
_MAX_LEGEND_ENTRIES = 12


def _values_array(series: Series) -> np.ndarray:
    return np.array(
        [np.nan if v is None else v for v in series.values], dtype=float,
    )


def _y_axis_label(columns: Sequence[str], parameters: Mapping[str, ParameterMeta]) -> str:
    """``"Value (unit)"`` when every plotted column shares one known unit."""
    if columns and all(c in parameters for c in columns):
        units = {parameters[c].unit for c in columns}
        if len(units) == 1:
            unit = units.pop()
            if len(set(columns)) == 1:
                label = parameters[columns[0]].label
                return f"{label} ({unit})" if unit else label
            if unit:
                return f"Value ({unit})"
    return "Value"


def _scatter_x_values(spec: ChartSpec) -> List[list]:
    """Numeric x values when every x is a number, else text labels."""
    raw = [[p.x for p in s.points] for s in spec.series]
    numeric = [[to_number(x) for x in xs] for xs in raw]
    if all(x is not None for xs in numeric for x in xs):
        return numeric
    return [[label_text(x) for x in xs] for xs in raw]


def _draw_scatter(ax, spec: ChartSpec) -> None:
    for idx, (series, xs) in enumerate(zip(spec.series, _scatter_x_values(spec))):
        pairs = [(x, p.y) for x, p in zip(xs, series.points) if p.y is not None]
        if not pairs:
            continue
        color = PALETTE[idx % len(PALETTE)]
        ax.scatter(
            [x for x, _ in pairs], [y for _, y in pairs],
            color=color, alpha=SCATTER_ALPHA, s=28,
            edgecolors=color, linewidths=0.6, zorder=3,
            label=series.name,
        )
    ax.set_xlabel(friendly_name(spec.x_column))
    ax.set_ylabel(friendly_name(spec.y_column or ''))


def _draw_lines(ax, spec: ChartSpec) -> None:
    x = np.arange(len(spec.labels))
    for idx, series in enumerate(spec.series):
        values = _values_array(series)
        finite = np.isfinite(values)
        if not np.any(finite):
            continue
        color = PALETTE[idx % len(PALETTE)]
        ax.plot(
            x[finite], values[finite],
            color=color, linewidth=1.4, marker='o', markersize=4,
            label=series.name, zorder=3,
        )
        if spec.fill:
            ax.fill_between(
                x[finite], values[finite], 0,
                color=color, alpha=AREA_ALPHA, zorder=2,
            )


def _draw_bars(ax, spec: ChartSpec) -> None:
    x = np.arange(len(spec.labels))
    n_series = len(spec.series)
    width = 0.8 / n_series
    for idx, series in enumerate(spec.series):
        color = PALETTE[idx % len(PALETTE)]
        offset = (idx - (n_series - 1) / 2) * width
        ax.bar(
            x + offset, _values_array(series), width=width,
            color=color, alpha=BAR_ALPHA, edgecolor=color,
            label=series.name, zorder=3,
        )


def _set_label_ticks(ax, labels: Sequence[str]) -> None:
    n_labels = len(labels)
    step = max(1, int(np.ceil(n_labels / _MAX_TICK_LABELS)))
    ticks = list(range(0, n_labels, step))
    ax.set_xticks(ticks)
    ax.set_xticklabels(
        [labels[i] for i in ticks], rotation=45, ha='right', fontsize=7,
    )
    ax.set_xlim(-0.6, n_labels - 0.4)


def _draw_legend(ax, n_series: int) -> None:
    handles, labels = ax.get_legend_handles_labels()
    if not handles:
        return
    if len(handles) > _MAX_LEGEND_ENTRIES:
        handles = handles[:_MAX_LEGEND_ENTRIES - 1]
        labels = labels[:_MAX_LEGEND_ENTRIES - 1]
        labels[-1] = f"... ({n_series - len(labels) + 1} more)"
    ax.legend(
        handles, labels,
        loc='upper left',
        bbox_to_anchor=(1.01, 1.0),
        framealpha=0.9,
    )


def render_chart(
    fig: Figure,
    spec: ChartSpec,
    *,
    parameters: Mapping[str, ParameterMeta] = PARAM_META,
    for_export: bool = False,
) -> None:
    """Render *spec* on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    spec : ChartSpec
        Output of ``series_builder.build_chart_spec``.
    parameters : mapping
        Parameter table used for unit-aware axis labels.
    for_export : bool
        If ``True``, use export text colours for the empty-chart notice.
    """
    fig.clf()
    ax = fig.add_subplot(111)

    if spec.is_empty:
        color = PLOT_STYLE_EXPORT['text.color'] if for_export else GUI_COLORS['fg_dim']
        ax.text(0.5, 0.5, 'No valid data points', color=color,
                transform=ax.transAxes, ha='center', va='center')
        ax.set_axis_off()
        return

    columns = [s.column for s in spec.series]

    if spec.kind == CHART_SCATTER:
        _draw_scatter(ax, spec)
        title = f"{friendly_name(spec.y_column or '')} vs {friendly_name(spec.x_column)}"
    else:
        if spec.kind == CHART_BAR:
            _draw_bars(ax, spec)
        else:
            _draw_lines(ax, spec)
        _set_label_ticks(ax, spec.labels)
        ax.set_xlabel(friendly_name(spec.x_column))
        ax.set_ylabel(_y_axis_label(columns, parameters))
        names = list(dict.fromkeys(friendly_name(c) for c in columns))
        title = f"{', '.join(names)} by {friendly_name(spec.x_column)}"

    ax.set_title(title, fontweight='bold')
    ax.grid(linewidth=0.4, alpha=0.5, zorder=0)
    _draw_legend(ax, len(spec.series))

    fig.tight_layout(pad=1.5)
