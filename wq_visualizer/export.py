"""
Export utilities for the Water Quality Visualizer.

Charts are exported by re-rendering their ``ChartSpec`` on a fresh
figure under the light export style, so the on-screen figure is never
touched.  Site scores are written as a plain CSV table.
"""

import csv
import logging
import os
from typing import Iterable, Mapping

from matplotlib.figure import Figure

from .constants import EXPORT_DPI, EXPORT_FIGSIZE, NO_VALUE_TEXT, PARAM_META, PLOT_STYLE_EXPORT
from .chart_render import render_chart
from .data_model import ChartSpec, ParameterMeta, SiteScore
from .theme import plot_style
from .values import label_text

logger = logging.getLogger(__name__)


def export_chart_png(
    spec: ChartSpec,
    filepath: str,
    *,
    dpi: int = EXPORT_DPI,
    figsize=EXPORT_FIGSIZE,
    parameters: Mapping[str, ParameterMeta] = PARAM_META,
) -> str:
    """Render *spec* with the export style and save it as PNG.

    Parameters
    ----------
    spec : ChartSpec
    filepath : str
        Output path; ``.png`` is appended when missing.
    dpi : int
        Export resolution.
    figsize : tuple of float
        Figure size in inches.

    Returns
    -------
    str
        The path written.
    """
    if not filepath.lower().endswith('.png'):
        filepath += '.png'
    with plot_style(PLOT_STYLE_EXPORT):
        fig = Figure(figsize=figsize)
        render_chart(fig, spec, parameters=parameters, for_export=True)
        fig.savefig(
            filepath,
            dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
            pad_inches=0.1,
        )
    logger.info("Exported chart to %s", filepath)
    return filepath


def export_site_scores_csv(scores: Iterable[SiteScore], filepath: str) -> str:
    """Write site scores as ``Site,Readings,WQI,Tier`` rows.

    Sites without a score get a dash in the WQI and Tier columns.
    """
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, 'w', encoding='utf-8', newline='') as fh:
        writer = csv.writer(fh)
        writer.writerow(['Site', 'Readings', 'WQI', 'Tier'])
        for score in scores:
            writer.writerow([
                label_text(score.site),
                score.reading_count,
                NO_VALUE_TEXT if score.wqi is None else score.wqi,
                score.tier or NO_VALUE_TEXT,
            ])
    logger.info("Exported site scores to %s", filepath)
    return filepath
