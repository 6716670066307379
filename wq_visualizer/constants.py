"""
Constants for the Water Quality Visualizer.

Centralises the known-parameter metadata table, WQI tier thresholds,
chart kinds and their label-ordering policy, site/date column hints,
colour palettes, and font families.
"""

from types import MappingProxyType

from .data_model import ParameterMeta

# ── Known water-quality parameters and their "safe" ranges ──────────────
# Default table only: every consumer takes the table as an argument.
PARAM_META = MappingProxyType({
    'pH':                    ParameterMeta('pH', '', (6.5, 8.5)),
    'Dissolved_Oxygen_mg_L': ParameterMeta('Dissolved Oxygen', 'mg/L', (5.0, 14.0)),
    'Temperature_C':         ParameterMeta('Temperature', '°C', (0.0, 25.0)),
    'Turbidity_NTU':         ParameterMeta('Turbidity', 'NTU', (0.0, 4.0)),
    'Conductivity_uS_cm':    ParameterMeta('Conductivity', 'µS/cm', (50.0, 1500.0)),
    'Nitrate_mg_L':          ParameterMeta('Nitrate', 'mg/L', (0.0, 10.0)),
    'Phosphate_mg_L':        ParameterMeta('Phosphate', 'mg/L', (0.0, 0.1)),
    'Coliform_CFU_100mL':    ParameterMeta('Coliform', 'CFU/100mL', (0.0, 0.0),
                                           contamination=True),
})

# ── WQI tiers (inclusive lower bound, label, style key) ─────────────────
WQI_TIERS = (
    (90, 'Excellent', 'excellent'),
    (70, 'Good', 'good'),
    (50, 'Fair', 'fair'),
    (25, 'Poor', 'poor'),
)
WQI_LOWEST_TIER = ('Very Poor', 'bad')

# Sub-index assigned when a safe range has zero width
DEGENERATE_RANGE_SUB_INDEX = 50.0

# ── Chart kinds ──────────────────────────────────────────────────────────
CHART_LINE = "line"
CHART_AREA = "area"
CHART_BAR = "bar"
CHART_SCATTER = "scatter"
CHART_KINDS = (CHART_LINE, CHART_BAR, CHART_AREA, CHART_SCATTER)

# Label-axis ordering per chart kind: continuous axes are sorted,
# categorical bars keep first-seen order.  Scatter has no label axis.
ORDER_SORTED = "sorted"
ORDER_INSERTION = "insertion"
LABEL_ORDER = MappingProxyType({
    CHART_LINE: ORDER_SORTED,
    CHART_AREA: ORDER_SORTED,
    CHART_BAR: ORDER_INSERTION,
})

# ── Grouping / column-name hints ─────────────────────────────────────────
ALL_GROUP = "All"
SITE_COLUMN_HINTS = ("location", "site")
DATE_COLUMN_HINTS = ("date", "time")
SERIES_NAME_SEPARATOR = " – "

# Number of numeric columns that get an average card in the summary
SUMMARY_AVERAGE_LIMIT = 4
NO_VALUE_TEXT = "—"

# ── User-facing messages (surfaced verbatim) ─────────────────────────────
MSG_NO_PARAMETERS = "Select at least one parameter to chart."
MSG_UNREADABLE_FILE = "Could not read the file."
MSG_NOT_CSV = "Please upload a CSV file (.csv)."

# ── Font family fallback chain ───────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Ubuntu", "Helvetica", "Arial", "sans-serif",
]

# ── Series colour cycle (10 distinct colours) ────────────────────────────
PALETTE = [
    '#1a6e8e', '#27ae60', '#e67e22', '#8e44ad', '#e74c3c',
    '#2980b9', '#16a085', '#d35400', '#c0392b', '#7f8c8d',
]

# Fill / face alpha per chart kind
BAR_ALPHA = 0.75
AREA_ALPHA = 0.2
SCATTER_ALPHA = 0.7

# ── WQI tier badge colours ───────────────────────────────────────────────
TIER_COLORS = {
    'excellent': '#27ae60',
    'good':      '#2ecc71',
    'fair':      '#f1c40f',
    'poor':      '#e67e22',
    'bad':       '#e74c3c',
}

# ── Light GUI colour palette ─────────────────────────────────────────────
GUI_COLORS = {
    'bg':           '#f4f8fa',
    'bg_alt':       '#ffffff',
    'bg_widget':    '#ffffff',
    'bg_input':     '#ffffff',
    'fg':           '#1f2d3a',
    'fg_dim':       '#6b7c8a',
    'accent':       '#1a6e8e',
    'accent_hover': '#15586f',
    'border':       '#cfdde5',
    'error_bg':     '#fdecea',
    'error_fg':     '#b03a2e',
    'selection':    '#d6eaf2',
    'ok':           '#1e8449',
}

# ── Export settings ──────────────────────────────────────────────────────
EXPORT_DPI = 300
EXPORT_FIGSIZE = (8.0, 4.5)

# ── Matplotlib style dict (GUI preview) ──────────────────────────────────
PLOT_STYLE_SCREEN = {
    'figure.facecolor':  GUI_COLORS['bg_alt'],
    'axes.facecolor':    GUI_COLORS['bg_widget'],
    'axes.edgecolor':    GUI_COLORS['border'],
    'axes.labelcolor':   GUI_COLORS['fg'],
    'text.color':        GUI_COLORS['fg'],
    'xtick.color':       GUI_COLORS['fg_dim'],
    'ytick.color':       GUI_COLORS['fg_dim'],
    'xtick.labelsize':   8,
    'ytick.labelsize':   8,
    'axes.labelsize':    9,
    'axes.titlesize':    10,
    'legend.fontsize':   8,
    'grid.color':        GUI_COLORS['border'],
}

# ── Matplotlib style dict (PNG export) ───────────────────────────────────
PLOT_STYLE_EXPORT = {
    'figure.facecolor':  '#ffffff',
    'axes.facecolor':    '#ffffff',
    'axes.edgecolor':    '#333333',
    'axes.labelcolor':   '#1a1a2e',
    'text.color':        '#1a1a2e',
    'xtick.color':       '#333333',
    'ytick.color':       '#333333',
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'axes.titlesize':    9,
    'legend.fontsize':   6.5,
    'grid.color':        '#cccccc',
}
