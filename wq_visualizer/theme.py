"""
Theme and stylesheet for the Water Quality Visualizer.

The Qt side is a single light stylesheet; the matplotlib side switches
rcParams between the on-screen and PNG-export looks.
"""

from contextlib import contextmanager

import matplotlib as mpl

from .constants import GUI_COLORS, TIER_COLORS


def _widget_rules(c: dict) -> str:
    return f"""
    QMainWindow, QWidget {{ background: {c['bg']}; color: {c['fg']}; font-size: 13px; }}
    QTabWidget::pane {{ background: {c['bg_alt']}; border: 1px solid {c['border']}; }}
    QTabBar::tab {{
        background: {c['bg']}; color: {c['fg_dim']};
        padding: 7px 18px; border: 1px solid {c['border']}; border-bottom: none;
    }}
    QTabBar::tab:selected {{ background: {c['bg_alt']}; color: {c['accent']}; border-bottom: 2px solid {c['accent']}; }}
    QGroupBox {{
        color: {c['accent']}; font-weight: bold;
        border: 1px solid {c['border']}; border-radius: 5px;
        margin-top: 14px; padding-top: 14px;
    }}
    QGroupBox::title {{ subcontrol-origin: margin; left: 10px; padding: 0 4px; }}
    QPushButton {{
        background: {c['bg_widget']}; color: {c['fg']};
        border: 1px solid {c['border']}; border-radius: 3px; padding: 5px 14px;
    }}
    QPushButton:hover {{ border-color: {c['accent']}; background: {c['selection']}; }}
    QComboBox {{ background: {c['bg_input']}; border: 1px solid {c['border']}; border-radius: 3px; padding: 3px 6px; }}
    QCheckBox {{ spacing: 6px; }}
    """


def _data_rules(c: dict) -> str:
    return f"""
    QTableWidget {{
        background: {c['bg_alt']}; gridline-color: {c['border']};
        selection-background-color: {c['selection']}; selection-color: {c['fg']};
    }}
    QHeaderView::section {{
        background: {c['bg']}; color: {c['fg']}; font-weight: bold;
        border: none; border-bottom: 1px solid {c['border']}; padding: 4px 6px;
    }}
    QStatusBar {{ color: {c['fg_dim']}; border-top: 1px solid {c['border']}; }}
    QLabel#errorLabel {{
        background: {c['error_bg']}; color: {c['error_fg']};
        border: 1px solid {c['error_fg']}; border-radius: 4px; padding: 6px 10px;
    }}
    QFrame#statCard {{ background: {c['bg_alt']}; border: 1px solid {c['border']}; border-radius: 6px; }}
    """


def get_stylesheet() -> str:
    """Application-wide Qt stylesheet."""
    return _widget_rules(GUI_COLORS) + _data_rules(GUI_COLORS)


def tier_badge_style(tier_key: str) -> str:
    """Inline stylesheet for a WQI tier badge label."""
    color = TIER_COLORS.get(tier_key, GUI_COLORS['fg_dim'])
    return (
        f"background-color: {color}; color: #ffffff; font-weight: bold; "
        f"border-radius: 8px; padding: 2px 8px;"
    )


def apply_plot_style(style: dict) -> None:
    """Make *style* the default for figures created from now on."""
    mpl.rcParams.update(style)


@contextmanager
def plot_style(style: dict):
    """Use *style* only for figures built inside the ``with`` block."""
    with mpl.rc_context(style):
        yield
