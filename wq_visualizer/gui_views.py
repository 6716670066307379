"""
Result views (right side) for the Water Quality Visualizer.

Three tabs: the matplotlib chart, the raw data table, and the summary
cards with the per-site WQI table.
"""

import os

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QFrame, QLabel,
    QPushButton, QTableWidget, QTableWidgetItem, QFileDialog,
    QMessageBox, QHeaderView, QGroupBox,
)
from PySide6.QtCore import Qt

import matplotlib
matplotlib.use('QtAgg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import (
    FigureCanvasQTAgg as FigureCanvas,
    NavigationToolbar2QT as NavigationToolbar,
)

from .chart_render import render_chart
from .constants import GUI_COLORS, NO_VALUE_TEXT, PLOT_STYLE_SCREEN
from .data_model import ChartSpec, Dataset, SummaryStats
from .export import export_chart_png, export_site_scores_csv
from .summary_stats import format_average
from .theme import apply_plot_style, tier_badge_style
from .values import friendly_name, label_text


class ChartView(QWidget):
    """Figure canvas with navigation toolbar and PNG export."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._spec = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        apply_plot_style(PLOT_STYLE_SCREEN)
        self._fig = Figure(figsize=(8, 5))
        self._canvas = FigureCanvas(self._fig)
        self._toolbar = NavigationToolbar(self._canvas, self)

        toolbar_row = QHBoxLayout()
        toolbar_row.addWidget(self._toolbar)
        toolbar_row.addStretch()
        self._btn_export = QPushButton("Export PNG...")
        self._btn_export.setEnabled(False)
        self._btn_export.clicked.connect(lambda *_: self._on_export())
        toolbar_row.addWidget(self._btn_export)

        layout.addLayout(toolbar_row)
        layout.addWidget(self._canvas, 1)

    def show_chart(self, spec: ChartSpec) -> None:
        self._spec = spec
        render_chart(self._fig, spec)
        self._canvas.draw_idle()
        self._btn_export.setEnabled(True)

    def _on_export(self):
        if self._spec is None:
            return
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Chart as PNG",
            "", "PNG Files (*.png);;All Files (*)",
        )
        if not path:
            return
        try:
            path = export_chart_png(self._spec, path)
        except (OSError, ValueError) as exc:
            QMessageBox.critical(self, "Export Error", f"Failed to export: {exc}")
            return
        self.window().statusBar().showMessage(
            f"Exported to {os.path.basename(path)}", 3000
        )


class DataTableView(QTableWidget):
    """Read-only grid of every loaded row."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.setAlternatingRowColors(True)

    def show_dataset(self, dataset: Dataset) -> None:
        self.clear()
        self.setColumnCount(len(dataset.headers))
        self.setRowCount(dataset.row_count)
        self.setHorizontalHeaderLabels([friendly_name(h) for h in dataset.headers])
        for r_idx, row in enumerate(dataset.rows):
            for c_idx, header in enumerate(dataset.headers):
                value = row.get(header)
                item = QTableWidgetItem('' if value is None else str(value))
                if header in dataset.numeric_columns:
                    item.setTextAlignment(
                        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
                    )
                self.setItem(r_idx, c_idx, item)
        self.resizeColumnsToContents()


def _stat_card(value: str, label: str) -> QFrame:
    card = QFrame()
    card.setObjectName("statCard")
    layout = QVBoxLayout(card)
    lbl_value = QLabel(value)
    lbl_value.setAlignment(Qt.AlignmentFlag.AlignCenter)
    lbl_value.setStyleSheet(
        f"font-size: 20px; font-weight: bold; color: {GUI_COLORS['accent']};"
    )
    lbl_label = QLabel(label)
    lbl_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    lbl_label.setStyleSheet(f"font-size: 11px; color: {GUI_COLORS['fg_dim']};")
    layout.addWidget(lbl_value)
    layout.addWidget(lbl_label)
    return card


class SummaryView(QWidget):
    """Summary stat cards and the per-site WQI table."""

    _CARDS_PER_ROW = 4

    def __init__(self, parent=None):
        super().__init__(parent)
        self._scores = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self._cards = QGridLayout()
        self._cards.setSpacing(8)
        layout.addLayout(self._cards)

        self._grp_wqi = QGroupBox("Water Quality Index by Site")
        wqi_layout = QVBoxLayout(self._grp_wqi)
        self._tbl_wqi = QTableWidget(0, 3)
        self._tbl_wqi.setHorizontalHeaderLabels(["Site", "Readings", "WQI"])
        self._tbl_wqi.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._tbl_wqi.horizontalHeader().setSectionResizeMode(
            QHeaderView.ResizeMode.Stretch
        )
        wqi_layout.addWidget(self._tbl_wqi)

        self._btn_export_scores = QPushButton("Export Scores CSV...")
        self._btn_export_scores.clicked.connect(lambda *_: self._on_export_scores())
        wqi_layout.addWidget(self._btn_export_scores, 0, Qt.AlignmentFlag.AlignRight)

        layout.addWidget(self._grp_wqi, 1)
        self._grp_wqi.setVisible(False)

    def _clear_cards(self):
        while self._cards.count():
            item = self._cards.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

    def show_summary(self, stats: SummaryStats) -> None:
        self._clear_cards()
        cards = [
            (str(stats.total_readings), "Total Readings"),
            (str(stats.parameter_count), "Parameters"),
            (NO_VALUE_TEXT if stats.site_count is None else str(stats.site_count),
             "Monitoring Sites"),
        ]
        for average in stats.averages:
            value = format_average(average)
            if average.unit and average.mean is not None:
                value += f" {average.unit}"
            cards.append((value, f"Avg {average.label}"))

        for idx, (value, label) in enumerate(cards):
            self._cards.addWidget(
                _stat_card(value, label),
                idx // self._CARDS_PER_ROW, idx % self._CARDS_PER_ROW,
            )

    def show_scores(self, scores) -> None:
        """Fill the WQI table; ``None`` hides the whole section."""
        if scores is None:
            self._scores = []
            self._grp_wqi.setVisible(False)
            return
        self._scores = list(scores)
        self._grp_wqi.setVisible(True)
        # Dropping the rows also drops the previous dataset's badge widgets
        self._tbl_wqi.setRowCount(0)
        self._tbl_wqi.setRowCount(len(self._scores))
        for r_idx, score in enumerate(self._scores):
            site_item = QTableWidgetItem(label_text(score.site))
            font = site_item.font()
            font.setBold(True)
            site_item.setFont(font)
            self._tbl_wqi.setItem(r_idx, 0, site_item)
            self._tbl_wqi.setItem(r_idx, 1, QTableWidgetItem(str(score.reading_count)))
            if score.wqi is None:
                self._tbl_wqi.removeCellWidget(r_idx, 2)
                self._tbl_wqi.setItem(r_idx, 2, QTableWidgetItem(NO_VALUE_TEXT))
            else:
                badge = QLabel(f"{score.wqi} – {score.tier}")
                badge.setAlignment(Qt.AlignmentFlag.AlignCenter)
                badge.setStyleSheet(tier_badge_style(score.tier_key))
                self._tbl_wqi.setCellWidget(r_idx, 2, badge)

    def _on_export_scores(self):
        if not self._scores:
            return
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Site Scores",
            "", "CSV Files (*.csv);;All Files (*)",
        )
        if not path:
            return
        try:
            export_site_scores_csv(self._scores, path)
        except OSError as exc:
            QMessageBox.critical(self, "Export Error", f"Failed to export: {exc}")
