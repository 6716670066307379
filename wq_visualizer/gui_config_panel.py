"""
Configuration panel (left side) for the Water Quality Visualizer.

File loading, x-axis / colour-by / chart-type selection, parameter
checkboxes, and the Render button.
"""

from typing import Mapping

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox,
    QLabel, QPushButton, QComboBox, QCheckBox, QFileDialog,
)
from PySide6.QtCore import Signal

from .constants import CHART_KINDS, GUI_COLORS, PALETTE, PARAM_META
from .data_model import ChartSelection, Dataset, ParameterMeta
from .values import friendly_name


class ConfigPanel(QWidget):
    """Left-side panel collecting the user's chart selection."""

    # Signals
    file_chosen = Signal(str)
    sample_requested = Signal()
    render_requested = Signal()

    _NO_GROUP_TEXT = "— None —"

    def __init__(self, parent=None):
        super().__init__(parent)
        self._param_checks = {}
        self._setup_ui()
        self._connect_signals()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(8)

        # ── Group 1: Data file ───────────────────────────────────────
        grp_file = QGroupBox("Data File")
        file_layout = QVBoxLayout(grp_file)
        file_layout.setSpacing(4)

        self._btn_browse = QPushButton("Load CSV...")
        self._btn_browse.setToolTip("Or drag a .csv file onto the window")
        file_layout.addWidget(self._btn_browse)

        self._btn_sample = QPushButton("Load Sample Data")
        file_layout.addWidget(self._btn_sample)

        self._lbl_file_status = QLabel("No file loaded")
        self._lbl_file_status.setWordWrap(True)
        self._lbl_file_status.setStyleSheet(
            f"color: {GUI_COLORS['fg_dim']}; font-size: 11px;"
        )
        file_layout.addWidget(self._lbl_file_status)

        layout.addWidget(grp_file)

        # ── Group 2: Axes ────────────────────────────────────────────
        grp_axes = QGroupBox("Chart")
        axes_layout = QFormLayout(grp_axes)
        axes_layout.setSpacing(4)

        self._cmb_x_axis = QComboBox()
        axes_layout.addRow("X-axis:", self._cmb_x_axis)

        self._cmb_color_by = QComboBox()
        axes_layout.addRow("Colour by:", self._cmb_color_by)

        self._cmb_kind = QComboBox()
        for kind in CHART_KINDS:
            self._cmb_kind.addItem(kind.capitalize(), kind)
        axes_layout.addRow("Chart type:", self._cmb_kind)

        layout.addWidget(grp_axes)

        # ── Group 3: Parameters ──────────────────────────────────────
        grp_params = QGroupBox("Parameters")
        self._params_layout = QVBoxLayout(grp_params)
        self._params_layout.setSpacing(2)

        sel_row = QHBoxLayout()
        self._btn_all = QPushButton("All")
        self._btn_none = QPushButton("None")
        sel_row.addWidget(self._btn_all)
        sel_row.addWidget(self._btn_none)
        sel_row.addStretch()
        self._params_layout.addLayout(sel_row)

        layout.addWidget(grp_params)

        # ── Actions ──────────────────────────────────────────────────
        c = GUI_COLORS
        self._btn_render = QPushButton("Render Chart")
        self._btn_render.setStyleSheet(
            f"QPushButton {{ background-color: {c['accent']}; "
            f"color: #ffffff; font-weight: bold; "
            f"font-size: 14px; padding: 10px; }}"
            f"QPushButton:hover {{ background-color: {c['accent_hover']}; }}"
            f"QPushButton:disabled {{ background-color: {c['border']}; "
            f"color: {c['fg_dim']}; }}"
        )
        self._btn_render.setEnabled(False)
        layout.addWidget(self._btn_render)

        layout.addStretch()

    def _connect_signals(self):
        self._btn_browse.clicked.connect(lambda *_: self._browse_file())
        self._btn_sample.clicked.connect(lambda *_: self.sample_requested.emit())
        self._btn_render.clicked.connect(lambda *_: self.render_requested.emit())
        # Changing the chart type re-renders immediately
        self._cmb_kind.currentIndexChanged.connect(
            lambda *_: self.render_requested.emit()
        )
        self._btn_all.clicked.connect(lambda *_: self._set_all_params(True))
        self._btn_none.clicked.connect(lambda *_: self._set_all_params(False))

    # ── Slot implementations ─────────────────────────────────────────

    def _browse_file(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Select Water Quality CSV",
            "", "CSV Files (*.csv);;All Files (*)",
        )
        if path:
            self.file_chosen.emit(path)

    def _set_all_params(self, checked: bool):
        for chk in self._param_checks.values():
            chk.setChecked(checked)

    def _rebuild_param_checks(self, columns, selected, parameters):
        for chk in self._param_checks.values():
            self._params_layout.removeWidget(chk)
            chk.deleteLater()
        self._param_checks = {}

        for idx, column in enumerate(columns):
            meta = parameters.get(column)
            chk = QCheckBox(friendly_name(column))
            if meta is not None:
                unit = f" ({meta.unit})" if meta.unit else ""
                lo, hi = meta.safe_range
                chk.setToolTip(f"{meta.label}{unit}, safe range {lo:g} to {hi:g}")
            chk.setStyleSheet(f"color: {PALETTE[idx % len(PALETTE)]};")
            chk.setChecked(column in selected)
            self._params_layout.addWidget(chk)
            self._param_checks[column] = chk

    # ── Public API ───────────────────────────────────────────────────

    def set_dataset(
        self,
        dataset: Dataset,
        selection: ChartSelection,
        parameters: Mapping[str, ParameterMeta] = PARAM_META,
    ) -> None:
        """Repopulate every control for a newly loaded dataset.

        *parameters* supplies the label, unit and safe range shown in
        each parameter checkbox tooltip.
        """
        self._cmb_kind.blockSignals(True)

        self._cmb_x_axis.clear()
        for header in dataset.headers:
            self._cmb_x_axis.addItem(friendly_name(header), header)
        self._cmb_x_axis.setCurrentIndex(
            max(0, self._cmb_x_axis.findData(selection.x_column))
        )

        self._cmb_color_by.clear()
        self._cmb_color_by.addItem(self._NO_GROUP_TEXT, None)
        for header in dataset.categorical_headers():
            self._cmb_color_by.addItem(friendly_name(header), header)
        if selection.group_column is not None:
            self._cmb_color_by.setCurrentIndex(
                max(0, self._cmb_color_by.findData(selection.group_column))
            )

        self._cmb_kind.setCurrentIndex(
            max(0, self._cmb_kind.findData(selection.kind))
        )
        self._cmb_kind.blockSignals(False)

        self._rebuild_param_checks(
            dataset.numeric_headers(), set(selection.value_columns), parameters,
        )
        self._btn_render.setEnabled(True)

    def set_status(self, text: str, color_key: str = 'fg_dim') -> None:
        self._lbl_file_status.setText(text)
        self._lbl_file_status.setStyleSheet(
            f"color: {GUI_COLORS[color_key]}; font-size: 11px;"
        )

    def get_selection(self) -> ChartSelection:
        """Return the current choices as a ``ChartSelection``."""
        return ChartSelection(
            x_column=self._cmb_x_axis.currentData() or '',
            value_columns=tuple(
                column for column, chk in self._param_checks.items()
                if chk.isChecked()
            ),
            group_column=self._cmb_color_by.currentData(),
            kind=self._cmb_kind.currentData() or CHART_KINDS[0],
        )
