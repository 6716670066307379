"""
Main window for the Water Quality Visualizer.

Hosts the ConfigPanel (left) and the result tabs (right) in a
horizontal splitter, with an error banner, menu bar and status bar.
Accepts ``.csv`` files dropped anywhere on the window.
"""

import logging
import os
import tempfile

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QScrollArea,
    QMessageBox, QLabel, QTabWidget,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from . import APP_NAME, APP_VERSION
from .errors import NoParametersSelected, ParseError, UnreadableFile, UnsupportedFile
from .example_data import SAMPLE_FILENAME, generate_sample_csv
from .gui_config_panel import ConfigPanel
from .gui_views import ChartView, DataTableView, SummaryView
from .session import AnalysisSession

logger = logging.getLogger(__name__)


class VisualizerMainWindow(QMainWindow):
    """Main window for the Water Quality Visualizer."""

    def __init__(self, session: AnalysisSession = None):
        super().__init__()
        self._session = session or AnalysisSession()

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(1200, 780)
        self.setAcceptDrops(True)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self.statusBar().showMessage("Ready. Load a CSV file to begin.")

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(4, 4, 4, 4)
        main_layout.setSpacing(4)

        self._lbl_error = QLabel("")
        self._lbl_error.setObjectName("errorLabel")
        self._lbl_error.setWordWrap(True)
        self._lbl_error.setVisible(False)
        main_layout.addWidget(self._lbl_error)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        self._config_panel = ConfigPanel()
        scroll = QScrollArea()
        scroll.setWidget(self._config_panel)
        scroll.setWidgetResizable(True)
        scroll.setMinimumWidth(300)
        scroll.setMaximumWidth(460)

        self._tabs = QTabWidget()
        self._chart_view = ChartView()
        self._table_view = DataTableView()
        self._summary_view = SummaryView()
        self._tabs.addTab(self._chart_view, "Chart")
        self._tabs.addTab(self._summary_view, "Summary && WQI")
        self._tabs.addTab(self._table_view, "Data")

        splitter.addWidget(scroll)
        splitter.addWidget(self._tabs)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([340, 860])

        main_layout.addWidget(splitter)

    def _setup_menu(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")
        act_open = QAction("Open CSV...", self)
        act_open.triggered.connect(lambda *_: self._config_panel._browse_file())
        file_menu.addAction(act_open)

        act_sample = QAction("Load Sample Data", self)
        act_sample.triggered.connect(lambda *_: self._load_sample())
        file_menu.addAction(act_sample)

        file_menu.addSeparator()
        act_exit = QAction("Exit", self)
        act_exit.triggered.connect(self.close)
        file_menu.addAction(act_exit)

        help_menu = menubar.addMenu("Help")
        act_about = QAction("About", self)
        act_about.triggered.connect(lambda *_: self._show_about())
        help_menu.addAction(act_about)

    def _connect_signals(self):
        self._config_panel.file_chosen.connect(self.load_path)
        self._config_panel.sample_requested.connect(self._load_sample)
        self._config_panel.render_requested.connect(self._on_render)

    # ── Error banner ─────────────────────────────────────────────────

    def _show_error(self, message: str):
        self._lbl_error.setText(message)
        self._lbl_error.setVisible(True)

    def _hide_error(self):
        self._lbl_error.setVisible(False)

    # ── Drag & drop ──────────────────────────────────────────────────

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()

    def dropEvent(self, event):
        urls = event.mimeData().urls()
        if urls:
            event.acceptProposedAction()
            self.load_path(urls[0].toLocalFile())

    # ── Slots ────────────────────────────────────────────────────────

    def load_path(self, path: str):
        """Load *path* into the session and refresh every view.

        On failure the previous dataset stays on screen.
        """
        self._hide_error()
        try:
            dataset = self._session.load_file(path)
        except (UnsupportedFile, UnreadableFile, ParseError) as exc:
            logger.warning("Load failed for %s: %s", path, exc)
            self._show_error(str(exc))
            self.statusBar().showMessage("Load failed", 5000)
            return

        self._config_panel.set_dataset(
            dataset, self._session.default_selection(), self._session.parameters,
        )
        self._config_panel.set_status(
            f"{dataset.source_name}: {dataset.row_count} rows, "
            f"{len(dataset.headers)} columns",
            'ok',
        )
        self._table_view.show_dataset(dataset)
        self._summary_view.show_summary(self._session.summary())
        self._summary_view.show_scores(self._session.site_scores())
        self.statusBar().showMessage(f"Loaded {dataset.source_name}", 5000)
        self._on_render()

    def _load_sample(self):
        path = generate_sample_csv(
            os.path.join(tempfile.gettempdir(), 'wq_visualizer', SAMPLE_FILENAME)
        )
        self.load_path(path)

    def _on_render(self):
        """Slot: Render button clicked or chart type changed."""
        if self._session.dataset is None:
            return
        try:
            spec = self._session.render(self._config_panel.get_selection())
        except NoParametersSelected as exc:
            self._show_error(str(exc))
            return
        except ValueError as exc:
            QMessageBox.critical(
                self, "Chart Error",
                f"An error occurred while building the chart:\n\n{exc}",
            )
            return
        self._hide_error()
        self._chart_view.show_chart(spec)
        self._tabs.setCurrentWidget(self._chart_view)

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} v{APP_VERSION}</h3>"
            f"<p>Load water-quality readings from CSV, chart any "
            f"parameter over time or by site, and compare sites with a "
            f"simplified Water Quality Index.</p>",
        )
