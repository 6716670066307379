"""
Entry point for the Water Quality Visualizer.

Usage:
    python -m wq_visualizer [readings.csv] [--verbose]
"""

import argparse
import importlib.util
import logging
import os
import sys
import traceback

from . import APP_NAME, APP_VERSION

logger = logging.getLogger("wq_visualizer")

_REQUIRED_PACKAGES = ("PySide6", "matplotlib", "numpy")


def _missing_packages():
    return [name for name in _REQUIRED_PACKAGES
            if importlib.util.find_spec(name) is None]


def _exception_hook(exc_type, exc_value, exc_tb):
    """Log uncaught exceptions and surface them in a dialog."""
    logger.error(
        "Unhandled exception:\n%s",
        ''.join(traceback.format_exception(exc_type, exc_value, exc_tb)),
    )

    from PySide6.QtWidgets import QApplication, QMessageBox
    if QApplication.instance() is None:
        return
    QMessageBox.critical(
        None, f"{APP_NAME} Error",
        f"Something went wrong:\n\n{exc_type.__name__}: {exc_value}\n\n"
        f"Details were written to the log.",
    )


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="wq-visualizer",
        description="Chart water-quality readings and score monitoring sites.",
    )
    parser.add_argument("csv_path", nargs="?", help="CSV file to open on start")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug messages")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {APP_VERSION}")
    # Qt consumes its own switches (e.g. -style); leave them alone
    args, _ = parser.parse_known_args(argv)
    return args


def _pick_font(families):
    from PySide6.QtGui import QFont, QFontDatabase

    font = QFont()
    available = set(QFontDatabase.families())
    for family in families:
        if family in available:
            font.setFamily(family)
            break
    font.setPointSize(10)
    return font


def main(argv=None):
    """Launch the Water Quality Visualizer GUI."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    missing = _missing_packages()
    if missing:
        logger.error(
            "Missing required packages: %s. Install with: pip install %s",
            ', '.join(missing), ' '.join(missing),
        )
        return 1

    sys.excepthook = _exception_hook

    # The Qt binding must be chosen before matplotlib loads its Qt backend
    os.environ.setdefault("QT_API", "pyside6")
    import matplotlib
    matplotlib.use('QtAgg')

    from PySide6.QtWidgets import QApplication

    from .constants import FONT_FAMILIES
    from .gui_main import VisualizerMainWindow
    from .theme import get_stylesheet

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setStyle("Fusion")
    app.setFont(_pick_font(FONT_FAMILIES))
    app.setStyleSheet(get_stylesheet())

    window = VisualizerMainWindow()
    window.show()
    if args.csv_path:
        window.load_path(args.csv_path)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
