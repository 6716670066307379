"""
Exceptions raised by the Water Quality Visualizer core.

Each error carries a message meant to be shown to the user verbatim.
They subclass the built-in exception the GUI already catches
(``ValueError`` / ``OSError``) so callers can handle them either way.
"""

from .constants import MSG_NO_PARAMETERS, MSG_NOT_CSV, MSG_UNREADABLE_FILE


class WaterQualityError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(WaterQualityError, ValueError):
    """The CSV produced no usable rows."""

    def __init__(self, message: str, issues=()):
        super().__init__(message)
        self.issues = tuple(issues)


class NoParametersSelected(WaterQualityError, ValueError):
    """A chart was requested with no value columns."""

    def __init__(self, message: str = MSG_NO_PARAMETERS):
        super().__init__(message)


class UnreadableFile(WaterQualityError, OSError):
    """The file itself could not be read (not a CSV content problem)."""

    def __init__(self, message: str = MSG_UNREADABLE_FILE, path: str = ""):
        super().__init__(message)
        self.path = path


class UnsupportedFile(WaterQualityError, ValueError):
    """Upload validation rejected a file name."""

    def __init__(self, message: str = MSG_NOT_CSV):
        super().__init__(message)
