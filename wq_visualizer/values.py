"""
Cell-value helpers shared by the inference, charting and scoring code.

All components agree on one rule for "is this a number": ints and
floats count when finite, strings count when they look like a plain
decimal or scientific literal.  Booleans, blanks and ``None`` never
count.
"""

import math
import re
from numbers import Real
from typing import Any, Optional

_NUMBER_RE = re.compile(r'^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*$')
_CAMEL_RE = re.compile(r'([a-z])([A-Z])')


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == '')


def to_number(value: Any) -> Optional[float]:
    """Return *value* as a finite float, or ``None`` if it is not one.

    >>> to_number("7.5")
    7.5
    >>> to_number("n/a") is None
    True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Real):
        result = float(value)
    elif isinstance(value, str):
        if not _NUMBER_RE.match(value):
            return None
        result = float(value)
    else:
        return None
    if not math.isfinite(result):
        return None
    return result


def label_text(value: Any) -> str:
    """Stringify an x-axis value for use as a chart label.

    Integral floats drop their trailing ``.0`` so ``7`` and ``7.0`` give
    the same label.  Missing values become an empty label.
    """
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def friendly_name(column: str) -> str:
    """Turn a column name into display text.

    >>> friendly_name("Dissolved_Oxygen_mg_L")
    'Dissolved Oxygen mg L'
    >>> friendly_name("siteName")
    'site Name'
    """
    return _CAMEL_RE.sub(r'\1 \2', column.replace('_', ' '))


def round_half_away(value: float, ndigits: int = 0) -> float:
    """Round to *ndigits* decimals with ties going away from zero.

    Built-in ``round`` sends ties to the even digit (``0.125`` gives
    ``0.12``); displayed averages use the schoolbook rule instead.

    >>> round_half_away(0.125, 2)
    0.13
    >>> round_half_away(-0.125, 2)
    -0.13
    """
    scale = 10 ** ndigits
    return math.copysign(math.floor(abs(value) * scale + 0.5) / scale, value)
