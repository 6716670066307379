"""
Row grouping for multi-series charts.
"""

from typing import Any, Dict, List, Optional, Sequence

from .constants import ALL_GROUP
from .data_model import Row


def group_by(rows: Sequence[Row], key: Optional[str] = None) -> Dict[Any, List[Row]]:
    """Partition *rows* by the value of column *key*.

    With no key, a single ``"All"`` group holds every row.  Otherwise
    groups appear in the order their key is first seen and keep the
    original row order.  Values are not normalised: the number ``1``
    and the string ``"1"`` are different groups.
    """
    if key is None:
        return {ALL_GROUP: list(rows)}

    groups: Dict[Any, List[Row]] = {}
    for row in rows:
        groups.setdefault(row.get(key), []).append(row)
    return groups
