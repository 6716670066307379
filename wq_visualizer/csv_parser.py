"""
CSV parser for the Water Quality Visualizer.

Turns the raw text of a readings file into rows keyed by header name.
Handles:

- Auto-detected delimiters (tab → semicolon → comma)
- European decimal-comma numbers in semicolon/tab-delimited files
- UTF-8 BOM markers and blank lines
- Blank cells (mapped to ``None``)
- Ragged rows (padded or truncated, and reported)
- Badly quoted lines (skipped and reported; later rows still load)
- Duplicate header names (renamed ``name_1``, ``name_2``, …)

Parsing is lenient: a file is only rejected when it yields no rows at
all *and* something went wrong.  Everything else is reported through
``warnings.warn`` and returned as ``ParseIssue`` records.
"""

import csv
import io
import logging
import math
import os
import re
import warnings
from typing import Any, List, Tuple

from .data_model import ParseIssue, Row
from .errors import ParseError, UnreadableFile
from .values import to_number

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r'^[-+]?\d+$')
_LOCALE_NUMBER_RE = re.compile(r'^[-+]?[\d.,]*\d[\d.,]*([eE][-+]?\d+)?$')

# Files above this size still load, with a warning
_LARGE_FILE_BYTES = 100 * 1024 * 1024


# ── Locale-safe float parsing ────────────────────────────────────────────

def _locale_float(text: str) -> float:
    """Parse a numeric string that may use comma as decimal separator.

    Handles:
    - Standard period decimals: ``"3.14"``
    - European comma decimals: ``"3,14"``
    - Thousand separators: ``"1.234,56"`` and ``"1,234.56"``

    Raises ``ValueError`` for non-numeric or non-finite strings.
    """
    s = text.strip()
    if not _LOCALE_NUMBER_RE.match(s):
        raise ValueError(f"not a number: {text!r}")
    # If both separators are present, the last one is the decimal
    if ',' in s and '.' in s:
        if s.rfind(',') > s.rfind('.'):
            s = s.replace('.', '').replace(',', '.')
        else:
            s = s.replace(',', '')
    elif ',' in s:
        s = s.replace(',', '.')
    result = float(s)
    if not math.isfinite(result):
        raise ValueError(f"non-finite value: {text.strip()!r}")
    return result


def _auto_type(cell: str, decimal_comma: bool) -> Any:
    """Convert one raw cell to ``None``, ``int``, ``float`` or ``str``."""
    s = cell.strip()
    if not s:
        return None
    if _INT_RE.match(s):
        return int(s)
    if decimal_comma:
        try:
            return _locale_float(s)
        except ValueError:
            return s
    number = to_number(s)
    return s if number is None else number


# ── Delimiter auto-detection ─────────────────────────────────────────────

def _detect_delimiter(sample_line: str) -> str:
    """Detect CSV delimiter from the header line.

    Priority: tab → semicolon → comma.
    """
    if '\t' in sample_line:
        return '\t'
    if ';' in sample_line:
        return ';'
    return ','


def _unique_headers(tokens: List[str]) -> List[str]:
    """Rename repeated header names so every column has its own key."""
    headers: List[str] = []
    taken = set()
    for name in tokens:
        candidate = name
        suffix = 0
        while candidate in taken:
            suffix += 1
            candidate = f"{name}_{suffix}"
        if candidate != name:
            warnings.warn(
                f"Duplicate column name '{name}' renamed to '{candidate}'.",
                stacklevel=3,
            )
        taken.add(candidate)
        headers.append(candidate)
    return headers


def _is_empty_line(fields: List[str]) -> bool:
    return not fields or (len(fields) == 1 and not fields[0].strip())


def _report_issues(issues: List[ParseIssue]) -> None:
    examples = [issue.message for issue in issues[:10]]
    detail = "; ".join(examples)
    if len(issues) > 10:
        detail += f" ... and {len(issues) - 10} more"
    warnings.warn(f"CSV problems: {detail}", stacklevel=3)


# ── Public API ───────────────────────────────────────────────────────────

def parse(raw_text: str) -> Tuple[List[Row], List[str], List[ParseIssue]]:
    """Parse CSV text into rows, headers and parse issues.

    Parameters
    ----------
    raw_text : str
        Whole file contents.  The first non-blank line is the header.

    Returns
    -------
    rows : list of dict
        One dict per data row, keyed by every header.
    headers : list of str
        Unique column names in file order.
    issues : list of ParseIssue
        Problems that did not prevent parsing.

    Raises
    ------
    ParseError
        If no data row could be produced and at least one problem was
        found.
    """
    text = raw_text.lstrip('\ufeff').strip()
    if not text:
        issue = ParseIssue("EmptyFile", "The file contains no data.")
        raise ParseError(f"Failed to parse CSV: {issue.message}", [issue])

    delimiter = _detect_delimiter(text.splitlines()[0])
    decimal_comma = delimiter != ','
    reader = csv.reader(io.StringIO(text), delimiter=delimiter, strict=True)

    headers: List[str] = []
    rows: List[Row] = []
    issues: List[ParseIssue] = []

    while True:
        try:
            fields = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            # The reader resumes at the next physical line
            issues.append(ParseIssue(
                "MalformedQuotes",
                f"Malformed quoting near line {reader.line_num}: {exc}",
                len(rows),
            ))
            continue
        if _is_empty_line(fields):
            continue
        if not headers:
            headers = _unique_headers([t.strip() for t in fields])
            continue

        row_idx = len(rows)
        n_fields = len(fields)
        if n_fields < len(headers):
            issues.append(ParseIssue(
                "TooFewFields",
                f"Too few fields: expected {len(headers)} fields but "
                f"parsed {n_fields} (row {row_idx + 1})",
                row_idx,
            ))
        elif n_fields > len(headers):
            issues.append(ParseIssue(
                "TooManyFields",
                f"Too many fields: expected {len(headers)} fields but "
                f"parsed {n_fields} (row {row_idx + 1})",
                row_idx,
            ))

        row: Row = {}
        for col_idx, name in enumerate(headers):
            cell = fields[col_idx] if col_idx < n_fields else ''
            row[name] = _auto_type(cell, decimal_comma)
        rows.append(row)

    if not rows and issues:
        raise ParseError(f"Failed to parse CSV: {issues[0].message}", issues)

    if issues:
        _report_issues(issues)

    return rows, headers, issues


def load_csv_file(filepath: str) -> Tuple[List[Row], List[str], List[ParseIssue]]:
    """Read *filepath* as UTF-8 and ``parse`` it.

    Raises
    ------
    UnreadableFile
        If the file cannot be opened or decoded.
    ParseError
        If the contents are not usable CSV.
    """
    try:
        file_size = os.path.getsize(filepath)
        with open(filepath, 'r', encoding='utf-8-sig', newline='') as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", filepath, exc)
        raise UnreadableFile(path=filepath) from exc

    if file_size > _LARGE_FILE_BYTES:
        warnings.warn(
            f"File is very large ({file_size / (1024 * 1024):.0f} MB). "
            f"Charts may be slow to draw.",
            stacklevel=2,
        )

    logger.info("Read %d bytes from %s", file_size, os.path.basename(filepath))
    return parse(text)
