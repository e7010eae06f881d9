from __future__ import annotations
import re
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterable, List, Optional, Tuple

from .config import HeaderMode, TableConfig
from .errors import InvalidFilterPattern
from .utils.logging import get_logger

logger = get_logger(__name__)


class SeparatorRow(list):
    """All-blank row inserted by ``group_rows`` at a group boundary."""

    @classmethod
    def blank(cls, n: int) -> "SeparatorRow":
        return cls([""] * n)


@dataclass
class Table:
    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)
    # 0-based source column for each output column
    selected_columns: List[int] = field(default_factory=list)


def parse_float(value: str) -> Optional[float]:
    """
    Strict float parse: the whole string must be a number.
    Surrounding whitespace, digit-group underscores and non-ASCII digits
    are rejected.
    """
    if not value or not value.isascii() or value != value.strip() or "_" in value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def is_numeric(value: str) -> bool:
    return parse_float(value) is not None


#-- Tokenizer --
def split_line(line: str, config: TableConfig) -> List[str]:
    if config.collapse_separators:
        return line.split() or [""]
    if not config.separator:
        return [line]
    return line.split(config.separator)


#-- Filter --
def filter_lines(lines: Iterable[str], pattern: Optional[str]) -> List[str]:
    """Keep only lines matching ``pattern`` (searched anywhere in the line)."""
    lines = list(lines)
    if not pattern:
        return lines
    try:
        rx = re.compile(pattern)
    except re.error as e:
        raise InvalidFilterPattern(f"Invalid filter regex: {e}") from e
    kept = [ln for ln in lines if rx.search(ln)]
    logger.debug("filter %r kept %d of %d lines", pattern, len(kept), len(lines))
    return kept


#-- Header Resolution --
def resolve_header(lines: List[str], config: TableConfig) -> Tuple[List[str], List[List[str]]]:
    """
    Split filtered lines into (headers, rows).

    --rh drops the first line and the remaining lines are resolved as usual,
    so the next survivor is promoted to header unless --header or --nhl is set.
    An explicit header is not tokenized here; projection sizes it to the output.
    """
    if config.remove_header and lines:
        logger.debug("removing first line: %r", lines[0])
        lines = lines[1:]

    if config.header_mode is HeaderMode.FIRST_LINE and lines:
        headers = split_line(lines[0], config)
        data = lines[1:]
    else:
        headers = []
        data = lines
    logger.debug("header mode %s: %d header fields, %d data lines",
                 config.header_mode.value, len(headers), len(data))
    return headers, [split_line(ln, config) for ln in data]


#-- Sorter --
def _compare_cells(a: str, b: str) -> int:
    fa, fb = parse_float(a), parse_float(b)
    if fa is not None and fb is not None:
        # NaN on either side compares equal
        return (fa > fb) - (fa < fb)
    return (a > b) - (a < b)


def sort_rows(rows: List[List[str]], column: Optional[int]) -> None:
    """Stable in-place sort by 1-based output ``column``; out of range is a no-op."""
    if column is None:
        return
    width = len(rows[0]) if rows else 0
    if not (0 < column <= width):
        logger.debug("sort column %s out of range (1..%d); skipping", column, width)
        return
    idx = column - 1
    rows.sort(key=cmp_to_key(lambda a, b: _compare_cells(a[idx], b[idx])))


#-- Grouper --
def group_rows(rows: List[List[str]], column: Optional[int], keep_values: bool = False) -> List[List[str]]:
    """
    Collapse runs of equal values in 1-based ``column``.

    A ``SeparatorRow`` goes before every row that starts a new group; repeated
    values are blanked unless ``keep_values``. Comparison always uses the
    original value of the previous row, never the blanked one.
    """
    if column is None:
        return rows
    width = len(rows[0]) if rows else 0
    if not (0 < column <= width):
        logger.debug("group column %s out of range (1..%d); skipping", column, width)
        return rows
    idx = column - 1

    out: List[List[str]] = []
    previous: Optional[str] = None
    for i, row in enumerate(rows):
        value = row[idx]
        if i > 0 and value != previous:
            out.append(SeparatorRow.blank(len(row)))
        elif i > 0 and not keep_values:
            row = list(row)
            row[idx] = ""
        previous = value
        out.append(row)
    return out
