from __future__ import annotations
import re
from typing import Iterable, List, Optional, Sequence

from colkit.errors import InvalidColumnSpec
from colkit.utils.logging import get_logger

logger = get_logger(__name__)

_INT_RE = re.compile(r"\+?\d+")


def _parse_position(tok: str, spec: str, what: str) -> int:
    if not _INT_RE.fullmatch(tok):
        raise InvalidColumnSpec(f"Invalid {what}: {tok!r} in column spec {spec!r}")
    n = int(tok)
    if n == 0:
        raise InvalidColumnSpec("Column numbers must be 1-based")
    return n


def parse_column_specs(specs: Iterable[str]) -> List[int]:
    """
    Resolve column specs to 0-based source indices, in the order given.
    Supports:
      - Single 1-based index:  "3"
      - Inclusive range:       "2:4"  -> 1,2,3 (0-based)
      - Reversed range:        "3:1"  -> 2,1,0
    Repeats are kept; the same source column may be output several times.
    Raises InvalidColumnSpec for non-numeric, zero, or malformed specs.
    """
    idxs: List[int] = []
    for spec in specs:
        s = str(spec)
        if ":" in s:
            parts = s.split(":")
            if len(parts) != 2:
                raise InvalidColumnSpec(f"Invalid range format: {s}")
            a = _parse_position(parts[0], s, "range start")
            b = _parse_position(parts[1], s, "range end")
            step = 1 if a <= b else -1
            idxs.extend(i - 1 for i in range(a, b + step, step))
            continue
        idxs.append(_parse_position(s, s, "column number") - 1)
    return idxs


def select_all(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[int]:
    count = max([len(headers)] + [len(r) for r in rows])
    return list(range(count))


def _pick(fields: Sequence[str], idxs: Sequence[int]) -> List[str]:
    n = len(fields)
    return [fields[i] if i < n else "" for i in idxs]


def fit_header(fields: List[str], n: int) -> List[str]:
    """Pad with empty strings or truncate so the header has exactly ``n`` fields."""
    if len(fields) < n:
        return fields + [""] * (n - len(fields))
    return fields[:n]


def project_table(table, specs: Sequence[str], explicit_header: Optional[List[str]] = None):
    """
    Apply column specs to a Table in place and return it.

    Every row and the header come out with exactly one field per selected
    column; out-of-range sources become "". An explicit header skips the
    selection and is only fitted to the output width.
    """
    idxs = parse_column_specs(specs) if specs else select_all(table.headers, table.rows)
    logger.debug("selected source columns (1-based): %s", [i + 1 for i in idxs])

    table.selected_columns = idxs
    if table.headers:
        table.headers = _pick(table.headers, idxs)
    if explicit_header is not None:
        table.headers = fit_header(list(explicit_header), len(idxs))
    table.rows = [_pick(r, idxs) for r in table.rows]
    return table
