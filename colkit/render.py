from __future__ import annotations
from typing import List, Sequence

from .config import BorderStyle, TableConfig
from .table import SeparatorRow, Table, is_numeric
from .utils.width import visible_width

# Unicode box-drawing set used for --pp and for horizontal rules.
BOX = {
    "h": "─", "v": "│",
    "tl": "┌", "tr": "┐", "bl": "└", "br": "┘",
    "tm": "┬", "bm": "┴", "lm": "├", "rm": "┤", "c": "┼",
}


def column_number_labels(table: Table, n: int) -> List[str]:
    """1-based ORIGINAL source position for each of ``n`` output columns."""
    sel = table.selected_columns
    return [str(sel[i] + 1 if i < len(sel) else i + 1) for i in range(n)]


def compute_widths(table: Table, config: TableConfig) -> List[int]:
    widths = [visible_width(h) for h in table.headers]
    for row in table.rows:
        if len(row) > len(widths):
            widths.extend([0] * (len(row) - len(widths)))
        for i, val in enumerate(row):
            widths[i] = max(widths[i], visible_width(val))
    if config.numbering:
        for i, label in enumerate(column_number_labels(table, len(widths))):
            widths[i] = max(widths[i], visible_width(label))
    return widths


def render_table(table: Table, config: TableConfig) -> List[str]:
    """
    Draw the table as aligned text lines.

    Honors:
      - config.padding            : spaces on both sides of every cell
      - config.border             : FULL box, COLUMN_SEPARATOR only, or NONE
      - config.column_separator   : cell joint when COLUMN_SEPARATOR is active
      - config.numbering          : leading row of original column numbers
      - config.title_separator    : rule under the header (implied by an explicit header)
      - config.footer_separator   : rule before the last row
      - config.no_format          : emit cells at natural width
      - config.no_numeric_align   : keep numbers left-aligned
    """
    widths = compute_widths(table, config)
    pad = " " * config.padding
    bordered = config.border is BorderStyle.FULL
    draw_cs = config.draws_column_separators
    draw_ts = config.draws_title_separator
    lines: List[str] = []

    def joint() -> str:
        if bordered:
            return BOX["v"]
        if draw_cs:
            return config.column_separator
        return pad

    def rule(left: str, right: str, cross: str) -> str:
        h = BOX["h"]
        parts = [left] if bordered else []
        for i, w in enumerate(widths):
            if i > 0:
                parts.append(cross if draw_cs else h * config.padding)
            parts.append(h * (w + 2 * config.padding))
        if bordered:
            parts.append(right)
        return "".join(parts)

    def mid_rule() -> str:
        if bordered:
            return rule(BOX["lm"], BOX["rm"], BOX["c"])
        return rule(BOX["h"], BOX["h"], BOX["h"])

    def cell(text: str, width: int, right: bool) -> str:
        if config.no_format:
            return text
        fill = " " * max(0, width - visible_width(text))
        body = fill + text if right else text + fill
        return pad + body + pad

    def line(cells: Sequence[str]) -> str:
        edge = BOX["v"] if bordered else ""
        return edge + joint().join(cells) + edge

    def data_cells(row: Sequence[str]) -> List[str]:
        blank = isinstance(row, SeparatorRow)
        out = []
        for i, val in enumerate(row):
            w = widths[i] if i < len(widths) else visible_width(val)
            right = not blank and not config.no_numeric_align and is_numeric(val)
            out.append(cell(val, w, right))
        return out

    if bordered:
        lines.append(rule(BOX["tl"], BOX["tr"], BOX["tm"]))

    if config.numbering:
        labels = column_number_labels(table, len(widths))
        lines.append(line([cell(lab, w, not config.no_numeric_align)
                           for lab, w in zip(labels, widths)]))
        if bordered or draw_ts:
            lines.append(mid_rule())

    if table.headers:
        cells = []
        for i, h in enumerate(table.headers):
            # A leading '-' marks the header for right alignment.
            right = h.startswith("-")
            content = h[1:] if right else h
            cells.append(cell(content, widths[i], right))
        lines.append(line(cells))
        if draw_ts:
            lines.append(mid_rule())

    last = len(table.rows) - 1
    for idx, row in enumerate(table.rows):
        if config.footer_separator and idx > 0 and idx == last:
            lines.append(mid_rule())
        lines.append(line(data_cells(row)))

    if bordered:
        lines.append(rule(BOX["bl"], BOX["br"], BOX["bm"]))
    return lines
