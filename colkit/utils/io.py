from __future__ import annotations
import html
import io as _io
import json
import sys
from typing import IO, Iterator, List, Optional

import pandas as pd
import yaml

from colkit.config import OutputFormat, TableConfig
from colkit.utils.width import strip_ansi


def read_lines(path: Optional[str] = None, *, encoding: str = "utf-8",
               stdin: Optional[IO[str]] = None) -> List[str]:
    """
    Read input lines from a file and/or stdin, each stripped of surrounding whitespace.

    The file (if any) is read first; stdin is appended when it is piped or
    when no file was named, so `cat extra.txt | colkit -f data.txt` combines both.
    """
    lines: List[str] = []
    if path not in (None, "-"):
        with open(path, "r", encoding=encoding, errors="replace") as fh:
            lines.extend(ln.strip() for ln in fh)

    src = sys.stdin if stdin is None else stdin
    if path in (None, "-") or not src.isatty():
        buf = getattr(src, "buffer", None)
        reader = src if buf is None else _io.TextIOWrapper(buf, encoding=encoding, errors="replace")
        lines.extend(ln.strip() for ln in reader)
    return lines


#-- Serializers --
def _records(headers: List[str], rows: List[List[str]]) -> List[dict]:
    """One dict per row; with duplicate header names the rightmost column wins."""
    keys = [strip_ansi(h) for h in headers]
    out = []
    for row in rows:
        out.append({k: strip_ansi(v) for k, v in zip(keys, row)})
    return out


def _title_column_map(headers: List[str], rows: List[List[str]]) -> dict:
    keys = [strip_ansi(h) for h in headers]
    out: dict = {}
    for row in rows:
        if not row:
            continue
        out[strip_ansi(row[0])] = {k: strip_ansi(v) for k, v in zip(keys[1:], row[1:])}
    return out


def _structured(table, title_column: bool):
    if not table.headers:
        return [[strip_ansi(v) for v in row] for row in table.rows]
    if title_column:
        return _title_column_map(table.headers, table.rows)
    return _records(table.headers, table.rows)


def format_csv(table) -> str:
    buf = _io.StringIO()
    df = pd.DataFrame([list(r) for r in table.rows], dtype=object)
    if df.empty and table.headers:
        df = pd.DataFrame(columns=range(len(table.headers)), dtype=object)
    has_header = bool(table.headers)
    if has_header:
        df.columns = table.headers
    if df.shape[1] == 0:
        return ""
    df.to_csv(buf, index=False, header=has_header, lineterminator="\n")
    return buf.getvalue()


def format_json(table, *, title_column: bool = False) -> str:
    return json.dumps(_structured(table, title_column), indent=2, ensure_ascii=False) + "\n"


def format_yaml(table, *, title_column: bool = False) -> str:
    return yaml.safe_dump(_structured(table, title_column), sort_keys=False,
                          allow_unicode=True, default_flow_style=False)


def format_html(table) -> str:
    esc = html.escape
    out = ["<table>"]
    if table.headers:
        out += ["  <thead>", "    <tr>"]
        out += [f"      <th>{esc(h)}</th>" for h in table.headers]
        out += ["    </tr>", "  </thead>"]
    out.append("  <tbody>")
    for row in table.rows:
        out.append("    <tr>")
        out += [f"      <td>{esc(v)}</td>" for v in row]
        out.append("    </tr>")
    out += ["  </tbody>", "</table>"]
    return "\n".join(out) + "\n"


def iter_output(table, config: TableConfig) -> Iterator[str]:
    """Yield the serialized table as text chunks for the configured output format."""
    from colkit.render import render_table

    fmt = config.output_format
    if fmt is OutputFormat.CSV:
        yield format_csv(table)
    elif fmt is OutputFormat.JSON:
        yield format_json(table, title_column=config.title_column)
    elif fmt is OutputFormat.YAML:
        yield format_yaml(table, title_column=config.title_column)
    elif fmt is OutputFormat.HTML:
        yield format_html(table)
    else:
        for line in render_table(table, config):
            yield line + "\n"


def write_table(table, config: TableConfig, path: Optional[str] = None, *,
                encoding: str = "utf-8") -> None:
    """Write a finished table to a file or stdout; remain quiet on BrokenPipe."""
    out = sys.stdout if path in (None, "-") else open(path, "w", encoding=encoding)
    close = (out is not sys.stdout)
    try:
        for chunk in iter_output(table, config):
            out.write(chunk)
        out.flush()
    except BrokenPipeError:
        return
    finally:
        if close:
            out.close()
