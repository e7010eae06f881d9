from __future__ import annotations
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("colkit")
except PackageNotFoundError:  # local dev
    __version__ = "0.0.0.dev0"

from . import core, utils
from .config import TableConfig, BorderStyle, HeaderMode, OutputFormat
from .table import Table, SeparatorRow
from .core import process_lines
from .render import render_table

__all__ = [
    "Table", "SeparatorRow", "TableConfig", "BorderStyle", "HeaderMode", "OutputFormat",
    "process_lines", "render_table", "core", "utils", "__version__",
]
