# Helpers shared by the pipeline and the command line.
from __future__ import annotations

from . import io, parsing, columns, formatters, width
from . import logging as ULOG

__all__ = ["io", "parsing", "columns", "formatters", "width", "ULOG"]
