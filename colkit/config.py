from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class BorderStyle(Enum):
    NONE = "none"
    COLUMN_SEPARATOR = "column-separator"
    FULL = "full"


class HeaderMode(Enum):
    FIRST_LINE = "first-line"   # first surviving line becomes the header
    EXPLICIT = "explicit"       # --header string; every line is data
    NONE = "none"               # --nhl; no header row at all


class OutputFormat(Enum):
    TEXT = "text"
    CSV = "csv"
    JSON = "json"
    YAML = "yaml"
    HTML = "html"


@dataclass(frozen=True)
class TableConfig:
    """
    Immutable settings threaded through every pipeline stage.

    Built once from the parsed command line (see ``from_args``); the stages
    never consult global state.
    """
    separator: str = " "
    collapse_separators: bool = False
    padding: int = 1
    column_separator: str = "│"
    explicit_header: Optional[str] = None
    header_mode: HeaderMode = HeaderMode.FIRST_LINE
    remove_header: bool = False
    title_separator: bool = False
    footer_separator: bool = False
    border: BorderStyle = BorderStyle.NONE
    numbering: bool = False
    no_format: bool = False
    no_numeric_align: bool = False
    sort_column: Optional[int] = None
    group_column: Optional[int] = None
    keep_group_values: bool = False
    column_specs: Tuple[str, ...] = field(default_factory=tuple)
    filter_pattern: Optional[str] = None
    output_format: OutputFormat = OutputFormat.TEXT
    title_column: bool = False

    def __post_init__(self) -> None:
        # A header string always means every input line is data.
        if self.explicit_header is not None and self.header_mode is not HeaderMode.EXPLICIT:
            object.__setattr__(self, "header_mode", HeaderMode.EXPLICIT)

    @property
    def draws_title_separator(self) -> bool:
        # An explicit header always gets a rule underneath it.
        return self.title_separator or self.explicit_header is not None

    @property
    def draws_column_separators(self) -> bool:
        return self.border is not BorderStyle.NONE

    @classmethod
    def from_args(cls, args) -> "TableConfig":
        """Map the flat CLI flags onto the structured config."""
        explicit = getattr(args, "header", None)
        if explicit is not None:
            mode = HeaderMode.EXPLICIT
        elif getattr(args, "nhl", False):
            mode = HeaderMode.NONE
        else:
            mode = HeaderMode.FIRST_LINE

        if getattr(args, "pp", False):
            border = BorderStyle.FULL
        elif getattr(args, "cs", False):
            border = BorderStyle.COLUMN_SEPARATOR
        else:
            border = BorderStyle.NONE

        fmt = OutputFormat.TEXT
        for name in ("csv", "json", "yaml", "html"):
            if getattr(args, name, False):
                fmt = OutputFormat(name)
                break

        width = getattr(args, "width", None)
        sep = getattr(args, "sep", None)
        colsep = getattr(args, "colsep", None)
        return cls(
            separator=" " if sep is None else sep,
            collapse_separators=bool(getattr(args, "mb", False)),
            padding=1 if width is None else int(width),
            column_separator="│" if colsep is None else colsep,
            explicit_header=explicit,
            header_mode=mode,
            remove_header=bool(getattr(args, "rh", False)),
            title_separator=bool(getattr(args, "ts", False)),
            footer_separator=bool(getattr(args, "fs", False)),
            border=border,
            numbering=bool(getattr(args, "num", False)),
            no_format=bool(getattr(args, "nf", False)),
            no_numeric_align=bool(getattr(args, "nn", False)),
            sort_column=getattr(args, "sortcol", None),
            group_column=getattr(args, "gcol", None),
            keep_group_values=bool(getattr(args, "gcolval", False)),
            column_specs=tuple(getattr(args, "columns", None) or ()),
            filter_pattern=getattr(args, "filter", None),
            output_format=fmt,
            title_column=bool(getattr(args, "jtc", False)),
        )
