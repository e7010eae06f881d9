from __future__ import annotations
import argparse
from typing import List, Tuple
from colkit.utils import formatters as UFMT

EXAMPLES: List[Tuple[str, str]] = [
    ("ls -l | colkit --nhl 9 5 1", "name, size and rights of each file"),
    ("ps aux | colkit -m -S 3 --rh 2 3 11", "pid, cpu and command sorted by cpu"),
    ("colkit -f data.txt -s , --pp", "comma separated file in a box"),
    ("colkit -f data.txt 3:1", "first three columns in reverse order"),
    ("colkit -f data.txt -g 1 --ts", "group by the first column"),
    ("colkit -f data.txt -F '^A' --json", "lines starting with A as JSON"),
    ("colkit -f data.txt --nhl -H 'A B C' -n", "custom header plus column numbers"),
]


def build_epilog(title: str, items: List[Tuple[str, str]]) -> str:
    if not items:
        return ""
    width = max(len(cmd) for cmd, _ in items)
    lines = ["", title]
    for cmd, desc in items:
        pad = " " * (width - len(cmd))
        lines.append(f"  {cmd}{pad}  {desc}")
    return "\n".join(lines)


def _non_negative_int(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {text!r}")
    return n


def add_input_args(ap: argparse.ArgumentParser) -> None:
    g = ap.add_argument_group("Input")
    g.add_argument("-f", "--file", help="Read input from FILE (piped stdin is appended).")
    g.add_argument("-s", "--sep", default=" ",
                   help="Input field separator, matched literally (default: one space).")
    g.add_argument("-m", "--mb", "--merge-blanks", dest="mb", action="store_true",
                   help="Treat runs of whitespace as a single separator.")
    g.add_argument("-F", "--filter", metavar="REGEX",
                   help="Process only lines matching REGEX (applied before header handling).")
    g.add_argument("--encoding", default="utf-8")


def add_header_args(ap: argparse.ArgumentParser) -> None:
    g = ap.add_argument_group("Header")
    g.add_argument("-H", "--header", help="Use this line as the header; all input lines are data.")
    g.add_argument("--nhl", "--no-headline", dest="nhl", action="store_true",
                   help="Input has no header line; every line is data.")
    g.add_argument("--rh", "--remove-header", dest="rh", action="store_true",
                   help="Discard the first input line.")


def add_table_args(ap: argparse.ArgumentParser) -> None:
    g = ap.add_argument_group("Rows")
    g.add_argument("-S", "--sortcol", type=int, metavar="N",
                   help="Sort by output column N (numeric when both values are numbers).")
    g.add_argument("-g", "--gcol", type=int, metavar="N",
                   help="Group by output column N: blank repeats, separate groups.")
    g.add_argument("--gcolval", action="store_true",
                   help="With --gcol, keep repeated values instead of blanking them.")
    ap.add_argument("columns", nargs="*", metavar="COLUMN",
                    help="Output columns: N or A:B (1-based, A>B reverses). Default: all.")


def add_layout_args(ap: argparse.ArgumentParser) -> None:
    g = ap.add_argument_group("Layout")
    g.add_argument("-w", "--width", type=_non_negative_int, default=1, metavar="N",
                   help="Padding on each side of a cell (default: 1).")
    g.add_argument("-C", "--colsep", default="│",
                   help="Column separator string used with --cs (default: │).")
    g.add_argument("--cs", "--column-sep", dest="cs", action="store_true",
                   help="Draw a separator between columns.")
    g.add_argument("-p", "--pp", "--pretty", dest="pp", action="store_true",
                   help="Draw a box around the table.")
    g.add_argument("--ts", "--title-sep", dest="ts", action="store_true",
                   help="Draw a line between header and data.")
    g.add_argument("--fs", "--footer-sep", dest="fs", action="store_true",
                   help="Draw a line before the last row.")
    g.add_argument("-n", "--num", "--numbering", dest="num", action="store_true",
                   help="Add a row with the original column numbers.")
    g.add_argument("--nf", "--no-format", dest="nf", action="store_true",
                   help="Do not pad columns to a common width.")
    g.add_argument("--nn", "--no-numeric", dest="nn", action="store_true",
                   help="Do not right-align numeric values.")


def add_output_args(ap: argparse.ArgumentParser) -> None:
    g = ap.add_argument_group("Output")
    fmt = g.add_mutually_exclusive_group()
    fmt.add_argument("--csv", action="store_true", help="Write CSV.")
    fmt.add_argument("--json", action="store_true", help="Write JSON.")
    fmt.add_argument("--yaml", action="store_true", help="Write YAML.")
    fmt.add_argument("--html", action="store_true", help="Write an HTML table.")
    g.add_argument("--jtc", "--title-column", dest="jtc", action="store_true",
                   help="JSON/YAML: key each row by its first column.")
    g.add_argument("-O", "--out-file", dest="out_file", help="Output file (default: stdout).")


def add_diagnostic_args(ap: argparse.ArgumentParser, version: str) -> None:
    g = ap.add_argument_group("Global Options")
    g.add_argument("-h", "--help", action="help", help="Show this help and exit.")
    g.add_argument("-M", "--manpage", action=UFMT.ManpageAction,
                   help="Show the full manual with examples and exit.")
    g.add_argument("-v", "--verify", action="store_true",
                   help="Print the parsed arguments and exit.")
    g.add_argument("--version", action="version", version=version)
    g.add_argument("--quiet", action="store_true")
    g.add_argument("--debug", action="store_true")
    g.add_argument("--log-file", dest="log_file")
