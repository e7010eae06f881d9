from __future__ import annotations
import argparse, shutil, os, sys

_TERM_WIDTH = shutil.get_terminal_size((100, 20)).columns

_ANSI_RESET = "\033[0m"
_ANSI_BOLD = "\033[1m"
_ANSI_CYAN = "\033[36m"


def _supports_color(stream) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


class EnhancedHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """
    Help formatter with wider output; description and epilog keep their line breaks
    so the examples table stays aligned.
    """

    def __init__(self, prog: str) -> None:
        # 32 aligns help text nicely for the long option aliases.
        super().__init__(prog, max_help_position=32, width=_TERM_WIDTH)

    def start_section(self, heading) -> None:
        if heading and _supports_color(sys.stdout):
            heading = f"{_ANSI_BOLD}{_ANSI_CYAN}{heading}{_ANSI_RESET}"
        super().start_section(heading)


class CustomArgumentParser(argparse.ArgumentParser):
    """
    ArgumentParser that prints the command's help before reporting an error.
    This mirrors tools like git and samtools and is useful for bad option values.
    """

    def __init__(self, *args, **kwargs) -> None:
        kwargs.setdefault("formatter_class", EnhancedHelpFormatter)
        super().__init__(*args, **kwargs)

    def error(self, message: str) -> None:
        # Print help to stderr, then exit with code 2 and the error message.
        self.print_help(sys.stderr)
        self.exit(2, f"Error: {message}\n")


MANUAL_NOTES = """
Processing order
  1. --filter drops non-matching lines.
  2. --rh drops the first remaining line.
  3. Header: --header string, else none with --nhl, else the first line.
  4. COLUMN specs select and reorder columns (missing fields become empty).
  5. --sortcol sorts rows, numerically when both values are numbers.
  6. --gcol blanks repeated values and inserts an empty row between groups.
  7. The table is rendered, or written as CSV/JSON/YAML/HTML.

Alignment
  Values that parse as numbers are right-aligned unless --nn is given.
  A header starting with '-' is right-aligned and shown without the '-'.
  Colour codes and hyperlinks do not count towards column widths.
"""


class ManpageAction(argparse.Action):
    """
    argparse Action: --manpage → print help, processing notes and examples, then exit(0).
    """
    def __init__(self, option_strings, dest, nargs=0, **kwargs) -> None:
        kwargs.setdefault("default", argparse.SUPPRESS)
        super().__init__(option_strings, dest, nargs=nargs, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        from colkit.utils.parsing import EXAMPLES, build_epilog

        parts = [parser.format_help().rstrip("\n"), MANUAL_NOTES.rstrip("\n"),
                 build_epilog("Examples", EXAMPLES)]
        sys.stdout.write("\n".join(parts) + "\n")
        parser.exit(0)
