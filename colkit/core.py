from __future__ import annotations
import sys
import argparse
import traceback
import signal
from typing import Iterable, List, Optional

from . import __version__
from .config import TableConfig
from .table import Table, filter_lines, resolve_header, split_line, sort_rows, group_rows
from .utils import io as UIO
from .utils import parsing as UP
from .utils import logging as ULOG
from .utils import columns as UCOL
from .utils import formatters as UFMT


def process_lines(lines: Iterable[str], config: TableConfig) -> Table:
    """
    Run the table pipeline: filter → header → projection → sort → group.
    Each stage works on the one Table owned by this call.
    """
    logger = ULOG.get_logger("colkit.core")
    kept = filter_lines(lines, config.filter_pattern)
    if not kept:
        logger.debug("no input lines left after filtering")
        return Table()

    headers, rows = resolve_header(kept, config)
    table = Table(headers=headers, rows=rows)

    explicit: Optional[List[str]] = None
    if config.explicit_header is not None:
        explicit = split_line(config.explicit_header, config)
    UCOL.project_table(table, config.column_specs, explicit_header=explicit)

    sort_rows(table.rows, config.sort_column)
    table.rows = group_rows(table.rows, config.group_column, config.keep_group_values)
    return table


def build_parser() -> argparse.ArgumentParser:
    ap = UFMT.CustomArgumentParser(
        prog="colkit",
        description="Format and shape unformatted text into aligned columns.",
        epilog=UP.build_epilog("Examples", UP.EXAMPLES[:3]),
        add_help=False,
    )
    UP.add_input_args(ap)
    UP.add_header_args(ap)
    UP.add_table_args(ap)
    UP.add_layout_args(ap)
    UP.add_output_args(ap)
    UP.add_diagnostic_args(ap, __version__)
    return ap


def run(args: argparse.Namespace, *, stdin=None) -> int:
    config = TableConfig.from_args(args)
    lines = UIO.read_lines(getattr(args, "file", None),
                           encoding=getattr(args, "encoding", "utf-8"), stdin=stdin)
    table = process_lines(lines, config)
    UIO.write_table(table, config, getattr(args, "out_file", None),
                    encoding=getattr(args, "encoding", "utf-8"))
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    parser = build_parser()
    try:
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    except (AttributeError, ValueError):
        # No SIGPIPE on Windows; not allowed outside the main thread.
        pass

    try:
        args0, _ = parser.parse_known_args(argv)
    except SystemExit as e:
        return 0 if e.code == 0 else 2
    ULOG.configure_from_args(args0)
    logger = ULOG.get_logger("colkit.core")

    try:
        args = parser.parse_intermixed_args(argv)
    except SystemExit as e:
        return 0 if e.code == 0 else 2

    if args.verify:
        sys.stdout.write(f"Args: {args}\n")
        return 0

    try:
        return run(args)

    except (ValueError, KeyError) as e:
        logger.error(str(e))
        if getattr(args, "debug", False): traceback.print_exc()
        return 2
    except BrokenPipeError:
        try:
            sys.stderr.close()
        except OSError:
            pass
        return 0
    except OSError as e:
        logger.error(str(e))
        if getattr(args, "debug", False): traceback.print_exc()
        return 3
    except Exception as e:
        logger.error("An unexpected error occurred: %s", e)
        if getattr(args, "debug", False): traceback.print_exc()
        return 4


if __name__ == "__main__":
    raise SystemExit(main())
