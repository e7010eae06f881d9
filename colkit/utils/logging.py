import logging
from typing import Optional

_FMT = "[%(levelname)s] %(message)s"
_DEBUG_FMT = "[%(levelname)s] %(name)s: %(message)s"

def configure(level: int = logging.WARNING, *, quiet: bool = False,
              debug: bool = False, log_file: Optional[str] = None) -> None:
    """Route colkit diagnostics to stderr (and optionally a file); stdout stays table-only."""
    if quiet:
        level = logging.ERROR
    if debug:
        level = logging.DEBUG
    fmt = _DEBUG_FMT if debug else _FMT
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_DEBUG_FMT))
        handlers.append(fh)
    logging.basicConfig(level=level, format=fmt, handlers=handlers, force=True)

def configure_from_args(args) -> None:
    configure(quiet=getattr(args, "quiet", False),
              debug=getattr(args, "debug", False),
              log_file=getattr(args, "log_file", None))

def get_logger(name: str = "colkit") -> logging.Logger:
    return logging.getLogger(name)
