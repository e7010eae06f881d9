from __future__ import annotations
import re
from wcwidth import wcwidth

# CSI: ESC [ params letter   OSC: ESC ] ... (BEL | ESC \)
ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[a-zA-Z]|\x1b\].*?(?:\x07|\x1b\\)")


def strip_ansi(s: str) -> str:
    """Remove CSI and OSC escape sequences from a string."""
    return ANSI_RE.sub("", s)


def visible_width(s: str) -> int:
    """
    Terminal cell width of a string after stripping escape sequences.
    Combining marks count 0, East Asian wide characters count 2.
    """
    total = 0
    for ch in strip_ansi(s):
        w = wcwidth(ch)
        if w > 0:
            total += w
    return total
