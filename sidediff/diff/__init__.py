from sidediff.diff.models import (
    DiffLine,
    DiffLineType,
    FileDiff,
    Hunk,
)
from sidediff.diff.pairing import pair_hunk_lines
from sidediff.diff.parser import parse_hunk_header, parse_unified_diff
from sidediff.diff.sanitize import sanitize_line

__all__ = [
    "DiffLine",
    "DiffLineType",
    "FileDiff",
    "Hunk",
    "pair_hunk_lines",
    "parse_hunk_header",
    "parse_unified_diff",
    "sanitize_line",
]
