import sys
from typing import TextIO

from sidediff.render import colors
from sidediff.render.colors import paint
from sidediff.render.models import DisplayResult


def _line_color(line: str) -> str:
    if line.startswith(("+++", "---", "diff ")):
        return colors.HEADER
    if line.startswith("@@"):
        return colors.HUNK
    if line.startswith("+"):
        return colors.ADD_FG
    if line.startswith("-"):
        return colors.DEL_FG
    return ""


def show_colored_diff(
    diff_text: str | None,
    use_colors: bool = True,
    out: TextIO | None = None,
) -> DisplayResult:
    """Echo a unified diff line by line, coloring headers, hunks and changes."""
    if not diff_text:
        return DisplayResult.NO_DIFFERENCES

    out = out or sys.stdout
    for line in diff_text.splitlines():
        out.write(paint(line, _line_color(line), use_colors) + "\n")
    return DisplayResult.RENDERED
