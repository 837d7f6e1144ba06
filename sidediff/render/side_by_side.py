import logging
import sys
from collections.abc import Iterator
from typing import TextIO

from sidediff.config import DisplaySettings
from sidediff.diff.models import DiffLine, DiffLineType, FileDiff
from sidediff.diff.pairing import pair_hunk_lines
from sidediff.diff.parser import DEV_NULL, parse_unified_diff
from sidediff.render import colors
from sidediff.render.colors import paint
from sidediff.render.models import DisplayResult
from sidediff.render.terminal import (
    column_width,
    fit_to_width,
    hunk_banner,
    rule,
    terminal_width,
)

logger = logging.getLogger(__name__)

GUTTER_WIDTH = 4

LEFT_TYPES = {DiffLineType.REMOVED, DiffLineType.MODIFIED}
RIGHT_TYPES = {DiffLineType.ADDED, DiffLineType.MODIFIED}


def _gutter(number: int | None, show_line_numbers: bool, use_colors: bool) -> str:
    if not show_line_numbers:
        return ""
    if number is None or number <= 0:
        return " " * GUTTER_WIDTH
    return paint(str(number).rjust(GUTTER_WIDTH), colors.LINE_NUM, use_colors)


def _side(
    row: DiffLine,
    left: bool,
    content_width: int,
    use_colors: bool,
) -> str:
    content = row.left_content if left else row.right_content
    changed_types = LEFT_TYPES if left else RIGHT_TYPES
    missing_type = DiffLineType.ADDED if left else DiffLineType.REMOVED

    if row.type in changed_types:
        marker, color = ("-", colors.DEL_FG) if left else ("+", colors.ADD_FG)
        return paint(marker + fit_to_width(content, content_width), color, use_colors)
    if row.type == missing_type:
        return paint(" " * (content_width + 1), colors.EMPTY_BG, use_colors)
    return " " + fit_to_width(content, content_width)


def format_row(
    row: DiffLine,
    col_width: int,
    show_line_numbers: bool = True,
    use_colors: bool = True,
) -> str:
    """
    Render one paired row as `[gutter]-left │ [gutter]+right`.

    Each pane is `col_width` columns: an optional 4 column line number
    gutter, a one column marker and the fitted content.
    """

    gutter_width = GUTTER_WIDTH if show_line_numbers else 0
    content_width = max(col_width - gutter_width - 1, 0)

    left = _gutter(row.left_line_number, show_line_numbers, use_colors) + _side(
        row, True, content_width, use_colors
    )
    right = _gutter(row.right_line_number, show_line_numbers, use_colors) + _side(
        row, False, content_width, use_colors
    )
    separator = paint(" │ ", colors.SEPARATOR, use_colors)
    return f"{left}{separator}{right}"


def _file_label(diff: FileDiff, use_colors: bool) -> str:
    if diff.is_renamed:
        return (
            f"{paint(diff.old_path, colors.DEL_FG, use_colors)} → "
            f"{paint(diff.new_path, colors.ADD_FG, use_colors)}"
        )

    path = diff.new_path
    if not path or path == DEV_NULL:
        path = diff.old_path
    tags = []
    if diff.is_new:
        tags.append("new file")
    if diff.is_deleted:
        tags.append("deleted")
    if diff.is_binary:
        tags.append("binary")
    if tags:
        path = f"{path} ({', '.join(tags)})"
    return path


def render_header(diff: FileDiff, width: int, use_colors: bool = True) -> list[str]:
    totals = (
        f"{paint(f'+{diff.additions}', colors.ADD_FG, use_colors)} "
        f"{paint(f'-{diff.deletions}', colors.DEL_FG, use_colors)}"
    )
    return [
        "",
        rule("═", width, colors.HEADER, use_colors),
        f"{paint('  File: ', colors.HEADER, use_colors)}{_file_label(diff, use_colors)}  {totals}",
        rule("─", width, colors.HEADER, use_colors),
    ]


def render_side_by_side(
    diff: FileDiff,
    settings: DisplaySettings,
    width: int,
) -> Iterator[str]:
    """Yield the output lines for a parsed diff, without trailing newlines."""
    col_width = column_width(width)
    use_colors = settings.use_colors

    yield from render_header(diff, width, use_colors)

    for hunk in diff.hunks:
        yield hunk_banner(hunk.header, width, colors.HUNK, use_colors)
        for row in pair_hunk_lines(hunk.lines):
            yield format_row(row, col_width, settings.show_line_numbers, use_colors)

    yield rule("═", width, colors.HEADER, use_colors)
    yield ""


def write_raw(diff_text: str, out: TextIO) -> None:
    out.write(diff_text)
    if not diff_text.endswith("\n"):
        out.write("\n")


def show_side_by_side_diff(
    diff_text: str | None,
    settings: DisplaySettings | None = None,
    out: TextIO | None = None,
) -> DisplayResult:
    """
    Render a unified diff as two aligned columns.

    Returns:
        NO_DIFFERENCES when there is nothing to show (nothing is written),
        RAW when the text has no hunks and was written unchanged,
        RENDERED otherwise.
    """

    if not diff_text:
        logger.info("No differences to display")
        return DisplayResult.NO_DIFFERENCES

    settings = settings or DisplaySettings()
    out = out or sys.stdout

    diff = parse_unified_diff(diff_text)
    if diff is None:
        logger.debug("Input is not a unified diff, writing it unchanged")
        write_raw(diff_text, out)
        return DisplayResult.RAW

    width = terminal_width(settings.terminal_width)
    logger.debug("Rendering %d hunks at width %d", len(diff.hunks), width)
    for line in render_side_by_side(diff, settings, width):
        out.write(line + "\n")
    return DisplayResult.RENDERED
