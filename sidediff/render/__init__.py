from typing import TextIO

from sidediff.config import DisplaySettings
from sidediff.render.models import DisplayResult, ReviewChoice
from sidediff.render.side_by_side import (
    format_row,
    render_header,
    render_side_by_side,
    show_side_by_side_diff,
)
from sidediff.render.terminal import (
    column_width,
    fit_to_width,
    hunk_banner,
    terminal_width,
    visible_len,
)
from sidediff.render.unified import show_colored_diff


def show_diff(
    diff_text: str | None,
    settings: DisplaySettings | None = None,
    out: TextIO | None = None,
) -> DisplayResult:
    settings = settings or DisplaySettings()
    if settings.side_by_side_diff:
        return show_side_by_side_diff(diff_text, settings, out)
    return show_colored_diff(diff_text, settings.use_colors, out)


__all__ = [
    "DisplayResult",
    "ReviewChoice",
    "column_width",
    "fit_to_width",
    "format_row",
    "hunk_banner",
    "render_header",
    "render_side_by_side",
    "show_colored_diff",
    "show_diff",
    "show_side_by_side_diff",
    "terminal_width",
    "visible_len",
]
