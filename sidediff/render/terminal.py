import shutil

from sidediff.render.colors import ESC, paint

DEFAULT_WIDTH = 120
MIN_COLUMN_WIDTH = 40
SEPARATOR_WIDTH = 3
ELLIPSIS = "..."


def terminal_width(max_width: int = 0) -> int:
    """
    Columns available for output.

    Uses the size of the attached terminal, or DEFAULT_WIDTH when there is
    none. A positive max_width smaller than that wins.
    """

    width = shutil.get_terminal_size(fallback=(DEFAULT_WIDTH, 24)).columns
    if width <= 0:
        width = DEFAULT_WIDTH
    if 0 < max_width < width:
        width = max_width
    return width


def column_width(width: int) -> int:
    """Width of one pane when two panes share `width` around the separator."""
    return max((width - SEPARATOR_WIDTH) // 2, MIN_COLUMN_WIDTH)


def visible_len(text: str | None) -> int:
    """Length of `text` as shown on screen, ignoring ESC ... m sequences."""
    if not text:
        return 0

    length = 0
    in_escape = False
    for ch in text:
        if ch == ESC:
            in_escape = True
        elif in_escape:
            if ch == "m":
                in_escape = False
        else:
            length += 1
    return length


def fit_to_width(text: str | None, width: int) -> str:
    """
    Pad or cut `text` so that its visible length is exactly `width`.

    Text that is too long keeps its first `width - 3` visible characters,
    with escape sequences before the cut copied intact, followed by "...".
    """

    if width <= 0:
        return ""
    text = text or ""

    visible = visible_len(text)
    if visible <= width:
        return text + " " * (width - visible)

    if width < len(ELLIPSIS):
        return ELLIPSIS[:width]

    limit = width - len(ELLIPSIS)
    out: list[str] = []
    count = 0
    in_escape = False
    for ch in text:
        if count >= limit:
            break
        out.append(ch)
        if ch == ESC:
            in_escape = True
        elif in_escape:
            if ch == "m":
                in_escape = False
        else:
            count += 1

    fitted = "".join(out) + ELLIPSIS
    return fitted + " " * (width - visible_len(fitted))


def rule(char: str, width: int, color: str = "", use_colors: bool = True) -> str:
    if width <= 0:
        return ""
    return paint(char * width, color, use_colors)


def hunk_banner(header: str, width: int, color: str = "", use_colors: bool = True) -> str:
    """
    Center a hunk marker inside a `─` rule of `width` columns.

    A marker wider than the rule is printed left-aligned without any rule
    characters.
    """

    header_len = visible_len(header)
    padding = max((width - header_len) // 2, 0)
    trailing = max(width - padding - header_len - 2, 0)
    banner = f"{'─' * padding} {header} {'─' * trailing}"
    return paint(banner, color, use_colors)
