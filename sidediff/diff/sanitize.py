TAB_WIDTH = 4


def sanitize_line(line: str | None) -> str:
    """
    Make a diff content line safe to place in a fixed-width column.

    - Tabs expand to the next multiple of TAB_WIDTH, counted from the
      current output column
    - Carriage returns, newlines and other control characters are dropped
    - Everything from the space character upwards passes through
    """

    if not line:
        return ""

    out: list[str] = []
    column = 0
    for ch in line:
        if ch == "\t":
            spaces = TAB_WIDTH - (column % TAB_WIDTH)
            out.append(" " * spaces)
            column += spaces
        elif ord(ch) >= 32:
            out.append(ch)
            column += 1
    return "".join(out)
