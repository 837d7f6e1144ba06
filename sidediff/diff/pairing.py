from collections.abc import Sequence

from sidediff.diff.models import DiffLine, DiffLineType


def _run_end(lines: Sequence[DiffLine], start: int, line_type: DiffLineType) -> int:
    end = start
    while end < len(lines) and lines[end].type == line_type:
        end += 1
    return end


def pair_hunk_lines(lines: Sequence[DiffLine]) -> list[DiffLine]:
    """
    Turn a hunk's parsed rows into the rows that get displayed.

    A run of removed lines and the run of added lines right after it are
    laid out next to each other by position: the p-th removed line shares
    a row with the p-th added line. Rows with both sides become MODIFIED,
    leftovers stay REMOVED or ADDED. The lines are not compared, so runs of
    different length pair unrelated lines.
    """

    rows: list[DiffLine] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.type != DiffLineType.REMOVED:
            rows.append(line)
            i += 1
            continue

        removed_end = _run_end(lines, i, DiffLineType.REMOVED)
        added_end = _run_end(lines, removed_end, DiffLineType.ADDED)
        removed = lines[i:removed_end]
        added = lines[removed_end:added_end]

        for p in range(max(len(removed), len(added))):
            row = DiffLine(type=DiffLineType.REMOVED)
            if p < len(removed):
                row.left_line_number = removed[p].left_line_number
                row.left_content = removed[p].left_content
            if p < len(added):
                row.type = DiffLineType.MODIFIED if p < len(removed) else DiffLineType.ADDED
                row.right_line_number = added[p].right_line_number
                row.right_content = added[p].right_content
            rows.append(row)

        i = added_end

    return rows
