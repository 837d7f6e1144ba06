import logging
import re

from sidediff.diff.models import DiffLine, DiffLineType, FileDiff, Hunk
from sidediff.diff.sanitize import sanitize_line

logger = logging.getLogger(__name__)

OLD_RANGE_RE = re.compile(r"^@@\s*-(\d+)(?:,(\d+))?")
NEW_RANGE_RE = re.compile(r"\+(\d+)(?:,(\d+))?")

DEV_NULL = "/dev/null"

SKIPPED_HEADER_PREFIXES = ("diff ", "index ")
BINARY_MARKERS = ("Binary files ", "GIT binary patch")


def parse_hunk_header(line: str) -> tuple[int, int, int, int]:
    """
    Read the ranges out of a `@@ -old_start,old_count +new_start,new_count @@`
    marker.

    A missing count means 1. A range that cannot be read falls back to
    start 0 and count 1 instead of failing.
    """

    old_start, old_count, new_start, new_count = 0, 1, 0, 1

    rest = line
    old_match = OLD_RANGE_RE.match(line)
    if old_match:
        old_start = int(old_match.group(1))
        if old_match.group(2) is not None:
            old_count = int(old_match.group(2))
        rest = line[old_match.end():]

    new_match = NEW_RANGE_RE.search(rest)
    if new_match:
        new_start = int(new_match.group(1))
        if new_match.group(2) is not None:
            new_count = int(new_match.group(2))

    return old_start, old_count, new_start, new_count


def _parse_path(line: str, prefix: str) -> str:
    # "--- a/src/main.py\t2024-01-01 10:00:00" -> "src/main.py"
    raw_path = line[4:]
    path, _, _ = raw_path.partition("\t")
    if path == DEV_NULL:
        return path
    return path.removeprefix(prefix)


def parse_unified_diff(diff_text: str | None) -> FileDiff | None:
    """
    Args:
        diff_text: Raw unified diff, as printed by `git diff`.

    Returns:
        A populated FileDiff, or None when the text is empty or has no
        `@@` hunk marker at all.

    The whole blob is read as one file. When it holds several file sections
    the hunks of all of them are collected into the same FileDiff and the
    paths are those of the last section.
    """

    if not diff_text:
        return None

    diff = FileDiff()
    current_hunk: Hunk | None = None
    left_num = 0
    right_num = 0
    renamed_by_header = False

    for line in diff_text.split("\n"):
        if line.startswith(SKIPPED_HEADER_PREFIXES):
            continue
        if line.startswith("---"):
            if len(line) > 4:
                diff.old_path = _parse_path(line, "a/")
            continue
        if line.startswith("+++"):
            if len(line) > 4:
                diff.new_path = _parse_path(line, "b/")
            continue
        if line.startswith("@@"):
            old_start, old_count, new_start, new_count = parse_hunk_header(line)
            current_hunk = Hunk(
                old_start=old_start,
                old_count=old_count,
                new_start=new_start,
                new_count=new_count,
                header=sanitize_line(line),
            )
            diff.hunks.append(current_hunk)
            left_num = old_start
            right_num = new_start
            continue

        if line.startswith("new file mode"):
            diff.is_new = True
            continue
        if line.startswith("deleted file mode"):
            diff.is_deleted = True
            continue
        if line.startswith(("rename from ", "rename to ")):
            renamed_by_header = True
            continue
        if line.startswith(BINARY_MARKERS):
            diff.is_binary = True
            continue

        if current_hunk is None or not line:
            continue

        prefix = line[0]
        content = sanitize_line(line[1:])

        if prefix == "-":
            row = DiffLine(
                type=DiffLineType.REMOVED,
                left_line_number=left_num,
                left_content=content,
            )
            left_num += 1
            diff.deletions += 1
        elif prefix == "+":
            row = DiffLine(
                type=DiffLineType.ADDED,
                right_line_number=right_num,
                right_content=content,
            )
            right_num += 1
            diff.additions += 1
        elif prefix == " ":
            row = DiffLine(
                type=DiffLineType.CONTEXT,
                left_line_number=left_num,
                right_line_number=right_num,
                left_content=content,
                right_content=content,
            )
            left_num += 1
            right_num += 1
        elif prefix == "\\":
            # "\ No newline at end of file" belongs to the line above it
            row = DiffLine(
                type=DiffLineType.CONTEXT,
                left_content=content,
                right_content=content,
            )
        else:
            continue

        current_hunk.lines.append(row)

    if not diff.hunks:
        logger.debug("No hunk markers found in %d characters of diff text", len(diff_text))
        return None

    if diff.old_path == DEV_NULL:
        diff.is_new = True
    if diff.new_path == DEV_NULL:
        diff.is_deleted = True
    diff.is_renamed = renamed_by_header or (
        bool(diff.old_path)
        and bool(diff.new_path)
        and DEV_NULL not in (diff.old_path, diff.new_path)
        and diff.old_path != diff.new_path
    )

    logger.debug(
        "Parsed %d hunks from unified diff (+%d -%d)",
        len(diff.hunks),
        diff.additions,
        diff.deletions,
    )
    return diff
