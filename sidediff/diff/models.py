from dataclasses import dataclass, field
from enum import StrEnum


class DiffLineType(StrEnum):
    CONTEXT = "context"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    HEADER = "header"
    HUNK = "hunk"
    BINARY = "binary"
    EMPTY = "empty"


@dataclass
class DiffLine:
    """One visual row of the side-by-side view."""

    type: DiffLineType
    left_line_number: int | None = None
    right_line_number: int | None = None
    left_content: str = ""
    right_content: str = ""


@dataclass
class Hunk:
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    header: str
    lines: list[DiffLine] = field(default_factory=list)


@dataclass
class FileDiff:
    old_path: str = ""
    new_path: str = ""
    is_new: bool = False
    is_deleted: bool = False
    is_binary: bool = False
    is_renamed: bool = False
    hunks: list[Hunk] = field(default_factory=list)
    additions: int = 0
    deletions: int = 0
