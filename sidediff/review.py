import logging
import sys
from collections.abc import Callable
from typing import TextIO

from sidediff.config import DisplaySettings
from sidediff.render import show_side_by_side_diff
from sidediff.render.models import ReviewChoice

logger = logging.getLogger(__name__)

REVIEW_MENU = "[a] Accept changes  [r] Reject changes  [q] Continue"


def parse_choice(answer: str | None) -> ReviewChoice:
    if not answer:
        return ReviewChoice.CONTINUE
    key = answer.strip()[:1].lower()
    if key == "a":
        return ReviewChoice.ACCEPT
    if key == "r":
        return ReviewChoice.REJECT
    return ReviewChoice.CONTINUE


def review_diff(
    diff_text: str | None,
    settings: DisplaySettings | None = None,
    out: TextIO | None = None,
    prompt: Callable[[str], str] = input,
) -> ReviewChoice:
    """Show a diff side by side and ask whether to accept or reject it."""
    if diff_text is None:
        return ReviewChoice.CONTINUE

    out = out or sys.stdout
    show_side_by_side_diff(diff_text, settings, out)

    out.write("\n")
    out.write(REVIEW_MENU + "\n")
    out.flush()
    try:
        answer = prompt("Choice: ")
    except EOFError:
        answer = None

    choice = parse_choice(answer)
    logger.debug("Review answer %r -> %s", answer, choice)
    return choice
