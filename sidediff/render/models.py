from enum import StrEnum


class DisplayResult(StrEnum):
    NO_DIFFERENCES = "no_differences"
    RAW = "raw"
    RENDERED = "rendered"


class ReviewChoice(StrEnum):
    ACCEPT = "accept"
    REJECT = "reject"
    CONTINUE = "continue"
