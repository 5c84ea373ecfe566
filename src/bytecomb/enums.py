"""Enumerations for bytecomb type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a failure reason compares equal
to its text: FailureReason.NOT_EMPTY == "not empty".

Python 3.13+.
"""

from enum import StrEnum


class FailureReason(StrEnum):
    """Static reason attached to every ParseFailure.

    The set is closed: parsers never format dynamic text into a reason.
    """

    NOT_EMPTY = "not empty"
    """empty / fully_consumed: input still has bytes"""

    PARSER_SUCCEEDED = "parser succeeded"
    """not_: the negated parser matched"""

    NO_PARSER_SUCCEEDED = "No parser succeeded"
    """any_of: every alternative failed"""

    NO_REPETITION = "Parser failed to succeed once"
    """one_or_more: zero successful applications"""

    EMPTY_INPUT = "Empty input"
    """byte, bytes_, satisfy, take_while: nothing to read"""

    NOT_ENOUGH_BYTES = "Not enough bytes"
    """bytes_: input shorter than the literal"""

    WRONG_BYTES = "Wrong bytes"
    """bytes_: prefix differs from the literal"""

    WRONG_BYTE = "Wrong byte"
    """byte, satisfy: next byte rejected"""

    TAKE_ZERO = "take(cnt) cannot have cnt == 0"
    """take: zero-length take requested"""

    TAKE_NOT_ENOUGH = "take(cnt) not enough bytes"
    """take: fewer bytes than requested"""

    NOTHING_CONSUMED = "did not consume 1 byte"
    """*_1 scanners: matched prefix or suffix is empty"""


__all__ = ["FailureReason"]
