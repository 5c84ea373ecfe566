"""Debug tracing for parser development.

traced() wraps a parser and reports every attempt on this module's logger
at DEBUG level. It never changes the outcome. Enable it with:

    logging.getLogger("bytecomb.parser.tracing").setLevel(logging.DEBUG)
"""

import logging

from bytecomb.constants import TRACE_PREVIEW_LENGTH
from bytecomb.cursor import Cursor, ParseOutcome, Parser, ParseResult

__all__ = ["traced"]

logger = logging.getLogger(__name__)


def traced[T](parser: Parser[T], label: str) -> Parser[T]:
    """Log attempts, matches and failures of parser under label.

    Args:
        parser: Parser to observe
        label: Name shown in each log line

    Returns:
        Parser with identical outcomes
    """

    def parse_traced(cursor: Cursor) -> ParseOutcome[T]:
        if not logger.isEnabledFor(logging.DEBUG):
            return parser(cursor)

        logger.debug(
            "trying %s at %d, next bytes %r",
            label,
            cursor.pos,
            cursor.slice_ahead(TRACE_PREVIEW_LENGTH),
        )
        outcome = parser(cursor)
        if isinstance(outcome, ParseResult):
            logger.debug(
                "matched %s, consumed %d bytes, next bytes %r",
                label,
                len(cursor) - len(outcome.cursor),
                outcome.cursor.slice_ahead(TRACE_PREVIEW_LENGTH),
            )
        else:
            logger.debug("failed %s at %d: %s", label, cursor.pos, outcome.reason)
        return outcome

    return parse_traced
