"""bytecomb exception hierarchy.

Parse failures are ordinary return values (ParseFailure), not exceptions.
The exceptions below signal misuse of the combinators or are raised by the
parse() convenience entry point.

Python 3.13+. Zero external dependencies.
"""

from bytecomb.enums import FailureReason
from bytecomb.templates import ErrorTemplate


class ByteCombError(Exception):
    """Base exception for all bytecomb errors."""


class ParseFailedError(ByteCombError):
    """Raised by parse() when the parser does not match the whole input.

    Attributes:
        reason: Static failure reason from the outermost parser
    """

    def __init__(self, reason: FailureReason) -> None:
        """Initialize ParseFailedError.

        Args:
            reason: Failure reason reported by the parser
        """
        super().__init__(ErrorTemplate.parse_failed(reason))
        self.reason = reason


class NoProgressError(ByteCombError):
    """A repeated parser succeeded without consuming any input.

    Raised by one_or_more, zero_or_more and take_while instead of looping
    forever. This is a grammar bug, never a property of the input alone.
    """


class UndefinedParserError(ByteCombError):
    """A forward parser was applied before define() bound it."""


class ParserRedefinitionError(ByteCombError):
    """define() was called on a forward parser that is already bound."""


__all__ = [
    "ByteCombError",
    "NoProgressError",
    "ParseFailedError",
    "ParserRedefinitionError",
    "UndefinedParserError",
]
