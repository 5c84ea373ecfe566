"""Core parser protocol: end-of-input checks, entry points, forward declarations.

Architecture:
    Parsers take an immutable :class:`~bytecomb.cursor.Cursor` and return
    either a :class:`~bytecomb.cursor.ParseResult` holding the value and the
    remaining cursor, or a :class:`~bytecomb.cursor.ParseFailure` holding a
    static reason. Nothing in this module raises on a failed match except
    parse(), which converts the failure into ParseFailedError.

Security:
    run() and parse() validate the input size before parsing to bound the
    memory any single call may pin. Parsers applied to a Cursor directly are
    not limited.

See Also:
    - :mod:`bytecomb.parser.primitives` - Byte matchers and scanners
    - :mod:`bytecomb.parser.combinators` - Sequencing, lookahead, repetition, alternation
"""

import logging
from collections.abc import Buffer

from bytecomb.constants import MAX_INPUT_SIZE
from bytecomb.cursor import Cursor, ParseOutcome, Parser, ParseResult, fail
from bytecomb.enums import FailureReason
from bytecomb.errors import ParseFailedError, ParserRedefinitionError, UndefinedParserError
from bytecomb.parser.combinators import not_
from bytecomb.templates import ErrorTemplate

__all__ = [
    "ForwardParser",
    "empty",
    "forward",
    "fully_consumed",
    "not_empty",
    "parse",
    "run",
]

logger = logging.getLogger(__name__)


def empty(cursor: Cursor) -> ParseOutcome[None]:
    """Succeed with None if no input is left, otherwise fail."""
    if cursor.is_eof:
        return ParseResult(None, cursor)
    return fail(FailureReason.NOT_EMPTY)


def not_empty(cursor: Cursor) -> ParseOutcome[None]:
    """Succeed with None if any input is left, otherwise fail.

    Defined as the negation of empty, so its failure reason is the one
    not_ reports.
    """
    return _not_empty(cursor)


_not_empty: Parser[None] = not_(empty)


def fully_consumed[T](parser: Parser[T]) -> Parser[T]:
    """Require parser to account for the entire input.

    Example:
        >>> whole = fully_consumed(bytes_(b"abc"))
        >>> whole(Cursor(b"abc")).value
        b'abc'
        >>> whole(Cursor(b"abcd")).reason
        <FailureReason.NOT_EMPTY: 'not empty'>
    """

    def parse_fully_consumed(cursor: Cursor) -> ParseOutcome[T]:
        outcome = parser(cursor)
        if not isinstance(outcome, ParseResult):
            return outcome
        end = empty(outcome.cursor)
        if not isinstance(end, ParseResult):
            return end
        return ParseResult(outcome.value, end.cursor)

    return parse_fully_consumed


# ============================================================================
# ENTRY POINTS
# ============================================================================


def _to_cursor(data: Buffer | Cursor, max_input_size: int | None) -> Cursor:
    cursor = data if isinstance(data, Cursor) else Cursor(data)
    limit = max_input_size if max_input_size is not None else MAX_INPUT_SIZE
    if limit > 0 and len(cursor) > limit:
        raise ValueError(ErrorTemplate.input_too_large(len(cursor), limit))
    return cursor


def run[T](
    parser: Parser[T],
    data: Buffer | Cursor,
    *,
    max_input_size: int | None = None,
) -> ParseOutcome[T]:
    """Apply parser to data and return the raw outcome.

    Args:
        parser: Parser to apply
        data: Bytes-like input (borrowed, not copied) or an existing Cursor
        max_input_size: Maximum input size in bytes (default: MAX_INPUT_SIZE).
                        Set to 0 to disable the size limit.

    Returns:
        ParseResult on success, ParseFailure otherwise

    Raises:
        ValueError: If input exceeds max_input_size
    """
    cursor = _to_cursor(data, max_input_size)
    outcome = parser(cursor)
    if not isinstance(outcome, ParseResult):
        logger.debug("Parse of %d bytes failed: %s", len(cursor), outcome.reason)
    return outcome


def parse[T](
    parser: Parser[T],
    data: Buffer | Cursor,
    *,
    max_input_size: int | None = None,
) -> T:
    """Parse the whole of data and return the value.

    Args:
        parser: Parser that must consume the entire input
        data: Bytes-like input (borrowed, not copied) or an existing Cursor
        max_input_size: Maximum input size in bytes (default: MAX_INPUT_SIZE).
                        Set to 0 to disable the size limit.

    Returns:
        Value produced by parser

    Raises:
        ParseFailedError: If parser fails or leaves input unconsumed
        ValueError: If input exceeds max_input_size

    Example:
        >>> parse(bytes_(b"ok"), b"ok")
        b'ok'
    """
    outcome = run(fully_consumed(parser), data, max_input_size=max_input_size)
    if not isinstance(outcome, ParseResult):
        raise ParseFailedError(outcome.reason)
    return outcome.value


# ============================================================================
# FORWARD DECLARATIONS
# ============================================================================


class ForwardParser[T]:
    """Placeholder parser for recursive grammars.

    Create with forward(), use it inside other parsers, then bind the real
    parser exactly once with define(). After define() the forward parser is
    as stateless as the parser it delegates to.

    Example:
        >>> group = forward("group")
        >>> group.define(prefixed(byte(b"("), suffixed(maybe(group), byte(b")"))))
        >>> run(group, b"(())").cursor.is_eof
        True
    """

    __slots__ = ("_name", "_parser")

    def __init__(self, name: str = "forward") -> None:
        self._name = name
        self._parser: Parser[T] | None = None

    @property
    def name(self) -> str:
        """Name used in error messages."""
        return self._name

    @property
    def is_defined(self) -> bool:
        """True once define() has bound a parser."""
        return self._parser is not None

    def define(self, parser: Parser[T]) -> None:
        """Bind the parser this placeholder delegates to.

        Raises:
            ParserRedefinitionError: If already defined
        """
        if self._parser is not None:
            raise ParserRedefinitionError(ErrorTemplate.forward_redefined(self._name))
        self._parser = parser
        logger.debug("Forward parser '%s' defined", self._name)

    def __call__(self, cursor: Cursor) -> ParseOutcome[T]:
        if self._parser is None:
            raise UndefinedParserError(ErrorTemplate.forward_undefined(self._name))
        return self._parser(cursor)

    def __repr__(self) -> str:
        state = "defined" if self._parser is not None else "undefined"
        return f"ForwardParser({self._name!r}, {state})"


def forward[T](name: str = "forward") -> ForwardParser[T]:
    """Declare a parser before defining it, for recursive grammars."""
    return ForwardParser(name)
