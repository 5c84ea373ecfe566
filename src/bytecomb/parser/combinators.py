"""Parser combinators.

Every combinator takes parsers and returns a new parser closing over those
arguments only. No combinator holds mutable state, so a composed parser can
be shared freely between call sites and threads.

Rollback Policy:
    Only maybe, not_ and peek hand back the original cursor. The sequencing
    combinators (divided, prefixed, suffixed) propagate the first failure
    as-is; consumption before that failure is never undone by them. Wrap a
    sub-expression in maybe or peek where a grammar needs backtracking.

Repetition Hazard:
    one_or_more and zero_or_more require every successful step to consume
    input. A step that succeeds without consuming raises NoProgressError.
"""

from collections.abc import Callable

from bytecomb.cursor import Cursor, ParseOutcome, Parser, ParseResult, fail
from bytecomb.enums import FailureReason
from bytecomb.errors import NoProgressError
from bytecomb.templates import ErrorTemplate

__all__ = [
    "any_of",
    "divided",
    "map_",
    "maybe",
    "not_",
    "one_or_more",
    "peek",
    "prefixed",
    "suffixed",
    "zero_or_more",
]


# ============================================================================
# SEQUENCING
# ============================================================================


def map_[T, U](parser: Parser[T], f: Callable[[T], U]) -> Parser[U]:
    """Transform the value of a successful parse with f.

    Failures pass through unchanged.

    Example:
        >>> length = map_(take(3), len)
        >>> length(Cursor(b"abcd")).value
        3
    """

    def parse_map(cursor: Cursor) -> ParseOutcome[U]:
        match parser(cursor):
            case ParseResult(value=value, cursor=rest):
                return ParseResult(f(value), rest)
            case failure:
                return failure

    return parse_map


def divided[L, M, R](
    left: Parser[L],
    middle: Parser[M],
    right: Parser[R],
) -> Parser[tuple[L, R]]:
    """Run left, middle and right in order, keeping left and right values.

    Used for "X, delimiter, Y" shapes such as key=value.

    Example:
        >>> key_value = divided(take_until_byte_1(lambda b: b == 0x3D), byte(b"="), take(2))
        >>> key_value(Cursor(b"id=42")).value
        (b'id', b'42')
    """

    def parse_divided(cursor: Cursor) -> ParseOutcome[tuple[L, R]]:
        first = left(cursor)
        if not isinstance(first, ParseResult):
            return first
        separator = middle(first.cursor)
        if not isinstance(separator, ParseResult):
            return separator
        second = right(separator.cursor)
        if not isinstance(second, ParseResult):
            return second
        return ParseResult((first.value, second.value), second.cursor)

    return parse_divided


def prefixed[P, T](prefix: Parser[P], parser: Parser[T]) -> Parser[T]:
    """Run prefix then parser, keeping only the parser value."""

    def parse_prefixed(cursor: Cursor) -> ParseOutcome[T]:
        head = prefix(cursor)
        if not isinstance(head, ParseResult):
            return head
        return parser(head.cursor)

    return parse_prefixed


def suffixed[T, S](parser: Parser[T], suffix: Parser[S]) -> Parser[T]:
    """Run parser then suffix, keeping only the parser value."""

    def parse_suffixed(cursor: Cursor) -> ParseOutcome[T]:
        body = parser(cursor)
        if not isinstance(body, ParseResult):
            return body
        tail = suffix(body.cursor)
        if not isinstance(tail, ParseResult):
            return tail
        return ParseResult(body.value, tail.cursor)

    return parse_suffixed


# ============================================================================
# OPTIONALITY, NEGATION, LOOKAHEAD
# ============================================================================


def maybe[T](parser: Parser[T]) -> Parser[T | None]:
    """Optional parse: the value on success, None with the original cursor on failure.

    Never fails. This is the only combinator that rolls back after a failed
    sub-parse.

    Example:
        >>> sign = maybe(byte(b"-"))
        >>> sign(Cursor(b"42")).value is None
        True
    """

    def parse_maybe(cursor: Cursor) -> ParseOutcome[T | None]:
        outcome = parser(cursor)
        if isinstance(outcome, ParseResult):
            return outcome
        return ParseResult(None, cursor)

    return parse_maybe


def not_[T](parser: Parser[T]) -> Parser[None]:
    """Negative lookahead: succeed with None only where parser fails.

    Never consumes input.
    """

    def parse_not(cursor: Cursor) -> ParseOutcome[None]:
        if isinstance(parser(cursor), ParseResult):
            return fail(FailureReason.PARSER_SUCCEEDED)
        return ParseResult(None, cursor)

    return parse_not


def peek[T](parser: Parser[T]) -> Parser[T]:
    """Positive lookahead: the parser value with the original cursor.

    Failures propagate unchanged.
    """

    def parse_peek(cursor: Cursor) -> ParseOutcome[T]:
        outcome = parser(cursor)
        if not isinstance(outcome, ParseResult):
            return outcome
        return ParseResult(outcome.value, cursor)

    return parse_peek


# ============================================================================
# REPETITION
# ============================================================================


def one_or_more[T](parser: Parser[T]) -> Parser[list[T]]:
    """Apply parser until it fails, collecting values in order.

    The failing attempt is discarded: the result cursor is the one after the
    last success. Fails if parser never succeeded.

    Raises:
        NoProgressError: If parser succeeds without consuming input
    """

    def parse_one_or_more(cursor: Cursor) -> ParseOutcome[list[T]]:
        values: list[T] = []
        while True:
            outcome = parser(cursor)
            if not isinstance(outcome, ParseResult):
                break
            if len(outcome.cursor) == len(cursor):
                raise NoProgressError(ErrorTemplate.no_progress("one_or_more"))
            values.append(outcome.value)
            cursor = outcome.cursor

        if not values:
            return fail(FailureReason.NO_REPETITION)
        return ParseResult(values, cursor)

    return parse_one_or_more


def zero_or_more[T](parser: Parser[T]) -> Parser[list[T]]:
    """Same as one_or_more, but yields an empty list instead of failing.

    Never fails. With zero matches the original cursor is returned.

    Raises:
        NoProgressError: If parser succeeds without consuming input
    """
    repeated = maybe(one_or_more(parser))

    def parse_zero_or_more(cursor: Cursor) -> ParseOutcome[list[T]]:
        match repeated(cursor):
            case ParseResult(value=None, cursor=rest):
                return ParseResult([], rest)
            case outcome:
                return outcome

    return parse_zero_or_more


# ============================================================================
# ALTERNATION
# ============================================================================


def any_of[T](*parsers: Parser[T]) -> Parser[T]:
    """Try parsers in order and return the first success unmodified.

    First match wins; there is no longest-match rule. Fails when every
    alternative fails, without reporting which ones were tried.

    Raises:
        ValueError: If no parsers are given

    Example:
        >>> bit = any_of(byte(b"0"), byte(b"1"))
        >>> bit(Cursor(b"10")).value
        49
    """
    if not parsers:
        msg = "any_of() requires at least one parser"
        raise ValueError(msg)
    alternatives = tuple(parsers)

    def parse_any_of(cursor: Cursor) -> ParseOutcome[T]:
        for alternative in alternatives:
            outcome = alternative(cursor)
            if isinstance(outcome, ParseResult):
                return outcome
        return fail(FailureReason.NO_PARSER_SUCCEEDED)

    return parse_any_of
