"""Primitive byte parsers.

This module provides the byte-level matchers and scanners that consume input
directly: fixed bytes, fixed lengths, single-byte predicates, and scans
driven by a predicate or by an inner parser.

All extracted subslices are returned as bytes. The remaining input is a
Cursor over the caller's buffer and is never copied.
"""

from collections.abc import Buffer

from bytecomb.cursor import BytePredicate, Cursor, ParseOutcome, Parser, ParseResult, fail
from bytecomb.enums import FailureReason
from bytecomb.errors import NoProgressError
from bytecomb.templates import ErrorTemplate

__all__ = [
    "byte",
    "bytes_",
    "rtake_until_byte",
    "rtake_until_byte_1",
    "satisfy",
    "take",
    "take_until_byte",
    "take_until_byte_1",
    "take_while",
    "take_while_1",
]


def take(count: int) -> Parser[bytes]:
    """Take exactly count bytes.

    take(0) always fails: a zero-length take is treated as a grammar bug
    that must surface on every input.

    Args:
        count: Number of bytes to consume

    Returns:
        Parser yielding the consumed bytes

    Raises:
        ValueError: If count is negative

    Example:
        >>> result = take(2)(Cursor(b"abc"))
        >>> result.value, result.cursor.tobytes()
        (b'ab', b'c')
    """
    if count < 0:
        msg = f"take() count must be non-negative, got {count}"
        raise ValueError(msg)

    def parse_take(cursor: Cursor) -> ParseOutcome[bytes]:
        if count == 0:
            return fail(FailureReason.TAKE_ZERO)
        if count > len(cursor):
            return fail(FailureReason.TAKE_NOT_ENOUGH)
        return ParseResult(cursor.slice_ahead(count), cursor.advance(count))

    return parse_take


def bytes_(literal: Buffer) -> Parser[bytes]:
    """Match literal byte-exactly.

    Failure reasons, checked in order: empty input, input shorter than the
    literal, prefix mismatch.
    """
    expected = bytes(literal)
    size = len(expected)

    def parse_bytes(cursor: Cursor) -> ParseOutcome[bytes]:
        if cursor.is_eof:
            return fail(FailureReason.EMPTY_INPUT)
        if len(cursor) < size:
            return fail(FailureReason.NOT_ENOUGH_BYTES)
        if not cursor.startswith(expected):
            return fail(FailureReason.WRONG_BYTES)
        return ParseResult(expected, cursor.advance(size))

    return parse_bytes


def byte(value: int | Buffer) -> Parser[int]:
    """Match one specific byte.

    Args:
        value: Byte value 0-255, or a length-1 bytes-like object

    Returns:
        Parser yielding the byte value as int

    Raises:
        ValueError: If value is not a single byte
    """
    if isinstance(value, int):
        expected = value
        if not 0 <= expected <= 0xFF:
            msg = f"byte() value must be in range 0-255, got {expected}"
            raise ValueError(msg)
    else:
        raw = bytes(value)
        if len(raw) != 1:
            msg = f"byte() expects a single byte, got {len(raw)} bytes"
            raise ValueError(msg)
        expected = raw[0]

    def parse_byte(cursor: Cursor) -> ParseOutcome[int]:
        if cursor.is_eof:
            return fail(FailureReason.EMPTY_INPUT)
        if cursor.current != expected:
            return fail(FailureReason.WRONG_BYTE)
        return ParseResult(expected, cursor.advance())

    return parse_byte


def satisfy(predicate: BytePredicate) -> Parser[int]:
    """Match one byte accepted by predicate.

    Typical use is as the inner parser of take_while:

        >>> digits = take_while(satisfy(lambda b: 0x30 <= b <= 0x39))
        >>> digits(Cursor(b"42px")).value
        b'42'
    """

    def parse_satisfy(cursor: Cursor) -> ParseOutcome[int]:
        if cursor.is_eof:
            return fail(FailureReason.EMPTY_INPUT)
        current = cursor.current
        if not predicate(current):
            return fail(FailureReason.WRONG_BYTE)
        return ParseResult(current, cursor.advance())

    return parse_satisfy


def take_while[T](inner: Parser[T]) -> Parser[bytes]:
    """Take bytes for as long as inner keeps matching.

    Applies inner at increasing offsets, advancing by however many bytes each
    attempt consumed, until inner fails or the input is exhausted. The values
    inner produces are discarded; the value is the consumed prefix.

    Fails only on empty input. If the first attempt fails the result is an
    empty prefix with the input unchanged.

    Raises:
        NoProgressError: If inner succeeds without consuming input
    """

    def parse_take_while(cursor: Cursor) -> ParseOutcome[bytes]:
        if cursor.is_eof:
            return fail(FailureReason.EMPTY_INPUT)

        scan = cursor
        while not scan.is_eof:
            match inner(scan):
                case ParseResult(cursor=after):
                    if len(after) == len(scan):
                        raise NoProgressError(ErrorTemplate.no_progress("take_while"))
                    scan = after
                case _:
                    break

        if scan.pos == cursor.pos:
            return ParseResult(b"", cursor)
        return ParseResult(cursor.slice_to(scan.pos), scan)

    return parse_take_while


def take_while_1[T](inner: Parser[T]) -> Parser[bytes]:
    """Same as take_while, but fails if nothing was consumed."""
    parser = take_while(inner)

    def parse_take_while_1(cursor: Cursor) -> ParseOutcome[bytes]:
        outcome = parser(cursor)
        if isinstance(outcome, ParseResult) and not outcome.value:
            return fail(FailureReason.NOTHING_CONSUMED)
        return outcome

    return parse_take_while_1


def take_until_byte(predicate: BytePredicate) -> Parser[bytes]:
    """Take bytes up to (not including) the first byte matching predicate.

    If no byte matches, the whole input is taken and the remaining input is
    empty. Never fails.

    Example:
        >>> result = take_until_byte(lambda b: b == ord("="))(Cursor(b"key=value"))
        >>> result.value, result.cursor.tobytes()
        (b'key', b'=value')
    """

    def parse_take_until_byte(cursor: Cursor) -> ParseOutcome[bytes]:
        offset = cursor.find_byte(predicate)
        if offset is None:
            offset = len(cursor)
        return ParseResult(cursor.slice_ahead(offset), cursor.advance(offset))

    return parse_take_until_byte


def take_until_byte_1(predicate: BytePredicate) -> Parser[bytes]:
    """Same as take_until_byte, but fails if the taken prefix is empty."""
    parser = take_until_byte(predicate)

    def parse_take_until_byte_1(cursor: Cursor) -> ParseOutcome[bytes]:
        outcome = parser(cursor)
        if isinstance(outcome, ParseResult) and not outcome.value:
            return fail(FailureReason.NOTHING_CONSUMED)
        return outcome

    return parse_take_until_byte_1


def rtake_until_byte(predicate: BytePredicate) -> Parser[bytes]:
    """Take bytes up to (not including) the last byte matching predicate.

    Scans from the back. The remaining input starts at the matched byte, so
    anything after it is left for the next parser. If no byte matches, the
    whole input is taken and the remaining input is empty. Never fails.

    Example:
        >>> result = rtake_until_byte(lambda b: b == ord("/"))(Cursor(b"usr/lib/file"))
        >>> result.value, result.cursor.tobytes()
        (b'usr/lib', b'/file')
    """

    def parse_rtake_until_byte(cursor: Cursor) -> ParseOutcome[bytes]:
        offset = cursor.rfind_byte(predicate)
        if offset is None:
            offset = len(cursor)
        return ParseResult(cursor.slice_ahead(offset), cursor.advance(offset))

    return parse_rtake_until_byte


def rtake_until_byte_1(predicate: BytePredicate) -> Parser[bytes]:
    """Same as rtake_until_byte, but fails if the taken prefix is empty."""
    parser = rtake_until_byte(predicate)

    def parse_rtake_until_byte_1(cursor: Cursor) -> ParseOutcome[bytes]:
        outcome = parser(cursor)
        if isinstance(outcome, ParseResult) and not outcome.value:
            return fail(FailureReason.NOTHING_CONSUMED)
        return outcome

    return parse_rtake_until_byte_1
