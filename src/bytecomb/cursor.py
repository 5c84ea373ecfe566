"""Immutable byte cursor and parse outcome types.

Implements the immutable cursor pattern over a borrowed byte buffer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - The caller's buffer is borrowed through a read-only memoryview, never copied
    - A cursor is a window [pos, end) over that buffer; slicing the window
      is the only operation parsers perform on input
    - EOF is a state (is_eof), not a return value
    - Parse failure is a value (ParseFailure), not an exception

Parser Protocol:
    Every parser has signature:
        def parser(cursor: Cursor) -> ParseResult[T] | ParseFailure

    ParseResult carries the produced value and the remaining input.
    ParseFailure carries a static reason and nothing else.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from collections.abc import Buffer, Callable
from dataclasses import dataclass, field
from typing import Literal

from bytecomb.enums import FailureReason
from bytecomb.templates import ErrorTemplate

__all__ = [
    "BytePredicate",
    "Cursor",
    "ParseFailure",
    "ParseOutcome",
    "ParseResult",
    "Parser",
    "fail",
]


@dataclass(frozen=True, slots=True, repr=False)
class Cursor:
    """Immutable window over a borrowed byte buffer.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per parse step)
        3. Window, not copy - pos/end offsets into the caller's buffer
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed
        6. Buffer export - Each cursor holds a memoryview of source, so a
           bytearray source cannot be resized (BufferError) while any cursor
           or ParseResult over it is alive
        7. Hashing follows source - Cursors over bytes are hashable; over an
           unhashable source such as bytearray, hash() raises TypeError

    The default end of -1 means "end of source".

    Example:
        >>> cursor = Cursor(b"hello")
        >>> cursor.current
        104
        >>> new_cursor = cursor.advance()
        >>> new_cursor.tobytes()
        b'ello'
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> len(Cursor(b"hello", 2))
        3
    """

    source: Buffer
    pos: int = 0
    end: int = -1
    _view: memoryview = field(init=False, compare=False)

    def __post_init__(self) -> None:
        """Borrow source as a flat read-only byte view and validate bounds."""
        view = memoryview(self.source)
        if view.ndim != 1 or view.format != "B":
            view = view.cast("B")
        object.__setattr__(self, "_view", view.toreadonly())

        size = len(view)
        end = size if self.end == -1 else self.end
        if not 0 <= self.pos <= end <= size:
            raise ValueError(ErrorTemplate.invalid_window(self.pos, end, size))
        object.__setattr__(self, "end", end)

    def __len__(self) -> int:
        """Number of bytes left in the window."""
        return self.end - self.pos

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, end={self.end}, rest={self.slice_ahead(32)!r})"

    @property
    def is_eof(self) -> bool:
        """Check if the window is exhausted.

        Returns:
            True if position >= window end
        """
        return self.pos >= self.end

    @property
    def current(self) -> int:
        """Get current byte.

        Returns:
            Byte value (0-255) at position

        Raises:
            EOFError: If at end of window
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos))
        return self._view[self.pos]

    def peek(self, offset: int = 0) -> int | None:
        """Peek at byte with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Byte value at position + offset, or None if outside the window
        """
        target_pos = self.pos + offset
        if not self.pos <= target_pos < self.end:
            return None
        return self._view[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count bytes.

        Args:
            count: Number of bytes to advance (default: 1)

        Returns:
            New Cursor over the same buffer, clamped to the window end

        Example:
            >>> cursor = Cursor(b"hello")
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(99).is_eof
            True
        """
        new_pos = min(self.pos + count, self.end)
        return Cursor(self.source, new_pos, self.end)

    def limit(self, count: int) -> "Cursor":
        """Return new cursor whose window stops count bytes after pos.

        Args:
            count: Maximum number of bytes the new window may hold

        Returns:
            New Cursor with the same start and a shortened end

        Example:
            >>> Cursor(b"hello").limit(2).tobytes()
            b'he'
        """
        new_end = min(self.pos + max(count, 0), self.end)
        return Cursor(self.source, self.pos, new_end)

    def slice_to(self, end_pos: int) -> bytes:
        """Extract bytes from current position to end_pos.

        Args:
            end_pos: Absolute end position (exclusive), clamped to the window

        Returns:
            Copy of the bytes between pos and end_pos

        Usage:
            Store the start cursor, advance, then slice:

            >>> start = Cursor(b"key=value")
            >>> cursor = start.advance(3)
            >>> start.slice_to(cursor.pos)
            b'key'
        """
        return self._view[self.pos : min(end_pos, self.end)].tobytes()

    def slice_ahead(self, n: int) -> bytes:
        """Get next n bytes without advancing cursor.

        Returns fewer than n bytes near the end of the window.
        """
        return self.slice_to(self.pos + n)

    def startswith(self, literal: Buffer) -> bool:
        """Check whether the window begins with literal (byte-exact)."""
        expected = memoryview(literal).cast("B")
        size = len(expected)
        if size > len(self):
            return False
        return self._view[self.pos : self.pos + size] == expected

    def find_byte(self, predicate: "BytePredicate") -> int | None:
        """Offset of the first byte satisfying predicate, relative to pos.

        Returns:
            Offset in [0, len(self)), or None if no byte matches
        """
        for offset, value in enumerate(self._view[self.pos : self.end]):
            if predicate(value):
                return offset
        return None

    def rfind_byte(self, predicate: "BytePredicate") -> int | None:
        """Offset of the last byte satisfying predicate, relative to pos.

        Returns:
            Offset in [0, len(self)), or None if no byte matches
        """
        view = self._view
        for offset in range(len(self) - 1, -1, -1):
            if predicate(view[self.pos + offset]):
                return offset
        return None

    def tobytes(self) -> bytes:
        """Copy of the bytes left in the window."""
        return self._view[self.pos : self.end].tobytes()


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Successful parse: produced value plus remaining input.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> cursor = Cursor(b"hello")
        >>> result = ParseResult(cursor.current, cursor.advance())
        >>> result.value
        104
        >>> result.cursor.tobytes()
        b'ello'
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Failed parse: a static reason, no position, no partial value.

    Falsy, so callers can branch with ``if outcome:``.
    """

    reason: FailureReason

    def __bool__(self) -> Literal[False]:
        return False


type ParseOutcome[T] = ParseResult[T] | ParseFailure
type Parser[T] = Callable[[Cursor], ParseOutcome[T]]
type BytePredicate = Callable[[int], bool]

# One shared instance per reason; failures carry no per-call data.
_FAILURES: dict[FailureReason, ParseFailure] = {
    reason: ParseFailure(reason) for reason in FailureReason
}


def fail(reason: FailureReason) -> ParseFailure:
    """Return the shared ParseFailure for reason."""
    return _FAILURES[reason]
