"""bytecomb - byte-oriented parser combinators.

A parser is any callable taking an immutable Cursor over a borrowed byte
buffer and returning either ParseResult(value, remaining_cursor) or
ParseFailure(reason). Primitives match bytes; combinators build larger
parsers from smaller ones without shared mutable state.

Public API:
    Cursor - Immutable window over the input buffer
    ParseResult / ParseFailure - Parse outcomes
    FailureReason - Static failure reasons
    run / parse - Entry points over bytes-like input
    byte, bytes_, take, satisfy, take_while, take_until_byte, ... - Primitives
    map_, divided, prefixed, suffixed, maybe, not_, peek,
    one_or_more, zero_or_more, any_of, fully_consumed - Combinators

Exceptions:
    ByteCombError - Base exception class
    ParseFailedError - parse() did not match the whole input
    NoProgressError - Repetition over a parser that consumed nothing

Example:
    >>> from bytecomb import byte, parse, take_while_1, satisfy, divided
    >>> digits = take_while_1(satisfy(lambda b: 0x30 <= b <= 0x39))
    >>> parse(divided(digits, byte(b"x"), digits), b"640x480")
    (b'640', b'480')
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .cursor import BytePredicate, Cursor, ParseFailure, ParseOutcome, Parser, ParseResult
from .enums import FailureReason
from .errors import (
    ByteCombError,
    NoProgressError,
    ParseFailedError,
    ParserRedefinitionError,
    UndefinedParserError,
)
from .parser import (
    ForwardParser,
    any_of,
    byte,
    bytes_,
    divided,
    empty,
    forward,
    fully_consumed,
    map_,
    maybe,
    not_,
    not_empty,
    one_or_more,
    parse,
    peek,
    prefixed,
    rtake_until_byte,
    rtake_until_byte_1,
    run,
    satisfy,
    suffixed,
    take,
    take_until_byte,
    take_until_byte_1,
    take_while,
    take_while_1,
    traced,
    zero_or_more,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("bytecomb")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ByteCombError",
    "BytePredicate",
    "Cursor",
    "FailureReason",
    "ForwardParser",
    "NoProgressError",
    "ParseFailedError",
    "ParseFailure",
    "ParseOutcome",
    "ParseResult",
    "Parser",
    "ParserRedefinitionError",
    "UndefinedParserError",
    "__version__",
    "any_of",
    "byte",
    "bytes_",
    "divided",
    "empty",
    "forward",
    "fully_consumed",
    "map_",
    "maybe",
    "not_",
    "not_empty",
    "one_or_more",
    "parse",
    "peek",
    "prefixed",
    "rtake_until_byte",
    "rtake_until_byte_1",
    "run",
    "satisfy",
    "suffixed",
    "take",
    "take_until_byte",
    "take_until_byte_1",
    "take_while",
    "take_while_1",
    "traced",
    "zero_or_more",
]
