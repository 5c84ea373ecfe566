"""Byte parser combinator library.

Module Organization:
- core.py: End-of-input parsers, run()/parse() entry points, forward declarations
- primitives.py: Byte matchers and scanners (byte, bytes_, take, take_while, ...)
- combinators.py: Sequencing, lookahead, repetition and alternation
- tracing.py: DEBUG-level tracing wrapper for grammar development

Public API:
    All primitives and combinators, plus run, parse and forward.
"""

from bytecomb.parser.combinators import (
    any_of,
    divided,
    map_,
    maybe,
    not_,
    one_or_more,
    peek,
    prefixed,
    suffixed,
    zero_or_more,
)
from bytecomb.parser.core import (
    ForwardParser,
    empty,
    forward,
    fully_consumed,
    not_empty,
    parse,
    run,
)
from bytecomb.parser.primitives import (
    byte,
    bytes_,
    rtake_until_byte,
    rtake_until_byte_1,
    satisfy,
    take,
    take_until_byte,
    take_until_byte_1,
    take_while,
    take_while_1,
)
from bytecomb.parser.tracing import traced

__all__ = [
    "ForwardParser",
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
