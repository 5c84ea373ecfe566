"""Quickstart - building byte parsers with bytecomb.

Demonstrates:

1. Key/value header lines with divided and zero_or_more
2. Non-consuming checks with peek and not_
3. Recursive grammars with forward
4. Error handling with parse and the input size limit
5. Debug tracing

Python 3.13+.
"""

from __future__ import annotations

import logging


def is_token_byte(value: int) -> bool:
    return value not in b":\r\n"


def example_1_headers() -> None:
    """Parse 'Name: value' lines terminated by CRLF."""
    from bytecomb import (
        byte,
        bytes_,
        divided,
        map_,
        maybe,
        parse,
        prefixed,
        satisfy,
        suffixed,
        take_until_byte,
        take_while_1,
        zero_or_more,
    )

    print("=" * 60)
    print("Example 1: Header Lines")
    print("=" * 60)

    name = take_while_1(satisfy(is_token_byte))
    value = prefixed(maybe(byte(b" ")), take_until_byte(lambda b: b == ord("\r")))
    line = suffixed(divided(name, byte(b":"), value), bytes_(b"\r\n"))
    headers = map_(zero_or_more(line), dict)

    raw = b"Host: example.org\r\nAccept: */*\r\nX-Empty:\r\n"
    for key, val in parse(headers, raw).items():
        print(f"  {key.decode()!s:>8} -> {val!r}")
    print()


def example_2_lookahead() -> None:
    """Check what comes next without consuming it."""
    from bytecomb import Cursor, bytes_, not_, peek, take

    print("=" * 60)
    print("Example 2: Lookahead")
    print("=" * 60)

    cursor = Cursor(b"GIF89a....")
    magic = peek(bytes_(b"GIF8"))(cursor)
    print(f"  peek matched: {magic.value!r}, position still {magic.cursor.pos}")

    not_png = not_(bytes_(b"\x89PNG"))(cursor)
    print(f"  not PNG: {bool(not_png)}")

    header = take(6)(cursor)
    print(f"  header: {header.value!r}, remaining {len(header.cursor)} bytes")
    print()


def example_3_recursion() -> None:
    """Balanced parentheses via a forward-declared parser."""
    from bytecomb import byte, forward, map_, parse, prefixed, suffixed, zero_or_more

    print("=" * 60)
    print("Example 3: Recursive Grammar")
    print("=" * 60)

    group = forward("group")
    group.define(
        map_(
            prefixed(byte(b"("), suffixed(zero_or_more(group), byte(b")"))),
            lambda children: 1 + max(children, default=0),
        )
    )

    for text in (b"()", b"(()())", b"((()))"):
        print(f"  {text.decode():<8} depth {parse(group, text)}")
    print()


def example_4_errors() -> None:
    """parse() raises with the failure reason; oversized input is rejected."""
    from bytecomb import ParseFailedError, bytes_, parse, run

    print("=" * 60)
    print("Example 4: Error Handling")
    print("=" * 60)

    try:
        parse(bytes_(b"OK"), b"OK!")
    except ParseFailedError as exc:
        print(f"  ParseFailedError: {exc} (reason={exc.reason!r})")

    outcome = run(bytes_(b"OK"), b"NO")
    print(f"  run() returned {outcome!r}")

    try:
        run(bytes_(b"OK"), b"x" * 100, max_input_size=64)
    except ValueError as exc:
        print(f"  ValueError: {exc}")
    print()


def example_5_tracing() -> None:
    """Watch parser attempts on the tracing logger."""
    from bytecomb import any_of, bytes_, run, traced

    print("=" * 60)
    print("Example 5: Tracing")
    print("=" * 60)

    logging.basicConfig(format="  %(name)s: %(message)s")
    logging.getLogger("bytecomb.parser.tracing").setLevel(logging.DEBUG)

    verb = any_of(traced(bytes_(b"GET"), "GET"), traced(bytes_(b"POST"), "POST"))
    run(verb, b"POST /index.html")

    logging.getLogger("bytecomb.parser.tracing").setLevel(logging.WARNING)
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("bytecomb Quickstart")
    print()

    example_1_headers()
    example_2_lookahead()
    example_3_recursion()
    example_4_errors()
    example_5_tracing()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
