"""Tests for bytecomb.parser.combinators.

Covers sequencing (map_, divided, prefixed, suffixed), optionality and
lookahead (maybe, not_, peek), repetition and alternation.
"""

from __future__ import annotations

import pytest

from bytecomb import (
    Cursor,
    FailureReason,
    NoProgressError,
    ParseFailure,
    ParseResult,
    any_of,
    byte,
    bytes_,
    divided,
    empty,
    map_,
    maybe,
    not_,
    one_or_more,
    peek,
    prefixed,
    satisfy,
    suffixed,
    take,
    take_until_byte_1,
    take_while_1,
    zero_or_more,
)


def is_alpha(value: int) -> bool:
    return ord("a") <= value <= ord("z")


def assert_success[T](outcome: ParseResult[T] | ParseFailure) -> ParseResult[T]:
    assert isinstance(outcome, ParseResult), outcome
    return outcome


# ============================================================================
# SEQUENCING
# ============================================================================


class TestMap:
    """Value transformation."""

    def test_transforms_value(self) -> None:
        """f is applied to the value, the cursor is kept."""
        result = assert_success(map_(take(2), bytes.upper)(Cursor(b"abc")))

        assert result.value == b"AB"
        assert result.cursor.tobytes() == b"c"

    def test_failure_passes_through(self) -> None:
        """Failures keep their reason."""
        outcome = map_(take(4), len)(Cursor(b"abc"))

        assert outcome == ParseFailure(FailureReason.TAKE_NOT_ENOUGH)

    def test_f_not_called_on_failure(self) -> None:
        """f only runs for successful parses."""
        calls: list[bytes] = []
        map_(take(4), calls.append)(Cursor(b"abc"))

        assert calls == []


class TestDivided:
    """X, delimiter, Y sequencing."""

    def test_returns_outer_values(self) -> None:
        """Middle value is discarded."""
        key = take_until_byte_1(lambda c: c == ord("="))
        parser = divided(key, byte(b"="), take_while_1(satisfy(is_alpha)))

        result = assert_success(parser(Cursor(b"name=value;")))

        assert result.value == (b"name", b"value")
        assert result.cursor.tobytes() == b";"

    @pytest.mark.parametrize(
        ("data", "reason"),
        [
            (b"", FailureReason.EMPTY_INPUT),
            (b"a-b", FailureReason.WRONG_BYTE),
            (b"a=", FailureReason.EMPTY_INPUT),
        ],
        ids=["left", "middle", "right"],
    )
    def test_first_failure_propagates(self, data: bytes, reason: FailureReason) -> None:
        """Whichever step fails first decides the reason."""
        parser = divided(byte(b"a"), byte(b"="), byte(b"b"))

        assert parser(Cursor(data)) == ParseFailure(reason)


class TestPrefixedSuffixed:
    """Keep-one-side sequencing."""

    def test_prefixed_keeps_second_value(self) -> None:
        """prefixed(byte(b'a'), take(2)) on b'abcd' yields b'bc'."""
        result = assert_success(prefixed(byte(b"a"), take(2))(Cursor(b"abcd")))

        assert result.value == b"bc"
        assert result.cursor.tobytes() == b"d"

    def test_prefixed_fails_if_prefix_fails(self) -> None:
        """Prefix failure is returned."""
        outcome = prefixed(byte(b"x"), take(2))(Cursor(b"abcd"))

        assert outcome == ParseFailure(FailureReason.WRONG_BYTE)

    def test_prefixed_fails_if_body_fails(self) -> None:
        """Body failure is returned."""
        outcome = prefixed(byte(b"a"), take(5))(Cursor(b"abcd"))

        assert outcome == ParseFailure(FailureReason.TAKE_NOT_ENOUGH)

    def test_suffixed_keeps_first_value(self) -> None:
        """suffixed returns the body value and cursor after the suffix."""
        result = assert_success(suffixed(take(2), byte(b";"))(Cursor(b"ab;c")))

        assert result.value == b"ab"
        assert result.cursor.tobytes() == b"c"

    def test_suffixed_fails_if_suffix_fails(self) -> None:
        """Missing suffix fails the whole parse."""
        assert not suffixed(take(2), byte(b";"))(Cursor(b"abc"))

    def test_no_rollback_on_partial_match(self) -> None:
        """Sequencing does not undo the prefix; wrap in maybe to recover."""
        parser = prefixed(byte(b"a"), byte(b"x"))
        cursor = Cursor(b"abc")

        assert not parser(cursor)
        result = assert_success(maybe(parser)(cursor))
        assert result.cursor is cursor


# ============================================================================
# OPTIONALITY, NEGATION, LOOKAHEAD
# ============================================================================


class TestMaybe:
    """Optional parsing."""

    def test_value_on_success(self) -> None:
        """Successful inner parse is returned unchanged."""
        result = assert_success(maybe(byte(b"a"))(Cursor(b"abc")))

        assert result.value == ord("a")
        assert result.cursor.tobytes() == b"bc"

    def test_none_and_original_cursor_on_failure(self) -> None:
        """maybe(take(4)) on b'abc' yields None and the original cursor."""
        cursor = Cursor(b"abc")
        result = assert_success(maybe(take(4))(cursor))

        assert result.value is None
        assert result.cursor is cursor

    def test_never_fails_on_empty_input(self) -> None:
        """maybe succeeds even on empty input."""
        assert maybe(byte(b"a"))(Cursor(b""))


class TestNot:
    """Negative lookahead."""

    def test_succeeds_when_inner_fails(self) -> None:
        """Returns None and the original cursor."""
        cursor = Cursor(b"abc")
        result = assert_success(not_(byte(b"x"))(cursor))

        assert result.value is None
        assert result.cursor is cursor

    def test_fails_when_inner_succeeds(self) -> None:
        """Inner success is reported as parser succeeded."""
        outcome = not_(byte(b"a"))(Cursor(b"abc"))

        assert outcome == ParseFailure(FailureReason.PARSER_SUCCEEDED)

    def test_double_negation_does_not_consume(self) -> None:
        """not_(not_(p)) behaves as a non-consuming check."""
        cursor = Cursor(b"abc")
        result = assert_success(not_(not_(byte(b"a")))(cursor))

        assert result.cursor is cursor


class TestPeek:
    """Positive lookahead."""

    def test_returns_value_without_consuming(self) -> None:
        """Value comes from the inner parser, cursor is the original."""
        cursor = Cursor(b"abc")
        result = assert_success(peek(take(2))(cursor))

        assert result.value == b"ab"
        assert result.cursor is cursor

    def test_failure_propagates(self) -> None:
        """Inner failure is returned unchanged."""
        outcome = peek(take(4))(Cursor(b"abc"))

        assert outcome == ParseFailure(FailureReason.TAKE_NOT_ENOUGH)


# ============================================================================
# REPETITION
# ============================================================================


class TestOneOrMore:
    """Greedy repetition requiring one match."""

    def test_collects_values_in_order(self) -> None:
        """Values are collected in match order."""
        result = assert_success(one_or_more(take(1))(Cursor(b"abc")))

        assert result.value == [b"a", b"b", b"c"]
        assert result.cursor.is_eof

    def test_stops_at_first_failure(self) -> None:
        """The cursor is the one after the last success."""
        result = assert_success(one_or_more(byte(b"a"))(Cursor(b"aab")))

        assert result.value == [ord("a"), ord("a")]
        assert result.cursor.tobytes() == b"b"

    def test_fails_without_any_match(self) -> None:
        """No match at all is a failure."""
        outcome = one_or_more(byte(b"x"))(Cursor(b"abc"))

        assert outcome == ParseFailure(FailureReason.NO_REPETITION)

    def test_fails_on_empty_input(self) -> None:
        """Empty input means no match."""
        assert not one_or_more(take(1))(Cursor(b""))

    def test_partial_trailing_match_is_discarded(self) -> None:
        """A trailing chunk too short for take(2) stays in the input."""
        result = assert_success(one_or_more(take(2))(Cursor(b"abcde")))

        assert result.value == [b"ab", b"cd"]
        assert result.cursor.tobytes() == b"e"

    @pytest.mark.parametrize(
        "inner",
        [peek(byte(b"a")), maybe(byte(b"x")), not_(byte(b"x")), empty],
        ids=["peek", "maybe", "not", "empty"],
    )
    def test_zero_consumption_raises(self, inner: object) -> None:
        """Parsers that succeed without consuming cannot be repeated."""
        data = b"" if inner is empty else b"aaa"

        with pytest.raises(NoProgressError, match="one_or_more"):
            one_or_more(inner)(Cursor(data))  # type: ignore[arg-type]


class TestZeroOrMore:
    """Greedy repetition allowing zero matches."""

    def test_collects_values(self) -> None:
        """Same values as one_or_more when matches exist."""
        result = assert_success(zero_or_more(byte(b"a"))(Cursor(b"aab")))

        assert result.value == [ord("a"), ord("a")]
        assert result.cursor.tobytes() == b"b"

    def test_empty_list_without_match(self) -> None:
        """No match yields [] and the original cursor."""
        cursor = Cursor(b"abc")
        result = assert_success(zero_or_more(byte(b"x"))(cursor))

        assert result.value == []
        assert result.cursor is cursor

    def test_zero_consumption_raises(self) -> None:
        """The no-progress check also applies here."""
        with pytest.raises(NoProgressError):
            zero_or_more(peek(take(1)))(Cursor(b"abc"))


# ============================================================================
# ALTERNATION
# ============================================================================


class TestAnyOf:
    """Ordered choice."""

    def test_first_success_wins(self) -> None:
        """Earlier alternatives take priority even if later ones match more."""
        parser = any_of(take(1), take(2))
        result = assert_success(parser(Cursor(b"abc")))

        assert result.value == b"a"

    def test_later_alternative_used_after_failure(self) -> None:
        """Failed alternatives are skipped."""
        parser = any_of(bytes_(b"xy"), bytes_(b"ab"))
        result = assert_success(parser(Cursor(b"abc")))

        assert result.value == b"ab"
        assert result.cursor.tobytes() == b"c"

    def test_fails_when_all_fail(self) -> None:
        """Reason does not mention individual alternatives."""
        outcome = any_of(byte(b"x"), byte(b"y"))(Cursor(b"abc"))

        assert outcome == ParseFailure(FailureReason.NO_PARSER_SUCCEEDED)

    def test_single_alternative(self) -> None:
        """One alternative is allowed."""
        assert any_of(byte(b"a"))(Cursor(b"a"))

    def test_requires_alternatives(self) -> None:
        """An empty choice is a construction error."""
        with pytest.raises(ValueError, match="at least one parser"):
            any_of()
