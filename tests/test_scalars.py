"""Tests for numeric and string matchers."""

from decimal import Decimal

import pytest

from smartmatch.core import MatchUsageError, Matcher, matches
from smartmatch.scalars import (
    at_least,
    at_most,
    even,
    in_range,
    integer,
    less_than,
    more_than,
    negative,
    number,
    numwise,
    numwise_each,
    odd,
    positive,
    string,
    string_length,
    stringwise,
    stringwise_each,
)


class Named:
    """Instance with its own text conversion."""

    def __str__(self):
        return "named"


class Plain:
    """Instance without text conversion."""


class TestNumberPredicates:
    """Tests for number, integer, even and odd."""

    def test_number(self):
        """Test numbers and non-numbers."""
        assert number.test(3) is True
        assert number.test(2.5) is True
        assert number.test("3") is False
        assert number.test(None) is False
        assert number.test([3]) is False

    def test_integer(self):
        """Test integral values."""
        assert integer.test(4) is True
        assert integer.test(4.0) is True
        assert integer.test(4.5) is False
        assert integer.test("4") is False

    def test_even_and_odd(self):
        """Test parity."""
        assert even.test(4) is True
        assert even.test(3) is False
        assert odd.test(3) is True
        assert odd.test(-3) is True
        assert odd.test(Decimal(-3)) is True
        assert even.test(0) is True

    def test_parity_of_non_integers(self):
        """Test parity matchers reject non-integers without raising."""
        assert even.test(2.5) is False
        assert odd.test(2.5) is False
        assert even.test("2") is False
        assert odd.test(None) is False


class TestComparisons:
    """Tests for cutoff comparisons and ranges."""

    def test_cutoffs(self):
        """Test strict and inclusive comparisons."""
        assert more_than(3).test(4) is True
        assert more_than(3).test(3) is False
        assert at_least(3).test(3) is True
        assert less_than(3).test(2) is True
        assert less_than(3).test(3) is False
        assert at_most(3).test(3) is True

    def test_non_numeric_subjects(self):
        """Test comparisons against non-numbers are False, not errors."""
        for matcher in (more_than(3), less_than(3), at_least(3), at_most(3)):
            assert matcher.test("10") is False
            assert matcher.test(None) is False
            assert matcher.test([1]) is False

    @pytest.mark.parametrize("builder", [more_than, less_than, at_least, at_most])
    @pytest.mark.parametrize("cutoff", ["a", None, True, [1], Decimal("NaN")])
    def test_cutoff_must_be_numeric(self, builder, cutoff):
        """Test non-numeric cutoffs fail at construction."""
        with pytest.raises(MatchUsageError, match="requires a numeric cutoff"):
            builder(cutoff)

    def test_range_bounds_must_be_numeric(self):
        """Test non-numeric range bounds fail at construction."""
        with pytest.raises(MatchUsageError, match="numeric cutoff"):
            in_range("1", "9")
        with pytest.raises(MatchUsageError):
            in_range(1, None)

    def test_mixed_numeric_cutoffs(self):
        """Test cutoffs of other numeric types compare numerically."""
        assert more_than(Decimal("1.5")).test(2) is True
        assert at_most(2.5).test(Decimal("2")) is True

    def test_range(self):
        """Test inclusive ranges."""
        assert matches(5, in_range(1, 10)) is True
        assert matches(15, in_range(1, 10)) is False
        assert matches(1, in_range(1, 10)) is True
        assert matches(10, in_range(1, 10)) is True
        assert 5 in in_range(1, 10)

    def test_positive_and_negative(self):
        """Test sign matchers."""
        assert positive.test(1) is True
        assert positive.test(0) is False
        assert negative.test(-0.5) is True
        assert negative.test(0) is False


class TestNumwise:
    """Tests for numeric equality builders."""

    def test_single(self):
        """Test numwise with one value."""
        assert numwise(3).test(3.0) is True
        assert numwise(3).test(4) is False
        assert numwise(3).test("3") is False

    def test_single_requires_exactly_one(self):
        """Test arity errors for numwise."""
        with pytest.raises(MatchUsageError, match="exactly one value"):
            numwise()
        with pytest.raises(MatchUsageError, match="numwise_each"):
            numwise(1, 2)

    def test_each(self):
        """Test one matcher per value."""
        one, two = numwise_each(1, 2)
        assert isinstance(one, Matcher)
        assert one.test(1) is True
        assert one.test(2) is False
        assert two.test(2) is True

    def test_each_requires_values(self):
        """Test numwise_each with no values."""
        with pytest.raises(MatchUsageError, match="at least one value"):
            numwise_each()


class TestStrings:
    """Tests for string matchers."""

    def test_string(self):
        """Test what counts as a string."""
        assert string.test("abc") is True
        assert string.test("") is True
        assert string.test(42) is True
        assert string.test(Named()) is True
        assert string.test(None) is False
        assert string.test(Plain()) is False
        assert string.test(["a"]) is False
        assert string.test({"a": 1}) is False
        assert string.test(b"abc") is False

    def test_string_length(self):
        """Test matching on text length."""
        assert string_length(3).test("abc") is True
        assert string_length(positive).test("") is False
        assert string_length(positive).test("a") is True
        assert string_length(5).test(Named()) is True
        assert string_length(1).test(["a"]) is False

    def test_stringwise(self):
        """Test text equality."""
        assert stringwise("abc").test("abc") is True
        assert stringwise("abc").test("abd") is False
        assert stringwise("42").test(42) is True
        assert stringwise("named").test(Named()) is True
        assert stringwise("None").test(None) is False

    def test_stringwise_arity(self):
        """Test arity errors for the string builders."""
        with pytest.raises(MatchUsageError):
            stringwise()
        with pytest.raises(MatchUsageError):
            stringwise("a", "b")
        with pytest.raises(MatchUsageError):
            stringwise_each()

    def test_stringwise_each(self):
        """Test one string matcher per value."""
        matchers = stringwise_each("a", "b", "c")
        assert len(matchers) == 3
        assert [m.test("b") for m in matchers] == [False, True, False]
