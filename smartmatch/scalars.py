"""Numeric and string leaf matchers.

Subjects of the wrong type never raise; they simply do not match.
Numbers are real numbers other than bool (see kinds.is_number).
"""

from typing import Any, List

from .combinators import all_of
from .core import Matcher, MatchUsageError, as_matcher
from .kinds import ValueKind, is_integer, is_number, kind_of


number = Matcher(is_number, 'number')
integer = Matcher(is_integer, 'integer')

even = Matcher(lambda s: is_integer(s) and int(s) % 2 == 0, 'even')
odd = Matcher(lambda s: is_integer(s) and int(s) % 2 == 1, 'odd')


def _require_number(builder_name: str, cutoff: Any) -> None:
    if not is_number(cutoff):
        raise MatchUsageError(
            f"{builder_name}() requires a numeric cutoff, got {cutoff!r}"
        )


def more_than(cutoff: Any) -> Matcher:
    """Match numbers strictly greater than cutoff."""
    _require_number('more_than', cutoff)
    return Matcher(lambda s: is_number(s) and s > cutoff, f"more_than({cutoff!r})")


def less_than(cutoff: Any) -> Matcher:
    """Match numbers strictly less than cutoff."""
    _require_number('less_than', cutoff)
    return Matcher(lambda s: is_number(s) and s < cutoff, f"less_than({cutoff!r})")


def at_least(cutoff: Any) -> Matcher:
    """Match numbers greater than or equal to cutoff."""
    _require_number('at_least', cutoff)
    return Matcher(lambda s: is_number(s) and s >= cutoff, f"at_least({cutoff!r})")


def at_most(cutoff: Any) -> Matcher:
    """Match numbers less than or equal to cutoff."""
    _require_number('at_most', cutoff)
    return Matcher(lambda s: is_number(s) and s <= cutoff, f"at_most({cutoff!r})")


def in_range(low: Any, high: Any) -> Matcher:
    """Match numbers between low and high, both inclusive."""
    return all_of(at_least(low), at_most(high))


positive = more_than(0)
negative = less_than(0)


def _single(builder_name: str, values: tuple) -> Any:
    if len(values) != 1:
        raise MatchUsageError(
            f"{builder_name}() takes exactly one value, got {len(values)}; "
            f"use {builder_name}_each() to build one matcher per value"
        )
    return values[0]


def _require_values(builder_name: str, values: tuple) -> None:
    if not values:
        raise MatchUsageError(f"{builder_name}() requires at least one value")


def _numwise(other: Any) -> Matcher:
    return Matcher(lambda s: is_number(s) and s == other, f"numwise({other!r})")


def numwise(*values: Any) -> Matcher:
    """Match numbers numerically equal to the single given value.

    Raises:
        MatchUsageError: Unless exactly one value is given.
    """
    return _numwise(_single('numwise', values))


def numwise_each(*values: Any) -> List[Matcher]:
    """Build one numeric equality matcher per value.

    Raises:
        MatchUsageError: If no values are given.
    """
    _require_values('numwise_each', values)
    return [_numwise(v) for v in values]


def _is_string(subject: Any) -> bool:
    if isinstance(subject, str):
        return True
    if isinstance(subject, (bytes, bytearray)) or subject is None:
        return False
    kind = kind_of(subject)
    if kind is ValueKind.SCALAR:
        return True
    if kind is ValueKind.INSTANCE:
        return type(subject).__str__ is not object.__str__
    return False


string = Matcher(_is_string, 'string')


def string_length(pattern: Any) -> Matcher:
    """Match strings whose length matches pattern."""
    length = as_matcher(pattern)
    return Matcher(
        lambda s: _is_string(s) and length.test(len(str(s))),
        f"string_length({length.description})",
    )


def _stringwise(other: Any) -> Matcher:
    text = str(other)
    return Matcher(lambda s: _is_string(s) and str(s) == text, f"stringwise({text!r})")


def stringwise(*values: Any) -> Matcher:
    """Match values whose text equals the single given string.

    Raises:
        MatchUsageError: Unless exactly one value is given.
    """
    return _stringwise(_single('stringwise', values))


def stringwise_each(*values: Any) -> List[Matcher]:
    """Build one string equality matcher per value.

    Raises:
        MatchUsageError: If no values are given.
    """
    _require_values('stringwise_each', values)
    return [_stringwise(v) for v in values]
