"""Junctions and other matchers built purely from other patterns.

Patterns may be Matchers or plain values; plain values are compiled
into equality matchers when the combinator is constructed.
"""

from collections.abc import Iterator
from typing import Any, Callable

from .core import Matcher, as_matcher, match


def any_of(*patterns: Any) -> Matcher:
    """Match if the subject matches at least one pattern.

    Patterns are tried in order and evaluation stops at the first match.
    """
    matchers = [as_matcher(p) for p in patterns]

    def _any(subject):
        for candidate in matchers:
            if candidate.test(subject):
                return True
        return False
    return Matcher(_any, f"any_of({len(matchers)})")


def all_of(*patterns: Any) -> Matcher:
    """Match if the subject matches every pattern.

    Evaluation stops at the first pattern that does not match.
    """
    matchers = [as_matcher(p) for p in patterns]

    def _all(subject):
        for candidate in matchers:
            if not candidate.test(subject):
                return False
        return True
    return Matcher(_all, f"all_of({len(matchers)})")


def none_of(*patterns: Any) -> Matcher:
    """Match if the subject matches none of the patterns."""
    matchers = [as_matcher(p) for p in patterns]

    def _none(subject):
        for candidate in matchers:
            if candidate.test(subject):
                return False
        return True
    return Matcher(_none, f"none_of({len(matchers)})")


def one_of(*patterns: Any) -> Matcher:
    """Match if the subject matches exactly one pattern.

    Gives up as soon as a second matching pattern is found.
    """
    matchers = [as_matcher(p) for p in patterns]

    def _one(subject):
        count = 0
        for candidate in matchers:
            if candidate.test(subject):
                count += 1
            if count > 1:
                return False
        return count == 1
    return Matcher(_one, f"one_of({len(matchers)})")


def delegate(producer: Callable[[Any], Any], pattern: Any) -> Matcher:
    """Match a value derived from the subject against pattern.

    ``producer(subject)`` computes the derived value. When it returns an
    iterator (e.g. a generator), only the first produced value is tested
    and the rest are never consumed; an empty iterator does not match.

    Args:
        producer: Called with the subject.
        pattern: Pattern the derived value must match.

    Returns:
        A new Matcher.
    """
    matcher = as_matcher(pattern)

    def _delegate(subject):
        produced = producer(subject)
        if not isinstance(produced, Iterator):
            return matcher.test(produced)
        for derived in produced:
            return matcher.test(derived)
        return False
    name = getattr(producer, '__name__', 'producer')
    return Matcher(_delegate, f"delegate({name})")


always = match(lambda subject: True, 'always')
never = match(lambda subject: False, 'never')

truthy = match(lambda subject: subject, 'truthy')
falsy = match(lambda subject: not subject, 'falsy')
