"""Matchers over sequence and map containers.

Sequence matchers only accept SEQUENCE-kind subjects (lists, tuples and
other collections.abc.Sequence types that are not text); map matchers
only accept MAP-kind subjects. Entries and patterns may be Matchers or
plain values, which are compiled with value().
"""

from collections.abc import Mapping
from decimal import InvalidOperation
from functools import cmp_to_key
from typing import Any, Callable, Dict

from .core import Matcher, MatchUsageError, as_matcher
from .kinds import ValueKind, kind_of
from .references import ref_type


is_array = ref_type(ValueKind.SEQUENCE)
array = is_array

is_hash = ref_type(ValueKind.MAP)
mapping = is_hash


def _is_array(subject: Any) -> bool:
    return kind_of(subject) is ValueKind.SEQUENCE


def _is_hash(subject: Any) -> bool:
    return kind_of(subject) is ValueKind.MAP


def array_length(pattern: Any) -> Matcher:
    """Match sequences whose length matches pattern."""
    length = as_matcher(pattern)
    return Matcher(
        lambda s: _is_array(s) and length.test(len(s)),
        f"array_length({length.description})",
    )


def tuple_of(*entries: Any) -> Matcher:
    """Match sequences of exactly len(entries) items, matched one by one."""
    matchers = [as_matcher(e) for e in entries]

    def _tuple(subject):
        if not _is_array(subject) or len(subject) != len(matchers):
            return False
        return all(m.test(item) for m, item in zip(matchers, subject))
    return Matcher(_tuple, f"tuple_of({len(matchers)})")


def head(*entries: Any) -> Matcher:
    """Match sequences whose leading items match entries one by one.

    The subject may have more items than entries.
    """
    matchers = [as_matcher(e) for e in entries]

    def _head(subject):
        if not _is_array(subject) or len(subject) < len(matchers):
            return False
        return all(m.test(item) for m, item in zip(matchers, subject))
    return Matcher(_head, f"head({len(matchers)})")


def sequence(pattern: Any) -> Matcher:
    """Match sequences in which every item matches pattern."""
    matcher = as_matcher(pattern)
    return Matcher(
        lambda s: _is_array(s) and all(matcher.test(item) for item in s),
        f"sequence({matcher.description})",
    )


def contains(*patterns: Any) -> Matcher:
    """Match sequences in which every pattern is matched by some item.

    Patterns are checked independently; one item may satisfy several.
    """
    matchers = [as_matcher(p) for p in patterns]

    def _contains(subject):
        if not _is_array(subject):
            return False
        return all(any(m.test(item) for item in subject) for m in matchers)
    return Matcher(_contains, f"contains({len(matchers)})")


def contains_any(*patterns: Any) -> Matcher:
    """Match sequences in which at least one pattern is matched by some item."""
    matchers = [as_matcher(p) for p in patterns]

    def _contains_any(subject):
        if not _is_array(subject):
            return False
        return any(m.test(item) for m in matchers for item in subject)
    return Matcher(_contains_any, f"contains_any({len(matchers)})")


def sorted_as(pattern: Any) -> Matcher:
    """Sort a sequence with the default ordering and match the result.

    Sequences whose items cannot be ordered against each other do not
    match.
    """
    matcher = as_matcher(pattern)

    def _sorted(subject):
        if not _is_array(subject):
            return False
        try:
            ordered = sorted(subject)
        except (TypeError, InvalidOperation):
            return False
        return matcher.test(ordered)
    return Matcher(_sorted, f"sorted_as({matcher.description})")


def sorted_by(comparator: Callable[[Any, Any], int], pattern: Any) -> Matcher:
    """Sort a sequence with comparator and match the result.

    Args:
        comparator: Called as ``comparator(a, b)``; returns a negative
                    number, zero or a positive number.
        pattern: Pattern the sorted list must match.

    Returns:
        A new Matcher.
    """
    matcher = as_matcher(pattern)
    key = cmp_to_key(comparator)
    return Matcher(
        lambda s: _is_array(s) and matcher.test(sorted(s, key=key)),
        f"sorted_by({matcher.description})",
    )


def hash_keys(pattern: Any) -> Matcher:
    """Match the list of a mapping's keys against pattern."""
    matcher = as_matcher(pattern)
    return Matcher(
        lambda s: _is_hash(s) and matcher.test(list(s.keys())),
        f"hash_keys({matcher.description})",
    )


def hash_values(pattern: Any) -> Matcher:
    """Match the list of a mapping's values against pattern."""
    matcher = as_matcher(pattern)
    return Matcher(
        lambda s: _is_hash(s) and matcher.test(list(s.values())),
        f"hash_values({matcher.description})",
    )


def _compile_reference(builder_name: str, reference: Any) -> Dict[Any, Matcher]:
    if not isinstance(reference, Mapping):
        raise MatchUsageError(
            f"{builder_name}() requires a mapping, got {type(reference).__name__}"
        )
    return {k: as_matcher(v) for k, v in reference.items()}


def _key_kinds_agree(subject: Mapping, reference_keys: Dict[Any, Any]) -> bool:
    # True and 1 are the same dict key; a bool key only pairs with a bool
    for key in subject:
        if key in reference_keys and (
                isinstance(key, bool) != isinstance(reference_keys[key], bool)):
            return False
    return True


def sub_hash(reference: Mapping) -> Matcher:
    """Match mappings that contain every key of reference.

    The subject's value at each of those keys must match the reference's
    value. Extra keys in the subject are allowed. Bool keys only pair
    with bool keys, so {True: 1} does not stand in for {1: 1}.

    Raises:
        MatchUsageError: If reference is not a mapping.
    """
    matchers = _compile_reference('sub_hash', reference)
    reference_keys = {k: k for k in matchers}

    def _sub_hash(subject):
        if not _is_hash(subject) or len(subject) < len(matchers):
            return False
        for key, matcher in matchers.items():
            if key not in subject or not matcher.test(subject[key]):
                return False
        return _key_kinds_agree(subject, reference_keys)
    return Matcher(_sub_hash, f"sub_hash({len(matchers)} keys)")


def hashwise(reference: Mapping) -> Matcher:
    """Match mappings with exactly the keys of reference and matching values.

    Bool keys only pair with bool keys, as in sub_hash().

    Raises:
        MatchUsageError: If reference is not a mapping.
    """
    matchers = _compile_reference('hashwise', reference)
    reference_keys = {k: k for k in matchers}

    def _hashwise(subject):
        if not _is_hash(subject) or subject.keys() != matchers.keys():
            return False
        if not _key_kinds_agree(subject, reference_keys):
            return False
        return all(matcher.test(subject[key]) for key, matcher in matchers.items())
    return Matcher(_hashwise, f"hashwise({len(matchers)} keys)")
