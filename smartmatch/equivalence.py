"""Compile concrete values into deep structural equality matchers.

value() walks a value by kind:

- class instances and opaque references (functions, classes, modules)
  match by identity
- scalars match by literal equality
- sequences become tuple_of() over their compiled items
- mappings become hashwise() over their compiled values
- sets match sets that compare equal

Handles, streams and interpreter internals are rejected. Cyclic
containers are not supported.
"""

import logging
import math
from collections.abc import Set
from decimal import Decimal
from typing import Any

from .core import Matcher, MatchUsageError
from .kinds import ValueKind, is_number, kind_of
from .references import address
from .structural import hashwise, tuple_of

logger = logging.getLogger(__name__)


def _literal(expected: Any) -> Matcher:
    if expected is None or isinstance(expected, bool):
        return Matcher(lambda s: s is expected, repr(expected))
    if isinstance(expected, str):
        return Matcher(lambda s: isinstance(s, str) and s == expected, repr(expected))
    if isinstance(expected, (bytes, bytearray)):
        return Matcher(
            lambda s: isinstance(s, (bytes, bytearray)) and s == expected,
            repr(expected),
        )
    if isinstance(expected, float) and math.isnan(expected):
        return Matcher(lambda s: isinstance(s, float) and math.isnan(s), 'nan')
    if isinstance(expected, Decimal) and expected.is_nan():
        return Matcher(lambda s: isinstance(s, Decimal) and s.is_nan(), repr(expected))
    if is_number(expected):
        return Matcher(lambda s: is_number(s) and s == expected, repr(expected))
    # Complex numbers and other non-real Number types
    return Matcher(
        lambda s: kind_of(s) is ValueKind.SCALAR and not isinstance(s, bool)
        and not (isinstance(s, Decimal) and s.is_nan()) and s == expected,
        repr(expected),
    )


def _set_equal(expected: Set) -> Matcher:
    return Matcher(
        lambda s: kind_of(s) is ValueKind.SET and s == expected,
        f"set({len(expected)})",
    )


def value(expected: Any) -> Matcher:
    """Build a matcher for deep structural equality with expected.

    Matchers nested anywhere inside expected are used as patterns
    rather than compared.

    Args:
        expected: The value to compile.

    Returns:
        A Matcher that accepts values structurally equal to expected.

    Raises:
        MatchUsageError: If expected, or anything nested in it, is a
                         handle, stream or interpreter internal.
    """
    if isinstance(expected, Matcher):
        return expected

    kind = kind_of(expected)
    logger.debug(f"Compiling {type(expected).__name__} value as {kind.name}")

    if kind is ValueKind.INSTANCE or kind is ValueKind.OPAQUE:
        return address(expected)
    if kind is ValueKind.SCALAR:
        return _literal(expected)
    if kind is ValueKind.SEQUENCE:
        return tuple_of(*[value(item) for item in expected])
    if kind is ValueKind.MAP:
        return hashwise({key: value(expected[key]) for key in expected})
    if kind is ValueKind.SET:
        return _set_equal(expected)

    logger.debug(f"Rejecting {type(expected).__name__} value of kind {kind.name}")
    if kind is ValueKind.RESOURCE:
        raise MatchUsageError(
            f"Cannot match against a {type(expected).__name__}: handles and "
            f"streams have no structural value"
        )
    raise MatchUsageError(f"Unsupported value of type {type(expected).__name__}")
