"""Value kinds used to dispatch matchers on the shape of a subject.

Every Python value falls into exactly one ValueKind. Reference and
structural matchers, as well as value() synthesis, route on the kind
rather than on a fixed list of concrete types, so user-defined mappings
and sequences behave like the builtin ones.
"""

import functools
import inspect
import io
import math
import numbers
import socket
import types
import weakref
from collections.abc import AsyncIterator, Iterator, Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum, auto
from typing import Any


class ValueKind(Enum):
    """Structural kind of a value.

    The matcher library routes subjects and patterns on this kind.
    """
    SCALAR = auto()     # None, numbers, bools, text and bytes
    SEQUENCE = auto()   # Ordered containers (list, tuple, ...)
    MAP = auto()        # Key-value containers (dict, ...)
    SET = auto()        # Unordered collections of unique items
    INSTANCE = auto()   # Instances of ordinary classes, compared by identity
    OPAQUE = auto()     # Callables, classes, modules, weak references
    RESOURCE = auto()   # Handles and one-shot streams
    UNKNOWN = auto()    # Interpreter internals


_SCALAR_TYPES = (type(None), numbers.Number, str, bytes, bytearray)

_RESOURCE_TYPES = (
    io.IOBase,
    socket.socket,
    Iterator,
    AsyncIterator,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
)

_OPAQUE_TYPES = (
    type,
    functools.partial,
    weakref.ReferenceType,
    types.CellType,
    types.ModuleType,
)

_UNKNOWN_TYPES = (
    types.FrameType,
    types.TracebackType,
    types.CodeType,
    types.GetSetDescriptorType,
    types.MemberDescriptorType,
)


def kind_of(value: Any) -> ValueKind:
    """Classify a value into its ValueKind.

    Args:
        value: Any Python object.

    Returns:
        The kind the value belongs to.
    """
    if isinstance(value, _SCALAR_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, _RESOURCE_TYPES):
        return ValueKind.RESOURCE
    if isinstance(value, Mapping):
        return ValueKind.MAP
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    if isinstance(value, Set):
        return ValueKind.SET
    if isinstance(value, _OPAQUE_TYPES) or inspect.isroutine(value):
        return ValueKind.OPAQUE
    if isinstance(value, _UNKNOWN_TYPES):
        return ValueKind.UNKNOWN
    return ValueKind.INSTANCE


def is_number(value: Any) -> bool:
    """Check if value is a real number that can be compared numerically.

    Booleans and numeric strings are not numbers. Decimal NaNs are
    excluded because ordering them raises.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Real):
        return True
    if isinstance(value, Decimal):
        return not value.is_nan()
    return False


def is_integer(value: Any) -> bool:
    """Check if value is a finite number with no fractional part."""
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    return math.isfinite(value) and value == math.floor(value)
