"""Matchers on identity, class membership and container kind."""

import numbers
from collections.abc import Mapping, Sequence, Set
from typing import Any, Dict, Tuple, Type, Union

from .core import Matcher, MatchUsageError
from .kinds import ValueKind, kind_of


def _is_instance(subject: Any) -> bool:
    return kind_of(subject) is ValueKind.INSTANCE


instance = Matcher(_is_instance, 'instance')


def _type_names(cls: type) -> set:
    names = set()
    for base in cls.__mro__:
        names.add(base.__name__)
        names.add(f"{base.__module__}.{base.__qualname__}")
    return names


# Instances of these classes are scalars or containers, never INSTANCE
_NON_INSTANCE_BASES = (type(None), numbers.Number, str, bytes, bytearray, Mapping, Sequence, Set)


def _check_classes(cls: Union[Type, Tuple[Type, ...]]) -> None:
    classes = cls if isinstance(cls, tuple) else (cls,)
    for candidate in classes:
        if not isinstance(candidate, type):
            raise MatchUsageError(f"instance_of() requires a class, got {candidate!r}")
        if issubclass(candidate, _NON_INSTANCE_BASES):
            raise MatchUsageError(
                f"instance_of({candidate.__name__}) can never match: its instances "
                f"are scalars or containers, use ref_type() or value() instead"
            )


def instance_of(cls: Union[str, Type, Tuple[Type, ...]]) -> Matcher:
    """Match class instances of cls or of one of its subclasses.

    Args:
        cls: A class, a tuple of classes, or a class name. A name matches
             the plain or module-qualified name of any class in the
             subject's MRO.

    Returns:
        A new Matcher.

    Raises:
        MatchUsageError: If cls is not a class, or is a scalar or container
                         class (a Mapping, Sequence or Set, a number or
                         text type), whose instances are never class
                         instances.
    """
    if isinstance(cls, str):
        return Matcher(
            lambda s: _is_instance(s) and cls in _type_names(type(s)),
            f"instance_of({cls!r})",
        )
    _check_classes(cls)
    return Matcher(
        lambda s: _is_instance(s) and isinstance(s, cls),
        f"instance_of({cls!r})",
    )


_KIND_ALIASES: Dict[str, ValueKind] = {
    'array': ValueKind.SEQUENCE,
    'list': ValueKind.SEQUENCE,
    'hash': ValueKind.MAP,
    'dict': ValueKind.MAP,
}


def _resolve_kind(kind: Union[str, ValueKind]) -> ValueKind:
    if isinstance(kind, ValueKind):
        return kind
    name = str(kind).lower()
    if name in _KIND_ALIASES:
        return _KIND_ALIASES[name]
    try:
        return ValueKind[name.upper()]
    except KeyError:
        raise MatchUsageError(f"Unknown value kind: {kind!r}") from None


def ref_type(kind: Union[str, ValueKind]) -> Matcher:
    """Match values of the given kind.

    Args:
        kind: A ValueKind, or its name (case-insensitive). "array" and
              "list" mean SEQUENCE, "hash" and "dict" mean MAP.

    Raises:
        MatchUsageError: If kind names no known ValueKind.
    """
    resolved = _resolve_kind(kind)
    return Matcher(lambda s: kind_of(s) is resolved, f"ref_type({resolved.name})")


def address(reference: Any) -> Matcher:
    """Match only the very same object as reference."""
    return Matcher(lambda s: s is reference, f"address(0x{id(reference):x})")
