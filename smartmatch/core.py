"""Matcher objects and the two-place match operation.

A Matcher wraps a predicate over a single subject. Evaluating it binds
the subject on a call-scoped stack so that a matcher used as a plain
boolean inside another matcher's predicate tests the same subject:

    big_integer = match(lambda s: integer and s > 10)

Here ``integer`` is coerced with bool() while ``s`` is bound, which
evaluates it against ``s``.
"""

import logging
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

logger = logging.getLogger(__name__)

_bound_subjects: ContextVar[Tuple[Any, ...]] = ContextVar(
    'smartmatch_bound_subjects', default=()
)


class MatchUsageError(Exception):
    """Matcher constructed or invoked incorrectly.

    Distinct from a non-matching verdict, which is simply False.
    """
    pass


@dataclass(frozen=True, eq=False)
class Matcher:
    """Immutable predicate over a subject.

    Attributes:
        predicate: Callable taking the subject. Its result is coerced
                   with bool().
        description: Label shown in repr().
    """
    predicate: Callable[[Any], Any]
    description: str = 'match'

    def test(self, subject: Any) -> bool:
        """Test subject against this matcher.

        The subject stays bound for the duration of the predicate call,
        including any nested evaluations it triggers.

        Args:
            subject: Value under test.

        Returns:
            True if the subject matches.
        """
        token = _bound_subjects.set(_bound_subjects.get() + (subject,))
        try:
            return bool(self.predicate(subject))
        finally:
            _bound_subjects.reset(token)

    def __call__(self, subject: Any) -> bool:
        return self.test(subject)

    def __contains__(self, subject: Any) -> bool:
        """Support ``subject in matcher``."""
        return self.test(subject)

    def __bool__(self) -> bool:
        """Test against the subject bound by the enclosing evaluation.

        Raises:
            MatchUsageError: If no evaluation is in progress.
        """
        return self.test(current_subject())

    def __repr__(self) -> str:
        return f"<Matcher {self.description}>"


def match(predicate: Callable[[Any], Any],
          description: Optional[str] = None) -> Matcher:
    """Create a matcher from a predicate.

    Args:
        predicate: Called with the subject; any truthy result matches.
        description: Optional label, defaults to the predicate's name.

    Returns:
        A new Matcher.
    """
    if description is None:
        description = getattr(predicate, '__name__', 'match')
    return Matcher(predicate, description)


def evaluate(matcher: Matcher, subject: Any) -> bool:
    """Test subject against matcher."""
    return matcher.test(subject)


def current_subject() -> Any:
    """Return the subject bound by the innermost running evaluation.

    Raises:
        MatchUsageError: If no evaluation is in progress.
    """
    stack = _bound_subjects.get()
    if not stack:
        logger.debug("Standalone matcher coercion attempted with no bound subject")
        raise MatchUsageError(
            "No subject is bound; a matcher can only be used as a plain "
            "boolean while another matcher is being evaluated"
        )
    return stack[-1]


def as_matcher(pattern: Any) -> Matcher:
    """Return pattern as a Matcher.

    Matchers are returned unchanged. Any other value is compiled into a
    structural equality matcher with value().
    """
    if isinstance(pattern, Matcher):
        return pattern
    from .equivalence import value
    return value(pattern)


def matches(left: Any, right: Any) -> bool:
    """Match two operands, whichever of them holds the pattern.

    If right is a Matcher it is the pattern and left the subject. If
    only left is a Matcher the roles are swapped. If neither is, right
    is compiled with value() and tested against left.

    Args:
        left: Subject, or a Matcher.
        right: Pattern, or the subject when left is a Matcher.

    Returns:
        True if the subject matches the pattern.
    """
    if isinstance(right, Matcher):
        return right.test(left)
    if isinstance(left, Matcher):
        return left.test(right)
    return as_matcher(right).test(left)
