"""Composable matchers for structural pattern matching on plain values.

A matcher tests a subject and returns a bool. Matchers are built from
leaves upward with combinators, and any plain value can stand in for a
matcher of deep structural equality with it:

- Junctions: any_of, all_of, none_of, one_of
- Numbers and strings: number, integer, in_range, numwise, string_length, ...
- References: instance, instance_of, ref_type, address
- Sequences and mappings: tuple_of, head, contains, sorted_as, sub_hash, ...
- value(): compile a concrete value into an equality matcher

Example:
    from smartmatch import matches, any_of, tuple_of, sub_hash, in_range

    matches([1, 3], tuple_of(1, any_of(2, 3)))        # True
    matches({'a': 1, 'b': 2}, sub_hash({'a': 1}))      # True
    5 in in_range(1, 10)                               # True
"""

from .kinds import ValueKind, kind_of, is_number, is_integer
from .core import (
    Matcher, MatchUsageError, match, evaluate, matches, as_matcher, current_subject,
)
from .combinators import (
    any_of, all_of, none_of, one_of, delegate, always, never, truthy, falsy,
)
from .scalars import (
    number, integer, even, odd,
    more_than, less_than, at_least, at_most, in_range, positive, negative,
    numwise, numwise_each,
    string, string_length, stringwise, stringwise_each,
)
from .references import instance, instance_of, ref_type, address
from .structural import (
    is_array, array, array_length, tuple_of, head, sequence,
    contains, contains_any, sorted_as, sorted_by,
    is_hash, mapping, hash_keys, hash_values, sub_hash, hashwise,
)
from .equivalence import value

__all__ = [
    # Core
    'Matcher', 'MatchUsageError', 'match', 'evaluate', 'matches',
    'as_matcher', 'current_subject',
    # Kinds
    'ValueKind', 'kind_of', 'is_number', 'is_integer',
    # Junctions and meta
    'any_of', 'all_of', 'none_of', 'one_of', 'delegate',
    'always', 'never', 'truthy', 'falsy',
    # Numeric
    'number', 'integer', 'even', 'odd',
    'more_than', 'less_than', 'at_least', 'at_most', 'in_range',
    'positive', 'negative',
    # Comparison
    'numwise', 'numwise_each', 'stringwise', 'stringwise_each',
    # String
    'string', 'string_length',
    # References
    'instance', 'instance_of', 'ref_type', 'address',
    # Sequences
    'is_array', 'array', 'array_length', 'tuple_of', 'head', 'sequence',
    'contains', 'contains_any', 'sorted_as', 'sorted_by',
    # Mappings
    'is_hash', 'mapping', 'hash_keys', 'hash_values', 'sub_hash', 'hashwise',
    # Structural equality
    'value',
]
