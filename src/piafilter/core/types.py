"\"\"\"Filter types and the comparators valid for each of them.\"\"\""

from __future__ import annotations

from enum import Enum


class FilterType(str, Enum):
    """Kind of value a filter compares, fixed per descriptor."""

    BOOL = "bool"
    NUMERICAL = "numerical"
    LITERAL = "literal"
    LITERAL_LIST = "literal_list"
    MODIFICATION = "modification"

    def __str__(self) -> str:
        return self.value


class FilterComparator(str, Enum):
    LESS = "less"
    LESS_EQUAL = "less_equal"
    EQUAL = "equal"
    GREATER_EQUAL = "greater_equal"
    GREATER = "greater"
    CONTAINS = "contains"
    CONTAINS_ONLY = "contains_only"
    REGEX = "regex"
    REGEX_ONLY = "regex_only"
    HAS_ANY_MODIFICATION = "has_any_modification"
    HAS_DESCRIPTION = "has_description"
    HAS_MASS = "has_mass"
    HAS_RESIDUE = "has_residue"

    def __str__(self) -> str:
        return self.value


COMPARATORS_BY_TYPE: dict[FilterType, tuple[FilterComparator, ...]] = {
    FilterType.BOOL: (FilterComparator.EQUAL,),
    FilterType.NUMERICAL: (
        FilterComparator.LESS,
        FilterComparator.LESS_EQUAL,
        FilterComparator.EQUAL,
        FilterComparator.GREATER_EQUAL,
        FilterComparator.GREATER,
    ),
    FilterType.LITERAL: (
        FilterComparator.EQUAL,
        FilterComparator.CONTAINS,
        FilterComparator.REGEX,
    ),
    FilterType.LITERAL_LIST: (
        FilterComparator.CONTAINS,
        FilterComparator.CONTAINS_ONLY,
        FilterComparator.REGEX,
        FilterComparator.REGEX_ONLY,
    ),
    FilterType.MODIFICATION: (
        FilterComparator.HAS_ANY_MODIFICATION,
        FilterComparator.HAS_DESCRIPTION,
        FilterComparator.HAS_MASS,
        FilterComparator.HAS_RESIDUE,
    ),
}

REGEX_COMPARATORS = frozenset({FilterComparator.REGEX, FilterComparator.REGEX_ONLY})


def is_valid_comparator(filter_type: FilterType, comparator: FilterComparator) -> bool:
    return comparator in COMPARATORS_BY_TYPE[filter_type]


class FilterConfigurationError(ValueError):
    """Raised when a filter cannot be built from its specification."""


class PredicateError(Exception):
    """Raised when a predicate cannot be applied to the value it was given."""
