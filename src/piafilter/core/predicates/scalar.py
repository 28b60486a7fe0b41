"\"\"\"Predicates over single bool, number and string values.\"\"\""

from __future__ import annotations

import operator
import re
from typing import TYPE_CHECKING, Any, Callable, NamedTuple

from ..types import FilterComparator, FilterType, PredicateError

if TYPE_CHECKING:
    from ..filter import RecordFilter

_NUMERICAL_OPERATORS: dict[FilterComparator, Callable[[float, float], bool]] = {
    FilterComparator.LESS: operator.lt,
    FilterComparator.LESS_EQUAL: operator.le,
    FilterComparator.EQUAL: operator.eq,
    FilterComparator.GREATER_EQUAL: operator.ge,
    FilterComparator.GREATER: operator.gt,
}


def _unsupported(flt: "RecordFilter") -> PredicateError:
    return PredicateError(
        f"comparator '{flt.comparator}' is not supported for {flt.filter_type} filters"
    )


def bool_predicate(flt: "RecordFilter", value: bool) -> bool:
    if flt.comparator is FilterComparator.EQUAL:
        return value == flt.value
    raise _unsupported(flt)


def numerical_predicate(flt: "RecordFilter", value: float) -> bool:
    compare = _NUMERICAL_OPERATORS.get(flt.comparator)
    if compare is None:
        raise _unsupported(flt)
    # int and float compare exactly, so huge ints never overflow
    return compare(value, flt.value)


def literal_predicate(flt: "RecordFilter", value: str) -> bool:
    if flt.comparator is FilterComparator.EQUAL:
        return value == flt.value
    if flt.comparator is FilterComparator.CONTAINS:
        return flt.value in value
    if flt.comparator is FilterComparator.REGEX:
        pattern = flt.pattern or re.compile(flt.value)
        return pattern.fullmatch(value) is not None
    raise _unsupported(flt)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_text(value: Any) -> bool:
    return isinstance(value, str)


class ScalarPredicate(NamedTuple):
    """A predicate together with the check for the value kind it accepts."""

    accepts: Callable[[Any], bool]
    apply: Callable[["RecordFilter", Any], bool]


SCALAR_PREDICATES: dict[FilterType, ScalarPredicate] = {
    FilterType.BOOL: ScalarPredicate(_is_bool, bool_predicate),
    FilterType.NUMERICAL: ScalarPredicate(_is_number, numerical_predicate),
    FilterType.LITERAL: ScalarPredicate(_is_text, literal_predicate),
}
