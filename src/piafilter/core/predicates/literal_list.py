"\"\"\"Predicates over a whole ordered list of strings.\"\"\""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Sequence

from ..types import FilterComparator, PredicateError

if TYPE_CHECKING:
    from ..filter import RecordFilter


def literal_list_predicate(flt: "RecordFilter", values: Sequence[str]) -> bool:
    """Apply a list comparator to ``values`` as a whole.

    ``contains_only`` and ``regex_only`` are gated on the first element: the
    list must be non-empty and its first element must match before the rest
    is checked.
    """
    comparator = flt.comparator
    if comparator is FilterComparator.CONTAINS:
        return any(item == flt.value for item in values)

    if comparator is FilterComparator.CONTAINS_ONLY:
        if not values or values[0] != flt.value:
            return False
        return all(item == flt.value for item in values)

    if comparator in (FilterComparator.REGEX, FilterComparator.REGEX_ONLY):
        pattern = flt.pattern or re.compile(flt.value)
        if comparator is FilterComparator.REGEX:
            return any(pattern.fullmatch(item) is not None for item in values)
        if not values or pattern.fullmatch(values[0]) is None:
            return False
        return all(pattern.fullmatch(item) is not None for item in values)

    raise PredicateError(f"comparator '{comparator}' is not supported for literal_list filters")
