"\"\"\"Evaluation of one filter against one record.\"\"\""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..schemas.modification import Modification
from .filter import RecordFilter
from .predicates import (
    SCALAR_PREDICATES,
    literal_list_predicate,
    modification_predicate,
)
from .result import EvaluationResult
from .types import FilterType, PredicateError

MISSING_VALUE = "missing_value"


def evaluate(
    flt: RecordFilter,
    record: Any,
    scope_id: int | None = None,
) -> EvaluationResult:
    """Evaluate ``flt`` against ``record``.

    A missing value never satisfies a filter, negated or not. Values of the
    wrong shape and misconfigured filters produce an ``error`` result.
    """
    descriptor = flt.descriptor
    if not descriptor.supports(record):
        return EvaluationResult.error(
            f"{descriptor.short_name} does not support {type(record).__name__}"
        )

    raw = descriptor.extract(record)
    if descriptor.requires_refinement and scope_id is not None:
        raw = descriptor.refine(scope_id, raw)

    if raw is None:
        return EvaluationResult.not_satisfied(MISSING_VALUE)

    if flt.configuration_error is not None:
        return EvaluationResult.error(flt.configuration_error)

    try:
        base = _dispatch(flt, raw)
    except PredicateError as exc:
        return EvaluationResult.error(str(exc))
    return EvaluationResult.from_bool(flt.negate ^ base)


def satisfies(flt: RecordFilter, record: Any, scope_id: int | None = None) -> bool:
    """Fail-closed boolean form of :func:`evaluate`."""
    return evaluate(flt, record, scope_id).passed


def _dispatch(flt: RecordFilter, raw: Any) -> bool:
    filter_type = flt.filter_type

    if filter_type in SCALAR_PREDICATES:
        predicate = SCALAR_PREDICATES[filter_type]
        if predicate.accepts(raw):
            return predicate.apply(flt, raw)
        if _is_collection(raw):
            # every element must match; negation applies to the aggregate
            for item in raw:
                if not predicate.accepts(item):
                    raise PredicateError(
                        f"{flt.short_name} expected {filter_type} elements, got {type(item).__name__}"
                    )
            return all(predicate.apply(flt, item) for item in raw)
        raise _shape_mismatch(flt, raw)

    if filter_type is FilterType.LITERAL_LIST:
        if _is_list_of(raw, str):
            return literal_list_predicate(flt, raw)
        raise _shape_mismatch(flt, raw)

    if filter_type is FilterType.MODIFICATION:
        if _is_list_of(raw, Modification):
            return modification_predicate(flt, raw)
        raise _shape_mismatch(flt, raw)

    raise PredicateError(f"unknown filter type {filter_type!r}")


def _is_collection(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def _is_list_of(value: Any, item_type: type) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and all(isinstance(item, item_type) for item in value)
    )


def _shape_mismatch(flt: RecordFilter, raw: Any) -> PredicateError:
    return PredicateError(
        f"{flt.short_name} cannot compare {type(raw).__name__} values as {flt.filter_type}"
    )
