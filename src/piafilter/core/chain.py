"\"\"\"Conjunction of filters applied to a stream of records.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence

from .evaluator import evaluate
from .filter import RecordFilter
from .result import EvaluationResult


@dataclass(frozen=True, slots=True)
class ChainOutcome:
    """Decision of a chain for one record."""

    passed: bool
    failed_filter: RecordFilter | None = None
    result: EvaluationResult | None = None

    @property
    def is_error(self) -> bool:
        return self.result is not None and self.result.is_error


class FilterChain:
    """Logical AND over a flat list of filters.

    Filters are checked in order and the first one that is not satisfied
    rejects the record; the remaining filters are not evaluated. Evaluation
    errors reject the record as well. An empty chain accepts every record.

    With ``skip_unsupported`` a filter whose descriptor does not support the
    record kind is skipped, so one chain can hold PSM, peptide and protein
    filters at once.
    """

    def __init__(
        self,
        filters: Iterable[RecordFilter],
        *,
        skip_unsupported: bool = True,
    ) -> None:
        self._filters = tuple(filters)
        self._skip_unsupported = skip_unsupported

    @property
    def filters(self) -> Sequence[RecordFilter]:
        return self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def check(self, record: Any, scope_id: int | None = None) -> ChainOutcome:
        for flt in self._filters:
            if self._skip_unsupported and not flt.descriptor.supports(record):
                continue
            result = evaluate(flt, record, scope_id)
            if not result.passed:
                return ChainOutcome(passed=False, failed_filter=flt, result=result)
        return ChainOutcome(passed=True)

    def apply(self, records: Iterable[Any], scope_id: int | None = None) -> Iterator[Any]:
        """Yield the records accepted by every filter."""
        for record in records:
            if self.check(record, scope_id).passed:
                yield record

    def __str__(self) -> str:
        return " AND ".join(str(flt) for flt in self._filters)
