"\"\"\"Core filter evaluation engine.\"\"\""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .chain import ChainOutcome, FilterChain
from .descriptor import AttributeDescriptor, FilterDescriptor
from .evaluator import evaluate, satisfies
from .filter import RecordFilter
from .result import EvaluationResult, EvaluationStatus
from .types import (
    COMPARATORS_BY_TYPE,
    FilterComparator,
    FilterConfigurationError,
    FilterType,
    PredicateError,
    is_valid_comparator,
)

__all__ = [
    "AttributeDescriptor",
    "ChainOutcome",
    "COMPARATORS_BY_TYPE",
    "EvaluationResult",
    "EvaluationStatus",
    "FilterChain",
    "FilterComparator",
    "FilterConfigurationError",
    "FilterDescriptor",
    "FilterType",
    "PredicateError",
    "RecordFilter",
    "evaluate",
    "is_valid_comparator",
    "satisfies",
]
