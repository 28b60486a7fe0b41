"\"\"\"Type-specific predicates returning the base (un-negated) result.\"\"\""

from __future__ import annotations

from ..types import PredicateError
from .literal_list import literal_list_predicate
from .modification import modification_predicate
from .scalar import (
    SCALAR_PREDICATES,
    bool_predicate,
    literal_predicate,
    numerical_predicate,
)

__all__ = [
    "PredicateError",
    "SCALAR_PREDICATES",
    "bool_predicate",
    "numerical_predicate",
    "literal_predicate",
    "literal_list_predicate",
    "modification_predicate",
]
