"\"\"\"Filter descriptor contract and the attribute-based implementation.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, runtime_checkable

from .types import FilterType

Extractor = Callable[[Any], Any]
Refiner = Callable[[int, Any], Any]


@runtime_checkable
class FilterDescriptor(Protocol):
    """Capability the evaluator needs to filter a kind of record.

    Implementations identify the filter, declare its ``FilterType`` and know
    how to pull the compared value out of the records they support. When
    ``requires_refinement`` is set, ``refine`` narrows an aggregate value to
    the given scope (an input file id).
    """

    short_name: str
    long_name: str
    display_name: str
    filter_type: FilterType

    @property
    def requires_refinement(self) -> bool:
        """Whether extracted values must be narrowed to a scope."""

    def supports(self, record: Any) -> bool:
        """Return True when values can be extracted from ``record``."""

    def extract(self, record: Any) -> Any:
        """Return the raw value of ``record`` or None when it is missing."""

    def refine(self, scope_id: int, value: Any) -> Any:
        """Return ``value`` narrowed to ``scope_id`` or None."""


@dataclass(frozen=True)
class AttributeDescriptor:
    """Descriptor backed by plain callables.

    An empty ``supported_kinds`` accepts records of any kind.
    """

    short_name: str
    long_name: str
    filter_type: FilterType
    extractor: Extractor
    supported_kinds: frozenset[str] = frozenset()
    refiner: Refiner | None = None
    display_name: str = ""
    help_text: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.display_name:
            object.__setattr__(self, "display_name", self.long_name)

    @property
    def requires_refinement(self) -> bool:
        return self.refiner is not None

    def supports(self, record: Any) -> bool:
        if not self.supported_kinds:
            return True
        return getattr(record, "kind", None) in self.supported_kinds

    def extract(self, record: Any) -> Any:
        return self.extractor(record)

    def refine(self, scope_id: int, value: Any) -> Any:
        if self.refiner is None:
            return value
        return self.refiner(scope_id, value)
