"\"\"\"Registry of the descriptors filters can be built from.\"\"\""

from __future__ import annotations

from typing import Iterable, Iterator, List

from rapidfuzz import process

from ..core.descriptor import FilterDescriptor
from .peptide import OVERALL_SCOPE, PEPTIDE_DESCRIPTORS, refine_per_file
from .protein import PROTEIN_DESCRIPTORS
from .psm import PSM_DESCRIPTORS


class DescriptorRegistry:
    """Registry mapping short names to filter descriptors."""

    def __init__(self, descriptors: Iterable[FilterDescriptor]):
        self._descriptors: dict[str, FilterDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.short_name in self._descriptors:
                raise ValueError(f"Duplicate filter name: {descriptor.short_name!r}")
            self._descriptors[descriptor.short_name] = descriptor

    def get(self, short_name: str) -> FilterDescriptor:
        try:
            return self._descriptors[short_name]
        except KeyError as exc:
            hint = self.suggest(short_name)
            suffix = f" (did you mean {hint!r}?)" if hint else ""
            raise KeyError(f"Unknown filter: {short_name!r}{suffix}") from exc

    def suggest(self, short_name: str, *, min_score: float = 70.0) -> str | None:
        """Return the closest registered name, if any is close enough."""
        match = process.extractOne(short_name, self.names(), score_cutoff=min_score)
        return match[0] if match else None

    def names(self) -> List[str]:
        return list(self._descriptors.keys())

    def for_kind(self, kind: str) -> list[FilterDescriptor]:
        selected: list[FilterDescriptor] = []
        for descriptor in self._descriptors.values():
            kinds = getattr(descriptor, "supported_kinds", frozenset())
            if not kinds or kind in kinds:
                selected.append(descriptor)
        return selected

    def __contains__(self, short_name: object) -> bool:
        return short_name in self._descriptors

    def __iter__(self) -> Iterator[FilterDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)


def default_registry() -> DescriptorRegistry:
    """Return the registry of built-in PSM, peptide and protein descriptors."""
    return DescriptorRegistry([*PSM_DESCRIPTORS, *PEPTIDE_DESCRIPTORS, *PROTEIN_DESCRIPTORS])


__all__ = [
    "DescriptorRegistry",
    "OVERALL_SCOPE",
    "PEPTIDE_DESCRIPTORS",
    "PROTEIN_DESCRIPTORS",
    "PSM_DESCRIPTORS",
    "default_registry",
    "refine_per_file",
]
