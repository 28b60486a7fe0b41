"\"\"\"Configured filter instances.\"\"\""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Any

from ..schemas.modification import UNIMOD_MASS_TOLERANCE
from .descriptor import FilterDescriptor
from .types import (
    REGEX_COMPARATORS,
    FilterComparator,
    FilterConfigurationError,
    FilterType,
    is_valid_comparator,
)


@dataclass(frozen=True)
class RecordFilter:
    """A descriptor bound to a comparator, a target value and a negate flag.

    Instances are immutable and can be shared between threads. Regex targets
    are compiled and ``has_mass`` targets parsed once, at construction.

    With ``validate`` (the default) an inconsistent filter raises
    :class:`FilterConfigurationError`. Without it the problem is kept in
    ``configuration_error`` and every evaluation of a present value reports
    it as an error result instead.
    """

    descriptor: FilterDescriptor
    comparator: FilterComparator
    value: Any = None
    negate: bool = False
    mass_tolerance: float = UNIMOD_MASS_TOLERANCE
    validate: bool = field(default=True, compare=False)

    pattern: re.Pattern[str] | None = field(init=False, default=None, compare=False, repr=False)
    target_mass: float | None = field(init=False, default=None, compare=False, repr=False)
    configuration_error: str | None = field(init=False, default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        problem = self._prepare()
        if problem is None:
            return
        if self.validate:
            raise FilterConfigurationError(f"{self.short_name}: {problem}")
        object.__setattr__(self, "configuration_error", problem)

    @property
    def short_name(self) -> str:
        return self.descriptor.short_name

    @property
    def filter_type(self) -> FilterType:
        return self.descriptor.filter_type

    def negated(self) -> "RecordFilter":
        """Return the same filter with the negate flag flipped."""
        return replace(self, negate=not self.negate)

    def _prepare(self) -> str | None:
        if not isinstance(self.comparator, FilterComparator):
            try:
                object.__setattr__(self, "comparator", FilterComparator(str(self.comparator)))
            except ValueError:
                return f"unknown comparator {self.comparator!r}"

        filter_type = self.filter_type
        comparator = self.comparator
        if not is_valid_comparator(filter_type, comparator):
            return f"comparator '{comparator}' is not valid for {filter_type} filters"

        if filter_type is FilterType.BOOL:
            if not isinstance(self.value, bool):
                return f"expected a boolean target, got {self.value!r}"
        elif filter_type is FilterType.NUMERICAL:
            if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
                return f"expected a numerical target, got {self.value!r}"
        elif filter_type is FilterType.MODIFICATION:
            if comparator is FilterComparator.HAS_MASS:
                try:
                    object.__setattr__(self, "target_mass", float(self.value))
                except (TypeError, ValueError):
                    return f"mass target {self.value!r} is not a number"
            elif comparator is not FilterComparator.HAS_ANY_MODIFICATION:
                if not isinstance(self.value, str):
                    return f"expected a text target, got {self.value!r}"
        else:
            if not isinstance(self.value, str):
                return f"expected a text target, got {self.value!r}"
            if comparator in REGEX_COMPARATORS:
                try:
                    object.__setattr__(self, "pattern", re.compile(self.value))
                except re.error as exc:
                    return f"invalid regular expression {self.value!r}: {exc}"
        return None

    def __str__(self) -> str:
        parts = [self.short_name]
        if self.negate:
            parts.append("not")
        parts.append(str(self.comparator))
        if self.value is not None:
            parts.append(_render_value(self.value))
        return " ".join(parts)


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
