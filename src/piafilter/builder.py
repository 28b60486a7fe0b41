"\"\"\"Build filters from textual and mapping specifications.\"\"\""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .core import (
    COMPARATORS_BY_TYPE,
    FilterComparator,
    FilterConfigurationError,
    FilterType,
    RecordFilter,
)
from .descriptors import DescriptorRegistry
from .schemas.modification import UNIMOD_MASS_TOLERANCE

NEGATION_MARKER = "not"

_TRUE_WORDS = frozenset({"true", "yes", "1"})
_FALSE_WORDS = frozenset({"false", "no", "0"})


class FilterBuilder:
    """Turn ``"<name> [not] <comparator> <value>"`` strings into filters.

    The value is everything after the comparator, so literal targets may
    contain spaces. It is coerced according to the descriptor's filter type:
    booleans accept true/false, yes/no and 1/0, numerical filters accept
    integers and floats, all others keep the text as given.
    """

    def __init__(
        self,
        registry: DescriptorRegistry,
        *,
        mass_tolerance: float = UNIMOD_MASS_TOLERANCE,
        validate_filters: bool = True,
    ) -> None:
        self._registry = registry
        self._mass_tolerance = mass_tolerance
        self._validate = validate_filters

    def parse(self, text: str) -> RecordFilter:
        parts = text.strip().split(None, 1)
        if len(parts) < 2:
            raise FilterConfigurationError(
                f"Filter {text!r} must look like '<name> [not] <comparator> <value>'"
            )
        name, rest = parts
        tokens = rest.split(None, 1)
        negate = tokens[0].lower() == NEGATION_MARKER
        if negate:
            tokens = tokens[1].split(None, 1) if len(tokens) > 1 else []
        if not tokens:
            raise FilterConfigurationError(f"Filter {text!r} is missing a comparator")
        comparator = tokens[0]
        value = tokens[1].strip() if len(tokens) > 1 else None
        return self.build(name, comparator, value or None, negate=negate)

    def from_mapping(self, spec: Mapping[str, Any]) -> RecordFilter:
        try:
            name = spec["name"]
            comparator = spec["comparator"]
        except KeyError as exc:
            raise FilterConfigurationError(f"Filter mapping is missing {exc.args[0]!r}") from exc
        return self.build(
            str(name),
            str(comparator),
            spec.get("value"),
            negate=self._coerce_negate(spec.get("negate", False)),
        )

    def build_all(self, specs: Iterable[str | Mapping[str, Any]]) -> list[RecordFilter]:
        filters: list[RecordFilter] = []
        for spec in specs:
            if isinstance(spec, str):
                filters.append(self.parse(spec))
            elif isinstance(spec, Mapping):
                filters.append(self.from_mapping(spec))
            else:
                raise FilterConfigurationError(f"Unsupported filter specification: {spec!r}")
        return filters

    def build(
        self,
        name: str,
        comparator: str | FilterComparator,
        value: Any,
        *,
        negate: bool = False,
    ) -> RecordFilter:
        try:
            descriptor = self._registry.get(name)
        except KeyError as exc:
            raise FilterConfigurationError(exc.args[0]) from exc

        filter_type = descriptor.filter_type
        resolved = self._resolve_comparator(filter_type, comparator)
        return RecordFilter(
            descriptor=descriptor,
            comparator=resolved,
            value=self._coerce_value(filter_type, resolved, value),
            negate=negate,
            mass_tolerance=self._mass_tolerance,
            validate=self._validate,
        )

    def _resolve_comparator(
        self,
        filter_type: FilterType,
        comparator: str | FilterComparator,
    ) -> FilterComparator:
        if isinstance(comparator, FilterComparator):
            return comparator
        try:
            return FilterComparator(comparator.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(str(item) for item in COMPARATORS_BY_TYPE[filter_type])
            raise FilterConfigurationError(
                f"Unknown comparator {comparator!r}; {filter_type} filters accept: {allowed}"
            ) from exc

    def _coerce_value(
        self,
        filter_type: FilterType,
        comparator: FilterComparator,
        value: Any,
    ) -> Any:
        if value is None:
            if comparator is FilterComparator.HAS_ANY_MODIFICATION or not self._validate:
                return None
            raise FilterConfigurationError(f"Comparator '{comparator}' needs a value")

        if filter_type is FilterType.BOOL:
            return self._coerce_bool(value)
        if filter_type is FilterType.NUMERICAL:
            return self._coerce_number(value)
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _coerce_negate(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        word = str(value).strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise FilterConfigurationError(f"negate must be a boolean, got {value!r}")

    def _coerce_bool(self, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        word = str(value).strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        if not self._validate:
            return value
        raise FilterConfigurationError(f"{value!r} is not a boolean")

    def _coerce_number(self, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            if not self._validate:
                return value
            raise FilterConfigurationError(f"{value!r} is not a number") from None
