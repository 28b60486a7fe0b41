from __future__ import annotations

from operator import attrgetter
from types import SimpleNamespace

import pytest

from piafilter.core import (
    AttributeDescriptor,
    FilterComparator,
    FilterType,
    RecordFilter,
    evaluate,
    satisfies,
)


def build_filter(comparator: FilterComparator, value: str, *, negate: bool = False) -> RecordFilter:
    descriptor = AttributeDescriptor(
        short_name="accessions",
        long_name="Accessions",
        filter_type=FilterType.LITERAL_LIST,
        extractor=attrgetter("accessions"),
    )
    return RecordFilter(descriptor, comparator, value, negate=negate)


def record(*accessions: str) -> SimpleNamespace:
    return SimpleNamespace(accessions=list(accessions))


def test_contains_matches_any_element_exactly():
    flt = build_filter(FilterComparator.CONTAINS, "P12345")

    assert satisfies(flt, record("Q99999", "P12345")) is True
    assert satisfies(flt, record("P123456")) is False


@pytest.mark.parametrize(
    ("accessions", "expected"),
    [
        (("A", "A", "A"), True),
        (("A", "B"), False),
        (("B", "A"), False),
        (("B", "A", "A"), False),
        ((), False),
    ],
)
def test_contains_only_is_gated_on_first_element(accessions: tuple[str, ...], expected: bool):
    flt = build_filter(FilterComparator.CONTAINS_ONLY, "A")

    assert satisfies(flt, record(*accessions)) is expected


def test_regex_matches_any_element_fully():
    flt = build_filter(FilterComparator.REGEX, "sp\\|.*")

    assert satisfies(flt, record("tr|X", "sp|P12345")) is True
    assert satisfies(flt, record("tr|sp|P12345")) is False


def test_regex_only():
    flt = build_filter(FilterComparator.REGEX_ONLY, "A.*")

    assert satisfies(flt, record("Ab", "Ac")) is True
    assert satisfies(flt, record("Ab", "Bc")) is False
    assert satisfies(flt, record("Bc", "Ab")) is False


def test_empty_list_is_satisfied_only_when_negated():
    plain = build_filter(FilterComparator.CONTAINS, "A")
    negated = build_filter(FilterComparator.CONTAINS, "A", negate=True)

    assert satisfies(plain, record()) is False
    assert satisfies(negated, record()) is True


def test_list_with_non_string_elements_is_an_error():
    flt = build_filter(FilterComparator.CONTAINS, "A")

    result = evaluate(flt, SimpleNamespace(accessions=["A", 1]))

    assert result.is_error
    assert result.passed is False
