from __future__ import annotations

from operator import attrgetter

import pytest

from piafilter.core import (
    AttributeDescriptor,
    FilterComparator,
    FilterConfigurationError,
    FilterType,
    RecordFilter,
)


def build_descriptor(filter_type: FilterType, short_name: str = "charge") -> AttributeDescriptor:
    return AttributeDescriptor(
        short_name=short_name,
        long_name=short_name.title(),
        filter_type=filter_type,
        extractor=attrgetter("value"),
    )


def test_string_rendering():
    numerical = RecordFilter(build_descriptor(FilterType.NUMERICAL), FilterComparator.LESS, 10)
    negated = RecordFilter(
        build_descriptor(FilterType.BOOL, "psm_decoy"),
        FilterComparator.EQUAL,
        False,
        negate=True,
    )

    assert str(numerical) == "charge less 10"
    assert str(negated) == "psm_decoy not equal false"


def test_negated_returns_flipped_copy():
    flt = RecordFilter(build_descriptor(FilterType.NUMERICAL), FilterComparator.LESS, 10)

    flipped = flt.negated()

    assert flipped.negate is True
    assert flt.negate is False
    assert flipped.negated() == flt


def test_comparator_is_accepted_by_name():
    flt = RecordFilter(build_descriptor(FilterType.NUMERICAL), "greater_equal", 2)

    assert flt.comparator is FilterComparator.GREATER_EQUAL


@pytest.mark.parametrize(
    ("filter_type", "comparator", "value"),
    [
        (FilterType.BOOL, FilterComparator.CONTAINS, True),
        (FilterType.NUMERICAL, FilterComparator.REGEX, 1),
        (FilterType.LITERAL_LIST, FilterComparator.EQUAL, "A"),
        (FilterType.MODIFICATION, FilterComparator.EQUAL, "Phospho"),
        (FilterType.NUMERICAL, FilterComparator.LESS, "10"),
        (FilterType.NUMERICAL, FilterComparator.LESS, True),
        (FilterType.BOOL, FilterComparator.EQUAL, "true"),
        (FilterType.LITERAL, FilterComparator.REGEX, "(unclosed"),
        (FilterType.NUMERICAL, "approximately", 1),
    ],
)
def test_inconsistent_filters_are_rejected(filter_type, comparator, value):
    with pytest.raises(FilterConfigurationError):
        RecordFilter(build_descriptor(filter_type), comparator, value)


def test_legacy_mode_keeps_configuration_error():
    flt = RecordFilter(
        build_descriptor(FilterType.LITERAL),
        FilterComparator.REGEX,
        "(unclosed",
        validate=False,
    )

    assert flt.configuration_error is not None
    assert "regular expression" in flt.configuration_error
    assert flt.pattern is None
