"\"\"\"Descriptors for peptide records.\"\"\""

from __future__ import annotations

from operator import attrgetter
from typing import Mapping

from ..core.descriptor import AttributeDescriptor
from ..core.types import FilterType

_PEPTIDE = frozenset({"peptide"})

# Scope id of the combined result over all input files.
OVERALL_SCOPE = 0


def refine_per_file(scope_id: int, counts: Mapping[int, int] | None) -> int | None:
    """Pick the count of one input file, or the total for the overall scope."""
    if counts is None:
        return None
    if scope_id == OVERALL_SCOPE and OVERALL_SCOPE not in counts:
        return sum(counts.values()) if counts else None
    return counts.get(scope_id)


def _peptide(short_name: str, long_name: str, filter_type: FilterType, attribute: str, **kwargs) -> AttributeDescriptor:
    return AttributeDescriptor(
        short_name=short_name,
        long_name=long_name,
        filter_type=filter_type,
        extractor=attrgetter(attribute),
        supported_kinds=_PEPTIDE,
        **kwargs,
    )


PEPTIDE_DESCRIPTORS: tuple[AttributeDescriptor, ...] = (
    _peptide("peptide_sequence", "Sequence filter for peptides", FilterType.LITERAL, "sequence", display_name="Sequence"),
    _peptide(
        "peptide_accessions",
        "Accessions filter for peptides",
        FilterType.LITERAL_LIST,
        "accessions",
        display_name="Accessions",
    ),
    _peptide(
        "peptide_charges",
        "Charges filter for peptides",
        FilterType.NUMERICAL,
        "charges",
        display_name="Charges",
        help_text="Every charge state of the peptide must satisfy the filter.",
    ),
    _peptide(
        "peptide_missed_cleavages",
        "Missed cleavages filter for peptides",
        FilterType.NUMERICAL,
        "missed_cleavages",
        display_name="#missed cleavages",
    ),
    _peptide("peptide_unique", "Unique filter for peptides", FilterType.BOOL, "is_unique", display_name="Unique"),
    _peptide("peptide_decoy", "Decoy filter for peptides", FilterType.BOOL, "is_decoy", display_name="Decoy"),
    _peptide(
        "peptide_file_list",
        "File list filter for peptides",
        FilterType.LITERAL_LIST,
        "file_names",
        display_name="Files",
    ),
    _peptide(
        "peptide_nr_psms",
        "#PSMs filter for peptides",
        FilterType.NUMERICAL,
        "nr_psms",
        refiner=refine_per_file,
        display_name="#PSMs",
        help_text="Needs a scope id: an input file id, or 0 for all files.",
    ),
    _peptide(
        "peptide_nr_spectra",
        "#spectra filter for peptides",
        FilterType.NUMERICAL,
        "nr_spectra",
        refiner=refine_per_file,
        display_name="#spectra",
        help_text="Needs a scope id: an input file id, or 0 for all files.",
    ),
)
