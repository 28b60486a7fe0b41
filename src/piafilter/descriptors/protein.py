"\"\"\"Descriptors for protein records.\"\"\""

from __future__ import annotations

from operator import attrgetter

from ..core.descriptor import AttributeDescriptor
from ..core.types import FilterType

_PROTEIN = frozenset({"protein"})


def _protein(short_name: str, long_name: str, filter_type: FilterType, attribute: str, display_name: str) -> AttributeDescriptor:
    return AttributeDescriptor(
        short_name=short_name,
        long_name=long_name,
        filter_type=filter_type,
        extractor=attrgetter(attribute),
        supported_kinds=_PROTEIN,
        display_name=display_name,
    )


PROTEIN_DESCRIPTORS: tuple[AttributeDescriptor, ...] = (
    _protein("protein_accessions", "Accessions filter for proteins", FilterType.LITERAL_LIST, "accessions", "Accessions"),
    _protein(
        "protein_descriptions",
        "Descriptions filter for proteins",
        FilterType.LITERAL_LIST,
        "descriptions",
        "Descriptions",
    ),
    _protein("protein_nr_peptides", "#peptides filter for proteins", FilterType.NUMERICAL, "nr_peptides", "#peptides"),
    _protein("protein_nr_psms", "#PSMs filter for proteins", FilterType.NUMERICAL, "nr_psms", "#PSMs"),
    _protein("protein_nr_spectra", "#spectra filter for proteins", FilterType.NUMERICAL, "nr_spectra", "#spectra"),
    _protein("protein_score", "Score filter for proteins", FilterType.NUMERICAL, "score", "Protein score"),
    _protein("protein_q_value", "q-value filter for proteins", FilterType.NUMERICAL, "q_value", "q-value"),
    _protein("protein_decoy", "Decoy filter for proteins", FilterType.BOOL, "is_decoy", "Decoy"),
)
