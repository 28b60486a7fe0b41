"\"\"\"Descriptors for peptide-spectrum match records.\"\"\""

from __future__ import annotations

from operator import attrgetter

from ..core.descriptor import AttributeDescriptor
from ..core.types import FilterType

_PSM = frozenset({"psm"})


def _psm(short_name: str, long_name: str, filter_type: FilterType, attribute: str, **kwargs) -> AttributeDescriptor:
    return AttributeDescriptor(
        short_name=short_name,
        long_name=long_name,
        filter_type=filter_type,
        extractor=attrgetter(attribute),
        supported_kinds=_PSM,
        **kwargs,
    )


PSM_DESCRIPTORS: tuple[AttributeDescriptor, ...] = (
    _psm("charge", "Charge filter for PSMs", FilterType.NUMERICAL, "charge", display_name="Charge"),
    _psm("psm_mz", "m/z filter for PSMs", FilterType.NUMERICAL, "mass_to_charge", display_name="m/z"),
    _psm("psm_delta_mass", "Delta mass filter for PSMs", FilterType.NUMERICAL, "delta_mass", display_name="Delta mass"),
    _psm(
        "psm_retention_time",
        "Retention time filter for PSMs",
        FilterType.NUMERICAL,
        "retention_time",
        display_name="Retention time",
    ),
    _psm("psm_rank", "Rank filter for PSMs", FilterType.NUMERICAL, "rank", display_name="Rank"),
    _psm(
        "psm_missed_cleavages",
        "Missed cleavages filter for PSMs",
        FilterType.NUMERICAL,
        "missed_cleavages",
        display_name="#missed cleavages",
    ),
    _psm("psm_decoy", "Decoy filter for PSMs", FilterType.BOOL, "is_decoy", display_name="Decoy"),
    _psm("psm_unique", "Unique filter for PSMs", FilterType.BOOL, "is_unique", display_name="Unique"),
    _psm("psm_sequence", "Sequence filter for PSMs", FilterType.LITERAL, "sequence", display_name="Sequence"),
    _psm("psm_source_id", "Source ID filter for PSMs", FilterType.LITERAL, "source_id", display_name="Source ID"),
    _psm(
        "psm_accessions",
        "Accessions filter for PSMs",
        FilterType.LITERAL_LIST,
        "accessions",
        display_name="Accessions",
    ),
    _psm(
        "psm_modifications",
        "Modifications filter for PSMs",
        FilterType.MODIFICATION,
        "modifications",
        display_name="Modifications",
    ),
)
