"\"\"\"Pydantic schema definitions for report records and configuration.\"\"\""

from __future__ import annotations

from .modification import UNIMOD_MASS_TOLERANCE, Modification
from .records import (
    RECORD_MODELS,
    PeptideRecord,
    ProteinRecord,
    PSMRecord,
    RecordEnvelope,
    RecordKind,
    ReportRecord,
)

__all__ = [
    "Modification",
    "UNIMOD_MASS_TOLERANCE",
    "PSMRecord",
    "PeptideRecord",
    "ProteinRecord",
    "RecordEnvelope",
    "RecordKind",
    "ReportRecord",
    "RECORD_MODELS",
]
