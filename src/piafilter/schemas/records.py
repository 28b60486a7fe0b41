from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from .modification import Modification

RecordKind = Literal["psm", "peptide", "protein"]


class PSMRecord(BaseModel):
    """Peptide-spectrum match row of an inference report."""

    kind: ClassVar[RecordKind] = "psm"

    psm_id: str
    sequence: str
    charge: int | None = None
    mass_to_charge: float | None = None
    delta_mass: float | None = None
    retention_time: float | None = None
    rank: int | None = None
    missed_cleavages: int | None = None
    is_decoy: bool | None = None
    is_unique: bool | None = None
    accessions: list[str] = Field(default_factory=list)
    modifications: list[Modification] = Field(default_factory=list)
    source_id: str | None = None
    file_id: int | None = None
    scores: dict[str, float] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class PeptideRecord(BaseModel):
    """Peptide row; per-file counts are keyed by input file id."""

    kind: ClassVar[RecordKind] = "peptide"

    sequence: str
    accessions: list[str] = Field(default_factory=list)
    charges: list[int] = Field(default_factory=list)
    missed_cleavages: int | None = None
    is_unique: bool | None = None
    is_decoy: bool | None = None
    file_names: list[str] = Field(default_factory=list)
    nr_psms: dict[int, int] = Field(default_factory=dict)
    nr_spectra: dict[int, int] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class ProteinRecord(BaseModel):
    """Protein group row of an inference report."""

    kind: ClassVar[RecordKind] = "protein"

    accessions: list[str] = Field(default_factory=list)
    descriptions: list[str] = Field(default_factory=list)
    nr_peptides: int | None = None
    nr_psms: int | None = None
    nr_spectra: int | None = None
    score: float | None = None
    q_value: float | None = None
    is_decoy: bool | None = None
    cluster_id: int | None = None

    model_config = ConfigDict(extra="forbid")


ReportRecord = PSMRecord | PeptideRecord | ProteinRecord

RECORD_MODELS: dict[str, type[BaseModel]] = {
    "psm": PSMRecord,
    "peptide": PeptideRecord,
    "protein": ProteinRecord,
}


class RecordEnvelope(BaseModel):
    """JSONL line wrapping one record payload."""

    kind: RecordKind
    payload: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    def to_record(self) -> ReportRecord:
        return RECORD_MODELS[self.kind].model_validate(self.payload)  # type: ignore[return-value]
