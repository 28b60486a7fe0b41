from __future__ import annotations

import pytest
from pydantic import ValidationError

from piafilter.schemas import (
    Modification,
    PeptideRecord,
    PSMRecord,
    RecordEnvelope,
)


def test_psm_record_defaults():
    psm = PSMRecord(psm_id="psm-1", sequence="PEPTIDE")

    assert psm.kind == "psm"
    assert psm.charge is None
    assert psm.accessions == []
    assert psm.modifications == []
    assert psm.scores == {}


def test_psm_record_parses_modifications():
    psm = PSMRecord(
        psm_id="psm-2",
        sequence="PEPSTIDE",
        modifications=[{"description": "Phospho", "mass": 79.9663, "residue": "S"}],
    )

    assert isinstance(psm.modifications[0], Modification)
    assert psm.modifications[0].mass == pytest.approx(79.9663)


def test_modification_is_immutable():
    mod = Modification(mass=15.9949, residue="M")

    with pytest.raises(ValidationError):
        mod.mass = 16.0  # type: ignore[misc]


def test_records_forbid_unknown_fields():
    with pytest.raises(ValidationError):
        PSMRecord(psm_id="psm-3", sequence="PEPTIDE", colour="red")  # type: ignore[call-arg]


def test_envelope_builds_typed_record():
    envelope = RecordEnvelope(kind="peptide", payload={"sequence": "PEPTIDE", "nr_psms": {"1": 2}})

    record = envelope.to_record()

    assert isinstance(record, PeptideRecord)
    assert record.nr_psms == {1: 2}


def test_envelope_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        RecordEnvelope(kind="spectrum", payload={})
