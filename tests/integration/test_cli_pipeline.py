from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from piafilter.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_records(path: Path) -> None:
    rows = [
        {
            "kind": "psm",
            "payload": {
                "psm_id": "psm-1",
                "sequence": "PEPSTIDE",
                "charge": 2,
                "is_decoy": False,
                "accessions": ["P12345"],
                "modifications": [{"description": "Phospho", "mass": 79.9663, "residue": "S"}],
            },
        },
        {
            "kind": "psm",
            "payload": {"psm_id": "psm-2", "sequence": "PEPTIDE", "charge": 3, "is_decoy": True},
        },
        {
            "kind": "peptide",
            "payload": {"sequence": "PEPSTIDE", "nr_psms": {"1": 1, "2": 4}},
        },
        {
            "kind": "peptide",
            "payload": {"sequence": "PEPTIDE", "nr_psms": {"1": 5}},
        },
    ]
    path.write_text("\n".join(json.dumps(row) for row in rows), encoding="utf-8")


def test_cli_runs_pipeline_and_writes_output(tmp_path: Path, runner: CliRunner) -> None:
    records_path = tmp_path / "records.jsonl"
    output_path = tmp_path / "results.json"
    write_records(records_path)

    result = runner.invoke(
        app,
        [
            "run",
            "--records",
            str(records_path),
            "--output",
            str(output_path),
            "--filter",
            "psm_decoy equal false",
            "--filter",
            "psm_modifications has_mass 79.97",
            "--filter",
            "peptide_nr_psms greater_equal 2",
            "--scope",
            "2",
        ],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    accepted = [(item["kind"], item["payload"].get("psm_id", item["payload"]["sequence"])) for item in rendered["results"]]
    assert accepted == [("psm", "psm-1"), ("peptide", "PEPSTIDE")]
    assert rendered["metadata"]["scope_id"] == 2
    assert rendered["metadata"]["rejected_count"] == 2


def test_cli_reads_filters_from_config(tmp_path: Path, runner: CliRunner) -> None:
    records_path = tmp_path / "records.jsonl"
    output_path = tmp_path / "results.json"
    config_path = tmp_path / "filters.yaml"
    write_records(records_path)
    config_path.write_text(
        "filters:\n"
        "  - charge less 3\n"
        "  - name: peptide_sequence\n"
        "    comparator: equal\n"
        "    value: PEPTIDE\n"
        "log_level: WARNING\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        ["run", "--records", str(records_path), "--output", str(output_path), "--config", str(config_path)],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["metadata"]["filters"] == ["charge less 3", "peptide_sequence equal PEPTIDE"]
    assert rendered["metadata"]["accepted_count"] == 2


def test_cli_rejects_invalid_filter(tmp_path: Path, runner: CliRunner) -> None:
    records_path = tmp_path / "records.jsonl"
    write_records(records_path)

    result = runner.invoke(
        app,
        [
            "run",
            "--records",
            str(records_path),
            "--output",
            str(tmp_path / "results.json"),
            "--filter",
            "charge regex 2",
        ],
    )

    assert result.exit_code == 2
    assert not (tmp_path / "results.json").exists()


def test_cli_rejects_unknown_log_format(tmp_path: Path, runner: CliRunner) -> None:
    records_path = tmp_path / "records.jsonl"
    write_records(records_path)

    result = runner.invoke(
        app,
        [
            "run",
            "--records",
            str(records_path),
            "--output",
            str(tmp_path / "results.json"),
            "--filter",
            "charge greater 1",
            "--log-format",
            "xml",
        ],
    )

    assert result.exit_code == 2
    assert not (tmp_path / "results.json").exists()


def test_cli_lists_filters(runner: CliRunner) -> None:
    result = runner.invoke(app, ["filters", "--kind", "protein"])

    assert result.exit_code == 0
    assert "protein_score" in result.output
    assert "charge" not in result.output


def test_cli_lists_filter_help_text(runner: CliRunner) -> None:
    result = runner.invoke(app, ["filters", "--kind", "peptide"])

    assert result.exit_code == 0
    line = next(row for row in result.output.splitlines() if row.startswith("peptide_nr_psms\t"))
    assert line.endswith("Needs a scope id: an input file id, or 0 for all files.")
