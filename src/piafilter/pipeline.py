"\"\"\"Record filtering pipeline assembly and execution.\"\"\""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import FilterChain, RecordFilter
from .descriptors import OVERALL_SCOPE
from .schemas import RECORD_MODELS, RecordEnvelope, ReportRecord


class RecordLoadError(ValueError):
    """Raised when record loading encounters invalid lines."""

    def __init__(self, errors: list[str], partial: list[ReportRecord]):
        super().__init__("Record loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Record loading failed: {self.errors}"


class RecordLoader:
    """Load report records from JSON lines.

    Each line is either ``{"kind": ..., "payload": {...}}`` or a flat record
    object carrying its ``kind``.
    """

    def load(self, path: Path) -> list[ReportRecord]:
        records: list[ReportRecord] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    data = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(data, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                kind = data.get("kind")
                if not kind:
                    errors.append(f"line {idx}: missing kind field")
                    continue
                if not isinstance(kind, str):
                    errors.append(f"line {idx}: invalid kind {kind!r}")
                    continue
                if kind not in RECORD_MODELS:
                    errors.append(f"line {idx}: unsupported kind '{kind}'")
                    continue
                if "payload" not in data:
                    data = {"kind": kind, "payload": {k: v for k, v in data.items() if k != "kind"}}
                try:
                    records.append(RecordEnvelope.model_validate(data).to_record())
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
        if errors:
            raise RecordLoadError(errors, records)
        return records


class ReportWriter:
    """Persist filtering reports."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


@dataclass(slots=True)
class FilterReport:
    """Summary of one pipeline run."""

    accepted: list[ReportRecord]
    rejected_count: int
    error_count: int
    load_errors: list[str] = field(default_factory=list)
    rejections_by_filter: dict[str, int] = field(default_factory=dict)

    @property
    def accepted_count(self) -> int:
        return len(self.accepted)


class FilterPipeline:
    """Load records, keep those passing every filter, write the report."""

    def __init__(
        self,
        *,
        loader: RecordLoader | None = None,
        writer: ReportWriter | None = None,
    ) -> None:
        self._loader = loader or RecordLoader()
        self._writer = writer or ReportWriter()
        self._logger = structlog.get_logger(__name__)

    def filter_records(
        self,
        records: Iterable[ReportRecord],
        filters: Sequence[RecordFilter],
        *,
        scope_id: int | None = None,
    ) -> FilterReport:
        chain = FilterChain(filters)
        scope = OVERALL_SCOPE if scope_id is None else scope_id
        accepted: list[ReportRecord] = []
        rejected = 0
        error_count = 0
        by_filter: Counter[str] = Counter()

        for record in records:
            outcome = chain.check(record, scope)
            if outcome.passed:
                accepted.append(record)
                continue
            rejected += 1
            if outcome.failed_filter is not None:
                by_filter[str(outcome.failed_filter)] += 1
            if outcome.is_error:
                error_count += 1
                self._logger.warning(
                    "filtering.evaluation_error",
                    record_kind=record.kind,
                    filter=str(outcome.failed_filter),
                    reason=outcome.result.reason if outcome.result else None,
                )

        return FilterReport(
            accepted=accepted,
            rejected_count=rejected,
            error_count=error_count,
            rejections_by_filter=dict(by_filter),
        )

    def run(
        self,
        *,
        records_path: Path,
        output_path: Path,
        filters: Sequence[RecordFilter],
        scope_id: int | None = None,
    ) -> FilterReport:
        load_errors: list[str] = []
        try:
            records = self._loader.load(records_path)
        except RecordLoadError as exc:
            records = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("records.partial_load", errors=exc.errors)

        report = self.filter_records(records, filters, scope_id=scope_id)
        report.load_errors = load_errors

        self._logger.info(
            "filtering.result",
            input_count=len(records),
            accepted=report.accepted_count,
            rejected=report.rejected_count,
            errors=report.error_count,
            filters=[str(flt) for flt in filters],
        )

        metadata = {
            "filters": [str(flt) for flt in filters],
            "scope_id": scope_id,
            "input_count": len(records),
            "accepted_count": report.accepted_count,
            "rejected_count": report.rejected_count,
            "error_count": report.error_count,
            "rejections_by_filter": report.rejections_by_filter,
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        results = [
            {"kind": record.kind, "payload": record.model_dump(mode="json")}
            for record in report.accepted
        ]
        self._writer.write(output_path, {"metadata": metadata, "results": results})
        return report
