"\"\"\"Evaluation outcome of a single filter against a single record.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EvaluationStatus = Literal["satisfied", "not_satisfied", "error"]


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Distinguishes a failing record from a filter that could not be applied.

    ``error`` results are treated like ``not_satisfied`` wherever a plain
    accept/reject decision is needed.
    """

    status: EvaluationStatus
    reason: str | None = None

    @property
    def passed(self) -> bool:
        return self.status == "satisfied"

    @property
    def is_error(self) -> bool:
        return self.status == "error"

    @classmethod
    def satisfied(cls) -> "EvaluationResult":
        return cls("satisfied")

    @classmethod
    def not_satisfied(cls, reason: str | None = None) -> "EvaluationResult":
        return cls("not_satisfied", reason)

    @classmethod
    def error(cls, reason: str) -> "EvaluationResult":
        return cls("error", reason)

    @classmethod
    def from_bool(cls, value: bool) -> "EvaluationResult":
        return cls.satisfied() if value else cls.not_satisfied()
