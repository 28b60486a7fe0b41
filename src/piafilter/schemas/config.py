"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .modification import UNIMOD_MASS_TOLERANCE


class FilterSpec(BaseModel):
    """Mapping form of a filter specification."""

    name: str
    comparator: str
    value: Any = None
    negate: bool = False

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    filters: list[str | FilterSpec] = Field(default_factory=list)
    mass_tolerance: float = UNIMOD_MASS_TOLERANCE
    scope_id: int | None = None
    validate_filters: bool = True
    log_level: str = "INFO"

    @field_validator("mass_tolerance")
    @classmethod
    def _non_negative_tolerance(cls, value: float) -> float:
        if value < 0:
            raise ValueError("mass_tolerance must not be negative")
        return value

    def filter_specs(self) -> list[str | dict[str, Any]]:
        return [
            spec if isinstance(spec, str) else spec.model_dump()
            for spec in self.filters
        ]

    def to_settings(self) -> dict[str, Any]:
        return {
            "mass_tolerance": self.mass_tolerance,
            "validate_filters": self.validate_filters,
        }


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
