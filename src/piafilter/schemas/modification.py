from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Default tolerance (Da) when comparing a modification mass against a target.
UNIMOD_MASS_TOLERANCE = 0.01


class Modification(BaseModel):
    """A modification carried by a PSM or peptide."""

    description: str | None = None
    mass: float
    residue: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)
