"""Engine outputs: CRS score and per-stream program results.

Value types: frozen once produced, safe to share between callers.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pathways.models.enums import DrawProbability, ProgramCode


# ---------------------------------------------------------------------------
# CRS
# ---------------------------------------------------------------------------


class CRSBreakdown(BaseModel):
    """The four scoring buckets. Always sums to CRSResult.total."""

    model_config = ConfigDict(frozen=True)

    core: int
    spouse: int
    transferability: int
    additional: int

    @property
    def total(self) -> int:
        return self.core + self.spouse + self.transferability + self.additional


class CRSDetails(BaseModel):
    """Per-factor points behind each bucket."""

    model_config = ConfigDict(frozen=True)

    age: int = 0
    education: int = 0
    language: int = 0
    canadian_work: int = 0
    spouse_education: int = 0
    spouse_language: int = 0
    spouse_work: int = 0
    transferability_education: int = 0   # edu×language + edu×Canadian work (cap 50)
    transferability_foreign: int = 0     # foreign work×language + foreign×Canadian (cap 50)
    transferability_certificate: int = 0
    sibling: int = 0
    second_language: int = 0
    canadian_education: int = 0
    job_offer: int = 0
    nomination: int = 0


class CRSResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    breakdown: CRSBreakdown
    details: CRSDetails


# ---------------------------------------------------------------------------
# Program results
# ---------------------------------------------------------------------------


class RuleCondition(BaseModel):
    """Single eligibility condition evaluated by a stream check."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    met: bool
    is_hard: bool = True       # hard → failing it makes the stream ineligible
    value: str | None = None   # observed value, for display


class ProgramResult(BaseModel):
    """One jurisdiction + stream evaluation."""

    model_config = ConfigDict(frozen=True)

    program: ProgramCode
    jurisdiction: str
    stream: str
    score: int = 0
    max_score: int = 0                 # 0 → pass/fail stream
    eligible: bool
    draw_probability: DrawProbability
    draw_cutoff: int | None = None
    warnings: tuple[str, ...] = ()
    checklist: tuple[str, ...] = ()    # opaque document-catalogue keys
    conditions: tuple[RuleCondition, ...] = ()
    ineligibility_reason: str | None = None


class DocumentChecklist(BaseModel):
    """Titled list of documents behind a checklist key."""

    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    items: tuple[str, ...] = ()
