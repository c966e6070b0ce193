"""Facade request/response: one assessment call, one report."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pathways.schemas.compliance import (
    LegalDefenseResult,
    LegalProfile,
    StatusInput,
    StatusStrategyResult,
    WorkExperienceInput,
    WorkExperienceValidation,
)
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import CRSResult, ProgramResult


class AssessmentRequest(BaseModel):
    """Candidate profile plus whichever compliance sub-records the caller collected."""

    model_config = ConfigDict(frozen=True)

    profile: CandidateProfile
    work_experience: WorkExperienceInput | None = None
    status: StatusInput | None = None
    legal: LegalProfile | None = None
    today: date | None = None  # reference date for status/legal timing; defaults to today


class ComplianceFindings(BaseModel):
    model_config = ConfigDict(frozen=True)

    work_experience: WorkExperienceValidation | None = None
    status: StatusStrategyResult | None = None
    legal: LegalDefenseResult | None = None


class AssessmentReport(BaseModel):
    """Full assessment output consumed by the presentation layer."""

    model_config = ConfigDict(frozen=True)

    crs: CRSResult
    programs: tuple[ProgramResult, ...]
    eligible_count: int
    best_opportunity: ProgramResult | None = None
    compliance: ComplianceFindings = Field(default_factory=ComplianceFindings)
    risk_flags: tuple[str, ...] = ()
    profile_summary: dict[str, Any] = Field(default_factory=dict)
