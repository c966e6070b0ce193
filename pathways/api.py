"""HTTP routes over the engine.

Thin JSON layer: request bodies are the engine's own pydantic schemas, so
FastAPI rejects out-of-range input with a 422 before any engine code runs.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from pathways.assessment.report import build_assessment
from pathways.calculators.crs import calculate_crs
from pathways.calculators.language import convert_test_scores
from pathways.compliance.legal import analyze_legal_defense
from pathways.compliance.status import analyze_status_strategy
from pathways.compliance.work_experience import validate_work_experience
from pathways.eligibility.engine import assess
from pathways.models.enums import LanguageTest, Skill
from pathways.programs.checklists import get_checklist
from pathways.schemas.assessment import AssessmentReport, AssessmentRequest
from pathways.schemas.compliance import (
    LegalDefenseResult,
    LegalProfile,
    StatusInput,
    StatusStrategyResult,
    WorkExperienceInput,
    WorkExperienceValidation,
)
from pathways.schemas.profile import CandidateProfile, LanguageScores
from pathways.schemas.results import CRSResult, DocumentChecklist, ProgramResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assessment"])


class LanguageConversionRequest(BaseModel):
    """Raw scores from one language test sitting."""

    model_config = ConfigDict(frozen=True)

    test: LanguageTest
    listening: float = Field(ge=0)
    reading: float = Field(ge=0)
    writing: float = Field(ge=0)
    speaking: float = Field(ge=0)


@router.post("/assess", response_model=AssessmentReport)
def post_assess(request: AssessmentRequest) -> AssessmentReport:
    """Full assessment: CRS, ranked programs and requested compliance checks."""
    return build_assessment(request)


@router.post("/crs", response_model=CRSResult)
def post_crs(profile: CandidateProfile) -> CRSResult:
    return calculate_crs(profile)


@router.post("/programs", response_model=list[ProgramResult])
def post_programs(profile: CandidateProfile) -> list[ProgramResult]:
    return assess(profile)


@router.post("/compliance/work-experience", response_model=WorkExperienceValidation)
def post_work_experience(data: WorkExperienceInput) -> WorkExperienceValidation:
    return validate_work_experience(data)


@router.post("/compliance/status", response_model=StatusStrategyResult)
def post_status(data: StatusInput) -> StatusStrategyResult:
    return analyze_status_strategy(data)


@router.post("/compliance/legal", response_model=LegalDefenseResult)
def post_legal(data: LegalProfile) -> LegalDefenseResult:
    return analyze_legal_defense(data)


@router.get("/checklists/{key}", response_model=DocumentChecklist)
def get_checklist_by_key(key: str) -> DocumentChecklist:
    checklist = get_checklist(key)
    if checklist is None:
        logger.info("Checklist not found: %s", key)
        raise HTTPException(status_code=404, detail=f"Unknown checklist: {key}")
    return checklist


@router.post("/language/convert", response_model=LanguageScores)
def post_language_convert(data: LanguageConversionRequest) -> LanguageScores:
    scores = {skill: getattr(data, skill.value) for skill in Skill}
    return convert_test_scores(data.test, scores)
