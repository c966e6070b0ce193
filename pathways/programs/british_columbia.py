"""BC Provincial Nominee Program (BC PNP).

Skills Immigration is scored on the SIRS grid (max 200: human capital 120 +
economic factors 80) and needs a BC job offer. International Post-Graduate is
pass/fail and needs no job offer.
"""

from __future__ import annotations

from decimal import Decimal

from pathways.models.enums import (
    DrawProbability,
    EducationLevel,
    FieldOfStudy,
    Jurisdiction,
    OccupationCategory,
    ProgramCode,
)
from pathways.programs.base import (
    build_result,
    has_job_offer_in,
    hourly_wage,
    job_offer_occupation,
    studied_in,
)
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult, RuleCondition

PROGRAM = ProgramCode.BC_PNP
BC = Jurisdiction.BRITISH_COLUMBIA

SIRS_MAX = 200

# (minimum hourly wage, points), highest bracket first
_WAGE_BRACKETS: tuple[tuple[Decimal, int], ...] = (
    (Decimal("70"), 55),
    (Decimal("60"), 50),
    (Decimal("50"), 40),
    (Decimal("40"), 30),
    (Decimal("30"), 20),
)
_WAGE_FLOOR = Decimal("16")
_WAGE_FLOOR_POINTS = 10

# Area of employment collapsed to Greater Vancouver (0): city is not collected.
AREA_OF_EMPLOYMENT_POINTS = 0

# (cutoff, high threshold, medium threshold) per draw type
_TECH_DRAW = (85, 90, 80)
_HEALTH_DRAW = (60, 60, None)
_GENERAL_DRAW = (105, 110, 100)


def calculate_sirs(profile: CandidateProfile) -> int:
    """Skills Immigration Registration System score."""
    score = 0

    # 1. Directly related work experience
    total_years = int(profile.work.canadian_years + profile.work.foreign_years)
    if total_years >= 5:
        score += 20
    elif total_years >= 1:
        score += 4 * total_years
    if profile.work.canadian_years >= 1:
        score += 10
    if has_job_offer_in(profile, BC):
        score += 10  # currently working in BC for the employer

    # 2. Education
    level = profile.education_level
    if level == EducationLevel.PHD:
        score += 27
    elif level == EducationLevel.MASTERS:
        score += 22
    elif level == EducationLevel.BACHELORS:
        score += 15
    elif level in (EducationLevel.ONE_YEAR, EducationLevel.TWO_YEAR):
        score += 5
    if studied_in(profile, BC):
        score += 8

    # 3. Language
    clb = profile.first_language.minimum
    if clb >= 9:
        score += 30
    elif clb >= 5:
        score += 5 * (clb - 3)

    # 4. Hourly wage
    wage = hourly_wage(profile)
    for minimum, points in _WAGE_BRACKETS:
        if wage >= minimum:
            score += points
            break
    else:
        if wage > _WAGE_FLOOR:
            score += _WAGE_FLOOR_POINTS

    # 5. Area of employment
    score += AREA_OF_EMPLOYMENT_POINTS

    return score


def _classify(sirs: int, draw: tuple[int, int, int | None]) -> DrawProbability:
    _cutoff, high, medium = draw
    if sirs >= high:
        return DrawProbability.HIGH
    if medium is not None and sirs >= medium:
        return DrawProbability.MEDIUM
    return DrawProbability.LOW


# ── Skills Immigration ─────────────────────────────────────────────────


def check_skills_immigration(profile: CandidateProfile) -> ProgramResult | None:
    """Skills Immigration: Skilled Worker, or the Tech / Healthcare targeted draws."""
    if not has_job_offer_in(profile, BC):
        return None

    occupation = job_offer_occupation(profile)
    if occupation == OccupationCategory.TECH:
        stream, draw = "BC PNP Tech", _TECH_DRAW
    elif occupation == OccupationCategory.HEALTH:
        stream, draw = "BC PNP Healthcare", _HEALTH_DRAW
    else:
        stream, draw = "Skills Immigration - Skilled Worker", _GENERAL_DRAW

    conditions = [
        RuleCondition(
            name="job_offer_bc",
            description="Full-time job offer from a British Columbia employer",
            met=True,
            value=BC.value,
        ),
        RuleCondition(
            name="indeterminate_offer",
            description="Job offer should be indeterminate (no end date)",
            met=False,
            is_hard=False,
            value="not verified",
        ),
    ]

    sirs = calculate_sirs(profile)
    return build_result(
        PROGRAM,
        stream,
        conditions,
        _classify(sirs, draw),
        score=sirs,
        max_score=SIRS_MAX,
        cutoff=draw[0],
        warnings=["Job offer must be indeterminate"],
        checklist=["bc_job_offer_form", "employer_recommendation"],
    )


# ── International Post-Graduate ────────────────────────────────────────


def check_international_post_graduate(profile: CandidateProfile) -> ProgramResult | None:
    """International Post-Graduate: BC master's/PhD in natural, applied or health sciences."""
    if not profile.education_level.at_least(EducationLevel.MASTERS):
        return None
    if not studied_in(profile, BC):
        return None

    conditions = [
        RuleCondition(
            name="field_of_study",
            description="Degree must be in natural, applied or health sciences",
            met=profile.field_of_study == FieldOfStudy.STEM_HEALTH_TRADES,
            value=profile.field_of_study.value,
        ),
        RuleCondition(
            name="graduated",
            description="Must have graduated from an eligible BC institution",
            met=profile.canadian_education is not None and profile.canadian_education.completed,
        ),
    ]

    return build_result(
        PROGRAM,
        "International Post-Graduate",
        conditions,
        DrawProbability.HIGH,
        warnings=["Must have graduated from eligible BC institution in Science/Tech"],
        checklist=["degree_certificate", "transcripts_final"],
    )


def evaluate_british_columbia(profile: CandidateProfile, crs_score: int | None = None) -> list[ProgramResult]:
    checks = [
        check_skills_immigration(profile),
        check_international_post_graduate(profile),
    ]
    return [r for r in checks if r is not None]
