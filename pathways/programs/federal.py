"""Federal economic programs managed through Express Entry.

- Federal Skilled Worker: 67-point selection grid (pass/fail on the grid, the
  draw tier then comes from CRS)
- Express Entry: General Draw (CRS-linked)
- Canadian Experience Class
"""

from __future__ import annotations

from pathways.models.enums import DrawProbability, EducationLevel, JobOfferTier, Jurisdiction, ProgramCode
from pathways.programs.base import CRS_SCALE_MAX, build_result
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult, RuleCondition

PROGRAM = ProgramCode.FEDERAL

FSW_PASS_MARK = 67
FSW_GRID_MAX = 100
ADAPTABILITY_MAX = 10
CEC_MIN_CLB = 7
# Lower CEC bar (TEER 2/3 occupations) accepted when gating the general draw
DRAW_CEC_MIN_CLB = 5

# Probability bands on CRS (strictly above)
FSW_HIGH_CRS = 480
FSW_MEDIUM_CRS = 450
DRAW_HIGH_CRS = 500
DRAW_MEDIUM_CRS = 470

_EDUCATION_POINTS: dict[EducationLevel, int] = {
    EducationLevel.PHD: 25,
    EducationLevel.MASTERS: 23,
    EducationLevel.BACHELORS: 21,
    EducationLevel.TWO_YEAR: 19,
    EducationLevel.ONE_YEAR: 19,
    EducationLevel.HIGH_SCHOOL: 5,
}

# (minimum floored years, points)
_EXPERIENCE_POINTS: tuple[tuple[int, int], ...] = ((6, 15), (4, 13), (2, 11), (1, 9))


def _age_points(age: int) -> int:
    if age < 18:
        return 0
    if age <= 35:
        return 12
    return max(0, 12 - (age - 35))


def _has_arranged_employment(profile: CandidateProfile) -> bool:
    offer = profile.work.job_offer
    return (
        offer is not None
        and offer.tier != JobOfferTier.NONE
        and offer.jurisdiction != Jurisdiction.OUTSIDE_CANADA
    )


def calculate_fsw_points(profile: CandidateProfile) -> int:
    """Federal Skilled Worker selection factors."""
    score = _age_points(profile.age)
    score += _EDUCATION_POINTS[profile.education_level]

    years = int(profile.work.foreign_years)
    for minimum, points in _EXPERIENCE_POINTS:
        if years >= minimum:
            score += points
            break

    clb = profile.first_language.minimum
    if clb >= 9:
        score += 24
    elif clb >= 8:
        score += 20
    elif clb >= 7:
        score += 16

    if _has_arranged_employment(profile):
        score += 10

    adaptability = 0
    if profile.connections.relatives:
        adaptability += 5
    if profile.work.canadian_years >= 1:
        adaptability += 10
    score += min(ADAPTABILITY_MAX, adaptability)

    return score


def is_cec_eligible(profile: CandidateProfile, min_clb: int = CEC_MIN_CLB) -> bool:
    return profile.work.canadian_years >= 1 and profile.first_language.minimum >= min_clb


# ── Federal Skilled Worker ─────────────────────────────────────────────


def check_federal_skilled_worker(profile: CandidateProfile, crs_score: int | None) -> ProgramResult:
    points = calculate_fsw_points(profile)
    conditions = [
        RuleCondition(
            name="fsw_pass_mark",
            description=f"Must score at least {FSW_PASS_MARK} points on the FSW grid",
            met=points >= FSW_PASS_MARK,
            value=f"{points}/{FSW_GRID_MAX}",
        ),
    ]

    if crs_score is None:
        probability = DrawProbability.MEDIUM
    elif crs_score > FSW_HIGH_CRS:
        probability = DrawProbability.HIGH
    elif crs_score > FSW_MEDIUM_CRS:
        probability = DrawProbability.MEDIUM
    else:
        probability = DrawProbability.LOW

    return build_result(
        PROGRAM,
        "Federal Skilled Worker (FSW)",
        conditions,
        probability,
        score=points,
        max_score=FSW_GRID_MAX,
        cutoff=FSW_PASS_MARK,
        warnings=["Grid pass is only the entry ticket; invitations depend on CRS"],
        checklist=["generic_fsw", "ee_profile_number"],
    )


# ── Express Entry draw ─────────────────────────────────────────────────


def check_general_draw(profile: CandidateProfile, crs_score: int) -> ProgramResult:
    fsw_points = calculate_fsw_points(profile)
    conditions = [
        RuleCondition(
            name="federal_program",
            description="Must qualify for FSW or the Canadian Experience Class",
            met=fsw_points >= FSW_PASS_MARK or is_cec_eligible(profile, DRAW_CEC_MIN_CLB),
            value=f"FSW {fsw_points}",
        ),
    ]

    if crs_score > DRAW_HIGH_CRS:
        probability = DrawProbability.HIGH
    elif crs_score > DRAW_MEDIUM_CRS:
        probability = DrawProbability.MEDIUM
    else:
        probability = DrawProbability.LOW

    return build_result(
        PROGRAM,
        "Express Entry: General Draw",
        conditions,
        probability,
        score=crs_score,
        max_score=CRS_SCALE_MAX,
        warnings=[f"Recent general draw cut-offs ~{FSW_HIGH_CRS}-525"],
        checklist=["ee_profile_number"],
    )


# ── Canadian Experience Class ──────────────────────────────────────────


def check_canadian_experience_class(profile: CandidateProfile) -> ProgramResult | None:
    """Applies once the candidate has any Canadian work experience."""
    if profile.work.canadian_years <= 0:
        return None

    clb = profile.first_language.minimum
    conditions = [
        RuleCondition(
            name="canadian_experience",
            description="At least 1 year of skilled work experience in Canada",
            met=profile.work.canadian_years >= 1,
            value=f"{profile.work.canadian_years} years",
        ),
        RuleCondition(
            name="language",
            description=f"CLB {CEC_MIN_CLB} or higher in all four skills",
            met=clb >= CEC_MIN_CLB,
            value=f"CLB {clb}",
        ),
    ]

    return build_result(
        PROGRAM,
        "Canadian Experience Class (CEC)",
        conditions,
        DrawProbability.HIGH,
        checklist=["cec_work_reference", "ee_profile_number"],
    )


def evaluate_federal(profile: CandidateProfile, crs_score: int | None = None) -> list[ProgramResult]:
    checks: list[ProgramResult | None] = [check_federal_skilled_worker(profile, crs_score)]
    if crs_score is not None:
        checks.append(check_general_draw(profile, crs_score))
    checks.append(check_canadian_experience_class(profile))
    return [r for r in checks if r is not None]
