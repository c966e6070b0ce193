"""Ontario Immigrant Nominee Program (OINP).

Streams:
- Masters Graduate (EOI points grid, no job offer)
- Express Entry: Human Capital Priorities (CRS-linked)
- Express Entry: Skilled Trades (CRS-linked)
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
    CRS_SCALE_MAX,
    build_result,
    max_annual_earnings,
    occupations,
    studied_in,
)
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult, RuleCondition

PROGRAM = ProgramCode.OINP
ONTARIO = Jurisdiction.ONTARIO

# EOI grid maximum including location-of-study bands not collected by the form
EOI_MAX = 70
MASTERS_HIGH_SCORE = 45

HCP_MIN_CRS = 400
HCP_PRIORITY_CRS = 460
HCP_GENERAL_CRS = 480
TRADES_HIGH_CRS = 350

_PRIORITY_OCCUPATIONS = frozenset({OccupationCategory.TECH, OccupationCategory.HEALTH})
_TRADE_OCCUPATIONS = frozenset({OccupationCategory.CONSTRUCTION, OccupationCategory.TRADES})

# Regional bonus by city of study collapsed to the GTA band: city is not collected.
STUDY_LOCATION_POINTS = 3


def calculate_eoi_score(profile: CandidateProfile) -> int:
    """OINP Expression of Interest points for the graduate streams."""
    score = 0

    # Earnings history
    if max_annual_earnings(profile) >= Decimal("40000"):
        score += 3

    # Education
    if profile.education_level == EducationLevel.PHD:
        score += 10
    elif profile.education_level == EducationLevel.MASTERS:
        score += 8
    elif profile.education_level == EducationLevel.BACHELORS:
        score += 6

    # Field of study
    if profile.field_of_study == FieldOfStudy.STEM_HEALTH_TRADES:
        score += 12
    elif profile.field_of_study == FieldOfStudy.BUSINESS_ADMIN:
        score += 6

    # Canadian credential
    if profile.canadian_education is not None and profile.canadian_education.completed:
        score += 5

    # Official language
    clb = profile.first_language.minimum
    if clb >= 9:
        score += 10
    elif clb >= 8:
        score += 6
    elif clb >= 7:
        score += 4

    # Knowledge of both official languages
    if profile.second_language is not None and profile.second_language.minimum >= 6:
        score += 10 if clb >= 6 else 5

    if studied_in(profile, ONTARIO):
        score += STUDY_LOCATION_POINTS

    return score


# ── Masters Graduate ───────────────────────────────────────────────────


def check_masters_graduate(profile: CandidateProfile) -> ProgramResult | None:
    """Masters Graduate stream, for holders of an Ontario master's degree."""
    credential = profile.canadian_education
    if credential is None or credential.jurisdiction != ONTARIO or credential.level != EducationLevel.MASTERS:
        return None

    conditions: list[RuleCondition] = []

    conditions.append(RuleCondition(
        name="degree_completed",
        description="Master's degree from an eligible Ontario university must be completed",
        met=credential.completed,
        value="completed" if credential.completed else "in progress",
    ))

    oral = profile.first_language.oral_minimum
    conditions.append(RuleCondition(
        name="language",
        description="CLB 7 or higher in listening and speaking",
        met=oral >= 7,
        value=f"CLB {oral}",
    ))

    resided = (
        profile.work.current_jurisdiction == ONTARIO
        or ONTARIO in profile.connections.past_study
    )
    conditions.append(RuleCondition(
        name="ontario_residence",
        description="Must have lived in Ontario for 12 of the last 24 months",
        met=resided,
        value=profile.work.current_jurisdiction.value,
    ))

    score = calculate_eoi_score(profile)
    probability = DrawProbability.HIGH if score >= MASTERS_HIGH_SCORE else DrawProbability.MEDIUM

    return build_result(
        PROGRAM,
        "Masters Graduate Stream",
        conditions,
        probability,
        score=score,
        max_score=EOI_MAX,
        warnings=["Ensure you resided in Ontario for 12 months in the last 2 years"],
        checklist=["oinp_masters_degree", "residency_proof_on", "funds_proof"],
    )


# ── Human Capital Priorities ───────────────────────────────────────────


def check_human_capital_priorities(profile: CandidateProfile, crs_score: int) -> ProgramResult | None:
    """Express Entry Human Capital Priorities: degree holders in the federal pool."""
    if not profile.education_level.at_least(EducationLevel.BACHELORS):
        return None

    conditions: list[RuleCondition] = []

    oral = profile.first_language.oral_minimum
    conditions.append(RuleCondition(
        name="language",
        description="CLB 7 or higher in listening and speaking",
        met=oral >= 7,
        value=f"CLB {oral}",
    ))
    conditions.append(RuleCondition(
        name="crs_minimum",
        description=f"CRS score must be at least {HCP_MIN_CRS}",
        met=crs_score >= HCP_MIN_CRS,
        value=str(crs_score),
    ))

    priority_sector = bool(occupations(profile) & _PRIORITY_OCCUPATIONS)
    note = None
    if priority_sector and crs_score >= HCP_PRIORITY_CRS:
        probability = DrawProbability.HIGH
        note = "Tech/Health targeted draw likely"
    elif crs_score > HCP_GENERAL_CRS:
        probability = DrawProbability.HIGH
        note = "Competitive for general draws"
    else:
        probability = DrawProbability.LOW

    return build_result(
        PROGRAM,
        "Express Entry: Human Capital Priorities",
        conditions,
        probability,
        score=crs_score,
        max_score=CRS_SCALE_MAX,
        warnings=["Must have active Express Entry profile", note or ""],
        checklist=["ee_profile_number", "job_seeker_code"],
    )


# ── Skilled Trades ─────────────────────────────────────────────────────


def check_skilled_trades(profile: CandidateProfile, crs_score: int) -> ProgramResult | None:
    """Express Entry Skilled Trades: construction / trades occupations."""
    if not occupations(profile) & _TRADE_OCCUPATIONS:
        return None

    conditions: list[RuleCondition] = []

    conditions.append(RuleCondition(
        name="canadian_experience",
        description="At least 1 year of work experience in an eligible trade in Ontario",
        met=profile.work.canadian_years >= 1,
        value=f"{profile.work.canadian_years} years",
    ))
    conditions.append(RuleCondition(
        name="ontario_residence",
        description="Must currently live and work in Ontario",
        met=profile.work.current_jurisdiction == ONTARIO,
        value=profile.work.current_jurisdiction.value,
    ))
    oral = profile.first_language.oral_minimum
    conditions.append(RuleCondition(
        name="language",
        description="CLB 5 or higher in listening and speaking",
        met=oral >= 5,
        value=f"CLB {oral}",
    ))

    probability = DrawProbability.HIGH if crs_score > TRADES_HIGH_CRS else DrawProbability.MEDIUM

    return build_result(
        PROGRAM,
        "Express Entry: Skilled Trades",
        conditions,
        probability,
        score=crs_score,
        max_score=CRS_SCALE_MAX,
        checklist=["trade_certification_on", "ee_profile_number"],
    )


def evaluate_ontario(profile: CandidateProfile, crs_score: int | None = None) -> list[ProgramResult]:
    """Evaluate all OINP streams. CRS-linked streams are skipped without a CRS score."""
    checks: list[ProgramResult | None] = [check_masters_graduate(profile)]
    if crs_score is not None:
        checks.append(check_human_capital_priorities(profile, crs_score))
        checks.append(check_skilled_trades(profile, crs_score))
    return [r for r in checks if r is not None]
