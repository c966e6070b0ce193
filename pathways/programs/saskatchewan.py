"""Saskatchewan Immigrant Nominee Program (SINP).

100-point assessment grid, pass mark 60. Both the Occupation In-Demand and
Express Entry sub-categories use the same grid and are always reported so the
caller can show the score even when it falls short.
"""

from __future__ import annotations

from pathways.models.enums import DrawProbability, EducationLevel, Jurisdiction, ProgramCode
from pathways.programs.base import build_result, has_job_offer_in
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult, RuleCondition

PROGRAM = ProgramCode.SINP
SASKATCHEWAN = Jurisdiction.SASKATCHEWAN

GRID_MAX = 110  # 100 + bilingual bonus
PASS_MARK = 60
HIGH_SCORE = 68

_EDUCATION_POINTS: dict[EducationLevel, int] = {
    EducationLevel.PHD: 23,
    EducationLevel.MASTERS: 23,
    EducationLevel.BACHELORS: 20,
    EducationLevel.TWO_YEAR: 15,
    EducationLevel.ONE_YEAR: 12,
}

# Keyed by CLB (8 = 8 or higher)
_LANGUAGE_POINTS: dict[int, int] = {8: 20, 7: 18, 6: 16, 5: 14, 4: 12}


def calculate_sinp_points(profile: CandidateProfile) -> int:
    """SINP International Skilled Worker points."""
    score = _EDUCATION_POINTS.get(profile.education_level, 0)

    # Skilled work experience in the last five years
    foreign = min(5, int(profile.work.foreign_years))
    score += 2 * foreign

    score += _LANGUAGE_POINTS.get(min(8, profile.first_language.oral_minimum), 0)

    # Age
    age = profile.age
    if 22 <= age <= 34:
        score += 12
    elif 35 <= age <= 45:
        score += 10
    elif 46 <= age <= 50:
        score += 8

    # Connection to Saskatchewan labour market, strongest tie only
    ties = profile.connections
    if has_job_offer_in(profile, SASKATCHEWAN):
        score += 30
    elif SASKATCHEWAN in ties.relatives:
        score += 20
    elif SASKATCHEWAN in ties.past_work or SASKATCHEWAN in ties.past_study:
        score += 5

    return score


def _probability(score: int) -> DrawProbability:
    if score >= HIGH_SCORE:
        return DrawProbability.HIGH
    if score >= PASS_MARK:
        return DrawProbability.MEDIUM
    return DrawProbability.LOW


def _pass_mark_condition(score: int) -> RuleCondition:
    return RuleCondition(
        name="pass_mark",
        description=f"Must score at least {PASS_MARK} points on the SINP grid",
        met=score >= PASS_MARK,
        value=f"{score}/{GRID_MAX}",
    )


def evaluate_saskatchewan(profile: CandidateProfile, crs_score: int | None = None) -> list[ProgramResult]:
    score = calculate_sinp_points(profile)
    probability = _probability(score)

    occupation_in_demand = build_result(
        PROGRAM,
        "Occupation In-Demand",
        [
            _pass_mark_condition(score),
            RuleCondition(
                name="excluded_occupation",
                description="Occupation must not be on the excluded list",
                met=True,
                is_hard=False,
                value="not verified",
            ),
        ],
        probability,
        score=score,
        max_score=GRID_MAX,
        cutoff=PASS_MARK,
        warnings=["Occupation must not be on Excluded List"],
        checklist=["settlement_funds", "settlement_plan"],
    )

    express_entry = build_result(
        PROGRAM,
        "Express Entry",
        [_pass_mark_condition(score)],
        probability,
        score=score,
        max_score=GRID_MAX,
        cutoff=PASS_MARK,
        warnings=["Valid Express Entry Profile Number required"],
        checklist=["ee_profile_number"],
    )

    return [occupation_in_demand, express_entry]
