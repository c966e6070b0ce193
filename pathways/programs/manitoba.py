"""Manitoba Provincial Nominee Program (MPNP).

Skilled Worker Overseas uses a 100-point grid (pass 60) and requires an
established connection to Manitoba. Career Employment Pathway is pass/fail for
Manitoba graduates holding a Manitoba job offer.
"""

from __future__ import annotations

from pathways.models.enums import DrawProbability, EducationLevel, Jurisdiction, ProgramCode
from pathways.programs.base import build_result, has_job_offer_in, studied_in
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult, RuleCondition

PROGRAM = ProgramCode.MPNP
MANITOBA = Jurisdiction.MANITOBA

GRID_MAX = 100
PASS_MARK = 60
HIGH_SCORE = 75

_LANGUAGE_POINTS: dict[int, int] = {8: 20, 7: 18, 6: 16, 5: 14, 4: 12}

_EDUCATION_POINTS: dict[EducationLevel, int] = {
    EducationLevel.PHD: 23,
    EducationLevel.MASTERS: 23,
    EducationLevel.BACHELORS: 20,
    EducationLevel.TWO_YEAR: 19,
    EducationLevel.ONE_YEAR: 19,
}


def calculate_mpnp_points(profile: CandidateProfile) -> int:
    """MPNP Skilled Worker assessment points."""
    score = _LANGUAGE_POINTS.get(min(8, profile.first_language.oral_minimum), 0)

    if 21 <= profile.age <= 45:
        score += 10

    foreign = profile.work.foreign_years
    if foreign >= 4:
        score += 15
    elif foreign >= 1:
        score += 10

    score += _EDUCATION_POINTS.get(profile.education_level, 0)

    # Adaptability: strongest connection only
    ties = profile.connections
    if MANITOBA in ties.relatives:
        score += 20
    elif MANITOBA in ties.past_work:
        score += 12
    elif MANITOBA in ties.friends or MANITOBA in ties.past_study:
        score += 10

    return score


# ── Skilled Worker Overseas ────────────────────────────────────────────


def check_skilled_worker_overseas(profile: CandidateProfile) -> ProgramResult:
    score = calculate_mpnp_points(profile)
    has_connection = profile.connections.any_in(MANITOBA)

    conditions = [
        RuleCondition(
            name="pass_mark",
            description=f"Must score at least {PASS_MARK} points on the MPNP grid",
            met=score >= PASS_MARK,
            value=f"{score}/{GRID_MAX}",
        ),
        RuleCondition(
            name="manitoba_connection",
            description="Requires a close relative, friend, past study or past work in Manitoba",
            met=has_connection,
            value="yes" if has_connection else "no",
        ),
    ]

    if score >= HIGH_SCORE:
        probability = DrawProbability.HIGH
    elif score >= PASS_MARK:
        probability = DrawProbability.MEDIUM
    else:
        probability = DrawProbability.LOW

    warnings = []
    if not has_connection:
        warnings.append("Requires Connection to Manitoba (Friend/Family) or Strategic Invitation")

    return build_result(
        PROGRAM,
        "Skilled Worker Overseas",
        conditions,
        probability,
        score=score,
        max_score=GRID_MAX,
        cutoff=PASS_MARK,
        warnings=warnings,
        checklist=["settlement_plan_2", "proof_of_connection_mb"],
    )


# ── Career Employment Pathway ──────────────────────────────────────────


def check_career_employment(profile: CandidateProfile) -> ProgramResult | None:
    """International Education Stream: Career Employment Pathway."""
    if not (has_job_offer_in(profile, MANITOBA) and studied_in(profile, MANITOBA, completed=True)):
        return None

    conditions = [
        RuleCondition(
            name="job_offer_mb",
            description="Full-time job offer from a Manitoba employer",
            met=True,
        ),
        RuleCondition(
            name="manitoba_graduate",
            description="Completed a credential at a Manitoba institution",
            met=True,
        ),
        RuleCondition(
            name="related_occupation",
            description="Job should be related to the field of study",
            met=False,
            is_hard=False,
            value="not verified",
        ),
    ]

    return build_result(
        PROGRAM,
        "Career Employment Pathway (IES)",
        conditions,
        DrawProbability.HIGH,
        warnings=["Job must be related to field of study"],
        checklist=["job_offer_mb", "degree_mb"],
    )


def evaluate_manitoba(profile: CandidateProfile, crs_score: int | None = None) -> list[ProgramResult]:
    results = [check_skilled_worker_overseas(profile)]
    career = check_career_employment(profile)
    if career is not None:
        results.append(career)
    return results
