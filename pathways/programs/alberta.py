"""Alberta Advantage Immigration Program (AAIP)."""

from __future__ import annotations

from pathways.models.enums import DrawProbability, Jurisdiction, OccupationCategory, ProgramCode
from pathways.programs.base import (
    CRS_SCALE_MAX,
    build_result,
    has_job_offer_in,
    job_offer_occupation,
    occupations,
)
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult, RuleCondition

PROGRAM = ProgramCode.AAIP
ALBERTA = Jurisdiction.ALBERTA

EE_MIN_CRS = 300

_PRIORITY_SECTORS = frozenset({OccupationCategory.CONSTRUCTION, OccupationCategory.HEALTH})


# ── Alberta Opportunity Stream ─────────────────────────────────────────


def check_opportunity_stream(profile: CandidateProfile) -> ProgramResult | None:
    if not has_job_offer_in(profile, ALBERTA):
        return None

    conditions = [
        RuleCondition(
            name="job_offer_ab",
            description="Full-time job offer from an Alberta employer",
            met=True,
            value=ALBERTA.value,
        ),
        RuleCondition(
            name="eligible_occupation",
            description="Occupation must be eligible under the AOS",
            met=False,
            is_hard=False,
            value="not verified",
        ),
    ]

    return build_result(
        PROGRAM,
        "Alberta Opportunity Stream (AOS)",
        conditions,
        DrawProbability.MEDIUM,
        warnings=[
            "Check current intake status (often paused)",
            "Must be working in eligible sector",
        ],
        checklist=["ab_job_offer", "lmia_or_exemption"],
    )


# ── Express Entry ──────────────────────────────────────────────────────


def check_express_entry(profile: CandidateProfile, crs_score: int) -> ProgramResult | None:
    """Alberta Express Entry Stream: candidates in the federal pool who target Alberta."""
    if ALBERTA not in profile.intent_jurisdictions:
        return None

    conditions = [
        RuleCondition(
            name="crs_minimum",
            description=f"CRS score must be at least {EE_MIN_CRS}",
            met=crs_score >= EE_MIN_CRS,
            value=str(crs_score),
        ),
        RuleCondition(
            name="intent_alberta",
            description="Must intend to live in Alberta",
            met=True,
        ),
    ]

    tech_offer = (
        has_job_offer_in(profile, ALBERTA)
        and job_offer_occupation(profile) == OccupationCategory.TECH
    )
    if tech_offer or occupations(profile) & _PRIORITY_SECTORS:
        probability = DrawProbability.HIGH
    elif ALBERTA in profile.connections.relatives:
        probability = DrawProbability.MEDIUM
    else:
        probability = DrawProbability.LOW

    return build_result(
        PROGRAM,
        "Express Entry Stream",
        conditions,
        probability,
        score=crs_score,
        max_score=CRS_SCALE_MAX,
        warnings=["Requires Notification of Interest (NOI)"],
        checklist=["ee_profile_valid"],
    )


def evaluate_alberta(profile: CandidateProfile, crs_score: int | None = None) -> list[ProgramResult]:
    checks: list[ProgramResult | None] = [check_opportunity_stream(profile)]
    if crs_score is not None:
        checks.append(check_express_entry(profile, crs_score))
    return [r for r in checks if r is not None]
