"""Nova Scotia Nominee Program (NSNP).

Streams:
- Nova Scotia Experience: Express Entry (CRS-linked)
- Skilled Worker
- Occupations in Demand
- International Graduates in Demand
- Labour Market Priorities (CRS-linked)
"""

from __future__ import annotations

from pathways.models.enums import DrawProbability, FieldOfStudy, JobOfferTier, Jurisdiction, ProgramCode
from pathways.programs.base import (
    CRS_SCALE_MAX,
    build_result,
    has_job_offer_in,
    job_offer_tier,
    studied_in,
)
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult, RuleCondition

PROGRAM = ProgramCode.NSNP
NOVA_SCOTIA = Jurisdiction.NOVA_SCOTIA

LMP_MIN_CRS = 350


def worked_in_nova_scotia(profile: CandidateProfile) -> bool:
    work = profile.work
    if work.current_jurisdiction == NOVA_SCOTIA and work.canadian_years >= 1:
        return True
    return NOVA_SCOTIA in profile.connections.past_work


def _offer_condition(**overrides) -> RuleCondition:
    fields = {
        "name": "job_offer_ns",
        "description": "Full-time job offer from a Nova Scotia employer",
        "met": True,
        "value": NOVA_SCOTIA.value,
    }
    fields.update(overrides)
    return RuleCondition(**fields)


# ── NS Experience: Express Entry ───────────────────────────────────────


def check_experience_express_entry(profile: CandidateProfile, crs_score: int) -> ProgramResult | None:
    if not worked_in_nova_scotia(profile):
        return None

    tier = job_offer_tier(profile)
    conditions = [
        RuleCondition(
            name="ns_work_experience",
            description="At least 1 year of skilled work experience in Nova Scotia",
            met=True,
        ),
        RuleCondition(
            name="high_skill_experience",
            description="Experience must be in a TEER 0-3 occupation",
            met=tier == JobOfferTier.HIGH_SKILL,
            value=tier.value,
        ),
    ]

    return build_result(
        PROGRAM,
        "NS Experience: Express Entry",
        conditions,
        DrawProbability.HIGH,
        score=crs_score,
        max_score=CRS_SCALE_MAX,
        checklist=["ns_work_reference", "ee_profile_number"],
    )


# ── Employer-driven streams ────────────────────────────────────────────


def check_skilled_worker(profile: CandidateProfile) -> ProgramResult | None:
    if not has_job_offer_in(profile, NOVA_SCOTIA):
        return None

    conditions = [
        _offer_condition(),
        RuleCondition(
            name="eligible_employer",
            description="Employer must be eligible under the NSNP",
            met=False,
            is_hard=False,
            value="not verified",
        ),
    ]
    return build_result(
        PROGRAM,
        "Skilled Worker Stream",
        conditions,
        DrawProbability.HIGH,
        warnings=["Employer must be eligible"],
        checklist=["ns_employer_form", "job_offer_letter"],
    )


def check_occupations_in_demand(profile: CandidateProfile) -> ProgramResult | None:
    """Occupations in Demand: semi-skilled (TEER 4-5) offers only."""
    if not has_job_offer_in(profile, NOVA_SCOTIA):
        return None

    tier = job_offer_tier(profile)
    conditions = [
        _offer_condition(),
        RuleCondition(
            name="semi_skilled_offer",
            description="Job offer must be in a targeted TEER 4-5 occupation",
            met=tier == JobOfferTier.SEMI_SKILL,
            value=tier.value,
        ),
    ]
    return build_result(
        PROGRAM,
        "Occupations in Demand",
        conditions,
        DrawProbability.HIGH,
        checklist=["ns_employer_form", "education_credential"],
    )


def check_international_graduates(profile: CandidateProfile) -> ProgramResult | None:
    if not has_job_offer_in(profile, NOVA_SCOTIA):
        return None

    graduated = studied_in(profile, NOVA_SCOTIA, completed=True)
    conditions = [
        _offer_condition(),
        RuleCondition(
            name="ns_graduate",
            description="Completed a credential at a Nova Scotia institution",
            met=graduated,
            value="yes" if graduated else "no",
        ),
    ]
    return build_result(
        PROGRAM,
        "International Graduates in Demand",
        conditions,
        DrawProbability.MEDIUM,
        checklist=["ns_diploma", "job_offer_letter"],
    )


# ── Labour Market Priorities ───────────────────────────────────────────


def check_labour_market_priorities(profile: CandidateProfile, crs_score: int) -> ProgramResult | None:
    if NOVA_SCOTIA not in profile.intent_jurisdictions:
        return None

    conditions = [
        RuleCondition(
            name="crs_minimum",
            description=f"CRS score must be above {LMP_MIN_CRS}",
            met=crs_score > LMP_MIN_CRS,
            value=str(crs_score),
        ),
    ]

    second = profile.second_language
    if second is not None and second.speaking >= 7:
        probability = DrawProbability.HIGH  # French-speaking draws
    elif profile.field_of_study == FieldOfStudy.STEM_HEALTH_TRADES:
        probability = DrawProbability.MEDIUM
    else:
        probability = DrawProbability.LOW

    return build_result(
        PROGRAM,
        "Labour Market Priorities (EE)",
        conditions,
        probability,
        score=crs_score,
        max_score=CRS_SCALE_MAX,
        warnings=["Draws target specific occupations or French speakers"],
        checklist=["ee_profile_valid"],
    )


def evaluate_nova_scotia(profile: CandidateProfile, crs_score: int | None = None) -> list[ProgramResult]:
    checks: list[ProgramResult | None] = [
        check_skilled_worker(profile),
        check_occupations_in_demand(profile),
        check_international_graduates(profile),
    ]
    if crs_score is not None:
        checks.insert(0, check_experience_express_entry(profile, crs_score))
        checks.append(check_labour_market_priorities(profile, crs_score))
    return [r for r in checks if r is not None]
