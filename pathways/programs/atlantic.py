"""Atlantic Immigration Program (AIP).

Employer-driven: a job offer from a designated employer in New Brunswick,
Nova Scotia, Newfoundland and Labrador or Prince Edward Island is the entry
ticket. Without one the module reports nothing.
"""

from __future__ import annotations

from pathways.models.enums import ATLANTIC_JURISDICTIONS, DrawProbability, JobOfferTier, ProgramCode
from pathways.programs.base import build_result, job_offer_tier
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult, RuleCondition

PROGRAM = ProgramCode.AIP


def _atlantic_offer(profile: CandidateProfile) -> str | None:
    offer = profile.work.job_offer
    if offer is None or job_offer_tier(profile) == JobOfferTier.NONE:
        return None
    if offer.jurisdiction not in ATLANTIC_JURISDICTIONS:
        return None
    return offer.jurisdiction.value


def evaluate_atlantic(profile: CandidateProfile, crs_score: int | None = None) -> list[ProgramResult]:
    province = _atlantic_offer(profile)
    if province is None:
        return []

    conditions = [
        RuleCondition(
            name="job_offer_atlantic",
            description="Job offer in an Atlantic province",
            met=True,
            value=province,
        ),
        RuleCondition(
            name="designated_employer",
            description="Employer must be designated under the AIP",
            met=False,
            is_hard=False,
            value="not verified",
        ),
    ]

    result = build_result(
        PROGRAM,
        "Atlantic Immigration Program",
        conditions,
        DrawProbability.HIGH,
        warnings=["Requires Job Offer from Designated Employer"],
        checklist=["endorsement_certificate", "designated_employer_offer"],
    )
    return [result]
