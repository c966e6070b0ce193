"""Shared contract and helpers for program rule modules.

Every module exposes one function with the signature
``(profile, crs_score) -> list[ProgramResult]`` and is registered through a
ProgramModule descriptor. Modules import from here and from the schemas only,
never from each other.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal

from pathways.models.enums import (
    DrawProbability,
    JobOfferTier,
    Jurisdiction,
    OccupationCategory,
    ProgramCode,
)
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult, RuleCondition

ProgramEvaluator = Callable[[CandidateProfile, int | None], list[ProgramResult]]

# Jurisdiction names shown to callers, per program module
PROGRAM_DISPLAY_NAMES: dict[ProgramCode, str] = {
    ProgramCode.OINP: "Ontario",
    ProgramCode.BC_PNP: "British Columbia",
    ProgramCode.SINP: "Saskatchewan",
    ProgramCode.MPNP: "Manitoba",
    ProgramCode.AAIP: "Alberta",
    ProgramCode.NSNP: "Nova Scotia",
    ProgramCode.AIP: "Atlantic Canada (AIP)",
    ProgramCode.FEDERAL: "Federal (Express Entry)",
}

CRS_SCALE_MAX = 1200


@dataclass(frozen=True)
class ProgramModule:
    """Registry entry: which program, and the function that evaluates it."""

    code: ProgramCode
    evaluate: ProgramEvaluator


# ── Profile helpers ────────────────────────────────────────────────────


def has_job_offer_in(profile: CandidateProfile, jurisdiction: Jurisdiction) -> bool:
    """True if the candidate holds a real job offer located in the jurisdiction."""
    offer = profile.work.job_offer
    return offer is not None and offer.tier != JobOfferTier.NONE and offer.jurisdiction == jurisdiction


def job_offer_occupation(profile: CandidateProfile) -> OccupationCategory | None:
    offer = profile.work.job_offer
    if offer is None or offer.tier == JobOfferTier.NONE:
        return None
    return offer.occupation


def job_offer_tier(profile: CandidateProfile) -> JobOfferTier:
    offer = profile.work.job_offer
    return offer.tier if offer is not None else JobOfferTier.NONE


def occupations(profile: CandidateProfile) -> set[OccupationCategory]:
    """Occupations from the job offer and past jobs."""
    found = {job.occupation for job in profile.work.history}
    offered = job_offer_occupation(profile)
    if offered is not None:
        found.add(offered)
    return found


def max_annual_earnings(profile: CandidateProfile) -> Decimal:
    return max((job.annual_earnings for job in profile.work.history), default=Decimal("0"))


def hourly_wage(profile: CandidateProfile) -> Decimal:
    offer = profile.work.job_offer
    return offer.hourly_wage if offer is not None else Decimal("0")


def studied_in(profile: CandidateProfile, jurisdiction: Jurisdiction, *, completed: bool = False) -> bool:
    credential = profile.canadian_education
    if credential is None or credential.jurisdiction != jurisdiction:
        return False
    return credential.completed or not completed


# ── Result building ────────────────────────────────────────────────────


def first_failed_hard(conditions: Iterable[RuleCondition]) -> str | None:
    """Return description of first failed hard condition, or None."""
    for c in conditions:
        if c.is_hard and not c.met:
            return c.description
    return None


def build_result(
    program: ProgramCode,
    stream: str,
    conditions: list[RuleCondition],
    probability: DrawProbability,
    *,
    score: int = 0,
    max_score: int = 0,
    cutoff: int | None = None,
    warnings: Iterable[str] = (),
    checklist: Iterable[str] = (),
) -> ProgramResult:
    """Assemble a ProgramResult; eligibility follows the hard conditions.

    An ineligible stream never carries a draw probability above NONE.
    """
    eligible = all(c.met for c in conditions if c.is_hard)
    return ProgramResult(
        program=program,
        jurisdiction=PROGRAM_DISPLAY_NAMES[program],
        stream=stream,
        score=score,
        max_score=max_score,
        eligible=eligible,
        draw_probability=probability if eligible else DrawProbability.NONE,
        draw_cutoff=cutoff,
        warnings=tuple(w for w in warnings if w),
        checklist=tuple(checklist),
        conditions=tuple(conditions),
        ineligibility_reason=first_failed_hard(conditions) if not eligible else None,
    )
