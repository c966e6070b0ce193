"""Assessment facade: one request in, one report out.

Computes CRS, runs the eligibility aggregator, then runs whichever compliance
validators the request carries input for. Pure: nothing is stored between
calls.
"""

from __future__ import annotations

import logging
from typing import Any

from pathways.calculators.crs import calculate_crs
from pathways.compliance.legal import analyze_legal_defense
from pathways.compliance.status import analyze_status_strategy
from pathways.compliance.work_experience import validate_work_experience
from pathways.eligibility.engine import assess
from pathways.models.enums import StatusState
from pathways.schemas.assessment import AssessmentReport, AssessmentRequest, ComplianceFindings
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import CRSResult, ProgramResult

logger = logging.getLogger(__name__)

# Recent general draw cut-offs sit around here; below it only targeted draws help
COMPETITIVE_CRS = 470


def _build_profile_summary(profile: CandidateProfile, crs: CRSResult) -> dict[str, Any]:
    """Build a summary dict for audit/display."""
    offer = profile.work.job_offer
    return {
        "age": profile.age,
        "marital_status": profile.marital_status.value,
        "education_level": profile.education_level.value,
        "field_of_study": profile.field_of_study.value,
        "first_language_min_clb": profile.first_language.minimum,
        "second_language_min_clb": profile.second_language.minimum if profile.second_language else None,
        "canadian_years": profile.work.canadian_years,
        "foreign_years": profile.work.foreign_years,
        "current_jurisdiction": profile.work.current_jurisdiction.value,
        "job_offer_tier": offer.tier.value if offer else None,
        "job_offer_jurisdiction": offer.jurisdiction.value if offer else None,
        "intent_jurisdictions": sorted(j.value for j in profile.intent_jurisdictions),
        "crs_total": crs.total,
    }


def _risk_flags(
    crs: CRSResult,
    programs: list[ProgramResult],
    compliance: ComplianceFindings,
) -> list[str]:
    flags: list[str] = []

    if not any(p.eligible for p in programs):
        flags.append("No eligible program streams for the current profile")
    if crs.total < COMPETITIVE_CRS:
        flags.append(f"CRS {crs.total} is below recent general draw cut-offs (~{COMPETITIVE_CRS})")

    work = compliance.work_experience
    if work is not None and not work.is_valid_for_program:
        flags.append(
            f"Work experience does not qualify: {work.eligible_hours:g} of {work.required_hours} hours counted"
        )

    status = compliance.status
    if status is not None and status.urgent_action_required:
        flags.append(f"Immigration status {status.status_state.value}: urgent action required")
    if status is not None and status.status_state == StatusState.OUT_OF_STATUS:
        flags.append("Out of status: applications from inside Canada are at risk")

    legal = compliance.legal
    if legal is not None and legal.inadmissibility.is_inadmissible:
        finding = legal.inadmissibility
        flags.append(f"Inadmissibility risk: {finding.ground.value} ({finding.severity.value})")

    return flags


def build_assessment(request: AssessmentRequest) -> AssessmentReport:
    """Run the full assessment for one request."""
    profile = request.profile
    crs = calculate_crs(profile)
    programs = assess(profile, crs_score=crs.total)
    eligible = [p for p in programs if p.eligible]

    compliance = ComplianceFindings(
        work_experience=(
            validate_work_experience(request.work_experience)
            if request.work_experience is not None else None
        ),
        status=(
            analyze_status_strategy(request.status, today=request.today)
            if request.status is not None else None
        ),
        legal=(
            analyze_legal_defense(request.legal, today=request.today)
            if request.legal is not None else None
        ),
    )

    logger.info(
        "Assessment complete: CRS %d, %d stream(s), %d eligible",
        crs.total, len(programs), len(eligible),
    )

    return AssessmentReport(
        crs=crs,
        programs=tuple(programs),
        eligible_count=len(eligible),
        best_opportunity=eligible[0] if eligible else None,
        compliance=compliance,
        risk_flags=tuple(_risk_flags(crs, programs, compliance)),
        profile_summary=_build_profile_summary(profile, crs),
    )
