"""Inadmissibility risk and defense strategy analyzer.

Covers the three grounds an economic applicant usually meets: criminality
(s.36 IRPA), medical excessive demand (s.38) and misrepresentation or other
prior refusals (s.40). Each applicable ground contributes its own strategies;
the most severe ground becomes the headline finding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from pathways.config import settings
from pathways.models.enums import InadmissibilityGround, RefusalReason, Severity, SuccessLikelihood
from pathways.schemas.compliance import (
    DefenseStrategy,
    Inadmissibility,
    LegalDefenseResult,
    LegalProfile,
)

_LIKELIHOOD_RANK = {
    SuccessLikelihood.LOW: 0,
    SuccessLikelihood.MEDIUM: 1,
    SuccessLikelihood.HIGH: 2,
}


@dataclass
class _Finding:
    """One ground found by a single check."""

    ground: InadmissibilityGround
    severity: Severity
    likelihood: SuccessLikelihood
    note: str


@dataclass
class _Analysis:
    findings: list[_Finding] = field(default_factory=list)
    strategies: list[DefenseStrategy] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


def _anniversary_reached(start: date | None, years: int, today: date) -> bool:
    """True once today is on or past the anniversary `years` after start.

    A Feb 29 start falls back to Feb 28 in non-leap years. An unknown start
    never reaches its anniversary.
    """
    if start is None:
        return False
    try:
        anniversary = start.replace(year=start.year + years)
    except ValueError:
        anniversary = start.replace(year=start.year + years, day=28)
    return today >= anniversary


# ── Criminality ────────────────────────────────────────────────────────


def _check_criminality(p: LegalProfile, today: date, out: _Analysis) -> None:
    cfg = settings.compliance
    serious = (p.offense_max_sentence_years or 0) >= cfg.serious_sentence_years

    if serious:
        out.findings.append(_Finding(
            InadmissibilityGround.SERIOUS_CRIMINALITY,
            Severity.CRITICAL,
            SuccessLikelihood.LOW,
            "Serious Criminality bars 'Deemed Rehabilitation'. Must apply for Criminal Rehabilitation.",
        ))
        if _anniversary_reached(p.sentence_completed_date, cfg.rehabilitation_years, today):
            out.strategies.append(DefenseStrategy(
                title="Application for Criminal Rehabilitation",
                arguments=(
                    f"Demonstrate {cfg.rehabilitation_years} years of stability since sentence completion",
                    "Prove low risk to Canadian society",
                ),
                recommended_documents=(
                    "Form IMM 1444",
                    "Police Certificates (All countries)",
                    "Reference Letters regarding character",
                ),
            ))
        else:
            out.strategies.append(_trp_strategy())
        return

    if _anniversary_reached(p.sentence_completed_date, cfg.deemed_rehabilitation_years, today):
        out.strategies.append(DefenseStrategy(
            title="Deemed Rehabilitation Defense",
            arguments=(
                f"{cfg.deemed_rehabilitation_years} years passed since sentence completion",
                "No subsequent offenses",
            ),
            recommended_documents=("Legal Opinion Letter citing s.18(2) IRPR",),
        ))
    elif _anniversary_reached(p.sentence_completed_date, cfg.rehabilitation_years, today):
        out.findings.append(_Finding(
            InadmissibilityGround.CRIMINALITY,
            Severity.MEDIUM,
            SuccessLikelihood.MEDIUM,
            "Eligible to apply for Criminal Rehabilitation.",
        ))
        out.strategies.append(DefenseStrategy(
            title="Apply for Rehabilitation",
            arguments=(f"{cfg.rehabilitation_years} years passed", "Good moral character"),
            recommended_documents=("Form IMM 1444",),
        ))
    else:
        out.findings.append(_Finding(
            InadmissibilityGround.CRIMINALITY,
            Severity.HIGH,
            SuccessLikelihood.MEDIUM,
            "Too early for rehabilitation. Entry before then requires a Temporary Resident Permit.",
        ))
        out.strategies.append(_trp_strategy())


def _trp_strategy() -> DefenseStrategy:
    return DefenseStrategy(
        title="Temporary Resident Permit (TRP) - Hardship Argument",
        arguments=("Need to enter Canada outweighs risk", "Compelling economic or family reason"),
        recommended_documents=("TRP Application", "Proof of significant benefit to Canada"),
    )


# ── Medical ────────────────────────────────────────────────────────────


def _check_medical(p: LegalProfile, out: _Analysis) -> None:
    threshold = settings.compliance.medical_cost_threshold
    cost = p.annual_treatment_cost or Decimal("0")

    if cost > threshold:
        out.findings.append(_Finding(
            InadmissibilityGround.MEDICAL_EXCESSIVE_DEMAND,
            Severity.HIGH,
            SuccessLikelihood.MEDIUM,
            "Expected to receive a Procedural Fairness Letter. Respond with a mitigation plan.",
        ))
        out.strategies.append(DefenseStrategy(
            title="Procedural Fairness Response - Mitigation Plan",
            arguments=(
                "Ability to defray costs (private insurance not always accepted but willingness helps)",
                "Challenge the officer's cost calculation (Fairness Letter)",
                "Provide specialist report proving lower actual costs than generic average",
            ),
            recommended_documents=("Specialist Medical Report", "Individualized Cost Mitigation Plan"),
        ))
    else:
        out.strategies.append(DefenseStrategy(
            title="Cost Compliance Argument",
            arguments=(
                f"Projected annual cost {cost} CAD is within the {threshold} CAD excessive demand threshold",
                "Condition is stable and managed",
            ),
            recommended_documents=("Treating Physician Letter with cost estimate",),
        ))


# ── Prior refusals ─────────────────────────────────────────────────────


def _check_refusal(p: LegalProfile, today: date, out: _Analysis) -> None:
    reason = p.refusal_reason or RefusalReason.OTHER

    if reason == RefusalReason.MISREPRESENTATION:
        ban = settings.compliance.misrepresentation_ban_years
        # Unknown refusal date is treated as a ban still running
        if _anniversary_reached(p.refusal_date, ban, today):
            out.strategies.append(DefenseStrategy(
                title="Misrepresentation Bar Expired",
                arguments=(
                    f"The {ban}-year bar from the refusal date has ended",
                    "Disclose the prior finding in full on the new application",
                ),
                recommended_documents=("Copy of the prior refusal letter", "GCMS notes"),
            ))
            return
        out.findings.append(_Finding(
            InadmissibilityGround.MISREPRESENTATION,
            Severity.CRITICAL,
            SuccessLikelihood.LOW,
            f"Misrepresentation carries a {ban}-year ban from the date of refusal.",
        ))
        out.strategies.append(DefenseStrategy(
            title="Challenge Finding of Materiality",
            arguments=(
                "Error was innocent mistake, not fraudulent intent",
                "Information was not material to the decision",
            ),
            recommended_documents=("Affidavit explaining error", "Proof of attempt to correct"),
        ))
    elif reason == RefusalReason.REFERENCE_LETTER:
        out.strategies.append(DefenseStrategy(
            title="Strengthened Reference Letter Strategy",
            arguments=(
                "Provide notarized colleague affidavits if HR refuses specific duties",
                "Include pay stubs/T4s to prove employment reality",
            ),
            recommended_documents=("Notarized Supervisor Affidavit", "Pay Stubs", "Explanation Letter"),
        ))
    elif reason == RefusalReason.FUNDS:
        out.strategies.append(DefenseStrategy(
            title="Settlement Funds Documentation Strategy",
            arguments=(
                "Show funds held continuously for at least 6 months",
                "Explain any large recent deposits with source documents",
            ),
            recommended_documents=("Official bank letters", "6-month bank statements", "Gift deed if applicable"),
        ))
    else:
        out.strategies.append(DefenseStrategy(
            title="Address Prior Refusal Reasons",
            arguments=(
                "Obtain the officer's notes to identify the exact concerns",
                "Answer each concern directly in a cover letter",
            ),
            recommended_documents=("GCMS notes", "Cover letter addressing refusal"),
        ))


def analyze_legal_defense(p: LegalProfile, today: date | None = None) -> LegalDefenseResult:
    """Determine inadmissibility exposure and defense strategies.

    With no criminal record, medical condition or refusal history the result
    is admissible with no strategies.
    """
    today = today or date.today()
    out = _Analysis()

    if p.has_criminal_record:
        _check_criminality(p, today, out)
    if p.has_medical_condition:
        _check_medical(p, out)
    if p.has_refusal_history:
        _check_refusal(p, today, out)

    if p.is_flagpoling_considered:
        out.notes.append(
            "Flagpoling: ensure strict eligibility before arriving at the port of entry. "
            "Officers have high discretion and some crossings limit flagpoling hours."
        )

    if not out.findings:
        return LegalDefenseResult(
            inadmissibility=Inadmissibility(),
            defense_strategy=tuple(out.strategies),
            procedural_notes=tuple(out.notes),
        )

    # max() keeps the first finding on ties
    primary = max(out.findings, key=lambda f: f.severity.rank)
    likelihood = min((f.likelihood for f in out.findings), key=_LIKELIHOOD_RANK.__getitem__)

    return LegalDefenseResult(
        inadmissibility=Inadmissibility(
            is_inadmissible=True,
            ground=primary.ground,
            severity=primary.severity,
            all_grounds=tuple(f.ground for f in out.findings),
        ),
        defense_strategy=tuple(out.strategies),
        probability_of_success=likelihood,
        lawyer_note=primary.note,
        procedural_notes=tuple(out.notes),
    )
