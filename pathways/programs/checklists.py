"""Document checklist catalogue.

Program results only carry opaque keys; this module maps each key to a titled
list of documents for display. Unknown keys resolve to a placeholder entry so a
result never fails to render because of a missing catalogue row.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pathways.schemas.results import DocumentChecklist

logger = logging.getLogger(__name__)


def _entry(key: str, title: str, *items: str) -> tuple[str, DocumentChecklist]:
    return key, DocumentChecklist(key=key, title=title, items=items)


DOCUMENT_CHECKLISTS: dict[str, DocumentChecklist] = dict([
    # Ontario
    _entry(
        "oinp_masters_degree", "OINP Masters Graduate Stream Documents",
        "Copy of Master's Degree from eligible Ontario University",
        "Official Transcripts (final)",
        "Language Test Results (CLB 7+)",
        "Attestation of Intent to Reside in Ontario",
        "Copy of Passport (All pages)",
    ),
    _entry(
        "residency_proof_on", "Proof of Ontario Residence",
        "Lease or rental agreement",
        "Utility bills covering 12 of the last 24 months",
        "Pay stubs or T4 slips",
    ),
    _entry(
        "trade_certification_on", "Ontario Skilled Trades Documents",
        "Certificate of Qualification or apprenticeship records",
        "Reference letters from Ontario employers (duties, hours, dates)",
    ),
    # Express Entry
    _entry(
        "ee_profile_number", "Express Entry Profile",
        "Express Entry Profile Number",
        "Job Seeker Validation Code",
    ),
    _entry(
        "job_seeker_code", "Job Seeker Validation Code",
        "Job Seeker Validation Code from the Express Entry profile",
    ),
    _entry(
        "ee_profile_valid", "Valid Express Entry Profile",
        "Express Entry Profile Number (not expired)",
        "Job Seeker Validation Code",
        "Copy of the profile submission confirmation",
    ),
    _entry(
        "generic_fsw", "Federal Skilled Worker Documents",
        "ECA Report (WES/ICAS) for foreign education",
        "Language Test Results (IELTS/CELPIP)",
        "Reference Letters for all Work Experience (Roles, Hours, Salary)",
        "Police Clearance Certificates",
        "Medical Exam Confirmation",
    ),
    _entry(
        "cec_work_reference", "Canadian Experience Class Documents",
        "Reference letters for all Canadian work (duties, hours, salary)",
        "T4 slips and Notices of Assessment",
        "Copies of all work permits held",
    ),
    # British Columbia
    _entry(
        "bc_job_offer_form", "BC PNP Job Offer Documents",
        "BC PNP Job Offer Form (signed by employer)",
        "Copy of Job Description",
        "Company Business License",
        "Company Certificate of Incorporation",
    ),
    _entry(
        "employer_recommendation", "Employer Recommendation",
        "Employer Recommendation Letter",
        "Proof of the employer's operating history in BC",
    ),
    _entry(
        "degree_certificate", "Degree Certificate",
        "Copy of the degree or graduation letter from a BC institution",
    ),
    _entry(
        "transcripts_final", "Final Transcripts",
        "Official final transcripts sent by the institution",
    ),
    # Saskatchewan
    _entry(
        "settlement_funds", "Proof of Settlement Funds",
        "Bank statements for the past 6 months",
        "Statement of investments or property valuation",
    ),
    _entry(
        "settlement_plan", "SINP Settlement Plan",
        "Settlement plan describing intended community and occupation",
    ),
    # Manitoba
    _entry(
        "settlement_plan_2", "Manitoba Settlement Plan",
        "MPNP Settlement Plan Part 1",
        "MPNP Settlement Plan Part 2",
        "Proof of Funds (LICO for 6 months)",
    ),
    _entry(
        "proof_of_connection_mb", "Proof of Connection to Manitoba",
        "Proof of Close Relative (Birth certs showing relationship)",
        "Proof of Relative's Residency (MB Health Card, Bills)",
        "OR Friend's Reference Letter + Proof of Residency",
    ),
    _entry(
        "job_offer_mb", "Manitoba Job Offer",
        "Signed full-time job offer from a Manitoba employer",
        "Employer Information Form",
    ),
    _entry(
        "degree_mb", "Manitoba Credential",
        "Copy of the credential from a Manitoba institution",
        "Final transcripts",
    ),
    # Alberta
    _entry(
        "ab_job_offer", "Alberta Job Offer",
        "Signed full-time job offer from an Alberta employer",
        "Current Alberta work permit",
        "Pay stubs for the last 6 months",
    ),
    _entry(
        "lmia_or_exemption", "LMIA or Exemption",
        "Positive LMIA, or proof of an LMIA-exempt work permit",
    ),
    # Atlantic
    _entry(
        "endorsement_certificate", "Atlantic Endorsement",
        "Endorsement Certificate (issued by Province)",
        "Proof of Education",
        "Language Test Results (CLB 4+)",
    ),
    _entry(
        "designated_employer_offer", "Designated Employer Offer",
        "Offer of Employment to a Foreign National (IMM 5650)",
        "Individualized settlement plan",
    ),
    # Nova Scotia
    _entry(
        "ns_work_reference", "Nova Scotia Work Experience",
        "Reference letters from Nova Scotia employers",
        "T4 slips for Nova Scotia employment",
    ),
    _entry(
        "ns_employer_form", "NSNP Employer Documents",
        "NSNP 200 Employer Form",
        "Proof the employer has operated in Nova Scotia for 2+ years",
    ),
    _entry(
        "job_offer_letter", "Job Offer Letter",
        "Signed full-time permanent job offer letter",
    ),
    _entry(
        "education_credential", "Education Credential",
        "High school diploma or higher",
        "ECA Report for foreign education",
    ),
    _entry(
        "ns_diploma", "Nova Scotia Credential",
        "Copy of the diploma or degree from a Nova Scotia institution",
        "Final transcripts",
    ),
    # Shared
    _entry(
        "funds_proof", "Proof of Funds",
        "Bank Statements for past 3 months",
        "Letter from the bank confirming balances",
    ),
])


def get_checklist(key: str) -> DocumentChecklist | None:
    return DOCUMENT_CHECKLISTS.get(key)


def resolve_checklist(keys: Iterable[str]) -> list[DocumentChecklist]:
    """Map result checklist keys to catalogue entries, keeping input order.

    Duplicate keys are resolved once. Unknown keys produce an entry titled with
    the key itself and no items.
    """
    resolved: list[DocumentChecklist] = []
    seen: set[str] = set()
    for key in keys:
        if key in seen:
            continue
        seen.add(key)
        entry = DOCUMENT_CHECKLISTS.get(key)
        if entry is None:
            logger.warning("Unknown checklist key: %s", key)
            entry = DocumentChecklist(key=key, title=key)
        resolved.append(entry)
    return resolved
