"""Compliance validators: work experience, status timing, inadmissibility."""

from pathways.compliance.legal import analyze_legal_defense
from pathways.compliance.status import analyze_status_strategy
from pathways.compliance.work_experience import required_hours_for, validate_work_experience

__all__ = [
    "analyze_legal_defense",
    "analyze_status_strategy",
    "required_hours_for",
    "validate_work_experience",
]
