"""Shared fixtures: candidate profile builders."""

from __future__ import annotations

from typing import Any

import pytest

from pathways.models.enums import EducationLevel, FieldOfStudy, Jurisdiction
from pathways.schemas.profile import CandidateProfile, LanguageScores, WorkExperience


def build_profile(**overrides: Any) -> CandidateProfile:
    """Baseline: 29, single, Masters in STEM, CLB 9, 1 yr Canadian + 3 yr foreign, no job offer."""
    work = overrides.pop("work", None) or WorkExperience(
        canadian_years=1,
        foreign_years=3,
        current_jurisdiction=Jurisdiction.ONTARIO,
    )
    fields: dict[str, Any] = {
        "age": 29,
        "education_level": EducationLevel.MASTERS,
        "field_of_study": FieldOfStudy.STEM_HEALTH_TRADES,
        "first_language": LanguageScores.uniform(9),
        "work": work,
    }
    fields.update(overrides)
    return CandidateProfile(**fields)


@pytest.fixture()
def make_profile():
    """Factory fixture: build_profile with keyword overrides."""
    return build_profile


@pytest.fixture()
def baseline_profile() -> CandidateProfile:
    return build_profile()
