"""Domain enums for the assessment engine.

No ORM here: the engine persists nothing, so this package only carries the
closed vocabularies every schema and rule module shares.
"""

from __future__ import annotations

from pathways.models.enums import (
    ATLANTIC_JURISDICTIONS,
    DrawProbability,
    EducationLevel,
    FieldOfStudy,
    InadmissibilityGround,
    JobOfferTier,
    Jurisdiction,
    LanguageTest,
    Location,
    MaritalStatus,
    MedicalConditionType,
    OccupationCategory,
    OffenseType,
    ProgramCode,
    ProgramTarget,
    RefusalReason,
    Severity,
    Skill,
    StatusState,
    SuccessLikelihood,
)

__all__ = [
    "ATLANTIC_JURISDICTIONS",
    "DrawProbability",
    "EducationLevel",
    "FieldOfStudy",
    "InadmissibilityGround",
    "JobOfferTier",
    "Jurisdiction",
    "LanguageTest",
    "Location",
    "MaritalStatus",
    "MedicalConditionType",
    "OccupationCategory",
    "OffenseType",
    "ProgramCode",
    "ProgramTarget",
    "RefusalReason",
    "Severity",
    "Skill",
    "StatusState",
    "SuccessLikelihood",
]
