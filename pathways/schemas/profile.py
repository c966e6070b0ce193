"""Candidate profile: the single input record every engine component reads.

Pure data classes, frozen once constructed. Built by the caller's form layer
from the current form state and discarded after the assessment is rendered.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from pathways.models.enums import (
    EducationLevel,
    FieldOfStudy,
    JobOfferTier,
    Jurisdiction,
    MaritalStatus,
    OccupationCategory,
)

CLB_MAX = 12


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Language
# ---------------------------------------------------------------------------


class LanguageScores(_Frozen):
    """CLB-equivalent score per skill."""

    listening: int = Field(ge=0, le=CLB_MAX)
    reading: int = Field(ge=0, le=CLB_MAX)
    writing: int = Field(ge=0, le=CLB_MAX)
    speaking: int = Field(ge=0, le=CLB_MAX)

    @classmethod
    def uniform(cls, clb: int) -> LanguageScores:
        """Same CLB level across all four skills."""
        return cls(listening=clb, reading=clb, writing=clb, speaking=clb)

    @property
    def minimum(self) -> int:
        """Weakest skill; caps proficiency credit everywhere."""
        return min(self.listening, self.reading, self.writing, self.speaking)

    @property
    def oral_minimum(self) -> int:
        """Weakest of listening and speaking (some provincial grids only test these)."""
        return min(self.listening, self.speaking)

    def all_at_least(self, clb: int) -> bool:
        return self.minimum >= clb


# ---------------------------------------------------------------------------
# Education / work
# ---------------------------------------------------------------------------


class CanadianEducation(_Frozen):
    """Credential obtained in Canada."""

    jurisdiction: Jurisdiction
    level: EducationLevel
    completed: bool = True


class JobOffer(_Frozen):
    """Arranged employment."""

    tier: JobOfferTier = JobOfferTier.HIGH_SKILL
    jurisdiction: Jurisdiction
    hourly_wage: Decimal = Field(default=Decimal("0"), ge=0)
    occupation: OccupationCategory = OccupationCategory.OTHER


class PastJob(_Frozen):
    years: float = Field(ge=0)
    occupation: OccupationCategory = OccupationCategory.OTHER
    annual_earnings: Decimal = Field(default=Decimal("0"), ge=0)


class WorkExperience(_Frozen):
    canadian_years: float = Field(default=0, ge=0)
    foreign_years: float = Field(default=0, ge=0)
    current_jurisdiction: Jurisdiction = Jurisdiction.OUTSIDE_CANADA
    job_offer: JobOffer | None = None
    history: tuple[PastJob, ...] = ()


# ---------------------------------------------------------------------------
# Connections / family
# ---------------------------------------------------------------------------


class Connections(_Frozen):
    """Jurisdictions where the candidate has each kind of tie (membership only)."""

    relatives: frozenset[Jurisdiction] = frozenset()
    friends: frozenset[Jurisdiction] = frozenset()
    past_study: frozenset[Jurisdiction] = frozenset()
    past_work: frozenset[Jurisdiction] = frozenset()

    def any_in(self, jurisdiction: Jurisdiction) -> bool:
        return any(
            jurisdiction in group
            for group in (self.relatives, self.friends, self.past_study, self.past_work)
        )


class SpouseProfile(_Frozen):
    """Accompanying spouse, only read when marital status is MARRIED."""

    education_level: EducationLevel | None = None
    language: LanguageScores | None = None
    canadian_years: float = Field(default=0, ge=0)


# ---------------------------------------------------------------------------
# Candidate
# ---------------------------------------------------------------------------


class CandidateProfile(_Frozen):
    """Normalized applicant record fed into the CRS calculator and every program module."""

    # Personal
    age: int = Field(ge=0)
    marital_status: MaritalStatus = MaritalStatus.SINGLE

    # Education
    education_level: EducationLevel
    field_of_study: FieldOfStudy = FieldOfStudy.OTHER
    canadian_education: CanadianEducation | None = None

    # Language (second language is usually French)
    first_language: LanguageScores
    second_language: LanguageScores | None = None

    # Work
    work: WorkExperience = Field(default_factory=WorkExperience)

    # Ties / intent
    connections: Connections = Field(default_factory=Connections)
    intent_jurisdictions: frozenset[Jurisdiction] = frozenset()

    # CRS additional factors
    spouse: SpouseProfile | None = None
    sibling_in_canada: bool = False
    has_provincial_nomination: bool = False
    has_trade_certificate: bool = False

    @property
    def is_married(self) -> bool:
        return self.marital_status == MaritalStatus.MARRIED
