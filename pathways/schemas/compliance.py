"""Inputs and outputs of the three compliance validators.

Each validator reads a narrow sub-record rather than the full candidate
profile, so callers can run them independently of program matching.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from pathways.models.enums import (
    InadmissibilityGround,
    Location,
    MedicalConditionType,
    OffenseType,
    ProgramTarget,
    RefusalReason,
    Severity,
    StatusState,
    SuccessLikelihood,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Work experience
# ---------------------------------------------------------------------------


class WorkExperienceInput(_Frozen):
    hours_per_week: float = Field(ge=0)
    weeks_worked: float = Field(ge=0)
    is_seasonal: bool = False
    is_student: bool = False
    is_self_employed: bool = False
    is_coop: bool = False
    program_target: ProgramTarget = ProgramTarget.CEC


class WorkExperienceValidation(_Frozen):
    warnings: tuple[str, ...] = ()
    eligible_hours: float
    required_hours: int
    eligible_years: float
    is_continuous: bool
    is_valid_for_program: bool
    breakdown: str


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------


class StatusInput(_Frozen):
    expiry_date: date
    has_submitted_extension: bool = False  # filed before expiry
    current_location: Location = Location.INSIDE_CANADA


class StatusStrategyResult(_Frozen):
    status_state: StatusState
    days_remaining: int                     # negative → already expired
    action_plan: tuple[str, ...] = ()
    legal_nuances: tuple[str, ...] = ()
    urgent_action_required: bool = False
    restoration_deadline: date | None = None


# ---------------------------------------------------------------------------
# Legal defense
# ---------------------------------------------------------------------------


class LegalProfile(_Frozen):
    # Criminality
    has_criminal_record: bool = False
    offense_type: OffenseType | None = None
    offense_max_sentence_years: float | None = Field(default=None, ge=0)  # receiving-country equivalent
    sentence_completed_date: date | None = None

    # Medical
    has_medical_condition: bool = False
    condition_type: MedicalConditionType | None = None
    annual_treatment_cost: Decimal | None = Field(default=None, ge=0)

    # Prior refusals
    has_refusal_history: bool = False
    refusal_reason: RefusalReason | None = None
    refusal_date: date | None = None

    is_flagpoling_considered: bool = False


class Inadmissibility(_Frozen):
    is_inadmissible: bool = False
    ground: InadmissibilityGround | None = None
    severity: Severity | None = None
    all_grounds: tuple[InadmissibilityGround, ...] = ()


class DefenseStrategy(_Frozen):
    title: str
    arguments: tuple[str, ...]
    recommended_documents: tuple[str, ...] = ()


class LegalDefenseResult(_Frozen):
    inadmissibility: Inadmissibility
    defense_strategy: tuple[DefenseStrategy, ...] = ()
    probability_of_success: SuccessLikelihood = SuccessLikelihood.HIGH
    lawyer_note: str = "Standard application risk"
    procedural_notes: tuple[str, ...] = ()
