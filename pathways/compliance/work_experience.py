"""Work-experience hours validator.

Converts hours/week × weeks into full-time-equivalent hours the way IRCC
counts them (at most 30 h/week) and flags the exclusions that make the
experience unusable for the target program.
"""

from __future__ import annotations

from pathways.config import settings
from pathways.models.enums import ProgramTarget
from pathways.schemas.compliance import WorkExperienceInput, WorkExperienceValidation


def required_hours_for(target: ProgramTarget) -> int:
    cfg = settings.compliance
    if target == ProgramTarget.FST:
        return cfg.fst_required_hours
    return cfg.full_time_year_hours


def _fmt(value: float) -> str:
    return f"{value:g}"


def validate_work_experience(data: WorkExperienceInput) -> WorkExperienceValidation:
    """Validate one block of work experience against a federal program target.

    Never raises: every input produces a validation with zero or more warnings.
    """
    cfg = settings.compliance
    cap = cfg.max_countable_hours_per_week

    counted_per_week = min(data.hours_per_week, cap)
    eligible_hours = counted_per_week * data.weeks_worked
    required = required_hours_for(data.program_target)
    target = data.program_target.value.upper()

    warnings: list[str] = []
    excluded = False

    if eligible_hours < required:
        warnings.append(
            f"Only {_fmt(eligible_hours)} eligible hours counted; "
            f"{target} requires at least {required}."
        )

    if data.program_target == ProgramTarget.CEC:
        if data.is_student:
            excluded = True
            warnings.append("Work experience gained while a full-time student does not count for CEC.")
        if data.is_coop:
            excluded = True
            warnings.append("Co-op work experience does not count for CEC.")
        if data.is_self_employed:
            excluded = True
            warnings.append("Self-employment generally does not count for CEC (unless medical/specific exceptions).")
    else:
        if data.is_seasonal:
            warnings.append("Seasonal work may break 'Continuous Employment' requirement (no gaps allowed).")
        if data.is_student:
            warnings.append(f"Student work counts for {target} only if continuous and paid. Ensure no gaps.")
        if data.is_coop:
            warnings.append(f"Co-op placements forming part of a study program are usually not accepted for {target}.")

    eligible_years = 0.0 if excluded else round(eligible_hours / cfg.full_time_year_hours, 2)

    breakdown = (
        f"Counted {_fmt(counted_per_week)} hrs/week for {_fmt(data.weeks_worked)} weeks. "
        f"Total: {_fmt(eligible_hours)} eligible hours."
    )
    if data.hours_per_week > cap:
        overtime = data.hours_per_week - cap
        breakdown += f" {_fmt(overtime)} hrs/week above the {cap} hr cap were not counted."

    return WorkExperienceValidation(
        warnings=tuple(warnings),
        eligible_hours=eligible_hours,
        required_hours=required,
        eligible_years=eligible_years,
        is_continuous=not data.is_seasonal,
        is_valid_for_program=not excluded and eligible_hours >= required,
        breakdown=breakdown,
    )

