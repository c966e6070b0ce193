"""Temporary-resident status strategist.

Classifies the applicant's status from the permit expiry date, whether an
extension was filed before expiry, and where the applicant is now. Each state
comes with an ordered action plan.
"""

from __future__ import annotations

from datetime import date, timedelta

from pathways.config import settings
from pathways.models.enums import Location, StatusState
from pathways.schemas.compliance import StatusInput, StatusStrategyResult


def _valid(data: StatusInput, days: int) -> StatusStrategyResult:
    cfg = settings.compliance
    plan: list[str] = []
    nuances: list[str] = []
    urgent = False

    if data.has_submitted_extension:
        plan.append("Extension application filed. Your current permit remains valid until it expires.")
        plan.append("If a decision has not arrived by the expiry date you will be on Maintained Status.")
        nuances.append("Do not leave Canada while the extension is pending. Leaving ends Maintained Status.")
    elif days < cfg.urgent_window_days:
        urgent = True
        plan.append("URGENT: Apply for extension IMMEDIATELY.")
        plan.append(
            "IRCC recommends a 30 day buffer, but you can apply up to the last day (UTC time). Don't risk it."
        )
    elif days < cfg.prepare_window_days:
        plan.append("Prepare your extension application now.")
    else:
        plan.append("No action needed yet. Start preparing an extension 90 days before expiry.")

    if not data.has_submitted_extension:
        nuances.append(
            "Strategy: If you don't have an ITA or LMIA yet, apply for a Visitor Record BEFORE expiry to stay legal."
        )
        nuances.append("Note: Changing to Visitor stops your ability to work, but keeps you in Canada legally.")

    return StatusStrategyResult(
        status_state=StatusState.VALID,
        days_remaining=days,
        action_plan=tuple(plan),
        legal_nuances=tuple(nuances),
        urgent_action_required=urgent,
    )


def _maintained(days: int) -> StatusStrategyResult:
    return StatusStrategyResult(
        status_state=StatusState.MAINTAINED,
        days_remaining=days,
        action_plan=(
            "You are legally in Canada on Maintained Status (formerly Implied Status).",
            "You can continue working under the exact same conditions as your original permit.",
        ),
        legal_nuances=(
            "Keep proof of your application (AOR) on you at all times.",
            "Do not leave Canada. If you leave, you lose Maintained Status and may not be able to work upon re-entry.",
        ),
    )


def _restoration(days: int, deadline: date, days_left: int) -> StatusStrategyResult:
    return StatusStrategyResult(
        status_state=StatusState.RESTORATION_PERIOD,
        days_remaining=days,
        action_plan=(
            f"CRITICAL: You are OUT OF STATUS. You have {days_left} days left to apply for Restoration "
            f"(deadline {deadline.isoformat()}).",
            "STOP WORKING IMMEDIATELY. You have no authorization to work.",
            "Apply for 'Restoration of Status' + New Permit (Worker/Visitor).",
        ),
        legal_nuances=("Restoration is not guaranteed. You must explain why you overstayed.",),
        urgent_action_required=True,
        restoration_deadline=deadline,
    )


def _out_of_status(days: int, data: StatusInput, deadline: date) -> StatusStrategyResult:
    if data.current_location == Location.OUTSIDE_CANADA:
        plan = (
            "Your permit expired while you were outside Canada. You have no status to restore from abroad.",
            "Apply for a new visa or permit from outside Canada before travelling.",
        )
        nuances = ("A pending extension does not maintain status once you leave Canada.",)
    else:
        plan = (
            f"You are beyond the {settings.compliance.restoration_window_days}-day restoration period.",
            "You have no legal standing to apply for restoration from inside Canada.",
            "Must leave Canada immediately or face deportation/bans.",
        )
        nuances = ("Consult a lawyer for TRP (Temporary Resident Permit) only in extreme humanitarian cases.",)

    return StatusStrategyResult(
        status_state=StatusState.OUT_OF_STATUS,
        days_remaining=days,
        action_plan=plan,
        legal_nuances=nuances,
        urgent_action_required=True,
        restoration_deadline=deadline if data.current_location == Location.INSIDE_CANADA else None,
    )


def analyze_status_strategy(data: StatusInput, today: date | None = None) -> StatusStrategyResult:
    """Classify status and produce an action plan.

    ``days_remaining`` is always ``expiry_date - today`` in days, so it is
    negative once the permit has expired. ``today`` defaults to the current
    date; pass it explicitly for reproducible results.
    """
    today = today or date.today()
    days = (data.expiry_date - today).days

    if days >= 0:
        return _valid(data, days)

    inside = data.current_location == Location.INSIDE_CANADA
    if data.has_submitted_extension and inside:
        return _maintained(days)

    window = settings.compliance.restoration_window_days
    deadline = data.expiry_date + timedelta(days=window)
    days_past = -days
    if inside and days_past <= window:
        return _restoration(days, deadline, window - days_past)
    return _out_of_status(days, data, deadline)
