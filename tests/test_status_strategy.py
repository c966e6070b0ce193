"""Tests for the temporary-resident status strategist.

A fixed reference date keeps every case reproducible.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from pathways.compliance import analyze_status_strategy
from pathways.models.enums import Location, StatusState
from pathways.schemas.compliance import StatusInput

TODAY = date(2026, 1, 15)


def _status(days_from_today: int, **kwargs) -> StatusInput:
    return StatusInput(expiry_date=TODAY + timedelta(days=days_from_today), **kwargs)


class TestBeforeExpiry:
    def test_far_from_expiry(self) -> None:
        result = analyze_status_strategy(_status(120), today=TODAY)
        assert result.status_state == StatusState.VALID
        assert result.days_remaining == 120
        assert result.urgent_action_required is False
        assert result.restoration_deadline is None

    def test_prepare_window(self) -> None:
        result = analyze_status_strategy(_status(60), today=TODAY)
        assert result.action_plan[0] == "Prepare your extension application now."
        assert result.urgent_action_required is False

    def test_urgent_window(self) -> None:
        result = analyze_status_strategy(_status(10), today=TODAY)
        assert result.urgent_action_required is True
        assert result.action_plan[0].startswith("URGENT")

    def test_expires_today_still_valid(self) -> None:
        result = analyze_status_strategy(_status(0), today=TODAY)
        assert result.status_state == StatusState.VALID
        assert result.days_remaining == 0

    def test_extension_filed_before_expiry(self) -> None:
        result = analyze_status_strategy(_status(10, has_submitted_extension=True), today=TODAY)
        assert result.status_state == StatusState.VALID
        assert result.urgent_action_required is False
        assert any("Do not leave Canada" in n for n in result.legal_nuances)


class TestAfterExpiry:
    def test_maintained_status(self) -> None:
        result = analyze_status_strategy(_status(-10, has_submitted_extension=True), today=TODAY)
        assert result.status_state == StatusState.MAINTAINED
        assert result.days_remaining == -10
        assert result.urgent_action_required is False

    def test_restoration_period(self) -> None:
        data = _status(-10)
        result = analyze_status_strategy(data, today=TODAY)
        assert result.status_state == StatusState.RESTORATION_PERIOD
        assert result.days_remaining == -10
        assert result.urgent_action_required is True
        assert result.restoration_deadline == data.expiry_date + timedelta(days=90)
        assert "80 days left" in result.action_plan[0]

    def test_restoration_window_inclusive(self) -> None:
        result = analyze_status_strategy(_status(-90), today=TODAY)
        assert result.status_state == StatusState.RESTORATION_PERIOD

    def test_beyond_restoration_window(self) -> None:
        result = analyze_status_strategy(_status(-91), today=TODAY)
        assert result.status_state == StatusState.OUT_OF_STATUS
        assert result.days_remaining == -91
        assert result.urgent_action_required is True

    @pytest.mark.parametrize("filed", [False, True])
    def test_expired_while_outside_canada(self, filed) -> None:
        data = _status(-5, has_submitted_extension=filed, current_location=Location.OUTSIDE_CANADA)
        result = analyze_status_strategy(data, today=TODAY)
        assert result.status_state == StatusState.OUT_OF_STATUS
        assert result.restoration_deadline is None

    def test_past_expiry_always_negative(self) -> None:
        for days in (-1, -45, -200):
            result = analyze_status_strategy(_status(days), today=TODAY)
            assert result.days_remaining < 0
            assert result.status_state in (StatusState.RESTORATION_PERIOD, StatusState.OUT_OF_STATUS)


class TestDefaults:
    def test_today_defaults_to_current_date(self) -> None:
        data = StatusInput(expiry_date=date.today() + timedelta(days=400))
        result = analyze_status_strategy(data)
        assert result.status_state == StatusState.VALID
        assert result.days_remaining == 400
