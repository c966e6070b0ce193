"""Tests for the assessment facade."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from pathways.assessment import build_assessment
from pathways.models.enums import EducationLevel, RefusalReason, StatusState
from pathways.schemas.assessment import AssessmentRequest
from pathways.schemas.compliance import LegalProfile, StatusInput, WorkExperienceInput
from pathways.schemas.profile import LanguageScores, WorkExperience

TODAY = date(2026, 1, 15)


class TestProfileOnly:
    @pytest.fixture()
    def report(self, baseline_profile):
        return build_assessment(AssessmentRequest(profile=baseline_profile))

    def test_crs(self, report) -> None:
        assert report.crs.total == 509

    def test_eligible_count(self, report) -> None:
        assert report.eligible_count == sum(1 for p in report.programs if p.eligible)
        assert report.eligible_count == 6

    def test_best_opportunity_is_top_eligible(self, report) -> None:
        assert report.best_opportunity == report.programs[0]
        assert report.best_opportunity.eligible is True

    def test_no_compliance_requested(self, report) -> None:
        assert report.compliance.work_experience is None
        assert report.compliance.status is None
        assert report.compliance.legal is None

    def test_no_risk_flags(self, report) -> None:
        assert report.risk_flags == ()

    def test_profile_summary(self, report) -> None:
        summary = report.profile_summary
        assert summary["age"] == 29
        assert summary["crs_total"] == 509
        assert summary["job_offer_tier"] is None
        assert summary["first_language_min_clb"] == 9

    def test_deterministic(self, baseline_profile) -> None:
        request = AssessmentRequest(profile=baseline_profile, today=TODAY)
        assert build_assessment(request) == build_assessment(request)


class TestWithCompliance:
    @pytest.fixture()
    def report(self, baseline_profile):
        request = AssessmentRequest(
            profile=baseline_profile,
            work_experience=WorkExperienceInput(hours_per_week=15, weeks_worked=20),
            status=StatusInput(expiry_date=TODAY - timedelta(days=10)),
            legal=LegalProfile(
                has_refusal_history=True,
                refusal_reason=RefusalReason.MISREPRESENTATION,
                refusal_date=date(2025, 1, 1),
            ),
            today=TODAY,
        )
        return build_assessment(request)

    def test_all_findings_present(self, report) -> None:
        assert report.compliance.work_experience is not None
        assert report.compliance.status.status_state == StatusState.RESTORATION_PERIOD
        assert report.compliance.legal.inadmissibility.is_inadmissible is True

    def test_risk_flags(self, report) -> None:
        flags = " | ".join(report.risk_flags)
        assert "Work experience does not qualify" in flags
        assert "urgent action required" in flags
        assert "Inadmissibility risk: misrepresentation" in flags


class TestWeakProfile:
    def test_no_eligible_programs(self, make_profile) -> None:
        profile = make_profile(
            age=50,
            education_level=EducationLevel.HIGH_SCHOOL,
            first_language=LanguageScores.uniform(4),
            work=WorkExperience(),
        )
        report = build_assessment(AssessmentRequest(profile=profile))
        assert report.eligible_count == 0
        assert report.best_opportunity is None
        assert any("No eligible" in f for f in report.risk_flags)
        assert any("below recent general draw" in f for f in report.risk_flags)
