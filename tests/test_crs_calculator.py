"""Tests for the CRS calculator.

Tests cover:
- Core factors for single and married candidates
- Language credit driven by the weakest skill
- Skill transferability caps
- Additional points and bucket caps
- Breakdown always summing to the total
"""

from __future__ import annotations

import pytest

from pathways.calculators.crs import calculate_crs
from pathways.models.enums import EducationLevel, JobOfferTier, Jurisdiction, MaritalStatus
from pathways.schemas.profile import (
    CanadianEducation,
    JobOffer,
    LanguageScores,
    SpouseProfile,
    WorkExperience,
)


class TestCoreFactors:
    """Core human capital for the baseline single candidate."""

    def test_baseline_total(self, baseline_profile) -> None:
        """29, Masters, CLB 9, 1 yr Canadian + 3 yr foreign → 409 core + 100 transferability."""
        result = calculate_crs(baseline_profile)
        assert result.breakdown.core == 409
        assert result.breakdown.transferability == 100
        assert result.breakdown.spouse == 0
        assert result.breakdown.additional == 0
        assert result.total == 509

    def test_detail_points(self, baseline_profile) -> None:
        details = calculate_crs(baseline_profile).details
        assert details.age == 110
        assert details.education == 135
        assert details.language == 124  # 4 × 31
        assert details.canadian_work == 40

    @pytest.mark.parametrize("age", [17, 45, 60])
    def test_age_outside_table_scores_zero(self, make_profile, age) -> None:
        assert calculate_crs(make_profile(age=age)).details.age == 0

    def test_age_decreases_after_29(self, make_profile) -> None:
        young = calculate_crs(make_profile(age=29)).details.age
        older = calculate_crs(make_profile(age=35)).details.age
        assert older < young

    def test_fractional_canadian_years_floored(self, make_profile) -> None:
        """1.9 years of Canadian work is still the 1-year band."""
        profile = make_profile(work=WorkExperience(canadian_years=1.9, foreign_years=3))
        assert calculate_crs(profile).details.canadian_work == 40

    def test_canadian_work_capped_at_five_years(self, make_profile) -> None:
        profile = make_profile(work=WorkExperience(canadian_years=8))
        assert calculate_crs(profile).details.canadian_work == 80


class TestLanguageMinimum:
    """Language credit depends only on the weakest skill."""

    def test_one_weak_skill_caps_all(self, make_profile) -> None:
        uneven = LanguageScores(listening=10, reading=10, writing=10, speaking=7)
        a = calculate_crs(make_profile(first_language=uneven)).details.language
        b = calculate_crs(make_profile(first_language=LanguageScores.uniform(7))).details.language
        assert a == b == 4 * 17

    def test_clb_above_ten_capped(self, make_profile) -> None:
        a = calculate_crs(make_profile(first_language=LanguageScores.uniform(12))).details.language
        b = calculate_crs(make_profile(first_language=LanguageScores.uniform(10))).details.language
        assert a == b == 4 * 34

    def test_below_clb4_scores_zero(self, make_profile) -> None:
        profile = make_profile(first_language=LanguageScores.uniform(3))
        assert calculate_crs(profile).details.language == 0


class TestMarried:
    """Married candidates use the married tables and earn spouse points."""

    @pytest.fixture()
    def result(self, make_profile):
        profile = make_profile(
            age=30,
            marital_status=MaritalStatus.MARRIED,
            education_level=EducationLevel.BACHELORS,
            first_language=LanguageScores.uniform(8),
            work=WorkExperience(canadian_years=2, foreign_years=0),
            spouse=SpouseProfile(
                education_level=EducationLevel.BACHELORS,
                language=LanguageScores.uniform(7),
                canadian_years=1,
            ),
        )
        return calculate_crs(profile)

    def test_core(self, result) -> None:
        """95 age + 112 education + 88 language + 46 Canadian work."""
        assert result.breakdown.core == 341

    def test_spouse(self, result) -> None:
        assert result.details.spouse_education == 8
        assert result.details.spouse_language == 12
        assert result.details.spouse_work == 5
        assert result.breakdown.spouse == 25

    def test_transferability(self, result) -> None:
        """Bachelors: CLB 8 → 13, 2 yrs Canadian → 25; no foreign work."""
        assert result.details.transferability_education == 38
        assert result.details.transferability_foreign == 0

    def test_total(self, result) -> None:
        assert result.total == 404

    def test_spouse_ignored_when_single(self, make_profile) -> None:
        profile = make_profile(spouse=SpouseProfile(education_level=EducationLevel.PHD))
        assert calculate_crs(profile).breakdown.spouse == 0


class TestAdditionalPoints:
    """Sibling, second language, Canadian education, job offer, nomination."""

    def test_sibling(self, make_profile) -> None:
        assert calculate_crs(make_profile(sibling_in_canada=True)).details.sibling == 15

    def test_second_language(self, make_profile) -> None:
        profile = make_profile(second_language=LanguageScores.uniform(7))
        assert calculate_crs(profile).details.second_language == 50

    def test_second_language_below_seven_ignored(self, make_profile) -> None:
        profile = make_profile(second_language=LanguageScores.uniform(6))
        assert calculate_crs(profile).details.second_language == 0

    def test_canadian_degree(self, make_profile) -> None:
        profile = make_profile(
            canadian_education=CanadianEducation(
                jurisdiction=Jurisdiction.ONTARIO, level=EducationLevel.MASTERS,
            ),
        )
        assert calculate_crs(profile).details.canadian_education == 30

    def test_canadian_diploma(self, make_profile) -> None:
        profile = make_profile(
            canadian_education=CanadianEducation(
                jurisdiction=Jurisdiction.MANITOBA, level=EducationLevel.TWO_YEAR,
            ),
        )
        assert calculate_crs(profile).details.canadian_education == 15

    def test_unfinished_credential_ignored(self, make_profile) -> None:
        profile = make_profile(
            canadian_education=CanadianEducation(
                jurisdiction=Jurisdiction.ONTARIO, level=EducationLevel.MASTERS, completed=False,
            ),
        )
        assert calculate_crs(profile).details.canadian_education == 0

    def test_high_skill_job_offer(self, make_profile) -> None:
        work = WorkExperience(
            canadian_years=1,
            foreign_years=3,
            job_offer=JobOffer(tier=JobOfferTier.HIGH_SKILL, jurisdiction=Jurisdiction.ALBERTA),
        )
        assert calculate_crs(make_profile(work=work)).details.job_offer == 50

    def test_semi_skill_job_offer_scores_nothing(self, make_profile) -> None:
        work = WorkExperience(
            job_offer=JobOffer(tier=JobOfferTier.SEMI_SKILL, jurisdiction=Jurisdiction.ALBERTA),
        )
        assert calculate_crs(make_profile(work=work)).details.job_offer == 0

    def test_nomination(self, baseline_profile, make_profile) -> None:
        base = calculate_crs(baseline_profile).total
        nominated = calculate_crs(make_profile(has_provincial_nomination=True))
        assert nominated.details.nomination == 600
        assert nominated.total == base + 600

    def test_additional_capped(self, make_profile) -> None:
        profile = make_profile(
            has_provincial_nomination=True,
            sibling_in_canada=True,
            second_language=LanguageScores.uniform(9),
        )
        assert calculate_crs(profile).breakdown.additional == 600


class TestBounds:
    """Breakdown sums to total; total stays on the 0..1200 scale."""

    def test_trade_certificate_capped_by_transferability(self, make_profile) -> None:
        profile = make_profile(has_trade_certificate=True)
        result = calculate_crs(profile)
        assert result.details.transferability_certificate == 50
        assert result.breakdown.transferability == 100

    def test_maximal_profile_within_scale(self, make_profile) -> None:
        profile = make_profile(
            age=25,
            education_level=EducationLevel.PHD,
            first_language=LanguageScores.uniform(12),
            second_language=LanguageScores.uniform(12),
            work=WorkExperience(
                canadian_years=6,
                foreign_years=6,
                job_offer=JobOffer(jurisdiction=Jurisdiction.ONTARIO),
            ),
            canadian_education=CanadianEducation(
                jurisdiction=Jurisdiction.ONTARIO, level=EducationLevel.PHD,
            ),
            sibling_in_canada=True,
            has_provincial_nomination=True,
            has_trade_certificate=True,
        )
        result = calculate_crs(profile)
        assert 0 <= result.total <= 1200
        assert result.total == result.breakdown.total

    def test_minimal_profile(self, make_profile) -> None:
        profile = make_profile(
            age=50,
            education_level=EducationLevel.HIGH_SCHOOL,
            first_language=LanguageScores.uniform(0),
            work=WorkExperience(),
        )
        result = calculate_crs(profile)
        assert result.total == 30
        assert result.total == result.breakdown.total

    def test_deterministic(self, baseline_profile) -> None:
        assert calculate_crs(baseline_profile) == calculate_crs(baseline_profile)
