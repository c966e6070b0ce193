"""Comprehensive Ranking System (CRS) calculator.

Pure Python, integer arithmetic. Implements the four CRS buckets:
- Core human capital: age, education, first language, Canadian work
- Spouse factors (married candidates with a spouse record only)
- Skill transferability: education and foreign-work combinations, trade certificate
- Additional points: sibling, second language, Canadian education, job offer, nomination

Language credit is driven by the weakest of the four first-language skills:
one weak skill caps proficiency credit for all four.

Tables approximate the published IRCC grid; two-or-more-credential bands are
folded into MASTERS.
"""

from __future__ import annotations

import math

from pathways.config import settings
from pathways.models.enums import EducationLevel, JobOfferTier, Jurisdiction
from pathways.schemas.profile import CandidateProfile, LanguageScores
from pathways.schemas.results import CRSBreakdown, CRSDetails, CRSResult

# ── Point tables ────────────────────────────────────────────────────────

_AGE_POINTS_SINGLE: dict[int, int] = {
    18: 99, 19: 105,
    **dict.fromkeys(range(20, 30), 110),
    30: 105, 31: 99, 32: 94, 33: 88, 34: 83, 35: 77, 36: 72, 37: 66,
    38: 61, 39: 55, 40: 50, 41: 39, 42: 28, 43: 17, 44: 6,
}
_AGE_POINTS_MARRIED: dict[int, int] = {
    18: 90, 19: 95,
    **dict.fromkeys(range(20, 30), 100),
    30: 95, 31: 90, 32: 85, 33: 80, 34: 75, 35: 70, 36: 65, 37: 60,
    38: 55, 39: 50, 40: 45, 41: 35, 42: 25, 43: 15, 44: 5,
}

# (single, married)
_EDUCATION_POINTS: dict[EducationLevel, tuple[int, int]] = {
    EducationLevel.HIGH_SCHOOL: (30, 28),
    EducationLevel.ONE_YEAR: (90, 84),
    EducationLevel.TWO_YEAR: (98, 91),
    EducationLevel.BACHELORS: (120, 112),
    EducationLevel.MASTERS: (135, 126),
    EducationLevel.PHD: (150, 140),
}

_SPOUSE_EDUCATION_POINTS: dict[EducationLevel, int] = {
    EducationLevel.HIGH_SCHOOL: 2,
    EducationLevel.ONE_YEAR: 6,
    EducationLevel.TWO_YEAR: 7,
    EducationLevel.BACHELORS: 8,
    EducationLevel.MASTERS: 10,
    EducationLevel.PHD: 10,
}

# Per skill, keyed by CLB (capped at 10). Below CLB 4 → 0.
_LANGUAGE_POINTS_SINGLE: dict[int, int] = {4: 6, 5: 6, 6: 9, 7: 17, 8: 23, 9: 31, 10: 34}
_LANGUAGE_POINTS_MARRIED: dict[int, int] = {4: 6, 5: 6, 6: 8, 7: 16, 8: 22, 9: 29, 10: 32}

# Keyed by whole years (5 = five or more)
_CANADIAN_WORK_SINGLE: dict[int, int] = {1: 40, 2: 53, 3: 64, 4: 72, 5: 80}
_CANADIAN_WORK_MARRIED: dict[int, int] = {1: 35, 2: 46, 3: 56, 4: 63, 5: 70}
_SPOUSE_WORK: dict[int, int] = {1: 5, 2: 7, 3: 8, 4: 9, 5: 10}

_ONE_CREDENTIAL = frozenset({EducationLevel.ONE_YEAR, EducationLevel.TWO_YEAR, EducationLevel.BACHELORS})
_ADVANCED_CREDENTIAL = frozenset({EducationLevel.MASTERS, EducationLevel.PHD})

_TRANSFERABILITY_PAIR_CAP = 50

SIBLING_POINTS = 15
SECOND_LANGUAGE_POINTS = 50
SECOND_LANGUAGE_ONLY_POINTS = 25
CANADIAN_EDUCATION_SHORT_POINTS = 15
CANADIAN_EDUCATION_LONG_POINTS = 30
JOB_OFFER_POINTS = 50
NOMINATION_POINTS = 600


# ── Helpers ─────────────────────────────────────────────────────────────


def _whole_years(years: float, ceiling: int = 5) -> int:
    """Floor fractional years; never round up into the next band."""
    return min(ceiling, math.floor(years))


def _age_points(age: int, married: bool) -> int:
    table = _AGE_POINTS_MARRIED if married else _AGE_POINTS_SINGLE
    return table.get(age, 0)


def _language_points(language: LanguageScores, married: bool) -> int:
    """Four skills, each credited at the level of the weakest skill."""
    clb = min(language.minimum, 10)
    table = _LANGUAGE_POINTS_MARRIED if married else _LANGUAGE_POINTS_SINGLE
    return 4 * table.get(clb, 0)


def _canadian_work_points(years: float, married: bool) -> int:
    table = _CANADIAN_WORK_MARRIED if married else _CANADIAN_WORK_SINGLE
    return table.get(_whole_years(years), 0)


def _spouse_language_points(language: LanguageScores | None) -> int:
    if language is None:
        return 0

    def per_skill(clb: int) -> int:
        if clb >= 9:
            return 5
        if clb >= 7:
            return 3
        if clb >= 5:
            return 1
        return 0

    return sum(
        per_skill(clb)
        for clb in (language.listening, language.reading, language.writing, language.speaking)
    )


def _credential_band(level: EducationLevel, low: int, high: int) -> int:
    """Points for one post-secondary credential (low) or an advanced one (high)."""
    if level in _ADVANCED_CREDENTIAL:
        return high
    if level in _ONE_CREDENTIAL:
        return low
    return 0


def _experience_band(years: int, low: int, high: int, high_from: int) -> int:
    if years >= high_from:
        return high
    if years >= 1:
        return low
    return 0


# ── Buckets ─────────────────────────────────────────────────────────────


def _transferability(profile: CandidateProfile) -> tuple[int, int, int]:
    """Return (education pair, foreign-work pair, certificate) points, each pre-capped."""
    lang = profile.first_language
    edu = profile.education_level
    canadian = _whole_years(profile.work.canadian_years)
    foreign = _whole_years(profile.work.foreign_years, ceiling=3)

    # A. Education × language
    if lang.all_at_least(9):
        edu_lang = _credential_band(edu, 25, 50)
    elif lang.all_at_least(7):
        edu_lang = _credential_band(edu, 13, 25)
    else:
        edu_lang = 0

    # B. Education × Canadian work
    if canadian >= 2:
        edu_work = _credential_band(edu, 25, 50)
    elif canadian == 1:
        edu_work = _credential_band(edu, 13, 25)
    else:
        edu_work = 0

    # C. Foreign work × language
    if lang.all_at_least(9):
        foreign_lang = _experience_band(foreign, 25, 50, high_from=3)
    elif lang.all_at_least(7):
        foreign_lang = _experience_band(foreign, 13, 25, high_from=3)
    else:
        foreign_lang = 0

    # D. Foreign work × Canadian work
    if canadian >= 2:
        foreign_canadian = _experience_band(foreign, 25, 50, high_from=3)
    elif canadian == 1:
        foreign_canadian = _experience_band(foreign, 13, 25, high_from=3)
    else:
        foreign_canadian = 0

    # E. Certificate of qualification × language
    certificate = 0
    if profile.has_trade_certificate:
        if lang.all_at_least(7):
            certificate = 50
        elif lang.all_at_least(5):
            certificate = 25

    return (
        min(_TRANSFERABILITY_PAIR_CAP, edu_lang + edu_work),
        min(_TRANSFERABILITY_PAIR_CAP, foreign_lang + foreign_canadian),
        certificate,
    )


def _second_language_points(profile: CandidateProfile) -> int:
    second = profile.second_language
    if second is None or not second.all_at_least(7):
        return 0
    if profile.first_language.all_at_least(5):
        return SECOND_LANGUAGE_POINTS
    return SECOND_LANGUAGE_ONLY_POINTS


def _canadian_education_points(profile: CandidateProfile) -> int:
    credential = profile.canadian_education
    if credential is None or not credential.completed:
        return 0
    if credential.level.at_least(EducationLevel.BACHELORS):
        return CANADIAN_EDUCATION_LONG_POINTS
    if credential.level in (EducationLevel.ONE_YEAR, EducationLevel.TWO_YEAR):
        return CANADIAN_EDUCATION_SHORT_POINTS
    return 0


def _job_offer_points(profile: CandidateProfile) -> int:
    offer = profile.work.job_offer
    if offer is None or offer.jurisdiction == Jurisdiction.OUTSIDE_CANADA:
        return 0
    return JOB_OFFER_POINTS if offer.tier == JobOfferTier.HIGH_SKILL else 0


# ── Calculator ──────────────────────────────────────────────────────────


def calculate_crs(profile: CandidateProfile) -> CRSResult:
    """Compute the CRS score for a candidate profile.

    Total function over the profile schema's domain. Returns the bounded total,
    the four-bucket breakdown (which always sums to the total) and per-factor
    detail points.
    """
    married = profile.is_married

    # Core human capital
    age = _age_points(profile.age, married)
    education = _EDUCATION_POINTS[profile.education_level][1 if married else 0]
    language = _language_points(profile.first_language, married)
    canadian_work = _canadian_work_points(profile.work.canadian_years, married)
    core = age + education + language + canadian_work

    # Spouse factors
    spouse_edu = spouse_lang = spouse_work = 0
    if married and profile.spouse is not None:
        spouse = profile.spouse
        if spouse.education_level is not None:
            spouse_edu = _SPOUSE_EDUCATION_POINTS[spouse.education_level]
        spouse_lang = _spouse_language_points(spouse.language)
        spouse_work = _SPOUSE_WORK.get(_whole_years(spouse.canadian_years), 0)
    spouse_total = spouse_edu + spouse_lang + spouse_work

    # Skill transferability
    trans_edu, trans_foreign, trans_cert = _transferability(profile)
    transferability = min(settings.crs.transferability_max, trans_edu + trans_foreign + trans_cert)

    # Additional points
    sibling = SIBLING_POINTS if profile.sibling_in_canada else 0
    second_language = _second_language_points(profile)
    canadian_education = _canadian_education_points(profile)
    job_offer = _job_offer_points(profile)
    nomination = NOMINATION_POINTS if profile.has_provincial_nomination else 0
    additional = min(
        settings.crs.additional_max,
        sibling + second_language + canadian_education + job_offer + nomination,
    )

    # Clamp to the scale; trim the additional bucket first so buckets still sum
    overflow = max(0, core + spouse_total + transferability + additional - settings.crs.scale_max)
    if overflow:
        trimmed = min(overflow, additional)
        additional -= trimmed
        overflow -= trimmed
        transferability -= min(overflow, transferability)

    breakdown = CRSBreakdown(
        core=core,
        spouse=spouse_total,
        transferability=transferability,
        additional=additional,
    )
    return CRSResult(
        total=breakdown.total,
        breakdown=breakdown,
        details=CRSDetails(
            age=age,
            education=education,
            language=language,
            canadian_work=canadian_work,
            spouse_education=spouse_edu,
            spouse_language=spouse_lang,
            spouse_work=spouse_work,
            transferability_education=trans_edu,
            transferability_foreign=trans_foreign,
            transferability_certificate=trans_cert,
            sibling=sibling,
            second_language=second_language,
            canadian_education=canadian_education,
            job_offer=job_offer,
            nomination=nomination,
        ),
    )
