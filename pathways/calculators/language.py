"""Language test score → CLB conversion.

Callers collect raw IELTS / CELPIP / PTE band scores; the engine works on CLB
levels only. Tables approximate the IRCC equivalency charts. Scores below the
lowest band map to CLB 4, the floor the tests are designed to report.
"""

from __future__ import annotations

from pathways.models.enums import LanguageTest, Skill
from pathways.schemas.profile import LanguageScores

__all__ = ["LanguageTest", "Skill", "celpip_to_clb", "convert_test_scores", "ielts_to_clb", "pte_to_clb"]

CLB_FLOOR = 4

# (minimum test score, CLB) in descending order
_IELTS_BANDS: dict[Skill, tuple[tuple[float, int], ...]] = {
    Skill.LISTENING: ((8.5, 10), (8.0, 9), (7.5, 9), (6.0, 8), (5.5, 7), (5.0, 6), (4.5, 5)),
    Skill.READING: ((8.0, 10), (7.0, 9), (6.5, 8), (6.0, 7), (5.0, 6), (4.0, 5), (3.5, 4)),
    Skill.WRITING: ((7.5, 10), (7.0, 9), (6.5, 8), (6.0, 7), (5.5, 6), (5.0, 5), (4.0, 4)),
    Skill.SPEAKING: ((7.5, 10), (7.0, 9), (6.5, 8), (6.0, 7), (5.5, 6), (5.0, 5), (4.0, 4)),
}

_PTE_BANDS: dict[Skill, tuple[tuple[float, int], ...]] = {
    Skill.SPEAKING: ((88, 10), (84, 9), (76, 8), (68, 7), (59, 6), (51, 5), (42, 4)),
    Skill.LISTENING: ((88, 10), (82, 9), (71, 8), (60, 7), (50, 6), (39, 5), (28, 4)),
    Skill.READING: ((88, 10), (78, 9), (69, 8), (60, 7), (51, 6), (42, 5), (33, 4)),
    Skill.WRITING: ((88, 10), (79, 9), (69, 8), (60, 7), (51, 6), (41, 5), (32, 4)),
}


def _lookup(bands: tuple[tuple[float, int], ...], score: float) -> int:
    for minimum, clb in bands:
        if score >= minimum:
            return clb
    return CLB_FLOOR


def ielts_to_clb(score: float, skill: Skill) -> int:
    """IELTS General Training band → CLB."""
    return _lookup(_IELTS_BANDS[skill], score)


def celpip_to_clb(score: int) -> int:
    """CELPIP levels are CLB-aligned; clamp to the 4..12 reporting range."""
    return min(max(score, CLB_FLOOR), 12)


def pte_to_clb(score: float, skill: Skill) -> int:
    """PTE Core score → CLB."""
    return _lookup(_PTE_BANDS[skill], score)


def convert_test_scores(test: LanguageTest, scores: dict[Skill, float]) -> LanguageScores:
    """Convert a full set of four raw test scores into LanguageScores.

    Args:
        test: Which test produced the scores.
        scores: Raw score per skill; all four skills are required.

    Returns:
        LanguageScores with the CLB level per skill.
    """
    converted: dict[str, int] = {}
    for skill in Skill:
        raw = scores[skill]
        if test == LanguageTest.IELTS:
            converted[skill.value] = ielts_to_clb(raw, skill)
        elif test == LanguageTest.PTE:
            converted[skill.value] = pte_to_clb(raw, skill)
        else:
            converted[skill.value] = celpip_to_clb(int(raw))
    return LanguageScores(**converted)
