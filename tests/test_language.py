"""Tests for language test → CLB conversion."""

from __future__ import annotations

import pytest

from pathways.calculators.language import (
    celpip_to_clb,
    convert_test_scores,
    ielts_to_clb,
    pte_to_clb,
)
from pathways.models.enums import LanguageTest, Skill
from pathways.schemas.profile import LanguageScores


class TestIelts:
    @pytest.mark.parametrize(
        ("score", "skill", "expected"),
        [
            (8.5, Skill.LISTENING, 10),
            (8.0, Skill.LISTENING, 9),
            (7.5, Skill.LISTENING, 9),
            (6.0, Skill.LISTENING, 8),
            (6.5, Skill.READING, 8),
            (7.0, Skill.WRITING, 9),
            (6.0, Skill.SPEAKING, 7),
        ],
    )
    def test_bands(self, score, skill, expected) -> None:
        assert ielts_to_clb(score, skill) == expected

    def test_below_lowest_band_floors_at_clb4(self) -> None:
        assert ielts_to_clb(3.0, Skill.LISTENING) == 4


class TestCelpip:
    def test_levels_map_directly(self) -> None:
        assert celpip_to_clb(9) == 9

    def test_clamped(self) -> None:
        assert celpip_to_clb(15) == 12
        assert celpip_to_clb(2) == 4


class TestPte:
    def test_speaking(self) -> None:
        assert pte_to_clb(84, Skill.SPEAKING) == 9

    def test_reading_floor(self) -> None:
        assert pte_to_clb(10, Skill.READING) == 4


class TestConvertTestScores:
    def test_ielts_set(self) -> None:
        scores = {
            Skill.LISTENING: 8.0,
            Skill.READING: 7.0,
            Skill.WRITING: 7.0,
            Skill.SPEAKING: 7.0,
        }
        assert convert_test_scores(LanguageTest.IELTS, scores) == LanguageScores.uniform(9)

    def test_celpip_set_uneven(self) -> None:
        scores = {
            Skill.LISTENING: 10,
            Skill.READING: 9,
            Skill.WRITING: 8,
            Skill.SPEAKING: 7,
        }
        result = convert_test_scores(LanguageTest.CELPIP, scores)
        assert result.minimum == 7
        assert result.listening == 10


class TestEnums:
    def test_calculator_package_reexports_shared_enums(self) -> None:
        from pathways import calculators

        assert calculators.LanguageTest is LanguageTest
        assert calculators.Skill is Skill
