"""Score calculators: CRS and language test conversion."""

from pathways.calculators.crs import calculate_crs
from pathways.calculators.language import (
    LanguageTest,
    Skill,
    celpip_to_clb,
    convert_test_scores,
    ielts_to_clb,
    pte_to_clb,
)

__all__ = [
    "calculate_crs",
    "LanguageTest",
    "Skill",
    "celpip_to_clb",
    "convert_test_scores",
    "ielts_to_clb",
    "pte_to_clb",
]
