"""Eligibility aggregator: runs every registered program module on one profile.

Pure Python orchestrator. CRS is computed once and handed to each module
together with the profile; results from all modules are merged and ranked.
Ineligible results are kept so callers can show why a stream failed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pathways.calculators.crs import calculate_crs
from pathways.programs import PROGRAM_MODULES
from pathways.programs.base import ProgramModule
from pathways.schemas.profile import CandidateProfile
from pathways.schemas.results import ProgramResult

logger = logging.getLogger(__name__)


def _sort_key(result: ProgramResult) -> tuple[int, int]:
    return (-result.draw_probability.rank, -result.score)


def rank_results(results: Iterable[ProgramResult]) -> list[ProgramResult]:
    """Order by draw probability tier, then raw score, both descending.

    sorted() is stable, so equal keys keep module registration order.
    """
    return sorted(results, key=_sort_key)


def evaluate_modules(
    profile: CandidateProfile,
    crs_score: int | None,
    modules: Sequence[ProgramModule] = PROGRAM_MODULES,
) -> list[ProgramResult]:
    """Concatenate module outputs in registration order, unranked."""
    results: list[ProgramResult] = []
    for module in modules:
        produced = module.evaluate(profile, crs_score)
        logger.debug("Module %s produced %d result(s)", module.code.value, len(produced))
        results.extend(produced)
    return results


def assess(
    profile: CandidateProfile,
    modules: Sequence[ProgramModule] = PROGRAM_MODULES,
    *,
    crs_score: int | None = None,
) -> list[ProgramResult]:
    """Evaluate every program module against a profile and rank the results.

    ``crs_score`` lets a caller that already computed CRS skip the second
    calculation; otherwise it is computed here.
    """
    if crs_score is None:
        crs_score = calculate_crs(profile).total

    ranked = rank_results(evaluate_modules(profile, crs_score, modules))
    logger.debug(
        "Assessed %d stream(s) across %d module(s), %d eligible (CRS %d)",
        len(ranked),
        len(modules),
        sum(1 for r in ranked if r.eligible),
        crs_score,
    )
    return ranked
