"""Eligibility aggregator: merges and ranks program module results."""

from pathways.eligibility.engine import assess, evaluate_modules, rank_results

__all__ = [
    "assess",
    "evaluate_modules",
    "rank_results",
]
