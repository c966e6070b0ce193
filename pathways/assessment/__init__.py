"""Assessment facade."""

from pathways.assessment.report import build_assessment

__all__ = ["build_assessment"]
