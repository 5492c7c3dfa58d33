"""Data models for the resume analyzer pipeline."""

from resume_analyzer.models.report import (
    ActionItem,
    AnalysisReport,
    ATSOptimization,
    Correction,
    GrammarImprovements,
    SectionFeedback,
    SkillGapAnalysis,
)
from resume_analyzer.models.request import AnalysisRequest, ExperienceLevel

__all__ = [
    "ATSOptimization",
    "ActionItem",
    "AnalysisReport",
    "AnalysisRequest",
    "Correction",
    "ExperienceLevel",
    "GrammarImprovements",
    "SectionFeedback",
    "SkillGapAnalysis",
]
