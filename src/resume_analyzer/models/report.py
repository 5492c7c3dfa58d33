"""Pydantic models for the analysis report returned by the backend."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


class _ReportModel(BaseModel):
    # camelCase on the wire, snake_case in Python; leaf types are strict.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Correction(_ReportModel):
    original: StrictStr
    improved: StrictStr


class GrammarImprovements(_ReportModel):
    mistakes: list[StrictStr]
    corrections: list[Correction]


class ATSOptimization(_ReportModel):
    missing_keywords: list[StrictStr]
    formatting_issues: list[StrictStr]
    section_order_improvements: StrictStr


class SkillGapAnalysis(_ReportModel):
    missing_or_weak_skills: list[StrictStr]
    suggestions: list[StrictStr]


class SectionFeedback(_ReportModel):
    professional_summary: StrictStr
    skills: StrictStr
    experience: StrictStr
    education: StrictStr


class ActionItem(_ReportModel):
    day: StrictInt | StrictFloat  # expected 1-7, not enforced
    task: StrictStr


class AnalysisReport(_ReportModel):
    overall_score: StrictInt | StrictFloat  # expected 0-100, not enforced
    grammar_improvements: GrammarImprovements
    ats_optimization: ATSOptimization
    skill_gap_analysis: SkillGapAnalysis
    section_feedback: SectionFeedback
    improved_summary: StrictStr
    seven_day_action_plan: list[ActionItem]

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize with the backend's camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=indent)
