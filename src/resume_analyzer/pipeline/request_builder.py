"""Stage 1: Request Builder - bounds raw input and renders the backend request."""

from __future__ import annotations

from resume_analyzer.models.request import AnalysisRequest, ExperienceLevel

MAX_DOCUMENT_CHARS = 15_000

PROMPT_TEMPLATE = """\
You are a professional Resume Analyzer, ATS Expert, and Career Coach.
Analyze the user's resume based on the target job role and experience level provided.

USER INPUT:
Resume Text: {document_text}
Target Job Role: {target_role}
Experience Level: {experience_level}

INSTRUCTIONS:
Analyze based on:
- Grammar and language accuracy
- Professional tone and clarity
- ATS compatibility
- Relevance to the target job role
- Skills strength and gaps

Provide the response strictly as a JSON object matching the schema.
Return only the JSON document: no markdown fences, no commentary."""


def _string() -> dict:
    return {"type": "string"}


def _string_list() -> dict:
    return {"type": "array", "items": _string()}


def _object(properties: dict) -> dict:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
    }


OUTPUT_SCHEMA: dict = _object({
    "overallScore": {"type": "number"},
    "grammarImprovements": _object({
        "mistakes": _string_list(),
        "corrections": {
            "type": "array",
            "items": _object({"original": _string(), "improved": _string()}),
        },
    }),
    "atsOptimization": _object({
        "missingKeywords": _string_list(),
        "formattingIssues": _string_list(),
        "sectionOrderImprovements": _string(),
    }),
    "skillGapAnalysis": _object({
        "missingOrWeakSkills": _string_list(),
        "suggestions": _string_list(),
    }),
    "sectionFeedback": _object({
        "professionalSummary": _string(),
        "skills": _string(),
        "experience": _string(),
        "education": _string(),
    }),
    "improvedSummary": _string(),
    "sevenDayActionPlan": {
        "type": "array",
        "items": _object({"day": {"type": "number"}, "task": _string()}),
    },
})


def truncate_document(text: str) -> str:
    """Cut text to the first MAX_DOCUMENT_CHARS characters, silently."""
    return text[:MAX_DOCUMENT_CHARS]


def render_prompt(
    document_text: str,
    target_role: str,
    experience_level: ExperienceLevel,
) -> str:
    return PROMPT_TEMPLATE.format(
        document_text=document_text,
        target_role=target_role,
        experience_level=experience_level.value,
    )


def build_request(
    document_text: str,
    target_role: str,
    experience_level: ExperienceLevel | str,
) -> AnalysisRequest:
    """Shape caller input into a deterministic AnalysisRequest.

    No input is rejected here; emptiness checks belong to the caller.
    The same three inputs always produce a byte-identical prompt.
    """
    level = ExperienceLevel(experience_level)
    text = truncate_document(document_text)
    role = target_role.strip()
    return AnalysisRequest(
        document_text=text,
        target_role=role,
        experience_level=level,
        prompt=render_prompt(text, role, level),
        output_schema=OUTPUT_SCHEMA,
    )
