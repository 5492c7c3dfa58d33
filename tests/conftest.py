"""Shared test fixtures."""

from __future__ import annotations

import copy
import json
from unittest.mock import AsyncMock

import pytest

from resume_analyzer.clients.gemini_client import GeminiClient
from resume_analyzer.models.report import AnalysisReport

SAMPLE_PAYLOAD: dict = {
    "overallScore": 72,
    "grammarImprovements": {
        "mistakes": ["Inconsistent tense in experience bullets"],
        "corrections": [
            {
                "original": "Responsible for develop REST APIs",
                "improved": "Developed REST APIs serving 1M requests per day",
            }
        ],
    },
    "atsOptimization": {
        "missingKeywords": ["Kubernetes", "CI/CD"],
        "formattingIssues": ["Skills listed inside a table"],
        "sectionOrderImprovements": "Move Skills above Education.",
    },
    "skillGapAnalysis": {
        "missingOrWeakSkills": ["Kubernetes"],
        "suggestions": ["Deploy a side project on a managed Kubernetes cluster"],
    },
    "sectionFeedback": {
        "professionalSummary": "Too generic; name your stack.",
        "skills": "Group by category.",
        "experience": "Quantify outcomes.",
        "education": "Fine as is.",
    },
    "improvedSummary": "Backend engineer with 3 years building Python and Java APIs.",
    "sevenDayActionPlan": [
        {"day": 1, "task": "Rewrite the summary"},
        {"day": 2, "task": "Add metrics to every bullet"},
        {"day": 3, "task": "Move skills out of tables"},
        {"day": 4, "task": "Add Kubernetes keywords where truthful"},
        {"day": 5, "task": "Finish a Kubernetes tutorial"},
        {"day": 6, "task": "Ask a peer for review"},
        {"day": 7, "task": "Apply to five roles"},
    ],
}


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane@example.com | +1 555 0100

Experience:
- ABC Tech (2021 - present) - Backend Developer
  - Responsible for develop REST APIs
  - Reduced query latency by 40% with MySQL tuning

Education:
- BSc Computer Science, State University (2017 - 2021)

Skills:
- Python, Java, MySQL, Redis, Docker
"""


@pytest.fixture
def sample_payload() -> dict:
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def sample_response_text(sample_payload) -> str:
    return json.dumps(sample_payload)


@pytest.fixture
def sample_report(sample_payload) -> AnalysisReport:
    return AnalysisReport.model_validate(sample_payload)


@pytest.fixture
def fake_generate(sample_response_text) -> AsyncMock:
    """Generation capability returning a canned, well-formed response."""
    return AsyncMock(return_value=sample_response_text)


@pytest.fixture
def mock_llm_client(sample_response_text) -> GeminiClient:
    """Create a mock generation client."""
    client = AsyncMock(spec=GeminiClient)
    client.generate_structured = AsyncMock(return_value=sample_response_text)
    client.get_token_summary.return_value = {"input": 100, "output": 50, "calls": []}
    return client
