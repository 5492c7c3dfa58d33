"""Request-side models: experience levels and the per-call analysis request."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ExperienceLevel(str, Enum):
    STUDENT = "Student"
    FRESHER = "Fresher"
    JUNIOR = "Junior"
    MID = "Mid"
    SENIOR = "Senior"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> ExperienceLevel | None:
        # "senior", " SENIOR " resolve like "Senior"
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


@dataclass(frozen=True)
class AnalysisRequest:
    """Everything sent to the backend for one analysis run."""

    document_text: str
    target_role: str
    experience_level: ExperienceLevel
    prompt: str
    output_schema: dict
