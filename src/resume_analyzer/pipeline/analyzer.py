"""Stage 2: Analysis Client - runs the backend call and validates its reply."""

from __future__ import annotations

import copy
import logging
from typing import Awaitable, Callable

from pydantic import ValidationError

from resume_analyzer.errors import (
    EmptyResponse,
    MalformedResponse,
    SchemaViolation,
    TransportFailure,
    ValidationFailure,
)
from resume_analyzer.models.report import AnalysisReport
from resume_analyzer.models.request import AnalysisRequest, ExperienceLevel
from resume_analyzer.pipeline.request_builder import build_request
from resume_analyzer.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

# generate(prompt, schema) -> response text; raises on transport failure.
GenerateFn = Callable[[str, dict], Awaitable[str]]


def check_inputs(
    document_text: str,
    target_role: str,
    experience_level: ExperienceLevel | str | None = None,
) -> None:
    """Raise ValidationFailure unless both inputs are non-empty after trim
    and the experience level, when given, names a known level.
    """
    if not document_text.strip() or not target_role.strip():
        raise ValidationFailure("resume text and target role are required")
    if experience_level is not None:
        try:
            ExperienceLevel(experience_level)
        except ValueError as exc:
            raise ValidationFailure(f"unknown experience level: {experience_level!r}") from exc


def _error_path(loc: tuple, data: object) -> str:
    """Turn a pydantic error location into a dotted path into ``data``.

    Walks the location through the input so union member tags that pydantic
    appends to a location (``overallScore.int``) are left out.
    """
    parts: list[str] = []
    node = data
    for key in loc:
        if isinstance(node, dict) and isinstance(key, str):
            parts.append(key)
            if key not in node:
                break
            node = node[key]
        elif isinstance(node, list) and isinstance(key, int):
            parts.append(str(key))
            if key >= len(node):
                break
            node = node[key]
        else:
            break
    return ".".join(parts) or "$"


def parse_report(text: str) -> AnalysisReport:
    """Turn raw backend text into a validated AnalysisReport.

    Raises EmptyResponse, MalformedResponse or SchemaViolation. Values are
    not clamped or reinterpreted: an overall score of 150 passes as-is.
    """
    if not text or not text.strip():
        raise EmptyResponse("backend returned an empty body")

    try:
        data = extract_json(text)
    except ValueError as exc:
        raise MalformedResponse(str(exc), raw_text=text) from exc

    if not isinstance(data, dict):
        raise SchemaViolation(
            "$", f"expected a JSON object, got {type(data).__name__}", raw_text=text
        )

    try:
        return AnalysisReport.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise SchemaViolation(_error_path(first["loc"], data), first["msg"], raw_text=text) from exc


class ResumeAnalyzer:
    """Runs one schema-constrained analysis per call.

    Holds no per-call state; concurrent calls are independent. Nothing here
    retries, caches or rate-limits.
    """

    def __init__(self, generate: GenerateFn):
        self.generate = generate

    async def analyze(self, request: AnalysisRequest) -> AnalysisReport:
        logger.info(
            "Analyzing resume: role=%r level=%s chars=%d",
            request.target_role, request.experience_level, len(request.document_text),
        )
        try:
            # Each call gets its own copy; OUTPUT_SCHEMA is shared module state.
            text = await self.generate(request.prompt, copy.deepcopy(request.output_schema))
        except Exception as exc:
            logger.error("Generation call failed: %s", type(exc).__name__)
            logger.debug("Generation failure detail", exc_info=True)
            raise TransportFailure(str(exc) or type(exc).__name__) from exc

        # Raw text stays at DEBUG; it is diagnostics, not user output.
        try:
            report = parse_report(text)
        except MalformedResponse as exc:
            logger.error("Malformed backend response (%d chars)", len(exc.raw_text))
            logger.debug("Raw response: %s", exc.raw_text)
            raise
        except SchemaViolation as exc:
            logger.error("Backend response violates schema at %s", exc.path)
            logger.debug("Raw response: %s", exc.raw_text)
            raise
        except EmptyResponse:
            logger.error("Backend returned an empty response")
            raise

        logger.info("Analysis complete: overallScore=%s", report.overall_score)
        return report

    async def run(
        self,
        document_text: str,
        target_role: str,
        experience_level: ExperienceLevel | str,
    ) -> AnalysisReport:
        """Check caller input, build the request and analyze it."""
        check_inputs(document_text, target_role, experience_level)
        return await self.analyze(build_request(document_text, target_role, experience_level))
