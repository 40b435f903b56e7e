"""Turn free-form model output into a validated ``AnalysisResult``.

The model is asked for JSON only, but often wraps it in prose. We take the
span from the first ``{`` to the last ``}`` and parse that; nothing else is
done to repair the text. This module is pure: callers decide what to log.
"""

import json

from pydantic import ValidationError

from .errors import InvalidJson, MalformedOutput, SchemaViolation
from .schemas import AnalysisResult


def extract_candidate(raw: str) -> str:
    """Return the substring from the first ``{`` through the last ``}``."""
    first = raw.find("{")
    last = raw.rfind("}")

    if first == -1 or last == -1 or first >= last:
        raise MalformedOutput("Could not find valid JSON structure")

    return raw[first : last + 1]


def parse_candidate(candidate: str) -> object:
    try:
        return json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise InvalidJson(f"Invalid JSON in model output: {exc}", candidate) from exc


def validate(data: object) -> AnalysisResult:
    if not isinstance(data, dict):
        raise SchemaViolation(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as exc:
        raise SchemaViolation(
            f"Model output does not match the analysis schema "
            f"({exc.error_count()} errors)",
            exc.errors(include_url=False),
        ) from exc


def interpret(raw: str) -> AnalysisResult:
    return validate(parse_candidate(extract_candidate(raw)))
