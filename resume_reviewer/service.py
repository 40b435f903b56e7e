import logging

from starlette.concurrency import run_in_threadpool

from .errors import (
    AnalysisError,
    InterpretationError,
    InvalidJson,
    SchemaViolation,
    ServiceFailure,
)
from .extractor import extract_text
from .interpreter import interpret
from .prompts import build_prompt
from .replicate import InferenceClient
from .schemas import AnalysisResult

logger = logging.getLogger(__name__)


async def analyze_resume(pdf_bytes: bytes, client: InferenceClient) -> AnalysisResult:
    """Extract, prompt, invoke the model and interpret its answer.

    Each stage raises its own ``AnalysisError`` subclass; a failed extraction
    never reaches the model.
    """
    resume_text = await run_in_threadpool(extract_text, pdf_bytes)
    logger.info("Extracted %d characters of resume text", len(resume_text))

    try:
        raw_output = await client.complete(build_prompt(resume_text))
    except AnalysisError:
        raise
    except Exception as exc:
        raise ServiceFailure(f"Error with inference service: {exc!r}") from exc
    logger.info("Raw model output: %s", raw_output)

    try:
        result = interpret(raw_output)
    except InvalidJson as exc:
        logger.error("Error parsing JSON: %s", exc)
        logger.error("Attempted to parse: %s", exc.candidate)
        raise
    except SchemaViolation as exc:
        logger.error("%s: %s", exc, exc.errors)
        raise
    except InterpretationError as exc:
        logger.error("%s. Raw model output: %s", exc, raw_output)
        raise

    if result.skills_analysis and result.skills_total != 100:
        logger.warning(
            "Skill percentages sum to %d instead of 100", result.skills_total
        )
    return result
