"""Error taxonomy for the analysis pipeline.

Every error carries the HTTP status and the message shown to the caller.
The exception's own ``str()`` holds internal detail and is only logged.
"""

from typing import Any, List, Optional


class AnalysisError(Exception):
    status_code = 500
    public_message = "Error analyzing resume. Please try again."


class MissingInput(AnalysisError):
    status_code = 400
    public_message = "No file uploaded"


class UploadTooLarge(AnalysisError):
    status_code = 400

    def __init__(self, max_mb: int) -> None:
        super().__init__(f"Upload exceeds {max_mb} MB")
        self.public_message = f"File must be under {max_mb} MB."


class ExtractionFailure(AnalysisError):
    public_message = (
        "Error analyzing resume: could not extract text from the uploaded file."
    )


class ServiceFailure(AnalysisError):
    public_message = "Error connecting to AI service. Please try again later."


class InterpretationError(AnalysisError):
    """The model answered, but not with a usable analysis."""

    public_message = "Failed to parse AI response. Please try again."


class MalformedOutput(InterpretationError):
    """No ``{ ... }`` span could be located in the model output."""


class InvalidJson(InterpretationError):
    def __init__(self, message: str, candidate: str) -> None:
        super().__init__(message)
        self.candidate = candidate


class SchemaViolation(InterpretationError):
    def __init__(self, message: str, errors: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []
