import logging

import fitz  # PyMuPDF

from .errors import ExtractionFailure

logger = logging.getLogger(__name__)


def extract_text(data: bytes) -> str:
    """Extract plain text from an in-memory PDF.

    Raises ``ExtractionFailure`` if PyMuPDF cannot open or read the document.
    An empty result is allowed; scanned PDFs simply have no text layer.
    """
    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            if doc.needs_pass:
                raise ExtractionFailure("PDF is password protected")
            text = "\n".join(page.get_text("text") for page in doc)
    except ExtractionFailure:
        raise
    except Exception as exc:
        raise ExtractionFailure(f"Failed to extract text from PDF: {exc}") from exc

    text = text.strip()
    if not text:
        logger.warning("PDF contained no extractable text")
    return text
