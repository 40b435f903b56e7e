import copy
from typing import List, Optional

import fitz
import pytest


VALID_ANALYSIS = {
    "overall": {
        "score": 7.5,
        "rating_text": "Above Average",
        "stars": 4,
        "summary": "A solid backend resume with clear, quantified impact.",
    },
    "ratings": {
        "clarity_formatting": 8.0,
        "skills_relevance": 7.5,
        "experience_strength": 6.5,
        "overall_presentation": 7.0,
    },
    "skills_analysis": [
        {"name": "Python", "color": "#3776AB", "value": 40},
        {"name": "FastAPI", "color": "#009688", "value": 25},
        {"name": "PostgreSQL", "color": "#336791", "value": 20},
        {"name": "Docker", "color": "#2496ED", "value": 15},
    ],
    "experience_analysis": [
        {"category": "Relevance", "score": 82},
        {"category": "Impact", "score": 74},
        {"category": "Progression", "score": 61},
        {"category": "Achievements", "score": 68},
    ],
    "suggestions": {
        "strengths": [
            "Quantifies the latency improvements delivered at each role.",
            "Lists a focused, modern backend stack.",
            "Shows steady ownership of production services.",
        ],
        "improvements": [
            "Add a short summary tailored to the roles you are targeting.",
            "Move education below experience to lead with your strengths.",
            "Describe team size and scope for the most recent position.",
        ],
    },
}


class FakeInferenceClient:
    """Records prompts and answers with a canned completion."""

    def __init__(self, output: str = "", error: Optional[Exception] = None) -> None:
        self.output = output
        self.error = error
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def analysis():
    return copy.deepcopy(VALID_ANALYSIS)


@pytest.fixture
def make_pdf():
    def _make(*pages: str) -> bytes:
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            page.insert_text((72, 72), text)
        data = doc.tobytes()
        doc.close()
        return data

    return _make
