from typing import Annotated, List, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr

RatingText = Literal["Poor", "Below Average", "Average", "Above Average", "Excellent"]
ExperienceCategory = Literal["Relevance", "Impact", "Progression", "Achievements"]

# Numbers and strings must arrive with their JSON types; "7.5" is not a score.
Score = Annotated[float, Field(ge=1.0, le=10.0, strict=True)]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Overall(_Frozen):
    score: Score
    rating_text: RatingText
    stars: int = Field(ge=1, le=5, strict=True)
    summary: str = Field(min_length=1, strict=True)


class Ratings(_Frozen):
    clarity_formatting: Score
    skills_relevance: Score
    experience_strength: Score
    overall_presentation: Score


class Skill(_Frozen):
    name: str = Field(min_length=1, strict=True)
    color: str = Field(pattern=r"^#[0-9A-Fa-f]{6}$", strict=True)
    value: int = Field(ge=0, le=100, strict=True)


class ExperienceScore(_Frozen):
    category: ExperienceCategory
    score: int = Field(ge=1, le=100, strict=True)


class Suggestions(_Frozen):
    strengths: List[StrictStr] = Field(min_length=3, max_length=3)
    improvements: List[StrictStr] = Field(min_length=3, max_length=3)


class AnalysisResult(_Frozen):
    overall: Overall
    ratings: Ratings
    skills_analysis: List[Skill]
    experience_analysis: List[ExperienceScore] = Field(min_length=4, max_length=4)
    suggestions: Suggestions

    @property
    def skills_total(self) -> int:
        """Sum of skill percentages; expected to be 100 but never enforced."""
        return sum(skill.value for skill in self.skills_analysis)
