from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel


class SectionScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)
    education: int = Field(ge=0, le=100)
    format: int = Field(ge=0, le=100)


class ScoreCard(BaseModel):
    """Section scores plus the aggregate ATS compatibility score."""

    model_config = ConfigDict(frozen=True)

    sections: SectionScores
    overall: int = Field(ge=0, le=100)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    overall_score: int = Field(ge=0, le=100)
    section_scores: SectionScores
    skills: List[str]
    recommendations: List[str]
    extracted_text: str
    file_name: str
    analysis_date: datetime

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# Shapes accepted from a generative provider
class SkillListModel(RootModel[List[str]]):
    pass


class RecommendationListModel(RootModel[List[str]]):
    pass
