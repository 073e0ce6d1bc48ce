from .pydantic import (
    AnalysisResult,
    RecommendationListModel,
    ScoreCard,
    SectionScores,
    SkillListModel,
)

__all__ = [
    "AnalysisResult",
    "RecommendationListModel",
    "ScoreCard",
    "SectionScores",
    "SkillListModel",
]
