from .resume_analysis import (
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
