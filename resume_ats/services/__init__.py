from .analysis_service import AnalysisService, analyze_resume
from .recommendation_generator import RecommendationGenerator
from .score_calculator import ScoreCalculator, ScoringWeights
from .skill_extractor import SkillExtractor
from .exceptions import (
    AnalysisError,
    AnalyzerConfigurationError,
    EmptyResumeError,
)

__all__ = [
    "AnalysisService",
    "analyze_resume",
    "RecommendationGenerator",
    "ScoreCalculator",
    "ScoringWeights",
    "SkillExtractor",
    "AnalysisError",
    "AnalyzerConfigurationError",
    "EmptyResumeError",
]
