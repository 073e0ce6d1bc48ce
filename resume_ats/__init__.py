from .agent import Provider, ProviderError, StrategyError
from .core import Settings
from .schemas import AnalysisResult, SectionScores
from .services import (
    AnalysisError,
    AnalysisService,
    AnalyzerConfigurationError,
    EmptyResumeError,
    analyze_resume,
)

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "AnalysisService",
    "AnalyzerConfigurationError",
    "EmptyResumeError",
    "Provider",
    "ProviderError",
    "SectionScores",
    "Settings",
    "StrategyError",
    "analyze_resume",
]
