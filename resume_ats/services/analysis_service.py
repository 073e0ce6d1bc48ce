import asyncio
import logging
from contextlib import AsyncExitStack
from datetime import datetime, timezone
from typing import Optional

from ..agent.exceptions import ProviderError
from ..agent.manager import AgentManager
from ..agent.providers.base import Provider
from ..core import Settings
from ..schemas.pydantic import AnalysisResult
from .exceptions import AnalyzerConfigurationError, EmptyResumeError
from .recommendation_generator import RecommendationGenerator
from .score_calculator import ScoreCalculator, ScoringWeights
from .skill_extractor import SkillExtractor

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Runs the resume analysis pipeline: skills, scores, recommendations.

    Each provider-backed stage has its own fallback to a deterministic
    strategy, so once the input is accepted an AnalysisResult is always
    produced. The service keeps no state between calls.
    """

    def __init__(self,
                 config: Optional[Settings] = None,
                 provider: Optional[Provider] = None) -> None:
        self.config = config if config is not None else Settings()
        self.provider = provider
        if provider is None and not self.config.provider_enabled and not self.config.ALLOW_FALLBACK_ONLY:
            raise AnalyzerConfigurationError(provider=self.config.LLM_PROVIDER)
        self.score_calculator = ScoreCalculator(ScoringWeights.from_settings(self.config))

    def _agent(self, provider: Optional[Provider]) -> AgentManager:
        return AgentManager(config=self.config, provider=provider or self.provider)

    async def analyze(self,
                      resume_text: str,
                      file_name: str,
                      provider: Optional[Provider] = None,
                      max_skills: Optional[int] = None,
                      max_recommendations: Optional[int] = None,
                      analysis_date: Optional[datetime] = None,
                      ) -> AnalysisResult:
        """
        Analyze extracted resume text.

        Args:
            resume_text: Full plain-text resume content.
            file_name: Originating file name, passed through to the result.
            provider: Overrides the service provider for this call.
            max_skills: Skill cap, defaults to MAX_SKILLS.
            max_recommendations: Recommendation cap, defaults to MAX_RECOMMENDATIONS.
            analysis_date: Timestamp for the result, defaults to now (UTC).

        Raises:
            EmptyResumeError: If resume_text is empty or whitespace-only.
        """
        if not resume_text or not resume_text.strip():
            raise EmptyResumeError(file_name=file_name)

        max_skills = max_skills if max_skills is not None else self.config.MAX_SKILLS
        max_recommendations = (max_recommendations if max_recommendations is not None
                               else self.config.MAX_RECOMMENDATIONS)

        async with AsyncExitStack() as stack:
            agent: Optional[AgentManager] = self._agent(provider)
            if agent.enabled:
                # One provider serves both stages and is released on exit
                try:
                    await stack.enter_async_context(agent.session())
                except ProviderError as e:
                    logger.warning(f"Provider unavailable, using deterministic analysis: {e}")
                    agent = None

            skill_extractor = SkillExtractor(agent, max_skills=max_skills)
            recommendation_generator = RecommendationGenerator(agent, max_recommendations=max_recommendations)

            skills = await skill_extractor.extract(resume_text)
            scores = self.score_calculator.compute(resume_text, skills)
            recommendations = await recommendation_generator.generate(resume_text, skills, scores.sections)

        result = AnalysisResult(
            overall_score=scores.overall,
            section_scores=scores.sections,
            skills=skills,
            recommendations=recommendations,
            extracted_text=resume_text,
            file_name=file_name,
            analysis_date=analysis_date or datetime.now(timezone.utc),
        )
        logger.info(
            f"Analyzed '{file_name}': overall={result.overall_score}, "
            f"skills={len(skills)}, recommendations={len(recommendations)}"
        )
        return result


def analyze_resume(resume_text: str,
                   file_name: str,
                   provider: Optional[Provider] = None,
                   max_skills: Optional[int] = None,
                   max_recommendations: Optional[int] = None,
                   config: Optional[Settings] = None,
                   ) -> AnalysisResult:
    """Blocking entry point for callers without an event loop."""
    service = AnalysisService(config=config, provider=provider)
    return asyncio.run(service.analyze(
        resume_text,
        file_name,
        max_skills=max_skills,
        max_recommendations=max_recommendations,
    ))
