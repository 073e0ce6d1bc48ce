import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from ..agent.exceptions import StrategyError
from ..agent.manager import AgentManager
from ..agent.strategies import DeterministicStrategy, FallbackChain, GenerativeStrategy
from ..prompt import RECOMMENDATIONS_PROMPT
from ..schemas.pydantic import RecommendationListModel, SectionScores
from .keywords import dedupe_labels

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECOMMENDATIONS = 8
RECOMMENDATION_EXCERPT_CHARS = 1500


@dataclass(frozen=True)
class RecommendationRule:
    applies: Callable[[Sequence[str], SectionScores], bool]
    messages: Tuple[str, ...]


# Evaluated top to bottom; earlier rules have priority when the cap is hit.
RULES: Tuple[RecommendationRule, ...] = (
    RecommendationRule(
        lambda skills, scores: len(skills) < 5,
        ("Add more technical skills to improve ATS compatibility",),
    ),
    RecommendationRule(
        lambda skills, scores: scores.experience < 70,
        (
            "Use more action-oriented verbs in your experience descriptions",
            "Quantify your achievements with specific metrics",
        ),
    ),
    RecommendationRule(
        lambda skills, scores: scores.education < 60,
        ("Ensure your education section is clearly formatted",),
    ),
    RecommendationRule(
        lambda skills, scores: scores.format < 80,
        (
            "Consider using bullet points for better readability",
            "Ensure consistent formatting throughout the document",
        ),
    ),
    RecommendationRule(
        lambda skills, scores: True,
        (
            "Include relevant keywords from job descriptions",
            "Add a professional summary at the top",
            "Keep your resume to 1-2 pages maximum",
        ),
    ),
)


class RuleBasedRecommendationStrategy(DeterministicStrategy[List[str]]):
    name = "rule-based recommendations"

    def __init__(self, rules: Sequence[RecommendationRule] = RULES) -> None:
        self.rules = rules

    async def __call__(self, text: str, skills: Sequence[str], scores: SectionScores) -> List[str]:
        recommendations: List[str] = []
        for rule in self.rules:
            if rule.applies(skills, scores):
                recommendations.extend(rule.messages)
        return recommendations


class GenerativeRecommendationStrategy(GenerativeStrategy[List[str]]):
    name = "generative recommendations"

    async def __call__(self, text: str, skills: Sequence[str], scores: SectionScores) -> List[str]:
        prompt = RECOMMENDATIONS_PROMPT.format(
            text[:RECOMMENDATION_EXCERPT_CHARS],
            ", ".join(skills) or "None detected",
            scores.skills,
            scores.experience,
            scores.education,
            scores.format,
        )
        data = await self.agent.run(prompt, temperature=0.4, max_tokens=800)
        try:
            recommendations = RecommendationListModel.model_validate(data).root
        except ValidationError as e:
            raise StrategyError(f"Expected a JSON array of recommendations, got {type(data).__name__}") from e
        recommendations = [r.strip() for r in recommendations if r.strip()]
        if not recommendations:
            raise StrategyError("Provider returned no recommendations")
        return recommendations


class RecommendationGenerator:
    """Produces a prioritized, capped list of improvement suggestions."""

    def __init__(self,
                 agent: Optional[AgentManager] = None,
                 max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS) -> None:
        if max_recommendations < 1:
            raise ValueError("max_recommendations must be at least 1")
        self.max_recommendations = max_recommendations
        strategies = []
        if agent is not None and agent.enabled:
            strategies.append(GenerativeRecommendationStrategy(agent))
        strategies.append(RuleBasedRecommendationStrategy())
        self.chain: FallbackChain[List[str]] = FallbackChain(*strategies)

    async def generate(self, text: str, skills: Sequence[str], scores: SectionScores) -> List[str]:
        recommendations = dedupe_labels(await self.chain(text, skills, scores), self.max_recommendations)
        logger.debug(f"Generated {len(recommendations)} recommendations")
        return recommendations
