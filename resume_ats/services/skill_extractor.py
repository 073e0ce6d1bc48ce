import logging
from typing import List, Optional, Sequence

from pydantic import ValidationError

from ..agent.exceptions import StrategyError
from ..agent.manager import AgentManager
from ..agent.strategies import DeterministicStrategy, FallbackChain, GenerativeStrategy
from ..prompt import SKILL_EXTRACTION_PROMPT
from ..schemas.pydantic import SkillListModel
from .keywords import COMMON_SKILLS, dedupe_labels

logger = logging.getLogger(__name__)

DEFAULT_MAX_SKILLS = 8
# The keyword matcher never reports more than this many skills on its own
FALLBACK_MAX_SKILLS = 10
SKILL_EXCERPT_CHARS = 2000


class KeywordSkillStrategy(DeterministicStrategy[List[str]]):
    """Substring match against a fixed vocabulary, in vocabulary order and casing."""

    name = "keyword skill matcher"

    def __init__(self,
                 vocabulary: Sequence[str] = COMMON_SKILLS,
                 limit: int = FALLBACK_MAX_SKILLS) -> None:
        self.vocabulary = vocabulary
        self.limit = limit

    async def __call__(self, text: str) -> List[str]:
        return self.match(text)

    def match(self, text: str) -> List[str]:
        lowered = text.lower()
        found = [skill for skill in self.vocabulary if skill.lower() in lowered]
        return found[:self.limit]


class GenerativeSkillStrategy(GenerativeStrategy[List[str]]):
    name = "generative skill extractor"

    async def __call__(self, text: str) -> List[str]:
        prompt = SKILL_EXTRACTION_PROMPT.format(text[:SKILL_EXCERPT_CHARS])
        data = await self.agent.run(prompt, temperature=0.3, max_tokens=500)
        try:
            skills = SkillListModel.model_validate(data).root
        except ValidationError as e:
            raise StrategyError(f"Expected a JSON array of skill names, got {type(data).__name__}") from e
        skills = [s.strip() for s in skills if s.strip()]
        if not skills:
            raise StrategyError("Provider returned no skills")
        return skills


class SkillExtractor:
    """Extracts an ordered, de-duplicated, capped list of skills from resume text."""

    def __init__(self,
                 agent: Optional[AgentManager] = None,
                 max_skills: int = DEFAULT_MAX_SKILLS) -> None:
        if max_skills < 1:
            raise ValueError("max_skills must be at least 1")
        self.max_skills = max_skills
        strategies = []
        if agent is not None and agent.enabled:
            strategies.append(GenerativeSkillStrategy(agent))
        strategies.append(KeywordSkillStrategy())
        self.chain: FallbackChain[List[str]] = FallbackChain(*strategies)

    async def extract(self, text: str) -> List[str]:
        skills = dedupe_labels(await self.chain(text), self.max_skills)
        logger.debug(f"Extracted {len(skills)} skills")
        return skills
