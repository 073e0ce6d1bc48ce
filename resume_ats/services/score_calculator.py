import math
from dataclasses import dataclass
from typing import Sequence

from ..core import Settings
from ..schemas.pydantic import ScoreCard, SectionScores
from .keywords import EDUCATION_KEYWORDS, EXPERIENCE_KEYWORDS, count_keywords

# Texts longer than this are considered to have real structure
FORMAT_LENGTH_THRESHOLD = 1000


def clamp(low: int, high: int, value: int) -> int:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ScoringWeights:
    """Points earned per skill / per matched keyword."""

    skill: int = 10
    experience: int = 12
    education: int = 15

    @classmethod
    def from_settings(cls, config: Settings) -> "ScoringWeights":
        return cls(
            skill=config.SKILL_SCORE_WEIGHT,
            experience=config.EXPERIENCE_SCORE_WEIGHT,
            education=config.EDUCATION_SCORE_WEIGHT,
        )


class ScoreCalculator:
    """
    Pure scoring of a resume from its text and detected skills.

    skills      = clamp(20, 100, n_skills * w_skill)
    experience  = clamp(30, 100, n_experience_keywords * w_experience + 30)
    education   = clamp(40, 100, n_education_keywords * w_education + 40)
    format      = clamp(50, 100, 85 if len(text) > 1000 else 60)
    overall     = mean of the four, rounded half up
    """

    def __init__(self, weights: ScoringWeights = ScoringWeights()) -> None:
        self.weights = weights

    def skills_score(self, skill_count: int) -> int:
        return clamp(20, 100, skill_count * self.weights.skill)

    def experience_score(self, text: str) -> int:
        matches = count_keywords(text, EXPERIENCE_KEYWORDS)
        return clamp(30, 100, matches * self.weights.experience + 30)

    def education_score(self, text: str) -> int:
        matches = count_keywords(text, EDUCATION_KEYWORDS)
        return clamp(40, 100, matches * self.weights.education + 40)

    def format_score(self, text: str) -> int:
        return clamp(50, 100, 85 if len(text) > FORMAT_LENGTH_THRESHOLD else 60)

    def compute(self, text: str, skills: Sequence[str]) -> ScoreCard:
        sections = SectionScores(
            skills=self.skills_score(len(skills)),
            experience=self.experience_score(text),
            education=self.education_score(text),
            format=self.format_score(text),
        )
        overall = round_half_up(
            (sections.skills + sections.experience + sections.education + sections.format) / 4
        )
        return ScoreCard(sections=sections, overall=overall)
