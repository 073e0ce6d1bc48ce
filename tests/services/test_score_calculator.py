"""
Tests for ScoreCalculator.

These tests verify:
1. Each section score follows its clamp formula
2. Keywords are matched case-insensitively and counted once
3. The overall score is the half-up rounded mean of the sections
"""

import pytest

from resume_ats.services.score_calculator import (
    ScoreCalculator,
    ScoringWeights,
    clamp,
    round_half_up,
)

from tests.conftest import make_settings


class TestSectionScores:
    """Tests for the individual section formulas."""

    @pytest.fixture
    def calculator(self) -> ScoreCalculator:
        return ScoreCalculator()

    @pytest.mark.parametrize("count,expected", [(0, 20), (1, 20), (2, 20), (3, 30), (8, 80), (10, 100), (15, 100)])
    def test_skills_score_is_clamped_product(self, calculator, count, expected):
        """skills = clamp(20, 100, n * 10)."""
        assert calculator.skills_score(count) == expected

    def test_skills_score_is_monotonic(self, calculator):
        """More skills never lower the skills score."""
        scores = [calculator.skills_score(n) for n in range(0, 20)]
        assert scores == sorted(scores)

    def test_experience_score_without_keywords(self, calculator):
        """No experience keywords leaves the floor of 30."""
        assert calculator.experience_score("Nothing relevant here") == 30

    def test_experience_keywords_counted_once(self, calculator):
        """Repeating a keyword does not add points."""
        once = calculator.experience_score("managed")
        many = calculator.experience_score("managed managed MANAGED Managed")
        assert once == many == 42

    def test_experience_score_caps_at_100(self, calculator):
        """All ten keywords give 150 before clamping."""
        text = "experience worked developed managed led created implemented achieved increased reduced"
        assert calculator.experience_score(text) == 100

    def test_education_score(self, calculator):
        """Two education keywords: 2 * 15 + 40."""
        assert calculator.education_score("Bachelor from State University") == 70

    def test_education_score_floor(self, calculator):
        assert calculator.education_score("no schooling mentioned") == 40

    def test_keyword_matching_is_substring(self, calculator):
        """'mastered' contains 'master'; no word boundaries are applied."""
        assert calculator.education_score("mastered the craft") == 55

    def test_format_score_short_and_long(self, calculator):
        assert calculator.format_score("x" * 1000) == 60
        assert calculator.format_score("x" * 1001) == 85


class TestCompute:
    """Tests for the combined score card."""

    def test_scenario_experience_keywords_in_long_text(self):
        """1500 chars with managed/developed/led and nothing else."""
        base = "Managed budgets, developed tooling and led releases."
        text = base + " " + "a" * (1500 - len(base) - 1)
        assert len(text) == 1500

        card = ScoreCalculator().compute(text, [])

        assert card.sections.experience == 66
        assert card.sections.format == 85
        assert card.sections.education == 40
        assert card.sections.skills == 20
        # (20 + 66 + 40 + 85) / 4 = 52.75
        assert card.overall == 53

    def test_overall_rounds_half_up(self):
        """(40 + 30 + 40 + 60) / 4 = 42.5 rounds to 43."""
        card = ScoreCalculator().compute("short", ["Python", "React", "AWS", "Docker"])
        assert card.sections.skills == 40
        assert card.overall == 43

    @pytest.mark.parametrize("skill_count", [0, 3, 7, 12])
    @pytest.mark.parametrize("text", ["", "led", "university degree " * 80, "experience " * 200])
    def test_overall_is_mean_of_sections(self, skill_count, text):
        card = ScoreCalculator().compute(text, ["s"] * skill_count)
        s = card.sections
        assert 0 <= card.overall <= 100
        assert card.overall == round_half_up((s.skills + s.experience + s.education + s.format) / 4)

    def test_weights_from_settings(self):
        """Weights are taken from configuration."""
        config = make_settings(SKILL_SCORE_WEIGHT=12, EXPERIENCE_SCORE_WEIGHT=15, EDUCATION_SCORE_WEIGHT=20)
        calculator = ScoreCalculator(ScoringWeights.from_settings(config))

        card = calculator.compute("managed at university", ["a", "b", "c"])

        assert card.sections.skills == 36
        assert card.sections.experience == 45
        assert card.sections.education == 60


class TestHelpers:
    def test_clamp(self):
        assert clamp(20, 100, 5) == 20
        assert clamp(20, 100, 150) == 100
        assert clamp(20, 100, 55) == 55

    def test_round_half_up(self):
        assert round_half_up(62.5) == 63
        assert round_half_up(62.25) == 62
        assert round_half_up(62.75) == 63
