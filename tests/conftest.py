import asyncio
from typing import Any, List

import pytest

from resume_ats.agent.providers.base import Provider
from resume_ats.core.config import Settings


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from the environment and any .env file."""
    values = {"LLM_PROVIDER": None, "ALLOW_FALLBACK_ONLY": True}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class ScriptedProvider(Provider):
    """Returns canned completions in order; exceptions in the script are raised."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.prompts: List[str] = []
        self.closed = False

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, BaseException):
            raise response
        return response

    async def aclose(self) -> None:
        self.closed = True


class SlowProvider(Provider):
    """Never answers within any reasonable timeout."""

    def __init__(self, delay: float = 5.0) -> None:
        self.delay = delay
        self.started = asyncio.Event()
        self.cancelled = False

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        self.started.set()
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return '["Python"]'


@pytest.fixture
def offline_settings() -> Settings:
    return make_settings()
