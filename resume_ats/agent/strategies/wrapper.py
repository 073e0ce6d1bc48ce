import json
import logging
import re

from typing import Any

from ..exceptions import StrategyError
from ..providers.base import Provider

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*(?P<body>.*?)\s*```$", re.DOTALL | re.IGNORECASE)


class JSONWrapper:
    """
    Calls a provider and decodes its completion as JSON.

    Models often wrap JSON in a markdown code fence; a single surrounding
    fence is stripped before decoding.
    """

    async def __call__(self, prompt: str, provider: Provider, **generation_args: Any) -> Any:
        response = await provider(prompt, **generation_args)
        if not isinstance(response, str):
            raise StrategyError(f"Provider returned {type(response).__name__}, expected str")
        text = response.strip()
        match = _FENCE_RE.match(text)
        if match:
            text = match.group("body")
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.debug(f"Unparseable provider response: {response[:200]!r}")
            raise StrategyError(f"JSON parsing error: {e}") from e
