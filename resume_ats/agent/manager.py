import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from fastapi.concurrency import run_in_threadpool

from ..core import Settings
from .exceptions import ProviderError, StrategyError
from .strategies.wrapper import JSONWrapper
from .providers.base import Provider

logger = logging.getLogger(__name__)


class AgentManager:
    """
    Hands out generative providers and runs JSON prompts against them.

    The manager either borrows a provider supplied by the caller or builds one
    from ``config.LLM_PROVIDER``. Inside ``session()`` every ``run()`` shares
    one built provider; outside it each ``run()`` builds its own. Providers it
    builds are closed when their scope ends, however it ends.
    """

    def __init__(self,
                 config: Settings,
                 provider: Optional[Provider] = None,
                 timeout: Optional[float] = None,
                 ) -> None:
        self.config = config
        self.strategy = JSONWrapper()
        self.model = config.LL_MODEL
        self.model_provider = (config.LLM_PROVIDER or "").strip()
        self.timeout = timeout if timeout is not None else config.PROVIDER_TIMEOUT_SECONDS
        self._provider = provider
        self._active: Optional[Provider] = None

    @property
    def enabled(self) -> bool:
        return self._provider is not None or self.config.provider_enabled

    async def _get_provider(self, **kwargs: Any) -> Provider:
        # Default options for any LLM. Not all can handle them
        # (e.g. OpenAI doesn't take top_k) but each provider can make
        # best effort.
        opts = {
            "temperature": self.config.LLM_TEMPERATURE,
            "max_tokens": self.config.LLM_MAX_TOKENS,
        }
        opts.update(kwargs)
        match self.model_provider.lower():
            case '' | 'none':
                raise ProviderError("No LLM provider configured")
            case 'ollama':
                from .providers.ollama import OllamaProvider
                # construction talks to the server (list / pull)
                return await run_in_threadpool(OllamaProvider,
                                               model_name=self.model,
                                               api_base_url=self.config.LLM_BASE_URL,
                                               opts=opts,
                                               timeout=self.timeout)
            case _:
                from .providers.llama_index import LlamaIndexProvider
                return LlamaIndexProvider(api_key=self.config.LLM_API_KEY,
                                          model_name=self.model,
                                          api_base_url=self.config.LLM_BASE_URL,
                                          provider=self.model_provider,
                                          opts=opts)

    async def _build(self, **kwargs: Any) -> Provider:
        try:
            provider = await asyncio.wait_for(self._get_provider(**kwargs), timeout=self.timeout)
        except ProviderError:
            raise
        except asyncio.TimeoutError as e:
            raise ProviderError(f"Provider '{self.model_provider}' setup timed out after {self.timeout}s") from e
        except Exception as e:
            raise ProviderError(f"Could not initialise provider '{self.model_provider}': {e}") from e
        logger.debug(f"Built {type(provider).__name__}")
        return provider

    @asynccontextmanager
    async def session(self, **kwargs: Any) -> AsyncIterator[Provider]:
        """
        Scoped access to a provider.

        A borrowed provider is yielded as-is. Otherwise one provider is built
        (bounded by the timeout), shared by every ``run()`` in the block and
        closed on exit. Nested sessions reuse the outer provider.
        """
        if self._provider is not None:
            yield self._provider
            return
        if self._active is not None:
            yield self._active
            return
        provider = await self._build(**kwargs)
        self._active = provider
        try:
            yield provider
        finally:
            self._active = None
            await provider.aclose()

    async def run(self, prompt: str, **kwargs: Any) -> Any:
        """
        Run the prompt through a provider and return the decoded JSON.

        Raises:
            ProviderError: the provider failed, could not be built, or timed out
            StrategyError: the completion was not valid JSON
        """
        try:
            return await asyncio.wait_for(self._run(prompt, **kwargs), timeout=self.timeout)
        except (ProviderError, StrategyError):
            raise
        except asyncio.TimeoutError as e:
            raise ProviderError(f"Provider call timed out after {self.timeout}s") from e
        except Exception as e:
            raise ProviderError(f"Provider call failed: {e}") from e

    async def _run(self, prompt: str, **kwargs: Any) -> Any:
        provider = self._provider if self._provider is not None else self._active
        if provider is not None:
            return await self.strategy(prompt, provider, **kwargs)
        # One-off call: options go to the builder
        async with self.session(**kwargs) as provider:
            return await self.strategy(prompt, provider)
