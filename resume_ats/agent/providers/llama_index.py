"""
LlamaIndex Provider Integration

Any llama_index LLM integration can back the analyzer. The class is named by
its fully-qualified path in LLM_PROVIDER, for example:

    llama_index.llms.openai.OpenAI
    llama_index.llms.anthropic.Anthropic
    llama_index.llms.openai_like.OpenAILike

Only a minimal, widely-accepted set of constructor kwargs is passed:
model, api_key, base_url (if set), temperature and max_tokens. Older
integrations that expect ``model_name`` instead of ``model`` are retried
with that spelling.
"""

import logging

from typing import Any, Dict, Optional
from fastapi.concurrency import run_in_threadpool
from llama_index.core.base.llms.base import BaseLLM

from ..exceptions import ProviderError
from .base import Provider

logger = logging.getLogger(__name__)

def _get_real_provider(provider_name):
    # The format this method expects is something like:
    # llama_index.llms.openai_like.OpenAILike
    if not isinstance(provider_name, str):
        raise ValueError("provider_name must be a string denoting a fully-qualified Python class name")
    dotpos = provider_name.rfind('.')
    if dotpos < 0:
        raise ValueError("provider_name not correctly formatted")
    classname = provider_name[dotpos+1:]
    modname = provider_name[:dotpos]
    from importlib import import_module
    rm = import_module(modname)
    return getattr(rm, classname), modname, classname

class LlamaIndexProvider(Provider):
    def __init__(self,
                 api_key: Optional[str] = None,
                 api_base_url: Optional[str] = None,
                 model_name: Optional[str] = None,
                 provider: Optional[str] = None,
                 opts: Optional[Dict[str, Any]] = None):
        if opts is None:
            opts = {}
        self.opts = opts
        self._model = model_name
        self._provider = provider
        if not provider:
            raise ValueError("Provider string is required")
        provider_obj, self._modname, self._classname = _get_real_provider(provider)
        if not issubclass(provider_obj, BaseLLM):
            raise TypeError("LLM provider must be e.g. a llama_index.llms.* class - a subclass of llama_index.core.base.llms.base.BaseLLM")

        kwargs_for_provider: Dict[str, Any] = {"api_key": api_key}
        if model_name:
            kwargs_for_provider["model"] = model_name
        if api_base_url:
            kwargs_for_provider['base_url'] = api_base_url
        if opts.get('temperature') is not None:
            kwargs_for_provider['temperature'] = opts['temperature']
        if opts.get('max_tokens') is not None:
            kwargs_for_provider['max_tokens'] = opts['max_tokens']
        try:
            self._client = provider_obj(**kwargs_for_provider)
        except TypeError as e:
            if 'model' in str(e) or 'unexpected keyword argument' in str(e):
                legacy_kwargs = {**kwargs_for_provider}
                legacy_kwargs.pop('model', None)
                legacy_kwargs['model_name'] = model_name
                self._client = provider_obj(**legacy_kwargs)
            else:
                raise

    def _generate_sync(self, prompt: str) -> str:
        """
        Generate a response from the model.
        """
        try:
            cr = self._client.complete(prompt)
            return cr.text
        except Exception as e:
            logger.error(f"llama_index sync error: {e}")
            raise ProviderError(f"llama_index - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        # Sampling options are fixed when the client is built
        if generation_args:
            logger.debug(f"LlamaIndexProvider ignoring generation_args: {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt)

    async def aclose(self) -> None:
        # Not every integration holds a closable client
        close = getattr(self._client, "close", None)
        if callable(close):
            close()
