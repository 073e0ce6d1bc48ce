import logging
import ollama
from ollama._types import ResponseError as OllamaResponseError

from typing import Any, Dict, List, Optional
from fastapi.concurrency import run_in_threadpool

from ..exceptions import ProviderError
from .base import Provider

logger = logging.getLogger(__name__)


class OllamaProvider(Provider):
    """Ollama LLM provider for text generation."""

    _client: ollama.Client

    def __init__(
        self,
        model_name: str = "gemma3:4b",
        api_base_url: Optional[str] = None,
        opts: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ):
        self.opts = opts or {}
        self.model = model_name
        # The httpx timeout also bounds a blocking pull running in a worker thread
        client_kwargs: Dict[str, Any] = {"timeout": timeout}
        if api_base_url:
            client_kwargs["host"] = api_base_url
        self._client = ollama.Client(**client_kwargs)
        self._ensure_model_pulled(model_name)

    def _installed_models(self) -> List[str]:
        return [m.model for m in self._client.list().models]

    def _ensure_model_pulled(self, model_name: str) -> None:
        """
        Ensure model is available locally.
        - If it's already in /api/tags, skip pulling.
        - If pull fails but model is actually present, continue.
        - Raises ProviderError with clear message if model unavailable.
        """
        try:
            installed = self._installed_models()
            # "llama3" should match "llama3:latest"
            if model_name in installed or any(m.startswith(model_name) for m in installed):
                logger.debug(f"Ollama model '{model_name}' already installed")
                return
        except Exception as e:
            logger.warning(f"Failed to list Ollama models: {e}")

        try:
            logger.info(f"Pulling Ollama model '{model_name}'...")
            self._client.pull(model_name)
            logger.info(f"Successfully pulled Ollama model '{model_name}'")
            return
        except Exception as e:
            error_msg = (
                f"Ollama model '{model_name}' is unavailable. "
                f"Please run 'ollama pull {model_name}'. "
                f"Original error: {e}"
            )
            logger.error(error_msg)
            raise ProviderError(error_msg) from e

    def _generate_sync(self, prompt: str, options: Dict[str, Any]) -> str:
        """Generate a response from the model synchronously."""
        try:
            response = self._client.generate(
                prompt=prompt,
                model=self.model,
                options=options,
            )
            return response["response"].strip()
        except OllamaResponseError as e:
            logger.error(f"Ollama generation error: status={e.status_code}, message={e}")
            raise ProviderError(f"Ollama - Error generating response: {e}") from e
        except Exception as e:
            logger.error(f"Ollama sync error: {e}")
            raise ProviderError(f"Ollama - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        opts = {**self.opts, **generation_args}
        # Ollama names the token limit num_predict
        options = {k: v for k, v in opts.items() if k in ("temperature", "top_k", "top_p")}
        if opts.get("max_tokens") is not None:
            options["num_predict"] = opts["max_tokens"]
        return await run_in_threadpool(self._generate_sync, prompt, options)

    async def aclose(self) -> None:
        self._client.close()
