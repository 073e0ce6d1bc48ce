"""
Tests for the Ollama text generation provider.

These tests verify:
1. Model availability is checked and pulled when missing
2. Generation returns the stripped completion text
3. Ollama ResponseError and other failures are wrapped as ProviderError
"""

import pytest
from unittest.mock import MagicMock, patch


class TestOllamaProvider:
    """Tests for OllamaProvider."""

    @pytest.fixture
    def mock_ollama_client(self):
        """Create a mock Ollama client."""
        client = MagicMock()
        mock_model = MagicMock()
        mock_model.model = "gemma3:4b"
        client.list.return_value.models = [mock_model]
        return client

    @pytest.fixture
    def provider_with_mock_client(self, mock_ollama_client):
        """Create an OllamaProvider with a mocked client."""
        with patch('resume_ats.agent.providers.ollama.ollama.Client', return_value=mock_ollama_client):
            from resume_ats.agent.providers.ollama import OllamaProvider
            provider = OllamaProvider(model_name="gemma3:4b", opts={"temperature": 0.3, "max_tokens": 500})
            return provider, mock_ollama_client

    def test_installed_model_not_pulled(self, provider_with_mock_client):
        """A model already listed by the server is not pulled again."""
        _, mock_client = provider_with_mock_client
        mock_client.pull.assert_not_called()

    def test_missing_model_is_pulled(self):
        mock_client = MagicMock()
        mock_client.list.return_value.models = []

        with patch('resume_ats.agent.providers.ollama.ollama.Client', return_value=mock_client):
            from resume_ats.agent.providers.ollama import OllamaProvider
            OllamaProvider(model_name="gemma3:4b")

        mock_client.pull.assert_called_once_with("gemma3:4b")

    def test_unavailable_model_raises_provider_error(self):
        from resume_ats.agent.exceptions import ProviderError

        mock_client = MagicMock()
        mock_client.list.return_value.models = []
        mock_client.pull.side_effect = Exception("Connection refused")

        with patch('resume_ats.agent.providers.ollama.ollama.Client', return_value=mock_client):
            from resume_ats.agent.providers.ollama import OllamaProvider

            with pytest.raises(ProviderError) as exc_info:
                OllamaProvider(model_name="gemma3:4b")

        assert "ollama pull gemma3:4b" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_generate_returns_stripped_text(self, provider_with_mock_client):
        provider, mock_client = provider_with_mock_client
        mock_client.generate.return_value = {"response": '  ["Python", "Docker"]\n'}

        result = await provider("extract skills")

        assert result == '["Python", "Docker"]'
        kwargs = mock_client.generate.call_args.kwargs
        assert kwargs["model"] == "gemma3:4b"
        assert kwargs["options"] == {"temperature": 0.3, "num_predict": 500}

    @pytest.mark.asyncio
    async def test_response_error_wrapped(self, provider_with_mock_client):
        provider, mock_client = provider_with_mock_client

        from ollama._types import ResponseError
        from resume_ats.agent.exceptions import ProviderError

        mock_client.generate.side_effect = ResponseError("model runner crashed", status_code=500)

        with pytest.raises(ProviderError) as exc_info:
            await provider("extract skills")

        assert "model runner crashed" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_unexpected_error_wrapped(self, provider_with_mock_client):
        provider, mock_client = provider_with_mock_client

        from resume_ats.agent.exceptions import ProviderError

        mock_client.generate.side_effect = OSError("EOF")

        with pytest.raises(ProviderError):
            await provider("extract skills")

    @pytest.mark.asyncio
    async def test_call_options_override_defaults(self, provider_with_mock_client):
        """Per-call options win over the ones given at construction."""
        provider, mock_client = provider_with_mock_client
        mock_client.generate.return_value = {"response": "[]"}

        await provider("recommend", temperature=0.4, max_tokens=800)

        assert mock_client.generate.call_args.kwargs["options"] == {"temperature": 0.4, "num_predict": 800}

    @pytest.mark.asyncio
    async def test_aclose_closes_client(self, provider_with_mock_client):
        provider, mock_client = provider_with_mock_client
        await provider.aclose()
        mock_client.close.assert_called_once()

    def test_client_built_with_timeout_and_host(self, mock_ollama_client):
        with patch('resume_ats.agent.providers.ollama.ollama.Client', return_value=mock_ollama_client) as client_cls:
            from resume_ats.agent.providers.ollama import OllamaProvider
            OllamaProvider(model_name="gemma3:4b", api_base_url="http://ollama:11434", timeout=2.5)

        client_cls.assert_called_once_with(timeout=2.5, host="http://ollama:11434")
