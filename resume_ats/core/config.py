import logging
import sys
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Resume ATS Analyzer"

    # Generative provider. Empty / "none" means deterministic analysis only,
    # "ollama" selects the Ollama client, anything else is treated as a
    # fully-qualified llama_index LLM class (e.g. llama_index.llms.openai.OpenAI).
    LLM_PROVIDER: Optional[str] = None
    LL_MODEL: Optional[str] = "gemma3:4b"
    LLM_API_KEY: Optional[str] = None
    LLM_BASE_URL: Optional[str] = None
    LLM_TEMPERATURE: float = Field(default=0.3, ge=0.0)
    LLM_MAX_TOKENS: int = Field(default=800, ge=1)
    PROVIDER_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0.0)
    ALLOW_FALLBACK_ONLY: bool = True

    MAX_SKILLS: int = Field(default=8, ge=1)
    MAX_RECOMMENDATIONS: int = Field(default=8, ge=1)

    # Points per matched skill / experience keyword / education keyword
    SKILL_SCORE_WEIGHT: int = Field(default=10, ge=1)
    EXPERIENCE_SCORE_WEIGHT: int = Field(default=12, ge=1)
    EDUCATION_SCORE_WEIGHT: int = Field(default=15, ge=1)

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def provider_enabled(self) -> bool:
        return bool(self.LLM_PROVIDER) and self.LLM_PROVIDER.strip().lower() != "none"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for scripts and embedding applications.

    The package never configures logging on import; pass ``Settings.LOG_LEVEL``
    from the caller's own Settings instance.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
