from .exceptions import ProviderError, StrategyError
from .manager import AgentManager
from .providers.base import Provider

__all__ = ["AgentManager", "Provider", "ProviderError", "StrategyError"]
