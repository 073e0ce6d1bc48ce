import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..exceptions import ProviderError, StrategyError

if TYPE_CHECKING:
    from ..manager import AgentManager

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AnalysisStrategy(ABC, Generic[T]):
    """One way of producing part of an analysis."""

    name: str = "strategy"
    deterministic: bool = False

    @abstractmethod
    async def __call__(self, *args: Any, **kwargs: Any) -> T:
        ...


class GenerativeStrategy(AnalysisStrategy[T]):
    """
    Delegates to an external provider through an AgentManager.

    Implementations raise ProviderError or StrategyError when the provider
    cannot give a usable answer, which hands control to the next strategy.
    """

    def __init__(self, agent: "AgentManager") -> None:
        self.agent = agent


class DeterministicStrategy(AnalysisStrategy[T]):
    """Pure, local computation. Never suspends and never fails on valid input."""

    deterministic = True


class FallbackChain(Generic[T]):
    """
    Tries strategies in order and returns the first usable result.

    The last strategy must be deterministic so the chain always terminates
    with a value.
    """

    def __init__(self, *strategies: AnalysisStrategy[T]) -> None:
        if not strategies:
            raise ValueError("FallbackChain needs at least one strategy")
        if not strategies[-1].deterministic:
            raise ValueError(
                f"Last strategy in a FallbackChain must be deterministic, got '{strategies[-1].name}'"
            )
        self.strategies = strategies

    async def __call__(self, *args: Any, **kwargs: Any) -> T:
        for strategy in self.strategies[:-1]:
            try:
                result = await strategy(*args, **kwargs)
            except (ProviderError, StrategyError) as e:
                logger.warning(f"{strategy.name} failed, falling back: {e}")
                continue
            logger.debug(f"{strategy.name} produced the result")
            return result
        return await self.strategies[-1](*args, **kwargs)
