from abc import ABC, abstractmethod
from typing import Any


class Provider(ABC):
    """
    Abstract base class for generative text providers.

    A provider turns a prompt into raw completion text. It may fail or hang;
    callers are expected to bound it with a timeout and release it with
    ``aclose`` once done.
    """

    @abstractmethod
    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        ...

    async def aclose(self) -> None:
        """Release any client resources held by the provider."""
        return None
