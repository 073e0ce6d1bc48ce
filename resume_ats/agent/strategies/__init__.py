from .wrapper import JSONWrapper
from .fallback import (
    AnalysisStrategy,
    DeterministicStrategy,
    FallbackChain,
    GenerativeStrategy,
)

__all__ = [
    "JSONWrapper",
    "AnalysisStrategy",
    "DeterministicStrategy",
    "FallbackChain",
    "GenerativeStrategy",
]
