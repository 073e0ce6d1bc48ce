from .recommendations import PROMPT as RECOMMENDATIONS_PROMPT
from .skill_extraction import PROMPT as SKILL_EXTRACTION_PROMPT

__all__ = ["RECOMMENDATIONS_PROMPT", "SKILL_EXTRACTION_PROMPT"]
