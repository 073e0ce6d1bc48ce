from typing import Optional


class AnalysisError(Exception):
    """Base class for errors the analysis service surfaces to callers."""


class EmptyResumeError(AnalysisError):
    """
    Raised when the resume text is empty or whitespace-only.

    Every scoring and recommendation rule degrades gracefully, but on empty
    input they only produce meaningless numbers, so the analysis is refused.
    """

    def __init__(self, file_name: Optional[str] = None, message: Optional[str] = None):
        self.file_name = file_name
        if message is None:
            message = "Resume text is empty"
            if file_name:
                message += f" (file: {file_name})"
            message += ". Check that text extraction succeeded."
        super().__init__(message)


class AnalyzerConfigurationError(AnalysisError):
    """Raised when no provider is configured and fallback-only mode is not allowed."""

    def __init__(self, provider: Optional[str] = None, message: Optional[str] = None):
        self.provider = provider
        if message is None:
            message = (
                "No generative provider configured and ALLOW_FALLBACK_ONLY is disabled. "
                "Set LLM_PROVIDER or enable ALLOW_FALLBACK_ONLY."
            )
        super().__init__(message)
