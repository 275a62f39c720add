"""
Error taxonomy for generation and extraction.

Construction-time problems raise ConfigurationError. Per-call failures raise a
GenerationError subclass. Extraction adds ParseError and the internal
ExhaustedRetriesError.
"""

from typing import Optional


class InsightsError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(InsightsError):
    """Missing credential, invalid option or unknown provider at setup time."""


class GenerationError(InsightsError):
    """A single generate_text call failed."""

    def __init__(self, message: str, provider: Optional[str] = None):
        self.provider = provider
        super().__init__(message)


class ToolMismatchError(GenerationError):
    """A tool descriptor is tagged for a different provider than the adapter."""

    def __init__(self, expected: str, actual: str, index: int):
        self.expected = expected
        self.actual = actual
        self.index = index
        super().__init__(
            f"tool type mismatch for {expected} LLM: tool #{index} is tagged for {actual}",
            provider=expected,
        )


class TransportError(GenerationError):
    """Network, provider API or deadline failure. Retryable."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        error_type: Optional[str] = None,
    ):
        self.error_type = error_type
        super().__init__(message, provider=provider)


class ParseError(InsightsError):
    """Model output could not be decoded into the output schema."""

    def __init__(self, message: str, raw_text: str = ""):
        self.raw_text = raw_text
        super().__init__(message)


class ExhaustedRetriesError(InsightsError):
    """All attempts for one record failed. Logged, never raised to the runner."""

    def __init__(self, attempts: int, last_error: Optional[BaseException]):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Failed to extract insights after {attempts} attempts: {last_error}"
        )
