"""Retry policy for the extraction element."""

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import ParseError, TransportError


class RetryPolicy(BaseModel):
    """
    Fixed-delay retry policy.

    Transport failures are always retried while attempts remain. Parse failures
    are retried too unless ``retry_on_parse_error`` is False. Any other error
    ends the record immediately.
    """

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=3, ge=1)
    delay_seconds: float = Field(default=10.0, ge=0.0)
    retry_on_parse_error: bool = True

    def is_retryable(self, error: BaseException) -> bool:
        if isinstance(error, TransportError):
            return True
        if isinstance(error, ParseError):
            return self.retry_on_parse_error
        return False
