"""Pipeline settings loaded from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..core.errors import ConfigurationError
from .io import DEFAULT_OUTPUT_PATH


@dataclass(frozen=True)
class PipelineSettings:
    assessments_path: str
    output_path: str = DEFAULT_OUTPUT_PATH
    provider: str = "gemini"
    model: Optional[str] = None
    max_tokens: int = 8192
    max_retries: int = 3
    retry_delay_seconds: float = 10.0
    attempt_timeout_seconds: float = 30.0
    concurrency: int = 4
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "PipelineSettings":
        """
        Read settings from environment variables.

        Raises:
            ConfigurationError: ASSESSMENTS_PATH unset or a numeric value invalid
        """
        if load_dotenv_file:
            load_dotenv()

        assessments_path = os.getenv("ASSESSMENTS_PATH")
        if not assessments_path:
            raise ConfigurationError("Please set the ASSESSMENTS_PATH environment variable.")

        return cls(
            assessments_path=assessments_path,
            output_path=os.getenv("OUTPUT_PATH", DEFAULT_OUTPUT_PATH),
            provider=os.getenv("LLM_PROVIDER", "gemini"),
            model=os.getenv("LLM_MODEL") or None,
            max_tokens=_env_number("LLM_MAX_TOKENS", 8192, int),
            max_retries=_env_number("MAX_RETRIES", 3, int),
            retry_delay_seconds=_env_number("RETRY_DELAY_SECONDS", 10.0, float),
            attempt_timeout_seconds=_env_number("ATTEMPT_TIMEOUT_SECONDS", 30.0, float),
            concurrency=_env_number("CONCURRENCY", 4, int),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"Environment variable {name} must be a number, got {raw!r}") from e
