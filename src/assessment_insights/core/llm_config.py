"""
Generation configuration and option builder.

Usage:
    config = build_generation_config(
        Provider.GEMINI,
        with_max_tokens(8192),
        with_temperature(0.2),
    )

Options are applied strictly in the order given (last write wins per field)
and the result is validated once. Invalid values raise ConfigurationError.
"""

from typing import Any, Callable, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError
from .tools import Provider


DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 512
DEFAULT_TOP_P = 1.0

DEFAULT_MODELS: Dict[Provider, str] = {
    Provider.ANTHROPIC: "claude-haiku-4-5",
    Provider.MISTRAL: "mistral-small-latest",
    Provider.GEMINI: "gemini-2.5-flash",
}

# Environment variable holding each provider's API key
API_KEY_ENV: Dict[Provider, str] = {
    Provider.ANTHROPIC: "CLAUDE_API_KEY",
    Provider.MISTRAL: "MISTRAL_API_KEY",
    Provider.GEMINI: "GEMINI_API_KEY",
}


class GenerationConfig(BaseModel):
    """Sampling parameters for one adapter. Immutable once built."""

    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())

    model_name: str = Field(min_length=1)
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    top_p: float = Field(default=DEFAULT_TOP_P, ge=0.0, le=1.0)


# An option writes one field of the draft being built
GenerationOption = Callable[[Dict[str, Any]], None]


def with_model_name(model_name: str) -> GenerationOption:
    def apply(draft: Dict[str, Any]) -> None:
        draft["model_name"] = model_name
    return apply


def with_temperature(temperature: float) -> GenerationOption:
    def apply(draft: Dict[str, Any]) -> None:
        draft["temperature"] = temperature
    return apply


def with_max_tokens(max_tokens: int) -> GenerationOption:
    def apply(draft: Dict[str, Any]) -> None:
        draft["max_tokens"] = max_tokens
    return apply


def with_top_p(top_p: float) -> GenerationOption:
    def apply(draft: Dict[str, Any]) -> None:
        draft["top_p"] = top_p
    return apply


def default_draft(provider: Union[str, Provider]) -> Dict[str, Any]:
    """Field values before any option is applied."""
    try:
        provider = Provider.parse(provider)
    except ValueError as e:
        raise ConfigurationError(f"Unknown LLM provider: {provider}") from e
    return {
        "model_name": DEFAULT_MODELS[provider],
        "temperature": DEFAULT_TEMPERATURE,
        "max_tokens": DEFAULT_MAX_TOKENS,
        "top_p": DEFAULT_TOP_P,
    }


def build_generation_config(
    provider: Union[str, Provider],
    *options: GenerationOption,
) -> GenerationConfig:
    """
    Build a validated GenerationConfig for ``provider``.

    Args:
        provider: Provider whose default model name seeds the draft
        *options: Option functions, applied in order

    Returns:
        Frozen GenerationConfig

    Raises:
        ConfigurationError: Unknown provider or a value out of range
    """
    draft = default_draft(provider)
    for option in options:
        option(draft)

    try:
        return GenerationConfig.model_validate(draft, strict=True)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid generation config: {_describe(e)}") from e


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err.get("loc", ["unknown"]))
        parts.append(f"{field}: {err.get('msg', '')}")
    return "; ".join(parts)
