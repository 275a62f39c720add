"""Core infrastructure: generation capability, provider adapters, config, tools."""

from .abstractions import GenerateOptions, LanguageModel
from .errors import (
    ConfigurationError,
    ExhaustedRetriesError,
    GenerationError,
    InsightsError,
    ParseError,
    ToolMismatchError,
    TransportError,
)
from .llm_client import (
    AnthropicLLM,
    GeminiLLM,
    MistralLLM,
    ProviderLLM,
    create_llm_client,
)
from .llm_config import (
    API_KEY_ENV,
    DEFAULT_MODELS,
    GenerationConfig,
    GenerationOption,
    build_generation_config,
    with_max_tokens,
    with_model_name,
    with_temperature,
    with_top_p,
)
from .logger import get_logger
from .metrics import MetricsCollector
from .tools import (
    AnthropicTool,
    GeminiTool,
    MistralTool,
    Provider,
    ToolDescriptor,
    anthropic_tool,
    gemini_tool,
    make_tool,
    mistral_tool,
)

__all__ = [
    # Generation capability
    "LanguageModel",
    "GenerateOptions",
    # Adapters
    "ProviderLLM",
    "AnthropicLLM",
    "MistralLLM",
    "GeminiLLM",
    "create_llm_client",
    # Configuration
    "GenerationConfig",
    "GenerationOption",
    "build_generation_config",
    "with_model_name",
    "with_temperature",
    "with_max_tokens",
    "with_top_p",
    "DEFAULT_MODELS",
    "API_KEY_ENV",
    # Tools
    "Provider",
    "ToolDescriptor",
    "AnthropicTool",
    "MistralTool",
    "GeminiTool",
    "anthropic_tool",
    "mistral_tool",
    "gemini_tool",
    "make_tool",
    # Errors
    "InsightsError",
    "ConfigurationError",
    "GenerationError",
    "ToolMismatchError",
    "TransportError",
    "ParseError",
    "ExhaustedRetriesError",
    # Infrastructure
    "get_logger",
    "MetricsCollector",
]
