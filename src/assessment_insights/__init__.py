"""assessment-insights: structured performance insights from assessment narratives."""

from .core import (
    ConfigurationError,
    GenerateOptions,
    LanguageModel,
    ParseError,
    Provider,
    ToolMismatchError,
    TransportError,
    create_llm_client,
    with_max_tokens,
    with_model_name,
    with_temperature,
    with_top_p,
)
from .extraction import (
    AssessmentRecord,
    InsightsExtractor,
    InsightsResult,
    RetryPolicy,
)
from .pipeline import run_pipeline

__version__ = "0.1.0"

__all__ = [
    # Generation
    "LanguageModel",
    "GenerateOptions",
    "Provider",
    "create_llm_client",
    "with_model_name",
    "with_temperature",
    "with_max_tokens",
    "with_top_p",
    # Errors
    "ConfigurationError",
    "ToolMismatchError",
    "TransportError",
    "ParseError",
    # Extraction
    "AssessmentRecord",
    "InsightsResult",
    "InsightsExtractor",
    "RetryPolicy",
    # Pipeline
    "run_pipeline",
]
