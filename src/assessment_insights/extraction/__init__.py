"""Insights extraction: data model, prompt, retry policy and the extraction element."""

from .extractor import DEFAULT_ATTEMPT_TIMEOUT, InsightsExtractor, parse_insights
from .prompts import INSIGHTS_PROMPT
from .retry import RetryPolicy
from .schemas import AssessmentRecord, InsightsResult, load_insights_schema

__all__ = [
    "InsightsExtractor",
    "parse_insights",
    "DEFAULT_ATTEMPT_TIMEOUT",
    "INSIGHTS_PROMPT",
    "RetryPolicy",
    "AssessmentRecord",
    "InsightsResult",
    "load_insights_schema",
]
