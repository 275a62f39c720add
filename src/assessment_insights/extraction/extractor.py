"""
Insights Extraction Element

Turns one AssessmentRecord into one InsightsResult:

    build prompt -> generate (under a per-attempt deadline) -> strict parse
         ^                                                        |
         +---- fixed delay <---- retryable failure, attempts left -+

Success emits exactly one result. When attempts run out the record is logged
and dropped; nothing is emitted and nothing is raised to the runner.
"""

import asyncio
import logging
import time
from typing import Callable, Optional

from pydantic import ValidationError

from ..core.abstractions import GenerateOptions, LanguageModel
from ..core.errors import (
    ExhaustedRetriesError,
    ParseError,
    ToolMismatchError,
    TransportError,
)
from ..core.llm_client import JSON_MIME_TYPE
from ..core.metrics import MetricsCollector
from .prompts import INSIGHTS_PROMPT
from .retry import RetryPolicy
from .schemas import AssessmentRecord, InsightsResult, load_insights_schema

logger = logging.getLogger(__name__)

DEFAULT_ATTEMPT_TIMEOUT = 30.0

Emit = Callable[[InsightsResult], None]


def parse_insights(text: str) -> InsightsResult:
    """
    Strictly decode a model response.

    The text must be exactly one JSON object satisfying the output schema.
    Markdown fences, comments or prose around it are rejected.

    Raises:
        ParseError: Malformed JSON or schema violation
    """
    try:
        return InsightsResult.model_validate_json(text)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err.get('loc', ())) or '<root>'}: {err.get('msg', '')}"
            for err in e.errors()
        )
        raise ParseError(f"error unmarshaling insights: {details}", raw_text=text) from e


class InsightsExtractor:
    """
    Retrying extraction element.

    Example:
        llm = create_llm_client("gemini", with_max_tokens(8192))
        extractor = InsightsExtractor(llm, retry_policy=RetryPolicy(max_attempts=3))
        await extractor.process_element(record, results.append)
    """

    def __init__(
        self,
        model: LanguageModel,
        schema: Optional[str] = None,
        retry_policy: Optional[RetryPolicy] = None,
        attempt_timeout: float = DEFAULT_ATTEMPT_TIMEOUT,
        options: Optional[GenerateOptions] = None,
        metrics: Optional[MetricsCollector] = None,
        name: str = "extract_insights",
    ):
        """
        Initialize extractor.

        Args:
            model: Generation capability (any provider adapter)
            schema: Schema text embedded in the prompt (defaults to the bundled schema)
            retry_policy: Attempts, delay and parse-error handling
            attempt_timeout: Seconds allowed per generate call
            options: Per-call options (defaults to JSON response mode)
            metrics: Collector for per-record outcomes
            name: Identifier for logging/metrics
        """
        if attempt_timeout <= 0:
            raise ValueError("attempt_timeout must be positive")

        self.model = model
        self.schema = schema if schema is not None else load_insights_schema()
        self.retry_policy = retry_policy or RetryPolicy()
        self.attempt_timeout = attempt_timeout
        self.options = options or GenerateOptions(response_mime_type=JSON_MIME_TYPE)
        self.metrics = metrics or MetricsCollector(name=name)
        self.name = name

    def build_prompt(self, record: AssessmentRecord) -> str:
        if not record.result or not record.result.strip():
            raise ValueError("assessment result text must be non-empty")
        return INSIGHTS_PROMPT.format(assessment=record.result, schema=self.schema)

    def parse_response(self, text: str) -> InsightsResult:
        return parse_insights(text)

    async def extract(self, record: AssessmentRecord) -> InsightsResult:
        """
        Run a single attempt.

        Raises:
            TransportError: Provider failure or deadline exceeded
            ParseError: Response does not satisfy the schema
            ToolMismatchError: Misconfigured tools
            ValueError: Empty narrative
        """
        prompt = self.build_prompt(record)

        try:
            text = await asyncio.wait_for(
                self.model.generate_text(prompt, self.options),
                timeout=self.attempt_timeout,
            )
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"error generating text: deadline of {self.attempt_timeout}s exceeded",
                provider=self.model.provider.value,
                error_type="deadline_exceeded",
            ) from e

        return self.parse_response(text)

    async def process_element(
        self,
        record: AssessmentRecord,
        emit: Emit,
    ) -> Optional[InsightsResult]:
        """
        Extract insights with retries and emit on success.

        Args:
            record: Assessment to process
            emit: Called exactly once with the result on success

        Returns:
            The emitted result, or None when the record was dropped
        """
        policy = self.retry_policy
        start_time = time.time()
        last_error: Optional[BaseException] = None
        attempt = 0

        while attempt < policy.max_attempts:
            attempt += 1
            try:
                insights = await self.extract(record)
            except (TransportError, ParseError) as e:
                last_error = e
                if not policy.is_retryable(e):
                    logger.error(f"[{self.name}] Attempt {attempt} failed, not retrying: {e}")
                    break
                if attempt < policy.max_attempts:
                    logger.warning(
                        f"[{self.name}] Attempt {attempt}/{policy.max_attempts} failed: {e}. "
                        f"Retrying in {policy.delay_seconds}s..."
                    )
                    await asyncio.sleep(policy.delay_seconds)
                continue
            except (ToolMismatchError, ValueError) as e:
                last_error = e
                logger.error(f"[{self.name}] Attempt {attempt} failed, not retrying: {e}")
                break

            emit(insights)
            self._record(start_time, "success", attempt)
            logger.info(f"[{self.name}] Extraction successful (attempt {attempt})")
            return insights

        exhausted = ExhaustedRetriesError(attempts=attempt, last_error=last_error)
        logger.error(f"[{self.name}] {exhausted}")
        self._record(start_time, "error", attempt, error=str(last_error))
        return None

    def _record(self, start_time: float, status: str, attempts: int, error: str = None):
        details = {"attempts": attempts}
        if error:
            details["error"] = error
        duration_ms = (time.time() - start_time) * 1000
        self.metrics.record(self.name, duration_ms, status, details)
