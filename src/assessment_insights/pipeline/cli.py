"""Command-line entry point: read assessments, extract insights, write JSONL."""

import asyncio
import sys

from ..core.errors import ConfigurationError
from ..core.llm_client import create_llm_client
from ..core.llm_config import with_max_tokens, with_model_name
from ..core.logger import get_logger
from ..extraction.extractor import InsightsExtractor
from ..extraction.retry import RetryPolicy
from .io import JsonlSink, read_assessments
from .runner import PipelineReport, run_pipeline
from .settings import PipelineSettings


def build_extractor(settings: PipelineSettings) -> InsightsExtractor:
    """Construct the adapter and extraction element. Fails fast on bad config."""
    options = [with_max_tokens(settings.max_tokens)]
    if settings.model:
        options.append(with_model_name(settings.model))

    llm = create_llm_client(settings.provider, *options)

    try:
        policy = RetryPolicy(
            max_attempts=settings.max_retries,
            delay_seconds=settings.retry_delay_seconds,
        )
        return InsightsExtractor(
            llm,
            retry_policy=policy,
            attempt_timeout=settings.attempt_timeout_seconds,
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid retry settings: {e}") from e


def run(settings: PipelineSettings) -> PipelineReport:
    extractor = build_extractor(settings)
    records = list(read_assessments(settings.assessments_path))
    with JsonlSink(settings.output_path) as sink:
        return asyncio.run(
            run_pipeline(
                records,
                extractor,
                sink,
                concurrency=settings.concurrency,
            )
        )


def main() -> int:
    logger = get_logger()
    try:
        settings = PipelineSettings.from_env()
        logger.setLevel(settings.log_level.upper())
        report = run(settings)
    except ConfigurationError as e:
        logger.error(f"Failed to start pipeline: {e}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Pipeline failed: {e}")
        return 1

    logger.info(f"Pipeline report: {report.to_dict()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
