"""JSONL reader and sink for assessment records and extracted insights."""

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Union

from pydantic import ValidationError

from ..extraction.schemas import AssessmentRecord, InsightsResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_OUTPUT_PATH = "processed.jsonl"


def read_assessments(path: PathLike) -> Iterator[AssessmentRecord]:
    """
    Yield one AssessmentRecord per non-blank line.

    Each line is a JSON object with a ``result`` (or ``assessment_result``)
    string. Other keys are ignored.

    Raises:
        ValueError: A line is not valid JSON or has no result text
    """
    with open(path, encoding="utf-8") as fh:
        for line_number, line in enumerate(fh, start=1):
            if not line.strip():
                continue
            try:
                yield AssessmentRecord.model_validate_json(line)
            except ValidationError as e:
                raise ValueError(f"{path}:{line_number}: invalid assessment record: {e}") from e


def insights_to_json(insights: InsightsResult) -> str:
    """Convert InsightsResult to a single JSON line."""
    return insights.to_json()


class JsonlSink:
    """
    Append each emitted InsightsResult as one JSON line.

    Usable directly as the extractor's emit callback:

        with JsonlSink("processed.jsonl") as sink:
            await extractor.process_element(record, sink)
    """

    def __init__(self, path: PathLike = DEFAULT_OUTPUT_PATH):
        self.path = Path(path)
        self.count = 0
        self._fh: Optional[TextIO] = None

    def open(self) -> "JsonlSink":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = open(self.path, "w", encoding="utf-8")
        return self

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "JsonlSink":
        return self.open()

    def __exit__(self, *args) -> None:
        self.close()
        logger.info(f"[JsonlSink] Wrote {self.count} insights to {self.path}")

    def __call__(self, insights: InsightsResult) -> None:
        if self._fh is None:
            raise RuntimeError("JsonlSink is not open")
        self._fh.write(insights_to_json(insights) + "\n")
        self._fh.flush()
        self.count += 1


def write_insights(path: PathLike, results: Iterable[InsightsResult]) -> int:
    """Write ``results`` to ``path`` as JSONL. Returns the number written."""
    with JsonlSink(path) as sink:
        for insights in results:
            sink(insights)
        return sink.count
