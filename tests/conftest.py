"""Shared fixtures and mocks (no API calls)."""

import json
from types import SimpleNamespace
from typing import Any, Callable, List, Optional, Union

import pytest

from assessment_insights.core.abstractions import GenerateOptions, LanguageModel
from assessment_insights.core.llm_config import GenerationConfig, build_generation_config
from assessment_insights.core.tools import Provider


VALID_INSIGHTS = {
    "overall_assessment": "Needs improvement",
    "questions_answered_correctly": 5,
    "strengths": ["SQL queries"],
    "weaknesses": ["Big data processing"],
    "actionable_feedback": {"practice": "Work on Spark"},
    "business_case_impact_analysis": {"cost": "Inefficiency"},
}


# ============================================================================
# Mock Generation Capability
# ============================================================================

Response = Union[str, BaseException]


class MockLanguageModel(LanguageModel):
    """
    Scripted LanguageModel.

    ``responses`` are consumed one per call; the last one repeats. An exception
    instance is raised instead of returned. A callable receives the prompt and
    returns the response.
    """

    def __init__(
        self,
        responses: Union[List[Response], Callable[[str], Response]],
        provider: Provider = Provider.GEMINI,
    ):
        self._responses = responses
        self._provider = provider
        self._config = build_generation_config(provider)
        self.calls: List[tuple] = []

    @property
    def provider(self) -> Provider:
        return self._provider

    @property
    def config(self) -> GenerationConfig:
        return self._config

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def generate_text(self, prompt: str, options: Optional[GenerateOptions] = None) -> str:
        self.calls.append((prompt, options))
        if callable(self._responses):
            item = self._responses(prompt)
        elif len(self._responses) > 1:
            item = self._responses.pop(0)
        else:
            item = self._responses[0]
        if isinstance(item, BaseException):
            raise item
        return item


# ============================================================================
# Fake provider SDK clients
# ============================================================================

class _Recorder:
    """Async callable recording kwargs and returning/raising a scripted result."""

    def __init__(self, result: Any):
        self.result = result
        self.calls: List[dict] = []

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


def fake_anthropic_client(result: Any):
    create = _Recorder(result)
    return SimpleNamespace(messages=SimpleNamespace(create=create)), create


def fake_mistral_client(result: Any):
    complete = _Recorder(result)
    return SimpleNamespace(chat=SimpleNamespace(complete_async=complete)), complete


def fake_gemini_client(result: Any):
    generate = _Recorder(result)
    models = SimpleNamespace(generate_content=generate)
    return SimpleNamespace(aio=SimpleNamespace(models=models)), generate


def anthropic_response(*blocks):
    return SimpleNamespace(content=list(blocks))


def text_block(text: str):
    return SimpleNamespace(type="text", text=text)


def mistral_response(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def gemini_response(*texts):
    parts = [SimpleNamespace(text=t) for t in texts]
    candidate = SimpleNamespace(content=SimpleNamespace(parts=parts))
    return SimpleNamespace(candidates=[candidate])


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def valid_insights_dict():
    return dict(VALID_INSIGHTS)


@pytest.fixture
def valid_insights_json():
    return json.dumps(VALID_INSIGHTS)


@pytest.fixture
def no_api_keys(monkeypatch):
    for name in ("CLAUDE_API_KEY", "MISTRAL_API_KEY", "GEMINI_API_KEY"):
        monkeypatch.delenv(name, raising=False)
