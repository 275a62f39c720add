"""Tests for provider-tagged tool descriptors."""

import pytest
from google.genai import types as genai_types
from mistralai import models as mistral_models

from assessment_insights.core.tools import (
    AnthropicTool,
    GeminiTool,
    MistralTool,
    Provider,
    anthropic_tool,
    make_tool,
)


WEATHER_PARAMS = {
    "type": "object",
    "properties": {"city": {"type": "string"}},
    "required": ["city"],
}


class TestProvider:
    def test_parse_is_case_insensitive(self):
        assert Provider.parse(" GEMINI ") is Provider.GEMINI
        assert Provider.parse(Provider.MISTRAL) is Provider.MISTRAL

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Provider.parse("openai")


class TestDescriptors:
    """Each variant is pinned to one provider and one payload shape."""

    def test_anthropic_payload_shape(self):
        tool = anthropic_tool("get_weather", "Look up weather", WEATHER_PARAMS)
        assert tool.provider is Provider.ANTHROPIC
        assert tool.payload == {
            "name": "get_weather",
            "description": "Look up weather",
            "input_schema": WEATHER_PARAMS,
        }

    def test_make_tool_selects_variant(self):
        assert isinstance(make_tool("anthropic", "f", "d"), AnthropicTool)
        assert isinstance(make_tool("mistral", "f", "d"), MistralTool)
        assert isinstance(make_tool("gemini", "f", "d"), GeminiTool)

    def test_mistral_payload_is_native_tool(self):
        tool = make_tool(Provider.MISTRAL, "get_weather", "Look up weather", WEATHER_PARAMS)
        assert isinstance(tool.payload, mistral_models.Tool)
        assert tool.payload.function.name == "get_weather"

    def test_gemini_payload_is_native_tool(self):
        tool = make_tool(Provider.GEMINI, "get_weather", "Look up weather", WEATHER_PARAMS)
        assert isinstance(tool.payload, genai_types.Tool)
        assert tool.payload.function_declarations[0].name == "get_weather"

    def test_provider_tag_cannot_be_overridden(self):
        with pytest.raises(TypeError):
            AnthropicTool(payload={"name": "f"}, provider=Provider.GEMINI)

    def test_wrong_payload_shape_rejected(self):
        with pytest.raises(TypeError):
            MistralTool(payload={"name": "f"})
        with pytest.raises(TypeError):
            GeminiTool(payload={"name": "f"})
        with pytest.raises(TypeError):
            AnthropicTool(payload={"description": "no name"})
