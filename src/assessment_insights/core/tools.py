"""
Provider-tagged tool descriptors.

A ToolDescriptor is one of three variants, each pinned to a Provider. The
payload keeps the provider's native shape so nothing is lost translating
between SDKs:

    AnthropicTool  -> dict in the Anthropic tool-param shape
    MistralTool    -> mistralai.models.Tool
    GeminiTool     -> google.genai.types.Tool

Adapters only accept the variant matching their own provider.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from google.genai import types as genai_types
from mistralai import models as mistral_models


class Provider(str, Enum):
    """Supported LLM vendors."""

    ANTHROPIC = "anthropic"
    MISTRAL = "mistral"
    GEMINI = "gemini"

    @classmethod
    def parse(cls, value: Union[str, "Provider"]) -> "Provider":
        """Accept an enum member or its case-insensitive name/value."""
        if isinstance(value, Provider):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True)
class AnthropicTool:
    """Anthropic tool definition: {"name", "description", "input_schema"}."""

    payload: Dict[str, Any]
    provider: Provider = field(default=Provider.ANTHROPIC, init=False)

    def __post_init__(self):
        if not isinstance(self.payload, dict) or "name" not in self.payload:
            raise TypeError("AnthropicTool payload must be a dict with a 'name' key")


@dataclass(frozen=True)
class MistralTool:
    payload: mistral_models.Tool
    provider: Provider = field(default=Provider.MISTRAL, init=False)

    def __post_init__(self):
        if not isinstance(self.payload, mistral_models.Tool):
            raise TypeError("MistralTool payload must be a mistralai Tool")


@dataclass(frozen=True)
class GeminiTool:
    payload: genai_types.Tool
    provider: Provider = field(default=Provider.GEMINI, init=False)

    def __post_init__(self):
        if not isinstance(self.payload, genai_types.Tool):
            raise TypeError("GeminiTool payload must be a google.genai Tool")


ToolDescriptor = Union[AnthropicTool, MistralTool, GeminiTool]

TOOL_VARIANTS = {
    Provider.ANTHROPIC: AnthropicTool,
    Provider.MISTRAL: MistralTool,
    Provider.GEMINI: GeminiTool,
}


# ============================================================================
# Constructors from a plain function signature
# ============================================================================

def anthropic_tool(
    name: str,
    description: str,
    parameters: Optional[Dict[str, Any]] = None,
) -> AnthropicTool:
    return AnthropicTool(
        payload={
            "name": name,
            "description": description,
            "input_schema": parameters or {"type": "object", "properties": {}},
        }
    )


def mistral_tool(
    name: str,
    description: str,
    parameters: Optional[Dict[str, Any]] = None,
) -> MistralTool:
    return MistralTool(
        payload=mistral_models.Tool(
            type="function",
            function=mistral_models.Function(
                name=name,
                description=description,
                parameters=parameters or {"type": "object", "properties": {}},
            ),
        )
    )


def gemini_tool(
    name: str,
    description: str,
    parameters: Optional[Dict[str, Any]] = None,
) -> GeminiTool:
    declaration = genai_types.FunctionDeclaration(
        name=name,
        description=description,
        parameters_json_schema=parameters or {"type": "object", "properties": {}},
    )
    return GeminiTool(payload=genai_types.Tool(function_declarations=[declaration]))


def make_tool(
    provider: Union[str, Provider],
    name: str,
    description: str,
    parameters: Optional[Dict[str, Any]] = None,
) -> ToolDescriptor:
    """Build the descriptor variant for ``provider`` from one function signature."""
    builders = {
        Provider.ANTHROPIC: anthropic_tool,
        Provider.MISTRAL: mistral_tool,
        Provider.GEMINI: gemini_tool,
    }
    return builders[Provider.parse(provider)](name, description, parameters)
