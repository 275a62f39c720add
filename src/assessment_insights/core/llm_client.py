"""LLM provider adapters - one Generation Capability, three vendor SDKs."""

import logging
import os
from abc import abstractmethod
from typing import Any, List, Optional, Union

import anthropic
import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types
from mistralai import Mistral
from mistralai import models as mistral_models

from .abstractions import GenerateOptions, LanguageModel
from .errors import ConfigurationError, ToolMismatchError, TransportError
from .llm_config import (
    API_KEY_ENV,
    GenerationConfig,
    GenerationOption,
    build_generation_config,
)
from .tools import TOOL_VARIANTS, Provider, ToolDescriptor

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"
TEXT_MIME_TYPE = "text/plain"

# Errors raised below the SDKs' own exception types (sockets, DNS, TLS)
_NETWORK_ERRORS = (httpx.HTTPError, OSError)


class ProviderLLM(LanguageModel):
    """
    Shared plumbing for the concrete adapters.

    Handles configuration, credential lookup, prompt checks and tool tag
    checks. Subclasses implement client construction and the wire call.
    """

    PROVIDER: Provider

    def __init__(
        self,
        *options: GenerationOption,
        api_key: Optional[str] = None,
        client: Any = None,
    ):
        """
        Initialize adapter.

        Args:
            *options: Generation options (with_model_name, with_max_tokens, ...)
            api_key: Explicit credential; defaults to the provider's env var
            client: Pre-built SDK client (skips credential lookup)

        Raises:
            ConfigurationError: Invalid option or missing credential
        """
        self._config = build_generation_config(self.PROVIDER, *options)

        if client is None:
            env_var = API_KEY_ENV[self.PROVIDER]
            api_key = api_key or os.getenv(env_var)
            if not api_key:
                raise ConfigurationError(
                    f"Missing env var {env_var} for {self.PROVIDER.value} API key"
                )
            client = self._create_client(api_key)

        self._client = client

    @property
    def provider(self) -> Provider:
        return self.PROVIDER

    @property
    def config(self) -> GenerationConfig:
        return self._config

    @property
    def client(self) -> Any:
        return self._client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self._config.model_name!r})"

    async def generate_text(
        self,
        prompt: str,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        if not prompt or not prompt.strip():
            raise ValueError("prompt must be non-empty")

        options = options or GenerateOptions()
        tools = self._native_tools(options.tools)

        try:
            text = await self._generate(prompt, tools, options.response_mime_type)
        except _NETWORK_ERRORS as e:
            raise TransportError(
                f"{self.PROVIDER.value} request failed: {e}",
                provider=self.PROVIDER.value,
            ) from e

        if not text:
            raise TransportError(
                f"{self.PROVIDER.value} returned an empty response",
                provider=self.PROVIDER.value,
            )
        return text

    def _native_tools(self, tools: tuple) -> List[Any]:
        """Unwrap payloads, failing on the first descriptor for another provider."""
        expected = TOOL_VARIANTS[self.PROVIDER]
        native = []
        for index, tool in enumerate(tools):
            if not isinstance(tool, expected) or tool.provider is not self.PROVIDER:
                actual = getattr(tool, "provider", type(tool).__name__)
                raise ToolMismatchError(
                    expected=self.PROVIDER.value,
                    actual=getattr(actual, "value", str(actual)),
                    index=index,
                )
            native.append(tool.payload)
        return native

    @abstractmethod
    def _create_client(self, api_key: str) -> Any:
        pass

    @abstractmethod
    async def _generate(
        self,
        prompt: str,
        tools: List[Any],
        response_mime_type: Optional[str],
    ) -> str:
        """Issue the request and return the first text segment."""
        pass


class AnthropicLLM(ProviderLLM):
    """Claude via the Messages API."""

    PROVIDER = Provider.ANTHROPIC

    def _create_client(self, api_key: str) -> anthropic.AsyncAnthropic:
        return anthropic.AsyncAnthropic(api_key=api_key)

    async def _generate(self, prompt, tools, response_mime_type):
        if response_mime_type and response_mime_type != TEXT_MIME_TYPE:
            # Messages API has no response MIME switch; the prompt carries the format
            logger.debug(f"[AnthropicLLM] Ignoring response_mime_type={response_mime_type}")

        request = {
            "model": self._config.model_name,
            "max_tokens": self._config.max_tokens,
            "temperature": self._config.temperature,
            "top_p": self._config.top_p,
            "messages": [{"role": "user", "content": prompt}],
        }
        if tools:
            request["tools"] = tools

        try:
            response = await self._client.messages.create(**request)
        except anthropic.APIStatusError as e:
            error_type, message = _anthropic_error_details(e)
            raise TransportError(
                f"anthropic API error, type: {error_type}, message: {message}",
                provider=self.PROVIDER.value,
                error_type=error_type,
            ) from e
        except anthropic.APIError as e:
            raise TransportError(
                f"anthropic API error: {e}", provider=self.PROVIDER.value
            ) from e

        for block in response.content or []:
            if getattr(block, "type", None) == "text":
                return block.text
        return ""


def _anthropic_error_details(error: anthropic.APIStatusError):
    body = error.body if isinstance(error.body, dict) else {}
    detail = body.get("error", body)
    if not isinstance(detail, dict):
        detail = {}
    error_type = detail.get("type") or f"http_{error.status_code}"
    message = detail.get("message") or error.message
    return error_type, message


class MistralLLM(ProviderLLM):
    """Mistral via the chat completions API."""

    PROVIDER = Provider.MISTRAL

    def _create_client(self, api_key: str) -> Mistral:
        return Mistral(api_key=api_key)

    async def _generate(self, prompt, tools, response_mime_type):
        request = {
            "model": self._config.model_name,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            "top_p": self._config.top_p,
        }
        if tools:
            request["tools"] = tools
        if response_mime_type == JSON_MIME_TYPE:
            request["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.complete_async(**request)
        except mistral_models.HTTPValidationError as e:
            raise TransportError(
                f"mistral API error, type: validation_error, message: {e}",
                provider=self.PROVIDER.value,
                error_type="validation_error",
            ) from e
        except mistral_models.SDKError as e:
            raise TransportError(
                f"error getting chat completion, status: {e.status_code}, message: {e.message}",
                provider=self.PROVIDER.value,
                error_type=f"http_{e.status_code}",
            ) from e

        if response is None or not response.choices:
            return ""
        return _mistral_text(response.choices[0].message.content)


def _mistral_text(content: Union[str, list, None]) -> str:
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    # Chunked content: keep the text chunks in order
    return "".join(getattr(chunk, "text", "") or "" for chunk in content)


class GeminiLLM(ProviderLLM):
    """Gemini via google-genai generate_content."""

    PROVIDER = Provider.GEMINI
    TOP_K = 64

    def _create_client(self, api_key: str) -> genai.Client:
        return genai.Client(api_key=api_key)

    def build_content_config(
        self,
        tools: List[Any],
        response_mime_type: Optional[str],
    ) -> genai_types.GenerateContentConfig:
        return genai_types.GenerateContentConfig(
            temperature=self._config.temperature,
            top_p=self._config.top_p,
            top_k=self.TOP_K,
            max_output_tokens=self._config.max_tokens,
            response_mime_type=response_mime_type or TEXT_MIME_TYPE,
            tools=tools or None,
        )

    async def _generate(self, prompt, tools, response_mime_type):
        config = self.build_content_config(tools, response_mime_type)

        try:
            response = await self._client.aio.models.generate_content(
                model=self._config.model_name,
                contents=prompt,
                config=config,
            )
        except genai_errors.APIError as e:
            raise TransportError(
                f"gemini API error, type: {e.status}, message: {e.message}",
                provider=self.PROVIDER.value,
                error_type=e.status,
            ) from e

        candidates = response.candidates or []
        if not candidates or candidates[0].content is None:
            return ""
        parts = candidates[0].content.parts or []
        return "".join(part.text for part in parts if part.text)


# ============================================================
# Factory Function
# ============================================================

ADAPTERS = {
    Provider.ANTHROPIC: AnthropicLLM,
    Provider.MISTRAL: MistralLLM,
    Provider.GEMINI: GeminiLLM,
}


def create_llm_client(
    provider: Union[str, Provider],
    *options: GenerationOption,
    api_key: Optional[str] = None,
    client: Any = None,
) -> LanguageModel:
    """Factory function to create the right adapter.

    Usage:
        llm = create_llm_client("gemini", with_max_tokens(8192))
        text = await llm.generate_text("Hello")
    """
    try:
        provider = Provider.parse(provider)
    except ValueError as e:
        raise ConfigurationError(f"Unknown LLM provider: {provider}") from e

    adapter_cls = ADAPTERS[provider]
    llm = adapter_cls(*options, api_key=api_key, client=client)
    logger.info(f"[LLM] Using {llm!r}")
    return llm
