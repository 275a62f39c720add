"""
Generation Capability

The one interface every provider adapter implements, so the extraction layer
depends on an abstraction rather than a vendor SDK.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from .llm_config import GenerationConfig
from .tools import Provider, ToolDescriptor


@dataclass(frozen=True)
class GenerateOptions:
    """
    Per-call options. Never mutates the adapter.

    Attributes:
        tools: Tool descriptors, all tagged for the adapter's provider
        response_mime_type: e.g. "application/json" to request structured
            output where the provider supports it; None means plain text
    """

    tools: Tuple[ToolDescriptor, ...] = ()
    response_mime_type: Optional[str] = None

    def __post_init__(self):
        # Store as a tuple; frozen options stay hashable
        object.__setattr__(self, "tools", tuple(self.tools or ()))


class LanguageModel(ABC):
    """
    Abstract text-generation capability.

    Implementations hold an immutable GenerationConfig and a provider client,
    and keep no per-call state, so one instance can serve concurrent callers.
    Cancellation follows the calling task; deadlines are applied by callers.
    """

    @property
    @abstractmethod
    def provider(self) -> Provider:
        """Provider tag tool descriptors must match."""
        pass

    @property
    @abstractmethod
    def config(self) -> GenerationConfig:
        pass

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        options: Optional[GenerateOptions] = None,
    ) -> str:
        """
        Generate text for ``prompt``.

        Args:
            prompt: Non-empty prompt text
            options: Tools and response mode; None means no tools, plain text

        Returns:
            The provider's generated text, verbatim

        Raises:
            ValueError: Empty prompt
            ToolMismatchError: A tool is tagged for another provider
            TransportError: Network, provider API or empty-response failure
        """
        pass
