"""Base classes and registry for generation providers.

Providers are the external image-generation services that consume a
synthesized prompt.  The engine never calls them; this module only fixes
the shape callers implement so generation strategies can be planned and
executed against any provider.

Example provider:

    >>> from productshot.workflows.base import GenerationProvider, provider_registry
    >>>
    >>> class EchoProvider(GenerationProvider):
    ...     name = "Echo"
    ...     supports_reference_images = True
    ...
    ...     def generate(self, prompt, aspect_ratio, reference_images=None):
    ...         return [f"{aspect_ratio}:{len(prompt)}"]
    >>>
    >>> provider_registry.register(EchoProvider)
    >>> provider = provider_registry.instantiate("Echo")
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class QuotaDecision(BaseModel):
    """Answer of the caller-side usage gate consulted before generation."""

    model_config = ConfigDict(frozen=True)

    allowed: bool
    reason: str | None = Field(default=None, description="Why generation was denied")


class GenerationProvider(ABC):
    """Base class for image-generation providers.

    Attributes
    ----------
    name : str
        Human-readable provider name
    description : str
        Brief description of the provider
    version : str
        Provider integration version
    supports_reference_images : bool
        Whether ``generate`` accepts reference images
    """

    name: str = "Base Provider"
    description: str = "Base generation provider"
    version: str = "0.1.0"
    supports_reference_images: bool = False

    @abstractmethod
    def generate(
        self,
        prompt: str,
        aspect_ratio: str,
        reference_images: Sequence[str] | None = None,
    ) -> list[Any]:
        """Generate images for a prompt.

        Args:
            prompt: Synthesized prompt text
            aspect_ratio: Aspect ratio such as ``"3:2"``
            reference_images: Optional reference image descriptors

        Returns:
            Generated images in the provider's own representation

        Raises:
            Exception: Any provider failure; callers treat it as opaque
        """
        pass


class ProviderRegistry:
    """Registry for managing available generation providers."""

    def __init__(self):
        self._providers: dict[str, type[GenerationProvider]] = {}

    def register(self, provider_class: type[GenerationProvider]) -> None:
        """Register a provider class.

        Args:
            provider_class: Provider class to register
        """
        self._providers[provider_class.name] = provider_class
        logger.info(f"Registered provider: {provider_class.name}")

    def instantiate(self, provider_name: str, **kwargs) -> GenerationProvider | None:
        """Create an instance of a registered provider.

        Returns:
            Provider instance or None if not found
        """
        if provider_name not in self._providers:
            logger.error(f"Provider not found: {provider_name}")
            return None
        return self._providers[provider_name](**kwargs)

    def list_available(self) -> list[str]:
        """List all registered provider names."""
        return list(self._providers.keys())

    def get_provider_info(self, provider_name: str) -> dict[str, Any] | None:
        """Get information about a provider."""
        if provider_name not in self._providers:
            return None

        provider_class = self._providers[provider_name]
        return {
            "name": provider_class.name,
            "description": provider_class.description,
            "version": provider_class.version,
            "supports_reference_images": provider_class.supports_reference_images,
        }


# Global provider registry
provider_registry = ProviderRegistry()
