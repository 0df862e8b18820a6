"""Provider factory – maps an ``ai_model`` identifier to a provider client."""

import logging
from typing import Any, Optional

from extera.services.base import ProviderNotImplementedError, UnsupportedProviderError
from .base_provider import BaseProvider
from .openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)

_PROVIDER_CLASSES: dict[str, type[BaseProvider]] = {
    'OPENAI': OpenAIProvider,
}

# Known identifiers without a client yet, with the label used in error messages.
_PLANNED_PROVIDERS: dict[str, str] = {
    'ANTHROPIC': 'Anthropic',
    'GOOGLE': 'Google AI',
}


class ProviderFactory:
    """Creates provider clients for agent runs.

    Usage::

        factory = ProviderFactory.from_settings()
        provider = factory.create('openai')
        text = provider.generate(prompt, GenerationParams())
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        organization_id: str = '',
        timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key
        self.organization_id = organization_id
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> 'ProviderFactory':
        """Build a factory from the Django settings of the running project."""
        from django.conf import settings  # local import keeps the factory usable without Django

        return cls(
            api_key=settings.OPENAI_API_KEY or None,
            organization_id=settings.OPENAI_ORGANIZATION_ID,
            timeout=settings.AI_PROVIDER_TIMEOUT,
        )

    def create(self, provider_id: Any) -> BaseProvider:
        """Return a provider client for *provider_id* (case-insensitive).

        Raises:
            :class:`~extera.services.base.ProviderNotImplementedError`: For
                known identifiers that have no client implementation.
            :class:`~extera.services.base.UnsupportedProviderError`: For any
                other identifier.
        """
        if not isinstance(provider_id, str):
            raise UnsupportedProviderError(provider_id)

        key = provider_id.strip().upper()

        cls = _PROVIDER_CLASSES.get(key)
        if cls is not None:
            logger.debug(f"Resolved provider {key} -> {cls.__name__}")
            return cls(
                api_key=self.api_key,
                organization_id=self.organization_id,
                timeout=self.timeout,
            )

        if key in _PLANNED_PROVIDERS:
            raise ProviderNotImplementedError(key, _PLANNED_PROVIDERS[key])

        raise UnsupportedProviderError(provider_id)
