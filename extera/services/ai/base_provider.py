"""Abstract base class for AI provider implementations."""

import abc
from typing import Any, Optional

from .schemas import GenerationParams


class BaseProvider(abc.ABC):
    """Interface that every provider adapter must implement."""

    #: Canonical identifier this adapter is registered under (e.g. ``'OPENAI'``).
    provider_id: str = ''

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None, **kwargs: Any) -> None:
        self._api_key = api_key
        self._timeout = timeout

    @abc.abstractmethod
    def generate(self, prompt: str, params: GenerationParams) -> str:
        """Send *prompt* as a single completion request and return the text.

        Args:
            prompt: Complete prompt text, sent verbatim.
            params: Generation parameters (model, temperature, ...).

        Returns:
            The provider's completion text.

        Raises:
            :class:`~extera.services.base.ProviderError`: When the call fails.
            :class:`~extera.services.base.ProviderTimeoutError`: When the call
                exceeds the configured timeout.
        """
