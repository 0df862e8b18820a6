"""OpenAI provider adapter."""

import logging
from typing import Any, Optional

import openai

from extera.services.base import ProviderError, ProviderTimeoutError
from .base_provider import BaseProvider
from .schemas import GenerationParams

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseProvider):
    """Calls the OpenAI Chat Completions API."""

    provider_id = 'OPENAI'

    def __init__(
        self,
        api_key: Optional[str] = None,
        organization_id: str = '',
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(api_key, timeout=timeout, **kwargs)
        self._organization_id = organization_id

    def generate(self, prompt: str, params: GenerationParams) -> str:
        # One call per request: the SDK's own retry loop is switched off.
        client_kwargs: dict[str, Any] = {'max_retries': 0}
        if self._api_key:
            client_kwargs['api_key'] = self._api_key
        if self._organization_id:
            client_kwargs['organization'] = self._organization_id
        if self._timeout:
            client_kwargs['timeout'] = self._timeout

        try:
            client = openai.OpenAI(**client_kwargs)
            response = client.chat.completions.create(
                messages=[{'role': 'user', 'content': prompt}],
                **params.as_dict(),
            )
        except openai.APITimeoutError as exc:
            logger.warning(f"OpenAI request timed out after {self._timeout}s")
            raise ProviderTimeoutError(f"OpenAI API timeout: {exc}") from exc
        except Exception as exc:
            raise ProviderError(f"OpenAI API error: {exc}") from exc

        if response.usage:
            logger.debug(
                f"OpenAI usage for {params.model}: "
                f"{response.usage.prompt_tokens} input tokens, "
                f"{response.usage.completion_tokens} output tokens"
            )

        return response.choices[0].message.content or ''
