"""AI provider clients and the factory that selects them."""

from .base_provider import BaseProvider
from .factory import ProviderFactory
from .openai_provider import OpenAIProvider
from .schemas import GenerationParams

__all__ = ['BaseProvider', 'GenerationParams', 'OpenAIProvider', 'ProviderFactory']
