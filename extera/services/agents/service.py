"""Agent service for executing AI agents."""

import logging
from typing import Any, Optional

from extera.services.ai.factory import ProviderFactory
from extera.services.ai.schemas import GenerationParams
from extera.services.base import AgentLoadFailed, AgentRunFailed

from .models import AgentDefinition, InvocationDescriptor
from .store import AgentDefinitionStore

logger = logging.getLogger(__name__)


class AgentService:
    """Service for running AI agents.

    Holds no per-request state; one instance can serve any number of
    concurrent runs.
    """

    def __init__(
        self,
        store: AgentDefinitionStore,
        provider_factory: Optional[ProviderFactory] = None,
    ):
        """Initialize the agent service.

        Args:
            store: Store the agent definitions are loaded from.
            provider_factory: Optional ProviderFactory. If not provided, a
                factory without credentials is created (the SDK then falls back
                to its environment variables).
        """
        self.store = store
        self.provider_factory = provider_factory or ProviderFactory()

    @classmethod
    def from_settings(cls) -> 'AgentService':
        return cls(AgentDefinitionStore.from_settings(), ProviderFactory.from_settings())

    def run_agent(self, agent_name: str, runtime_request: dict[str, Any]) -> str:
        """Run an agent against a runtime request.

        Args:
            agent_name: The agent identifier (bundle directory name).
            runtime_request: Caller-supplied input, used verbatim as ``input``.

        Returns:
            The provider's completion text, unmodified.

        Raises:
            AgentRunFailed: If any stage fails; the original error is chained.
        """
        try:
            invocation = self.prepare(agent_name, runtime_request)
            prompt = invocation.prompt
            logger.debug(f"Assembled prompt for {agent_name}: {len(prompt)} characters")

            provider = self.provider_factory.create(invocation.config['ai_model'])
            params = GenerationParams.from_config(invocation.config)
            result = provider.generate(prompt, params)
        except Exception as e:
            logger.error(f"Agent execution failed for {agent_name}: {e}")
            raise AgentRunFailed(e) from e

        logger.info(f"Agent {agent_name} executed successfully with {params.model}")
        return result

    def prepare(self, agent_name: str, runtime_request: dict[str, Any]) -> InvocationDescriptor:
        """Load *agent_name* and merge it with *runtime_request*.

        Raises:
            AgentLoadFailed: If the definition cannot be loaded.
        """
        agent = self._load(agent_name)
        return InvocationDescriptor.from_definition(agent, runtime_request)

    def _load(self, agent_name: str) -> AgentDefinition:
        try:
            return self.store.load(agent_name)
        except Exception as e:
            raise AgentLoadFailed(agent_name, e) from e
