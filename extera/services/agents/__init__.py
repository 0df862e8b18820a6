"""Agent service for loading and running JSON-defined AI agents."""

from .models import AgentDefinition, InvocationDescriptor
from .service import AgentService
from .store import AgentDefinitionStore

__all__ = ['AgentDefinition', 'AgentDefinitionStore', 'AgentService', 'InvocationDescriptor']
