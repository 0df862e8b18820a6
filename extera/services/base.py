"""Base exceptions for core services."""


class ServiceError(Exception):
    """Base class for all service-layer errors."""


# ---------------------------------------------------------------------------
# Agent definitions
# ---------------------------------------------------------------------------

class AgentNotFoundError(ServiceError):
    """Raised when a requested agent has no definition directory."""


class ConfigLoadError(ServiceError):
    """Raised when one of an agent's definition documents cannot be loaded."""

    def __init__(self, message: str, file_path):
        self.file_path = file_path
        super().__init__(f"{message} (file: {file_path})")


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------

class UnsupportedProviderError(ServiceError):
    """Raised for provider identifiers the factory does not know about."""

    def __init__(self, provider_id):
        self.provider_id = provider_id
        super().__init__(f"Unsupported AI model: {provider_id}")


class ProviderNotImplementedError(ServiceError):
    """Raised for known provider identifiers that have no client yet."""

    def __init__(self, provider_id: str, label: str):
        self.provider_id = provider_id
        super().__init__(f"{label} client not yet implemented")


class ProviderError(ServiceError):
    """Raised when the external completion call fails."""


class ProviderTimeoutError(ServiceError):
    """Raised when the external completion call does not answer in time."""


# ---------------------------------------------------------------------------
# Agent runs
# ---------------------------------------------------------------------------

class AgentLoadFailed(ServiceError):
    """Raised when an agent definition could not be loaded for a run."""

    def __init__(self, agent_name: str, cause: Exception):
        self.agent_name = agent_name
        self.cause = cause
        super().__init__(f"Failed to load agent '{agent_name}': {cause}")


class AgentRunFailed(ServiceError):
    """Raised when any stage of an agent run fails."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to run agent: {cause}")
