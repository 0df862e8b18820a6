"""Request dataclasses for the AI provider layer."""

from dataclasses import dataclass, fields
from typing import Any, Optional

DEFAULT_MODEL = 'gpt-4o-mini'


@dataclass(frozen=True)
class GenerationParams:
    """Generation parameters forwarded to a provider with every prompt."""

    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    max_tokens: int = 1000
    top_p: float = 1
    frequency_penalty: float = 0
    presence_penalty: float = 0

    @classmethod
    def from_config(cls, config: Optional[dict[str, Any]]) -> 'GenerationParams':
        """Build params from an agent ``config`` document.

        Each parameter falls back to its default independently when the key is
        absent or ``null``. Keys that are not generation parameters (such as
        ``ai_model``) are ignored.
        """
        config = config or {}
        values = {
            f.name: config[f.name]
            for f in fields(cls)
            if config.get(f.name) is not None
        }
        return cls(**values)

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
