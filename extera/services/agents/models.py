"""Data models for agent definitions and invocations."""

import json
from dataclasses import dataclass
from typing import Any


def _dump(value: Any) -> str:
    """Serialize a structured document for the prompt; equal documents give equal text."""
    return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)


@dataclass(frozen=True)
class AgentDefinition:
    """Represents a loaded agent definition bundle."""

    name: str
    config: dict[str, Any]
    instruction: str
    input_schema: Any
    output_schema: Any
    examples: Any


@dataclass(frozen=True)
class InvocationDescriptor:
    """An agent definition merged with the caller's runtime request."""

    name: str
    config: dict[str, Any]
    instruction: str
    input_schema: Any
    output_schema: Any
    examples: Any
    input: dict[str, Any]

    @classmethod
    def from_definition(cls, agent: AgentDefinition, runtime_request: dict[str, Any]) -> 'InvocationDescriptor':
        # The runtime request replaces ``input`` wholesale; it is not deep-merged.
        return cls(
            name=agent.name,
            config=agent.config,
            instruction=agent.instruction,
            input_schema=agent.input_schema,
            output_schema=agent.output_schema,
            examples=agent.examples,
            input=runtime_request,
        )

    @property
    def prompt(self) -> str:
        """Return the prompt text sent verbatim to the provider."""
        sections = [
            self.instruction,
            f"Input Schema: {_dump(self.input_schema)}",
            f"Output Schema: {_dump(self.output_schema)}",
            f"Examples: {_dump(self.examples)}",
            f"Input: {_dump(self.input)}",
        ]
        return '\n\n'.join(sections)
