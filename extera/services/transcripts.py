"""Transcript analysis – formats a conversation and hands it to an agent."""

import logging
from typing import Any, Iterable, Mapping, Optional

from .agents.service import AgentService

logger = logging.getLogger(__name__)


def format_transcript(transcript: Iterable[Mapping[str, Any]]) -> str:
    """Render a transcript as ``"role: content"`` lines in conversation order."""
    return '\n'.join(f"{msg['role']}: {msg['content']}" for msg in transcript)


class TranscriptAnalyzeService:
    """Runs an agent over a formatted transcript."""

    def __init__(self, agent_service: AgentService):
        self.agent_service = agent_service

    @classmethod
    def from_settings(cls) -> 'TranscriptAnalyzeService':
        return cls(AgentService.from_settings())

    def analyze(
        self,
        agent_name: str,
        transcript: Iterable[Mapping[str, Any]],
        agent_request: Optional[dict[str, Any]] = None,
    ) -> str:
        """Format *transcript* and run *agent_name* on it.

        Extra fields from *agent_request* are merged after ``text``, so a
        caller-supplied ``text`` field takes precedence.
        """
        request = {
            'text': format_transcript(transcript),
            **(agent_request or {}),
        }
        logger.debug(f"Analyzing transcript with {agent_name}: fields={sorted(request)}")
        return self.agent_service.run_agent(agent_name, request)
