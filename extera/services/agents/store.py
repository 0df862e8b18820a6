"""Agent definition store for loading JSON-defined agents from disk."""

import json
import logging
from pathlib import Path
from typing import Any, Union

from extera.services.base import AgentNotFoundError, ConfigLoadError
from .models import AgentDefinition

logger = logging.getLogger(__name__)

CONFIG_FILE = 'config.json'
INSTRUCTION_FILE = 'instruction.json'
INPUT_SCHEMA_FILE = 'input-schema.json'
OUTPUT_SCHEMA_FILE = 'output-schema.json'
EXAMPLES_FILE = 'examples.json'

REQUIRED_FILES = (
    CONFIG_FILE,
    INSTRUCTION_FILE,
    INPUT_SCHEMA_FILE,
    OUTPUT_SCHEMA_FILE,
    EXAMPLES_FILE,
)


def load_json_file(file_path: Path) -> Any:
    """Read and parse one definition document.

    Raises:
        ConfigLoadError: If the file is missing, empty or not valid JSON.
    """
    if not file_path.is_file():
        raise ConfigLoadError("File not found", file_path)

    try:
        content = file_path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigLoadError(f"Failed to read file: {e}", file_path) from e

    if not content.strip():
        raise ConfigLoadError("File is empty", file_path)

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Invalid JSON: {e}", file_path) from e


class AgentDefinitionStore:
    """Loads agent bundles from ``<base_dir>/<agent name>/``.

    Every call reads the documents from disk again; nothing is cached, so edits
    to a bundle take effect on the next run.
    """

    def __init__(self, base_dir: Union[str, Path]):
        self.base_dir = Path(base_dir)

    @classmethod
    def from_settings(cls) -> 'AgentDefinitionStore':
        from django.conf import settings  # local import keeps the store usable without Django

        return cls(settings.AGENTS_DIR)

    def agent_dir(self, agent_name: str) -> Path:
        """Return the bundle directory for *agent_name*.

        Raises:
            AgentNotFoundError: If no bundle directory exists for the name.
        """
        if not agent_name or Path(agent_name).name != agent_name or agent_name in ('.', '..'):
            raise AgentNotFoundError(f"Agent '{agent_name}' not found")

        path = self.base_dir / agent_name
        if not path.is_dir():
            raise AgentNotFoundError(f"Agent '{agent_name}' not found")
        return path

    def load(self, agent_name: str) -> AgentDefinition:
        """Load the complete definition of *agent_name*.

        Returns:
            AgentDefinition instance.

        Raises:
            AgentNotFoundError: If the agent directory does not exist.
            ConfigLoadError: If any document is missing, empty, invalid, or
                lacks a required field.
        """
        path = self.agent_dir(agent_name)

        documents = {name: load_json_file(path / name) for name in REQUIRED_FILES}

        config = documents[CONFIG_FILE]
        if not isinstance(config, dict):
            raise ConfigLoadError("Config root must be an object", path / CONFIG_FILE)
        if not config.get('ai_model'):
            raise ConfigLoadError("Missing required field: ai_model", path / CONFIG_FILE)

        instruction = documents[INSTRUCTION_FILE]
        if not isinstance(instruction, dict) or not isinstance(instruction.get('instruction'), str):
            raise ConfigLoadError("Missing required field: instruction", path / INSTRUCTION_FILE)

        logger.debug(f"Loaded agent: {agent_name} from {path}")

        return AgentDefinition(
            name=agent_name,
            config=config,
            instruction=instruction['instruction'],
            input_schema=documents[INPUT_SCHEMA_FILE],
            output_schema=documents[OUTPUT_SCHEMA_FILE],
            examples=documents[EXAMPLES_FILE],
        )

    def list_agents(self) -> list[str]:
        """List the names of all agent bundle directories, sorted."""
        if not self.base_dir.is_dir():
            logger.warning(f"Agents directory not found: {self.base_dir}")
            return []
        return sorted(p.name for p in self.base_dir.iterdir() if p.is_dir())
