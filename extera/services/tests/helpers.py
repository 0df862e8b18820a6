"""Helpers for writing agent bundles into temporary directories."""

import json
from pathlib import Path

_DEFAULT_DOCUMENTS = {
    'config.json': {'ai_model': 'OPENAI'},
    'instruction.json': {'instruction': 'Summarize.'},
    'input-schema.json': {},
    'output-schema.json': {},
    'examples.json': [],
}


def write_agent(base_dir, name='summarizer', skip=(), raw=None, **documents):
    """Write an agent bundle under *base_dir* and return its directory.

    ``documents`` overrides document contents by filename stem, e.g.
    ``config={'ai_model': 'ANTHROPIC'}`` or ``input_schema={...}``. ``raw``
    maps filenames to literal file text; ``skip`` lists files to leave out.
    """
    agent_dir = Path(base_dir) / name
    agent_dir.mkdir(parents=True, exist_ok=True)
    raw = raw or {}

    for filename, default in _DEFAULT_DOCUMENTS.items():
        if filename in skip:
            continue
        if filename in raw:
            text = raw[filename]
        else:
            key = filename[:-len('.json')].replace('-', '_')
            text = json.dumps(documents.get(key, default))
        (agent_dir / filename).write_text(text, encoding='utf-8')

    return agent_dir
