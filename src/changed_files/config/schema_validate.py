from __future__ import annotations

import json
from importlib import resources as importlib_resources
from typing import Any, Dict

import jsonschema

from changed_files.core.errors import ConfigError


def _load_schema() -> Dict[str, Any]:
    """
    Load schema.json packaged in changed_files.config.
    """
    with importlib_resources.files("changed_files.config").joinpath("schema.json").open("rb") as f:
        return json.load(f)


def validate_against_schema(data: Any, source: str) -> None:
    """
    Validate a raw YAML group document against schema.json.
    Raises ConfigError with the failing document path.
    """
    schema = _load_schema()
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        path = ".".join(str(p) for p in e.absolute_path) if e.absolute_path else "<root>"
        msg = f"Config schema validation failed at {path}: {e.message} (source: {source})"
        raise ConfigError(msg, detail=source) from e
