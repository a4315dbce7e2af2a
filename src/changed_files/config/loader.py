from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from yaml.constructor import ConstructorError

from changed_files.config.parser import parse_config
from changed_files.config.schema_validate import validate_against_schema
from changed_files.core.errors import ConfigError, ConfigParseError
from changed_files.core.models import GroupConfig

logger = logging.getLogger(__name__)

DEFAULT_REPO_CONFIG_FILES = (
    ".github/changed-files.conf",
    ".github/changed-files.yaml",
    ".github/changed-files.yml",
)

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass(frozen=True)
class LoadedConfig:
    config: GroupConfig
    source: str


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file '{path}' is not valid UTF-8", detail=str(e)) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file '{path}': {e.strerror or e}") from e


class _DuplicateGroup(Exception):
    def __init__(self, name: str, line: int) -> None:
        super().__init__(name)
        self.name = name
        self.line = line


class _GroupLoader(yaml.SafeLoader):
    """
    SafeLoader that keeps scalar keys as the literal text (so `on:` or `yes:`
    stay group names) and rejects repeated keys.
    """

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> Dict[Any, Any]:
        self.flatten_mapping(node)
        mapping: Dict[Any, Any] = {}
        for key_node, value_node in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found a non-scalar key",
                    key_node.start_mark,
                )
            key = key_node.value
            if key in mapping:
                raise _DuplicateGroup(key, key_node.start_mark.line + 1)
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


def parse_yaml_config(text: str, source: str) -> GroupConfig:
    try:
        data = yaml.load(text, Loader=_GroupLoader)
    except _DuplicateGroup as e:
        raise ConfigParseError(e.line, f"Duplicate section: '{e.name}'", source=source) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {source}: {e}", detail=source) from e

    # An empty document has no groups.
    if data is None:
        data = {}
    validate_against_schema(data, source)

    groups: Dict[str, List[str]] = {}
    for name, patterns in data.items():
        groups[name] = [str(p) for p in (patterns or [])]
    return GroupConfig(groups=groups, source=source)


def load_config_from_path(path: Path) -> GroupConfig:
    text = _read_text(path)
    if path.suffix.lower() in YAML_SUFFIXES:
        return parse_yaml_config(text, str(path))
    return parse_config(text, source=str(path))


def find_repo_config(start_dir: Path) -> Optional[Path]:
    cur = start_dir.resolve()
    for parent in [cur, *cur.parents]:
        for rel in DEFAULT_REPO_CONFIG_FILES:
            p = parent / rel
            if p.is_file():
                return p
    return None


def load_config(path: Optional[Path] = None, start_dir: Optional[Path] = None) -> LoadedConfig:
    """
    An explicit path wins; otherwise look for .github/changed-files.* from
    start_dir (default: cwd) upwards.
    """
    if path is not None:
        cfg_path = path.expanduser()
        if not cfg_path.is_file():
            raise ConfigError(f"Config file not found: {cfg_path}")
    else:
        found = find_repo_config(start_dir or Path.cwd())
        if found is None:
            raise ConfigError(
                "No configuration file specified and none found "
                f"(looked for {', '.join(DEFAULT_REPO_CONFIG_FILES)})"
            )
        cfg_path = found

    config = load_config_from_path(cfg_path)
    logger.debug("loaded %d group(s) from %s", len(config.groups), cfg_path)
    return LoadedConfig(config=config, source=str(cfg_path))
