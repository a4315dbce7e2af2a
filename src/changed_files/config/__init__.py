from .loader import LoadedConfig, find_repo_config, load_config, load_config_from_path, parse_yaml_config
from .parser import parse_config

__all__ = [
    "LoadedConfig",
    "find_repo_config",
    "load_config",
    "load_config_from_path",
    "parse_config",
    "parse_yaml_config",
]
