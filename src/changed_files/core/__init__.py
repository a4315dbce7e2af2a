from .errors import ChangedFilesError, ConfigError, ConfigParseError, ExitCode, GitError, InputError
from .matcher import MatchPath, match_any, match_component, match_path

__all__ = [
    "ChangedFilesError",
    "ConfigError",
    "ConfigParseError",
    "ExitCode",
    "GitError",
    "InputError",
    "MatchPath",
    "match_any",
    "match_component",
    "match_path",
]
