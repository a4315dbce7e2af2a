from __future__ import annotations

from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    OK = 0
    ERROR = 1


class ChangedFilesError(Exception):
    """
    Base exception for all detect-changed-files errors.
    Attach an exit code and safe message.
    """

    def __init__(
        self,
        message: str,
        *,
        exit_code: ExitCode = ExitCode.ERROR,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.detail = detail


class ConfigError(ChangedFilesError):
    pass


class ConfigParseError(ConfigError):
    def __init__(self, line: int, message: str, *, source: Optional[str] = None) -> None:
        super().__init__(f"Parse error at line {line}: {message}", detail=source)
        self.line = line
        self.message = message
        self.source = source


class InputError(ChangedFilesError):
    pass


class GitError(ChangedFilesError):
    pass


def exit_code_for(exc: BaseException) -> int:
    if isinstance(exc, ChangedFilesError):
        return int(exc.exit_code)
    return int(ExitCode.ERROR)
