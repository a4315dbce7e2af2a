from .git import git_changed_files
from .stream import read_candidates

__all__ = ["git_changed_files", "read_candidates"]
