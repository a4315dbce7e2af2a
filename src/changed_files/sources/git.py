from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from changed_files.core.errors import GitError

logger = logging.getLogger(__name__)


def _run_git(cwd: Path, args: List[str]) -> bytes:
    """
    Run a git command and return stdout (bytes).
    Raises GitError on failure.
    """
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except FileNotFoundError as e:
        raise GitError("git executable not found") from e
    if proc.returncode != 0:
        err = proc.stderr.decode("utf-8", errors="replace")
        raise GitError(f"git {' '.join(args)} failed: {err.strip()}")
    return proc.stdout


def _split_nul_paths(data: bytes) -> List[str]:
    if not data:
        return []
    parts = data.split(b"\x00")
    return [p.decode("utf-8", errors="replace") for p in parts if p]


def git_changed_files(
    start_dir: Path,
    *,
    base: Optional[str] = None,
    head: Optional[str] = None,
    staged: bool = False,
) -> List[str]:
    """
    List changed files via `git diff --name-only`.

    - no revisions: working tree against the index (or HEAD with staged=True)
    - base only: working tree (or index) against base
    - base and head: the two revisions against each other
    """
    args = ["diff", "--name-only", "-z"]
    if staged:
        args.append("--cached")
    if base:
        args.append(base)
    if head:
        if not base:
            raise GitError("--head requires --base")
        args.append(head)

    files = _split_nul_paths(_run_git(start_dir, args))
    logger.debug("git reported %d changed file(s)", len(files))
    return files
