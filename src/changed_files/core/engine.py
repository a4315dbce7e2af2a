from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List

from changed_files.core.matcher import MatchPath
from changed_files.core.models import ClassificationResult, GroupConfig, GroupMatch

logger = logging.getLogger(__name__)


def compile_groups(config: GroupConfig) -> Dict[str, List[MatchPath]]:
    """Build each pattern once; pattern strings are used exactly as configured."""
    return {
        name: [MatchPath.from_str(p) for p in patterns]
        for name, patterns in config.groups.items()
    }


def classify(config: GroupConfig, candidates: Iterable[str]) -> ClassificationResult:
    """
    Decide, per group, whether any candidate matches any of its patterns.

    Each group stops at its first match; other groups keep going.
    """
    t0 = time.perf_counter()

    files = [c.strip() for c in candidates]
    files = [f for f in files if f]
    paths = [(f, MatchPath.from_str(f)) for f in files]

    compiled = compile_groups(config)
    matches: List[GroupMatch] = []

    for name, patterns in compiled.items():
        gm = GroupMatch(group=name)
        for raw, pattern in zip(config.groups[name], patterns):
            for file, path in paths:
                if pattern.is_match(path):
                    gm.matched = True
                    gm.file = file
                    gm.pattern = raw
                    break
            if gm.matched:
                break

        if gm.matched:
            logger.debug("group %s matched %s via %s", name, gm.file, gm.pattern)
        else:
            logger.debug("group %s: no match among %d file(s)", name, len(paths))
        matches.append(gm)

    return ClassificationResult(
        matches=matches,
        files_considered=len(paths),
        duration_ms=int((time.perf_counter() - t0) * 1000),
    )
