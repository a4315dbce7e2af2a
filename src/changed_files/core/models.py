from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class GroupConfig(BaseModel):
    """Named pattern groups, in the order they were declared."""

    groups: Dict[str, List[str]] = Field(default_factory=dict)
    source: Optional[str] = None


class GroupMatch(BaseModel):
    group: str
    matched: bool = False
    file: Optional[str] = None
    pattern: Optional[str] = None


class ClassificationResult(BaseModel):
    matches: List[GroupMatch] = Field(default_factory=list)
    files_considered: int = 0
    duration_ms: int = 0

    def as_dict(self) -> Dict[str, bool]:
        return {m.group: m.matched for m in sorted(self.matches, key=lambda m: m.group)}

    def matched_groups(self) -> List[str]:
        return sorted(m.group for m in self.matches if m.matched)
