from __future__ import annotations

from typing import Dict, List, Optional

from changed_files.core.errors import ConfigParseError
from changed_files.core.models import GroupConfig

COMMENT_PREFIXES = ("#", ";")


def parse_config(text: str, source: Optional[str] = None) -> GroupConfig:
    """
    Parse the section format:

        # comment
        [group-name]
        pattern
        pattern

    Lines are trimmed; blank lines and comments are skipped. A section with no
    patterns is kept as an empty group.
    """
    groups: Dict[str, List[str]] = {}
    current: Optional[str] = None

    for line_number, line in enumerate(text.splitlines(), start=1):
        item = line.strip()
        if not item or item.startswith(COMMENT_PREFIXES):
            continue

        if item.startswith("[") and item.endswith("]"):
            if len(item) < 3:
                raise ConfigParseError(line_number, "Invalid section header: too short", source=source)
            name = item[1:-1]
            if name in groups:
                raise ConfigParseError(line_number, f"Duplicate section: '{name}'", source=source)
            groups[name] = []
            current = name
            continue

        if current is None:
            raise ConfigParseError(line_number, "Item found before any section is defined", source=source)
        groups[current].append(item)

    return GroupConfig(groups=groups, source=source)
