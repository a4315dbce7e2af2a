from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

# Pattern format
#  - "/" is the only separator. Empty components (leading, doubled or trailing
#    slashes) are dropped.
#  - A pattern that does not start with "/" is relative and behaves as if it
#    started with "**/". An absolute pattern is anchored at the first component.
#  - A pattern that ends with "/" is a directory and matches anything beneath it,
#    as if it had a trailing "**".
#  - "**" as a whole component matches many successive components.
#  - "*" matches any run of characters inside one component, "?" exactly one.

SEPARATOR = "/"
DOUBLE_STAR = "**"


def split_path_components(text: str) -> Tuple[str, ...]:
    return tuple(part for part in text.split(SEPARATOR) if part)


def is_double_star(component: str) -> bool:
    return component == DOUBLE_STAR


@dataclass(frozen=True)
class MatchPath:
    """
    A slash-delimited path split into components.

    The same type is used for patterns and for candidate files. Only the
    pattern side of `is_match` gives "*", "?" and "**" a wildcard meaning.
    """

    components: Tuple[str, ...] = ()
    is_absolute: bool = False
    is_directory: bool = False

    @classmethod
    def from_str(cls, text: str) -> "MatchPath":
        if not text:
            return cls()
        return cls(
            components=split_path_components(text),
            is_absolute=text.startswith(SEPARATOR),
            is_directory=text.endswith(SEPARATOR),
        )

    def is_match(self, candidate: "MatchPath") -> bool:
        """Return True if `candidate` satisfies this path used as a pattern."""
        pattern = self.components
        text = candidate.components

        if not pattern:
            return not text

        p_idx = 0
        t_idx = 0
        # Relative patterns may start matching at any depth.
        recursive = not self.is_absolute

        while p_idx < len(pattern) and t_idx < len(text):
            pat = pattern[p_idx]

            if is_double_star(pat):
                recursive = True
                if p_idx + 1 == len(pattern):
                    return True
                # A non-terminal "**" consumes one component itself.
                p_idx += 1
                t_idx += 1
                continue

            if match_component(pat, text[t_idx]):
                recursive = False
                p_idx += 1
                t_idx += 1
            elif recursive:
                t_idx += 1
            else:
                return False

        if self.is_directory and p_idx == len(pattern):
            return True

        return p_idx == len(pattern) and t_idx == len(text)


def match_component(pattern: str, text: str) -> bool:
    """
    Match a single component against a wildcard pattern.

    Cell (i, j) of the table answers "does pattern[i:] match text[j:]". Rows are
    filled from the end of the pattern backwards, so only the row below the
    current one has to be kept, and the cost is O(len(pattern) * len(text))
    even for inputs like "*a*a*a*b" against a long run of "a".
    """
    m = len(pattern)
    n = len(text)

    # Row for an exhausted pattern: only an exhausted text matches.
    below: List[bool] = [False] * n + [True]

    for i in range(m - 1, -1, -1):
        ch = pattern[i]
        row: List[bool] = [False] * (n + 1)

        if ch == "*":
            # Empty text suffix: the rest of the pattern must be all "*".
            row[n] = below[n]
            for j in range(n - 1, -1, -1):
                # consume nothing, or one more character and stay on this "*"
                row[j] = below[j] or row[j + 1]
        elif ch == "?":
            for j in range(n):
                row[j] = below[j + 1]
        else:
            for j in range(n):
                row[j] = text[j] == ch and below[j + 1]

        below = row

    return below[0]


def match_path(pattern: str, path: str) -> bool:
    return MatchPath.from_str(pattern).is_match(MatchPath.from_str(path))


def match_any(path: str, patterns: Iterable[str]) -> bool:
    candidate = MatchPath.from_str(path)
    return any(MatchPath.from_str(p).is_match(candidate) for p in patterns)
