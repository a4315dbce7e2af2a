from __future__ import annotations

from typing import BinaryIO, Iterator, List, TextIO, Union

from changed_files.core.errors import InputError


def _lines(stream: Union[TextIO, BinaryIO]) -> Iterator[str]:
    for raw in stream:
        yield raw.decode("utf-8") if isinstance(raw, bytes) else raw


def read_candidates(stream: Union[TextIO, BinaryIO]) -> List[str]:
    """
    Read changed file paths, one per line (e.g. `git diff --name-only`).
    Lines are trimmed and blank lines skipped; order is kept.
    """
    out: List[str] = []
    try:
        for line in _lines(stream):
            item = line.strip()
            if item:
                out.append(item)
    except UnicodeDecodeError as e:
        raise InputError("Error reading changed files: input is not valid UTF-8", detail=str(e)) from e
    return out
