from __future__ import annotations

import json
from typing import Dict

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from changed_files.core.models import ClassificationResult


def render_json(results: Dict[str, bool]) -> str:
    """Keys sorted, one pair per line, booleans as true/false."""
    return json.dumps(results, indent=2, sort_keys=True, ensure_ascii=False)


def render_results_table(console: Console, result: ClassificationResult, *, title: str = "Changed groups") -> None:
    t = Table(title=title)
    t.add_column("Group", style="group")
    t.add_column("Changed", justify="center")
    t.add_column("First file", style="path")
    t.add_column("Pattern", style="pattern")

    for m in sorted(result.matches, key=lambda x: x.group):
        changed = "[ok]yes[/ok]" if m.matched else "[muted]no[/muted]"
        t.add_row(escape(m.group), changed, escape(m.file or "-"), escape(m.pattern or "-"))

    console.print(t)


def render_summary(console: Console, result: ClassificationResult, *, source: str) -> None:
    matched = result.matched_groups()
    console.print(f"[muted]config:[/muted] {escape(source)}")
    console.print(f"[muted]files considered:[/muted] {result.files_considered}")
    console.print(f"[muted]groups matched:[/muted] {len(matched)}/{len(result.matches)}")
    console.print(f"[muted]duration:[/muted] {result.duration_ms} ms")


def render_error(console: Console, message: str, detail: str | None = None, *, verbose: bool = False) -> None:
    console.print(f"[err]Error:[/err] {escape(message)}", soft_wrap=True)
    if verbose and detail:
        console.print(f"  [muted]{escape(detail)}[/muted]", soft_wrap=True)
