from __future__ import annotations

import typer

from changed_files.cli.commands.detect import detect_cmd

# Root Typer app; a single command, so it runs without a subcommand name:
#   git diff --name-only | detect-changed-files .github/changed-files.conf
app = typer.Typer(
    name="detect-changed-files",
    help="Analyze changed files and categorize them based on patterns.",
    add_completion=False,
)

app.command()(detect_cmd)
