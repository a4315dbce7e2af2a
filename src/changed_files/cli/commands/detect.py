from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer

from changed_files import __version__
from changed_files.cli.ui import get_ui, render_error, render_json, render_results_table, render_summary
from changed_files.config import load_config
from changed_files.core.engine import classify
from changed_files.core.errors import ChangedFilesError, ExitCode, exit_code_for
from changed_files.core.log import setup_logging
from changed_files.sources import git_changed_files, read_candidates


class OutputFormat(str, Enum):
    JSON = "json"
    TABLE = "table"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _collect_candidates(*, use_git: bool, base: Optional[str], head: Optional[str], staged: bool) -> List[str]:
    if use_git:
        return git_changed_files(Path.cwd(), base=base, head=head, staged=staged)
    return read_candidates(typer.get_binary_stream("stdin"))


def detect_cmd(
    config: Optional[Path] = typer.Argument(
        None,
        help="Configuration file. Defaults to .github/changed-files.conf (or .yaml), searched upwards.",
    ),
    use_git: bool = typer.Option(
        False,
        "--git/--stdin",
        help="Ask git for the changed files instead of reading them from stdin.",
    ),
    base: Optional[str] = typer.Option(
        None, "--base", help="Revision to diff against (implies --git)."
    ),
    head: Optional[str] = typer.Option(
        None, "--head", help="Second revision; requires --base (implies --git)."
    ),
    staged: bool = typer.Option(
        False, "--staged", help="Use staged changes (implies --git)."
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON, "--format", "-f", help="Output format: json or table."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log matching details and a summary to stderr."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print version information and exit.",
    ),
) -> None:
    """
    Read changed file paths (e.g. from `git diff --name-only`) and report,
    per group of patterns, whether any of them changed.
    """
    ui = get_ui(verbose=verbose)
    setup_logging(verbose, console=ui.err_console)

    use_git = use_git or bool(base or head or staged)

    try:
        loaded = load_config(config)
        files = _collect_candidates(use_git=use_git, base=base, head=head, staged=staged)
    except ChangedFilesError as e:
        render_error(ui.err_console, str(e), e.detail, verbose=ui.verbose)
        raise typer.Exit(code=exit_code_for(e))

    result = classify(loaded.config, files)

    if output_format == OutputFormat.TABLE:
        render_results_table(ui.console, result)
    else:
        typer.echo(render_json(result.as_dict()))

    if ui.verbose:
        render_summary(ui.err_console, result, source=loaded.source)

    raise typer.Exit(code=int(ExitCode.OK))
