"""linediff CLI — Typer application with diff, edit, write, copy, rm, mv and init."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from linediff import __version__
from linediff.config.loader import ConfigError, find_config_file, load_config
from linediff.config.schema import FORMAT_CHOICES, MERGE_CHOICES, LineDiffConfig
from linediff.report.models import OperationReport

app = typer.Typer(
    name="linediff",
    help="Numbered, context-windowed line diffs and change reports.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

_CONTEXT_OPT = typer.Option(None, "--context", "-n", min=0, help="Unchanged lines shown around each change")
_MERGE_OPT = typer.Option(None, "--merge", help="Window merge rule: last | full")
_FORMAT_OPT = typer.Option(None, "--format", "-f", help="Output format: text | terminal | json")
_CONFIG_OPT = typer.Option(None, "--config", "-c", help="Path to .linediff.toml")
_VERBOSE_OPT = typer.Option(False, "--verbose", "-v", help="Verbose output")


def _load(
    config: Optional[str],
    context: Optional[int],
    merge: Optional[str],
    format: Optional[str],
    verbose: bool,
) -> LineDiffConfig:
    """Load config and apply CLI overrides, exit 2 on failure."""
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if merge is not None:
        if merge not in MERGE_CHOICES:
            console.print(f"[bold red]Invalid merge rule:[/bold red] {merge}")
            raise typer.Exit(code=2)
        cfg.diff.merge = merge  # type: ignore[assignment]
    if format is not None:
        if format not in FORMAT_CHOICES:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if context is not None:
        cfg.diff.context_lines = context

    if verbose:
        config_path = find_config_file(Path.cwd(), config)
        console.print(f"[dim]Config: {escape(str(config_path)) if config_path else 'defaults'}[/dim]", soft_wrap=True)
        console.print(f"[dim]Context lines: {cfg.diff.context_lines}[/dim]")
        console.print(f"[dim]Merge rule: {cfg.diff.merge}[/dim]")
        console.print(f"[dim]Format: {cfg.output.format}[/dim]")
    return cfg


def _emit(reports: List[OperationReport], cfg: LineDiffConfig, verbose: bool = False) -> None:
    """Write reports to stdout in the configured format."""
    from linediff.report import formatter, json_report, terminal

    if verbose:
        for r in reports:
            if r.diff is not None:
                console.print(
                    f"[dim]{r.diff.file_path}: +{r.diff.additions} -{r.diff.removals}, "
                    f"{len(r.diff.lines)} lines shown[/dim]"
                )

    if cfg.output.format == "json":
        print(json_report.render(reports))
    elif cfg.output.format == "terminal":
        terminal.render(reports, color=cfg.output.color)
    else:
        sys.stdout.write(formatter.render_all(reports))


def _fail(exc: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=1) from exc


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    old: Path = typer.Argument(..., help="Original file (missing = empty)"),
    new: Path = typer.Argument(..., help="Updated file"),
    label: Optional[str] = typer.Option(None, "--label", "-l", help="Path shown in the report"),
    context: Optional[int] = _CONTEXT_OPT,
    merge: Optional[str] = _MERGE_OPT,
    format: Optional[str] = _FORMAT_OPT,
    config: Optional[str] = _CONFIG_OPT,
    verbose: bool = _VERBOSE_OPT,
) -> None:
    """Show the changes between two files without touching either."""
    from linediff.diff.summary import create_diff
    from linediff.ops import read_text

    cfg = _load(config, context, merge, format, verbose)

    try:
        old_content = read_text(old) if old.exists() else ""
        new_content = read_text(new)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[bold red]Read error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    path = label or str(new)
    change = create_diff(
        path, old_content, new_content, cfg.diff.context_lines, merge=cfg.diff.merge
    )
    _emit([OperationReport("Diff", path).with_diff(change)], cfg, verbose)


# ── edit ──────────────────────────────────────────────────────────────────────


@app.command()
def edit(
    file_path: str = typer.Argument(..., help="File to edit"),
    old_string: str = typer.Argument(..., help="Exact text to find"),
    new_string: str = typer.Argument(..., help="Replacement text"),
    replace_all: bool = typer.Option(False, "--all", "-a", help="Replace every occurrence"),
    context: Optional[int] = _CONTEXT_OPT,
    merge: Optional[str] = _MERGE_OPT,
    format: Optional[str] = _FORMAT_OPT,
    config: Optional[str] = _CONFIG_OPT,
    verbose: bool = _VERBOSE_OPT,
) -> None:
    """Replace text in a file and report the change."""
    from linediff.ops import OperationError, edit_file

    cfg = _load(config, context, merge, format, verbose)
    try:
        report = edit_file(
            file_path,
            old_string,
            new_string,
            replace_all=replace_all,
            context_lines=cfg.diff.context_lines,
            merge=cfg.diff.merge,
        )
    except OperationError as exc:
        _fail(exc)
    _emit([report], cfg, verbose)


# ── write ─────────────────────────────────────────────────────────────────────


@app.command()
def write(
    file_path: str = typer.Argument(..., help="File to write"),
    content: Optional[str] = typer.Option(None, "--content", help="New content (default: stdin)"),
    context: Optional[int] = _CONTEXT_OPT,
    merge: Optional[str] = _MERGE_OPT,
    format: Optional[str] = _FORMAT_OPT,
    config: Optional[str] = _CONFIG_OPT,
    verbose: bool = _VERBOSE_OPT,
) -> None:
    """Write a file (creating directories) and report the change."""
    from linediff.ops import OperationError, write_files

    cfg = _load(config, context, merge, format, verbose)
    text = content if content is not None else sys.stdin.read()
    try:
        reports = write_files(
            [(file_path, text)],
            context_lines=cfg.diff.context_lines,
            merge=cfg.diff.merge,
        )
    except OperationError as exc:
        _fail(exc)
    _emit(reports, cfg, verbose)


# ── copy / rm / mv ────────────────────────────────────────────────────────────


@app.command()
def copy(
    source: str = typer.Argument(..., help="Source file"),
    destination: str = typer.Argument(..., help="Destination file"),
    context: Optional[int] = _CONTEXT_OPT,
    merge: Optional[str] = _MERGE_OPT,
    format: Optional[str] = _FORMAT_OPT,
    config: Optional[str] = _CONFIG_OPT,
    verbose: bool = _VERBOSE_OPT,
) -> None:
    """Copy a file; shows a diff when the destination already had content."""
    from linediff.ops import OperationError, run_operation

    cfg = _load(config, context, merge, format, verbose)
    try:
        report = run_operation(
            "copy",
            source,
            destination,
            context_lines=cfg.diff.context_lines,
            merge=cfg.diff.merge,
        )
    except OperationError as exc:
        _fail(exc)
    _emit([report], cfg, verbose)


@app.command("rm")
def remove(
    path: str = typer.Argument(..., help="File or directory to delete"),
    format: Optional[str] = _FORMAT_OPT,
    config: Optional[str] = _CONFIG_OPT,
) -> None:
    """Delete a file or directory."""
    from linediff.ops import OperationError, run_operation

    cfg = _load(config, None, None, format, False)
    try:
        report = run_operation("delete", path)
    except OperationError as exc:
        _fail(exc)
    _emit([report], cfg)


@app.command("mv")
def move(
    source: str = typer.Argument(..., help="Path to move"),
    destination: str = typer.Argument(..., help="New path"),
    format: Optional[str] = _FORMAT_OPT,
    config: Optional[str] = _CONFIG_OPT,
) -> None:
    """Move or rename a file or directory."""
    from linediff.ops import OperationError, run_operation

    cfg = _load(config, None, None, format, False)
    try:
        report = run_operation("move", source, destination)
    except OperationError as exc:
        _fail(exc)
    _emit([report], cfg)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .linediff.toml in the current directory."""
    from linediff.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"linediff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """linediff — numbered, context-windowed line diffs."""
