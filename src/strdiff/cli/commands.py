"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from strdiff.config import Settings, load_config
from strdiff.core.diff import diff_summary, produce_diff


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the configured log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _read(path: Path) -> str:
    """Read a UTF-8 input file, failing with a CLI error when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def diff_cmd(
    old: Annotated[Path, typer.Argument(help="Old file")],
    new: Annotated[Path, typer.Argument(help="New file")],
    context: Annotated[Optional[int], typer.Option("--context", "-U", help="Unchanged lines around each hunk")] = None,
    old_label: Annotated[Optional[str], typer.Option("--old-label", help="Header label for OLD")] = None,
    new_label: Annotated[Optional[str], typer.Option("--new-label", help="Header label for NEW")] = None,
    compat: Annotated[Optional[bool], typer.Option("--compat/--no-compat", help="Legacy single-hunk output")] = None,
    exit_code: Annotated[bool, typer.Option("--exit-code", help="Exit 1 when the files differ")] = False,
    ):
    """Print a unified diff of OLD -> NEW."""
    settings = _settings(overrides={
        "context_lines": context, "old_label": old_label,
        "new_label": new_label, "compat": compat,
    })
    text_a, text_b = _read(old), _read(new)

    out = produce_diff(
        text_a, text_b,
        settings.old_label or str(old),
        settings.new_label or str(new),
        settings.context_lines,
        compat=settings.compat,
    )
    typer.echo(out)

    if exit_code:
        stats = diff_summary(text_a, text_b)
        if stats.added or stats.deleted or stats.changed:
            raise typer.Exit(1)


def stat_cmd(
    old: Annotated[Path, typer.Argument(help="Old file")],
    new: Annotated[Path, typer.Argument(help="New file")],
    ):
    """Print added/deleted/changed/unchanged line counts for OLD -> NEW."""
    _settings()
    stats = diff_summary(_read(old), _read(new))
    typer.echo(
        f"added={stats.added} deleted={stats.deleted} "
        f"changed={stats.changed} unchanged={stats.unchanged}"
    )
