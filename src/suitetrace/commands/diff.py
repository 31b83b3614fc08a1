"""Diff command: change summary between two artifact files."""

from pathlib import Path

import typer

from ..core import ArtifactFileError, detect_changes, load_artifact_set
from ..output import get_output_context


def diff(
    old: Path = typer.Argument(..., help="Baseline artifact file"),
    new: Path = typer.Argument(..., help="Changed artifact file"),
) -> None:
    """Show what changed between two artifact files."""
    ctx = get_output_context()
    try:
        old_set = load_artifact_set(old)
        new_set = load_artifact_set(new)
    except ArtifactFileError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    changes = detect_changes(old_set, new_set)
    if ctx.json_mode:
        ctx.print_json({"changes": changes})
        return

    if not changes:
        ctx.print("[dim]No changes[/dim]")
        return
    for change in changes:
        ctx.print(f"  • {change}")
    ctx.print(f"\n[bold]{len(changes)}[/bold] change(s)")
