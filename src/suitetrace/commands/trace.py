"""Traceability commands: coverage, matrix, link, unlink, impact."""

from pathlib import Path

import typer
from rich.table import Table

from ..models import ArtifactKind, LinkResult
from ..output import get_output_context
from .common import DEFAULT_ARTIFACT_FILE, open_workspace, save_workspace

FILE_OPTION = typer.Option(DEFAULT_ARTIFACT_FILE, "--file", "-f", help="Artifact file")

_COVERAGE_STYLE = {"uncovered": "red", "minimal": "yellow", "covered": "green"}


def coverage(file: Path = FILE_OPTION) -> None:
    """Show artifact counts and requirement coverage."""
    ctx = get_output_context()
    summary = open_workspace(file).summary()

    table = Table(title="Coverage")
    table.add_column("Requirements", justify="right")
    table.add_column("Viewpoints", justify="right")
    table.add_column("Test Cases", justify="right")
    table.add_column("Coverage", justify="right", style="green")
    table.add_row(
        str(summary.requirements),
        str(summary.viewpoints),
        str(summary.test_cases),
        f"{summary.coverage_percent}%",
    )
    ctx.table(table, summary.model_dump())
    if summary.uncovered_requirements:
        ctx.print(f"[yellow]Uncovered:[/yellow] {', '.join(summary.uncovered_requirements)}")


def matrix(
    file: Path = FILE_OPTION,
    no_viewpoints: bool = typer.Option(
        False, "--no-viewpoints", help="Hide the viewpoint layer"
    ),
) -> None:
    """Show the requirement traceability matrix."""
    ctx = get_output_context()
    rows = open_workspace(file).matrix()

    table = Table(title="Traceability Matrix")
    table.add_column("Req ID", style="bold")
    table.add_column("Description", overflow="fold")
    table.add_column("Priority")
    if not no_viewpoints:
        table.add_column("Via Viewpoints")
    table.add_column("Direct Test Cases")
    table.add_column("Coverage", justify="right")
    for row in rows:
        style = _COVERAGE_STYLE[row.coverage.status]
        cells = [row.requirement_id, row.description, row.priority]
        if not no_viewpoints:
            cells.append(", ".join([*row.viewpoints, *row.via_viewpoint_test_cases]))
        cells.append(", ".join(row.direct_test_cases))
        cells.append(f"[{style}]{row.coverage.count}[/{style}]")
        table.add_row(*cells)
    ctx.table(table, [row.model_dump() for row in rows])


def _report_link(result: LinkResult, verb: str, source_id: str, target_id: str) -> None:
    ctx = get_output_context()
    if not result.ok:
        reason = result.error.value if result.error else "failed"
        ctx.error(f"Cannot {verb} {source_id} and {target_id}: {reason}")
        raise typer.Exit(1)
    if result.changed:
        ctx.success(
            f"{verb.capitalize()}ed {source_id} <-> {target_id}",
            {"source": source_id, "target": target_id, "changed": True},
        )
    else:
        ctx.result(
            {"source": source_id, "target": target_id, "changed": False},
            f"[dim]Nothing to {verb}: {source_id} <-> {target_id}[/dim]",
        )


def link(
    source_kind: ArtifactKind = typer.Argument(..., help="Source kind"),
    source_id: str = typer.Argument(..., help="Source id"),
    target_kind: ArtifactKind = typer.Argument(..., help="Target kind"),
    target_id: str = typer.Argument(..., help="Target id"),
    file: Path = FILE_OPTION,
) -> None:
    """Link two artifacts (both sides are updated)."""
    workspace = open_workspace(file)
    result = workspace.link(source_kind, source_id, target_kind, target_id)
    if result.changed:
        save_workspace(file, workspace)
    _report_link(result, "link", source_id, target_id)


def unlink(
    source_kind: ArtifactKind = typer.Argument(..., help="Source kind"),
    source_id: str = typer.Argument(..., help="Source id"),
    target_kind: ArtifactKind = typer.Argument(..., help="Target kind"),
    target_id: str = typer.Argument(..., help="Target id"),
    file: Path = FILE_OPTION,
) -> None:
    """Remove a link between two artifacts (both sides are updated)."""
    workspace = open_workspace(file)
    result = workspace.unlink(source_kind, source_id, target_kind, target_id)
    if result.changed:
        save_workspace(file, workspace)
    _report_link(result, "unlink", source_id, target_id)


def impact(
    kind: ArtifactKind = typer.Argument(..., help="Artifact kind"),
    artifact_id: str = typer.Argument(..., help="Artifact id"),
    file: Path = FILE_OPTION,
) -> None:
    """List artifacts directly linked to one artifact."""
    ctx = get_output_context()
    workspace = open_workspace(file)
    if workspace.artifacts.find(kind, artifact_id) is None:
        ctx.error(f"{kind.value} not found: {artifact_id}")
        raise typer.Exit(1)

    notice = workspace.impact_of(kind, artifact_id)
    if ctx.json_mode:
        ctx.print_json(notice.model_dump(mode="json"))
        return
    if not notice.neighbors:
        ctx.print(f"[dim]{artifact_id} has no linked artifacts[/dim]")
        return
    ctx.print(f"[bold]{notice.count}[/bold] artifact(s) linked to {artifact_id}:")
    for neighbor in notice.neighbors:
        ctx.print(f"  • {neighbor}")
