"""Export command: test cases as CSV or JSON."""

from pathlib import Path

import typer

from ..constants import EXPORT_FORMATS
from ..core import export_summary, export_test_cases
from ..output import get_output_context
from .common import DEFAULT_ARTIFACT_FILE, open_workspace


def export(
    file: Path = typer.Option(DEFAULT_ARTIFACT_FILE, "--file", "-f", help="Artifact file"),
    fmt: str | None = typer.Option(
        None, "--format", help="csv or json (defaults to [export] default_format)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write here instead of stdout"
    ),
) -> None:
    """Export test cases."""
    ctx = get_output_context()
    workspace = open_workspace(file)
    fmt = (fmt or workspace.config.export.default_format).lower()
    if fmt not in EXPORT_FORMATS:
        ctx.error(f"Unsupported format: {fmt} (choose from {', '.join(EXPORT_FORMATS)})")
        raise typer.Exit(1)

    rendered = export_test_cases(workspace.artifacts.test_cases, fmt)
    if output is None:
        typer.echo(rendered, nl=False)
        return

    try:
        output.write_text(rendered)
    except OSError as e:
        ctx.error(f"Cannot write {output}: {e}")
        raise typer.Exit(1) from None
    summary = export_summary(workspace.artifacts)
    ctx.success(
        f"Exported {summary['test_cases']} test cases to {output} ({fmt.upper()})",
        {"path": str(output), "format": fmt, **summary},
    )
    if summary["uncovered_requirements"]:
        ctx.print(
            f"[yellow]{summary['uncovered_requirements']} uncovered requirement(s):[/yellow] "
            + ", ".join(summary["uncovered_ids"])
        )
