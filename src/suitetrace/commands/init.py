"""Init and sample command implementations."""

from pathlib import Path

import typer

from ..config import write_config_template
from ..constants import CONFIG_DIR, CONFIG_FILE
from ..core import write_artifact_set
from ..data import sample_artifacts
from ..output import get_output_context
from .common import DEFAULT_ARTIFACT_FILE


def init() -> None:
    """Create .suitetrace/config.toml in the current directory."""
    ctx = get_output_context()
    config_dir = Path.cwd() / CONFIG_DIR
    config_path = config_dir / CONFIG_FILE

    if config_path.exists():
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        ctx.result({"config": str(config_path), "created": False})
        return

    write_config_template(config_dir)
    ctx.print(f"[green]Created config template:[/green] {config_path}")
    ctx.result({"config": str(config_path), "created": True})


def sample(
    output: Path = typer.Option(
        DEFAULT_ARTIFACT_FILE, "--output", "-o", help="Where to write the sample artifacts"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write the sample login / password-reset artifact set."""
    ctx = get_output_context()
    if output.exists() and not force:
        ctx.error(f"{output} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    artifacts = sample_artifacts()
    write_artifact_set(output, artifacts)
    ctx.success(
        f"Wrote sample artifacts to {output}",
        {
            "path": str(output),
            "requirements": len(artifacts.requirements),
            "viewpoints": len(artifacts.viewpoints),
            "test_cases": len(artifacts.test_cases),
        },
    )
