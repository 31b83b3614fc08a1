"""Helpers shared by commands that work on an artifact file."""

from pathlib import Path

import typer

from ..config import ConfigError, SuiteConfig, load_config
from ..constants import CONFIG_DIR
from ..core import ArtifactFileError, Workspace, load_artifact_set, write_artifact_set
from ..output import get_output_context

DEFAULT_ARTIFACT_FILE = Path("artifacts.json")


def load_suite_config() -> SuiteConfig:
    """Config from ./.suitetrace, exiting with code 1 if it is invalid."""
    try:
        return load_config(Path.cwd() / CONFIG_DIR)
    except ConfigError as e:
        get_output_context().error(str(e))
        raise typer.Exit(1) from None


def open_workspace(file: Path) -> Workspace:
    """Workspace over the artifact file, exiting with code 1 if it is unusable."""
    config = load_suite_config()
    try:
        artifacts = load_artifact_set(file)
    except ArtifactFileError as e:
        get_output_context().error(str(e))
        raise typer.Exit(1) from None
    return Workspace(artifacts, config)


def save_workspace(file: Path, workspace: Workspace) -> None:
    try:
        write_artifact_set(file, workspace.artifacts)
    except ArtifactFileError as e:
        get_output_context().error(str(e))
        raise typer.Exit(1) from None
