"""Reading and writing artifact-set JSON files.

Used by the CLI to load a suite's artifacts and write back edits. Version
history is never written: it lives only as long as the session.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from ..models import ArtifactSet

logger = logging.getLogger(__name__)


class ArtifactFileError(Exception):
    """Artifact file is missing, unreadable or invalid."""


def load_artifact_set(path: Path) -> ArtifactSet:
    """Load an artifact set from a JSON file.

    Raises:
        ArtifactFileError: If the file does not exist or does not validate
    """
    if not path.exists():
        raise ArtifactFileError(f"Artifact file not found: {path}")
    try:
        return ArtifactSet.model_validate_json(path.read_bytes())
    except (ValidationError, OSError) as e:
        raise ArtifactFileError(f"Invalid artifact file {path}: {e}") from e


def write_artifact_set(path: Path, artifacts: ArtifactSet) -> Path:
    """Write an artifact set as indented JSON, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(artifacts.model_dump_json(indent=2))
    except OSError as e:
        raise ArtifactFileError(f"Cannot write artifact file {path}: {e}") from e
    logger.debug("Wrote %s", path)
    return path
