"""Version history models for a suite workspace.

A version is a numbered, timestamped snapshot of the whole artifact set plus
the human-readable diff against the previous save.

Version numbering:
- 0 means no version has been saved yet
- The first save creates version 1
- Manual saves, checkpoints and auto-saves share one sequence
"""

from datetime import datetime

from pydantic import BaseModel, Field

from .artifacts import ArtifactKind, ArtifactSet

# artifact_id of a version saved for the whole set rather than one artifact
ALL_ARTIFACTS = "all"


class Version(BaseModel):
    """A saved snapshot of the artifact set.

    Attributes:
        id: Unique version id (v<N>-<epoch ms>)
        version_number: Position in the version sequence (1-indexed)
        timestamp: When the version was created
        description: Caller-supplied label ("Auto-save" for auto-saves)
        author: Who saved it
        artifact_type: Kind of the artifact that triggered the save, if any
        artifact_id: Id of that artifact, or ALL_ARTIFACTS
        snapshot: Independent deep copy of the artifact set at save time
        changes_summary: Changes since the previous save, in detection order
        is_auto_save: Whether a scheduler created this version
    """

    id: str = Field(description="Version id")
    version_number: int = Field(ge=1, description="Version number")
    timestamp: datetime = Field(default_factory=datetime.now)
    description: str = Field(description="Version label")
    author: str = Field(description="Author of the save")
    artifact_type: ArtifactKind | None = Field(default=None)
    artifact_id: str = Field(default=ALL_ARTIFACTS)
    snapshot: ArtifactSet = Field(description="Artifact set at save time")
    changes_summary: list[str] = Field(default_factory=list)
    is_auto_save: bool = False


class VersionManagerState(BaseModel):
    """What the history widgets render: versions, current number, dirty flag."""

    versions: list[Version] = Field(default_factory=list)
    current_version: int = Field(default=0, ge=0)
    has_unsaved_changes: bool = False
