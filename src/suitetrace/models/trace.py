"""Result models for traceability, coverage and field edits.

Expected failures (unknown ids, invalid links, bad field updates) are
reported through these results instead of exceptions. Callers check `ok`.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, computed_field

from .artifacts import ArtifactKind, Priority


class TraceError(str, Enum):
    """Why an engine operation did nothing."""

    ARTIFACT_NOT_FOUND = "artifact_not_found"
    INVALID_LINK = "invalid_link"
    INVALID_FIELD = "invalid_field"
    DUPLICATE_ARTIFACT = "duplicate_artifact"


class LinkResult(BaseModel):
    """Outcome of linking or unlinking two artifacts."""

    ok: bool
    error: TraceError | None = None
    changed: bool = Field(default=False, description="False when the link state was already as asked")


class ImpactNotice(BaseModel):
    """Advisory list of artifacts one hop away from an edited artifact."""

    kind: ArtifactKind
    artifact_id: str
    field: str | None = None
    neighbors: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def count(self) -> int:
        return len(self.neighbors)


class FieldUpdate(BaseModel):
    """One edit to one field of one artifact.

    The field is checked against EDITABLE_FIELDS for the kind; the value is
    validated by the artifact model when the update is applied.
    """

    kind: ArtifactKind
    artifact_id: str
    field: str
    value: Any


class UpdateResult(BaseModel):
    """Outcome of applying a FieldUpdate."""

    ok: bool
    error: TraceError | None = None
    impact: ImpactNotice | None = None


CoverageLevel = Literal["uncovered", "minimal", "covered"]


class CoverageStatus(BaseModel):
    """Coverage of one requirement by distinct test cases."""

    status: CoverageLevel
    count: int = Field(ge=0)


class MatrixRow(BaseModel):
    """One requirement row of the traceability matrix."""

    requirement_id: str
    description: str
    priority: Priority
    viewpoints: list[str] = Field(default_factory=list)
    direct_test_cases: list[str] = Field(default_factory=list)
    via_viewpoint_test_cases: list[str] = Field(default_factory=list)
    coverage: CoverageStatus


class CoverageSummary(BaseModel):
    """Counts and coverage percentage for a whole artifact set."""

    requirements: int = 0
    viewpoints: int = 0
    test_cases: int = 0
    coverage_percent: int = Field(default=0, ge=0, le=100)
    uncovered_requirements: list[str] = Field(default_factory=list)
