"""Pydantic data models for suitetrace workspaces.

This package defines the data structures used throughout suitetrace for:
- Tracked artifacts and the artifact set (Requirement, Viewpoint, TestCase)
- Version history (Version, VersionManagerState)
- Traceability and edit results (LinkResult, UpdateResult, CoverageStatus)

Example:
    >>> from suitetrace.models import ArtifactSet, Requirement
    >>> data = ArtifactSet(requirements=[Requirement(id="R-001")])
    >>> data.model_dump_json()
"""

from .artifacts import (
    ARTIFACT_MODELS,
    EDITABLE_FIELDS,
    LINK_FIELDS,
    META_FIELDS,
    Artifact,
    ArtifactKind,
    ArtifactSet,
    ChangeRecord,
    Requirement,
    TestCase,
    Viewpoint,
    kind_of,
    tracked_fields,
)
from .trace import (
    CoverageStatus,
    CoverageSummary,
    FieldUpdate,
    ImpactNotice,
    LinkResult,
    MatrixRow,
    TraceError,
    UpdateResult,
)
from .version import ALL_ARTIFACTS, Version, VersionManagerState

__all__ = [
    "ALL_ARTIFACTS",
    "ARTIFACT_MODELS",
    "EDITABLE_FIELDS",
    "LINK_FIELDS",
    "META_FIELDS",
    "Artifact",
    "ArtifactKind",
    "ArtifactSet",
    "ChangeRecord",
    "CoverageStatus",
    "CoverageSummary",
    "FieldUpdate",
    "ImpactNotice",
    "LinkResult",
    "MatrixRow",
    "Requirement",
    "TestCase",
    "TraceError",
    "UpdateResult",
    "Version",
    "VersionManagerState",
    "Viewpoint",
    "kind_of",
    "tracked_fields",
]
