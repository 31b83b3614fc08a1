"""Artifact models for a test suite workspace.

Requirements, viewpoints and test cases share the tracked-artifact base
(`id`, `last_modified`, `change_history`). Link fields hold ids of the
artifacts on the other side of a traceability link and behave as sets:
duplicates are dropped on validation while insertion order is kept so
that diffs and exports stay deterministic.
"""

import copy
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, Field


class ArtifactKind(str, Enum):
    """Kinds of tracked artifacts, in change-detection order."""

    REQUIREMENT = "requirement"
    VIEWPOINT = "viewpoint"
    TESTCASE = "testcase"


def _dedupe(ids: list[str]) -> list[str]:
    return list(dict.fromkeys(ids))


IdSet = Annotated[list[str], AfterValidator(_dedupe)]

Priority = Literal["High", "Medium", "Low"]
Severity = Literal["High", "Medium", "Low"]
RequirementStatus = Literal["Parsed", "Reviewed", "Approved"]

# Fields every diff ignores: they change on every edit and carry no content.
META_FIELDS = frozenset({"last_modified", "change_history"})


class ChangeRecord(BaseModel):
    """Single entry of an artifact's audit log.

    Attributes:
        timestamp: When the field was changed
        field: Name of the changed field
        old_value: Value before the change
        new_value: Value after the change
    """

    timestamp: datetime = Field(default_factory=datetime.now)
    field: str = Field(description="Changed field name")
    old_value: Any = None
    new_value: Any = None


class Artifact(BaseModel):
    """Base for every tracked artifact."""

    id: str = Field(description="Stable id, namespaced by kind (R-001, VP-01, TC-01)")
    last_modified: datetime = Field(default_factory=datetime.now)
    change_history: list[ChangeRecord] = Field(default_factory=list)

    def record_change(self, field: str, old_value: Any, new_value: Any) -> ChangeRecord:
        """Append an audit entry and bump last_modified.

        Values are deep-copied so later edits to the live field never reach
        the recorded entry.
        """
        record = ChangeRecord(
            field=field, old_value=copy.deepcopy(old_value), new_value=copy.deepcopy(new_value)
        )
        self.change_history.append(record)
        self.last_modified = record.timestamp
        return record


class Requirement(Artifact):
    """A parsed requirement."""

    description: str = ""
    priority: Priority = "Medium"
    status: RequirementStatus = "Parsed"
    linked_viewpoints: IdSet = Field(default_factory=list)
    linked_test_cases: IdSet = Field(default_factory=list)


class Viewpoint(Artifact):
    """A testing viewpoint: an area and the intent used to test it."""

    area: str = ""
    intent: str = ""
    data_variants: str = ""
    notes: str = ""
    linked_requirements: IdSet = Field(default_factory=list)
    linked_test_cases: IdSet = Field(default_factory=list)


class TestCase(Artifact):
    """A test case.

    `locked` is only carried here; the editing surface decides what it means.
    """

    __test__ = False

    title: str = ""
    steps: str = ""
    expected_result: str = ""
    severity: Severity = "Medium"
    req_ids: IdSet = Field(default_factory=list)
    viewpoint_ids: IdSet = Field(default_factory=list)
    tags: IdSet = Field(default_factory=list)
    locked: bool = False


ARTIFACT_MODELS: dict[ArtifactKind, type[Artifact]] = {
    ArtifactKind.REQUIREMENT: Requirement,
    ArtifactKind.VIEWPOINT: Viewpoint,
    ArtifactKind.TESTCASE: TestCase,
}

# Link fields per kind; one hop from an artifact is the union of these.
LINK_FIELDS: dict[ArtifactKind, tuple[str, ...]] = {
    ArtifactKind.REQUIREMENT: ("linked_viewpoints", "linked_test_cases"),
    ArtifactKind.VIEWPOINT: ("linked_requirements", "linked_test_cases"),
    ArtifactKind.TESTCASE: ("req_ids", "viewpoint_ids"),
}

# Fields the editing surface may change through a FieldUpdate.
EDITABLE_FIELDS: dict[ArtifactKind, tuple[str, ...]] = {
    ArtifactKind.REQUIREMENT: ("description", "priority", "status"),
    ArtifactKind.VIEWPOINT: ("area", "intent", "data_variants", "notes"),
    ArtifactKind.TESTCASE: (
        "title",
        "steps",
        "expected_result",
        "severity",
        "tags",
        "locked",
    ),
}


def kind_of(artifact: Artifact) -> ArtifactKind:
    """Return the kind of an artifact instance."""
    for kind, model in ARTIFACT_MODELS.items():
        if isinstance(artifact, model):
            return kind
    raise TypeError(f"Not a tracked artifact: {type(artifact).__name__}")


def tracked_fields(kind: ArtifactKind) -> list[str]:
    """Fields compared by change detection, in declaration order."""
    return [name for name in ARTIFACT_MODELS[kind].model_fields if name not in META_FIELDS]


class ArtifactSet(BaseModel):
    """The full working set of a suite: requirements, viewpoints, test cases."""

    requirements: list[Requirement] = Field(default_factory=list)
    viewpoints: list[Viewpoint] = Field(default_factory=list)
    test_cases: list[TestCase] = Field(default_factory=list)

    def collection(self, kind: ArtifactKind) -> list[Any]:
        """Return the live list holding artifacts of `kind`."""
        if kind == ArtifactKind.REQUIREMENT:
            return self.requirements
        if kind == ArtifactKind.VIEWPOINT:
            return self.viewpoints
        return self.test_cases

    def find(self, kind: ArtifactKind, artifact_id: str) -> Artifact | None:
        """Look up an artifact by kind and id."""
        for artifact in self.collection(kind):
            if artifact.id == artifact_id:
                return artifact
        return None

    def clone(self) -> "ArtifactSet":
        """Fully independent deep copy of the set."""
        return self.model_copy(deep=True)
