"""Tests for suitetrace data models."""

import pytest
from pydantic import ValidationError

from suitetrace.models import (
    ArtifactKind,
    ArtifactSet,
    CoverageStatus,
    ImpactNotice,
    Requirement,
    TestCase,
    Version,
    Viewpoint,
    kind_of,
    tracked_fields,
)


def test_requirement_defaults():
    req = Requirement(id="R-1")
    assert req.priority == "Medium"
    assert req.status == "Parsed"
    assert req.linked_viewpoints == []
    assert req.change_history == []


def test_link_fields_drop_duplicates():
    """Link fields keep first-seen order and drop repeats."""
    tc = TestCase(id="TC-1", req_ids=["R-2", "R-1", "R-2"])
    assert tc.req_ids == ["R-2", "R-1"]


def test_invalid_priority():
    with pytest.raises(ValidationError):
        Requirement(id="R-1", priority="Urgent")


def test_record_change():
    vp = Viewpoint(id="VP-1")
    record = vp.record_change("area", "", "Login")

    assert vp.change_history == [record]
    assert vp.last_modified == record.timestamp
    assert record.old_value == ""
    assert record.new_value == "Login"


def test_kind_of():
    assert kind_of(Requirement(id="R-1")) == ArtifactKind.REQUIREMENT
    assert kind_of(Viewpoint(id="VP-1")) == ArtifactKind.VIEWPOINT
    assert kind_of(TestCase(id="TC-1")) == ArtifactKind.TESTCASE


def test_tracked_fields_skip_meta():
    fields = tracked_fields(ArtifactKind.REQUIREMENT)
    assert fields == [
        "id",
        "description",
        "priority",
        "status",
        "linked_viewpoints",
        "linked_test_cases",
    ]


def test_artifact_set_find_and_clone(sample: ArtifactSet):
    clone = sample.clone()
    clone.find(ArtifactKind.VIEWPOINT, "VP-01").area = "Changed"

    assert sample.find(ArtifactKind.VIEWPOINT, "VP-01").area == "Login"
    assert sample.find(ArtifactKind.VIEWPOINT, "VP-99") is None


def test_version_number_starts_at_one(sample: ArtifactSet):
    with pytest.raises(ValidationError):
        Version(
            id="v0-0",
            version_number=0,
            description="bad",
            author="me",
            snapshot=sample,
        )


def test_impact_notice_count():
    notice = ImpactNotice(
        kind=ArtifactKind.REQUIREMENT, artifact_id="R-1", neighbors=["VP-1", "TC-1"]
    )
    assert notice.count == 2
    assert notice.model_dump()["count"] == 2


def test_coverage_status_values():
    with pytest.raises(ValidationError):
        CoverageStatus(status="partial", count=1)


def test_record_change_copies_values():
    """Audit entries keep their values when the live list changes later."""
    tc = TestCase(id="TC-1", tags=["a"])
    old = list(tc.tags)
    tc.tags.append("b")
    record = tc.record_change("tags", old, tc.tags)

    tc.tags.append("c")
    old.append("z")

    assert record.old_value == ["a"]
    assert record.new_value == ["a", "b"]
