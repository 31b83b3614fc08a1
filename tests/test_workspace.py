"""Tests for the suite workspace."""

import pytest

from suitetrace.config import SuiteConfig, VersioningConfig
from suitetrace.core import Workspace
from suitetrace.models import (
    ArtifactKind,
    ArtifactSet,
    FieldUpdate,
    ImpactNotice,
    TestCase,
    TraceError,
    Viewpoint,
)

REQ = ArtifactKind.REQUIREMENT
VP = ArtifactKind.VIEWPOINT
TC = ArtifactKind.TESTCASE


def approve(artifact_id: str = "R-001") -> FieldUpdate:
    return FieldUpdate(kind=REQ, artifact_id=artifact_id, field="status", value="Approved")


class TestUpdateField:
    """Tests for Workspace.update_field."""

    @pytest.mark.unit
    def test_applies_edit(self, workspace: Workspace) -> None:
        """A valid edit changes the field, logs it and flags unsaved changes."""
        result = workspace.update_field(approve())

        req = workspace.artifacts.find(REQ, "R-001")
        assert result.ok is True
        assert req.status == "Approved"
        entry = req.change_history[-1]
        assert (entry.field, entry.old_value, entry.new_value) == ("status", "Parsed", "Approved")
        assert req.last_modified == entry.timestamp
        assert workspace.versions.has_unsaved_changes is True

    @pytest.mark.unit
    def test_reports_impacted_neighbors(self, workspace: Workspace) -> None:
        """The result carries the one-hop neighbours of the edited artifact."""
        result = workspace.update_field(approve())

        assert result.impact is not None
        assert result.impact.neighbors == ["VP-01", "TC-01", "TC-02"]
        assert result.impact.count == 3
        assert result.impact.field == "status"

    @pytest.mark.unit
    def test_notifies_subscribers(self, workspace: Workspace) -> None:
        notices: list[ImpactNotice] = []
        workspace.subscribe(notices.append)

        workspace.update_field(
            FieldUpdate(kind=VP, artifact_id="VP-01", field="notes", value="Also lockout")
        )

        assert len(notices) == 1
        assert notices[0].artifact_id == "VP-01"
        assert notices[0].neighbors == ["R-001", "TC-01", "TC-02"]

    @pytest.mark.unit
    def test_impact_does_not_touch_neighbors(self, workspace: Workspace) -> None:
        """Impact is advisory: neighbours are not modified."""
        before = workspace.artifacts.find(TC, "TC-01").model_dump()
        workspace.update_field(approve())
        assert workspace.artifacts.find(TC, "TC-01").model_dump() == before

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["id", "linked_viewpoints", "change_history", "nope"])
    def test_non_editable_field(self, workspace: Workspace, field: str) -> None:
        result = workspace.update_field(
            FieldUpdate(kind=REQ, artifact_id="R-001", field=field, value="x")
        )
        assert result.error == TraceError.INVALID_FIELD
        assert workspace.versions.has_unsaved_changes is False

    @pytest.mark.unit
    def test_invalid_value(self, workspace: Workspace) -> None:
        """Values are validated against the model."""
        before = workspace.artifacts.model_dump()
        result = workspace.update_field(
            FieldUpdate(kind=REQ, artifact_id="R-001", field="priority", value="Urgent")
        )
        assert result.error == TraceError.INVALID_FIELD
        assert workspace.artifacts.model_dump() == before

    @pytest.mark.unit
    def test_unknown_artifact(self, workspace: Workspace) -> None:
        result = workspace.update_field(approve("R-404"))
        assert result.ok is False
        assert result.error == TraceError.ARTIFACT_NOT_FOUND
        assert workspace.versions.has_unsaved_changes is False

    @pytest.mark.unit
    def test_unchanged_value_is_noop(self, workspace: Workspace) -> None:
        """Writing the current value succeeds without history or dirty flag."""
        result = workspace.update_field(
            FieldUpdate(kind=REQ, artifact_id="R-001", field="status", value="Parsed")
        )
        assert result.ok is True
        assert result.impact is None
        assert workspace.artifacts.find(REQ, "R-001").change_history == []
        assert workspace.versions.has_unsaved_changes is False

    @pytest.mark.unit
    def test_list_field(self, workspace: Workspace) -> None:
        """Tags are deduplicated like every id set."""
        workspace.update_field(
            FieldUpdate(kind=TC, artifact_id="TC-01", field="tags", value=["a", "b", "a"])
        )
        assert workspace.artifacts.find(TC, "TC-01").tags == ["a", "b"]

    @pytest.mark.unit
    def test_history_survives_later_list_edits(self, workspace: Workspace) -> None:
        """Mutating the live list afterwards leaves the audit entry as recorded."""
        workspace.update_field(
            FieldUpdate(kind=TC, artifact_id="TC-01", field="tags", value=["x"])
        )
        tc = workspace.artifacts.find(TC, "TC-01")
        tc.tags.append("later")

        entry = tc.change_history[-1]
        assert entry.old_value == ["positive", "smoke"]
        assert entry.new_value == ["x"]


class TestLinking:
    """Tests for Workspace.link / unlink."""

    @pytest.mark.unit
    def test_link_marks_unsaved(self, workspace: Workspace) -> None:
        result = workspace.link(REQ, "R-003", TC, "TC-02")
        assert result.ok is True
        assert workspace.versions.has_unsaved_changes is True
        assert workspace.coverage() == 100

    @pytest.mark.unit
    def test_existing_link_leaves_flag(self, workspace: Workspace) -> None:
        workspace.link(REQ, "R-001", TC, "TC-01")
        assert workspace.versions.has_unsaved_changes is False

    @pytest.mark.unit
    def test_failed_link_leaves_flag(self, workspace: Workspace) -> None:
        result = workspace.link(REQ, "R-001", REQ, "R-002")
        assert result.error == TraceError.INVALID_LINK
        assert workspace.versions.has_unsaved_changes is False

    @pytest.mark.unit
    def test_unlink(self, workspace: Workspace) -> None:
        workspace.unlink(VP, "VP-02", TC, "TC-03")
        assert workspace.artifacts.find(TC, "TC-03").viewpoint_ids == []
        assert workspace.versions.has_unsaved_changes is True


class TestAddRemove:
    """Tests for adding and removing artifacts."""

    @pytest.mark.unit
    def test_add_writes_reciprocal_links(self, workspace: Workspace) -> None:
        """Links on a new artifact are written on both sides; unknown ids dropped."""
        result = workspace.add_artifact(
            TestCase(id="TC-04", title="MFA enrolment", req_ids=["R-003", "R-999"])
        )

        added = workspace.artifacts.find(TC, "TC-04")
        assert result.ok is True
        assert added.req_ids == ["R-003"]
        assert workspace.artifacts.find(REQ, "R-003").linked_test_cases == ["TC-04"]
        assert workspace.versions.has_unsaved_changes is True

    @pytest.mark.unit
    def test_add_copies_input(self, workspace: Workspace) -> None:
        viewpoint = Viewpoint(id="VP-03", area="MFA")
        workspace.add_artifact(viewpoint)
        viewpoint.area = "changed"
        assert workspace.artifacts.find(VP, "VP-03").area == "MFA"

    @pytest.mark.unit
    def test_add_duplicate(self, workspace: Workspace) -> None:
        result = workspace.add_artifact(TestCase(id="TC-01"))
        assert result.error == TraceError.DUPLICATE_ARTIFACT
        assert len(workspace.artifacts.test_cases) == 3

    @pytest.mark.unit
    def test_remove_strips_links(self, workspace: Workspace) -> None:
        """Removing a test case removes it from every neighbour."""
        result = workspace.remove_artifact(TC, "TC-01")

        assert result.ok is True
        assert result.impact is not None
        assert result.impact.neighbors == ["R-001", "VP-01"]
        assert workspace.artifacts.find(TC, "TC-01") is None
        assert workspace.artifacts.find(REQ, "R-001").linked_test_cases == ["TC-02"]
        assert workspace.artifacts.find(VP, "VP-01").linked_test_cases == ["TC-02"]

    @pytest.mark.unit
    def test_remove_strips_one_sided_links(self) -> None:
        """A neighbour pointing at the removed artifact one-way is cleaned too."""
        data = ArtifactSet(
            viewpoints=[Viewpoint(id="VP-1", linked_test_cases=["TC-1"])],
            test_cases=[TestCase(id="TC-1")],
        )
        workspace = Workspace(data)
        workspace.remove_artifact(TC, "TC-1")
        assert workspace.artifacts.viewpoints[0].linked_test_cases == []

        viewpoint = workspace.artifacts.viewpoints[0]
        viewpoint.linked_test_cases.append("TC-2")
        assert viewpoint.change_history[-1].new_value == []

    @pytest.mark.unit
    def test_remove_unknown(self, workspace: Workspace) -> None:
        result = workspace.remove_artifact(REQ, "R-404")
        assert result.error == TraceError.ARTIFACT_NOT_FOUND


class TestVersions:
    """Tests for save / restore through the workspace."""

    @pytest.mark.unit
    def test_save_summarizes_edits(self, workspace: Workspace) -> None:
        workspace.update_field(approve())
        version = workspace.save("Approve login")
        assert version.changes_summary == ["requirement R-001: status changed"]
        assert workspace.pending_changes() == []

    @pytest.mark.unit
    def test_author_from_config(self, sample: ArtifactSet) -> None:
        config = SuiteConfig(versioning=VersioningConfig(author="qa-lead"))
        workspace = Workspace(sample, config)
        assert workspace.save("v1").author == "qa-lead"

    @pytest.mark.unit
    def test_restore_replaces_live_set(self, workspace: Workspace) -> None:
        v1 = workspace.save("v1")
        workspace.update_field(approve())
        workspace.remove_artifact(TC, "TC-03")
        workspace.save("v2")

        assert workspace.restore(v1.id) is True

        assert workspace.artifacts.find(REQ, "R-001").status == "Parsed"
        assert workspace.artifacts.find(TC, "TC-03") is not None
        assert workspace.versions.current_version == 1
        assert workspace.versions.has_unsaved_changes is False

    @pytest.mark.unit
    def test_restore_unknown(self, workspace: Workspace) -> None:
        live = workspace.artifacts
        assert workspace.restore("v9-0") is False
        assert workspace.artifacts is live

    @pytest.mark.unit
    def test_restore_preserves_locked(self, workspace: Workspace) -> None:
        v1 = workspace.save("v1")
        workspace.update_field(
            FieldUpdate(kind=TC, artifact_id="TC-02", field="locked", value=False)
        )
        workspace.restore(v1.id)
        assert workspace.artifacts.find(TC, "TC-02").locked is True

    @pytest.mark.unit
    def test_revert(self, workspace: Workspace) -> None:
        """Revert restores the version before the current one."""
        assert workspace.revert() is False
        workspace.save("v1")
        workspace.update_field(approve())
        workspace.save("v2")

        assert workspace.revert() is True
        assert workspace.versions.current_version == 1
        assert workspace.artifacts.find(REQ, "R-001").status == "Parsed"

    @pytest.mark.unit
    def test_auto_save(self, workspace: Workspace) -> None:
        assert workspace.auto_save() is None
        workspace.update_field(approve())
        version = workspace.auto_save()
        assert version is not None
        assert version.is_auto_save is True
        assert version.changes_summary == ["requirement R-001: status changed"]

    @pytest.mark.unit
    def test_edits_after_save_do_not_leak(self, workspace: Workspace) -> None:
        """The live set and saved snapshots stay independent."""
        version = workspace.save("v1")
        workspace.update_field(approve())
        assert version.snapshot.find(REQ, "R-001").status == "Parsed"


class TestDerivedViews:
    """Coverage, matrix and summary are recomputed on each call."""

    @pytest.mark.unit
    def test_summary_tracks_links(self, workspace: Workspace) -> None:
        assert workspace.summary().uncovered_requirements == ["R-003"]
        workspace.link(VP, "VP-01", REQ, "R-003")
        assert workspace.summary().uncovered_requirements == []
        assert workspace.matrix()[2].via_viewpoint_test_cases == ["TC-01", "TC-02"]

    @pytest.mark.unit
    def test_impact_of(self, workspace: Workspace) -> None:
        notice = workspace.impact_of(VP, "VP-02")
        assert notice.neighbors == ["R-002", "TC-03"]
        assert notice.field is None
