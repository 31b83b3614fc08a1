"""Suite workspace: the live artifact set plus its version history.

The workspace is the inbound surface for the editing layer. Every edit goes
through here so that the artifact set and the version list change together
under one lock, unsaved changes get flagged, and impact notices reach
subscribers.
"""

import logging
import threading
from collections.abc import Callable

from pydantic import ValidationError

from ..config import SuiteConfig
from ..models import (
    EDITABLE_FIELDS,
    Artifact,
    ArtifactKind,
    ArtifactSet,
    CoverageSummary,
    FieldUpdate,
    ImpactNotice,
    LinkResult,
    MatrixRow,
    TraceError,
    UpdateResult,
    Version,
    kind_of,
)
from .traceability import (
    build_matrix,
    compute_coverage,
    impacted_neighbors,
    link_artifacts,
    link_field,
    summarize_coverage,
    unlink_artifacts,
)
from .version_manager import VersionManager

logger = logging.getLogger(__name__)

ImpactListener = Callable[[ImpactNotice], None]


class Workspace:
    """Live artifacts of one suite session and their version history."""

    def __init__(self, artifacts: ArtifactSet, config: SuiteConfig | None = None) -> None:
        self.config = config or SuiteConfig()
        self._artifacts = artifacts
        self.versions = VersionManager(artifacts, author=self.config.versioning.author)
        self._listeners: list[ImpactListener] = []
        self._lock = threading.RLock()

    @property
    def artifacts(self) -> ArtifactSet:
        return self._artifacts

    def subscribe(self, listener: ImpactListener) -> None:
        """Register a callback for impact notices."""
        self._listeners.append(listener)

    def _notify(self, notice: ImpactNotice) -> None:
        if notice.count:
            logger.info(
                "%s %s changed: %d linked artifacts may be impacted",
                notice.kind.value,
                notice.artifact_id,
                notice.count,
            )
        for listener in self._listeners:
            listener(notice)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def update_field(self, update: FieldUpdate) -> UpdateResult:
        """Apply one field edit.

        The value is validated by the artifact's model before anything is
        written. An edit that leaves the value unchanged succeeds without
        touching history or the unsaved flag.
        """
        if update.field not in EDITABLE_FIELDS[update.kind]:
            logger.warning("Field %s is not editable on %s", update.field, update.kind.value)
            return UpdateResult(ok=False, error=TraceError.INVALID_FIELD)

        with self._lock:
            artifact = self._artifacts.find(update.kind, update.artifact_id)
            if artifact is None:
                logger.warning("%s not found: %s", update.kind.value, update.artifact_id)
                return UpdateResult(ok=False, error=TraceError.ARTIFACT_NOT_FOUND)

            data = artifact.model_dump()
            data[update.field] = update.value
            try:
                candidate = type(artifact).model_validate(data)
            except ValidationError as e:
                logger.warning("Invalid value for %s.%s: %s", update.artifact_id, update.field, e)
                return UpdateResult(ok=False, error=TraceError.INVALID_FIELD)

            old_value = getattr(artifact, update.field)
            new_value = getattr(candidate, update.field)
            if old_value == new_value:
                return UpdateResult(ok=True)

            setattr(artifact, update.field, new_value)
            artifact.record_change(update.field, old_value, new_value)
            self.versions.mark_unsaved_changes()
            notice = ImpactNotice(
                kind=update.kind,
                artifact_id=update.artifact_id,
                field=update.field,
                neighbors=impacted_neighbors(self._artifacts, update.kind, update.artifact_id),
            )

        self._notify(notice)
        return UpdateResult(ok=True, impact=notice)

    def link(
        self,
        source_kind: ArtifactKind,
        source_id: str,
        target_kind: ArtifactKind,
        target_id: str,
    ) -> LinkResult:
        """Link two artifacts on both sides."""
        with self._lock:
            result = link_artifacts(self._artifacts, source_kind, source_id, target_kind, target_id)
            if result.changed:
                self.versions.mark_unsaved_changes()
        return result

    def unlink(
        self,
        source_kind: ArtifactKind,
        source_id: str,
        target_kind: ArtifactKind,
        target_id: str,
    ) -> LinkResult:
        """Remove a link from both sides."""
        with self._lock:
            result = unlink_artifacts(
                self._artifacts, source_kind, source_id, target_kind, target_id
            )
            if result.changed:
                self.versions.mark_unsaved_changes()
        return result

    def add_artifact(self, artifact: Artifact) -> UpdateResult:
        """Add a new artifact; its link fields are written on both sides.

        Links to ids that do not exist are dropped.
        """
        kind = kind_of(artifact)
        with self._lock:
            if self._artifacts.find(kind, artifact.id) is not None:
                logger.warning("%s already exists: %s", kind.value, artifact.id)
                return UpdateResult(ok=False, error=TraceError.DUPLICATE_ARTIFACT)

            added = artifact.model_copy(deep=True)
            wanted: list[tuple[ArtifactKind, str]] = []
            for target_kind in ArtifactKind:
                field = link_field(kind, target_kind)
                if field is None:
                    continue
                wanted.extend((target_kind, target_id) for target_id in getattr(added, field))
                setattr(added, field, [])

            self._artifacts.collection(kind).append(added)
            for target_kind, target_id in wanted:
                result = link_artifacts(self._artifacts, kind, added.id, target_kind, target_id)
                if not result.ok:
                    logger.warning("Dropped link %s -> %s", added.id, target_id)
            self.versions.mark_unsaved_changes()

        logger.debug("Added %s %s", kind.value, added.id)
        return UpdateResult(ok=True)

    def remove_artifact(self, kind: ArtifactKind, artifact_id: str) -> UpdateResult:
        """Remove an artifact and every link pointing at it."""
        with self._lock:
            artifact = self._artifacts.find(kind, artifact_id)
            if artifact is None:
                logger.warning("%s not found: %s", kind.value, artifact_id)
                return UpdateResult(ok=False, error=TraceError.ARTIFACT_NOT_FOUND)

            notice = ImpactNotice(
                kind=kind,
                artifact_id=artifact_id,
                neighbors=impacted_neighbors(self._artifacts, kind, artifact_id),
            )
            for target_kind in ArtifactKind:
                field = link_field(kind, target_kind)
                if field is None:
                    continue
                for target_id in list(getattr(artifact, field)):
                    unlink_artifacts(self._artifacts, kind, artifact_id, target_kind, target_id)
            # Neighbours whose links were one-sided still point at the id
            for target_kind in ArtifactKind:
                field = link_field(target_kind, kind)
                if field is None:
                    continue
                for other in self._artifacts.collection(target_kind):
                    if artifact_id in getattr(other, field):
                        old = list(getattr(other, field))
                        setattr(other, field, [i for i in old if i != artifact_id])
                        other.record_change(field, old, getattr(other, field))

            self._artifacts.collection(kind).remove(artifact)
            self.versions.mark_unsaved_changes()

        self._notify(notice)
        return UpdateResult(ok=True, impact=notice)

    # ------------------------------------------------------------------
    # Versions
    # ------------------------------------------------------------------

    def save(
        self,
        description: str,
        is_checkpoint: bool = False,
        artifact_type: ArtifactKind | None = None,
        artifact_id: str | None = None,
    ) -> Version:
        """Save the live set as a new version."""
        with self._lock:
            return self.versions.save_version(
                description, self._artifacts, is_checkpoint, artifact_type, artifact_id
            )

    def auto_save(self) -> Version | None:
        """Save an auto-save version if anything changed since the last save."""
        with self._lock:
            return self.versions.auto_save(self._artifacts)

    def restore(self, version_id: str) -> bool:
        """Replace the live set with a saved version.

        Returns:
            False if the version does not exist (nothing changes)
        """
        with self._lock:
            restored = self.versions.restore_version(version_id)
            if restored is None:
                return False
            self._artifacts = restored
        return True

    def revert(self) -> bool:
        """Restore the version before the current one, if there is one."""
        with self._lock:
            previous = self.versions.previous_version()
            if previous is None:
                return False
            return self.restore(previous.id)

    def pending_changes(self) -> list[str]:
        with self._lock:
            return self.versions.pending_changes(self._artifacts)

    # ------------------------------------------------------------------
    # Derived views (computed on every call)
    # ------------------------------------------------------------------

    def coverage(self) -> int:
        with self._lock:
            a = self._artifacts
            return compute_coverage(a.requirements, a.viewpoints, a.test_cases)

    def matrix(self) -> list[MatrixRow]:
        with self._lock:
            return build_matrix(self._artifacts)

    def summary(self) -> CoverageSummary:
        with self._lock:
            return summarize_coverage(self._artifacts)

    def impact_of(self, kind: ArtifactKind, artifact_id: str) -> ImpactNotice:
        """One-hop neighbours of an artifact, without any edit."""
        with self._lock:
            return ImpactNotice(
                kind=kind,
                artifact_id=artifact_id,
                neighbors=impacted_neighbors(self._artifacts, kind, artifact_id),
            )

