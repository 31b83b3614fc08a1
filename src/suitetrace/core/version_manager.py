"""Version manager for a suite workspace.

Keeps an append-only, linear history of snapshots of the whole artifact set.
The manager owns the history and a private copy of the last saved (or
restored) set; the live set belongs to the workspace and is only read here.

Restoring never truncates history: it moves the current-version pointer and
resets the baseline that later change summaries are computed against.
"""

import logging
import threading
from datetime import datetime

from ..constants import AUTOSAVE_DESCRIPTION, DEFAULT_AUTHOR
from ..models import ALL_ARTIFACTS, ArtifactKind, ArtifactSet, Version, VersionManagerState
from .change_detection import detect_changes

logger = logging.getLogger(__name__)


class VersionManager:
    """Snapshot history with change detection and restore.

    One instance per workspace session; nothing survives the session.
    """

    def __init__(self, initial_data: ArtifactSet, author: str = DEFAULT_AUTHOR) -> None:
        self.author = author
        self._versions: list[Version] = []
        self._current_version = 0
        self._has_unsaved_changes = False
        self._last_saved = initial_data.clone()
        self._counter = 1
        self._lock = threading.RLock()

    @property
    def versions(self) -> list[Version]:
        """Versions oldest first (a copy of the list, not of the versions)."""
        with self._lock:
            return list(self._versions)

    @property
    def current_version(self) -> int:
        return self._current_version

    @property
    def has_unsaved_changes(self) -> bool:
        return self._has_unsaved_changes

    @property
    def state(self) -> VersionManagerState:
        """The versions / current / unsaved triple for display."""
        with self._lock:
            return VersionManagerState(
                versions=list(self._versions),
                current_version=self._current_version,
                has_unsaved_changes=self._has_unsaved_changes,
            )

    @property
    def latest_version(self) -> Version | None:
        with self._lock:
            return self._versions[-1] if self._versions else None

    def create_version(
        self,
        description: str,
        current_data: ArtifactSet,
        is_auto_save: bool = False,
        artifact_type: ArtifactKind | None = None,
        artifact_id: str | None = None,
    ) -> Version:
        """Build a version of `current_data` without recording it.

        Consumes the next version number. The snapshot is a deep copy, so
        later edits to `current_data` never reach it.
        """
        with self._lock:
            changes = detect_changes(self._last_saved, current_data)
            number = self._counter
            self._counter += 1

        timestamp = datetime.now()
        return Version(
            id=f"v{number}-{int(timestamp.timestamp() * 1000)}",
            version_number=number,
            timestamp=timestamp,
            description=description,
            author=self.author,
            artifact_type=artifact_type,
            artifact_id=artifact_id or ALL_ARTIFACTS,
            snapshot=current_data.clone(),
            changes_summary=changes,
            is_auto_save=is_auto_save,
        )

    def _record(self, version: Version, current_data: ArtifactSet) -> None:
        self._versions.append(version)
        self._current_version = version.version_number
        self._has_unsaved_changes = False
        self._last_saved = current_data.clone()

    def save_version(
        self,
        description: str,
        current_data: ArtifactSet,
        is_checkpoint: bool = False,
        artifact_type: ArtifactKind | None = None,
        artifact_id: str | None = None,
    ) -> Version:
        """Save `current_data` as the next version and make it current.

        Args:
            description: Label shown in the history
            current_data: Live artifact set to snapshot
            is_checkpoint: Caller intent only; numbered and diffed like any save
            artifact_type: Kind of the artifact that triggered the save
            artifact_id: Id of that artifact (defaults to the whole set)

        Returns:
            The recorded version
        """
        with self._lock:
            version = self.create_version(
                description, current_data, False, artifact_type, artifact_id
            )
            self._record(version, current_data)

        logger.debug(
            "Saved %s v%d (%d changes)",
            "checkpoint" if is_checkpoint else "version",
            version.version_number,
            len(version.changes_summary),
        )
        return version

    def mark_unsaved_changes(self) -> None:
        """Flag the working set as edited since the last save."""
        with self._lock:
            self._has_unsaved_changes = True

    def get_version(self, version_id: str) -> Version | None:
        with self._lock:
            for version in self._versions:
                if version.id == version_id:
                    return version
        return None

    def restore_version(self, version_id: str) -> ArtifactSet | None:
        """Make a saved version current again.

        Args:
            version_id: Id of the version to restore

        Returns:
            A deep copy of the version's snapshot for the caller to adopt as
            its live set, or None if no such version exists (nothing changes)
        """
        with self._lock:
            version = self.get_version(version_id)
            if version is None:
                logger.warning("Version not found: %s", version_id)
                return None

            self._current_version = version.version_number
            self._has_unsaved_changes = False
            self._last_saved = version.snapshot.clone()

        logger.debug("Restored v%d", version.version_number)
        return version.snapshot.clone()

    def auto_save(self, current_data: ArtifactSet) -> Version | None:
        """Save an auto-save version if there are unsaved changes.

        Returns:
            The recorded version, or None when there was nothing to save
        """
        with self._lock:
            if not self._has_unsaved_changes:
                return None
            version = self.create_version(AUTOSAVE_DESCRIPTION, current_data, True)
            self._record(version, current_data)

        logger.debug("Auto-saved v%d", version.version_number)
        return version

    def pending_changes(self, current_data: ArtifactSet) -> list[str]:
        """Changes in `current_data` since the last save or restore."""
        with self._lock:
            return detect_changes(self._last_saved, current_data)

    def history(self) -> list[Version]:
        """Versions newest first."""
        with self._lock:
            return sorted(self._versions, key=lambda v: v.version_number, reverse=True)

    def previous_version(self) -> Version | None:
        """The version numbered one below the current one (the revert target)."""
        with self._lock:
            target = self._current_version - 1
            for version in self._versions:
                if version.version_number == target:
                    return version
        return None
