"""Periodic auto-save for a workspace.

The version manager has no clock; this scheduler is the timer that calls
Workspace.auto_save() on a fixed interval from a daemon thread. Each tick is
a no-op unless the workspace has unsaved changes.
"""

import logging
import threading

from ..constants import DEFAULT_AUTOSAVE_INTERVAL
from ..models import Version
from .workspace import Workspace

logger = logging.getLogger(__name__)


class AutoSaveScheduler:
    """Runs Workspace.auto_save() every `interval_seconds` until stopped."""

    def __init__(
        self, workspace: Workspace, interval_seconds: float = DEFAULT_AUTOSAVE_INTERVAL
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.workspace = workspace
        self.interval_seconds = interval_seconds
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @classmethod
    def for_workspace(cls, workspace: Workspace) -> "AutoSaveScheduler":
        """Scheduler using the workspace's configured interval."""
        return cls(workspace, workspace.config.versioning.autosave_interval_seconds)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self) -> Version | None:
        """Run one auto-save cycle now."""
        version = self.workspace.auto_save()
        if version is not None:
            logger.info("Auto-saved version %d", version.version_number)
        return version

    def _run(self) -> None:
        while not self._stop.wait(self.interval_seconds):
            self.tick()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="suitetrace-autosave", daemon=True)
        self._thread.start()
        logger.debug("Auto-save every %.0fs", self.interval_seconds)

    def stop(self, timeout: float | None = None) -> None:
        """Stop the timer thread and wait for it to exit."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def __enter__(self) -> "AutoSaveScheduler":
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()
