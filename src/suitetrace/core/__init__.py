"""Core business logic for suitetrace.

This package contains the engine with no external I/O except artifact_io:
- change_detection: Change summaries between two artifact sets
- version_manager: Snapshot history, save, restore and auto-save
- traceability: Two-way links, coverage and the traceability matrix
- workspace: Live artifact set wired to its version history
- autosave: Timer that drives Workspace.auto_save()
- export: Test case export
- artifact_io: Artifact-set JSON files
"""

from .artifact_io import ArtifactFileError, load_artifact_set, write_artifact_set
from .autosave import AutoSaveScheduler
from .change_detection import detect_changes
from .export import export_summary, export_test_cases
from .traceability import (
    build_matrix,
    classify_coverage,
    compute_coverage,
    covering_test_cases,
    impacted_neighbors,
    link_artifacts,
    link_field,
    summarize_coverage,
    unlink_artifacts,
)
from .version_manager import VersionManager
from .workspace import ImpactListener, Workspace

__all__ = [
    "ArtifactFileError",
    "AutoSaveScheduler",
    "ImpactListener",
    "VersionManager",
    "Workspace",
    "build_matrix",
    "classify_coverage",
    "compute_coverage",
    "covering_test_cases",
    "detect_changes",
    "export_summary",
    "export_test_cases",
    "impacted_neighbors",
    "link_artifacts",
    "link_field",
    "load_artifact_set",
    "summarize_coverage",
    "unlink_artifacts",
    "write_artifact_set",
]
