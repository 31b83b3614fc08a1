"""Traceability links and coverage for requirements, viewpoints and test cases.

Links are bidirectional: linking A to B writes B's id into A's link field
and A's id into B's reciprocal field, or writes nothing at all. Supported
pairings (in either direction):

    requirement <-> viewpoint   linked_viewpoints   / linked_requirements
    requirement <-> testcase    linked_test_cases   / req_ids
    viewpoint   <-> testcase    linked_test_cases   / viewpoint_ids

Coverage is always derived from the current link state; nothing here
stores it. A requirement is covered by a test case that lists it in
req_ids, or by a test case linked to a viewpoint that lists the
requirement in linked_requirements.
"""

import logging
import math
from collections.abc import Sequence

from ..models import (
    LINK_FIELDS,
    Artifact,
    ArtifactKind,
    ArtifactSet,
    CoverageStatus,
    CoverageSummary,
    LinkResult,
    MatrixRow,
    Requirement,
    TestCase,
    TraceError,
    Viewpoint,
)

logger = logging.getLogger(__name__)

REQ = ArtifactKind.REQUIREMENT
VP = ArtifactKind.VIEWPOINT
TC = ArtifactKind.TESTCASE

# (holder kind, referenced kind) -> field on the holder
_LINK_FIELD: dict[tuple[ArtifactKind, ArtifactKind], str] = {
    (REQ, VP): "linked_viewpoints",
    (REQ, TC): "linked_test_cases",
    (VP, REQ): "linked_requirements",
    (VP, TC): "linked_test_cases",
    (TC, REQ): "req_ids",
    (TC, VP): "viewpoint_ids",
}


def link_field(holder: ArtifactKind, referenced: ArtifactKind) -> str | None:
    """Field on a `holder` artifact that lists ids of `referenced` artifacts."""
    return _LINK_FIELD.get((holder, referenced))


def _resolve(
    artifacts: ArtifactSet,
    source_kind: ArtifactKind,
    source_id: str,
    target_kind: ArtifactKind,
    target_id: str,
) -> tuple[Artifact, Artifact, str, str] | TraceError:
    if source_kind == target_kind:
        # Also covers linking an artifact to itself
        return TraceError.INVALID_LINK
    forward = link_field(source_kind, target_kind)
    backward = link_field(target_kind, source_kind)
    if forward is None or backward is None:
        return TraceError.INVALID_LINK

    source = artifacts.find(source_kind, source_id)
    target = artifacts.find(target_kind, target_id)
    if source is None or target is None:
        return TraceError.ARTIFACT_NOT_FOUND
    return source, target, forward, backward


def _set_ids(artifact: Artifact, field: str, ids: list[str]) -> bool:
    old = list(getattr(artifact, field))
    if old == ids:
        return False
    setattr(artifact, field, ids)
    artifact.record_change(field, old, list(ids))
    return True


def link_artifacts(
    artifacts: ArtifactSet,
    source_kind: ArtifactKind,
    source_id: str,
    target_kind: ArtifactKind,
    target_id: str,
) -> LinkResult:
    """Link two artifacts on both sides.

    Idempotent: an existing link is left untouched and reported with
    changed=False.

    Returns:
        LinkResult; INVALID_LINK for self or same-kind links,
        ARTIFACT_NOT_FOUND when either id is unknown
    """
    resolved = _resolve(artifacts, source_kind, source_id, target_kind, target_id)
    if isinstance(resolved, TraceError):
        logger.warning(
            "Cannot link %s %s -> %s %s: %s",
            source_kind.value,
            source_id,
            target_kind.value,
            target_id,
            resolved.value,
        )
        return LinkResult(ok=False, error=resolved)

    source, target, forward, backward = resolved
    forward_ids = list(dict.fromkeys([*getattr(source, forward), target_id]))
    backward_ids = list(dict.fromkeys([*getattr(target, backward), source_id]))
    changed = _set_ids(source, forward, forward_ids)
    changed = _set_ids(target, backward, backward_ids) or changed

    if changed:
        logger.debug("Linked %s <-> %s", source_id, target_id)
    return LinkResult(ok=True, changed=changed)


def unlink_artifacts(
    artifacts: ArtifactSet,
    source_kind: ArtifactKind,
    source_id: str,
    target_kind: ArtifactKind,
    target_id: str,
) -> LinkResult:
    """Remove a link from both sides. Same error rules as link_artifacts."""
    resolved = _resolve(artifacts, source_kind, source_id, target_kind, target_id)
    if isinstance(resolved, TraceError):
        logger.warning(
            "Cannot unlink %s %s -> %s %s: %s",
            source_kind.value,
            source_id,
            target_kind.value,
            target_id,
            resolved.value,
        )
        return LinkResult(ok=False, error=resolved)

    source, target, forward, backward = resolved
    changed = _set_ids(source, forward, [i for i in getattr(source, forward) if i != target_id])
    changed = (
        _set_ids(target, backward, [i for i in getattr(target, backward) if i != source_id])
        or changed
    )

    if changed:
        logger.debug("Unlinked %s <-> %s", source_id, target_id)
    return LinkResult(ok=True, changed=changed)


def covering_test_cases(
    requirement_id: str,
    viewpoints: Sequence[Viewpoint],
    test_cases: Sequence[TestCase],
) -> tuple[list[TestCase], list[TestCase]]:
    """Test cases covering a requirement.

    Returns:
        (direct, via_viewpoints); a test case covering both ways appears in both
    """
    via_ids = {vp.id for vp in viewpoints if requirement_id in vp.linked_requirements}
    direct = [tc for tc in test_cases if requirement_id in tc.req_ids]
    via = [tc for tc in test_cases if any(vp_id in via_ids for vp_id in tc.viewpoint_ids)]
    return direct, via


def classify_coverage(
    requirement_id: str,
    viewpoints: Sequence[Viewpoint],
    test_cases: Sequence[TestCase],
) -> CoverageStatus:
    """Count distinct covering test cases and grade them.

    0 is uncovered, 1 is minimal, 2 or more is covered.
    """
    direct, via = covering_test_cases(requirement_id, viewpoints, test_cases)
    count = len({tc.id for tc in [*direct, *via]})
    if count == 0:
        return CoverageStatus(status="uncovered", count=0)
    if count == 1:
        return CoverageStatus(status="minimal", count=1)
    return CoverageStatus(status="covered", count=count)


def compute_coverage(
    requirements: Sequence[Requirement],
    viewpoints: Sequence[Viewpoint],
    test_cases: Sequence[TestCase],
) -> int:
    """Percentage of requirements with at least one covering test case.

    Returns:
        Percentage 0-100 rounded half up; 0 when there are no requirements
    """
    if not requirements:
        return 0
    covered = sum(
        1 for req in requirements if classify_coverage(req.id, viewpoints, test_cases).count > 0
    )
    # Half-up rounding: 1 of 8 covered is 13%, not 12%
    return math.floor(100 * covered / len(requirements) + 0.5)


def impacted_neighbors(artifacts: ArtifactSet, kind: ArtifactKind, artifact_id: str) -> list[str]:
    """Ids directly linked to an artifact (one hop, no transitive closure).

    Returns:
        Neighbour ids in link-field order; empty if the artifact is unknown
    """
    artifact = artifacts.find(kind, artifact_id)
    if artifact is None:
        return []
    neighbors: list[str] = []
    for field in LINK_FIELDS[kind]:
        neighbors.extend(getattr(artifact, field))
    return list(dict.fromkeys(neighbors))


def build_matrix(artifacts: ArtifactSet) -> list[MatrixRow]:
    """One traceability row per requirement, in requirement order."""
    rows = []
    for req in artifacts.requirements:
        direct, via = covering_test_cases(req.id, artifacts.viewpoints, artifacts.test_cases)
        rows.append(
            MatrixRow(
                requirement_id=req.id,
                description=req.description,
                priority=req.priority,
                viewpoints=[
                    vp.id for vp in artifacts.viewpoints if req.id in vp.linked_requirements
                ],
                direct_test_cases=[tc.id for tc in direct],
                via_viewpoint_test_cases=[tc.id for tc in via],
                coverage=classify_coverage(req.id, artifacts.viewpoints, artifacts.test_cases),
            )
        )
    return rows


def summarize_coverage(artifacts: ArtifactSet) -> CoverageSummary:
    """Artifact counts, coverage percentage and uncovered requirement ids."""
    uncovered = [
        req.id
        for req in artifacts.requirements
        if classify_coverage(req.id, artifacts.viewpoints, artifacts.test_cases).count == 0
    ]
    return CoverageSummary(
        requirements=len(artifacts.requirements),
        viewpoints=len(artifacts.viewpoints),
        test_cases=len(artifacts.test_cases),
        coverage_percent=compute_coverage(
            artifacts.requirements, artifacts.viewpoints, artifacts.test_cases
        ),
        uncovered_requirements=uncovered,
    )
