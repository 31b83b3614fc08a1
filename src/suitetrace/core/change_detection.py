"""Change detection between two artifact sets.

Produces the human-readable change summary stored on each version:

    Added requirement R-004
    Removed testcase TC-02
    viewpoint VP-01: intent changed

Kinds are compared in order requirement, viewpoint, testcase. For each kind
additions come first (in new-set order), then removals (in old-set order),
then field modifications (in old-set order, fields in declaration order).
The meta fields last_modified and change_history are never compared.
"""

from typing import Any

from ..models import ArtifactKind, ArtifactSet, tracked_fields


def _compare_collection(old: list[Any], new: list[Any], kind: ArtifactKind) -> list[str]:
    label = kind.value
    old_by_id = {item.id: item for item in old}
    new_by_id = {item.id: item for item in new}

    changes = [f"Added {label} {item.id}" for item in new if item.id not in old_by_id]
    changes.extend(f"Removed {label} {item.id}" for item in old if item.id not in new_by_id)

    fields = tracked_fields(kind)
    for old_item in old:
        new_item = new_by_id.get(old_item.id)
        if new_item is None:
            continue
        old_values = old_item.model_dump(include=set(fields))
        new_values = new_item.model_dump(include=set(fields))
        for field in fields:
            if old_values.get(field) != new_values.get(field):
                changes.append(f"{label} {old_item.id}: {field} changed")

    return changes


def detect_changes(old_set: ArtifactSet, new_set: ArtifactSet) -> list[str]:
    """Summarize what changed from `old_set` to `new_set`.

    Args:
        old_set: Baseline (usually the last saved snapshot)
        new_set: Current working set

    Returns:
        Ordered change strings; empty when the sets are equivalent
    """
    changes: list[str] = []
    for kind in ArtifactKind:
        changes.extend(
            _compare_collection(old_set.collection(kind), new_set.collection(kind), kind)
        )
    return changes
