"""Test case export in CSV and JSON."""

import csv
import io
import json
from collections.abc import Sequence

from ..constants import EXPORT_FORMATS
from ..models import ArtifactSet, TestCase
from .traceability import summarize_coverage

CSV_COLUMNS = [
    "id",
    "title",
    "steps",
    "expected_result",
    "severity",
    "req_ids",
    "viewpoint_ids",
    "tags",
    "locked",
]


def _csv_row(tc: TestCase) -> list[str]:
    return [
        tc.id,
        tc.title,
        tc.steps,
        tc.expected_result,
        tc.severity,
        ";".join(tc.req_ids),
        ";".join(tc.viewpoint_ids),
        ";".join(tc.tags),
        "true" if tc.locked else "false",
    ]


def export_test_cases(test_cases: Sequence[TestCase], fmt: str = "csv") -> str:
    """Render test cases for export.

    Multi-valued columns are joined with ';' in CSV.

    Raises:
        ValueError: If fmt is not a supported export format
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}")

    if fmt == "json":
        rows = [tc.model_dump(mode="json", exclude={"change_history"}) for tc in test_cases]
        return json.dumps(rows, indent=2)

    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_COLUMNS)
    for tc in test_cases:
        writer.writerow(_csv_row(tc))
    return buffer.getvalue()


def export_summary(artifacts: ArtifactSet) -> dict[str, int | list[str]]:
    """Pre-export check: how many test cases go out, how many requirements lack one."""
    summary = summarize_coverage(artifacts)
    return {
        "test_cases": summary.test_cases,
        "uncovered_requirements": len(summary.uncovered_requirements),
        "uncovered_ids": summary.uncovered_requirements,
    }
