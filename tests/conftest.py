"""Shared test fixtures for suitetrace tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from suitetrace.core import Workspace, write_artifact_set
from suitetrace.data import sample_artifacts
from suitetrace.models import ArtifactSet, Requirement, TestCase, Viewpoint


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample() -> ArtifactSet:
    """Sample login / password-reset artifact set."""
    return sample_artifacts()


@pytest.fixture
def workspace(sample: ArtifactSet) -> Workspace:
    """Workspace over the sample set with default config."""
    return Workspace(sample)


@pytest.fixture
def small_set() -> ArtifactSet:
    """One of each artifact kind, no links."""
    return ArtifactSet(
        requirements=[Requirement(id="R-1", description="x")],
        viewpoints=[Viewpoint(id="VP-1", area="Login")],
        test_cases=[TestCase(id="TC-1", title="A")],
    )


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def artifact_file(in_tmp: Path, sample: ArtifactSet) -> Path:
    """Sample set written to artifacts.json in the working directory."""
    return write_artifact_set(in_tmp / "artifacts.json", sample)
