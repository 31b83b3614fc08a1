"""Bundled sample data."""

from .sample import sample_artifacts

__all__ = ["sample_artifacts"]
