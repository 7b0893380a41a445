from __future__ import annotations

from pathlib import Path

import pytest

from docsync.reporting import JsonReporter
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project(tmp_path: Path) -> ProjectBuilder:
    """Provide a project builder with app/global.ts already in place."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def reporter() -> JsonReporter:
    """Silent reporter whose buckets tests can inspect."""
    return JsonReporter()
