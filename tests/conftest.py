"""Shared test fixtures for the get-application-id test suite."""

import sys
import pytest
from pathlib import Path

# Ensure getappid is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from getappid.models import ExtractionRequest
from getappid.options import OPTIONS

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host GETAPPLICATIONID_* variables out of the tests."""
    for item in OPTIONS:
        monkeypatch.delenv(item.env_name, raising=False)


@pytest.fixture
def fixtures_dir():
    """Path to test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def build_gradle_file(tmp_path):
    """Plain app build.gradle with a top-level applicationId."""
    target = tmp_path / "build.gradle"
    target.write_text((FIXTURES_DIR / "build.gradle").read_text())
    return target


@pytest.fixture
def flavors_gradle_file(tmp_path):
    """build.gradle with demo/full/staging product flavors."""
    target = tmp_path / "build.gradle"
    target.write_text((FIXTURES_DIR / "flavors.gradle").read_text())
    return target


@pytest.fixture
def android_project(tmp_path):
    """Project tree with a single app/build.gradle."""
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    (app_dir / "build.gradle").write_text((FIXTURES_DIR / "build.gradle").read_text())
    (tmp_path / "build.gradle").write_text("buildscript {\n    repositories { google() }\n}\n")
    (tmp_path / "settings.gradle").write_text("include ':app'\n")
    return tmp_path


@pytest.fixture
def flavored_project(tmp_path):
    """Project tree whose app/build.gradle declares product flavors."""
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    (app_dir / "build.gradle").write_text((FIXTURES_DIR / "flavors.gradle").read_text())
    return tmp_path


@pytest.fixture
def sample_request(android_project):
    """Search-mode request rooted at the sample project."""
    return ExtractionRequest(project_root=str(android_project))
