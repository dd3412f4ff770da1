"""
Pytest fixtures for the geoff tests.

Every test that touches the filesystem runs inside its own tmp_path and
works with relative paths, like the command line does.
"""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import yaml

from geoffrey.domain.constants import DATA_SOURCES_DIR, MARKER_FILENAME

# =============================================================================
# Directory Fixtures
# =============================================================================

@pytest.fixture
def in_tmp_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Current directory → empty tmp_path."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def unmanaged_project(in_tmp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    test_project/ with data_sources/ but no .geoff marker.

    Current directory → test_project/
    """
    project = in_tmp_dir / "test_project"
    (project / DATA_SOURCES_DIR).mkdir(parents=True)
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def managed_project(unmanaged_project: Path) -> Path:
    """
    test_project/ with data_sources/ and the .geoff marker.

    Current directory → test_project/
    """
    (unmanaged_project / MARKER_FILENAME).touch()
    return unmanaged_project


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Factory: dict → geoff.yaml path."""

    def _write(data: object, filename: str = "geoff.yaml") -> Path:
        config_path = tmp_path / filename
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return config_path

    return _write


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore a GEOFF_CONFIG set in the developer's shell."""
    monkeypatch.delenv("GEOFF_CONFIG", raising=False)
