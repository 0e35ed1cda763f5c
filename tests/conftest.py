"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import shutil
from dataclasses import replace
from pathlib import Path

import pytest

from skillsync.config import SyncConfig, load_config


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_repo_root(fixtures_root: Path) -> Path:
    """Return the primary fixture repository path."""
    return fixtures_root / "repos" / "basic"


@pytest.fixture()
def basic_repo(basic_repo_root: Path, tmp_path: Path) -> Path:
    """Return a writable copy of the primary fixture repository."""
    target = tmp_path / "repo"
    shutil.copytree(basic_repo_root, target)
    return target


@pytest.fixture()
def basic_config(basic_repo: Path) -> SyncConfig:
    """Return config for the writable fixture copy with git lookups disabled."""
    return replace(load_config(basic_repo), use_git=False)
