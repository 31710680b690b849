"""Pytest configuration and fixtures for gits tests."""

import os
import subprocess
from collections.abc import Generator
from pathlib import Path

import pytest

from gits.constants import (
    GIT_DIR_ENV,
    GIT_WORK_TREE_ENV,
    GITS_GIT_ENV,
    GITS_LOG_DIR_ENV,
    GITS_LOG_ENV,
)
from gits.repo import SecondaryRepo


def _run_git(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """Run git command safely without shell=True."""
    return subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )


@pytest.fixture(autouse=True)
def _clean_gits_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's GITS_* and git location variables out of tests."""
    for name in (GITS_GIT_ENV, GITS_LOG_ENV, GITS_LOG_DIR_ENV, GIT_DIR_ENV, GIT_WORK_TREE_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tmp_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary primary git repository and chdir into it.

    Yields:
        Path to the temporary repository
    """
    orig_dir = os.getcwd()
    os.chdir(tmp_path)

    _run_git("init", "-q", "-b", "main", cwd=tmp_path)
    _run_git("config", "user.email", "test@test.com", cwd=tmp_path)
    _run_git("config", "user.name", "Test", cwd=tmp_path)
    _run_git("config", "commit.gpgsign", "false", cwd=tmp_path)

    (tmp_path / "README.md").write_text("# Test Repo")
    _run_git("add", "-A", cwd=tmp_path)
    _run_git("commit", "-q", "-m", "Initial commit", cwd=tmp_path)

    yield tmp_path

    os.chdir(orig_dir)


@pytest.fixture
def gits_repo(tmp_repo: Path) -> Path:
    """A primary repository with an initialized .gits beside it.

    The secondary repository gets its own commit identity so tests can
    commit without relying on global git config.

    Returns:
        Path to the shared work tree
    """
    repo = SecondaryRepo(tmp_repo)
    repo.init()
    for key, value in [
        ("user.email", "test@test.com"),
        ("user.name", "Test"),
        ("commit.gpgsign", "false"),
    ]:
        _run_git("--git-dir", str(tmp_repo / ".gits"), "config", key, value)
    return tmp_repo
