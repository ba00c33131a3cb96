"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import TYPE_CHECKING, Protocol
from unittest.mock import MagicMock

import pytest
from loguru import logger

from branch_helper.core.tools.git import GitController
from tests.fake_git import FakeGit
from tests.repo_controller import RepositoryController

if TYPE_CHECKING:
    from collections.abc import Generator


def _git(*args: str, cwd: Path) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)  # noqa: S603, S607


@pytest.fixture
def mock_repo() -> Generator[RepositoryController]:
    """Create a temporary git repository on branch `main` with one commit."""
    tmp_dir = TemporaryDirectory()
    tmp_path = Path(tmp_dir.name)

    _git("init", cwd=tmp_path)
    _git("symbolic-ref", "HEAD", "refs/heads/main", cwd=tmp_path)
    _git("config", "user.email", "test@example.com", cwd=tmp_path)
    _git("config", "user.name", "Test User", cwd=tmp_path)
    _git("config", "commit.gpgsign", "false", cwd=tmp_path)
    repo = RepositoryController(tmp_path)
    repo.add_and_commit(relative_path="README.md", content="# Test", message="Initial commit")
    yield repo
    tmp_dir.cleanup()


@pytest.fixture
def bare_remote(mock_repo: RepositoryController) -> Generator[Path]:
    """Create a bare repository and register it as `origin` of mock_repo."""
    tmp_dir = TemporaryDirectory()
    bare_path = Path(tmp_dir.name) / "origin.git"
    _git("init", "--bare", str(bare_path), cwd=Path(tmp_dir.name))
    mock_repo.add_remote("origin", bare_path)
    yield bare_path
    tmp_dir.cleanup()


@pytest.fixture
def empty_clone() -> Generator[RepositoryController]:
    """Clone an empty bare repository, leaving the clone on an unborn branch that tracks origin."""
    tmp_dir = TemporaryDirectory()
    tmp_path = Path(tmp_dir.name)
    _git("init", "--bare", "origin.git", cwd=tmp_path)
    _git("clone", "origin.git", "clone", cwd=tmp_path)
    yield RepositoryController(tmp_path / "clone")
    tmp_dir.cleanup()


@pytest.fixture
def not_a_repo() -> Generator[Path]:
    """Create an empty directory that is not inside any git repository."""
    tmp_dir = TemporaryDirectory()
    yield Path(tmp_dir.name)
    tmp_dir.cleanup()


@pytest.fixture
def git_controller(mock_repo: RepositoryController) -> GitController:
    return GitController(repo_path=mock_repo.path)


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit(branches=["main", "feature-a"])


@pytest.fixture
def log_messages() -> Generator[list[str]]:
    """Capture loguru output as 'LEVEL|message' strings."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.rstrip("\n")), level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _restore_default_log_sink() -> Generator[None]:
    """Undo sink changes made by the CLI logging setup."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class SubprocessResultFactory(Protocol):
    """Callable that builds a MagicMock simulating a subprocess result."""

    def __call__(self, output: str = "", stderr: str = "") -> MagicMock: ...


def _make_result(*, returncode: int, output: str, stderr: str) -> MagicMock:
    r = MagicMock()
    r.returncode = returncode
    r.stdout = output
    r.stderr = stderr
    return r


@pytest.fixture
def ok_result() -> SubprocessResultFactory:
    """Build a MagicMock simulating a successful subprocess result."""

    def _factory(output: str = "", stderr: str = "") -> MagicMock:
        return _make_result(returncode=0, output=output, stderr=stderr)

    return _factory


@pytest.fixture
def fail_result() -> SubprocessResultFactory:
    """Build a MagicMock simulating a failed subprocess result."""

    def _factory(output: str = "", stderr: str = "") -> MagicMock:
        return _make_result(returncode=128, output=output, stderr=stderr)

    return _factory
