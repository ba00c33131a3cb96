"""Git operations for branch-helper."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING, Protocol

from loguru import logger

from branch_helper.core.tools.subprocess import run_command
from branch_helper.models.status import WorkingTreeStatus

if TYPE_CHECKING:
    from pathlib import Path


def describe_error(error: subprocess.CalledProcessError | OSError) -> str:
    """Get a one-line description of a failed git call, preferring git's own stderr."""
    if isinstance(error, subprocess.CalledProcessError):
        return (error.stderr or str(error)).strip()
    return str(error)


class GitBackend(Protocol):
    """The subset of git that the branch manager and publisher rely on."""

    def list_local_branches(self) -> list[str]: ...

    def branch_exists(self, branch_name: str) -> bool: ...

    def checkout(self, branch_name: str) -> None: ...

    def create_and_checkout(self, branch_name: str) -> None: ...

    def status(self) -> WorkingTreeStatus: ...

    def add(self, *paths: str) -> None: ...

    def commit(self, message: str, *, author: str | None = None) -> None: ...

    def push(self, remote: str, branch_name: str, *, set_upstream: bool = True) -> None: ...


class GitController:
    """Runs git commands against a local working copy."""

    def __init__(self, repo_path: Path) -> None:
        """Initialize GitController with repository path."""
        self.repo_path = repo_path

    def execute(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        """Run a git command in the repository directory."""
        return run_command(["git", *args], cwd=self.repo_path, check=check)

    def list_local_branches(self) -> list[str]:
        """Get the names of all local branches."""
        result = self.execute("branch", "--list", "--format=%(refname:lstrip=2)")
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def branch_exists(self, branch_name: str) -> bool:
        """Check whether a local branch with exactly this name exists."""
        return branch_name in self.list_local_branches()

    def checkout(self, branch_name: str) -> None:
        """Switch the working copy to an existing branch."""
        self.execute("checkout", branch_name)

    def create_and_checkout(self, branch_name: str) -> None:
        """Create a branch at HEAD and switch to it."""
        self.execute("checkout", "-b", branch_name)

    def status(self) -> WorkingTreeStatus:
        """Get the parsed working tree status."""
        result = self.execute("status", "--porcelain=v1", "-z", "--branch", "--untracked-files=all")
        status = WorkingTreeStatus.from_porcelain(result.stdout)
        logger.debug(f"Status of {self.repo_path}: {status!r}")
        return status

    def add(self, *paths: str) -> None:
        """Stage files for commit."""
        if paths:
            self.execute("add", "--", *paths)
        else:
            self.execute("add", "-A")

    def commit(self, message: str, *, author: str | None = None) -> None:
        """Commit the staged changes.

        Args:
            message: Commit message
            author: Author string, e.g. "Name <email>". Uses the configured identity when None.

        """
        commit_args = ["commit", "-m", message]
        if author:
            commit_args.extend(["--author", author])
        self.execute(*commit_args)

    def push(self, remote: str, branch_name: str, *, set_upstream: bool = True) -> None:
        """Push a branch to a remote."""
        push_args = ["push", remote, branch_name]
        if set_upstream:
            push_args.append("--set-upstream")
        self.execute(*push_args)

