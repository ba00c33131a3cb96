"""Branch management for branch-helper."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from branch_helper.core.tools.git import GitController, describe_error
from branch_helper.models.config import UNKNOWN_BRANCH

if TYPE_CHECKING:
    from branch_helper.core.tools.git import GitBackend
    from branch_helper.models.status import WorkingTreeStatus


class BranchManager:
    """Creates, switches and inspects branches of a working copy.

    Every call goes straight to git, nothing is cached between calls.
    """

    def __init__(self, git: GitBackend, unknown_branch: str = UNKNOWN_BRANCH) -> None:
        """Initialize BranchManager with a git backend."""
        self.git = git
        self.unknown_branch = unknown_branch

    @classmethod
    def for_path(cls, repo_path: str | Path = ".", unknown_branch: str = UNKNOWN_BRANCH) -> BranchManager:
        """Create a BranchManager backed by git in the given directory."""
        return cls(GitController(repo_path=Path(repo_path)), unknown_branch=unknown_branch)

    def create_or_checkout(self, branch_name: str) -> None:
        """Switch to a branch, creating it at HEAD if it does not exist yet.

        Raises:
            subprocess.CalledProcessError: If git rejects the operation (invalid name,
                conflicting local changes, not a repository). Logged, then re-raised.

        """
        try:
            if self.git.branch_exists(branch_name):
                logger.info(f"Branch {branch_name} already exists, checking it out...")
                self.git.checkout(branch_name)
                return

            logger.info(f"Creating new branch: {branch_name}")
            self.git.create_and_checkout(branch_name)
            logger.info(f"Created and checked out branch: {branch_name}")
        except (subprocess.CalledProcessError, OSError) as e:
            logger.error(f"Error creating branch {branch_name}: {describe_error(e)}")
            raise

    def status(self) -> WorkingTreeStatus:
        """Get the current working tree status."""
        return self.git.status()

    def is_clean(self) -> bool:
        """Check if the working directory has no staged, unstaged or untracked changes."""
        return self.git.status().is_clean

    def current_branch(self) -> str:
        """Get the checked-out branch name, or the unknown sentinel on a detached HEAD."""
        return self.git.status().current or self.unknown_branch


def create_branch(branch_name: str, repo_path: str | Path = ".") -> None:
    """Create `branch_name` (or check it out if it already exists) in `repo_path`."""
    BranchManager.for_path(repo_path).create_or_checkout(branch_name)


def is_working_directory_clean(repo_path: str | Path = ".") -> bool:
    """Check whether `repo_path` has no staged, unstaged or untracked changes."""
    return BranchManager.for_path(repo_path).is_clean()


def get_current_branch(repo_path: str | Path = ".") -> str:
    """Get the branch checked out in `repo_path`, or "unknown" when HEAD is detached."""
    return BranchManager.for_path(repo_path).current_branch()
