"""Commit and push generated content."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from branch_helper.core.tools.git import GitController, describe_error
from branch_helper.models.config import DEFAULT_REMOTE

if TYPE_CHECKING:
    from branch_helper.core.tools.git import GitBackend


class Publisher:
    """Stages, commits and pushes files on behalf of the content pipeline.

    Steps that already succeeded are not rolled back when a later one fails.
    """

    def __init__(self, git: GitBackend, remote: str = DEFAULT_REMOTE, author: str | None = None) -> None:
        """Initialize Publisher with a git backend and the remote to push to."""
        self.git = git
        self.remote = remote
        self.author = author

    @classmethod
    def for_path(
        cls,
        repo_path: str | Path = ".",
        remote: str = DEFAULT_REMOTE,
        author: str | None = None,
    ) -> Publisher:
        """Create a Publisher backed by git in the given directory."""
        return cls(GitController(repo_path=Path(repo_path)), remote=remote, author=author)

    def commit(self, file_path: str, message: str) -> None:
        """Stage a single file and commit it."""
        try:
            self.git.add(file_path)
            self.git.commit(message, author=self.author)
        except (subprocess.CalledProcessError, OSError) as e:
            logger.error(f"Error committing: {describe_error(e)}")
            raise
        logger.info(f"Committed: {message}")

    def push(self, branch_name: str) -> None:
        """Push a branch and set it as upstream."""
        try:
            self.git.push(self.remote, branch_name, set_upstream=True)
        except (subprocess.CalledProcessError, OSError) as e:
            logger.error(f"Error pushing: {describe_error(e)}")
            raise
        logger.info(f"Pushed to {self.remote}/{branch_name}")

    def commit_and_push(self, file_path: str, message: str, branch_name: str) -> None:
        """Stage a file, commit it and push the branch with upstream tracking."""
        try:
            logger.info(f"Adding file: {file_path}")
            self.git.add(file_path)

            logger.info(f"Committing: {message}")
            self.git.commit(message, author=self.author)

            logger.info(f"Pushing to {self.remote}/{branch_name}...")
            self.git.push(self.remote, branch_name, set_upstream=True)
        except (subprocess.CalledProcessError, OSError) as e:
            logger.error(f"Error committing and pushing: {describe_error(e)}")
            raise
        logger.info(f"Successfully committed and pushed to {branch_name}")
