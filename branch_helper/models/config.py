"""Settings model for branch-helper."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_REMOTE = "origin"
UNKNOWN_BRANCH = "unknown"


class BranchHelperSettings(BaseModel):
    """Settings shared by the CLI commands."""

    repo_path: Path = Field(default=Path(), description="Path to the git working copy")
    remote: str = DEFAULT_REMOTE
    unknown_branch: str = Field(UNKNOWN_BRANCH, description="Returned as the branch name when HEAD is detached")
    commit_author: str | None = Field(None, description="Commit author override, e.g. 'Bot <bot@example.com>'")

    @field_validator("repo_path")
    @classmethod
    def _resolve_repo_path(cls, value: Path) -> Path:
        return value.expanduser().resolve()
