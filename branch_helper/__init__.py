"""Git branch helper for the content pipeline."""

from branch_helper.core.branch import (
    BranchManager,
    create_branch,
    get_current_branch,
    is_working_directory_clean,
)
from branch_helper.core.publish import Publisher
from branch_helper.core.tools.git import GitBackend, GitController

__all__ = [
    "BranchManager",
    "GitBackend",
    "GitController",
    "Publisher",
    "create_branch",
    "get_current_branch",
    "is_working_directory_clean",
]
