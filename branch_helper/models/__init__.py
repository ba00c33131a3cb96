"""Models for branch-helper."""

from branch_helper.models.config import BranchHelperSettings
from branch_helper.models.status import WorkingTreeStatus

__all__ = [
    "BranchHelperSettings",
    "WorkingTreeStatus",
]
