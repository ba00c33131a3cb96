"""Core modules for branch-helper."""

from branch_helper.core.branch import BranchManager
from branch_helper.core.publish import Publisher

__all__ = ["BranchManager", "Publisher"]
