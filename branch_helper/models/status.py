"""Working tree status model parsed from git porcelain output."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

_DETACHED_HEADER = "HEAD (no branch)"
_UNBORN_PREFIXES = ("No commits yet on ", "Initial commit on ")
_RENAME_STATES = {"R", "C"}
_AHEAD_RE = re.compile(r"ahead (\d+)")
_BEHIND_RE = re.compile(r"behind (\d+)")


class WorkingTreeStatus(BaseModel):
    """Snapshot of `git status` for a working copy."""

    current: str | None = Field(None, description="Checked-out branch, None when HEAD is detached")
    tracking: str | None = None
    ahead: int = 0
    behind: int = 0
    staged: list[str] = Field(default_factory=list)
    unstaged: list[str] = Field(default_factory=list)
    untracked: list[str] = Field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """Whether there are no staged, unstaged or untracked changes."""
        return not (self.staged or self.unstaged or self.untracked)

    @property
    def detached(self) -> bool:
        return self.current is None

    @classmethod
    def from_porcelain(cls, output: str) -> WorkingTreeStatus:
        """Parse the output of `git status --porcelain=v1 -z --branch`.

        Records are NUL-separated and paths are not quoted. A rename or copy
        entry is followed by an extra record holding its source path.
        """
        status = cls()
        records = iter(output.split("\0"))
        for record in records:
            if not record:
                continue
            if record.startswith("## "):
                _apply_branch_header(status, record[3:])
            elif record.startswith("?? "):
                status.untracked.append(record[3:])
            elif record.startswith("!! "):
                continue
            else:
                index_state, worktree_state, path = record[0], record[1], record[3:]
                if {index_state, worktree_state} & _RENAME_STATES:
                    next(records, None)
                if index_state != " ":
                    status.staged.append(path)
                if worktree_state != " ":
                    status.unstaged.append(path)
        return status


def _apply_branch_header(status: WorkingTreeStatus, header: str) -> None:
    if header == _DETACHED_HEADER:
        return
    for prefix in _UNBORN_PREFIXES:
        if header.startswith(prefix):
            header = header.removeprefix(prefix)
            break

    branch_part, _, counts = header.partition(" [")
    local, _, upstream = branch_part.partition("...")
    status.current = local.strip()
    status.tracking = upstream.strip() or None
    if ahead := _AHEAD_RE.search(counts):
        status.ahead = int(ahead.group(1))
    if behind := _BEHIND_RE.search(counts):
        status.behind = int(behind.group(1))
