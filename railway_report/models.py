"""
Data models for the railway report.

This module contains the shared data structures used across all modules:
the input commits handed over by a fetcher and the display records that
end up embedded in the generated document.
"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Signature:
    """Name, email and timestamp of a commit author or committer."""
    name: str
    email: str
    when: datetime.datetime


@dataclass(frozen=True)
class CommitInfo:
    """Represents a single commit with its metadata."""
    sha: str
    message: Optional[str]
    author: Optional[Signature]
    committer: Optional[Signature]
    parents: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        return (self.message or "").split("\n")[0]

    def is_complete(self) -> bool:
        """Whether the commit carries everything needed to build a display record."""
        return bool(self.sha) and self.message is not None and self.author is not None and self.committer is not None


@dataclass(frozen=True)
class RepoMeta:
    """Repository metadata from GitHub."""
    full_name: str
    description: Optional[str]
    url: str
    default_branch: str


@dataclass(frozen=True)
class CommitMessage:
    """Structured form of a commit message."""
    type: str
    scope: str
    title: str
    body: str
    is_breaking: bool

    def to_dict(self) -> Dict[str, Any]:
        # type and scope are left out of the payload when empty
        data: Dict[str, Any] = {}
        if self.type:
            data["type"] = self.type
        if self.scope:
            data["scope"] = self.scope
        data["title"] = self.title
        data["body"] = self.body
        data["is_breaking"] = self.is_breaking
        return data


@dataclass(frozen=True)
class CommitData:
    """Display record of one commit, as consumed by the popup script."""
    hash: str
    author: str
    committer: str
    message: CommitMessage
    authored_date: str
    committed_date: str
    authored_date_delta: str
    committed_date_delta: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash,
            "author": self.author,
            "committer": self.committer,
            "message": self.message.to_dict(),
            "authored_date": self.authored_date,
            "committed_date": self.committed_date,
            "authored_date_delta": self.authored_date_delta,
            "committed_date_delta": self.committed_date_delta,
        }
