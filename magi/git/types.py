"""Value types describing references, tags and commits of a repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class ReferenceType(Enum):
    """Kind of reference that HEAD or an upstream points through."""

    LOCAL_BRANCH = auto()
    REMOTE_BRANCH = auto()
    DETACHED_HEAD = auto()


class CommitRefType(Enum):
    """Kind of reference shown next to a commit."""

    HEAD = auto()
    LOCAL_BRANCH = auto()
    REMOTE_BRANCH = auto()


@dataclass
class GitRef:
    """A reference with the short hash and message of the commit it names."""

    name: str
    commit_hash: str
    commit_message: str
    reference_type: ReferenceType

    @classmethod
    def new_remote_branch(cls, name: str, commit_hash: str, commit_message: str) -> GitRef:
        """A reference to a remote branch."""
        return cls(name, commit_hash, commit_message, ReferenceType.REMOTE_BRANCH)

    @classmethod
    def new_detached_head(cls, commit_hash: str, commit_message: str) -> GitRef:
        """A detached HEAD."""
        return cls("HEAD (detached)", commit_hash, commit_message, ReferenceType.DETACHED_HEAD)


@dataclass
class TagInfo:
    """A tag and how many commits HEAD is ahead of it."""

    name: str
    commits_ahead: int


@dataclass(frozen=True)
class CommitRef:
    """A branch (or the detached HEAD marker) pointing at a commit."""

    name: str
    ref_type: CommitRefType


@dataclass
class CommitInfo:
    """One entry of the recent commits list."""

    hash: str
    refs: list[CommitRef] = field(default_factory=list)
    tag: str | None = None
    message: str = ""