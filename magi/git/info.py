"""The head, push and tag lines shown at the top of the status buffer."""

from __future__ import annotations

from magi.git.repository import Repository
from magi.git.types import GitRef, ReferenceType, TagInfo
from magi.model import HeadRef, Line, PushRef, SectionKind, SectionType

_SHORTHAND_PREFIXES = ("refs/heads/", "refs/tags/", "refs/remotes/")


def _shorthand(refname: str) -> str:
    for prefix in _SHORTHAND_PREFIXES:
        if refname.startswith(prefix):
            return refname[len(prefix):]
    return refname.removeprefix("refs/")


def _head_commit(repo: Repository) -> str:
    """Full hash of the commit HEAD points at; raises GitError if there is none."""
    return repo.git("rev-parse", "--verify", "HEAD^{commit}").strip()


def _head_branch(repo: Repository) -> str | None:
    """Full name of the branch HEAD points at, or None when HEAD is detached."""
    out = repo.try_git("symbolic-ref", "-q", "HEAD")
    if out is None:
        return None
    name = out.strip()
    return name if name.startswith("refs/heads/") else None


def _commit_message(repo: Repository, commit: str) -> str:
    """The raw message of a commit."""
    raw = repo.git("cat-file", "commit", commit)
    _, _, body = raw.partition("\n\n")
    return body


def get_head_ref(repo: Repository) -> GitRef:
    """Describe HEAD: the branch it is on, or a detached HEAD."""
    commit = _head_commit(repo)
    short_hash = commit[:7]
    message = _commit_message(repo, commit)
    branch = _head_branch(repo)
    if branch is None:
        return GitRef.new_detached_head(short_hash, message)
    name = _shorthand(branch)
    reference_type = (
        ReferenceType.REMOTE_BRANCH if name.startswith("origin/") else ReferenceType.LOCAL_BRANCH
    )
    return GitRef(name, short_hash, message, reference_type)


def get_latest_tag(repo: Repository) -> TagInfo | None:
    """The first annotated tag that points at HEAD, if any."""
    head = _head_commit(repo)
    out = repo.git("for-each-ref", "--format=%(objecttype)%00%(tag)%00%(refname)", "refs/tags")
    for row in out.splitlines():
        object_type, tag_name, refname = row.split("\0")
        if object_type != "tag":
            continue
        peeled = repo.try_git("rev-parse", "--verify", "-q", f"{refname}^{{}}")
        if peeled is None or peeled.strip() != head:
            continue
        ahead = repo.git("rev-list", "--count", f"{peeled.strip()}..{head}")
        return TagInfo(tag_name, int(ahead.strip()))
    return None


def get_push_ref(repo: Repository) -> GitRef | None:
    """The upstream of the current branch, if it is configured and exists."""
    repo.git("rev-parse", "--verify", "-q", "HEAD")
    branch = _head_branch(repo)
    if branch is None:
        return None
    upstream = (repo.try_git("for-each-ref", "--format=%(upstream)", branch) or "").strip()
    if not upstream:
        return None
    if repo.try_git("show-ref", "--verify", "-q", upstream) is None:
        return None
    commit = repo.git("rev-parse", "--verify", f"{upstream}^{{commit}}").strip()
    return GitRef.new_remote_branch(
        _shorthand(upstream), commit[:7], _commit_message(repo, commit)
    )


def get_lines(repo: Repository) -> list[Line]:
    """Lines for HEAD, its push target and the tag on HEAD."""
    info = SectionType(SectionKind.INFO)
    lines = [Line(HeadRef(get_head_ref(repo)), info)]
    push_ref = get_push_ref(repo)
    if push_ref is not None:
        lines.append(Line(PushRef(push_ref), info))
    tag = get_latest_tag(repo)
    if tag is not None:
        lines.append(Line(TagInfo(tag.name, tag.commits_ahead), info))
    return lines