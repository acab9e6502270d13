"""The "Recent commits" section."""

from __future__ import annotations

from collections import defaultdict

from magi.git.repository import Repository
from magi.git.types import CommitInfo, CommitRef, CommitRefType
from magi.model import Line, SectionHeader, SectionKind, SectionType

MAX_COMMITS = 10


def _tag_map(repository: Repository) -> dict[str, str]:
    """Map of commit hash to the name of a tag on it."""
    out = repository.git(
        "for-each-ref",
        "--format=%(refname)%00%(objecttype)%00%(objectname)%00%(*objectname)",
        "refs/tags",
    )
    tags: dict[str, str] = {}
    for row in out.splitlines():
        refname, object_type, oid, peeled = row.split("\0")
        target = peeled if object_type == "tag" else oid
        tags[target] = refname.removeprefix("refs/tags/")
    return tags


def _branch_map(repository: Repository, namespace: str) -> dict[str, list[str]]:
    """Map of commit hash to the sorted names of branches under `namespace`."""
    out = repository.git(
        "for-each-ref",
        "--format=%(refname)%00%(objecttype)%00%(objectname)%00%(*objecttype)%00%(*objectname)",
        namespace,
    )
    branches: dict[str, list[str]] = defaultdict(list)
    for row in out.splitlines():
        refname, object_type, oid, peeled_type, peeled = row.split("\0")
        name = refname.removeprefix(namespace)
        if namespace == "refs/remotes/" and name.endswith("/HEAD"):
            continue
        if object_type == "commit":
            branches[oid].append(name)
        elif peeled_type == "commit":
            branches[peeled].append(name)
    for names in branches.values():
        names.sort()
    return branches


def _recent(repository: Repository) -> list[tuple[str, str]]:
    out = repository.git(
        "-c",
        "log.showSignature=false",
        "log",
        "--no-color",
        f"--max-count={MAX_COMMITS}",
        "--format=%H%x00%s",
        "HEAD",
        "--",
    )
    return [tuple(row.split("\0", 1)) for row in out.splitlines() if "\0" in row]


def get_lines(repository: Repository) -> list[Line]:
    """A header and up to MAX_COMMITS commits reachable from HEAD, newest first."""
    if repository.try_git("rev-parse", "--verify", "-q", "HEAD^{commit}") is None:
        return []

    symbolic = repository.try_git("symbolic-ref", "-q", "HEAD")
    is_detached = symbolic is None
    current_branch = None
    if not is_detached:
        current_branch = symbolic.strip().removeprefix("refs/heads/")

    tags = _tag_map(repository)
    local_branches = _branch_map(repository, "refs/heads/")
    remote_branches = _branch_map(repository, "refs/remotes/")

    commits = _recent(repository)
    if not commits:
        return []

    section = SectionType(SectionKind.RECENT_COMMITS)
    lines = [Line(SectionHeader("Recent commits", None), section)]

    for index, (oid, message) in enumerate(commits):
        is_head = index == 0
        refs: list[CommitRef] = []
        if is_head:
            if is_detached:
                refs.append(CommitRef("@", CommitRefType.HEAD))
            elif current_branch is not None:
                refs.append(CommitRef(current_branch, CommitRefType.LOCAL_BRANCH))
        refs.extend(
            CommitRef(name, CommitRefType.LOCAL_BRANCH)
            for name in local_branches.get(oid, [])
            if not (is_head and name == current_branch)
        )
        refs.extend(
            CommitRef(name, CommitRefType.REMOTE_BRANCH) for name in remote_branches.get(oid, [])
        )
        info = CommitInfo(hash=oid[:7], refs=refs, tag=tags.get(oid), message=message)
        lines.append(Line(info, section))

    return lines