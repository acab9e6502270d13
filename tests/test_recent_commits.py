import subprocess

import pytest

from magi.git import recent_commits
from magi.git.recent_commits import MAX_COMMITS
from magi.git.repository import Repository
from magi.git.types import CommitInfo, CommitRef, CommitRefType
from magi.model import SectionHeader, SectionKind, SectionType


def _git(path, *args):
    return subprocess.run(
        ["git", "-C", str(path), *args], check=True, capture_output=True, text=True
    ).stdout


def _init(path):
    _git(path, "init", "-q")
    _git(path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(path, "config", "user.name", "Test User")
    _git(path, "config", "user.email", "test@example.com")
    _git(path, "config", "commit.gpgsign", "false")
    _git(path, "config", "tag.gpgsign", "false")


@pytest.fixture
def repo_dir(tmp_path):
    _init(tmp_path)
    (tmp_path / "test.txt").write_text("test content")
    _git(tmp_path, "add", "test.txt")
    _git(tmp_path, "commit", "-q", "-m", "Initial commit")
    return tmp_path


def _create_commit(path, message):
    (path / "dummy.txt").write_text(message)
    _git(path, "add", "dummy.txt")
    _git(path, "commit", "-q", "-m", message)


def test_get_lines_with_initial_commit(repo_dir):
    lines = recent_commits.get_lines(Repository(repo_dir))
    assert len(lines) == 2
    assert lines[0].content == SectionHeader("Recent commits", None)
    info = lines[1].content
    assert isinstance(info, CommitInfo)
    assert info.message == "Initial commit"
    assert len(info.hash) == 7


def test_get_lines_with_multiple_commits(repo_dir):
    _create_commit(repo_dir, "Second commit")
    lines = recent_commits.get_lines(Repository(repo_dir))
    assert len(lines) == 3
    assert lines[1].content.message == "Second commit"
    assert lines[2].content.message == "Initial commit"


def test_get_lines_max_commits(repo_dir):
    for i in range(12):
        _create_commit(repo_dir, f"Commit {i}")
    lines = recent_commits.get_lines(Repository(repo_dir))
    assert len(lines) == MAX_COMMITS + 1


def test_commit_has_branch_info(repo_dir):
    lines = recent_commits.get_lines(Repository(repo_dir))
    refs = lines[1].content.refs
    assert refs
    assert refs[0] == CommitRef("main", CommitRefType.LOCAL_BRANCH)


def test_detached_head_shows_at_symbol(repo_dir):
    _git(repo_dir, "checkout", "-q", "--detach")
    lines = recent_commits.get_lines(Repository(repo_dir))
    refs = lines[1].content.refs
    assert refs
    assert refs[0] == CommitRef("@", CommitRefType.HEAD)


def test_hash_is_prefix_of_full_hash(repo_dir):
    full = _git(repo_dir, "rev-parse", "HEAD").strip()
    lines = recent_commits.get_lines(Repository(repo_dir))
    assert full.startswith(lines[1].content.hash)


def test_all_lines_in_recent_commits_section(repo_dir):
    _create_commit(repo_dir, "Second commit")
    lines = recent_commits.get_lines(Repository(repo_dir))
    assert all(line.section == SectionType(SectionKind.RECENT_COMMITS) for line in lines)


def test_repository_without_commits_gives_no_lines(tmp_path):
    _init(tmp_path)
    assert recent_commits.get_lines(Repository(tmp_path)) == []


def test_refs_order_local_then_remote(repo_dir):
    _git(repo_dir, "branch", "zeta")
    _git(repo_dir, "branch", "alpha")
    _git(repo_dir, "update-ref", "refs/remotes/origin/main", "HEAD")
    _git(repo_dir, "symbolic-ref", "refs/remotes/origin/HEAD", "refs/remotes/origin/main")
    lines = recent_commits.get_lines(Repository(repo_dir))
    assert lines[1].content.refs == [
        CommitRef("main", CommitRefType.LOCAL_BRANCH),
        CommitRef("alpha", CommitRefType.LOCAL_BRANCH),
        CommitRef("zeta", CommitRefType.LOCAL_BRANCH),
        CommitRef("origin/main", CommitRefType.REMOTE_BRANCH),
    ]


def test_branch_on_older_commit(repo_dir):
    _git(repo_dir, "branch", "old")
    _create_commit(repo_dir, "Second commit")
    lines = recent_commits.get_lines(Repository(repo_dir))
    assert lines[1].content.refs == [CommitRef("main", CommitRefType.LOCAL_BRANCH)]
    assert lines[2].content.refs == [CommitRef("old", CommitRefType.LOCAL_BRANCH)]


def test_tags_attached_to_commits(repo_dir):
    _git(repo_dir, "tag", "v1")
    _create_commit(repo_dir, "Second commit")
    _git(repo_dir, "tag", "-a", "v2", "-m", "Second release")
    lines = recent_commits.get_lines(Repository(repo_dir))
    assert lines[1].content.tag == "v2"
    assert lines[2].content.tag == "v1"


def test_untagged_commit_has_no_tag(repo_dir):
    lines = recent_commits.get_lines(Repository(repo_dir))
    assert lines[1].content.tag is None