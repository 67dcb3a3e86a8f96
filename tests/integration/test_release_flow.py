"""End-to-end release runs against a real git repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from vsync.config.models import GeneratorConfig, VSyncConfig
from vsync.core.pipeline import ReleaseOrchestrator
from vsync.core.stages import Stage
from vsync.exceptions import GitError, UncommittedChangesError
from vsync.vcs.git import GitRepository

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.integration


def _commit(git, repo: Path, name: str, subject: str) -> None:
    (repo / name).write_text(subject + "\n")
    git(repo, "add", name)
    git(repo, "commit", "-q", "-m", subject)


class TestGitGateway:
    """GitRepository against a real repository."""

    def test_fresh_repository(self, git_repo: Path):
        """No tag yet: everything is unreleased."""
        repo = GitRepository(git_repo / ".git")

        repo.verify()
        assert repo.latest_tag() == ""
        assert repo.unreleased_changes() == ["chore: initial commit"]
        assert repo.uncommitted_changes() == []

    def test_changes_since_tag(self, git, git_repo: Path):
        """Only commits after the latest tag are unreleased, newest first."""
        repo = GitRepository(git_repo / ".git")
        repo.new_tag("v0.1.0")
        _commit(git, git_repo, "a.txt", "fix: a")
        _commit(git, git_repo, "b.txt", "feat: b")

        assert repo.latest_tag() == "v0.1.0"
        assert repo.unreleased_changes() == ["feat: b", "fix: a"]

    def test_uncommitted_and_commit(self, git_repo: Path):
        """Untracked and modified files are reported, commit clears them."""
        repo = GitRepository(git_repo / ".git")
        (git_repo / "README.md").write_text("# Changed\n")
        (git_repo / "docs").mkdir()
        (git_repo / "docs" / "new.md").write_text("new\n")

        assert sorted(repo.uncommitted_changes()) == ["README.md", "docs/new.md"]

        repo.commit("docs: update")

        assert repo.uncommitted_changes() == []
        assert repo.unreleased_changes()[0] == "docs: update"

    def test_non_ascii_and_renamed_paths(self, git, git_repo: Path):
        """Paths are reported verbatim and renames by their new name."""
        repo = GitRepository(git_repo / ".git")
        (git_repo / "café.md").write_text("notes\n")
        git(git_repo, "mv", "README.md", "INTRO.md")

        assert sorted(repo.uncommitted_changes()) == ["INTRO.md", "café.md"]

    def test_duplicate_tag(self, git_repo: Path):
        """Creating an existing tag fails with git's diagnostic."""
        repo = GitRepository(git_repo / ".git")
        repo.new_tag("v1.0.0")

        with pytest.raises(GitError) as exc_info:
            repo.new_tag("v1.0.0")

        assert "already exists" in (exc_info.value.stderr or "")


class TestReleaseFlow:
    """Full pipeline runs."""

    def test_changelog_commit_and_tag(
        self, git, git_repo: Path, monkeypatch: pytest.MonkeyPatch
    ):
        """A full run writes, commits and tags one release."""
        monkeypatch.chdir(git_repo)
        repo = GitRepository(git_repo / ".git")
        repo.new_tag("v1.0.0")
        _commit(git, git_repo, "a.txt", "fix: a")
        _commit(git, git_repo, "b.txt", "feat: b")
        config = VSyncConfig(generator=GeneratorConfig(autocommit=True))

        report = ReleaseOrchestrator(config, repo).run()

        assert report.ok, [str(r.error) for r in report.failed]
        assert (git_repo / "CHANGELOG.md").read_text() == "## v1.1.0\n\n- feat: b\n- fix: a\n"
        assert repo.latest_tag() == "v1.1.0"
        assert repo.uncommitted_changes() == []
        log = git(git_repo, "log", "-1", "--pretty=format:%s", "v1.1.0").strip()
        assert log == "chore[VSync]: changelog updated"

    def test_changelog_without_autocommit_blocks_tag(
        self, git, git_repo: Path, monkeypatch: pytest.MonkeyPatch
    ):
        """Without autocommit the changelog edit leaves the tree dirty."""
        monkeypatch.chdir(git_repo)
        repo = GitRepository(git_repo / ".git")
        _commit(git, git_repo, "a.txt", "feat: a")

        report = ReleaseOrchestrator(VSyncConfig(), repo).run()

        assert report.get(Stage.UPDATE_CHANGELOG).ok
        assert isinstance(report.get(Stage.NEW_TAG).error, UncommittedChangesError)
        assert repo.latest_tag() == ""

    def test_tags_only(self, git, git_repo: Path):
        """Tag-only runs need no changelog."""
        repo = GitRepository(git_repo / ".git")
        _commit(git, git_repo, "a.txt", "break: new api")
        config = VSyncConfig(generator=GeneratorConfig(changelog=False))

        report = ReleaseOrchestrator(config, repo).run()

        assert report.ok
        assert repo.latest_tag() == "v1.0.0"
