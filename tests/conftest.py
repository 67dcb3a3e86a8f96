"""Shared test fixtures for vsync."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from vsync.config.models import GeneratorConfig, VSyncConfig

if TYPE_CHECKING:
    from pathlib import Path


@dataclass
class FakeGateway:
    """In-memory VCS gateway.

    Records mutations instead of touching a repository. Set ``fail_*``
    attributes to an exception to make the matching call raise it.
    """

    tag: str = ""
    commits: list[str] = field(default_factory=list)
    changed: list[str] = field(default_factory=list)
    created_tags: list[str] = field(default_factory=list)
    commit_messages: list[str] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    fail_verify: Exception | None = None
    fail_new_tag: Exception | None = None

    def verify(self) -> None:
        self.calls.append("verify")
        if self.fail_verify is not None:
            raise self.fail_verify

    def latest_tag(self) -> str:
        self.calls.append("latest_tag")
        return self.tag

    def unreleased_changes(self) -> list[str]:
        self.calls.append("unreleased_changes")
        return list(self.commits)

    def uncommitted_changes(self) -> list[str]:
        self.calls.append("uncommitted_changes")
        return list(self.changed)

    def new_tag(self, name: str) -> None:
        self.calls.append("new_tag")
        if self.fail_new_tag is not None:
            raise self.fail_new_tag
        self.created_tags.append(name)

    def commit(self, message: str) -> None:
        self.calls.append("commit")
        self.commit_messages.append(message)
        self.changed = []

    @property
    def mutations(self) -> list[str]:
        return [call for call in self.calls if call in {"new_tag", "commit"}]


@pytest.fixture
def gateway() -> FakeGateway:
    """A fake gateway for a repository tagged v1.2.3 with unreleased work."""
    return FakeGateway(
        tag="v1.2.3",
        commits=["fix: handle empty tags", "feat: add dry run", "docs: readme"],
    )


@pytest.fixture
def changelog_config(tmp_path: Path) -> VSyncConfig:
    """Config writing the changelog into tmp_path, tags and changelog enabled."""
    return VSyncConfig(changelog_path=tmp_path / "CHANGELOG.md")


@pytest.fixture
def autocommit_config() -> VSyncConfig:
    """Config with every stage enabled and the default relative changelog path."""
    return VSyncConfig(generator=GeneratorConfig(autocommit=True))


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create an initialized git repository with one commit.

    Skips the test if git is not installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "commit.gpgsign", "false")
    _git(repo, "config", "tag.gpgsign", "false")

    (repo / "README.md").write_text("# Test\n")
    _git(repo, "add", "README.md")
    _git(repo, "commit", "-q", "-m", "chore: initial commit")
    return repo


@pytest.fixture
def git():
    """Helper running git commands in a repository."""
    return _git
