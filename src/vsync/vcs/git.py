"""Git implementation of the VCS gateway.

Every operation shells out to the ``git`` binary and parses its textual
output. Commands run in the working tree that owns the configured
repository path (``.git`` by default).
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from vsync.exceptions import GitError, RepositoryNotFoundError, ToolNotFoundError

logger = logging.getLogger(__name__)

GIT_EXECUTABLE = "git"


class GitRepository:
    """Git repository bound to a ``.git`` directory or a working tree path."""

    def __init__(self, path: Path | str = ".git") -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"

    @property
    def workdir(self) -> Path:
        """Working tree directory the git commands run in."""
        if self.path.name == ".git":
            return self.path.parent
        return self.path

    def _run(self, args: list[str]) -> str:
        """Run a git command and return its stdout.

        Args:
            args: Arguments passed to git

        Returns:
            Command stdout with trailing whitespace removed

        Raises:
            ToolNotFoundError: If git is not installed
            GitError: If the command exits with a non-zero status
        """
        command = [GIT_EXECUTABLE, *args]
        logger.debug("Running %s in %s", " ".join(command), self.workdir)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.workdir,
            )
        except FileNotFoundError as e:
            raise ToolNotFoundError("git is not installed or not in PATH", cause=e) from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {' '.join(args)} failed with exit code {e.returncode}",
                command=command,
                returncode=e.returncode,
                stderr=e.stderr or e.stdout,
                cause=e,
            ) from e
        return result.stdout.rstrip()

    def verify(self) -> None:
        """Check that the repository path exists and git is installed.

        Raises:
            RepositoryNotFoundError: If the repository path does not exist
            ToolNotFoundError: If git cannot be found on PATH
        """
        if not self.path.exists():
            raise RepositoryNotFoundError(f"git repository not found: {self.path}")

        if shutil.which(GIT_EXECUTABLE) is None:
            raise ToolNotFoundError("git-cli not found")

        logger.debug("Using %s", self.version())

    def version(self) -> str:
        """Return the ``git --version`` output."""
        return self._run(["--version"])

    def latest_tag(self) -> str:
        """Most recent tag reachable from HEAD.

        Returns:
            Tag name, or "" when the repository has no tags (or no commits)
        """
        try:
            return self._run(["describe", "--tags", "--abbrev=0"]).strip()
        except GitError:
            return ""

    def _has_commits(self) -> bool:
        try:
            self._run(["rev-parse", "--verify", "--quiet", "HEAD"])
        except GitError:
            return False
        return True

    def unreleased_changes(self) -> list[str]:
        """Subjects of commits since the latest tag, newest first.

        Returns:
            Commit subjects; all history when there is no tag
        """
        if not self._has_commits():
            return []

        latest = self.latest_tag()
        revision = f"{latest}..HEAD" if latest else "HEAD"
        output = self._run(["log", "--pretty=format:%s", revision])
        return [line for line in output.splitlines() if line]

    def uncommitted_changes(self) -> list[str]:
        """Paths with pending modifications.

        Staged, unstaged and untracked files are all reported. For renames
        the destination path is reported.

        Returns:
            Paths relative to the working tree, in git status order
        """
        # -z prints paths verbatim, without C quoting
        output = self._run(["status", "--porcelain=v1", "-z", "--untracked-files=all"])
        entries = iter(output.split("\0"))
        changes = []
        for entry in entries:
            # "XY path"; renames and copies are followed by the source path
            if len(entry) < 4:
                continue
            status, path = entry[:2], entry[3:]
            if "R" in status or "C" in status:
                next(entries, None)
            changes.append(path)
        return changes

    def new_tag(self, name: str) -> None:
        """Create a lightweight tag at HEAD.

        Raises:
            GitError: If the tag already exists or HEAD cannot be tagged
        """
        self._run(["tag", name])
        logger.debug("Created tag %s", name)

    def commit(self, message: str) -> None:
        """Stage everything and commit.

        Raises:
            GitError: If staging or committing fails
        """
        self._run(["add", "-A"])
        self._run(["commit", "-m", message])
        logger.debug("Committed: %s", message)
