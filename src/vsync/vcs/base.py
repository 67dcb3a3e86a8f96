"""Version control capability set used by the release pipeline."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class VCSGateway(Protocol):
    """Queries and mutations the release pipeline needs from a VCS.

    All calls are blocking. Implementations wrap failures of the underlying
    tool in :class:`~vsync.exceptions.ExternalToolError`.
    """

    def verify(self) -> None:
        """Check that the repository exists and the VCS tool is available."""
        ...

    def latest_tag(self) -> str:
        """Most recent tag reachable from HEAD, "" if there is none."""
        ...

    def unreleased_changes(self) -> list[str]:
        """Subjects of commits reachable from HEAD but not from the latest tag."""
        ...

    def uncommitted_changes(self) -> list[str]:
        """Paths with staged, unstaged or untracked modifications."""
        ...

    def new_tag(self, name: str) -> None:
        """Create a tag at HEAD."""
        ...

    def commit(self, message: str) -> None:
        """Stage all pending changes and commit them."""
        ...
