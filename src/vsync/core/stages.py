"""Release pipeline stages."""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    """A discrete unit of the release pipeline."""

    UPDATE_CHANGELOG = "changelog"
    AUTO_COMMIT = "autocommit"
    NEW_TAG = "tag"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def ordered(cls) -> list[Stage]:
        """All stages in execution order.

        The changelog entry has to be written and committed before the tag
        is cut so the tagged commit contains the matching changelog text.
        """
        return [cls.UPDATE_CHANGELOG, cls.AUTO_COMMIT, cls.NEW_TAG]
