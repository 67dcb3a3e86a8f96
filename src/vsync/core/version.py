"""Semantic version arithmetic.

Versions are plain ``MAJOR.MINOR.PATCH`` triples. A bump increments only
the component addressed by the bump level; lower-order components are left
untouched unless ``reset_lower`` is requested, which keeps already published
tag series stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from vsync.exceptions import InvalidSemVerError, NothingToBumpError

BASELINE_VERSION = "0.0.0"


class BumpType(IntEnum):
    """Version bump level.

    The integer value is the index of the addressed component, so lower
    values have higher priority. NONE means no commit matched a trigger.
    """

    MAJOR = 0
    MINOR = 1
    PATCH = 2
    NONE = 3

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Version:
    """A ``MAJOR.MINOR.PATCH`` version."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, version: str) -> Version:
        """Parse a version string.

        An empty string is a project without releases and parses as 0.0.0.

        Args:
            version: Dot-separated version, e.g. "1.4.0"

        Returns:
            Parsed version

        Raises:
            InvalidSemVerError: If the string is not exactly three numeric components
        """
        if version == "":
            version = BASELINE_VERSION

        parts = version.split(".")
        # isdigit() alone accepts digits int() rejects, e.g. superscripts
        if len(parts) != 3 or not all(part.isascii() and part.isdigit() for part in parts):
            raise InvalidSemVerError(f"invalid semantic version: {version!r}")

        major, minor, patch = (int(part) for part in parts)
        return cls(major, minor, patch)

    def bump(self, bump_type: BumpType, *, reset_lower: bool = False) -> Version:
        """Return the next version for a bump level.

        Args:
            bump_type: Component to increment
            reset_lower: Zero the components below the incremented one

        Raises:
            NothingToBumpError: If bump_type is NONE
        """
        if bump_type == BumpType.NONE:
            raise NothingToBumpError("nothing to bump: no commit matched a version trigger")

        parts = [self.major, self.minor, self.patch]
        parts[bump_type] += 1
        if reset_lower:
            for index in range(bump_type + 1, len(parts)):
                parts[index] = 0
        return Version(*parts)


def bump(version: str, level: BumpType, *, reset_lower: bool = False) -> str:
    """Bump a version string by one level.

    The level is checked before the version string, so a malformed version
    with nothing to bump reports NothingToBumpError.

    Args:
        version: Current version; "" means no release yet
        level: Bump level from :func:`~vsync.core.triggers.classify`
        reset_lower: Zero the components below the incremented one

    Returns:
        Next version string

    Raises:
        NothingToBumpError: If level is NONE
        InvalidSemVerError: If version is not three numeric components
    """
    if level == BumpType.NONE:
        raise NothingToBumpError("nothing to bump: no commit matched a version trigger")
    return str(Version.parse(version).bump(level, reset_lower=reset_lower))
