"""Commit classification by subject prefix.

Each commit subject is matched against the configured trigger prefixes. The
highest-priority level seen across all commits decides the bump for the
whole release: one ``break:`` commit among a hundred fixes is a major bump.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vsync.core.version import BumpType, bump

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from vsync.config.models import TriggersConfig


def _has_prefix(subject: str, prefixes: Sequence[str]) -> bool:
    return any(subject.startswith(prefix) for prefix in prefixes)


def classify_commit(subject: str, triggers: TriggersConfig) -> BumpType:
    """Classify a single commit subject.

    Args:
        subject: Commit subject line
        triggers: Prefix lists per bump level

    Returns:
        The highest bump level whose prefixes match, or NONE
    """
    if _has_prefix(subject, triggers.major):
        return BumpType.MAJOR
    if _has_prefix(subject, triggers.minor):
        return BumpType.MINOR
    if _has_prefix(subject, triggers.patch):
        return BumpType.PATCH
    return BumpType.NONE


def classify(commits: Iterable[str], triggers: TriggersConfig) -> BumpType:
    """Classify a set of commits into one bump level.

    Only presence matters; the order of ``commits`` never changes the result.

    Args:
        commits: Commit subjects
        triggers: Prefix lists per bump level

    Returns:
        The highest-priority level matched by any commit, NONE if none matched
    """
    level = BumpType.NONE
    for subject in commits:
        level = min(level, classify_commit(subject, triggers))
        if level == BumpType.MAJOR:
            break
    return level


def next_version(
    latest_tag: str,
    commits: Sequence[str],
    triggers: TriggersConfig,
    tag_prefix: str = "",
    *,
    reset_lower: bool = False,
) -> str:
    """Compute the tag name of the next release.

    Args:
        latest_tag: Most recent tag, "" for a project without tags
        commits: Unreleased commit subjects
        triggers: Prefix lists per bump level
        tag_prefix: Prefix stripped from the latest tag and added to the result
        reset_lower: Zero lower-order components on bump

    Returns:
        Next tag name, e.g. "v1.4.0"

    Raises:
        NothingToBumpError: If no commit matched a trigger
        InvalidSemVerError: If the latest tag is not a semantic version
    """
    current = latest_tag.removeprefix(tag_prefix) if tag_prefix else latest_tag
    level = classify(commits, triggers)
    return tag_prefix + bump(current, level, reset_lower=reset_lower)
