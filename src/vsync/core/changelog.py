"""Markdown changelog rendering.

Each release becomes a section prepended to the changelog file, so the
newest release is always at the top::

    ## v1.4.0

    - feat: add config command
    - fix: handle empty repositories

The file is read whole and rewritten; existing content is kept byte for
byte after the new section.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vsync.exceptions import ChangelogError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)


def render(tag: str, changes: Sequence[str]) -> str:
    """Render a release section.

    Args:
        tag: Release tag used as the section header
        changes: Commit subjects, rendered in the given order

    Returns:
        Markdown block ending with a newline
    """
    lines = [f"## {tag}", ""]
    lines.extend(f"- {change}" for change in changes)
    return "\n".join(lines) + "\n"


def write(path: Path, block: str) -> None:
    """Prepend a block to the changelog file.

    The file is created if it does not exist.

    Args:
        path: Changelog file
        block: Rendered release section

    Raises:
        ChangelogError: If the file cannot be read or written
    """
    try:
        existing = path.read_bytes() if path.exists() else b""
    except OSError as e:
        raise ChangelogError(f"failed to read changelog {path}: {e}", cause=e) from e

    try:
        path.write_bytes(block.encode("utf-8") + existing)
    except OSError as e:
        raise ChangelogError(f"failed to write changelog {path}: {e}", cause=e) from e

    logger.debug("Prepended %d bytes to %s", len(block), path)


def update_changelog(path: Path, tag: str, changes: Sequence[str]) -> str:
    """Render a release section and prepend it to the changelog.

    Returns:
        The rendered block
    """
    block = render(tag, changes)
    write(path, block)
    return block
