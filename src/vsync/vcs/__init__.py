"""Version control integration."""

from __future__ import annotations

from vsync.vcs.base import VCSGateway
from vsync.vcs.git import GitRepository

__all__ = ["GitRepository", "VCSGateway"]
