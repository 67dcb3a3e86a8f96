"""Core business logic for vsync.

This module contains the fundamental building blocks:
- Version parsing and bump arithmetic
- Commit classification by trigger prefix
- Changelog rendering
- Release orchestration
"""

from __future__ import annotations

from vsync.core.changelog import render, update_changelog, write
from vsync.core.pipeline import ReleaseOrchestrator, RunReport, StageResult
from vsync.core.stages import Stage
from vsync.core.triggers import classify, classify_commit, next_version
from vsync.core.version import BumpType, Version, bump

__all__ = [
    # Version
    "BumpType",
    # Pipeline
    "ReleaseOrchestrator",
    "RunReport",
    "Stage",
    "StageResult",
    "Version",
    "bump",
    # Triggers
    "classify",
    "classify_commit",
    "next_version",
    # Changelog
    "render",
    "update_changelog",
    "write",
]
