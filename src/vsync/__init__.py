"""vsync - automatic semantic versioning for git repositories.

Bumps the project version from conventional commit prefixes, prepends a
release section to the changelog, commits it and tags the release.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
