"""Exception hierarchy for vsync.

All errors raised by vsync derive from :class:`VSyncError`, grouped by the
kind of failure:

- ConfigurationError: invalid or unreadable configuration
- RepositoryError: repository path or git executable missing
- GuardError: repository state forbids a release step
- FormatError: malformed version strings
- ChangelogError: changelog file could not be read or written
- ExternalToolError: an external command exited with a failure
"""

from __future__ import annotations


class VSyncError(Exception):
    """Base exception for all vsync errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


# Configuration


class ConfigurationError(VSyncError):
    """Invalid stage combination, empty required template, bad config values."""


class ConfigNotFoundError(ConfigurationError):
    """Configuration file does not exist."""


class ConfigValidationError(ConfigurationError):
    """Configuration file exists but its contents are invalid."""


# Repository


class RepositoryError(VSyncError):
    """Repository cannot be used."""


class RepositoryNotFoundError(RepositoryError):
    """Repository path does not exist."""


class ToolNotFoundError(RepositoryError):
    """The git executable is not resolvable on PATH."""


# Guards


class GuardError(VSyncError):
    """Repository state does not allow the requested release step."""


class UncommittedChangesError(GuardError):
    """Working tree has pending modifications."""


class NothingToCommitError(GuardError):
    """Working tree has no pending modifications to commit."""


class ChangeLogNotUpdatedError(GuardError):
    """The changelog is not among the pending modifications."""


class MultipleChangesError(GuardError):
    """More than one path is modified; only the changelog may be committed."""


class NothingToBumpError(GuardError):
    """No unreleased commit matched any version trigger."""


# Formats


class FormatError(VSyncError):
    """A value does not have the expected format."""


class InvalidSemVerError(FormatError):
    """Version string is not made of exactly three numeric components."""


# Changelog


class ChangelogError(VSyncError):
    """Changelog file could not be read or written."""


# External tools


class ExternalToolError(VSyncError):
    """An external command exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        if self.stderr:
            return f"{self.message}\n{self.stderr.strip()}"
        return self.message


class GitError(ExternalToolError):
    """A git invocation failed."""
