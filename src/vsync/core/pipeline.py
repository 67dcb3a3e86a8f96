"""Release orchestration.

The orchestrator runs the enabled stages in a fixed order::

    UPDATE_CHANGELOG -> AUTO_COMMIT -> NEW_TAG

Configuration problems are caught by :meth:`ReleaseOrchestrator.validate`
before anything is touched. Once the stages run, they run best effort: a
failing stage is logged and recorded in the :class:`RunReport`, and the
next stage is still attempted. Nothing is rolled back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from vsync.core import changelog
from vsync.core.stages import Stage
from vsync.core.triggers import next_version
from vsync.exceptions import (
    ChangeLogNotUpdatedError,
    ConfigurationError,
    MultipleChangesError,
    NothingToCommitError,
    UncommittedChangesError,
    VSyncError,
)

if TYPE_CHECKING:
    from vsync.config.models import VSyncConfig
    from vsync.vcs.base import VCSGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageResult:
    """Outcome of one executed stage."""

    stage: Stage
    error: VSyncError | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunReport:
    """Outcomes of all stages of a run, in execution order."""

    results: list[StageResult] = field(default_factory=list)
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        return all(result.ok for result in self.results)

    @property
    def failed(self) -> list[StageResult]:
        return [result for result in self.results if not result.ok]

    def get(self, stage: Stage) -> StageResult | None:
        for result in self.results:
            if result.stage == stage:
                return result
        return None


def render_commit_message(template: str, tag: str, tag_prefix: str = "") -> str:
    """Fill the autocommit message template.

    Supported placeholders are ``{tag}`` (e.g. "v1.4.0") and ``{version}``
    (e.g. "1.4.0").

    Raises:
        ConfigurationError: If the template uses unknown placeholders
    """
    version = tag.removeprefix(tag_prefix) if tag_prefix else tag
    try:
        return template.format(tag=tag, version=version)
    except (AttributeError, KeyError, IndexError, ValueError) as e:
        raise ConfigurationError(
            f"invalid autocommit message template: {template!r}", cause=e
        ) from e


class ReleaseOrchestrator:
    """Runs the release stages against a repository.

    Args:
        config: Immutable run configuration
        gateway: VCS gateway the stages query and mutate
        dry_run: Compute every stage but skip all writes
    """

    def __init__(
        self,
        config: VSyncConfig,
        gateway: VCSGateway,
        *,
        dry_run: bool = False,
    ) -> None:
        self.config = config
        self.gateway = gateway
        self.dry_run = dry_run
        self.stages = config.enabled_stages
        self._changelog_pending = False

    def validate(self) -> None:
        """Check the run can start. Nothing is modified.

        Raises:
            RepositoryError: If the repository or git is missing
            ConfigurationError: If the stage combination or template is invalid
        """
        self.gateway.verify()

        if not self.stages:
            raise ConfigurationError("no stage enabled: enable tags, changelog or autocommit")

        if Stage.AUTO_COMMIT in self.stages:
            template = self.config.generator.autocommit_message
            if not template:
                raise ConfigurationError("autocommit message can't be empty")
            render_commit_message(template, "0.0.0")
            if len(self.stages) == 1:
                raise ConfigurationError(
                    "autocommit option can't be used without changelog or tags option"
                )

    def run(self) -> RunReport:
        """Validate, then execute every enabled stage.

        Raises:
            ConfigurationError: If validation fails; no stage ran
            RepositoryError: If validation fails; no stage ran

        Returns:
            Per-stage outcomes
        """
        self.validate()

        report = RunReport(dry_run=self.dry_run)
        for stage in self.stages:
            report.results.append(self.run_stage(stage))
        return report

    def run_stage(self, stage: Stage) -> StageResult:
        """Execute one stage, capturing its failure."""
        handlers = {
            Stage.UPDATE_CHANGELOG: self._update_changelog,
            Stage.AUTO_COMMIT: self._auto_commit,
            Stage.NEW_TAG: self._new_tag,
        }
        logger.info("Running stage %s", stage)
        try:
            detail = handlers[stage]()
        except VSyncError as e:
            logger.error("Stage %s failed: %s", stage, e)
            return StageResult(stage=stage, error=e)
        logger.info("Stage %s done: %s", stage, detail)
        return StageResult(stage=stage, detail=detail)

    def next_tag(self, changes: list[str] | None = None) -> str:
        """Compute the next release tag from the current repository state.

        Args:
            changes: Unreleased commit subjects, queried from the gateway if omitted

        Raises:
            NothingToBumpError: If no unreleased commit matches a trigger
            InvalidSemVerError: If the latest tag is not a semantic version
        """
        if changes is None:
            changes = self.gateway.unreleased_changes()
        return next_version(
            self.gateway.latest_tag(),
            changes,
            self.config.triggers,
            self.config.effective_tag_prefix,
            reset_lower=self.config.version.reset_lower_components,
        )

    def _update_changelog(self) -> str:
        changes = self.gateway.unreleased_changes()
        tag = self.next_tag(changes)
        if self.dry_run:
            changelog.render(tag, changes)
            self._changelog_pending = True
        else:
            changelog.update_changelog(self.config.changelog_path, tag, changes)
        return f"{tag} ({len(changes)} changes) -> {self.config.changelog_path}"

    def _auto_commit(self) -> str:
        changes = self.gateway.uncommitted_changes()
        # A dry run skipped the write, so the edit it would have made is pending
        if self._changelog_pending and not any(self._is_changelog(p) for p in changes):
            changes = [*changes, str(self.config.changelog_path)]

        if not changes:
            raise NothingToCommitError("nothing to commit")
        if not any(self._is_changelog(path) for path in changes):
            raise ChangeLogNotUpdatedError(
                f"changelog {self.config.changelog_path} not updated, found "
                + ", ".join(changes)
            )
        if len(changes) > 1:
            raise MultipleChangesError(
                f"only the changelog may be committed, found {len(changes)} changed paths: "
                + ", ".join(changes)
            )

        template = self.config.generator.autocommit_message
        message = template
        if "{" in template:
            message = render_commit_message(
                template, self.next_tag(), self.config.effective_tag_prefix
            )

        if not self.dry_run:
            self.gateway.commit(message)
        return message

    def _new_tag(self) -> str:
        changes = self.gateway.uncommitted_changes()
        if changes:
            raise UncommittedChangesError(
                "uncommitted changes present: " + ", ".join(changes)
            )

        tag = self.next_tag()
        if not self.dry_run:
            self.gateway.new_tag(tag)
        return tag

    def _is_changelog(self, changed_path: str) -> bool:
        configured = self.config.changelog_path
        if PurePath(changed_path) == PurePath(configured):
            return True

        workdir = getattr(self.gateway, "workdir", None)
        if workdir is None:
            return False
        try:
            return (Path(workdir) / changed_path).resolve() == configured.resolve()
        except OSError:
            return False
