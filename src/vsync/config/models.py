"""Pydantic models for vsync configuration.

The configuration is built once per run and never mutated afterwards, so
every model is frozen. Unknown keys are rejected to surface typos in
``vsync.toml`` instead of silently ignoring them.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from vsync.core.stages import Stage

DEFAULT_AUTOCOMMIT_MESSAGE = "chore[VSync]: changelog updated"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TriggersConfig(_FrozenModel):
    """Commit subject prefixes mapped to the version component they bump."""

    major: list[str] = Field(
        default_factory=lambda: ["break", "major"],
        description="Prefixes that trigger a MAJOR bump",
    )
    minor: list[str] = Field(
        default_factory=lambda: ["feat", "feature", "minor"],
        description="Prefixes that trigger a MINOR bump",
    )
    patch: list[str] = Field(
        default_factory=lambda: ["fix", "perf", "ref", "docs", "style", "chore", "tests"],
        description="Prefixes that trigger a PATCH bump",
    )


class GeneratorConfig(_FrozenModel):
    """Which release stages run."""

    tags: bool = Field(default=True, description="Create a tag for the next version")
    changelog: bool = Field(default=True, description="Prepend the release to the changelog")
    autocommit: bool = Field(default=False, description="Commit the changelog update")
    autocommit_message: str = Field(
        default=DEFAULT_AUTOCOMMIT_MESSAGE,
        description="Commit message template; supports {version} and {tag}",
    )


class VersionConfig(_FrozenModel):
    """Version and tag naming."""

    tag_prefix: str = "v"
    reset_lower_components: bool = Field(
        default=False,
        description="Zero the minor/patch components on a major/minor bump",
    )


class VSyncConfig(_FrozenModel):
    """Root configuration consumed by the release pipeline."""

    triggers: TriggersConfig = Field(default_factory=TriggersConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    version: VersionConfig = Field(default_factory=VersionConfig)

    changelog_path: Path = Path("CHANGELOG.md")
    repository_path: Path = Path(".git")

    @property
    def effective_tag_prefix(self) -> str:
        return self.version.tag_prefix

    @property
    def enabled_stages(self) -> list[Stage]:
        """Stages switched on by the generator flags, in execution order."""
        flags = {
            Stage.UPDATE_CHANGELOG: self.generator.changelog,
            Stage.AUTO_COMMIT: self.generator.autocommit,
            Stage.NEW_TAG: self.generator.tags,
        }
        return [stage for stage in Stage.ordered() if flags[stage]]
