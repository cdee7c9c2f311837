"""Pydantic v2 schemas for build project and pipeline declarations.

Values that are only known at apply time (a project name, a topic ARN) are carried
as opaque ``Any`` fields so a ``pulumi.Output`` can flow through unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from codepipeline_stack.common.constants import (
    ACTION_VERSION,
    ARTIFACT_STORE_TYPE,
    BUILD_DESCRIPTION,
    BUILD_IMAGE,
    BUILD_TIMEOUT_MINUTES,
    BUILDSPEC_PATH,
    PIPELINE_TYPE,
    TOPIC_DISPLAY_NAME,
    TOPIC_DISPLAY_NAME_MAX_LEN,
    ActionCategory,
    ActionOwner,
    ComputeType,
    EnvironmentType,
    EnvironmentVariableType,
    ProjectIOType,
)


class TopicSpec(BaseModel):
    """SNS topic used for approval notifications."""

    display_name: str = Field(
        default=TOPIC_DISPLAY_NAME, min_length=1, max_length=TOPIC_DISPLAY_NAME_MAX_LEN
    )


class EnvironmentVariableSpec(BaseModel):
    """A single CodeBuild environment variable."""

    name: str = Field(min_length=1)
    # str or pulumi.Output[str]; pydantic cannot validate an Output
    value: Any
    type: EnvironmentVariableType = EnvironmentVariableType.PLAINTEXT


class BuildEnvironmentSpec(BaseModel):
    """Container environment a CodeBuild project runs in."""

    compute_type: ComputeType = ComputeType.SMALL
    image: str = BUILD_IMAGE
    type: EnvironmentType = EnvironmentType.LINUX_CONTAINER
    privileged_mode: bool = True
    environment_variables: list[EnvironmentVariableSpec] = Field(default_factory=list)


class BuildProjectSpec(BaseModel):
    """CodeBuild project declaration."""

    build_timeout: int = Field(default=BUILD_TIMEOUT_MINUTES, ge=5, le=2160)
    description: str = BUILD_DESCRIPTION
    environment: BuildEnvironmentSpec = Field(default_factory=BuildEnvironmentSpec)
    artifacts_type: ProjectIOType = ProjectIOType.CODEPIPELINE
    source_type: ProjectIOType = ProjectIOType.CODEPIPELINE
    buildspec: str = BUILDSPEC_PATH

    @model_validator(mode="after")
    def check_codepipeline_pairing(self) -> BuildProjectSpec:
        """CODEPIPELINE source and artifacts only work as a pair."""
        source_cp = self.source_type == ProjectIOType.CODEPIPELINE
        artifacts_cp = self.artifacts_type == ProjectIOType.CODEPIPELINE
        if source_cp != artifacts_cp:
            raise ValueError(
                "source.type and artifacts.type must both be CODEPIPELINE or neither "
                f"(source={self.source_type}, artifacts={self.artifacts_type})"
            )
        return self


class PipelineActionSpec(BaseModel):
    """One action inside a pipeline stage."""

    name: str = Field(min_length=1, max_length=100)
    category: ActionCategory
    owner: ActionOwner
    provider: str = Field(min_length=1)
    version: str = ACTION_VERSION
    run_order: int = Field(default=1, ge=1, le=999)
    # values may be pulumi.Output[str] (project name, topic ARN)
    configuration: dict[str, Any] = Field(default_factory=dict)
    input_artifacts: list[str] = Field(default_factory=list)
    output_artifacts: list[str] = Field(default_factory=list)


class PipelineStageSpec(BaseModel):
    """An ordered group of actions."""

    name: str = Field(min_length=1, max_length=100)
    actions: list[PipelineActionSpec] = Field(min_length=1)

    def action(self, name: str) -> PipelineActionSpec:
        """Look up an action by name."""
        for action in self.actions:
            if action.name == name:
                return action
        raise KeyError(f"No action {name!r} in stage {self.name!r}")


class ArtifactStoreSpec(BaseModel):
    """Where the pipeline keeps artifacts between actions."""

    type: str = ARTIFACT_STORE_TYPE
    # bucket name, usually a pulumi.Output[str]
    location: Any


class PipelineSpec(BaseModel):
    """CodePipeline declaration. Stage order is execution order."""

    artifact_store: ArtifactStoreSpec
    stages: list[PipelineStageSpec] = Field(min_length=2)
    pipeline_type: str = PIPELINE_TYPE

    @model_validator(mode="after")
    def check_unique_stage_names(self) -> PipelineSpec:
        names = [s.name for s in self.stages]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate stage names: {names}")
        return self

    @property
    def stage_names(self) -> list[str]:
        return [s.name for s in self.stages]

    def stage(self, name: str) -> PipelineStageSpec:
        """Look up a stage by name."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        raise KeyError(f"No stage {name!r}")


__all__ = [
    "TopicSpec",
    "EnvironmentVariableSpec",
    "BuildEnvironmentSpec",
    "BuildProjectSpec",
    "PipelineActionSpec",
    "PipelineStageSpec",
    "ArtifactStoreSpec",
    "PipelineSpec",
]
