"""Common constants, settings and schemas for the pipeline stack."""

from codepipeline_stack.common.config import (
    GitHubSourceConfig,
    InfraSettings,
    StackConfig,
    load_stack_config,
)
from codepipeline_stack.common.schemas import (
    ArtifactStoreSpec,
    BuildEnvironmentSpec,
    BuildProjectSpec,
    EnvironmentVariableSpec,
    PipelineActionSpec,
    PipelineSpec,
    PipelineStageSpec,
    TopicSpec,
)

__all__ = [
    "GitHubSourceConfig",
    "InfraSettings",
    "StackConfig",
    "load_stack_config",
    "ArtifactStoreSpec",
    "BuildEnvironmentSpec",
    "BuildProjectSpec",
    "EnvironmentVariableSpec",
    "PipelineActionSpec",
    "PipelineSpec",
    "PipelineStageSpec",
    "TopicSpec",
]
