"""CodeBuild project and CodePipeline declarations."""

from __future__ import annotations

from codepipeline_stack.cicd.artifacts import (
    ArtifactChainError,
    ArtifactEdge,
    ArtifactGraph,
    build_artifact_graph,
    validate_artifact_chain,
)
from codepipeline_stack.cicd.definition import (
    build_project_spec,
    codebuild_test_action,
    github_source_action,
    manual_approval_action,
    pipeline_spec,
)
from codepipeline_stack.cicd.resources import create_build_project, create_pipeline

__all__ = [
    "ArtifactChainError",
    "ArtifactEdge",
    "ArtifactGraph",
    "build_artifact_graph",
    "validate_artifact_chain",
    "build_project_spec",
    "codebuild_test_action",
    "github_source_action",
    "manual_approval_action",
    "pipeline_spec",
    "create_build_project",
    "create_pipeline",
]
