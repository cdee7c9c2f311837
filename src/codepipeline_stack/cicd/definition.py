"""Declarations for the CodeBuild project and the two-stage pipeline.

Both builders are pure: the same arguments always give equal specs. Apply-time
values (bucket name, project name, topic ARN) are passed in and stored as-is.
"""

from __future__ import annotations

import pulumi

from codepipeline_stack.common.config import GitHubSourceConfig
from codepipeline_stack.common.constants import (
    APPROVAL_MESSAGE,
    SOURCE_ARTIFACT,
    TEST_RESULTS_ARTIFACT,
    ActionCategory,
    ActionOwner,
)
from codepipeline_stack.common.schemas import (
    ArtifactStoreSpec,
    BuildEnvironmentSpec,
    BuildProjectSpec,
    EnvironmentVariableSpec,
    PipelineActionSpec,
    PipelineSpec,
    PipelineStageSpec,
)


def build_project_spec() -> BuildProjectSpec:
    """The test project run by the pipeline's ``Test`` stage."""
    return BuildProjectSpec(
        environment=BuildEnvironmentSpec(
            environment_variables=[
                EnvironmentVariableSpec(name="MY_VARIABLE", value="VALUE OF MY VARIABLE"),
            ],
        ),
    )


def github_source_action(github: GitHubSourceConfig) -> PipelineActionSpec:
    return PipelineActionSpec(
        name="Source",
        category=ActionCategory.SOURCE,
        owner=ActionOwner.THIRD_PARTY,
        provider="GitHub",
        run_order=1,
        configuration={
            "Branch": github.branch,
            "OAuthToken": github.oauth_token,
            "Owner": github.owner,
            "PollForSourceChanges": "false",
            "Repo": github.repo,
        },
        output_artifacts=[SOURCE_ARTIFACT],
    )


def codebuild_test_action(project_name: pulumi.Input[str]) -> PipelineActionSpec:
    return PipelineActionSpec(
        name="MyTestStep",
        category=ActionCategory.BUILD,
        owner=ActionOwner.AWS,
        provider="CodeBuild",
        run_order=1,
        configuration={"ProjectName": project_name},
        input_artifacts=[SOURCE_ARTIFACT],
        output_artifacts=[TEST_RESULTS_ARTIFACT],
    )


def manual_approval_action(topic_arn: pulumi.Input[str]) -> PipelineActionSpec:
    return PipelineActionSpec(
        name="MyApprovalAction",
        category=ActionCategory.APPROVAL,
        owner=ActionOwner.AWS,
        provider="Manual",
        run_order=2,
        configuration={
            "NotificationArn": topic_arn,
            "CustomData": APPROVAL_MESSAGE,
        },
    )


def pipeline_spec(
    bucket_location: pulumi.Input[str],
    project_name: pulumi.Input[str],
    topic_arn: pulumi.Input[str],
    github: GitHubSourceConfig | None = None,
) -> PipelineSpec:
    """GitHub source stage followed by a test-then-approve stage."""
    github = github or GitHubSourceConfig()
    return PipelineSpec(
        artifact_store=ArtifactStoreSpec(location=bucket_location),
        stages=[
            PipelineStageSpec(name="GitHub", actions=[github_source_action(github)]),
            PipelineStageSpec(
                name="Test",
                actions=[
                    codebuild_test_action(project_name),
                    manual_approval_action(topic_arn),
                ],
            ),
        ],
    )


__all__ = [
    "build_project_spec",
    "github_source_action",
    "codebuild_test_action",
    "manual_approval_action",
    "pipeline_spec",
]
