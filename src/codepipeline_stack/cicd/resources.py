"""Turn build project and pipeline specs into pulumi_aws resources."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pulumi
import pulumi_aws as aws

from codepipeline_stack.cicd.artifacts import validate_artifact_chain
from codepipeline_stack.common.constants import (
    PIPELINE_RESOURCE_NAME,
    PROJECT_RESOURCE_NAME,
)
from codepipeline_stack.common.schemas import (
    BuildProjectSpec,
    PipelineActionSpec,
    PipelineSpec,
)

logger = logging.getLogger(__name__)


def create_build_project(
    spec: BuildProjectSpec,
    service_role_arn: pulumi.Input[str],
    depends_on: Sequence[pulumi.Resource] = (),
    resource_name: str = PROJECT_RESOURCE_NAME,
) -> aws.codebuild.Project:
    """Declare the CodeBuild project. ``depends_on`` should hold the role."""
    env = spec.environment
    project = aws.codebuild.Project(
        resource_name,
        build_timeout=spec.build_timeout,
        description=spec.description,
        service_role=service_role_arn,
        environment=aws.codebuild.ProjectEnvironmentArgs(
            compute_type=env.compute_type.value,
            image=env.image,
            type=env.type.value,
            privileged_mode=env.privileged_mode,
            environment_variables=[
                aws.codebuild.ProjectEnvironmentEnvironmentVariableArgs(
                    name=var.name,
                    value=var.value,
                    type=var.type.value,
                )
                for var in env.environment_variables
            ],
        ),
        artifacts=aws.codebuild.ProjectArtifactsArgs(type=spec.artifacts_type.value),
        source=aws.codebuild.ProjectSourceArgs(
            type=spec.source_type.value,
            buildspec=spec.buildspec,
        ),
        opts=pulumi.ResourceOptions(depends_on=list(depends_on)),
    )
    logger.info(
        "Declared CodeBuild project %s (%s, %s, buildspec=%s)",
        resource_name,
        env.compute_type,
        env.image,
        spec.buildspec,
    )
    return project


def _action_args(action: PipelineActionSpec) -> aws.codepipeline.PipelineStageActionArgs:
    return aws.codepipeline.PipelineStageActionArgs(
        name=action.name,
        category=action.category.value,
        owner=action.owner.value,
        provider=action.provider,
        version=action.version,
        run_order=action.run_order,
        configuration=dict(action.configuration),
        input_artifacts=list(action.input_artifacts),
        output_artifacts=list(action.output_artifacts),
    )


def create_pipeline(
    spec: PipelineSpec,
    role_arn: pulumi.Input[str],
    depends_on: Sequence[pulumi.Resource] = (),
    validate: bool = True,
    resource_name: str = PIPELINE_RESOURCE_NAME,
) -> aws.codepipeline.Pipeline:
    """Declare the pipeline.

    Raises:
        ArtifactChainError: if ``validate`` is set and an action reads an
            artifact no earlier action produces.
    """
    if validate:
        validate_artifact_chain(spec)
    else:
        logger.warning("Artifact chain validation disabled for %s", resource_name)

    pipeline = aws.codepipeline.Pipeline(
        resource_name,
        role_arn=role_arn,
        pipeline_type=spec.pipeline_type,
        artifact_stores=[
            aws.codepipeline.PipelineArtifactStoreArgs(
                type=spec.artifact_store.type,
                location=spec.artifact_store.location,
            )
        ],
        stages=[
            aws.codepipeline.PipelineStageArgs(
                name=stage.name,
                actions=[_action_args(a) for a in stage.actions],
            )
            for stage in spec.stages
        ],
        opts=pulumi.ResourceOptions(depends_on=list(depends_on)),
    )
    logger.info(
        "Declared pipeline %s with stages: %s",
        resource_name,
        " -> ".join(spec.stage_names),
    )
    return pipeline


__all__ = ["create_build_project", "create_pipeline"]
