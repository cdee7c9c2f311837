"""Compose the whole pipeline stack in declaration order."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from codepipeline_stack.cicd.definition import build_project_spec, pipeline_spec
from codepipeline_stack.cicd.resources import create_build_project, create_pipeline
from codepipeline_stack.common.config import InfraSettings, StackConfig
from codepipeline_stack.common.constants import PIPELINE_NAME_OUTPUT
from codepipeline_stack.iam.role import PipelineRole, create_pipeline_role
from codepipeline_stack.notifications.topic import create_approval_topic
from codepipeline_stack.storage.bucket import create_artifact_bucket

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineStack:
    """Every resource the stack declares."""

    bucket: aws.s3.Bucket
    topic: aws.sns.Topic
    role: PipelineRole
    project: aws.codebuild.Project
    pipeline: aws.codepipeline.Pipeline

    @property
    def resources(self) -> list[pulumi.Resource]:
        """All declared resources, in declaration order."""
        return [
            self.bucket,
            self.topic,
            self.role.role,
            *self.role.attachments,
            self.project,
            self.pipeline,
        ]


def deploy_stack(config: StackConfig, settings: InfraSettings | None = None) -> PipelineStack:
    """Declare bucket, topic, role, build project and pipeline.

    Nothing is created here; the Pulumi engine applies the declarations after
    the program returns.
    """
    settings = settings or InfraSettings()

    bucket = create_artifact_bucket()
    topic = create_approval_topic()
    role = create_pipeline_role()

    project = create_build_project(
        build_project_spec(),
        service_role_arn=role.arn,
        depends_on=[role.role],
    )
    pipeline = create_pipeline(
        pipeline_spec(
            bucket_location=bucket.bucket,
            project_name=project.name,
            topic_arn=topic.arn,
            github=config.github,
        ),
        role_arn=role.arn,
        depends_on=[project],
        validate=settings.validate_artifact_chain,
    )
    stack = PipelineStack(
        bucket=bucket,
        topic=topic,
        role=role,
        project=project,
        pipeline=pipeline,
    )
    logger.info("Stack declared: %d resources", len(stack.resources))
    return stack


def export_outputs(stack: PipelineStack) -> None:
    pulumi.export(PIPELINE_NAME_OUTPUT, stack.pipeline.name)


__all__ = ["PipelineStack", "deploy_stack", "export_outputs"]
