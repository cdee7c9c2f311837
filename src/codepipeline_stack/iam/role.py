"""Pipeline service role and its policy attachments."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from codepipeline_stack.common.constants import ROLE_RESOURCE_NAME
from codepipeline_stack.iam.policies import (
    PolicyAttachmentSpec,
    TrustPolicy,
    default_policy_attachments,
    service_trust_policy,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineRole:
    """The role plus its attachments, in attachment order."""

    role: aws.iam.Role
    attachments: list[aws.iam.RolePolicyAttachment]

    @property
    def arn(self) -> pulumi.Output[str]:
        return self.role.arn


def create_pipeline_role(
    trust_policy: TrustPolicy | None = None,
    attachments: list[PolicyAttachmentSpec] | None = None,
    resource_name: str = ROLE_RESOURCE_NAME,
) -> PipelineRole:
    """Declare the role shared by CodeBuild and CodePipeline."""
    trust_policy = trust_policy or service_trust_policy()
    attachments = attachments if attachments is not None else default_policy_attachments()

    role = aws.iam.Role(resource_name, assume_role_policy=trust_policy.to_json())
    attached = [
        aws.iam.RolePolicyAttachment(
            spec.resource_name,
            role=role.name,
            policy_arn=spec.policy_arn,
        )
        for spec in attachments
    ]
    logger.info(
        "Declared role %s with %d policy attachment(s): %s",
        resource_name,
        len(attached),
        ", ".join(spec.resource_name for spec in attachments),
    )
    return PipelineRole(role=role, attachments=attached)


__all__ = ["PipelineRole", "create_pipeline_role"]
