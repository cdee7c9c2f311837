"""IAM trust policy and pipeline role."""

from __future__ import annotations

from codepipeline_stack.iam.policies import (
    PolicyAttachmentSpec,
    PolicyPrincipal,
    PolicyStatement,
    TrustPolicy,
    default_policy_attachments,
    service_trust_policy,
)
from codepipeline_stack.iam.role import PipelineRole, create_pipeline_role

__all__ = [
    "PolicyAttachmentSpec",
    "PolicyPrincipal",
    "PolicyStatement",
    "TrustPolicy",
    "default_policy_attachments",
    "service_trust_policy",
    "PipelineRole",
    "create_pipeline_role",
]
