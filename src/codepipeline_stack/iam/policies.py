"""IAM trust policy documents and managed-policy attachment declarations."""

from __future__ import annotations

import json
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from codepipeline_stack.common.constants import (
    ASSUME_ROLE_ACTION,
    CODEBUILD_SERVICE_PRINCIPAL,
    MANAGED_POLICY_ATTACHMENTS,
    POLICY_VERSION,
)


class PolicyPrincipal(BaseModel):
    """Principal block of a policy statement."""

    model_config = ConfigDict(populate_by_name=True)

    service: str | list[str] = Field(alias="Service")


class PolicyStatement(BaseModel):
    """A single IAM policy statement."""

    model_config = ConfigDict(populate_by_name=True)

    action: str = Field(default=ASSUME_ROLE_ACTION, alias="Action")
    principal: PolicyPrincipal = Field(alias="Principal")
    effect: str = Field(default="Allow", alias="Effect", pattern=r"^(Allow|Deny)$")
    sid: str = Field(default="", alias="Sid")


class TrustPolicy(BaseModel):
    """Assume-role policy document scoping who may assume a role."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = Field(default=POLICY_VERSION, alias="Version")
    statement: list[PolicyStatement] = Field(alias="Statement", min_length=1)

    def to_json(self) -> str:
        """Render with AWS key casing, ready for ``assume_role_policy``."""
        return json.dumps(self.model_dump(by_alias=True))


class PolicyAttachmentSpec(BaseModel):
    """Attach one managed policy to a role."""

    resource_name: str = Field(min_length=1)
    policy_arn: str = Field(pattern=r"^arn:aws:iam::")


def service_trust_policy(
    services: Sequence[str] = (CODEBUILD_SERVICE_PRINCIPAL,),
) -> TrustPolicy:
    """Trust policy letting the given AWS services assume the role."""
    if not services:
        raise ValueError("At least one service principal is required")
    service: str | list[str] = services[0] if len(services) == 1 else list(services)
    return TrustPolicy(
        statement=[PolicyStatement(principal=PolicyPrincipal(service=service))]
    )


def default_policy_attachments() -> list[PolicyAttachmentSpec]:
    """The four managed policies the pipeline role needs, in attachment order."""
    return [
        PolicyAttachmentSpec(resource_name=name, policy_arn=arn)
        for name, arn in MANAGED_POLICY_ATTACHMENTS.items()
    ]


__all__ = [
    "PolicyPrincipal",
    "PolicyStatement",
    "TrustPolicy",
    "PolicyAttachmentSpec",
    "service_trust_policy",
    "default_policy_attachments",
]
