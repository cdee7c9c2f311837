"""SNS topic for manual approval notifications.

Subscribers (e.g. email addresses) are added by hand in the AWS console so they
stay out of the stack's state and never show up as drift on ``pulumi up``.
"""

from __future__ import annotations

import logging

import pulumi_aws as aws

from codepipeline_stack.common.constants import TOPIC_RESOURCE_NAME
from codepipeline_stack.common.schemas import TopicSpec

logger = logging.getLogger(__name__)


def create_approval_topic(
    spec: TopicSpec | None = None,
    resource_name: str = TOPIC_RESOURCE_NAME,
) -> aws.sns.Topic:
    """Declare the approval topic."""
    spec = spec or TopicSpec()
    topic = aws.sns.Topic(resource_name, display_name=spec.display_name)
    logger.info("Declared SNS topic %s (display name %r)", resource_name, spec.display_name)
    return topic


__all__ = ["create_approval_topic"]
