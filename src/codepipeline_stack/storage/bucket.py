"""S3 bucket holding pipeline artifacts."""

from __future__ import annotations

import logging

import pulumi_aws as aws

from codepipeline_stack.common.constants import BUCKET_RESOURCE_NAME

logger = logging.getLogger(__name__)


def create_artifact_bucket(resource_name: str = BUCKET_RESOURCE_NAME) -> aws.s3.Bucket:
    """Declare the artifact bucket. The provider assigns the physical name."""
    bucket = aws.s3.Bucket(resource_name)
    logger.info("Declared artifact bucket %s", resource_name)
    return bucket


__all__ = ["create_artifact_bucket"]
