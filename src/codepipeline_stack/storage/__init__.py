"""Artifact storage."""

from codepipeline_stack.storage.bucket import create_artifact_bucket

__all__ = ["create_artifact_bucket"]
