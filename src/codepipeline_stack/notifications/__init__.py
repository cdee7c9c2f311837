"""Pipeline notifications."""

from codepipeline_stack.notifications.topic import create_approval_topic

__all__ = ["create_approval_topic"]
