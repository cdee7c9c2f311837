"""Constants and enums for the pipeline stack."""

from enum import StrEnum
from typing import Final


class ComputeType(StrEnum):
    """CodeBuild compute sizes."""

    SMALL = "BUILD_GENERAL1_SMALL"
    MEDIUM = "BUILD_GENERAL1_MEDIUM"
    LARGE = "BUILD_GENERAL1_LARGE"


class EnvironmentType(StrEnum):
    """CodeBuild container environment types."""

    LINUX_CONTAINER = "LINUX_CONTAINER"
    LINUX_GPU_CONTAINER = "LINUX_GPU_CONTAINER"
    ARM_CONTAINER = "ARM_CONTAINER"


class EnvironmentVariableType(StrEnum):
    """Where a CodeBuild environment variable value comes from."""

    PLAINTEXT = "PLAINTEXT"
    PARAMETER_STORE = "PARAMETER_STORE"
    SECRETS_MANAGER = "SECRETS_MANAGER"


class ProjectIOType(StrEnum):
    """Source/artifact types for a CodeBuild project."""

    CODEPIPELINE = "CODEPIPELINE"
    NO_ARTIFACTS = "NO_ARTIFACTS"
    NO_SOURCE = "NO_SOURCE"
    S3 = "S3"
    GITHUB = "GITHUB"


class ActionCategory(StrEnum):
    """CodePipeline action categories."""

    SOURCE = "Source"
    BUILD = "Build"
    TEST = "Test"
    DEPLOY = "Deploy"
    APPROVAL = "Approval"
    INVOKE = "Invoke"


class ActionOwner(StrEnum):
    """Who provides a CodePipeline action type."""

    AWS = "AWS"
    THIRD_PARTY = "ThirdParty"
    CUSTOM = "Custom"


# Project / namespace
CONFIG_NAMESPACE: Final[str] = "pulumi_codepipeline"
PIPELINE_NAME_OUTPUT: Final[str] = "pipelineName"

# Logical resource names
BUCKET_RESOURCE_NAME: Final[str] = "MY_PIPELINE_BUCKET"
TOPIC_RESOURCE_NAME: Final[str] = "MY_PIPELINE_SNS_TOPIC"
ROLE_RESOURCE_NAME: Final[str] = "pl-role"
PROJECT_RESOURCE_NAME: Final[str] = "EXAMPLE_CODEBUILD_PROJECT"
PIPELINE_RESOURCE_NAME: Final[str] = "EXAMPLE_PIPELINE"

# SNS limits the display name used for SMS to 10 characters
TOPIC_DISPLAY_NAME: Final[str] = "pipesns"
TOPIC_DISPLAY_NAME_MAX_LEN: Final[int] = 10

# IAM
POLICY_VERSION: Final[str] = "2012-10-17"
ASSUME_ROLE_ACTION: Final[str] = "sts:AssumeRole"
CODEBUILD_SERVICE_PRINCIPAL: Final[str] = "codebuild.amazonaws.com"

# Attachment resource name -> AWS managed policy ARN, in attachment order
MANAGED_POLICY_ATTACHMENTS: Final[dict[str, str]] = {
    "codebuild-access": "arn:aws:iam::aws:policy/AWSCodeBuildDeveloperAccess",
    "cloudwatch-access": "arn:aws:iam::aws:policy/CloudWatchFullAccess",
    "s3-access": "arn:aws:iam::aws:policy/AmazonS3FullAccess",
    "secret-access": "arn:aws:iam::aws:policy/AmazonSSMReadOnlyAccess",
}

# CodeBuild
BUILD_TIMEOUT_MINUTES: Final[int] = 10
BUILD_DESCRIPTION: Final[str] = "Hey! This is my description!"
BUILD_IMAGE: Final[str] = "aws/codebuild/docker:17.09.0"
BUILDSPEC_PATH: Final[str] = "./buildspec.yaml"

# CodePipeline
ARTIFACT_STORE_TYPE: Final[str] = "S3"
PIPELINE_TYPE: Final[str] = "V1"
ACTION_VERSION: Final[str] = "1"
SOURCE_ARTIFACT: Final[str] = "GitHubSource"
TEST_RESULTS_ARTIFACT: Final[str] = "TestResults"
APPROVAL_MESSAGE: Final[str] = "You can add a message here!"

# GitHub source defaults, overridable from stack config
DEFAULT_GITHUB_OWNER: Final[str] = "NAME_OF_ACCOUNT"
DEFAULT_GITHUB_REPO: Final[str] = "NAME_OF_REPO"
DEFAULT_GITHUB_BRANCH: Final[str] = "master"
DEFAULT_GITHUB_OAUTH_TOKEN: Final[str] = "GITHUB_OAUTH_TOKEN"

__all__ = [
    "ComputeType",
    "EnvironmentType",
    "EnvironmentVariableType",
    "ProjectIOType",
    "ActionCategory",
    "ActionOwner",
    "CONFIG_NAMESPACE",
    "PIPELINE_NAME_OUTPUT",
    "BUCKET_RESOURCE_NAME",
    "TOPIC_RESOURCE_NAME",
    "ROLE_RESOURCE_NAME",
    "PROJECT_RESOURCE_NAME",
    "PIPELINE_RESOURCE_NAME",
    "TOPIC_DISPLAY_NAME",
    "TOPIC_DISPLAY_NAME_MAX_LEN",
    "POLICY_VERSION",
    "ASSUME_ROLE_ACTION",
    "CODEBUILD_SERVICE_PRINCIPAL",
    "MANAGED_POLICY_ATTACHMENTS",
    "BUILD_TIMEOUT_MINUTES",
    "BUILD_DESCRIPTION",
    "BUILD_IMAGE",
    "BUILDSPEC_PATH",
    "ARTIFACT_STORE_TYPE",
    "PIPELINE_TYPE",
    "ACTION_VERSION",
    "SOURCE_ARTIFACT",
    "TEST_RESULTS_ARTIFACT",
    "APPROVAL_MESSAGE",
    "DEFAULT_GITHUB_OWNER",
    "DEFAULT_GITHUB_REPO",
    "DEFAULT_GITHUB_BRANCH",
    "DEFAULT_GITHUB_OAUTH_TOKEN",
]
