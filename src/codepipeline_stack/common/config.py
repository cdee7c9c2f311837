"""Process settings and Pulumi stack configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

import pulumi
from pydantic_settings import BaseSettings

from codepipeline_stack.common.constants import (
    CONFIG_NAMESPACE,
    DEFAULT_GITHUB_BRANCH,
    DEFAULT_GITHUB_OAUTH_TOKEN,
    DEFAULT_GITHUB_OWNER,
    DEFAULT_GITHUB_REPO,
)

logger = logging.getLogger(__name__)

REQUIRED_KEYS: tuple[str, ...] = ("secretName", "myConfigVar")


class InfraSettings(BaseSettings):
    """Process settings loaded from environment variables."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    config_namespace: str = CONFIG_NAMESPACE
    validate_artifact_chain: bool = True

    model_config = {"env_prefix": "CODEPIPELINE_", "case_sensitive": False}


@dataclass(frozen=True)
class GitHubSourceConfig:
    """Where the pipeline pulls its source from."""

    owner: str = DEFAULT_GITHUB_OWNER
    repo: str = DEFAULT_GITHUB_REPO
    branch: str = DEFAULT_GITHUB_BRANCH
    oauth_token: pulumi.Input[str] = DEFAULT_GITHUB_OAUTH_TOKEN


@dataclass(frozen=True)
class StackConfig:
    """Values read from the stack's configuration store.

    ``secret_name`` is kept as a secret ``pulumi.Output`` so the engine masks it
    everywhere it surfaces. Never log or print it.
    """

    secret_name: pulumi.Input[str]
    my_config_var: str
    github: GitHubSourceConfig = GitHubSourceConfig()


def load_stack_config(namespace: str = CONFIG_NAMESPACE) -> StackConfig:
    """Read the stack configuration.

    Raises:
        pulumi.ConfigMissingError: if a required key is not set.
    """
    config = pulumi.Config(namespace)
    secret_name = config.require_secret("secretName")
    my_config_var = config.require("myConfigVar")

    oauth_token = config.get_secret("githubOAuthToken")
    github = GitHubSourceConfig(
        owner=config.get("githubOwner") or DEFAULT_GITHUB_OWNER,
        repo=config.get("githubRepo") or DEFAULT_GITHUB_REPO,
        branch=config.get("githubBranch") or DEFAULT_GITHUB_BRANCH,
        oauth_token=oauth_token if oauth_token is not None else DEFAULT_GITHUB_OAUTH_TOKEN,
    )
    if oauth_token is None:
        logger.warning(
            "%s:githubOAuthToken not set, using placeholder token", namespace
        )

    logger.info(
        "Loaded stack config %s (required keys: %s, source: %s/%s@%s)",
        namespace,
        ", ".join(REQUIRED_KEYS),
        github.owner,
        github.repo,
        github.branch,
    )
    return StackConfig(
        secret_name=secret_name,
        my_config_var=my_config_var,
        github=github,
    )


__all__ = [
    "REQUIRED_KEYS",
    "InfraSettings",
    "GitHubSourceConfig",
    "StackConfig",
    "load_stack_config",
]
