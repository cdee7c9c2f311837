"""Tests for the composed stack, run against Pulumi's mock runtime."""

from __future__ import annotations

import json
import logging

import pulumi
import pulumi_aws as aws
import pytest

from codepipeline_stack.cicd.artifacts import ArtifactChainError
from codepipeline_stack.cicd.definition import pipeline_spec
from codepipeline_stack.cicd.resources import create_pipeline
from codepipeline_stack.common.config import InfraSettings, load_stack_config
from codepipeline_stack.common.constants import MANAGED_POLICY_ATTACHMENTS
from codepipeline_stack.stack import PipelineStack, deploy_stack, export_outputs

EXPECTED_RESOURCES = {
    "MY_PIPELINE_BUCKET",
    "MY_PIPELINE_SNS_TOPIC",
    "pl-role",
    "codebuild-access",
    "cloudwatch-access",
    "s3-access",
    "secret-access",
    "EXAMPLE_CODEBUILD_PROJECT",
    "EXAMPLE_PIPELINE",
}


def _registered(stack: PipelineStack) -> pulumi.Output:
    """Resolves once every resource in the stack has been registered."""
    return pulumi.Output.all(*[r.urn for r in stack.resources])


@pulumi.runtime.test
def test_registers_every_resource(mocks, required_config):
    stack = deploy_stack(load_stack_config())

    def check(_):
        assert set(mocks.resources) == EXPECTED_RESOURCES
        assert mocks.resources["MY_PIPELINE_BUCKET"]["type"].startswith("aws:s3/")
        assert mocks.resources["EXAMPLE_PIPELINE"]["type"] == (
            "aws:codepipeline/pipeline:Pipeline"
        )

    return _registered(stack).apply(check)


@pulumi.runtime.test
def test_registration_follows_references(mocks, required_config):
    stack = deploy_stack(load_stack_config())

    def check(_):
        order = list(mocks.resources)
        assert order.index("pl-role") < order.index("EXAMPLE_CODEBUILD_PROJECT")
        assert order.index("EXAMPLE_CODEBUILD_PROJECT") < order.index("EXAMPLE_PIPELINE")
        assert order.index("MY_PIPELINE_SNS_TOPIC") < order.index("EXAMPLE_PIPELINE")

    return _registered(stack).apply(check)


@pulumi.runtime.test
def test_explicit_depends_on_hints(mocks, required_config, monkeypatch):
    opts: dict[str, pulumi.ResourceOptions] = {}

    def recording(resource_cls):
        def create(resource_name, *args, **kwargs):
            opts[resource_name] = kwargs.get("opts")
            return resource_cls(resource_name, *args, **kwargs)

        return create

    monkeypatch.setattr(aws.codebuild, "Project", recording(aws.codebuild.Project))
    monkeypatch.setattr(
        aws.codepipeline, "Pipeline", recording(aws.codepipeline.Pipeline)
    )
    stack = deploy_stack(load_stack_config())

    assert opts["EXAMPLE_CODEBUILD_PROJECT"].depends_on == [stack.role.role]
    assert opts["EXAMPLE_PIPELINE"].depends_on == [stack.project]
    return _registered(stack)


@pulumi.runtime.test
def test_role_trust_policy_and_attachments(mocks, required_config):
    stack = deploy_stack(load_stack_config())

    def check(_):
        policy = json.loads(mocks.resources["pl-role"]["inputs"]["assumeRolePolicy"])
        assert policy["Statement"][0]["Action"] == "sts:AssumeRole"
        for name, arn in MANAGED_POLICY_ATTACHMENTS.items():
            inputs = mocks.resources[name]["inputs"]
            assert inputs["policyArn"] == arn
            assert inputs["role"] == "pl-role"

    return _registered(stack).apply(check)


@pulumi.runtime.test
def test_topic_display_name(mocks, required_config):
    stack = deploy_stack(load_stack_config())

    def check(_):
        assert mocks.resources["MY_PIPELINE_SNS_TOPIC"]["inputs"]["displayName"] == "pipesns"

    return _registered(stack).apply(check)


@pulumi.runtime.test
def test_build_project_inputs(mocks, required_config):
    stack = deploy_stack(load_stack_config())

    def check(args):
        role_arn = args[0]
        inputs = mocks.resources["EXAMPLE_CODEBUILD_PROJECT"]["inputs"]
        assert inputs["artifacts"]["type"] == "CODEPIPELINE"
        assert inputs["source"]["type"] == "CODEPIPELINE"
        assert inputs["source"]["buildspec"] == "./buildspec.yaml"
        assert inputs["serviceRole"] == role_arn
        assert inputs["buildTimeout"] == 10
        env = inputs["environment"]
        assert env["computeType"] == "BUILD_GENERAL1_SMALL"
        assert env["privilegedMode"] is True
        assert env["environmentVariables"] == [
            {"name": "MY_VARIABLE", "type": "PLAINTEXT", "value": "VALUE OF MY VARIABLE"}
        ]

    return pulumi.Output.all(stack.role.arn, _registered(stack)).apply(check)


@pulumi.runtime.test
def test_pipeline_inputs(mocks, required_config):
    stack = deploy_stack(load_stack_config())

    def check(args):
        bucket_name, topic_arn, project_name = args[:3]
        inputs = mocks.resources["EXAMPLE_PIPELINE"]["inputs"]
        assert inputs["artifactStores"][0]["type"] == "S3"
        assert inputs["artifactStores"][0]["location"] == bucket_name

        stages = inputs["stages"]
        assert [s["name"] for s in stages] == ["GitHub", "Test"]
        source = stages[0]["actions"][0]
        test_step, approval = stages[1]["actions"]
        assert source["outputArtifacts"] == ["GitHubSource"]
        assert test_step["inputArtifacts"] == source["outputArtifacts"]
        assert test_step["configuration"]["ProjectName"] == project_name
        assert approval["configuration"]["NotificationArn"] == topic_arn
        assert approval["runOrder"] == 2

    return pulumi.Output.all(
        stack.bucket.bucket, stack.topic.arn, stack.project.name, _registered(stack)
    ).apply(check)


@pulumi.runtime.test
def test_exports_pipeline_name(mocks, required_config, monkeypatch):
    exported: dict[str, pulumi.Output] = {}
    monkeypatch.setattr(pulumi, "export", lambda name, value: exported.__setitem__(name, value))
    stack = deploy_stack(load_stack_config())
    export_outputs(stack)
    assert list(exported) == ["pipelineName"]

    def check(name):
        assert name == "EXAMPLE_PIPELINE"

    return exported["pipelineName"].apply(check)


@pulumi.runtime.test
def test_secret_not_logged_during_deploy(mocks, required_config, secret_value, caplog):
    caplog.set_level(logging.DEBUG)
    stack = deploy_stack(load_stack_config())

    def check(_):
        assert "Declared pipeline EXAMPLE_PIPELINE" in caplog.text
        assert secret_value not in caplog.text

    return _registered(stack).apply(check)


@pulumi.runtime.test
def test_validation_can_be_disabled(mocks, required_config, caplog):
    caplog.set_level(logging.WARNING)
    stack = deploy_stack(
        load_stack_config(), InfraSettings(validate_artifact_chain=False)
    )

    def check(_):
        assert "validation disabled" in caplog.text

    return _registered(stack).apply(check)


def test_broken_chain_rejected_before_submission(mocks):
    spec = pipeline_spec("bucket", "project", "topic")
    spec.stage("Test").action("MyTestStep").input_artifacts = ["Typo"]
    with pytest.raises(ArtifactChainError, match="Typo"):
        create_pipeline(spec, role_arn="arn:aws:iam::123456789012:role/pl-role")
    assert "EXAMPLE_PIPELINE" not in mocks.resources


@pulumi.runtime.test
def test_stack_lists_resources_in_declaration_order(mocks, required_config):
    stack = deploy_stack(load_stack_config())
    assert len(stack.resources) == len(EXPECTED_RESOURCES)
    assert stack.resources[0] is stack.bucket
    assert stack.resources[-1] is stack.pipeline
    return _registered(stack)
