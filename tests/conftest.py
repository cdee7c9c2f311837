"""Shared fixtures: Pulumi mock runtime and stack configuration."""

from __future__ import annotations

from typing import Any

import pulumi
import pytest

from codepipeline_stack.common.constants import CONFIG_NAMESPACE

SECRET_VALUE = "s3cr3t-do-not-log"


class InfraMocks(pulumi.runtime.Mocks):
    """Records every registered resource and fakes provider-assigned outputs."""

    def __init__(self) -> None:
        self.resources: dict[str, dict[str, Any]] = {}

    def new_resource(self, args: pulumi.runtime.MockResourceArgs) -> tuple[str, dict[str, Any]]:
        self.resources[args.name] = {"type": args.typ, "inputs": dict(args.inputs)}
        outputs = dict(args.inputs)
        outputs.setdefault("name", args.name)
        outputs.setdefault("arn", f"arn:aws:mock:us-east-1:123456789012:{args.name}")
        if args.typ.startswith("aws:s3/"):
            outputs.setdefault("bucket", args.name.lower())
        return f"{args.name}_id", outputs

    def call(self, args: pulumi.runtime.MockCallArgs) -> dict[str, Any]:
        return {}


def _set_config(values: dict[str, str], secret_keys: list[str] | None = None) -> None:
    pulumi.runtime.set_all_config(
        {f"{CONFIG_NAMESPACE}:{k}": v for k, v in values.items()},
        [f"{CONFIG_NAMESPACE}:{k}" for k in (secret_keys or [])],
    )


@pytest.fixture
def secret_value() -> str:
    return SECRET_VALUE


@pytest.fixture
def mocks() -> InfraMocks:
    infra_mocks = InfraMocks()
    pulumi.runtime.set_mocks(infra_mocks, preview=False)
    return infra_mocks


@pytest.fixture
def set_config():
    """Replace the stack config for one test, cleared afterwards."""
    yield _set_config
    pulumi.runtime.set_all_config({})


@pytest.fixture
def required_config(set_config, secret_value) -> dict[str, str]:
    values = {"secretName": secret_value, "myConfigVar": "configVarValue"}
    set_config(values, secret_keys=["secretName"])
    return values
