"""Pulumi program entry point: ``pulumi up`` loads this file."""

import logging

from codepipeline_stack.common.config import InfraSettings, load_stack_config
from codepipeline_stack.stack import deploy_stack, export_outputs

settings = InfraSettings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

config = load_stack_config(settings.config_namespace)
stack = deploy_stack(config, settings)
export_outputs(stack)
