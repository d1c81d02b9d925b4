#!/usr/bin/env python3
"""CDK App for the Hello World Lambda."""

import aws_cdk as cdk

from stacks import HelloWorldStack

app = cdk.App()

stage = app.node.try_get_context("stage") or "dev"

env = cdk.Environment(
    account=app.node.try_get_context("account") or None,
    region=app.node.try_get_context("region") or "us-east-1",
)

HelloWorldStack(
    app,
    f"HelloWorldStack-{stage}",
    stage=stage,
    log_level=app.node.try_get_context("log_level") or "INFO",
    env=env,
)

app.synth()
