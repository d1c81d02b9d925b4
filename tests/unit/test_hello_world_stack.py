"""Synthesis tests for the CDK stack; jsii needs a Node.js runtime."""

import shutil

import pytest

pytestmark = pytest.mark.skipif(
    shutil.which("node") is None, reason="Node.js runtime required by aws-cdk-lib"
)


@pytest.fixture(scope="module")
def template():
    import aws_cdk as cdk
    from aws_cdk.assertions import Template

    from stacks import HelloWorldStack

    # Skip Docker bundling during synthesis
    app = cdk.App(context={"aws:cdk:bundling-stacks": []})
    stack = HelloWorldStack(app, "HelloWorldStack-test", stage="test", log_level="DEBUG")
    return Template.from_stack(stack)


class TestHelloWorldStack:
    def test_function_properties(self, template):
        template.has_resource_properties(
            "AWS::Lambda::Function",
            {
                "FunctionName": "hello-world-test",
                "Handler": "hello_lambda.handler.handler",
                "Runtime": "python3.12",
                "Architectures": ["arm64"],
                "MemorySize": 128,
                "Timeout": 10,
                "Environment": {
                    "Variables": {
                        "SERVICE_NAME": "hello-world",
                        "STAGE": "test",
                        "LOG_LEVEL": "DEBUG",
                    }
                },
            },
        )

    def test_single_application_function(self, template):
        functions = template.find_resources(
            "AWS::Lambda::Function",
            {"Properties": {"Handler": "hello_lambda.handler.handler"}},
        )
        assert len(functions) == 1

    def test_api_stage_named_after_stage(self, template):
        template.resource_count_is("AWS::ApiGateway::RestApi", 1)
        template.has_resource_properties("AWS::ApiGateway::Stage", {"StageName": "test"})

    def test_outputs(self, template):
        outputs = template.find_outputs("*")
        assert "ApiUrl" in outputs
        assert "FunctionName" in outputs
