"""Hello World Stack - Lambda function behind an API Gateway REST API."""

from pathlib import Path

from aws_cdk import BundlingOptions, CfnOutput, Duration, Stack
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from constructs import Construct

# Root of the project that ships the hello_lambda package
PROJECT_ROOT = Path(__file__).resolve().parents[2]

ASSET_EXCLUDES = [
    ".git",
    ".venv",
    "**/__pycache__",
    "**/.pytest_cache",
    "cdk.out",
    "infra",
    "tests",
]


class HelloWorldStack(Stack):
    """Fixed-response Lambda function exposed through an API Gateway stage."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        stage: str,
        log_level: str = "INFO",
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.hello_function = lambda_.Function(
            self,
            "HelloWorldFunction",
            function_name=f"hello-world-{stage}",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="hello_lambda.handler.handler",
            code=lambda_.Code.from_asset(
                str(PROJECT_ROOT),
                exclude=ASSET_EXCLUDES,
                bundling=BundlingOptions(
                    image=lambda_.Runtime.PYTHON_3_12.bundling_image,
                    platform="linux/arm64",
                    command=[
                        "bash",
                        "-c",
                        "pip install --no-cache-dir . -t /asset-output",
                    ],
                ),
            ),
            environment={
                "SERVICE_NAME": "hello-world",
                "STAGE": stage,
                "LOG_LEVEL": log_level,
            },
            timeout=Duration.seconds(10),
            memory_size=128,
            architecture=lambda_.Architecture.ARM_64,
            log_retention=logs.RetentionDays.ONE_MONTH,
        )

        # Proxy every method and path to the function
        self.api = apigw.LambdaRestApi(
            self,
            "HelloWorldApi",
            rest_api_name=f"Hello World API ({stage})",
            handler=self.hello_function,
            proxy=True,
            deploy_options=apigw.StageOptions(
                stage_name=stage,
                throttling_rate_limit=100,
                throttling_burst_limit=200,
            ),
        )

        self.api_url = self.api.url

        CfnOutput(self, "ApiUrl", value=self.api.url)
        CfnOutput(self, "FunctionName", value=self.hello_function.function_name)
