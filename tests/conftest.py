from types import SimpleNamespace

import pytest

from hello_lambda.infrastructure.logging import configure_logging


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        function_name="hello-world-test",
        aws_request_id="req-0001",
        memory_limit_in_mb=128,
    )


@pytest.fixture
def debug_logging():
    configure_logging("hello-world", "DEBUG")
    yield
    configure_logging("hello-world", "INFO")
