"""Lambda handler for the Hello World API Gateway proxy integration."""

from collections.abc import Callable
from typing import Any

import structlog

from .config import settings
from .infrastructure.logging import (
    Timer,
    configure_logging,
    reset_request_id,
    set_request_id,
)
from .response import Response

# Configured once per cold start
configure_logging(settings.service_name, settings.log_level_value)

logger = structlog.get_logger()

Callback = Callable[[Exception | None, dict[str, Any]], None]


def build_response() -> Response:
    """Build the fixed response; the invocation input is never consulted."""
    return Response.hello_world()


def handler(event: Any, context: Any) -> dict:
    """AWS Lambda handler for API Gateway proxy integration."""
    rid = getattr(context, "aws_request_id", None)
    token = set_request_id(str(rid) if rid else "")
    try:
        with Timer() as t:
            response = build_response()
        logger.debug(
            "Invocation completed",
            status_code=response.status_code,
            stage=settings.stage,
            duration_ms=t.duration_ms,
        )
        return response.to_dict()
    finally:
        reset_request_id(token)


def handle_with_callback(event: Any, context: Any, callback: Callback) -> None:
    """Callback form of the handler: completes exactly once, always with no error."""
    callback(None, handler(event, context))
