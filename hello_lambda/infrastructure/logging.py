"""Structured JSON logging for the handler, keyed by the Lambda request ID."""

import logging
import sys
import time
from contextvars import ContextVar, Token

import structlog

# Set from context.aws_request_id for the duration of one invocation
request_id: ContextVar[str] = ContextVar("request_id", default="")


def configure_logging(service_name: str, level: int | str = logging.INFO) -> None:
    """Route structlog through stdlib logging at `level`, rendering JSON to stdout."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    # basicConfig is a no-op once the Lambda runtime has a root handler
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            _add_request_id,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def _add_request_id(logger, method_name, event_dict):
    rid = request_id.get()
    if rid:
        event_dict["request_id"] = rid
    return event_dict


def set_request_id(rid: str) -> Token:
    return request_id.set(rid)


def get_request_id() -> str:
    return request_id.get()


def reset_request_id(token: Token) -> None:
    """Restore the request ID that was current before set_request_id."""
    request_id.reset(token)


class Timer:
    """Wall-clock timer for the body of a with block."""

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        return round((self._end - self._start) * 1000, 2)
