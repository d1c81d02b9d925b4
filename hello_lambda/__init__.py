"""Hello World Lambda: a fixed-response API Gateway handler."""

from .response import Response

__all__ = ["Response"]
