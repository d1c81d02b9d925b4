from .hello_world_stack import HelloWorldStack

__all__ = [
    "HelloWorldStack",
]
